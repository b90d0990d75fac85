class MovieVoteError(Exception):
    """Base class for failures reported back to the browser."""

    status_code = 500
    message = 'Something went wrong.'

    def __init__(self, message=None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class AuthenticationFailure(MovieVoteError):
    """No usable session or the OAuth round trip failed; send the user to login."""

    status_code = 401
    message = 'Authentication failed.'


class AuthorizationFailure(MovieVoteError):
    status_code = 403
    message = 'You need to be logged in to perform this action.'


class NotFound(MovieVoteError):
    status_code = 404
    message = 'Movie not found'


class DuplicateSuggestion(MovieVoteError):
    # not an HTTP error, shown inline on the vote page
    status_code = 200
    message = 'You have already suggested a movie.'


class InvalidSuggestion(MovieVoteError):
    status_code = 400
    message = 'Movie title is required.'


class PersistenceFailure(MovieVoteError):
    status_code = 500
    message = 'Error saving changes'


class DuplicateTitle(PersistenceFailure):
    message = 'Error saving movie suggestion'
