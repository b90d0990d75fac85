"""
Suggestion and vote rules.

Every check reads the repository; nothing about a user's past actions is
kept in the session.  Policy:

* a suggestion is also its creator's vote (votes start at 1);
* a user with a suggestion on file cannot vote, their vote stays on it;
* a user holds at most one vote, casting a new one retracts the old one;
* voting again for the same movie retracts the vote.
"""

import logging
from collections import namedtuple

from pymongo.errors import DuplicateKeyError

from controllers.errors import (
    AuthorizationFailure,
    DuplicateSuggestion,
    DuplicateTitle,
    InvalidSuggestion,
    NotFound,
)
from models.movie import Movie

logger = logging.getLogger(__name__)

VOTE_CAST = 'cast'
VOTE_RETRACTED = 'retracted'

UserStatus = namedtuple('UserStatus', ['suggested', 'voted'])


class VotingService:

    def __init__(self, repository):
        self.repository = repository

    def status(self, user_id):
        """Return the user's suggestion and voted movie, either may be None."""
        suggested = self.repository.find_by_creator(user_id)
        voted = self.repository.find_voted_by(user_id)
        return UserStatus(suggested=suggested, voted=voted[0] if voted else None)

    def has_suggested(self, user_id):
        return self.repository.find_by_creator(user_id) is not None

    def suggest(self, title, user_id):
        if not user_id:
            raise AuthorizationFailure()
        title = (title or '').strip()
        if not title:
            raise InvalidSuggestion()
        if self.has_suggested(user_id):
            raise DuplicateSuggestion()

        movie = Movie(title=title, creator=user_id, votes=1, voters=[user_id])
        try:
            self.repository.insert(movie)
        except DuplicateKeyError:
            logger.warning("User %s suggested existing title %r", user_id, title)
            raise DuplicateTitle()

        # the new movie carries the user's vote now
        self._retract_elsewhere(user_id, keep=movie.id)
        logger.info("User %s suggested %r (%s)", user_id, title, movie.id)
        return movie

    def vote(self, movie_id, user_id):
        """Toggle the user's vote on ``movie_id``.

        Returns VOTE_CAST or VOTE_RETRACTED.
        """
        if not user_id:
            raise AuthorizationFailure()
        if self.has_suggested(user_id):
            raise DuplicateSuggestion()

        movie = self.repository.get(movie_id)
        if movie is None:
            raise NotFound()

        if movie.has_voter(user_id):
            self.repository.remove_voter(movie.id, user_id)
            logger.info("User %s retracted vote for %s", user_id, movie.id)
            return VOTE_RETRACTED

        self._retract_elsewhere(user_id, keep=movie.id)
        if not self.repository.add_voter(movie.id, user_id):
            # a concurrent request either cast this vote or removed the movie
            if self.repository.get(movie.id) is None:
                raise NotFound()
        logger.info("User %s voted for %s", user_id, movie.id)
        return VOTE_CAST

    def delete(self, movie_id, user_id):
        if not user_id:
            raise AuthorizationFailure()
        movie = self.repository.get(movie_id)
        if movie is None:
            raise NotFound()
        if not movie.is_created_by(user_id):
            raise AuthorizationFailure('You are not authorized to delete this movie.')
        if not self.repository.delete(movie.id):
            raise NotFound()
        logger.info("User %s deleted %r (%s)", user_id, movie.title, movie.id)
        return movie

    def _retract_elsewhere(self, user_id, keep):
        for other in self.repository.find_voted_by(user_id):
            if other.id != keep and self.repository.remove_voter(other.id, user_id):
                logger.info("User %s moved vote away from %s", user_id, other.id)
