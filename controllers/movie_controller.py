import logging

from flask import current_app, jsonify, redirect, url_for
from pymongo.errors import PyMongoError

from controllers.auth_controller import current_user, require_user
from controllers.errors import DuplicateSuggestion, InvalidSuggestion, PersistenceFailure
from controllers.voting import VotingService
from views.pages import render_vote

logger = logging.getLogger(__name__)


def get_repository():
    return current_app.extensions['movie_repository']


def get_voting_service():
    return VotingService(get_repository())


def _user_id(user):
    return user.user_id if user else None


def _vote_page(user, message=None, message_type='success'):
    service = get_voting_service()
    try:
        movies = service.repository.list_movies()
        status = service.status(user.user_id)
    except PyMongoError:
        logger.exception("Failed to fetch movies")
        raise PersistenceFailure('Error fetching movies')
    return render_vote(
        movies,
        user_id=user.user_id,
        login=user.login,
        status=status,
        csrf_token=user.csrf_token,
        message=message,
        message_type=message_type,
    )


def show_movies(request):
    user = require_user()
    return _vote_page(user)


def vote_for_movie(movie_id):
    user = current_user()
    try:
        outcome = get_voting_service().vote(movie_id, _user_id(user))
    except DuplicateSuggestion as e:
        return _vote_page(user, message=e.message, message_type='error'), e.status_code
    except PyMongoError:
        logger.exception("Failed to vote for %s", movie_id)
        raise PersistenceFailure('Error voting for movie')
    logger.debug("Vote on %s: %s", movie_id, outcome)
    return redirect(url_for('movies.vote_page'))


def add_movie(request):
    user = current_user()
    title = request.form.get('movieName')
    try:
        get_voting_service().suggest(title, _user_id(user))
    except (DuplicateSuggestion, InvalidSuggestion) as e:
        return _vote_page(user, message=e.message, message_type='error'), e.status_code
    except PyMongoError:
        logger.exception("Failed to save suggestion %r", title)
        raise PersistenceFailure('Error saving movie suggestion')
    return redirect(url_for('movies.vote_page'))


def delete_movie(movie_id):
    user = current_user()
    try:
        get_voting_service().delete(movie_id, _user_id(user))
    except PyMongoError:
        logger.exception("Failed to delete %s", movie_id)
        raise PersistenceFailure('Error deleting movie')
    return redirect(url_for('movies.vote_page'))


def get_standings(request):
    try:
        movies = get_repository().standings()
    except PyMongoError:
        logger.exception("Failed to fetch standings")
        return jsonify({'error': 'Error fetching movies'}), 500
    return jsonify({'movies': [movie.to_json() for movie in movies]}), 200
