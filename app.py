import logging

from flask import Flask, redirect, url_for
from flask_cors import CORS
from flask_jwt_extended import JWTManager, unset_jwt_cookies

import config
from controllers.errors import AuthenticationFailure, MovieVoteError
from controllers.oauth_client import IdentityProviderClient
from logging_config import setup_logging
from models.db import get_database, get_movies_collection
from models.movie_repository import MovieRepository
from routes.auth_routes import auth_bp
from routes.movie_routes import movie_bp
from views.pages import render_message

logger = logging.getLogger(__name__)


def _back_to_login():
    response = redirect(url_for('auth.index_route'))
    unset_jwt_cookies(response)
    return response


def create_app(overrides=None, repository=None, identity_clients=None):
    """Build the Flask app.

    ``repository`` and ``identity_clients`` default to a MongoDB backed
    MovieRepository and the configured OAuth provider.
    """
    app = Flask(__name__)
    app.config.from_object(config)
    if overrides:
        app.config.update(overrides)

    setup_logging(app.config['LOG_LEVEL'], app.config['LOG_FILE'])

    CORS(app, resources=app.config['CORS_RESOURCES'], methods=app.config['CORS_METHODS'])
    jwt = JWTManager(app)

    @jwt.expired_token_loader
    def expired_token(jwt_header, jwt_payload):
        logger.info("Session for %s expired", jwt_payload.get('sub'))
        return _back_to_login()

    @jwt.invalid_token_loader
    def invalid_token(reason):
        logger.warning("Rejected session cookie: %s", reason)
        return _back_to_login()

    @jwt.unauthorized_loader
    def missing_token(reason):
        logger.warning("Unauthorized request: %s", reason)
        return _back_to_login()

    if repository is None:
        db = get_database(app.config['MONGO_URI'], app.config['MONGO_DB_NAME'])
        repository = MovieRepository(get_movies_collection(db))
    repository.ensure_indexes()

    if identity_clients is None:
        identity_clients = [IdentityProviderClient.from_config(app.config)]

    app.extensions['movie_repository'] = repository
    app.extensions['identity_providers'] = {client.name: client for client in identity_clients}

    app.register_blueprint(auth_bp)
    app.register_blueprint(movie_bp)

    @app.errorhandler(MovieVoteError)
    def handle_movie_vote_error(e):
        if isinstance(e, AuthenticationFailure):
            logger.info("Authentication failure: %s", e.message)
            return _back_to_login()
        if e.status_code >= 500:
            logger.error("Request failed: %s", e.message)
        return render_message(e.message), e.status_code

    return app


if __name__ == '__main__':
    app = create_app()
    app.run(host='0.0.0.0', port=config.PORT, debug=app.config.get('DEBUG', False))
