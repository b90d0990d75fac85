import logging
import secrets
from collections import namedtuple

from flask import current_app, redirect, session, url_for
from flask_jwt_extended import (
    create_access_token,
    get_jwt,
    get_jwt_identity,
    set_access_cookies,
    unset_jwt_cookies,
    verify_jwt_in_request,
)

from controllers.errors import AuthenticationFailure, NotFound
from views.pages import render_login

logger = logging.getLogger(__name__)

OAUTH_STATE_KEY = 'oauth_state'

CurrentUser = namedtuple('CurrentUser', ['user_id', 'login', 'csrf_token'])


def get_identity_client(provider):
    client = current_app.extensions['identity_providers'].get(provider)
    if client is None:
        raise NotFound('Unknown identity provider')
    return client


def current_user():
    """Return the logged in user from the session cookie, or None."""
    verify_jwt_in_request(optional=True)
    user_id = get_jwt_identity()
    if not user_id:
        return None
    claims = get_jwt()
    return CurrentUser(
        user_id=str(user_id),
        login=claims.get('login') or str(user_id),
        csrf_token=claims.get('csrf', ''),
    )


def require_user():
    user = current_user()
    if user is None:
        raise AuthenticationFailure('Login required')
    return user


def login_page(request):
    return render_login(current_app.config['OAUTH_PROVIDER'], logged_in=current_user() is not None)


def begin_login(provider):
    client = get_identity_client(provider)
    state = secrets.token_urlsafe(16)
    session[OAUTH_STATE_KEY] = state
    logger.info("Starting %s login, redirect_uri=%s", client.name, client.redirect_uri)
    return redirect(client.authorization_url(state))


def complete_login(request, provider):
    client = get_identity_client(provider)
    error = request.args.get('error')
    if error:
        raise AuthenticationFailure(f'Provider returned {error}')
    state = request.args.get('state')
    expected = session.pop(OAUTH_STATE_KEY, None)
    if not state or state != expected:
        raise AuthenticationFailure('Invalid OAuth state')
    code = request.args.get('code')
    if not code:
        raise AuthenticationFailure('Missing authorization code')

    identity = client.fetch_identity(code)
    token = create_access_token(identity=identity.user_id, additional_claims={'login': identity.login})
    logger.info("User %s (%s) logged in via %s", identity.user_id, identity.login, client.name)

    response = redirect(url_for('movies.vote_page'))
    set_access_cookies(response, token)
    return response


def logout(request):
    response = redirect(url_for('auth.index_route'))
    unset_jwt_cookies(response)
    session.pop(OAUTH_STATE_KEY, None)
    return response
