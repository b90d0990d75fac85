"""
OAuth 2.0 authorization code flow against the identity provider.

Only the external user id is needed: the code is exchanged for an
access token, the token is used once to read the profile, and the
profile ``id`` becomes the user's identity.  No retries.
"""

import logging
from collections import namedtuple
from urllib.parse import urlencode

import requests

from controllers.errors import AuthenticationFailure

logger = logging.getLogger(__name__)

Identity = namedtuple('Identity', ['user_id', 'login'])


class IdentityProviderClient:

    def __init__(self, name, client_id, client_secret, redirect_uri,
                 authorize_url, token_url, profile_url, scope='', timeout=15):
        self.name = name
        self.client_id = client_id
        self.client_secret = client_secret
        self.redirect_uri = redirect_uri
        self.authorize_url = authorize_url
        self.token_url = token_url
        self.profile_url = profile_url
        self.scope = scope
        self.timeout = timeout

    @classmethod
    def from_config(cls, cfg):
        return cls(
            name=cfg['OAUTH_PROVIDER'],
            client_id=cfg['OAUTH_CLIENT_ID'],
            client_secret=cfg['OAUTH_CLIENT_SECRET'],
            redirect_uri=cfg['OAUTH_CALLBACK_URL'],
            authorize_url=cfg['OAUTH_AUTHORIZE_URL'],
            token_url=cfg['OAUTH_TOKEN_URL'],
            profile_url=cfg['OAUTH_PROFILE_URL'],
            scope=cfg['OAUTH_SCOPE'],
            timeout=cfg['OAUTH_TIMEOUT'],
        )

    def authorization_url(self, state):
        params = {
            'client_id': self.client_id,
            'redirect_uri': self.redirect_uri,
            'response_type': 'code',
            'state': state,
        }
        if self.scope:
            params['scope'] = self.scope
        return f"{self.authorize_url}?{urlencode(params)}"

    def exchange_code(self, code):
        data = {
            'grant_type': 'authorization_code',
            'client_id': self.client_id,
            'client_secret': self.client_secret,
            'code': code,
            'redirect_uri': self.redirect_uri,
        }
        try:
            resp = requests.post(self.token_url, data=data, timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning("Token request to %s failed: %s", self.name, e)
            raise AuthenticationFailure('Token request failed')
        if resp.status_code != 200:
            logger.warning("Token exchange with %s failed: %s %s", self.name, resp.status_code, resp.text[:200])
            raise AuthenticationFailure('Token exchange failed')
        token = self._json(resp).get('access_token')
        if not token:
            raise AuthenticationFailure('Token response carried no access token')
        return token

    def fetch_profile(self, access_token):
        headers = {'Authorization': f'Bearer {access_token}'}
        try:
            resp = requests.get(self.profile_url, headers=headers, timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning("Profile request to %s failed: %s", self.name, e)
            raise AuthenticationFailure('Profile request failed')
        if resp.status_code != 200:
            logger.warning("Profile request to %s returned %s", self.name, resp.status_code)
            raise AuthenticationFailure('Profile request failed')
        return self._json(resp)

    def fetch_identity(self, code):
        profile = self.fetch_profile(self.exchange_code(code))
        user_id = profile.get('id')
        if user_id is None or str(user_id) == '':
            raise AuthenticationFailure('Profile has no user id')
        return Identity(user_id=str(user_id), login=str(profile.get('login') or user_id))

    def _json(self, resp):
        try:
            payload = resp.json()
        except ValueError:
            raise AuthenticationFailure('Malformed response from identity provider')
        if not isinstance(payload, dict):
            raise AuthenticationFailure('Malformed response from identity provider')
        return payload
