import unittest
from unittest.mock import Mock, patch
from urllib.parse import parse_qs, urlparse

import requests

from controllers.errors import AuthenticationFailure
from controllers.oauth_client import IdentityProviderClient


def make_client():
    return IdentityProviderClient(
        name='42',
        client_id='client-id',
        client_secret='client-secret',
        redirect_uri='http://localhost:3000/auth/42/callback',
        authorize_url='https://provider.test/oauth/authorize',
        token_url='https://provider.test/oauth/token',
        profile_url='https://provider.test/v2/me',
        scope='public',
        timeout=5,
    )


def response(status_code=200, payload=None):
    resp = Mock()
    resp.status_code = status_code
    resp.text = str(payload)
    if isinstance(payload, Exception):
        resp.json.side_effect = payload
    else:
        resp.json.return_value = payload
    return resp


class TestIdentityProviderClient(unittest.TestCase):
    def setUp(self):
        self.client = make_client()

    def test_authorization_url(self):
        url = urlparse(self.client.authorization_url('xyz'))
        params = parse_qs(url.query)
        self.assertEqual(url.netloc, 'provider.test')
        self.assertEqual(params['client_id'], ['client-id'])
        self.assertEqual(params['redirect_uri'], ['http://localhost:3000/auth/42/callback'])
        self.assertEqual(params['response_type'], ['code'])
        self.assertEqual(params['state'], ['xyz'])
        self.assertEqual(params['scope'], ['public'])

    @patch('controllers.oauth_client.requests.get')
    @patch('controllers.oauth_client.requests.post')
    def test_fetch_identity(self, mock_post, mock_get):
        mock_post.return_value = response(200, {'access_token': 'tok'})
        mock_get.return_value = response(200, {'id': 4242, 'login': 'marvin'})

        identity = self.client.fetch_identity('the-code')

        self.assertEqual(identity.user_id, '4242')
        self.assertEqual(identity.login, 'marvin')
        _, kwargs = mock_post.call_args
        self.assertEqual(kwargs['data']['code'], 'the-code')
        self.assertEqual(kwargs['data']['grant_type'], 'authorization_code')
        self.assertEqual(kwargs['timeout'], 5)
        _, kwargs = mock_get.call_args
        self.assertEqual(kwargs['headers'], {'Authorization': 'Bearer tok'})

    @patch('controllers.oauth_client.requests.post')
    def test_token_endpoint_error(self, mock_post):
        mock_post.return_value = response(401, {'error': 'invalid_grant'})
        with self.assertRaises(AuthenticationFailure):
            self.client.fetch_identity('bad-code')

    @patch('controllers.oauth_client.requests.post')
    def test_network_error(self, mock_post):
        mock_post.side_effect = requests.ConnectionError('down')
        with self.assertRaises(AuthenticationFailure):
            self.client.fetch_identity('code')

    @patch('controllers.oauth_client.requests.post')
    def test_malformed_token_payload(self, mock_post):
        mock_post.return_value = response(200, ValueError('not json'))
        with self.assertRaises(AuthenticationFailure):
            self.client.exchange_code('code')

        mock_post.return_value = response(200, {'token_type': 'bearer'})
        with self.assertRaises(AuthenticationFailure):
            self.client.exchange_code('code')

    @patch('controllers.oauth_client.requests.get')
    @patch('controllers.oauth_client.requests.post')
    def test_profile_without_id(self, mock_post, mock_get):
        mock_post.return_value = response(200, {'access_token': 'tok'})
        mock_get.return_value = response(200, {'login': 'marvin'})
        with self.assertRaises(AuthenticationFailure):
            self.client.fetch_identity('code')

    @patch('controllers.oauth_client.requests.get')
    def test_profile_error(self, mock_get):
        mock_get.return_value = response(500, {})
        with self.assertRaises(AuthenticationFailure):
            self.client.fetch_profile('tok')

        mock_get.return_value = response(200, ['not', 'an', 'object'])
        with self.assertRaises(AuthenticationFailure):
            self.client.fetch_profile('tok')


if __name__ == '__main__':
    unittest.main()
