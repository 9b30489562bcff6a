"""Tests for user and login routes."""

import unittest
from unittest.mock import patch
import sys
from pathlib import Path

# Add src to path
# test_users_route.py is at <root>/src/api/tests/, src is 3 levels up
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from fastapi.testclient import TestClient

from adapter.fake.user_repository import FakeUserRepository
from api.dependencies import get_session_issuer, get_user_repo
from api.main import app
from domain.model.errors import StorageError
from services.session_service import SessionIssuer


class UserRoutesTestCase(unittest.TestCase):

    def setUp(self):
        patcher = patch('services.credentials.BCRYPT_ROUNDS', 4)
        patcher.start()
        self.addCleanup(patcher.stop)

        self.repo = FakeUserRepository()
        self.issuer = SessionIssuer('test-secret')
        app.dependency_overrides[get_user_repo] = lambda: self.repo
        app.dependency_overrides[get_session_issuer] = lambda: self.issuer
        self.addCleanup(app.dependency_overrides.clear)
        self.client = TestClient(app)

    def register(self, email='a@example.com', password='password1'):
        return self.client.post('/api/users', json={'email': email, 'password': password})

    def login(self, email='a@example.com', password='password1', **extra):
        return self.client.post('/api/login', json={'email': email, 'password': password, **extra})


class TestRegisterRoute(UserRoutesTestCase):

    def test_register_returns_201_without_hash(self):
        response = self.register()

        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.json(), {'id': 1, 'email': 'a@example.com'})

    def test_register_duplicate_returns_409(self):
        self.register()
        response = self.register(password='other')

        self.assertEqual(response.status_code, 409)
        self.assertEqual(len(self.repo.store), 1)

    def test_register_empty_email_returns_422(self):
        response = self.register(email='')
        self.assertEqual(response.status_code, 422)

    def test_register_accepts_local_address(self):
        response = self.register(email='me@localhost')

        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.json()['email'], 'me@localhost')

    def test_register_keeps_email_exactly_as_sent(self):
        response = self.register(email='Bob@Example.COM')

        self.assertEqual(response.json()['email'], 'Bob@Example.COM')
        self.assertEqual(self.login(email='Bob@Example.COM').status_code, 200)
        self.assertEqual(self.login(email='Bob@example.com').status_code, 401)

    def test_register_empty_password_returns_400(self):
        response = self.register(password='')
        self.assertEqual(response.status_code, 400)

    def test_storage_failure_returns_generic_500(self):
        with patch.object(self.repo, 'create_user', side_effect=StorageError('/var/db: disk full')):
            response = self.register()

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {'detail': 'Something went wrong'})


class TestLoginRoute(UserRoutesTestCase):

    def test_login_returns_token_for_user(self):
        self.register()
        response = self.login()

        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body['id'], 1)
        self.assertEqual(body['email'], 'a@example.com')
        self.assertNotIn('password_hash', body)
        self.assertEqual(self.issuer.validate(body['token']), 1)

    def test_login_wrong_password_returns_401(self):
        self.register()
        response = self.login(password='wrong')

        self.assertEqual(response.status_code, 401)
        self.assertNotIn('token', response.json())

    def test_login_unknown_email_returns_401(self):
        response = self.login(email='nobody@example.com')
        self.assertEqual(response.status_code, 401)

    def test_login_passes_requested_lifetime(self):
        self.register()
        with patch.object(self.issuer, 'issue', return_value='tok') as mock_issue:
            response = self.login(expires_in_seconds=100000)

        self.assertEqual(response.status_code, 200)
        mock_issue.assert_called_once_with(1, 100000)


class TestUpdateUserRoute(UserRoutesTestCase):

    def auth_header(self, token):
        return {'Authorization': f'Bearer {token}'}

    def test_update_with_valid_token(self):
        self.register()
        token = self.login().json()['token']

        response = self.client.put(
            '/api/users',
            json={'email': 'new@example.com', 'password': 'password2'},
            headers=self.auth_header(token),
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {'id': 1, 'email': 'new@example.com'})
        self.assertEqual(self.login('new@example.com', 'password2').status_code, 200)

    def test_update_without_token_returns_401(self):
        response = self.client.put('/api/users', json={'email': 'b@example.com', 'password': 'pw'})
        self.assertEqual(response.status_code, 401)

    def test_update_with_bad_token_returns_401(self):
        response = self.client.put(
            '/api/users',
            json={'email': 'b@example.com', 'password': 'pw'},
            headers=self.auth_header('garbage'),
        )
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.headers['www-authenticate'], 'Bearer')

    def test_update_for_missing_user_returns_404(self):
        response = self.client.put(
            '/api/users',
            json={'email': 'b@example.com', 'password': 'pw'},
            headers=self.auth_header(self.issuer.issue(99)),
        )
        self.assertEqual(response.status_code, 404)

    def test_update_to_taken_email_returns_409(self):
        self.register()
        self.register(email='b@example.com')
        token = self.login(email='b@example.com').json()['token']

        response = self.client.put(
            '/api/users',
            json={'email': 'a@example.com', 'password': 'pw'},
            headers=self.auth_header(token),
        )
        self.assertEqual(response.status_code, 409)


if __name__ == '__main__':
    unittest.main()
