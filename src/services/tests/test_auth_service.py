"""Unit tests for auth_service module."""

import unittest
from unittest.mock import patch
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from adapter.fake.user_repository import FakeUserRepository
from domain.model.errors import DuplicateError, NotFoundError, UnauthorizedError, ValidationError
from services import auth_service
from services.credentials import verify_password
from services.session_service import SessionIssuer


class AuthServiceTestCase(unittest.TestCase):

    def setUp(self):
        patcher = patch('services.credentials.BCRYPT_ROUNDS', 4)
        patcher.start()
        self.addCleanup(patcher.stop)

        self.repo = FakeUserRepository()
        self.issuer = SessionIssuer('test-secret')


class TestRegister(AuthServiceTestCase):

    def test_register_returns_user_without_hash(self):
        user = auth_service.register(self.repo, 'a@example.com', 'password1')

        self.assertEqual(user.id, 1)
        self.assertEqual(user.email, 'a@example.com')
        self.assertIsNone(user.password_hash)

    def test_register_stores_verifiable_hash(self):
        auth_service.register(self.repo, 'a@example.com', 'password1')

        stored = self.repo.get_user_by_email('a@example.com')
        self.assertNotEqual(stored.password_hash, 'password1')
        self.assertTrue(verify_password('password1', stored.password_hash))

    def test_register_duplicate_email_raises(self):
        auth_service.register(self.repo, 'a@example.com', 'password1')

        with self.assertRaises(DuplicateError):
            auth_service.register(self.repo, 'a@example.com', 'password2')
        self.assertEqual(len(self.repo.store), 1)

    def test_register_empty_password_raises(self):
        with self.assertRaises(ValidationError):
            auth_service.register(self.repo, 'a@example.com', '')
        self.assertEqual(self.repo.store, {})

    def test_register_password_over_72_bytes_raises(self):
        with self.assertRaises(ValidationError):
            auth_service.register(self.repo, 'a@example.com', 'x' * 73)


class TestLogin(AuthServiceTestCase):

    def test_register_then_login_token_recovers_user_id(self):
        user = auth_service.register(self.repo, 'a@example.com', 'password1')

        result = auth_service.login(self.repo, self.issuer, 'a@example.com', 'password1')

        self.assertEqual(result.user.id, user.id)
        self.assertEqual(result.user.email, 'a@example.com')
        self.assertIsNone(result.user.password_hash)
        self.assertEqual(self.issuer.validate(result.token), user.id)

    def test_wrong_password_raises_and_issues_no_token(self):
        auth_service.register(self.repo, 'a@example.com', 'password1')

        with patch.object(self.issuer, 'issue') as mock_issue:
            with self.assertRaises(UnauthorizedError):
                auth_service.login(self.repo, self.issuer, 'a@example.com', 'wrong')
            mock_issue.assert_not_called()

    def test_unknown_email_and_wrong_password_look_the_same(self):
        auth_service.register(self.repo, 'a@example.com', 'password1')

        with self.assertRaises(UnauthorizedError) as unknown:
            auth_service.login(self.repo, self.issuer, 'nobody@example.com', 'password1')
        with self.assertRaises(UnauthorizedError) as wrong:
            auth_service.login(self.repo, self.issuer, 'a@example.com', 'wrong')

        self.assertEqual(str(unknown.exception), str(wrong.exception))

    def test_login_passes_ttl_to_issuer(self):
        auth_service.register(self.repo, 'a@example.com', 'password1')

        with patch.object(self.issuer, 'issue', return_value='tok') as mock_issue:
            auth_service.login(self.repo, self.issuer, 'a@example.com', 'password1', ttl_seconds=60)

        mock_issue.assert_called_once_with(1, 60)


class TestUpdateProfile(AuthServiceTestCase):

    def test_update_changes_email_and_password(self):
        user = auth_service.register(self.repo, 'a@example.com', 'password1')
        token = self.issuer.issue(user.id)

        updated = auth_service.update_profile(
            self.repo, self.issuer, token, 'new@example.com', 'password2'
        )

        self.assertEqual(updated.id, user.id)
        self.assertEqual(updated.email, 'new@example.com')
        result = auth_service.login(self.repo, self.issuer, 'new@example.com', 'password2')
        self.assertEqual(result.user.id, user.id)
        with self.assertRaises(UnauthorizedError):
            auth_service.login(self.repo, self.issuer, 'new@example.com', 'password1')

    def test_invalid_token_raises_unauthorized(self):
        auth_service.register(self.repo, 'a@example.com', 'password1')

        with self.assertRaises(UnauthorizedError):
            auth_service.update_profile(self.repo, self.issuer, 'garbage', 'b@example.com', 'pw')

    def test_deleted_subject_raises_not_found(self):
        token = self.issuer.issue(99)

        with self.assertRaises(NotFoundError):
            auth_service.update_profile(self.repo, self.issuer, token, 'b@example.com', 'pw')

    def test_taken_email_raises_duplicate(self):
        auth_service.register(self.repo, 'a@example.com', 'password1')
        other = auth_service.register(self.repo, 'b@example.com', 'password1')

        with self.assertRaises(DuplicateError):
            auth_service.update_profile(
                self.repo, self.issuer, self.issuer.issue(other.id), 'a@example.com', 'pw'
            )


if __name__ == '__main__':
    unittest.main()
