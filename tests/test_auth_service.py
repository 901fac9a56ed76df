"""Unit tests for app.services.auth.AuthService with a mocked repository."""

import unittest
from datetime import UTC, datetime
from types import SimpleNamespace
from unittest.mock import MagicMock, patch

from app.core.errors import (
    HashingError,
    InvalidCredentialsError,
    StorageError,
    UserAlreadyExistsError,
)
from app.core.security import dummy_password_hash, hash_password
from app.schemas.auth import SignInRequest, SignUpRequest
from app.services.auth import AuthService


def _row(**kwargs: object) -> SimpleNamespace:
    """Stand-in for a persisted User row."""
    defaults: dict[str, object] = {
        "id": 1,
        "name": "A",
        "email": "a@x.com",
        "password": "$2b$04$placeholderplaceholderplaceholderplaceholderpl",
        "role": "user",
        "created_at": datetime(2025, 1, 1, tzinfo=UTC),
        "updated_at": datetime(2025, 1, 1, tzinfo=UTC),
    }
    defaults.update(kwargs)
    return SimpleNamespace(**defaults)


def _sign_up(**kwargs: object) -> SignUpRequest:
    defaults: dict[str, object] = {
        "name": "A",
        "email": "a@x.com",
        "password": "secret123",
        "role": "user",
    }
    defaults.update(kwargs)
    return SignUpRequest(**defaults)


class TestCreateUser(unittest.TestCase):
    """create_user: existence check, hash, insert, public projection."""

    def setUp(self) -> None:
        self.repo = MagicMock()
        self.logger = MagicMock()
        self.service = AuthService(self.repo, logger=self.logger)

    def test_creates_user_with_hashed_password(self) -> None:
        self.repo.find_by_email.return_value = None
        self.repo.insert.side_effect = lambda name, email, password_hash, role: _row(
            name=name, email=email, password=password_hash, role=role
        )

        user = self.service.create_user(_sign_up())

        self.repo.find_by_email.assert_called_once_with("a@x.com")
        kwargs = self.repo.insert.call_args.kwargs
        self.assertEqual(kwargs["name"], "A")
        self.assertEqual(kwargs["email"], "a@x.com")
        self.assertEqual(kwargs["role"], "user")
        self.assertNotEqual(kwargs["password_hash"], "secret123")
        self.assertTrue(kwargs["password_hash"].startswith("$2b$"))
        self.assertEqual(user.id, 1)
        self.assertEqual(user.email, "a@x.com")
        self.assertNotIn("password", user.model_dump())
        self.logger.info.assert_called_once()

    def test_existing_email_rejected_before_hashing(self) -> None:
        self.repo.find_by_email.return_value = _row()
        with patch("app.services.auth.hash_password") as hasher:
            with self.assertRaises(UserAlreadyExistsError) as ctx:
                self.service.create_user(_sign_up())
        hasher.assert_not_called()
        self.repo.insert.assert_not_called()
        self.assertEqual(ctx.exception.status_code, 409)
        self.assertEqual(ctx.exception.message, "User already exists")
        self.logger.error.assert_called_once()

    def test_duplicate_detected_at_insert_propagates(self) -> None:
        self.repo.find_by_email.return_value = None
        self.repo.insert.side_effect = UserAlreadyExistsError()
        with self.assertRaises(UserAlreadyExistsError):
            self.service.create_user(_sign_up())

    def test_hashing_failure_propagates(self) -> None:
        self.repo.find_by_email.return_value = None
        with patch(
            "app.services.auth.hash_password",
            side_effect=HashingError("Error hashing password"),
        ):
            with self.assertRaises(HashingError):
                self.service.create_user(_sign_up())
        self.repo.insert.assert_not_called()

    def test_storage_failure_propagates(self) -> None:
        self.repo.find_by_email.side_effect = StorageError("Error reading user")
        with self.assertRaises(StorageError):
            self.service.create_user(_sign_up())

    def test_default_logger(self) -> None:
        service = AuthService(self.repo)
        self.assertEqual(service.logger.name, "app.services.auth")


class TestAuthenticateUser(unittest.TestCase):
    """authenticate_user: unknown email and wrong password are indistinguishable."""

    def setUp(self) -> None:
        self.repo = MagicMock()
        self.service = AuthService(self.repo, logger=MagicMock())
        self.stored = _row(password=hash_password("secret123"))

    def test_valid_credentials(self) -> None:
        self.repo.find_by_email.return_value = self.stored
        user = self.service.authenticate_user(
            SignInRequest(email="a@x.com", password="secret123")
        )
        self.assertEqual(user.id, 1)
        self.assertEqual(user.email, "a@x.com")
        self.assertNotIn("password", user.model_dump())

    def test_unknown_email_and_wrong_password_identical(self) -> None:
        self.repo.find_by_email.return_value = None
        with self.assertRaises(InvalidCredentialsError) as missing:
            self.service.authenticate_user(
                SignInRequest(email="nobody@x.com", password="secret123")
            )

        self.repo.find_by_email.return_value = self.stored
        with self.assertRaises(InvalidCredentialsError) as wrong:
            self.service.authenticate_user(
                SignInRequest(email="a@x.com", password="wrong-password")
            )

        self.assertIs(type(missing.exception), type(wrong.exception))
        self.assertEqual(missing.exception.message, wrong.exception.message)
        self.assertEqual(missing.exception.status_code, wrong.exception.status_code)
        self.assertEqual(missing.exception.message, "Invalid email or password")

    def test_password_checked_for_unknown_email_too(self) -> None:
        """Both failure paths pay for one bcrypt check, so timing does not reveal accounts."""
        with patch("app.services.auth.verify_password", return_value=False) as verify:
            self.repo.find_by_email.return_value = None
            with self.assertRaises(InvalidCredentialsError):
                self.service.authenticate_user(
                    SignInRequest(email="nobody@x.com", password="secret123")
                )
            self.assertEqual(verify.call_count, 1)
            self.assertEqual(verify.call_args.args[0], "secret123")
            self.assertEqual(verify.call_args.args[1], dummy_password_hash())

            self.repo.find_by_email.return_value = self.stored
            with self.assertRaises(InvalidCredentialsError):
                self.service.authenticate_user(
                    SignInRequest(email="a@x.com", password="wrong-password")
                )
            self.assertEqual(verify.call_count, 2)
            self.assertEqual(verify.call_args.args[1], self.stored.password)

    def test_corrupt_stored_hash_is_internal_error(self) -> None:
        self.repo.find_by_email.return_value = _row(password="plaintext-leftover")
        with self.assertRaises(HashingError):
            self.service.authenticate_user(
                SignInRequest(email="a@x.com", password="secret123")
            )


class TestGetUser(unittest.TestCase):
    """get_user and list_users return public projections."""

    def test_get_user_found_and_missing(self) -> None:
        repo = MagicMock()
        repo.find_by_id.return_value = _row(id=5)
        service = AuthService(repo)
        self.assertEqual(service.get_user(5).id, 5)
        repo.find_by_id.return_value = None
        self.assertIsNone(service.get_user(6))

    def test_list_users(self) -> None:
        repo = MagicMock()
        repo.list_users.return_value = [_row(id=1), _row(id=2, email="b@x.com")]
        users = AuthService(repo).list_users()
        self.assertEqual([u.id for u in users], [1, 2])


if __name__ == "__main__":
    unittest.main()
