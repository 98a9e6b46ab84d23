from __future__ import annotations

import unittest
from datetime import datetime, timedelta, timezone

from app.application.dto.auth import LoginLocalInput, RegisterUserInput
from app.application.use_cases.get_me import GetMeUseCase
from app.application.use_cases.login_local import LoginLocalUseCase
from app.application.use_cases.register_user import RegisterUserUseCase
from app.domain.entities.user import User, UserCredentials
from app.domain.exceptions import EmailAlreadyExistsError, InvalidCredentialsError, UsernameAlreadyExistsError


NOW = datetime(2025, 5, 1, 9, 0, tzinfo=timezone.utc)


class FakeAuthPort:
    def __init__(self):
        self.users: dict[str, User] = {}
        self.hashes: dict[str, str] = {}
        self.usernames: dict[str, str] = {}

    def get_user_by_id(self, *, user_id: str):
        return self.users.get(user_id)

    def get_user_by_email(self, *, email: str):
        return next((user for user in self.users.values() if user.email == email), None)

    def get_credentials_by_email(self, *, email: str):
        user = self.get_user_by_email(email=email)
        if user is None:
            return None
        return UserCredentials(user=user, password_hash=self.hashes[user.id])

    def username_exists(self, *, username: str) -> bool:
        return username in self.usernames

    def create_user_with_profile(self, *, user_id, profile_id, name, email, password_hash, username, created_at):
        user = User(
            id=user_id,
            name=name,
            email=email,
            role="USER",
            plan_type="FREE",
            pro_expires_at=None,
            created_at=created_at,
            updated_at=created_at,
        )
        self.users[user_id] = user
        self.hashes[user_id] = password_hash
        self.usernames[username] = profile_id
        return user


class FakePasswordHasher:
    def hash(self, plain_password: str) -> str:
        return f"hashed::{plain_password}"

    def verify(self, plain_password: str, password_hash: str) -> bool:
        return password_hash == f"hashed::{plain_password}"


class FakeTokenPort:
    def __init__(self):
        self.issued_for: list[str] = []

    def create_access_token(self, *, user_id: str, now: datetime):
        self.issued_for.append(user_id)
        return f"token-{user_id}", now + timedelta(minutes=60)

    def decode_access_token(self, *, token: str):
        raise NotImplementedError


def _register(auth_port: FakeAuthPort, **changes):
    command = dict(name="Alice", email="Alice@Example.com ", password="secret1", username="alice")
    command.update(changes)
    use_case = RegisterUserUseCase(auth_port=auth_port, password_hasher=FakePasswordHasher(), clock=lambda: NOW)
    return use_case.execute(RegisterUserInput(**command))


class RegisterUserUseCaseTests(unittest.TestCase):
    def setUp(self):
        self.auth_port = FakeAuthPort()

    def test_creates_free_user_with_profile(self):
        output = _register(self.auth_port)

        self.assertEqual(output.user.email, "alice@example.com")
        self.assertEqual(output.user.role, "USER")
        self.assertEqual(output.username, "alice")
        self.assertIn("alice", self.auth_port.usernames)
        stored = self.auth_port.users[output.user.id]
        self.assertEqual(stored.plan_type, "FREE")
        self.assertEqual(self.auth_port.hashes[stored.id], "hashed::secret1")

    def test_rejects_duplicate_email_and_username(self):
        _register(self.auth_port)

        with self.assertRaises(EmailAlreadyExistsError):
            _register(self.auth_port, email="alice@example.com", username="other")
        with self.assertRaises(UsernameAlreadyExistsError):
            _register(self.auth_port, email="bob@example.com")
        self.assertEqual(len(self.auth_port.users), 1)

    def test_validates_input(self):
        invalid = [
            {"name": "A"},
            {"email": "not-an-email"},
            {"password": "123"},
            {"username": "ab"},
            {"username": "has space"},
        ]
        for changes in invalid:
            with self.subTest(changes=changes):
                with self.assertRaises(ValueError):
                    _register(self.auth_port, **changes)
        self.assertEqual(self.auth_port.users, {})


class LoginLocalUseCaseTests(unittest.TestCase):
    def setUp(self):
        self.auth_port = FakeAuthPort()
        self.user_id = _register(self.auth_port).user.id
        self.token_port = FakeTokenPort()
        self.use_case = LoginLocalUseCase(
            auth_port=self.auth_port,
            password_hasher=FakePasswordHasher(),
            token_port=self.token_port,
        )

    def test_returns_access_token(self):
        output = self.use_case.execute(LoginLocalInput(email=" ALICE@example.com", password="secret1"))

        self.assertEqual(output.access_token, f"token-{self.user_id}")
        self.assertEqual(output.user.id, self.user_id)
        self.assertEqual(self.token_port.issued_for, [self.user_id])

    def test_rejects_wrong_password_unknown_email_and_blanks(self):
        attempts = [
            LoginLocalInput(email="alice@example.com", password="wrong"),
            LoginLocalInput(email="nobody@example.com", password="secret1"),
            LoginLocalInput(email="", password=""),
        ]
        for attempt in attempts:
            with self.subTest(email=attempt.email):
                with self.assertRaises(InvalidCredentialsError):
                    self.use_case.execute(attempt)
        self.assertEqual(self.token_port.issued_for, [])


class GetMeUseCaseTests(unittest.TestCase):
    def test_reports_lapsed_plan_as_free(self):
        user = User(
            id="user-1",
            name="Alice",
            email="alice@example.com",
            role="ADMIN",
            plan_type="PRO",
            pro_expires_at=NOW - timedelta(minutes=1),
            created_at=NOW,
            updated_at=NOW,
        )

        output = GetMeUseCase(clock=lambda: NOW).execute(user=user)

        self.assertEqual(output.role, "ADMIN")
        self.assertEqual(output.plan.plan_type, "PRO")
        self.assertEqual(output.plan.effective_plan_type, "FREE")
        self.assertFalse(output.plan.is_pro)
        self.assertEqual(output.plan.remaining_days, 0)


if __name__ == "__main__":
    unittest.main()
