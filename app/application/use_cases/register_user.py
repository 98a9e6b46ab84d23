from __future__ import annotations

import re
from datetime import datetime
from typing import Callable
from uuid import uuid4

from app.application.dto.auth import RegisterUserInput, RegisterUserOutput
from app.application.ports.auth_port import AuthPort
from app.application.ports.password_hasher_port import PasswordHasherPort
from app.domain.exceptions import EmailAlreadyExistsError, UsernameAlreadyExistsError

from .auth_common import build_auth_user_output, normalize_email, utcnow


USERNAME_PATTERN = re.compile(r"^[a-zA-Z0-9_-]{3,30}$")
EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        auth_port: AuthPort,
        password_hasher: PasswordHasherPort,
        clock: Callable[[], datetime] = utcnow,
    ):
        self._auth_port = auth_port
        self._password_hasher = password_hasher
        self._clock = clock

    def execute(self, command: RegisterUserInput) -> RegisterUserOutput:
        name = command.name.strip()
        email = normalize_email(command.email)
        username = command.username.strip()
        password = command.password

        if len(name) < 2:
            raise ValueError("name must have at least 2 characters.")
        if not EMAIL_PATTERN.match(email):
            raise ValueError("email is invalid.")
        if len(password) < 6:
            raise ValueError("password must have at least 6 characters.")
        if not USERNAME_PATTERN.match(username):
            raise ValueError("username must have 3-30 characters: letters, numbers, _ or -.")

        if self._auth_port.get_user_by_email(email=email) is not None:
            raise EmailAlreadyExistsError("Email already in use.")
        if self._auth_port.username_exists(username=username):
            raise UsernameAlreadyExistsError("Username already in use.")

        user = self._auth_port.create_user_with_profile(
            user_id=str(uuid4()),
            profile_id=str(uuid4()),
            name=name,
            email=email,
            password_hash=self._password_hasher.hash(password),
            username=username,
            created_at=self._clock(),
        )
        return RegisterUserOutput(user=build_auth_user_output(user), username=username)
