from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class AuthUserOutput:
    id: str
    name: str
    email: str
    role: str


@dataclass(frozen=True)
class RegisterUserInput:
    name: str
    email: str
    password: str
    username: str


@dataclass(frozen=True)
class RegisterUserOutput:
    user: AuthUserOutput
    username: str


@dataclass(frozen=True)
class LoginLocalInput:
    email: str
    password: str


@dataclass(frozen=True)
class AuthTokensOutput:
    user: AuthUserOutput
    access_token: str
    access_expires_at: datetime


@dataclass(frozen=True)
class AccessTokenPayload:
    user_id: str
