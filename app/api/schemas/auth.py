from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class RegisterRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=120)
    email: str = Field(..., min_length=3, max_length=255)
    password: str = Field(..., min_length=1, max_length=256)
    username: str = Field(..., min_length=1, max_length=64)


class LoginRequest(BaseModel):
    email: str = Field(..., min_length=3, max_length=255)
    password: str = Field(..., min_length=1, max_length=256)


class AuthUserResponse(BaseModel):
    id: str
    name: str
    email: str
    role: str


class RegisterResponse(BaseModel):
    user: AuthUserResponse
    username: str


class AuthTokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    access_expires_at: datetime
    user: AuthUserResponse
