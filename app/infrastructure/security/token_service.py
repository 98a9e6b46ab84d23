from __future__ import annotations

from datetime import datetime, timedelta

import jwt

from app.application.dto.auth import AccessTokenPayload
from app.application.ports.token_port import TokenPort


class JwtTokenService(TokenPort):
    def __init__(
        self,
        *,
        jwt_secret: str,
        access_ttl_minutes: int,
    ):
        self._jwt_secret = jwt_secret
        self._access_ttl_minutes = access_ttl_minutes

    def create_access_token(self, *, user_id: str, now: datetime) -> tuple[str, datetime]:
        exp = now + timedelta(minutes=self._access_ttl_minutes)
        payload = {
            "sub": user_id,
            "type": "access",
            "iat": int(now.timestamp()),
            "exp": int(exp.timestamp()),
        }
        token = jwt.encode(payload, self._jwt_secret, algorithm="HS256")
        return token, exp

    def decode_access_token(self, *, token: str) -> AccessTokenPayload:
        try:
            payload = jwt.decode(token, self._jwt_secret, algorithms=["HS256"])
        except jwt.PyJWTError as exc:
            raise ValueError("Invalid access token.") from exc

        if payload.get("type") != "access":
            raise ValueError("Invalid token type.")

        user_id = payload.get("sub")
        if not user_id or not isinstance(user_id, str):
            raise ValueError("Invalid token subject.")

        return AccessTokenPayload(user_id=user_id)
