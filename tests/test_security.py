from __future__ import annotations

from datetime import datetime, timezone

import jwt
import pytest

from app.infrastructure.security.password_hasher import PasswordHasher
from app.infrastructure.security.token_service import JwtTokenService


def _service() -> JwtTokenService:
    return JwtTokenService(jwt_secret="test-secret", access_ttl_minutes=60)


def test_access_token_round_trip():
    now = datetime.now(timezone.utc).replace(microsecond=0)
    token, expires_at = _service().create_access_token(user_id="user-1", now=now)

    assert (expires_at - now).total_seconds() == 3600
    assert _service().decode_access_token(token=token).user_id == "user-1"


def test_rejects_foreign_or_wrong_type_tokens():
    now = int(datetime.now(timezone.utc).timestamp())
    wrong_type = jwt.encode({"sub": "user-1", "type": "refresh", "exp": now + 60}, "test-secret", algorithm="HS256")
    wrong_secret = jwt.encode({"sub": "user-1", "type": "access", "exp": now + 60}, "other", algorithm="HS256")
    expired = jwt.encode({"sub": "user-1", "type": "access", "exp": now - 60}, "test-secret", algorithm="HS256")
    no_subject = jwt.encode({"type": "access", "exp": now + 60}, "test-secret", algorithm="HS256")

    for token in (wrong_type, wrong_secret, expired, no_subject, "garbage"):
        with pytest.raises(ValueError):
            _service().decode_access_token(token=token)


def test_password_hasher_verifies_only_matching_password():
    hasher = PasswordHasher()
    password_hash = hasher.hash("secret1")

    assert password_hash != "secret1"
    assert hasher.verify("secret1", password_hash)
    assert not hasher.verify("secret2", password_hash)
    assert not hasher.verify("secret1", "")
    assert not hasher.verify("secret1", "not-a-hash")
