from __future__ import annotations

from app.application.dto.auth import AuthTokensOutput, LoginLocalInput
from app.application.ports.auth_port import AuthPort
from app.application.ports.password_hasher_port import PasswordHasherPort
from app.application.ports.token_port import TokenPort
from app.domain.exceptions import InvalidCredentialsError

from .auth_common import build_auth_user_output, normalize_email, utcnow


class LoginLocalUseCase:
    def __init__(
        self,
        *,
        auth_port: AuthPort,
        password_hasher: PasswordHasherPort,
        token_port: TokenPort,
    ):
        self._auth_port = auth_port
        self._password_hasher = password_hasher
        self._token_port = token_port

    def execute(self, command: LoginLocalInput) -> AuthTokensOutput:
        email = normalize_email(command.email)
        if not email or not command.password:
            raise InvalidCredentialsError("Invalid email or password.")

        credentials = self._auth_port.get_credentials_by_email(email=email)
        if credentials is None:
            raise InvalidCredentialsError("Invalid email or password.")
        if not self._password_hasher.verify(command.password, credentials.password_hash):
            raise InvalidCredentialsError("Invalid email or password.")

        access_token, access_expires_at = self._token_port.create_access_token(
            user_id=credentials.user.id,
            now=utcnow(),
        )
        return AuthTokensOutput(
            user=build_auth_user_output(credentials.user),
            access_token=access_token,
            access_expires_at=access_expires_at,
        )
