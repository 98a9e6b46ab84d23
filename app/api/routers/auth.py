from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from app.api.deps import get_login_local_use_case, get_register_user_use_case
from app.api.schemas.auth import AuthTokenResponse, LoginRequest, RegisterRequest, RegisterResponse
from app.application.dto.auth import LoginLocalInput, RegisterUserInput
from app.application.use_cases.login_local import LoginLocalUseCase
from app.application.use_cases.register_user import RegisterUserUseCase
from app.domain.exceptions import (
    EmailAlreadyExistsError,
    InvalidCredentialsError,
    UsernameAlreadyExistsError,
)


router = APIRouter()


@router.post("/v1/auth/register", response_model=RegisterResponse)
def register_user(
    req: RegisterRequest,
    use_case: RegisterUserUseCase = Depends(get_register_user_use_case),
):
    try:
        output = use_case.execute(
            RegisterUserInput(
                name=req.name,
                email=req.email,
                password=req.password,
                username=req.username,
            )
        )
    except (EmailAlreadyExistsError, UsernameAlreadyExistsError) as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    return RegisterResponse(
        user={
            "id": output.user.id,
            "name": output.user.name,
            "email": output.user.email,
            "role": output.user.role,
        },
        username=output.username,
    )


@router.post("/v1/auth/login", response_model=AuthTokenResponse)
def login_local(
    req: LoginRequest,
    use_case: LoginLocalUseCase = Depends(get_login_local_use_case),
):
    try:
        output = use_case.execute(LoginLocalInput(email=req.email, password=req.password))
    except InvalidCredentialsError as exc:
        raise HTTPException(status_code=401, detail=str(exc)) from exc

    return AuthTokenResponse(
        access_token=output.access_token,
        access_expires_at=output.access_expires_at,
        user={
            "id": output.user.id,
            "name": output.user.name,
            "email": output.user.email,
            "role": output.user.role,
        },
    )
