"""
Authentication router for sign-up and login.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse

from socialnet.config import Settings, get_settings
from socialnet.core.security import create_access_token
from socialnet.dependencies.services import get_auth_service, get_registration_service
from socialnet.schemas.auth import (
    LoginRequest,
    LoginResponse,
    RegisterErrorResponse,
    RegisterForm,
    RegisterResponse,
)
from socialnet.services.auth_service import AuthFailure, AuthService
from socialnet.services.registration_service import RegistrationService

router = APIRouter(tags=["Authentication"])


@router.post(
    "/signup",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_400_BAD_REQUEST: {"model": RegisterErrorResponse}},
    summary="Register a new user",
)
async def signup(
    body: RegisterForm,
    settings: Settings = Depends(get_settings),
    registration: RegistrationService = Depends(get_registration_service),
):
    """
    Register a new user account and log it in.

    - **name**, **surname**, **email**: at least three characters
    - **password**: at least three characters, repeated in **password_repeated**
    - **email** must not be registered already

    On failure the form errors are returned with the submitted inputs.
    """
    outcome = await registration.register(body)

    if not outcome.succeeded:
        error_body = RegisterErrorResponse(errors=outcome.errors, inputs=body.inputs())
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_body.model_dump(mode="json"),
        )

    return RegisterResponse(
        user_id=outcome.user.id,
        email=outcome.user.email,
        access_token=create_access_token(outcome.user.email, settings=settings),
    )


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Login and get access token",
)
async def login(
    body: LoginRequest,
    settings: Settings = Depends(get_settings),
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Authenticate with email and password to receive a JWT token.

    The token should be passed as a query parameter `token` to protected endpoints.
    """
    try:
        user = await auth_service.login(body.email, body.password)
    except AuthFailure as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"},
        )

    return LoginResponse(
        access_token=create_access_token(user.email, settings=settings),
        token_type="bearer",
        expires_in=settings.jwt_access_token_expire_minutes * 60,
        email=user.email,
    )
