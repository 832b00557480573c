"""
Authentication dependencies for route protection.
"""
from typing import Annotated

from fastapi import Depends, HTTPException, Query, status
from jose import JWTError

from socialnet.config import Settings, get_settings
from socialnet.core.security import decode_token
from socialnet.dependencies.services import get_auth_service
from socialnet.models.user import User
from socialnet.services.auth_service import AuthService


async def get_current_user(
    token: Annotated[str, Query(description="JWT access token")],
    settings: Settings = Depends(get_settings),
    auth_service: AuthService = Depends(get_auth_service),
) -> User:
    """
    Dependency to get the current authenticated user from JWT token.

    Token is passed as query parameter: ?token=xxx

    Raises:
        HTTPException 401: If token is invalid, expired or the user is gone
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    try:
        payload = decode_token(token, settings)
        email = payload.get("sub")
        if email is None:
            raise credentials_exception
    except JWTError:
        raise credentials_exception

    user = await auth_service.get_user_by_email(email)
    if user is None:
        raise credentials_exception

    return user


async def get_current_admin(
    current_user: Annotated[User, Depends(get_current_user)]
) -> User:
    """
    Dependency to ensure the current user carries the admin role.

    Raises:
        HTTPException 403: If the user is not an admin
    """
    if not current_user.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin role required",
        )
    return current_user


# Type aliases for cleaner route signatures
CurrentUser = Annotated[User, Depends(get_current_user)]
CurrentAdmin = Annotated[User, Depends(get_current_admin)]
