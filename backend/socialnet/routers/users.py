"""
User listing and administration router.
"""
from fastapi import APIRouter, Depends, HTTPException, status

from socialnet.database.user_repository import UserRepository
from socialnet.dependencies.auth import CurrentAdmin, CurrentUser
from socialnet.dependencies.services import get_database_reset, get_user_repository
from socialnet.schemas.user import UserResponse
from socialnet.services.reset_service import DatabaseReset, SeedDataError

router = APIRouter(tags=["Users"])


@router.get(
    "/users",
    response_model=list[UserResponse],
    summary="List the other users",
)
async def list_users(
    current_user: CurrentUser,
    users: UserRepository = Depends(get_user_repository),
):
    """
    List every user except the caller and the administrators.

    Requires valid token as query parameter: `?token=xxx`
    """
    result = await users.visible_users(current_user.email)
    if result.failed:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Users are temporarily unavailable",
        )
    return [UserResponse.from_user(user) for user in result.value]


@router.post(
    "/admin/reset",
    summary="Reseed the users collection",
)
async def reset_database(
    current_admin: CurrentAdmin,
    database_reset: DatabaseReset = Depends(get_database_reset),
):
    """
    Clear the users collection and reload the seed users.

    Requires an admin token as query parameter: `?token=xxx`
    """
    try:
        summary = await database_reset.reset()
    except SeedDataError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e),
        )

    if not summary.cleared:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="The users collection could not be cleared",
        )

    return {"inserted": summary.inserted, "failed": summary.failed}
