"""User profile endpoints."""
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import CurrentUser, get_async_session, get_current_user
from schemas.user import UserResponse, UserUpdate
from services import user_service
from services.exceptions import CredentialsTakenError, EntityNotFoundError

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/me", response_model=UserResponse)
async def get_me(
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_session),
) -> UserResponse:
    """Get the current authenticated user's profile."""
    user = await user_service.get_user(db, current_user.id)
    if user is None:
        raise HTTPException(status_code=404, detail="User not found")
    return UserResponse.model_validate(user)


@router.patch("", response_model=UserResponse)
async def update_me(
    data: UserUpdate,
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_session),
) -> UserResponse:
    """
    Edit the current user's profile.

    Access tokens already issued keep the old email claim until they expire.
    """
    try:
        user = await user_service.update_user(db, current_user.id, data)
    except EntityNotFoundError:
        raise HTTPException(status_code=404, detail="User not found")
    except CredentialsTakenError as e:
        raise HTTPException(status_code=403, detail=str(e))
    return UserResponse.model_validate(user)
