"""Service layer for user profile operations."""
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from models.user import User
from schemas.user import UserUpdate
from services.exceptions import CredentialsTakenError, EntityNotFoundError


async def get_user(db: AsyncSession, user_id: int) -> User | None:
    """Get a user by ID."""
    result = await db.execute(select(User).where(User.id == user_id))
    return result.scalar_one_or_none()


async def update_user(db: AsyncSession, user_id: int, data: UserUpdate) -> User:
    """
    Update the profile of the user identified by `user_id`.

    The ID always comes from the authenticated caller, so users can only edit
    their own record.

    Raises:
        EntityNotFoundError: If the user no longer exists.
        CredentialsTakenError: If the new email is already registered.

    Note: Does not commit. Caller (session generator) handles commit at request end.
    """
    user = await get_user(db, user_id)
    if user is None:
        raise EntityNotFoundError("User", user_id)

    update_data = data.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        setattr(user, field, value)

    try:
        await db.flush()
    except IntegrityError as e:
        raise CredentialsTakenError() from e

    await db.refresh(user)
    return user
