"""
Base service class for user-owned entity CRUD operations.

Every single-item operation goes through `_load_authorized`, which applies one
ownership policy per action:

- READ hides existence: a missing entity and another user's entity both come
  back as None, so IDs cannot be probed.
- UPDATE and DELETE raise typed outcomes: EntityNotFoundError when the entity
  does not exist, EntityAccessDeniedError when it belongs to someone else.
"""
from datetime import datetime
from enum import StrEnum
from typing import Generic, Protocol, TypeVar

from pydantic import BaseModel
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from services.exceptions import EntityAccessDeniedError, EntityNotFoundError


class OwnedEntity(Protocol):
    """Protocol defining the interface for entities owned by a single user."""

    id: int
    user_id: int
    created_at: datetime
    updated_at: datetime


T = TypeVar("T", bound=OwnedEntity)


class EntityAction(StrEnum):
    """Action a caller intends to perform on a specific entity."""

    READ = "read"
    UPDATE = "update"
    DELETE = "delete"


class OwnedEntityService(Generic[T]):
    """
    Base class for CRUD over entities owned by a single user.

    Subclasses must define:
    - model: The SQLAlchemy model class (with `id` and `user_id` columns)
    - entity_name: Human-readable name for error messages (e.g., "Bookmark")

    Fields that can never be written through create/update (the primary key and
    the owner) are listed in `protected_fields`.
    """

    model: type[T]
    entity_name: str
    protected_fields: frozenset[str] = frozenset({"id", "user_id"})

    async def _load_authorized(
        self,
        db: AsyncSession,
        user_id: int,
        entity_id: int,
        action: EntityAction,
    ) -> T | None:
        """
        Load an entity by ID and check that the caller owns it.

        Args:
            db: Database session.
            user_id: ID of the calling user.
            entity_id: ID of the entity to load.
            action: What the caller intends to do with the entity.

        Returns:
            The entity if it exists and is owned by the caller. For READ, None if
            it is missing or owned by another user.

        Raises:
            EntityNotFoundError: For UPDATE/DELETE when the entity does not exist.
            EntityAccessDeniedError: For UPDATE/DELETE when another user owns it.
        """
        entity = await db.get(self.model, entity_id)

        if entity is None:
            if action is EntityAction.READ:
                return None
            raise EntityNotFoundError(self.entity_name, entity_id)

        if entity.user_id != user_id:
            if action is EntityAction.READ:
                return None
            raise EntityAccessDeniedError(self.entity_name, entity_id)

        return entity

    async def get_all(self, db: AsyncSession, user_id: int) -> list[T]:
        """Get all entities owned by a user, newest first."""
        result = await db.execute(
            select(self.model)
            .where(self.model.user_id == user_id)
            .order_by(self.model.created_at.desc(), self.model.id.desc()),
        )
        return list(result.scalars().all())

    async def get(self, db: AsyncSession, user_id: int, entity_id: int) -> T | None:
        """Get an entity by ID, scoped to user. Returns None if not found or wrong user."""
        return await self._load_authorized(db, user_id, entity_id, EntityAction.READ)

    async def create(self, db: AsyncSession, user_id: int, data: BaseModel) -> T:
        """
        Create an entity owned by `user_id`.

        Any owner or ID value in `data` is dropped; the owner is always the caller.

        Note: Does not commit. Caller (session generator) handles commit at request end.
        """
        values = data.model_dump(exclude=set(self.protected_fields))
        entity = self.model(**values, user_id=user_id)
        db.add(entity)
        await db.flush()
        await db.refresh(entity)
        return entity

    async def update(
        self,
        db: AsyncSession,
        user_id: int,
        entity_id: int,
        data: BaseModel,
    ) -> T:
        """
        Apply the fields explicitly set in `data` to an entity the caller owns.

        Raises:
            EntityNotFoundError: If the entity does not exist.
            EntityAccessDeniedError: If another user owns the entity.

        Note: Does not commit. Caller (session generator) handles commit at request end.
        """
        entity = await self._load_authorized(db, user_id, entity_id, EntityAction.UPDATE)

        update_data = data.model_dump(
            exclude_unset=True, exclude=set(self.protected_fields),
        )
        for field, value in update_data.items():
            setattr(entity, field, value)

        await db.flush()
        await db.refresh(entity)
        return entity

    async def delete(self, db: AsyncSession, user_id: int, entity_id: int) -> None:
        """
        Permanently delete an entity the caller owns.

        Raises:
            EntityNotFoundError: If the entity does not exist.
            EntityAccessDeniedError: If another user owns the entity.

        Note: Does not commit. Caller (session generator) handles commit at request end.
        """
        entity = await self._load_authorized(db, user_id, entity_id, EntityAction.DELETE)
        await db.delete(entity)
        await db.flush()
