"""Service layer for bookmark CRUD operations."""
from models.bookmark import Bookmark
from services.base_entity_service import OwnedEntityService


class BookmarkService(OwnedEntityService[Bookmark]):
    """Bookmark CRUD with per-owner access control."""

    model = Bookmark
    entity_name = "Bookmark"


bookmark_service = BookmarkService()
