"""Bookmark CRUD endpoints."""
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, Response
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import CurrentUser, get_async_session, get_current_user
from schemas.bookmark import BookmarkCreate, BookmarkResponse, BookmarkUpdate
from services.bookmark_service import bookmark_service
from services.exceptions import EntityAccessDeniedError, EntityNotFoundError

router = APIRouter(prefix="/bookmarks", tags=["bookmarks"])

# Primary keys are 32-bit INTEGER columns; larger values can never match a row
MAX_BOOKMARK_ID = 2**31 - 1
BookmarkId = Annotated[int, Path(le=MAX_BOOKMARK_ID)]


@router.get("", response_model=list[BookmarkResponse])
async def list_bookmarks(
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_session),
) -> list[BookmarkResponse]:
    """List the current user's bookmarks, newest first."""
    bookmarks = await bookmark_service.get_all(db, current_user.id)
    return [BookmarkResponse.model_validate(b) for b in bookmarks]


@router.get(
    "/{bookmark_id}",
    response_model=BookmarkResponse,
    responses={200: {"description": "The bookmark, or an empty body if not found"}},
)
async def get_bookmark(
    bookmark_id: BookmarkId,
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_session),
) -> BookmarkResponse | Response:
    """
    Get a single bookmark by ID.

    Returns 200 with an empty body when the bookmark does not exist or belongs to
    another user, so other users' IDs cannot be probed.
    """
    bookmark = await bookmark_service.get(db, current_user.id, bookmark_id)
    if bookmark is None:
        return Response(status_code=200)
    return BookmarkResponse.model_validate(bookmark)


@router.post("", response_model=BookmarkResponse, status_code=201)
async def create_bookmark(
    data: BookmarkCreate,
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_session),
) -> BookmarkResponse:
    """Create a new bookmark owned by the current user."""
    bookmark = await bookmark_service.create(db, current_user.id, data)
    return BookmarkResponse.model_validate(bookmark)


@router.patch("/{bookmark_id}", response_model=BookmarkResponse)
async def update_bookmark(
    bookmark_id: BookmarkId,
    data: BookmarkUpdate,
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_session),
) -> BookmarkResponse:
    """Update a bookmark. Only fields present in the body are changed."""
    try:
        bookmark = await bookmark_service.update(db, current_user.id, bookmark_id, data)
    except EntityNotFoundError:
        raise HTTPException(status_code=404, detail="Bookmark not found")
    except EntityAccessDeniedError:
        raise HTTPException(status_code=403, detail="Access denied")
    return BookmarkResponse.model_validate(bookmark)


@router.delete("/{bookmark_id}", status_code=204)
async def delete_bookmark(
    bookmark_id: BookmarkId,
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_session),
) -> None:
    """Permanently delete a bookmark."""
    try:
        await bookmark_service.delete(db, current_user.id, bookmark_id)
    except EntityNotFoundError:
        raise HTTPException(status_code=404, detail="Bookmark not found")
    except EntityAccessDeniedError:
        raise HTTPException(status_code=403, detail="Access denied")
