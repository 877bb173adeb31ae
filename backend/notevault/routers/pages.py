"""
Pages Router - page CRUD for the authenticated user.

Every route requires a session; pages belonging to someone else answer
exactly like missing ones.

Example Usage:
    GET    /pages               - List my pages (sidebar)
    POST   /pages               - Create a blank page
    GET    /pages/search?q=     - Search my pages by title
    GET    /pages/trash         - List archived pages
    GET    /pages/{id}          - Get one page with content
    PATCH  /pages/{id}          - Update allow-listed fields
    PATCH  /pages/{id}/favorite - Toggle favorite
    PATCH  /pages/{id}/archive  - Move to/from trash
    DELETE /pages/{id}          - Delete permanently
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from .dependencies import get_page_repository
from ..api.dto import (
    CreatePageRequest,
    UpdatePageRequest,
    FavoriteDTO,
    ArchiveDTO,
    envelope,
)
from ..api.exceptions import PageNotFoundError, ValidationError
from ..api.mappers import PageMapper
from ..core.auth import CurrentUser, get_current_user
from ..repositories import PageRepository
from ..core.logging_config import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/pages", dependencies=[Depends(get_current_user)])


@router.get("")
async def list_pages(
    user: CurrentUser = Depends(get_current_user),
    repo: PageRepository = Depends(get_page_repository)
):
    """
    List the caller's non-archived pages, most recently updated first.

    Returns metadata only (no content) to keep the sidebar payload small.
    """
    pages = await repo.find(user.id)
    return envelope(PageMapper.to_summary_json_list(pages))


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_page(
    body: Optional[CreatePageRequest] = None,
    user: CurrentUser = Depends(get_current_user),
    repo: PageRepository = Depends(get_page_repository)
):
    """Create a blank page. Content and tags start empty."""
    fields = body.model_dump() if body else {}
    page = await repo.create(user.id, fields)
    return envelope(PageMapper.to_json(page))


@router.get("/search")
async def search_pages(
    q: str = Query(""),
    user: CurrentUser = Depends(get_current_user),
    repo: PageRepository = Depends(get_page_repository)
):
    """Case-insensitive title search over non-archived pages, max 20 results."""
    pages = await repo.search(user.id, q)
    return envelope(PageMapper.to_summary_json_list(pages))


@router.get("/trash")
async def list_trash(
    user: CurrentUser = Depends(get_current_user),
    repo: PageRepository = Depends(get_page_repository)
):
    pages = await repo.find_archived(user.id)
    return envelope(PageMapper.to_summary_json_list(pages))


@router.get("/{page_id}")
async def get_page(
    page_id: str,
    user: CurrentUser = Depends(get_current_user),
    repo: PageRepository = Depends(get_page_repository)
):
    page = await repo.find_one(user.id, page_id)
    if page is None:
        raise PageNotFoundError()
    return envelope(PageMapper.to_json(page))


@router.patch("/{page_id}")
async def update_page(
    page_id: str,
    body: UpdatePageRequest,
    user: CurrentUser = Depends(get_current_user),
    repo: PageRepository = Depends(get_page_repository)
):
    """
    Partially update a page.

    Only title, icon, coverImage, content, tags and summary are applied.
    Called by the editor's auto-save with ``{"content": [...]}``.
    """
    fields = body.present_fields()
    if not fields:
        raise ValidationError("No valid fields to update")

    page = await repo.update(user.id, page_id, fields)
    if page is None:
        raise PageNotFoundError()
    return envelope(PageMapper.to_json(page))


@router.patch("/{page_id}/favorite")
async def toggle_favorite(
    page_id: str,
    user: CurrentUser = Depends(get_current_user),
    repo: PageRepository = Depends(get_page_repository)
):
    is_favorite = await repo.toggle_favorite(user.id, page_id)
    if is_favorite is None:
        raise PageNotFoundError()
    return envelope(FavoriteDTO(isFavorite=is_favorite).model_dump())


@router.patch("/{page_id}/archive")
async def toggle_archive(
    page_id: str,
    user: CurrentUser = Depends(get_current_user),
    repo: PageRepository = Depends(get_page_repository)
):
    """Move a page to or from the trash. Archiving also un-favorites it."""
    is_archived = await repo.toggle_archive(user.id, page_id)
    if is_archived is None:
        raise PageNotFoundError()
    return envelope(ArchiveDTO(isArchived=is_archived).model_dump())


@router.delete("/{page_id}")
async def delete_page(
    page_id: str,
    user: CurrentUser = Depends(get_current_user),
    repo: PageRepository = Depends(get_page_repository)
):
    """Delete a page permanently. This cannot be undone."""
    if not await repo.delete(user.id, page_id):
        raise PageNotFoundError()
    return envelope(message="Page deleted permanently")
