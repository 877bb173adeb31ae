"""
Data Transfer Objects (DTOs) for API layer.
Separates API contracts from domain entities.

Request bodies are parsed into these schemas before a handler runs; any
field outside a schema is ignored.
"""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Any, Dict, List, Optional, Union


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class PageDTO(_CamelModel):
    """Full page for the editor view."""
    id: str
    owner_id: str
    title: str
    icon: Optional[str] = None
    cover_image: Optional[str] = None
    content: List[Dict[str, Any]]
    tags: List[str]
    summary: Optional[str] = None
    is_favorite: bool
    is_archived: bool
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class PageSummaryDTO(_CamelModel):
    """Page metadata for the sidebar, search results and trash."""
    id: str
    title: str
    icon: Optional[str] = None
    is_favorite: bool
    is_archived: bool
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


# ---- Page requests ----

class CreatePageRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    title: Optional[str] = None
    icon: Optional[str] = None


class UpdatePageRequest(BaseModel):
    """Allow-listed partial update. Unknown fields are dropped, not rejected."""
    model_config = ConfigDict(extra="ignore")

    title: Optional[str] = None
    icon: Optional[str] = None
    coverImage: Optional[str] = None
    content: Optional[List[Dict[str, Any]]] = None
    tags: Optional[List[str]] = None
    summary: Optional[str] = None

    def present_fields(self) -> Dict[str, Any]:
        """Only the fields the caller actually sent (null counts as sent)."""
        return self.model_dump(exclude_unset=True)


# ---- AI requests ----

class _AIRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    pageId: Optional[str] = None
    content: Optional[str] = None
    title: Optional[str] = None


class SummarizeRequest(_AIRequest):
    pass


class TagsRequest(_AIRequest):
    pass


class ImproveRequest(_AIRequest):
    selection: Optional[str] = None


class GenerateRequest(_AIRequest):
    prompt: Optional[str] = None


# ---- Responses ----

class AIResultDTO(BaseModel):
    result: Union[str, List[str]]
    cached: Optional[bool] = None


class FavoriteDTO(BaseModel):
    isFavorite: bool


class ArchiveDTO(BaseModel):
    isArchived: bool


def envelope(data: Any = None, message: Optional[str] = None) -> Dict[str, Any]:
    """Successful response body: ``{success, data?, message?}``."""
    body: Dict[str, Any] = {"success": True}
    if data is not None:
        body["data"] = data
    if message:
        body["message"] = message
    return body


def error_envelope(error: str) -> Dict[str, Any]:
    """Failed response body: ``{success: false, error}``."""
    return {"success": False, "error": error}
