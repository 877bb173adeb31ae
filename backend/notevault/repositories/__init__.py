"""
Repository layer - Abstracts data access.
Follows Repository Pattern for clean separation of data access from business logic.
"""
from .interfaces import IPageRepository
from .page_repository import PageRepository, allowed_updates

__all__ = [
    "IPageRepository",
    "PageRepository",
    "allowed_updates",
]
