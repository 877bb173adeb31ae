"""
Domain layer - Contains business entities and domain logic.
This layer is independent of infrastructure and frameworks.
"""
from .entities import (
    Page,
    PageSummary,
    Summary,
    ImprovedText,
    Tags,
    GeneratedText,
    AIResult,
    result_value,
)
from .value_objects import PageId, OwnerId, AIFeature, MUTABLE_FIELDS, DEFAULT_TITLE

__all__ = [
    "Page",
    "PageSummary",
    "Summary",
    "ImprovedText",
    "Tags",
    "GeneratedText",
    "AIResult",
    "result_value",
    "PageId",
    "OwnerId",
    "AIFeature",
    "MUTABLE_FIELDS",
    "DEFAULT_TITLE",
]
