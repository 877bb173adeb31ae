"""
Validation utilities - Pure precondition checks for AI requests.
"""
from typing import Optional

from ..api.exceptions import AIValidationError

# Minimum non-whitespace-trimmed lengths per feature
MIN_SUMMARIZE_LENGTH = 20
MIN_TAGS_LENGTH = 10
MIN_IMPROVE_LENGTH = 5


def require_page_content(page_id: Optional[str], content: Optional[str]) -> None:
    """
    Summarize and tags write back to a page, so both fields are mandatory.

    Raises:
        AIValidationError: If either is missing or empty
    """
    if not page_id or not content:
        raise AIValidationError("pageId and content are required")


def validate_summarize(content: str) -> None:
    if len(content.strip()) < MIN_SUMMARIZE_LENGTH:
        raise AIValidationError("Note content is too short to summarize. Add more content!")


def validate_tags(content: str) -> None:
    if len(content.strip()) < MIN_TAGS_LENGTH:
        raise AIValidationError("Note content is too short to generate tags.")


def improve_target(content: Optional[str], selection: Optional[str]) -> str:
    """The text an improve request operates on: the selection if any, else everything."""
    return selection or content or ""


def validate_improve(content: Optional[str], selection: Optional[str]) -> None:
    if len(improve_target(content, selection).strip()) < MIN_IMPROVE_LENGTH:
        raise AIValidationError("Please provide more text to improve.")


def validate_generate(prompt: Optional[str]) -> None:
    if not prompt or not prompt.strip():
        raise AIValidationError("Prompt is required")
