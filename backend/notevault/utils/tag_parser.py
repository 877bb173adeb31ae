"""
Tag parsing utilities - Recover a short tag list from free-form model output.

Models are asked for a JSON array but do not always comply, so parsing runs
in two stages:
    1. structured: the first ``[...]`` substring parsed as JSON
    2. heuristic: strip list markup, split on commas/newlines
"""
from typing import List, Optional
import json
import re

from ..core.logging_config import get_logger

logger = get_logger(__name__)

# Configuration constants
MAX_TAGS = 5
_MIN_TAG_LENGTH = 1   # exclusive
_MAX_TAG_LENGTH = 30  # exclusive

_ARRAY_PATTERN = re.compile(r"\[[\s\S]*?\]")
_FENCE_PATTERN = re.compile(r"```[A-Za-z0-9_-]*")
_LIST_MARKER_PATTERN = re.compile(r"[*\-\d.]+\s*")
_QUOTE_BRACKET_PATTERN = re.compile(r"[\[\]\"']")
_SPLIT_PATTERN = re.compile(r"[,\n]+")


def parse_structured_tags(raw: str) -> List[str]:
    """
    Parse the first bracketed list in ``raw`` as a JSON array of strings.

    Returns:
        Up to MAX_TAGS non-blank strings, or an empty list when no array
        parses.
    """
    match = _ARRAY_PATTERN.search(raw)
    if not match:
        return []

    try:
        parsed = json.loads(match.group(0))
    except json.JSONDecodeError:
        logger.debug("Bracketed list in model output is not valid JSON")
        return []

    if not isinstance(parsed, list):
        return []

    tags = [item.strip() for item in parsed if isinstance(item, str) and item.strip()]
    return tags[:MAX_TAGS]


def parse_heuristic_tags(raw: str) -> List[str]:
    """
    Split loosely formatted output (bullets, numbered lists, CSV) into tags.

    Returns:
        Up to MAX_TAGS lowercase candidates with 1 < len < 30.
    """
    cleaned = _FENCE_PATTERN.sub("", raw)
    cleaned = _LIST_MARKER_PATTERN.sub(" ", cleaned)
    cleaned = _QUOTE_BRACKET_PATTERN.sub("", cleaned)

    candidates = [part.strip().lower() for part in _SPLIT_PATTERN.split(cleaned)]
    tags = [tag for tag in candidates if _MIN_TAG_LENGTH < len(tag) < _MAX_TAG_LENGTH]
    return tags[:MAX_TAGS]


def parse_tags(raw: Optional[str]) -> List[str]:
    """
    Recover tags from model output, structured parse first.

    Args:
        raw: Raw completion text

    Returns:
        List of 0..MAX_TAGS tags. An empty list means nothing usable was found;
        the caller decides whether that is an error.
    """
    if not raw:
        return []

    tags = parse_structured_tags(raw)
    if tags:
        logger.debug(f"Parsed {len(tags)} tags from JSON array")
        return tags

    tags = parse_heuristic_tags(raw)
    logger.debug(f"Parsed {len(tags)} tags heuristically")
    return tags
