"""
Utility functions - Pure functions with no dependencies.
These can be used across all layers.
"""
from .block_text import extract_text_from_blocks, text_to_blocks
from .tag_parser import parse_tags, MAX_TAGS

__all__ = [
    "extract_text_from_blocks",
    "text_to_blocks",
    "parse_tags",
    "MAX_TAGS",
]
