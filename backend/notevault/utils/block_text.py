"""
Block text extraction - Flatten editor blocks into plain text for the AI.

Editor blocks look roughly like:
    {
        "type": "paragraph" | "heading" | "bulletListItem" | ...,
        "content": [{"type": "text", "text": "actual text"}],
        "children": [ ...nested blocks... ]
    }

Example:
    [{"type": "heading", "content": [{"text": "Hello"}]},
     {"type": "paragraph", "content": [{"text": "World"}]}]
    -> "Hello\\nWorld"
"""
from typing import Any, List, Mapping, Sequence


def _as_list(value: Any) -> List[Any]:
    if isinstance(value, (list, tuple)):
        return list(value)
    return []


def _block_line(block: Mapping) -> str:
    """
    Text of a block's inline content.

    Links and styled spans nest their own ``content``; they are flattened
    with an explicit stack so nesting depth is unbounded.
    """
    content = block.get("content")
    if isinstance(content, str):
        return content

    parts: List[str] = []
    stack = list(reversed(_as_list(content)))
    while stack:
        inline = stack.pop()
        if isinstance(inline, str):
            parts.append(inline)
            continue
        if not isinstance(inline, Mapping):
            continue
        text = inline.get("text")
        if isinstance(text, str) and text:
            parts.append(text)
        else:
            stack.extend(reversed(_as_list(inline.get("content"))))
    return "".join(parts)


def extract_text_from_blocks(blocks: Sequence[Any]) -> str:
    """
    Extract plain text from a sequence of editor blocks.

    One line per block that carries non-whitespace text; nested children
    follow their parent's line. Missing or malformed ``content``/``children``
    are treated as empty, so this never raises on editor output.

    Args:
        blocks: Block dicts as stored in ``Page.content``

    Returns:
        Newline-joined text (empty string when there is no text at all)
    """
    lines: List[str] = []

    # Depth-first, parent before children; no recursion so depth is unbounded
    stack = list(reversed(_as_list(blocks)))
    while stack:
        block = stack.pop()
        if not isinstance(block, Mapping):
            continue

        line = _block_line(block)
        if line.strip():
            lines.append(line)

        stack.extend(reversed(_as_list(block.get("children"))))

    return "\n".join(lines)


def text_to_blocks(text: str) -> List[dict]:
    """
    Turn accepted AI text into paragraph blocks, one per non-empty line.

    Used when the user inserts an improved or generated result into a page.
    """
    return [
        {
            "type": "paragraph",
            "content": [{"type": "text", "text": line}],
            "children": [],
        }
        for line in text.splitlines()
        if line.strip()
    ]
