from notevault.utils import extract_text_from_blocks, text_to_blocks


def paragraph(text, children=None):
    return {"type": "paragraph", "content": [{"type": "text", "text": text}], "children": children or []}


def test_one_line_per_block():
    blocks = [
        {"type": "heading", "content": [{"type": "text", "text": "Hello"}]},
        paragraph("World"),
    ]
    assert extract_text_from_blocks(blocks) == "Hello\nWorld"


def test_inline_items_are_concatenated():
    blocks = [{"type": "paragraph", "content": [
        {"type": "text", "text": "Hello "},
        {"type": "text", "text": "bold", "styles": {"bold": True}},
        {"type": "link", "href": "https://example.com", "content": [{"type": "text", "text": " link"}]},
    ]}]
    assert extract_text_from_blocks(blocks) == "Hello bold link"


def test_children_follow_parent():
    blocks = [paragraph("parent", children=[paragraph("child")]), paragraph("next")]
    assert extract_text_from_blocks(blocks) == "parent\nchild\nnext"


def test_blank_blocks_are_skipped():
    blocks = [paragraph("a"), paragraph("   "), {"type": "image", "props": {"url": "x"}}, paragraph("b")]
    assert extract_text_from_blocks(blocks) == "a\nb"


def test_malformed_input_never_raises():
    blocks = [
        None,
        "stray",
        {"content": None, "children": None},
        {"content": "plain string"},
        {"content": [None, 3, {"text": None}]},
        {"children": "not a list"},
    ]
    assert extract_text_from_blocks(blocks) == "plain string"
    assert extract_text_from_blocks(None) == ""
    assert extract_text_from_blocks([]) == ""


def test_text_to_blocks_makes_paragraphs():
    blocks = text_to_blocks("first line\n\n  \nsecond line")
    assert [b["type"] for b in blocks] == ["paragraph", "paragraph"]
    assert extract_text_from_blocks(blocks) == "first line\nsecond line"
    assert text_to_blocks("") == []


def nested_blocks(depth):
    root = {"type": "bulletListItem", "content": [{"type": "text", "text": "level 0"}], "children": []}
    current = root
    for level in range(1, depth):
        child = {"type": "bulletListItem", "content": [{"type": "text", "text": f"level {level}"}], "children": []}
        current["children"].append(child)
        current = child
    return [root]


def test_deeply_nested_children():
    text = extract_text_from_blocks(nested_blocks(5000))
    lines = text.split("\n")
    assert len(lines) == 5000
    assert lines[0] == "level 0"
    assert lines[-1] == "level 4999"


def test_deeply_nested_inline_content():
    inline = {"type": "text", "text": "deep"}
    for _ in range(5000):
        inline = {"type": "link", "content": [inline]}
    assert extract_text_from_blocks([{"type": "paragraph", "content": [inline]}]) == "deep"


def test_sibling_order_is_preserved_around_children():
    blocks = [paragraph("a", children=[paragraph("a1"), paragraph("a2", children=[paragraph("a2x")])]), paragraph("b")]
    assert extract_text_from_blocks(blocks) == "a\na1\na2\na2x\nb"
