import pytest

from notevault.api.exceptions import TagParseError
from notevault.domain import AIFeature
from notevault.services.reconciler import to_result
from notevault.utils.tag_parser import parse_tags, parse_structured_tags, parse_heuristic_tags, MAX_TAGS


def test_json_array():
    assert parse_tags('["python", "web development", "api"]') == ["python", "web development", "api"]


def test_json_array_inside_prose():
    raw = 'Sure! Here are the tags:\n```json\n["react", "hooks"]\n```'
    assert parse_tags(raw) == ["react", "hooks"]


def test_structured_tags_drop_blank_and_non_strings():
    assert parse_structured_tags('["a", "", "  ", 3, null, " b "]') == ["a", "b"]


def test_structured_tags_capped():
    raw = '["1a", "2b", "3c", "4d", "5e", "6f", "7g"]'
    assert len(parse_tags(raw)) == MAX_TAGS


def test_numbered_list_falls_back_to_heuristic():
    raw = "1. Python\n2. Machine Learning\n3. AI"
    assert parse_tags(raw) == ["python", "machine learning", "ai"]


def test_bullets_and_commas():
    raw = "* Databases, Indexing\n- Caching"
    assert parse_tags(raw) == ["databases", "indexing", "caching"]


def test_invalid_json_uses_heuristic():
    raw = "[python, fastapi]"
    assert parse_structured_tags(raw) == []
    assert parse_tags(raw) == ["python", "fastapi"]


def test_heuristic_length_bounds():
    raw = "a, ok, " + "x" * 40
    assert parse_heuristic_tags(raw) == ["ok"]


def test_nothing_usable():
    assert parse_tags("") == []
    assert parse_tags(None) == []
    assert parse_tags("[]") == []


@pytest.mark.parametrize("raw, expected", [
    ("1. React\n2. Hooks\n3. Next.js", ["react", "hooks", "next js"]),
    ('["React", "Hooks", "Next.js"]', ["React", "Hooks", "Next.js"]),
    ("```\n- Rust\n- Tokio\n```", ["rust", "tokio"]),
])
def test_documented_inputs(raw, expected):
    assert parse_tags(raw) == expected


@pytest.mark.parametrize("raw", ["1. 2. 3.", "- * -", "[]", "```\n```", "  \n , \n"])
def test_no_usable_tags_fails(raw):
    assert parse_tags(raw) == []
    with pytest.raises(TagParseError):
        to_result(AIFeature.TAGS, raw)
