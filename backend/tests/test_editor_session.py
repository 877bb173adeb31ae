import asyncio

import pytest

from notevault.api.exceptions import PageNotFoundError
from notevault.services.editor_session import EditorSession

DELAY = 0.05


def paragraph(text):
    return {"type": "paragraph", "content": [{"type": "text", "text": text}], "children": []}


@pytest.mark.asyncio
async def test_edits_are_autosaved(repo):
    page = await repo.create("user-1", {"title": "Draft"})
    session = EditorSession(repo, "user-1", page, delay=DELAY)

    session.edit([paragraph("first")])
    session.edit([paragraph("first"), paragraph("second")])
    await asyncio.sleep(DELAY * 3)
    await session.autosave.wait_idle()

    stored = await repo.find_one("user-1", page.id)
    assert stored.content == [paragraph("first"), paragraph("second")]
    assert session.autosave.save_count == 1
    assert session.plain_text == "first\nsecond"


@pytest.mark.asyncio
async def test_insert_text_appends_paragraphs_and_flushes_on_close(repo):
    page = await repo.create("user-1", {})
    session = EditorSession(repo, "user-1", page, delay=10)

    session.edit([paragraph("intro")])
    session.insert_text("Generated line one\nGenerated line two")
    await session.close()

    stored = await repo.find_one("user-1", page.id)
    assert [b["content"][0]["text"] for b in stored.content] == [
        "intro", "Generated line one", "Generated line two",
    ]


@pytest.mark.asyncio
async def test_save_to_deleted_page_reports_error(repo):
    page = await repo.create("user-1", {})
    errors = []
    session = EditorSession(repo, "user-1", page, delay=10, on_save_error=errors.append)

    await repo.delete("user-1", page.id)
    session.edit([paragraph("lost")])
    await session.close()

    assert len(errors) == 1
    assert isinstance(errors[0], PageNotFoundError)
