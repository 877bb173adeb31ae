import pytest

from notevault.api.exceptions import TagParseError, AIEmptyResponseError
from notevault.domain import AIFeature
from notevault.domain.entities import Summary, Tags, ImprovedText, GeneratedText
from notevault.services.reconciler import ResponseReconciler, CACHE_WARNING, to_result


def test_to_result_kinds():
    assert to_result(AIFeature.SUMMARIZE, " s ") == Summary("s")
    assert to_result(AIFeature.IMPROVE, "i\n") == ImprovedText("i")
    assert to_result(AIFeature.GENERATE, "g") == GeneratedText("g")
    assert to_result(AIFeature.TAGS, '["a", "b"]') == Tags(["a", "b"])


def test_to_result_failures():
    with pytest.raises(TagParseError):
        to_result(AIFeature.TAGS, "[]")
    with pytest.raises(AIEmptyResponseError):
        to_result(AIFeature.IMPROVE, "  ")


@pytest.mark.asyncio
async def test_summary_is_cached_on_page(repo):
    page = await repo.create("user-1", {})
    outcome = await ResponseReconciler(repo).reconcile(AIFeature.SUMMARIZE, "Sum.", "user-1", page.id)

    assert outcome.persisted and outcome.warning is None
    assert (await repo.find_one("user-1", page.id)).summary == "Sum."


@pytest.mark.asyncio
async def test_tags_replace_previous_tags(repo):
    page = await repo.create("user-1", {})
    await repo.update("user-1", page.id, {"tags": ["old"]})

    await ResponseReconciler(repo).reconcile(AIFeature.TAGS, '["new", "fresh"]', "user-1", page.id)
    assert (await repo.find_one("user-1", page.id)).tags == ["new", "fresh"]


@pytest.mark.asyncio
async def test_improved_text_is_never_persisted(repo):
    page = await repo.create("user-1", {})
    before = await repo.find_one("user-1", page.id)

    outcome = await ResponseReconciler(repo).reconcile(AIFeature.IMPROVE, "Better", "user-1", page.id)

    assert outcome.result == ImprovedText("Better")
    assert not outcome.persisted
    assert await repo.find_one("user-1", page.id) == before


@pytest.mark.asyncio
async def test_cache_write_failure_keeps_result(repo, monkeypatch):
    page = await repo.create("user-1", {})

    async def broken_update(*args, **kwargs):
        raise OSError("disk full")

    monkeypatch.setattr(repo, "update", broken_update)
    outcome = await ResponseReconciler(repo).reconcile(AIFeature.SUMMARIZE, "Sum.", "user-1", page.id)

    assert outcome.result == Summary("Sum.")
    assert not outcome.persisted
    assert outcome.warning == CACHE_WARNING
