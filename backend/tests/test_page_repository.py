import pytest

from notevault.repositories import allowed_updates


def test_allowed_updates_maps_and_filters():
    updates = allowed_updates({
        "title": "T",
        "coverImage": "https://img",
        "isFavorite": True,
        "owner_id": "someone-else",
        "content": None,
    })
    assert updates == {"title": "T", "cover_image": "https://img", "content": []}


@pytest.mark.asyncio
async def test_create_starts_blank(repo):
    page = await repo.create("user-1", {"title": "", "icon": "📝", "content": [{"x": 1}]})

    assert page.title == "Untitled"
    assert page.icon == "📝"
    assert page.content == []
    assert page.tags == []
    assert not page.is_favorite and not page.is_archived
    assert page.created_at is not None


@pytest.mark.asyncio
async def test_pages_are_scoped_to_owner(repo):
    page = await repo.create("user-1", {"title": "Mine"})

    assert await repo.find_one("user-2", page.id) is None
    assert await repo.update("user-2", page.id, {"title": "Stolen"}) is None
    assert await repo.toggle_favorite("user-2", page.id) is None
    assert await repo.delete("user-2", page.id) is False
    assert (await repo.find_one("user-1", page.id)).title == "Mine"
    assert await repo.find("user-2") == []


@pytest.mark.asyncio
async def test_archive_clears_favorite_and_moves_to_trash(repo):
    page = await repo.create("user-1", {"title": "Fav"})
    assert await repo.toggle_favorite("user-1", page.id) is True

    assert await repo.toggle_archive("user-1", page.id) is True
    stored = await repo.find_one("user-1", page.id)
    assert stored.is_archived and not stored.is_favorite
    assert await repo.find("user-1") == []
    assert [p.id for p in await repo.find_archived("user-1")] == [page.id]

    assert await repo.toggle_archive("user-1", page.id) is False
    assert not (await repo.find_one("user-1", page.id)).is_favorite


@pytest.mark.asyncio
async def test_search_title_case_insensitive_excludes_archived(repo):
    a = await repo.create("user-1", {"title": "Python Tips"})
    await repo.create("user-1", {"title": "Groceries"})
    hidden = await repo.create("user-1", {"title": "Old python notes"})
    await repo.toggle_archive("user-1", hidden.id)
    await repo.create("user-2", {"title": "python for user 2"})

    results = await repo.search("user-1", "PYTHON")
    assert [p.id for p in results] == [a.id]
    assert await repo.search("user-1", "   ") == []


@pytest.mark.asyncio
async def test_search_limit(repo):
    for i in range(25):
        await repo.create("user-1", {"title": f"note {i}"})
    assert len(await repo.search("user-1", "note")) == 20


@pytest.mark.asyncio
async def test_list_is_most_recently_updated_first(repo):
    first = await repo.create("user-1", {"title": "first"})
    second = await repo.create("user-1", {"title": "second"})
    await repo.update("user-1", first.id, {"title": "first, edited"})

    pages = await repo.find("user-1")
    assert [p.id for p in pages][0] == first.id
    assert {p.id for p in pages} == {first.id, second.id}


@pytest.mark.asyncio
async def test_update_without_allowed_fields_is_noop(repo):
    page = await repo.create("user-1", {"title": "Keep"})
    same = await repo.update("user-1", page.id, {"isArchived": True})
    assert same.title == "Keep"
    assert not same.is_archived


@pytest.mark.asyncio
async def test_favorite_is_refused_while_archived(repo):
    page = await repo.create("user-1", {})
    await repo.toggle_archive("user-1", page.id)

    assert await repo.toggle_favorite("user-1", page.id) is False
    assert await repo.toggle_favorite("user-1", page.id) is False
    stored = await repo.find_one("user-1", page.id)
    assert stored.is_archived and not stored.is_favorite
