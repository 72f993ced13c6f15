from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from tutorial_api.db.repositories.base import TutorialRepositoryProtocol
from tutorial_api.domain.tutorial import Tutorial
from tutorial_api.services.tutorial_service import TutorialService, merge_title


async def _aiter(*items):
    for item in items:
        yield item


async def _collect(it):
    return [t async for t in it]


@pytest.fixture
def t1():
    return Tutorial(id=1, title="First", description="desc1", published=True)


@pytest.fixture
def t2():
    return Tutorial(id=2, title="Second", description="desc2", published=False)


@pytest.fixture
def repo():
    r = MagicMock(spec=TutorialRepositoryProtocol)
    r.find_by_id = AsyncMock(return_value=None)
    r.save = AsyncMock(side_effect=lambda t: t)
    r.delete_by_id = AsyncMock(return_value=None)
    r.delete_all = AsyncMock(return_value=None)
    return r


@pytest.fixture
def service(repo):
    return TutorialService(repo)


async def test_find_all(service, repo, t1, t2):
    repo.find_all.return_value = _aiter(t1, t2)
    assert await _collect(service.find_all()) == [t1, t2]


async def test_find_by_title_containing(service, repo, t1):
    repo.find_by_title_containing.return_value = _aiter(t1)
    assert await _collect(service.find_by_title_containing("First")) == [t1]
    repo.find_by_title_containing.assert_called_once_with("First")


async def test_find_by_published(service, repo, t1):
    repo.find_by_published.return_value = _aiter(t1)
    assert await _collect(service.find_by_published(True)) == [t1]
    repo.find_by_published.assert_called_once_with(True)


async def test_find_by_id_found(service, repo, t1):
    repo.find_by_id.return_value = t1
    found = await service.find_by_id(1)
    assert found.id == 1 and found.title == "First"


async def test_find_by_id_not_found(service, repo):
    assert await service.find_by_id(99) is None


async def test_save(service, repo):
    saved = await service.save(Tutorial(title="New", description="d"))
    assert saved.title == "New"
    assert saved.description == "d"
    repo.save.assert_awaited_once()


async def test_update_when_present_adds_prefix(service, repo, t1):
    repo.find_by_id.return_value = t1
    updated = await service.update(1, Tutorial(title="X"))
    assert updated.id == 1
    assert updated.title == "Update X"


async def test_update_second_record_adds_prefix(service, repo, t2):
    repo.find_by_id.return_value = t2
    updated = await service.update(2, Tutorial(title="Already"))
    assert updated.id == 2
    assert updated.title == "Update Already"


async def test_update_does_not_double_prefix(service, repo, t1):
    repo.find_by_id.return_value = t1
    updated = await service.update(1, Tutorial(title="Update Existing"))
    assert updated.id == 1
    assert updated.title == "Update Existing"


async def test_update_repeated_is_stable(service, repo, t1):
    repo.find_by_id.return_value = t1
    first = await service.update(1, Tutorial(title="X"))
    repo.find_by_id.return_value = first
    second = await service.update(1, Tutorial(title=first.title))
    assert second.title == first.title == "Update X"


async def test_update_with_null_title_keeps_stored_title(service, repo, t1):
    repo.find_by_id.return_value = t1
    updated = await service.update(1, Tutorial(title=None, description="desc"))
    assert updated.id == 1
    assert updated.title == "First"
    assert updated.description == "desc"


async def test_update_replaces_description_and_published(service, repo, t1):
    repo.find_by_id.return_value = t1
    updated = await service.update(1, Tutorial(title="X"))
    assert updated.description is None
    assert updated.published is False


async def test_update_keeps_original_id(service, repo, t1):
    repo.find_by_id.return_value = t1
    updated = await service.update(1, Tutorial(id=42, title="X"))
    assert updated.id == 1
    saved = repo.save.await_args.args[0]
    assert saved.id == 1


async def test_update_does_not_mutate_stored_record(service, repo, t1):
    repo.find_by_id.return_value = t1
    await service.update(1, Tutorial(title="X"))
    assert t1.title == "First"


async def test_update_when_absent_returns_none(service, repo):
    assert await service.update(999, Tutorial(title="X")) is None
    repo.save.assert_not_awaited()


async def test_update_is_deferred_until_awaited(service, repo, t1):
    repo.find_by_id.return_value = t1
    pending = service.update(1, Tutorial(title="X"))
    repo.find_by_id.assert_not_called()
    await pending
    repo.find_by_id.assert_awaited_once_with(1)


async def test_repository_failure_propagates(service, repo):
    repo.find_by_id.side_effect = ConnectionError("db down")
    with pytest.raises(ConnectionError):
        await service.update(1, Tutorial(title="X"))
    repo.save.assert_not_awaited()


async def test_delete_by_id(service, repo):
    assert await service.delete_by_id(1) is None
    repo.delete_by_id.assert_awaited_once_with(1)


async def test_delete_all(service, repo):
    assert await service.delete_all() is None
    repo.delete_all.assert_awaited_once_with()


@pytest.mark.parametrize(
    "current, incoming, expected",
    [
        ("First", None, "First"),
        (None, None, None),
        ("First", "X", "Update X"),
        ("First", "Update Existing", "Update Existing"),
        ("First", "", "Update "),
        ("First", "update lower", "Update update lower"),
    ],
)
def test_merge_title(current, incoming, expected):
    assert merge_title(current, incoming) == expected
