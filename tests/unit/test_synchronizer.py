# -*- coding: utf-8 -*-
"""
Unit тесты ленивого создания записей коллекции и прогресса
"""

import pytest
from sqlalchemy import func, select

from studydeck.domain.enums import TermStatus
from studydeck.domain.models import UserModule, UserTermProgress
from studydeck.repository.progress import get_progress_map
from studydeck.service.progress import (ensure_collection_link,
                                        ensure_progress_records,
                                        ensure_user_module)
from tests.fixtures import (create_test_module, create_test_terms,
                            create_test_user)


async def _count(session, model, **filters) -> int:
    stmt = select(func.count()).select_from(model)
    for key, value in filters.items():
        stmt = stmt.where(getattr(model, key) == value)
    result = await session.execute(stmt)
    return result.scalar_one()


@pytest.fixture
async def shared_module(test_session):
    """Публичный модуль владельца 1 с тремя терминами и пользователь 2"""
    await create_test_user(test_session, 1)
    await create_test_user(test_session, 2)
    module = await create_test_module(test_session, owner_id=1, title="Biology")
    terms = await create_test_terms(test_session, module.id)
    return module, terms


class TestEnsureCollectionLink:
    @pytest.mark.asyncio
    async def test_owner_never_gets_link(self, test_session, shared_module):
        module, _ = shared_module
        await ensure_collection_link(test_session, 1, module.id, is_owner=True)
        assert await _count(test_session, UserModule) == 0

    @pytest.mark.asyncio
    async def test_link_is_idempotent(self, test_session, shared_module):
        module, _ = shared_module
        await ensure_collection_link(test_session, 2, module.id, is_owner=False)
        await ensure_collection_link(test_session, 2, module.id, is_owner=False)
        assert await _count(test_session, UserModule, user_id=2) == 1


class TestEnsureProgressRecords:
    @pytest.mark.asyncio
    async def test_defaults_for_non_owner(self, test_session, shared_module):
        module, terms = shared_module

        inserted = await ensure_progress_records(
            test_session, 2, module.id, seed_from_owner_fields=False
        )

        assert inserted == 3
        progress = await get_progress_map(test_session, 2, [t.id for t in terms])
        assert {p.status for p in progress.values()} == {TermStatus.NOT_STARTED}
        assert {p.is_starred for p in progress.values()} == {False}

    @pytest.mark.asyncio
    async def test_owner_seeded_from_term_fields(self, test_session, shared_module):
        module, terms = shared_module

        await ensure_progress_records(
            test_session, 1, module.id, seed_from_owner_fields=True
        )

        progress = await get_progress_map(test_session, 1, [t.id for t in terms])
        for term in terms:
            assert progress[term.id].status == term.status
            assert progress[term.id].is_starred == term.is_starred

    @pytest.mark.asyncio
    async def test_second_call_is_noop(self, test_session, shared_module):
        module, _ = shared_module

        first = await ensure_progress_records(test_session, 2, module.id, False)
        second = await ensure_progress_records(test_session, 2, module.id, False)

        assert first == 3
        assert second == 0
        assert await _count(test_session, UserTermProgress, user_id=2) == 3

    @pytest.mark.asyncio
    async def test_fills_terms_added_later(self, test_session, shared_module):
        module, _ = shared_module
        await ensure_progress_records(test_session, 2, module.id, False)
        await create_test_terms(
            test_session, module.id, [("golgi", TermStatus.COMPLETED, True)]
        )

        inserted = await ensure_progress_records(test_session, 2, module.id, False)

        assert inserted == 1
        assert await _count(test_session, UserTermProgress, user_id=2) == 4

    @pytest.mark.asyncio
    async def test_empty_module(self, test_session):
        await create_test_user(test_session, 1)
        module = await create_test_module(test_session, owner_id=1)
        assert await ensure_progress_records(test_session, 1, module.id, True) == 0

    @pytest.mark.asyncio
    async def test_concurrent_insert_is_ignored(
        self, test_session, shared_module, monkeypatch
    ):
        """Строки, вставленные параллельным запросом, пропускаются без ошибки"""
        module, _ = shared_module
        await ensure_progress_records(test_session, 2, module.id, False)

        async def stale_lookup(session, user_id, term_ids):
            # Снимок до вставки другим запросом
            return set()

        monkeypatch.setattr(
            "studydeck.service.progress.synchronizer.list_existing_term_ids",
            stale_lookup,
        )

        await ensure_progress_records(test_session, 2, module.id, False)

        assert await _count(test_session, UserTermProgress, user_id=2) == 3


class TestEnsureUserModule:
    @pytest.mark.asyncio
    async def test_collector_gets_link_and_records(self, test_session, shared_module):
        module, _ = shared_module

        await ensure_user_module(test_session, 2, module.id, is_owner=False)

        assert await _count(test_session, UserModule, user_id=2) == 1
        assert await _count(test_session, UserTermProgress, user_id=2) == 3

    @pytest.mark.asyncio
    async def test_owner_gets_records_only(self, test_session, shared_module):
        module, _ = shared_module

        await ensure_user_module(test_session, 1, module.id, is_owner=True)

        assert await _count(test_session, UserModule) == 0
        assert await _count(test_session, UserTermProgress, user_id=1) == 3
