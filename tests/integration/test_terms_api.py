# -*- coding: utf-8 -*-
"""
Интеграционные тесты API терминов и прогресса по ним
"""

import pytest
from sqlalchemy import func, select

from studydeck.domain.enums import TermStatus
from studydeck.domain.models import UserTermProgress
from tests.fixtures import (auth_headers, create_test_link, create_test_module,
                            create_test_terms, create_test_user)

OWNER = 1
READER = 2


@pytest.fixture
async def public_module(test_session):
    """Публичный модуль владельца с тремя терминами"""
    await create_test_user(test_session, OWNER)
    await create_test_user(test_session, READER)
    module = await create_test_module(test_session, owner_id=OWNER, title="Biology")
    terms = await create_test_terms(test_session, module.id)
    return module, terms


async def _progress_rows(session, user_id: int) -> int:
    result = await session.execute(
        select(func.count())
        .select_from(UserTermProgress)
        .where(UserTermProgress.user_id == user_id)
    )
    return result.scalar_one()


class TestTermProgress:
    @pytest.mark.asyncio
    async def test_uncollected_reader_gets_defaults(
        self, async_client, public_module, test_session
    ):
        _, terms = public_module

        response = await async_client.get(
            f"/api/v1/terms/{terms[2].id}/progress", headers=auth_headers(READER)
        )

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Progress retrieved"
        assert body["data"]["status"] == "not_started"
        assert body["data"]["isStarred"] is False
        assert await _progress_rows(test_session, READER) == 0

    @pytest.mark.asyncio
    async def test_uncollected_reader_cannot_update(self, async_client, public_module):
        _, terms = public_module

        response = await async_client.patch(
            f"/api/v1/terms/{terms[0].id}/progress",
            json={"isStarred": True},
            headers=auth_headers(READER),
        )

        assert response.status_code == 403
        assert response.json()["message"] == "Add the module to your collection first"

    @pytest.mark.asyncio
    async def test_collector_sets_status_and_star(
        self, async_client, public_module, test_session
    ):
        module, terms = public_module
        await create_test_link(test_session, READER, module.id)

        response = await async_client.patch(
            f"/api/v1/terms/{terms[0].id}/progress",
            json={"status": "completed", "is_starred": True},
            headers=auth_headers(READER),
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["status"] == "completed"
        assert data["isStarred"] is True
        # Записи созданы по всем терминам модуля
        assert await _progress_rows(test_session, READER) == 3

        # Поля термина (прогресс владельца) не меняются
        await test_session.refresh(terms[0])
        assert terms[0].status == TermStatus.NOT_STARTED

    @pytest.mark.asyncio
    async def test_invalid_status_rejected(self, async_client, public_module):
        _, terms = public_module
        response = await async_client.patch(
            f"/api/v1/terms/{terms[0].id}/progress",
            json={"status": "mastered"},
            headers=auth_headers(OWNER),
        )
        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_status_transitions(self, async_client, public_module, test_session):
        module, terms = public_module
        await create_test_link(test_session, READER, module.id)
        url = f"/api/v1/terms/{terms[0].id}/update-status"

        statuses = []
        for success in (True, True, True, False, False, False):
            response = await async_client.post(
                url, json={"success": success}, headers=auth_headers(READER)
            )
            assert response.json()["message"] == "Term status updated successfully"
            statuses.append(response.json()["data"]["status"])

        assert statuses == [
            "in_progress",
            "completed",
            "completed",
            "in_progress",
            "not_started",
            "not_started",
        ]

    @pytest.mark.asyncio
    async def test_private_term_forbidden(self, async_client, test_session):
        await create_test_user(test_session, OWNER)
        await create_test_user(test_session, READER)
        module = await create_test_module(
            test_session, owner_id=OWNER, title="Secret", is_private=True
        )
        (term, *_) = await create_test_terms(test_session, module.id)

        response = await async_client.get(
            f"/api/v1/terms/{term.id}/progress", headers=auth_headers(READER)
        )

        assert response.status_code == 403
        assert response.json()["message"] == "Module is private"

    @pytest.mark.asyncio
    async def test_missing_term(self, async_client, public_module):
        response = await async_client.post(
            "/api/v1/terms/999/update-status",
            json={"success": True},
            headers=auth_headers(OWNER),
        )
        assert response.status_code == 404


class TestTermManagement:
    @pytest.mark.asyncio
    async def test_owner_adds_term(self, async_client, public_module):
        module, _ = public_module

        response = await async_client.post(
            f"/api/v1/modules/{module.id}/terms",
            json={"term": "golgi", "definition": "packages proteins"},
            headers=auth_headers(OWNER),
        )

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["term"] == "golgi"
        assert data["moduleId"] == module.id
        assert data["status"] == "not_started"

        response = await async_client.get(
            f"/api/v1/modules/{module.id}", headers=auth_headers(OWNER)
        )
        assert response.json()["data"]["termsCount"] == 4

    @pytest.mark.asyncio
    async def test_duplicate_term_conflict(self, async_client, public_module):
        module, _ = public_module
        response = await async_client.post(
            f"/api/v1/modules/{module.id}/terms",
            json={"term": "cell", "definition": "again"},
            headers=auth_headers(OWNER),
        )
        assert response.status_code == 409
        assert response.json()["message"] == "Term already exists for this module."

    @pytest.mark.asyncio
    async def test_reader_cannot_add_term(self, async_client, public_module):
        module, _ = public_module
        response = await async_client.post(
            f"/api/v1/modules/{module.id}/terms",
            json={"term": "vacuole", "definition": "storage"},
            headers=auth_headers(READER),
        )
        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_collector_sees_new_term(
        self, async_client, public_module, test_session
    ):
        module, _ = public_module
        await create_test_link(test_session, READER, module.id)
        await async_client.get(
            f"/api/v1/modules/{module.id}", headers=auth_headers(READER)
        )
        await async_client.post(
            f"/api/v1/modules/{module.id}/terms",
            json={"term": "golgi", "definition": "packages proteins"},
            headers=auth_headers(OWNER),
        )

        response = await async_client.get(
            f"/api/v1/modules/{module.id}", headers=auth_headers(READER)
        )

        assert response.json()["data"]["termsCount"] == 4
        assert await _progress_rows(test_session, READER) == 4

    @pytest.mark.asyncio
    async def test_edit_term(self, async_client, public_module):
        _, terms = public_module

        response = await async_client.patch(
            f"/api/v1/terms/{terms[0].id}",
            json={"definition": "smallest unit of life"},
            headers=auth_headers(OWNER),
        )

        assert response.status_code == 200
        assert response.json()["data"]["definition"] == "smallest unit of life"

        response = await async_client.patch(
            f"/api/v1/terms/{terms[0].id}",
            json={"term": "nucleus"},
            headers=auth_headers(OWNER),
        )
        assert response.status_code == 409

    @pytest.mark.asyncio
    async def test_delete_term_removes_progress(
        self, async_client, public_module, test_session
    ):
        module, terms = public_module
        await create_test_link(test_session, READER, module.id)
        await async_client.get(
            f"/api/v1/terms/{terms[0].id}/progress", headers=auth_headers(READER)
        )
        assert await _progress_rows(test_session, READER) == 3

        response = await async_client.delete(
            f"/api/v1/terms/{terms[0].id}", headers=auth_headers(OWNER)
        )

        assert response.status_code == 200
        assert await _progress_rows(test_session, READER) == 2
