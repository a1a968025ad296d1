# -*- coding: utf-8 -*-
"""
Unit тесты переходов статуса изучения термина
"""

import pytest

from studydeck.domain.enums import TermStatus
from studydeck.domain.models import UserTermProgress
from studydeck.repository.progress import get_progress
from studydeck.service.progress import apply_transition, next_status
from tests.fixtures import (create_test_module, create_test_terms,
                            create_test_user)


class TestNextStatus:
    """Таблица переходов"""

    @pytest.mark.parametrize(
        "current, success, expected",
        [
            (TermStatus.NOT_STARTED, True, TermStatus.IN_PROGRESS),
            (TermStatus.IN_PROGRESS, True, TermStatus.COMPLETED),
            (TermStatus.COMPLETED, True, TermStatus.COMPLETED),
            (TermStatus.NOT_STARTED, False, TermStatus.NOT_STARTED),
            (TermStatus.IN_PROGRESS, False, TermStatus.NOT_STARTED),
            (TermStatus.COMPLETED, False, TermStatus.IN_PROGRESS),
        ],
    )
    def test_transition_table(self, current, success, expected):
        assert next_status(current, success) is expected

    def test_three_successes_from_not_started(self):
        """not_started -> in_progress -> completed -> completed"""
        status = TermStatus.NOT_STARTED
        history = []
        for _ in range(3):
            status = next_status(status, True)
            history.append(status)
        assert history == [
            TermStatus.IN_PROGRESS,
            TermStatus.COMPLETED,
            TermStatus.COMPLETED,
        ]

    def test_failure_from_in_progress_demotes(self):
        """Неудача всегда понижает на один уровень"""
        assert next_status(TermStatus.IN_PROGRESS, False) is TermStatus.NOT_STARTED

    def test_accepts_raw_string_status(self):
        assert next_status("in_progress", True) is TermStatus.COMPLETED


class TestApplyTransition:
    """Сохранение записи только при изменении статуса"""

    @pytest.mark.asyncio
    async def test_changed_status_is_persisted(self, test_session):
        await create_test_user(test_session, 1)
        module = await create_test_module(test_session, owner_id=1)
        (term,) = await create_test_terms(
            test_session, module.id, [("cell", TermStatus.NOT_STARTED, False)]
        )
        progress = UserTermProgress(
            user_id=1, term_id=term.id, status=TermStatus.NOT_STARTED, is_starred=False
        )
        test_session.add(progress)
        await test_session.commit()

        record, changed = await apply_transition(test_session, progress, True)

        assert changed is True
        assert record.status == TermStatus.IN_PROGRESS
        stored = await get_progress(test_session, 1, term.id)
        assert stored.status == TermStatus.IN_PROGRESS

    @pytest.mark.asyncio
    async def test_noop_transition_skips_save(self, test_session, monkeypatch):
        calls = []

        async def fake_save(session, progress):
            calls.append(progress)
            return progress

        monkeypatch.setattr(
            "studydeck.service.progress.transitions.save_progress", fake_save
        )
        progress = UserTermProgress(
            user_id=1, term_id=1, status=TermStatus.COMPLETED, is_starred=False
        )

        record, changed = await apply_transition(test_session, progress, True)

        assert changed is False
        assert record.status == TermStatus.COMPLETED
        assert calls == []
