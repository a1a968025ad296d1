# -*- coding: utf-8 -*-
"""
Unit тесты агрегации прогресса по модулю
"""

import pytest

from studydeck.domain.enums import TermStatus
from studydeck.domain.models import Term, UserTermProgress
from studydeck.service.progress import (ProgressBreakdown, aggregate_progress,
                                        aggregate_progress_batch,
                                        default_breakdown,
                                        ensure_progress_records)
from studydeck.service.progress.aggregation import (breakdown_from_rows,
                                                    count_statuses)
from tests.fixtures import (create_test_module, create_test_terms,
                            create_test_user)


def _progress(term_id: int, status: TermStatus) -> UserTermProgress:
    return UserTermProgress(user_id=1, term_id=term_id, status=status, is_starred=False)


class TestPureAggregation:
    def test_default_for_empty_module(self):
        assert default_breakdown(0) == ProgressBreakdown(0.0, 0.0, 0.0)

    def test_default_for_non_empty_module(self):
        assert default_breakdown(4).as_dict() == {
            "not_started": 1.0,
            "in_progress": 0.0,
            "completed": 0.0,
        }

    def test_missing_rows_count_as_not_started(self):
        counts = count_statuses(
            [1, 2, 3, 4],
            [_progress(1, TermStatus.COMPLETED), _progress(2, TermStatus.IN_PROGRESS)],
        )
        assert counts[TermStatus.NOT_STARTED] == 2
        assert sum(counts.values()) == 4

    def test_fractions_sum_to_one(self):
        terms = [Term(id=i, module_id=1, term=str(i), definition="d") for i in (1, 2, 3)]
        rows = [
            _progress(1, TermStatus.IN_PROGRESS),
            _progress(2, TermStatus.COMPLETED),
            _progress(3, TermStatus.COMPLETED),
        ]

        breakdown = breakdown_from_rows(terms, rows)

        assert breakdown.in_progress == pytest.approx(1 / 3)
        assert breakdown.completed == pytest.approx(2 / 3)
        assert sum(breakdown.as_dict().values()) == pytest.approx(1.0)

    def test_no_rows_falls_back_to_default(self):
        terms = [Term(id=1, module_id=1, term="a", definition="d")]
        assert breakdown_from_rows(terms, []) == default_breakdown(1)


class TestAggregateProgress:
    @pytest.mark.asyncio
    async def test_uncollected_module_reads_nothing(self, test_session, monkeypatch):
        async def fail(*args, **kwargs):
            raise AssertionError("progress store must not be read")

        monkeypatch.setattr(
            "studydeck.service.progress.aggregation.list_progress", fail
        )
        terms = [Term(id=1, module_id=1, term="a", definition="d")]

        result = await aggregate_progress(test_session, 2, 1, terms, is_collected=False)

        assert result == default_breakdown(1)

    @pytest.mark.asyncio
    async def test_zero_terms_regardless_of_collection(self, test_session):
        for collected in (True, False):
            result = await aggregate_progress(test_session, 1, 1, [], collected)
            assert result == ProgressBreakdown(0.0, 0.0, 0.0)

    @pytest.mark.asyncio
    async def test_owner_breakdown_from_seeded_records(self, test_session):
        await create_test_user(test_session, 1)
        module = await create_test_module(test_session, owner_id=1)
        terms = await create_test_terms(test_session, module.id)
        await ensure_progress_records(test_session, 1, module.id, True)

        result = await aggregate_progress(test_session, 1, module.id, terms, True)

        assert result.not_started == pytest.approx(1 / 3)
        assert result.in_progress == pytest.approx(1 / 3)
        assert result.completed == pytest.approx(1 / 3)

    @pytest.mark.asyncio
    async def test_batch_matches_single(self, test_session):
        await create_test_user(test_session, 1)
        await create_test_user(test_session, 2)
        first = await create_test_module(test_session, owner_id=1, title="First")
        second = await create_test_module(test_session, owner_id=1, title="Second")
        first_terms = await create_test_terms(test_session, first.id)
        second_terms = await create_test_terms(test_session, second.id)
        await ensure_progress_records(test_session, 1, first.id, True)

        result = await aggregate_progress_batch(
            test_session,
            1,
            {first.id: first_terms, second.id: second_terms},
            collected_module_ids={first.id},
        )

        assert result[first.id] == await aggregate_progress(
            test_session, 1, first.id, first_terms, True
        )
        assert result[second.id] == default_breakdown(3)
