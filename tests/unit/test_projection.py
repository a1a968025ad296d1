# -*- coding: utf-8 -*-
"""
Unit тесты сборки представлений модулей и терминов
"""

from studydeck.domain.enums import TermStatus
from studydeck.domain.models import Module, Term, User, UserTermProgress
from studydeck.service.progress import ProgressBreakdown, default_breakdown
from studydeck.service.projection import (project_module, project_term,
                                          project_terms)


def _term(term_id: int = 1) -> Term:
    # Поля владельца заведомо отличаются от значений по умолчанию
    return Term(
        id=term_id,
        module_id=7,
        term="cell",
        definition="unit of life",
        status=TermStatus.COMPLETED,
        is_starred=True,
    )


def _module() -> Module:
    return Module(
        id=7,
        slug="biology",
        title="Biology",
        description=None,
        is_private=False,
        owner_id=1,
    )


class TestProjectTerm:
    def test_owner_fields_do_not_leak_without_progress(self):
        view = project_term(_term())
        assert view["status"] is TermStatus.NOT_STARTED
        assert view["is_starred"] is False

    def test_uses_user_progress(self):
        progress = UserTermProgress(
            user_id=2, term_id=1, status=TermStatus.IN_PROGRESS, is_starred=False
        )
        view = project_term(_term(), progress)
        assert view == {
            "id": 1,
            "module_id": 7,
            "term": "cell",
            "definition": "unit of life",
            "status": TermStatus.IN_PROGRESS,
            "is_starred": False,
        }

    def test_project_terms_without_progress_map(self):
        views = project_terms([_term(1), _term(2)])
        assert [v["status"] for v in views] == [TermStatus.NOT_STARTED] * 2


class TestProjectModule:
    def test_summary_view_has_no_terms(self):
        owner = User(id=1, email="a@example.com", name="Alice", profile_picture="a.png")
        view = project_module(
            _module(),
            owner,
            [_term()],
            default_breakdown(1),
            is_owner=False,
            is_collected=False,
        )
        assert "terms" not in view
        assert view["owner_name"] == "Alice"
        assert view["owner_img"] == "a.png"
        assert view["terms_count"] == 1
        assert view["progress"] == {
            "not_started": 1.0,
            "in_progress": 0.0,
            "completed": 0.0,
        }

    def test_detail_view_and_missing_owner(self):
        view = project_module(
            _module(),
            None,
            [],
            ProgressBreakdown(),
            is_owner=True,
            is_collected=True,
            term_views=[],
        )
        assert view["terms"] == []
        assert view["owner_name"] is None
        assert view["is_owner"] is True
        assert view["is_collected"] is True
