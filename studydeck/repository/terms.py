# -*- coding: utf-8 -*-
"""
studydeck/repository/terms.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Repository for module terms (flashcards).
"""

from __future__ import annotations

from collections import defaultdict
from typing import Any, Dict, Iterable, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from studydeck.domain.enums import TermStatus
from studydeck.domain.models import Term
from studydeck.repository.base import delete_item, update_item
from studydeck.utils.exceptions import NotFoundError


async def create_terms(
    session: AsyncSession, module_id: int, items: Iterable[dict]
) -> List[Term]:
    """Create several terms of one module in a single commit."""
    terms = [
        Term(
            module_id=module_id,
            term=item["term"],
            definition=item["definition"],
            status=item.get("status") or TermStatus.NOT_STARTED,
            is_starred=item.get("is_starred", True),
        )
        for item in items
    ]
    if not terms:
        return []
    session.add_all(terms)
    await session.commit()
    for term in terms:
        await session.refresh(term)
    return terms


async def find_term(session: AsyncSession, term_id: int) -> Optional[Term]:
    """Retrieve a term by ID or None."""
    result = await session.execute(select(Term).where(Term.id == term_id))
    return result.scalar_one_or_none()


async def get_term(session: AsyncSession, term_id: int) -> Term:
    """Retrieve a term by ID or raise NotFoundError."""
    term = await find_term(session, term_id)
    if term is None:
        raise NotFoundError(resource_type="Term", resource_id=term_id)
    return term


async def find_term_by_text(
    session: AsyncSession, module_id: int, text: str
) -> Optional[Term]:
    """Find a term of the module with exactly this prompt text."""
    stmt = select(Term).where(Term.module_id == module_id, Term.term == text)
    result = await session.execute(stmt.limit(1))
    return result.scalars().first()


async def list_terms_by_module(session: AsyncSession, module_id: int) -> List[Term]:
    """List terms of a module in creation order."""
    stmt = select(Term).where(Term.module_id == module_id).order_by(Term.id)
    result = await session.execute(stmt)
    return list(result.scalars().all())


async def list_terms_by_modules(
    session: AsyncSession, module_ids: Iterable[int]
) -> Dict[int, List[Term]]:
    """Load terms of many modules in one query, grouped by module ID."""
    ids = set(module_ids)
    grouped: Dict[int, List[Term]] = defaultdict(list)
    if not ids:
        return grouped
    stmt = select(Term).where(Term.module_id.in_(ids)).order_by(Term.id)
    result = await session.execute(stmt)
    for term in result.scalars().all():
        grouped[term.module_id].append(term)
    return grouped


async def update_term(session: AsyncSession, term_id: int, **kwargs: Any) -> Term:
    """Update a term, keeping it attached to its module."""
    kwargs.pop("id", None)
    kwargs.pop("module_id", None)
    return await update_item(session, Term, term_id, **kwargs)


async def delete_term(session: AsyncSession, term_id: int) -> None:
    """Delete a term; its progress rows go with it by cascade."""
    await delete_item(session, Term, term_id)
