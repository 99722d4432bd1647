"""Atomic single-row state transitions.

A transition is described by `criteria(entity)`, the predicate that defines
the source state, and the column `values` of the target state. The predicate
is re-checked inside the UPDATE itself, so two concurrent scans can never both
move the same row: the loser's statement simply matches nothing.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Optional, Sequence

from sqlalchemy import select, update
from sqlalchemy.orm import aliased

from ..core.constants import MAX_TRANSITION_ATTEMPTS
from ..extensions import db
from .sql_base import commit

logger = logging.getLogger(__name__)

Criteria = Callable[[Any], Sequence[Any]]


def supports_update_returning() -> bool:
    return bool(getattr(db.session.get_bind().dialect, "update_returning", False))


def claim_one(
    model: type,
    criteria: Criteria,
    values: dict[str, Any],
    *,
    order_by: Optional[Criteria] = None,
) -> Optional[str]:
    """Move one row matching `criteria` to `values`; return its id or None.

    With UPDATE ... RETURNING this is a single statement:
    UPDATE t SET ... WHERE id = (SELECT id FROM t WHERE <criteria> LIMIT 1)
    AND <criteria> RETURNING id. Otherwise (MySQL) the candidate id is looked
    up first and the UPDATE acts as compare-and-set on it.
    """

    if supports_update_returning():
        return _claim_returning(model, criteria, values, order_by)
    return _claim_compare_and_set(model, criteria, values, order_by)


def _candidate(model: type, criteria: Criteria, order_by: Optional[Criteria]):
    stmt = select(model.id).where(*criteria(model))
    if order_by is not None:
        stmt = stmt.order_by(*order_by(model))
    return stmt.limit(1)


def _claim_returning(model, criteria, values, order_by) -> Optional[str]:
    # Alias keeps the subquery from correlating to the table being updated.
    picked = aliased(model)
    candidate = _candidate(picked, criteria, order_by).scalar_subquery()
    stmt = (
        update(model)
        .where(model.id == candidate, *criteria(model))
        .values(**values)
        .returning(model.id)
        .execution_options(synchronize_session=False)
    )
    row_id = db.session.execute(stmt).scalar_one_or_none()
    commit()
    return row_id


def _claim_compare_and_set(model, criteria, values, order_by) -> Optional[str]:
    for attempt in range(1, MAX_TRANSITION_ATTEMPTS + 1):
        row_id = db.session.execute(_candidate(model, criteria, order_by)).scalar_one_or_none()
        if row_id is None:
            db.session.rollback()
            return None

        result = db.session.execute(
            update(model)
            .where(model.id == row_id, *criteria(model))
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        commit()
        if result.rowcount == 1:
            return row_id
        logger.info("%s %s changed state concurrently (attempt %d)", model.__name__, row_id, attempt)
    return None


def reload(model: type, row_id: Optional[str]):
    """Fetch a row fresh from the database, bypassing stale identity-map state."""
    if row_id is None:
        return None
    return db.session.get(model, row_id, populate_existing=True)
