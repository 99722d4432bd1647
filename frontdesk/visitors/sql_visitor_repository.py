from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from sqlalchemy import and_, or_, select

from ..core.enums import ApprovalStatus, VisitorStatus
from ..database.sql_base import SqlAlchemyRepository
from ..database.transitions import claim_one, reload
from ..extensions import db
from .model import Visitor
from .repository import VisitorRepository


def _newest_entry_first():
    # Portable "NULLS LAST": MySQL has no NULLS LAST syntax.
    return (Visitor.entry_time.is_(None), Visitor.entry_time.desc(), Visitor.created_at.desc())


class SqlVisitorRepository(SqlAlchemyRepository[Visitor], VisitorRepository):
    model = Visitor

    def _ordering(self):
        return _newest_entry_first()

    def get_active_by_rfid(self, rfid: str) -> Optional[Visitor]:
        stmt = (
            select(Visitor)
            .where(Visitor.rfid == rfid.strip(), Visitor.exit_time.is_(None))
            .order_by(Visitor.created_at)
            .limit(1)
        )
        return db.session.scalars(stmt).first()

    def get_by_approval_token(self, token: str) -> Optional[Visitor]:
        stmt = select(Visitor).where(Visitor.approval_token == token).limit(1)
        return db.session.scalars(stmt).first()

    def list_between(self, start: Optional[datetime], end: Optional[datetime]) -> Sequence[Visitor]:
        if start is None or end is None:
            return self.list_all()

        stmt = (
            select(Visitor)
            .where(
                or_(
                    # visit overlaps [start, end]; covers "entered within range" too
                    and_(
                        Visitor.entry_time.is_not(None),
                        Visitor.entry_time <= end,
                        or_(Visitor.exit_time.is_(None), Visitor.exit_time >= start),
                    ),
                    # registrations that have not entered yet are always listed
                    and_(Visitor.entry_time.is_(None), Visitor.status == VisitorStatus.REGISTERED.value),
                )
            )
            .order_by(*_newest_entry_first())
        )
        return list(db.session.scalars(stmt))

    def list_checked_in(self) -> Sequence[Visitor]:
        stmt = (
            select(Visitor)
            .where(Visitor.status == VisitorStatus.CHECKED_IN.value)
            .order_by(Visitor.entry_time.desc())
        )
        return list(db.session.scalars(stmt))

    def check_in_by_rfid(self, rfid: str, *, now: datetime) -> Optional[Visitor]:
        row_id = claim_one(
            Visitor,
            lambda v: (v.rfid == rfid, v.entry_time.is_(None)),
            {"status": VisitorStatus.CHECKED_IN.value, "entry_time": now},
            order_by=lambda v: (v.created_at,),
        )
        return reload(Visitor, row_id)

    def check_out_by_rfid(self, rfid: str, *, now: datetime) -> Optional[Visitor]:
        row_id = claim_one(
            Visitor,
            lambda v: (v.rfid == rfid, v.entry_time.is_not(None), v.exit_time.is_(None)),
            {"status": VisitorStatus.CHECKED_OUT.value, "exit_time": now},
            order_by=lambda v: (v.entry_time,),
        )
        return reload(Visitor, row_id)

    def record_approval(self, token: str, response: ApprovalStatus) -> Optional[Visitor]:
        row_id = claim_one(
            Visitor,
            lambda v: (v.approval_token == token, v.approval_status == ApprovalStatus.PENDING.value),
            {"approval_status": response.value, "approval_token": None},
        )
        return reload(Visitor, row_id)
