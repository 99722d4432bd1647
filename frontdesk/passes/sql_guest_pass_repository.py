from __future__ import annotations

from typing import Iterable, Sequence

from sqlalchemy import select, update

from ..database.sql_base import SqlAlchemyRepository, commit
from ..extensions import db
from .model import GuestPass
from .repository import GuestPassRepository


class SqlGuestPassRepository(SqlAlchemyRepository[GuestPass], GuestPassRepository):
    model = GuestPass

    def _ordering(self):
        return (GuestPass.created_at.desc(), GuestPass.pass_number)

    def existing_numbers(self) -> set[str]:
        return set(db.session.scalars(select(GuestPass.pass_number)))

    def create_many(self, numbers: Iterable[str]) -> Sequence[GuestPass]:
        passes = [GuestPass(pass_number=n, qr_code=n, is_available=True) for n in numbers]
        db.session.add_all(passes)
        commit()
        return passes

    def _set_available(self, pass_number: str, *, current: bool, target: bool) -> bool:
        result = db.session.execute(
            update(GuestPass)
            .where(GuestPass.pass_number == pass_number, GuestPass.is_available.is_(current))
            .values(is_available=target)
            .execution_options(synchronize_session=False)
        )
        commit()
        return result.rowcount == 1

    def claim(self, pass_number: str) -> bool:
        return self._set_available(pass_number, current=True, target=False)

    def release(self, pass_number: str) -> bool:
        return self._set_available(pass_number, current=False, target=True)
