from __future__ import annotations

from ..database.sql_base import SqlAlchemyRepository
from .model import Destination


class DestinationRepository(SqlAlchemyRepository[Destination]):
    model = Destination

    def _ordering(self):
        return (Destination.name,)
