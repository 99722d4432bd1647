from __future__ import annotations

from datetime import datetime
from typing import Any, Optional, Protocol, Sequence

from .model import ScheduledVisit


class ScheduledVisitRepository(Protocol):
    def get_by_id(self, visit_id: str) -> Optional[ScheduledVisit]:
        raise NotImplementedError

    def list_expected_between(self, start: Optional[datetime], end: Optional[datetime]) -> Sequence[ScheduledVisit]:
        """Visits whose expected_date lies in [start, end]; open bounds are unrestricted."""

        raise NotImplementedError

    def create(self, **fields: Any) -> ScheduledVisit:
        raise NotImplementedError

    def update(self, visit_id: str, **fields: Any) -> Optional[ScheduledVisit]:
        raise NotImplementedError

    def delete_by_id(self, visit_id: str) -> bool:
        raise NotImplementedError
