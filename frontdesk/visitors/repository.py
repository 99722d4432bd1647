from __future__ import annotations

from datetime import datetime
from typing import Any, Optional, Protocol, Sequence

from ..core.enums import ApprovalStatus
from .model import Visitor


class VisitorRepository(Protocol):
    """Repository interface for Visitor.

    Note (DIP): services depend on this interface, not on a concrete database.
    """

    def get_by_id(self, visitor_id: str) -> Optional[Visitor]:
        raise NotImplementedError

    def get_active_by_rfid(self, rfid: str) -> Optional[Visitor]:
        """Visitor bound to `rfid` whose visit is not finished (exit_time IS NULL)."""

        raise NotImplementedError

    def get_by_approval_token(self, token: str) -> Optional[Visitor]:
        raise NotImplementedError

    def list_between(self, start: Optional[datetime], end: Optional[datetime]) -> Sequence[Visitor]:
        raise NotImplementedError

    def list_checked_in(self) -> Sequence[Visitor]:
        raise NotImplementedError

    def create(self, **fields: Any) -> Visitor:
        raise NotImplementedError

    def update(self, visitor_id: str, **fields: Any) -> Optional[Visitor]:
        raise NotImplementedError

    def delete_by_id(self, visitor_id: str) -> bool:
        raise NotImplementedError

    def check_in_by_rfid(self, rfid: str, *, now: datetime) -> Optional[Visitor]:
        """Atomically move one registered visitor (entry_time IS NULL) to checked_in."""

        raise NotImplementedError

    def check_out_by_rfid(self, rfid: str, *, now: datetime) -> Optional[Visitor]:
        """Atomically move one checked-in visitor (entry set, exit_time IS NULL) to checked_out."""

        raise NotImplementedError

    def record_approval(self, token: str, response: ApprovalStatus) -> Optional[Visitor]:
        """Answer a pending approval and clear its token; None when nothing was pending."""

        raise NotImplementedError
