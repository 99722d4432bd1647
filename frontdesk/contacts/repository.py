from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence

from .model import StaffContact


class StaffContactRepository(Protocol):
    def get_by_id(self, contact_id: str) -> Optional[StaffContact]:
        raise NotImplementedError

    def list_all(self) -> Sequence[StaffContact]:
        raise NotImplementedError

    def create(self, **fields: Any) -> StaffContact:
        raise NotImplementedError

    def update(self, contact_id: str, **fields: Any) -> Optional[StaffContact]:
        raise NotImplementedError

    def delete_by_id(self, contact_id: str) -> bool:
        raise NotImplementedError
