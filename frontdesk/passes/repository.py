from __future__ import annotations

from typing import Any, Iterable, Optional, Protocol, Sequence

from .model import GuestPass


class GuestPassRepository(Protocol):
    def get_by_id(self, pass_id: str) -> Optional[GuestPass]:
        raise NotImplementedError

    def list_all(self) -> Sequence[GuestPass]:
        raise NotImplementedError

    def existing_numbers(self) -> set[str]:
        raise NotImplementedError

    def create(self, **fields: Any) -> GuestPass:
        raise NotImplementedError

    def create_many(self, numbers: Iterable[str]) -> Sequence[GuestPass]:
        raise NotImplementedError

    def update(self, pass_id: str, **fields: Any) -> Optional[GuestPass]:
        raise NotImplementedError

    def delete_by_id(self, pass_id: str) -> bool:
        raise NotImplementedError

    def claim(self, pass_number: str) -> bool:
        """Mark an available pass as lent out; False when it is missing or already lent."""

        raise NotImplementedError

    def release(self, pass_number: str) -> bool:
        raise NotImplementedError
