from __future__ import annotations

import io
import random
from typing import Any, Callable, Mapping, Sequence

import qrcode

from ..common.validators import collect_fields, optional_bool, optional_str
from ..core.constants import GUEST_PASS_BATCH_MAX, GUEST_PASS_PREFIX
from ..core.exceptions import ConflictError, NotFoundError, ValidationError
from .model import GuestPass
from .repository import GuestPassRepository

_FIELDS = {
    "passNumber": ("pass_number", optional_str, True),
    "qrCode": ("qr_code", optional_str, False),
    "isAvailable": ("is_available", optional_bool, False),
}


class GuestPassService:
    def __init__(self, passes: GuestPassRepository, *, rng: Callable[[int, int], int] = random.randint):
        self._passes = passes
        self._rng = rng

    def list_all(self) -> Sequence[GuestPass]:
        return self._passes.list_all()

    def get(self, pass_id: str) -> GuestPass:
        guest_pass = self._passes.get_by_id(pass_id)
        if not guest_pass:
            raise NotFoundError("Guest pass not found")
        return guest_pass

    def create(self, payload: Mapping[str, Any]) -> GuestPass:
        fields = collect_fields(payload, _FIELDS, partial=False)
        if fields["pass_number"] in self._passes.existing_numbers():
            raise ConflictError(f"Guest pass {fields['pass_number']} already exists")
        fields["qr_code"] = fields.get("qr_code") or fields["pass_number"]
        if fields.get("is_available") is None:
            fields.pop("is_available", None)
        return self._passes.create(**fields)

    def update(self, pass_id: str, payload: Mapping[str, Any]) -> GuestPass:
        fields = collect_fields(payload, _FIELDS, partial=True)
        if "pass_number" in fields:
            current = self.get(pass_id)
            if fields["pass_number"] != current.pass_number and fields["pass_number"] in self._passes.existing_numbers():
                raise ConflictError(f"Guest pass {fields['pass_number']} already exists")
        if "is_available" in fields and fields["is_available"] is None:
            fields.pop("is_available")
        guest_pass = self._passes.update(pass_id, **fields)
        if not guest_pass:
            raise NotFoundError("Guest pass not found")
        return guest_pass

    def delete(self, pass_id: str) -> None:
        if not self._passes.delete_by_id(pass_id):
            raise NotFoundError("Guest pass not found")

    def generate(self, count: Any) -> Sequence[GuestPass]:
        """Create `count` passes numbered V0000-V9999, skipping numbers in use."""

        if isinstance(count, bool) or not isinstance(count, int) or not 1 <= count <= GUEST_PASS_BATCH_MAX:
            raise ValidationError(f"Count must be a number between 1 and {GUEST_PASS_BATCH_MAX}")

        taken = self._passes.existing_numbers()
        if 10000 - len(taken) < count:
            raise ValidationError("Not enough free pass numbers left")

        numbers: list[str] = []
        while len(numbers) < count:
            candidate = f"{GUEST_PASS_PREFIX}{self._rng(0, 9999):04d}"
            if candidate not in taken:
                taken.add(candidate)
                numbers.append(candidate)
        return self._passes.create_many(numbers)

    def qr_png(self, pass_id: str) -> bytes:
        guest_pass = self.get(pass_id)
        img = qrcode.make(guest_pass.qr_code or guest_pass.pass_number)
        buf = io.BytesIO()
        img.save(buf)
        return buf.getvalue()
