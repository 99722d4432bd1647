from __future__ import annotations

from typing import Any, Mapping, Sequence

from ..common.validators import require_non_empty
from ..core.exceptions import NotFoundError, ValidationError
from .model import Setting
from .repository import SettingRepository


class SettingService:
    def __init__(self, settings: SettingRepository):
        self._settings = settings

    def list_all(self) -> Sequence[Setting]:
        return self._settings.list_all()

    def get(self, key: str) -> Setting:
        setting = self._settings.get_by_key(key)
        if not setting:
            raise NotFoundError("Setting not found")
        return setting

    def upsert(self, payload: Mapping[str, Any]) -> Setting:
        key = require_non_empty(payload.get("key"), "key")
        value = payload.get("value")
        if value is not None and not isinstance(value, str):
            # Scalars are stored in their text form.
            if isinstance(value, (dict, list)):
                raise ValidationError("value must be a string")
            value = str(value).lower() if isinstance(value, bool) else str(value)
        return self._settings.upsert(key, value)
