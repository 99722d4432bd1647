from __future__ import annotations

import json
import re
from typing import Any, Mapping, Optional

from ..core.constants import RFID_PATTERN
from ..core.exceptions import ValidationError

_RFID_RE = re.compile(RFID_PATTERN)


def require_non_empty(value: Any, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_min_length(value: Any, field_name: str, min_len: int) -> str:
    if not isinstance(value, str) or len(value) < min_len:
        raise ValidationError(f"{field_name} must be at least {min_len} characters")
    return value


def require_rfid(value: Any, field_name: str = "rfid") -> str:
    rfid = require_non_empty(value, field_name)
    if not _RFID_RE.match(rfid):
        raise ValidationError(f"{field_name} has an invalid format")
    return rfid


def optional_str(value: Any, field_name: str) -> Optional[str]:
    """None/blank -> None; any other non-string is rejected."""
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be a string")
    value = value.strip()
    return value or None


def optional_bool(value: Any, field_name: str) -> Optional[bool]:
    if value is None:
        return None
    if not isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a boolean")
    return value


def require_choice(value: Any, field_name: str, choices) -> str:
    allowed = [c.value for c in choices]
    if value not in allowed:
        raise ValidationError(f"{field_name} must be one of: {', '.join(allowed)}")
    return value


def parse_id_list(value: Any, field_name: str) -> list[str]:
    """Accept a list of ids or its JSON-encoded string form."""

    if value is None or value == "":
        return []
    if isinstance(value, str):
        try:
            value = json.loads(value)
        except ValueError:
            raise ValidationError(f"{field_name} must be a JSON array")
    if not isinstance(value, list) or not all(isinstance(v, str) and v.strip() for v in value):
        raise ValidationError(f"{field_name} must be an array of ids")
    ids: list[str] = []
    for v in value:
        if v.strip() not in ids:
            ids.append(v.strip())
    return ids


def collect_fields(payload: Mapping[str, Any], schema: Mapping[str, tuple], *, partial: bool) -> dict:
    """Map camelCase payload keys onto model attributes.

    `schema` maps payload key -> (attribute name, cleaner, required). With
    `partial=True` missing keys are skipped and `required` only forbids
    clearing the field.
    """

    fields: dict = {}
    for key, (attr, cleaner, required) in schema.items():
        if key not in payload:
            if required and not partial:
                raise ValidationError(f"{key} is required")
            continue
        value = cleaner(payload[key], key)
        if required and value is None:
            raise ValidationError(f"{key} is required")
        fields[attr] = value
    return fields
