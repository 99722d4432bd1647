from __future__ import annotations

import pytest

from frontdesk.common.datetime_utils import parse_iso_date, parse_iso_datetime
from frontdesk.common.validators import collect_fields, optional_str, parse_id_list, require_choice, require_rfid
from frontdesk.core.enums import ApprovalStatus
from frontdesk.core.exceptions import ValidationError


def test_require_rfid_trims_and_accepts_reader_formats():
    assert require_rfid("  04:A2:1B-FF  ") == "04:A2:1B-FF"


@pytest.mark.parametrize("value", [None, "", "   ", "RF 1", "x" * 65, "RF1;DROP"])
def test_require_rfid_rejects_bad_values(value):
    with pytest.raises(ValidationError):
        require_rfid(value)


def test_parse_id_list_accepts_json_string_and_dedupes():
    assert parse_id_list('["a", "b", "a"]', "destinations") == ["a", "b"]
    assert parse_id_list(["x"], "destinations") == ["x"]
    assert parse_id_list(None, "destinations") == []


def test_parse_id_list_rejects_non_arrays():
    with pytest.raises(ValidationError):
        parse_id_list("not json", "destinations")
    with pytest.raises(ValidationError):
        parse_id_list({"a": 1}, "destinations")


def test_require_choice_uses_enum_values():
    assert require_choice("approved", "response", ApprovalStatus) == "approved"
    with pytest.raises(ValidationError):
        require_choice("maybe", "response", ApprovalStatus)


def test_collect_fields_partial_skips_missing_but_forbids_clearing_required():
    schema = {"name": ("name", optional_str, True), "floor": ("floor", optional_str, False)}

    assert collect_fields({"floor": "2"}, schema, partial=True) == {"floor": "2"}
    with pytest.raises(ValidationError):
        collect_fields({"name": "  "}, schema, partial=True)
    with pytest.raises(ValidationError):
        collect_fields({"floor": "2"}, schema, partial=False)


def test_parse_iso_datetime_handles_z_suffix_as_naive():
    parsed = parse_iso_datetime("2026-02-01T08:00:00Z")
    assert parsed.tzinfo is None


def test_parse_iso_date_rejects_garbage():
    with pytest.raises(ValidationError):
        parse_iso_date("01/02/2026")
