from __future__ import annotations

import base64
from datetime import datetime

from frontdesk.uploads.image_store import ImageStore, sanitize_name

STAMP = datetime(2026, 2, 1, 9, 0, 0)
JPEG = "data:image/jpeg;base64," + base64.b64encode(b"\xff\xd8\xff\xe0jpeg").decode()


def _store(tmp_path):
    return ImageStore(str(tmp_path), clock=lambda: STAMP)


def test_saves_data_url_under_public_path(tmp_path):
    path = _store(tmp_path).save_data_url(JPEG, name="Lê Văn A", kind="photo")

    ms = int(STAMP.timestamp() * 1000)
    assert path == f"/uploads/L__V_n_A_photo_{ms}.jpg"
    assert (tmp_path / path.rsplit("/", 1)[-1]).read_bytes() == b"\xff\xd8\xff\xe0jpeg"


def test_same_millisecond_does_not_overwrite(tmp_path):
    store = _store(tmp_path)

    first = store.save_data_url(JPEG, name="Ann", kind="id")
    second = store.save_data_url(JPEG, name="Ann", kind="id")

    assert first != second
    assert len(list(tmp_path.iterdir())) == 2


def test_malformed_input_is_dropped(tmp_path):
    store = _store(tmp_path)

    assert store.save_data_url(None, name="Ann", kind="photo") is None
    assert store.save_data_url("", name="Ann", kind="photo") is None
    assert store.save_data_url("https://example.com/a.png", name="Ann", kind="photo") is None
    assert store.save_data_url("data:text/plain;base64,aGVsbG8=", name="Ann", kind="photo") is None
    assert store.save_data_url("data:image/png;base64,%%%", name="Ann", kind="photo") is None
    assert store.save_data_url(42, name="Ann", kind="photo") is None
    assert list(tmp_path.iterdir()) == []


def test_sanitize_name():
    assert sanitize_name("a b/c") == "a_b_c"
    assert sanitize_name("") == "unnamed"


def test_unwritable_folder_drops_image(tmp_path):
    blocked = tmp_path / "blocked"
    blocked.write_text("not a directory")

    store = ImageStore(str(blocked), clock=lambda: STAMP)
    assert store.save_data_url(JPEG, name="Ann", kind="photo") is None


def test_discard_removes_saved_file(tmp_path):
    store = _store(tmp_path)
    path = store.save_data_url(JPEG, name="Ann", kind="photo")

    store.discard(path)
    store.discard(path)
    store.discard(None)
    store.discard("https://example.com/a.png")

    assert list(tmp_path.iterdir()) == []
