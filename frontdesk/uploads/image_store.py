from __future__ import annotations

import base64
import binascii
import logging
import os
import re
from datetime import datetime
from typing import Callable, Optional

from ..common.datetime_utils import now_local
from ..core.constants import UPLOADS_URL_PREFIX

logger = logging.getLogger(__name__)

_DATA_URL_RE = re.compile(r"^data:image/(?P<subtype>[A-Za-z0-9.+-]+);base64,(?P<payload>.+)$", re.DOTALL)

_EXTENSIONS = {"jpeg": "jpg", "jpg": "jpg", "png": "png", "gif": "gif", "webp": "webp", "bmp": "bmp"}


def sanitize_name(name: str) -> str:
    return re.sub(r"[^a-zA-Z0-9]", "_", name or "") or "unnamed"


class ImageStore:
    """Persists base64 data-URL images from registration forms to disk.

    Files are named `<sanitized name>_<kind>_<epoch ms>.<ext>` and referenced
    by their public path under /uploads.
    """

    def __init__(self, folder: str, *, clock: Callable[[], datetime] = now_local):
        self.folder = os.path.abspath(folder)
        self._clock = clock

    def save_data_url(self, value: Optional[str], *, name: str, kind: str) -> Optional[str]:
        """Store `value` and return its public path.

        Malformed input or a failed write is treated as "no image": it is
        logged and dropped, never raised, so a bad webcam frame cannot block
        a registration.
        """

        if not value:
            return None
        if not isinstance(value, str):
            logger.info("Dropping %s image for %r: not a string", kind, name)
            return None

        match = _DATA_URL_RE.match(value.strip())
        if not match:
            logger.info("Dropping %s image for %r: not a data URL", kind, name)
            return None

        try:
            data = base64.b64decode(match.group("payload"), validate=True)
        except (binascii.Error, ValueError):
            logger.info("Dropping %s image for %r: invalid base64 payload", kind, name)
            return None
        if not data:
            return None

        ext = _EXTENSIONS.get(match.group("subtype").lower(), "jpg")
        stamp = int(self._clock().timestamp() * 1000)
        base = f"{sanitize_name(name)}_{kind}_{stamp}"
        filename = f"{base}.{ext}"

        try:
            os.makedirs(self.folder, exist_ok=True)
            counter = 1
            while os.path.exists(os.path.join(self.folder, filename)):
                filename = f"{base}_{counter}.{ext}"
                counter += 1

            path = os.path.join(self.folder, filename)
            with open(path, "wb") as fh:
                fh.write(data)
        except OSError as e:
            logger.warning("Dropping %s image for %r: %s", kind, name, e)
            return None
        logger.debug("Saved %s image %s", kind, path)
        return f"{UPLOADS_URL_PREFIX}/{filename}"

    def discard(self, public_path: Optional[str]) -> None:
        """Remove a file previously returned by save_data_url; unknown paths are ignored."""

        if not public_path or not public_path.startswith(f"{UPLOADS_URL_PREFIX}/"):
            return
        path = os.path.join(self.folder, os.path.basename(public_path))
        try:
            os.remove(path)
        except FileNotFoundError:
            return
        except OSError as e:
            logger.warning("Could not remove image %s: %s", path, e)
