from __future__ import annotations

from flask import Flask, send_from_directory

from ..container import Container
from ..core.constants import UPLOADS_URL_PREFIX


def register(app: Flask, container: Container) -> None:
    @app.route(f"{UPLOADS_URL_PREFIX}/<path:filename>", methods=["GET"], endpoint="uploaded_file")
    def uploaded_file(filename: str):
        return send_from_directory(container.image_store.folder, filename)
