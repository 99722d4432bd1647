from __future__ import annotations

from flask import Flask, jsonify

from ..common.datetime_utils import now_local, parse_iso_date
from ..common.http import query_arg
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/reports/summary", methods=["GET"], endpoint="report_summary")
    def report_summary():
        day = query_arg("date")
        summary = container.report_service.daily_summary(parse_iso_date(day) if day else now_local().date())
        return jsonify(summary.to_dict())
