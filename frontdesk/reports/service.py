from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta
from typing import Dict

from .repository import ReportRepository


@dataclass(frozen=True)
class DailySummary:
    day: date
    visitors_registered: int
    visitors_entered: int
    visitors_exited: int
    visitors_inside: int
    employees_inside: int
    visitors_by_purpose: Dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "date": self.day.isoformat(),
            "visitorsRegistered": self.visitors_registered,
            "visitorsEntered": self.visitors_entered,
            "visitorsExited": self.visitors_exited,
            "visitorsInside": self.visitors_inside,
            "employeesInside": self.employees_inside,
            "visitorsByPurpose": self.visitors_by_purpose,
        }


class ReportService:
    def __init__(self, reports: ReportRepository):
        self._reports = reports

    def daily_summary(self, day: date) -> DailySummary:
        start = datetime.combine(day, time.min)
        end = start + timedelta(days=1)
        return DailySummary(
            day=day,
            visitors_registered=self._reports.count_registered(start, end),
            visitors_entered=self._reports.count_entered(start, end),
            visitors_exited=self._reports.count_exited(start, end),
            visitors_inside=self._reports.count_visitors_inside(),
            employees_inside=self._reports.count_employees_inside(),
            visitors_by_purpose=self._reports.visitors_by_purpose(start, end),
        )
