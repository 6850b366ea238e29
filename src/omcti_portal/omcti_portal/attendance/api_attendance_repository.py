from __future__ import annotations

import logging
from typing import Mapping, Sequence

from ..api.client import ApiClient, require_success
from ..core.exceptions import ApiResponseError
from .model import AttendanceMonth, Holiday, MonthHolidays
from .repository import AttendanceRepository

log = logging.getLogger(__name__)


class ApiAttendanceRepository(AttendanceRepository):
    def __init__(self, client: ApiClient):
        self._client = client

    def get_attendance_months(self, student_id: str) -> Sequence[AttendanceMonth]:
        body = self._client.post("attendance", {"student_id": student_id})
        if not isinstance(body, list):
            raise ApiResponseError("No attendance data found", task="attendance", body=body)
        return [AttendanceMonth.from_row(r) for r in body if isinstance(r, Mapping)]

    def get_holidays(self, *, center_id: str, year: int, month: int) -> MonthHolidays:
        body = self._client.post(
            "get_holidays",
            {"center_id": str(center_id), "month": f"{month:02d}", "year": str(year)},
        )
        body = require_success(body, task="get_holidays", default_message="No holiday data found")
        rows = body.get("data")
        if not isinstance(rows, list):
            raise ApiResponseError("No holiday data found", task="get_holidays", body=body)
        holidays = [
            Holiday(date=str(r.get("date") or ""), title=str(r.get("title") or ""))
            for r in rows
            if isinstance(r, Mapping)
        ]
        return MonthHolidays(holidays=holidays, count=_count(body.get("count"), default=len(holidays)))


def _count(value, *, default: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default
