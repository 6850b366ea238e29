from __future__ import annotations

from typing import Protocol, Sequence

from .model import AttendanceMonth, MonthHolidays


class AttendanceRepository(Protocol):
    def get_attendance_months(self, student_id: str) -> Sequence[AttendanceMonth]:
        """Full attendance history of a student, one record per month."""

        raise NotImplementedError

    def get_holidays(self, *, center_id: str, year: int, month: int) -> MonthHolidays:
        raise NotImplementedError
