from __future__ import annotations

import logging
from calendar import month_name
from typing import Optional

from ..common.datetime_utils import now_local, shift_month
from ..common.validators import require_non_empty
from ..core.exceptions import ApiError, ValidationError
from . import aggregator
from .model import MonthHolidays, MonthlyStatistics, MonthView
from .repository import AttendanceRepository

log = logging.getLogger(__name__)


class AttendanceService:
    """Use case: month calendar of a student's attendance with holiday overlay."""

    def __init__(self, attendance: AttendanceRepository, *, default_center_id: str):
        self._attendance = attendance
        self._default_center_id = str(default_center_id)

    def month_view(
        self,
        student_id: str,
        *,
        year: Optional[int] = None,
        month: Optional[int] = None,
        center_id: Optional[str] = None,
    ) -> MonthView:
        student_id = require_non_empty(str(student_id or ""), "Student id")
        today = now_local()
        year = today.year if year is None else int(year)
        month = today.month if month is None else int(month)
        if not 1 <= month <= 12:
            raise ValidationError("Month must be between 1 and 12")
        if not 1 <= year <= 9999:
            raise ValidationError("Year is not valid")

        center_id = str(center_id or self._default_center_id)
        try:
            history = self._attendance.get_attendance_months(student_id)
        except ApiError as e:
            log.warning("attendance unavailable for student=%s: %s", student_id, e)
            return self._empty_view(student_id, year, month, error=str(e))

        try:
            month_holidays = self._attendance.get_holidays(center_id=center_id, year=year, month=month)
        except ApiError as e:
            log.info("no holidays for center=%s %04d-%02d: %s", center_id, year, month, e)
            month_holidays = MonthHolidays()
        holidays = list(month_holidays.holidays)

        return MonthView(
            student_id=student_id,
            year=year,
            month=month,
            month_name=month_name[month],
            month_key=aggregator.month_key(year, month),
            cells=aggregator.build_cells(year, month, history, holidays),
            statistics=aggregator.compute_statistics(history, year, month, holidays),
            holidays=holidays,
            holiday_count=month_holidays.count,
        )

    def adjacent_month_view(
        self,
        student_id: str,
        *,
        delta: int,
        year: Optional[int] = None,
        month: Optional[int] = None,
        center_id: Optional[str] = None,
    ) -> MonthView:
        """Previous (delta=-1) or next (delta=1) month; re-fetches like a fresh load.

        A missing year or month is taken from the current month.
        """
        today = now_local()
        year = today.year if year is None else int(year)
        month = today.month if month is None else int(month)
        if not 1 <= month <= 12:
            raise ValidationError("Month must be between 1 and 12")
        new_year, new_month = shift_month(year, month, int(delta))
        return self.month_view(student_id, year=new_year, month=new_month, center_id=center_id)

    def _empty_view(self, student_id: str, year: int, month: int, *, error: Optional[str]) -> MonthView:
        # Calendar without statuses, zeroed statistics.
        cells = aggregator.build_cells(year, month, [], [])
        return MonthView(
            student_id=student_id,
            year=year,
            month=month,
            month_name=month_name[month],
            month_key=aggregator.month_key(year, month),
            cells=cells,
            statistics=MonthlyStatistics(),
            holidays=[],
            error=error,
        )
