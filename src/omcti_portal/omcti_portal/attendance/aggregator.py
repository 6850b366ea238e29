"""Attendance calendar aggregation.

Pure functions over a student's attendance history (one AttendanceMonth per
month) and the holiday list of the displayed month. Holidays only fill days
that have no stored code; they never override an explicit one.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional, Sequence

from ..common.datetime_utils import days_in_month, first_weekday_sunday_based, iso_day
from ..core.constants import CALENDAR_FULL_CELLS, CALENDAR_SHORT_CELLS, MONTH_KEYS
from ..core.enums import DayStatus
from .model import AttendanceMonth, CalendarCell, Holiday, MonthlyStatistics, StatusStyle

NO_DATA_STYLE = StatusStyle(color="#E0E0E0", label="")

_PALETTE = {
    DayStatus.PRESENT.value: StatusStyle(color="#4CAF50", label="P"),
    DayStatus.ABSENT.value: StatusStyle(color="#f44336", label="A"),
    DayStatus.SUNDAY.value: StatusStyle(color="#234785", label="S"),
    DayStatus.HOLIDAY.value: StatusStyle(color="#FF9800", label="H"),
}

_COUNTER_FIELDS = {
    DayStatus.PRESENT.value: "present",
    DayStatus.ABSENT.value: "absent",
    DayStatus.SUNDAY.value: "sunday",
    DayStatus.HOLIDAY.value: "holiday",
}


def _code(value: Any) -> Optional[str]:
    if isinstance(value, DayStatus):
        return value.value
    return value if isinstance(value, str) else None


def month_key(year: int, month: int) -> str:
    return f"{MONTH_KEYS[month - 1]}_{year}"


def find_month(attendance_data: Sequence[AttendanceMonth], year: int, month: int) -> Optional[AttendanceMonth]:
    key = month_key(year, month)
    for record in attendance_data:
        if record.att_month == key:
            return record
    return None


def _holiday_dates(holidays: Iterable[Holiday]) -> set[str]:
    return {h.date for h in holidays}


def holiday_title(day: int, year: int, month: int, holidays: Iterable[Holiday]) -> Optional[str]:
    target = iso_day(year, month, day)
    for h in holidays:
        if h.date == target:
            return h.title
    return None


def lookup_status(
    day: int,
    year: int,
    month: int,
    attendance_data: Sequence[AttendanceMonth],
    holidays: Iterable[Holiday] = (),
) -> Optional[Any]:
    """Stored code for the day, "H" for an unrecorded holiday, else None."""
    record = find_month(attendance_data, year, month)
    if record is None:
        return None

    value = record.day(day)
    if value is None and iso_day(year, month, day) in _holiday_dates(holidays):
        return DayStatus.HOLIDAY.value
    return value


def compute_statistics(
    attendance_data: Sequence[AttendanceMonth],
    year: int,
    month: int,
    holidays: Iterable[Holiday] = (),
) -> MonthlyStatistics:
    record = find_month(attendance_data, year, month)
    if record is None:
        return MonthlyStatistics()

    holiday_dates = _holiday_dates(holidays)
    counts = {"present": 0, "absent": 0, "sunday": 0, "holiday": 0}
    total = 0

    for day in range(1, days_in_month(year, month) + 1):
        value = record.day(day)
        if value is None:
            if iso_day(year, month, day) in holiday_dates:
                counts["holiday"] += 1
                total += 1
            continue

        total += 1
        field_name = _COUNTER_FIELDS.get(_code(value))
        if field_name:
            counts[field_name] += 1
        elif value:
            # unknown codes count as present
            counts["present"] += 1

    percentage = counts["present"] * 100 // total if total > 0 else 0
    return MonthlyStatistics(total=total, percentage=percentage, **counts)


def build_calendar_grid(year: int, month: int) -> list[Optional[int]]:
    grid: list[Optional[int]] = [None] * first_weekday_sunday_based(year, month)
    grid.extend(range(1, days_in_month(year, month) + 1))
    return grid


def pad_calendar_grid(grid: Sequence[Optional[int]]) -> list[Optional[int]]:
    size = CALENDAR_SHORT_CELLS if len(grid) <= CALENDAR_SHORT_CELLS else CALENDAR_FULL_CELLS
    return list(grid) + [None] * (size - len(grid))


def status_style(status: Optional[Any]) -> StatusStyle:
    if status is None:
        return NO_DATA_STYLE
    style = _PALETTE.get(_code(status))
    return style or StatusStyle(color=_PALETTE[DayStatus.PRESENT.value].color, label="")


def build_cells(
    year: int,
    month: int,
    attendance_data: Sequence[AttendanceMonth],
    holidays: Sequence[Holiday] = (),
) -> list[CalendarCell]:
    cells = []
    for day in pad_calendar_grid(build_calendar_grid(year, month)):
        if day is None:
            cells.append(CalendarCell(day=None))
            continue
        status = lookup_status(day, year, month, attendance_data, holidays)
        style = status_style(status)
        cells.append(
            CalendarCell(
                day=day,
                status=status,
                color=style.color,
                label=style.label,
                holiday_title=holiday_title(day, year, month, holidays),
            )
        )
    return cells
