from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Mapping, Optional

from ..core.constants import MAX_DAYS_IN_MONTH


@dataclass(frozen=True)
class AttendanceMonth:
    """One student-month of attendance, keyed by `att_month` ("jan_2025").

    `days` maps day-of-month to the stored code; missing days mean no data.
    """

    att_month: str
    days: Mapping[int, Any] = field(default_factory=dict)

    def day(self, day: int) -> Any:
        return self.days.get(day)

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "AttendanceMonth":
        days = {}
        for d in range(1, MAX_DAYS_IN_MONTH + 1):
            value = row.get(f"d_{d}")
            if value is not None:
                days[d] = value
        return cls(att_month=str(row.get("att_month") or ""), days=days)


@dataclass(frozen=True)
class Holiday:
    date: str
    title: str


@dataclass(frozen=True)
class MonthHolidays:
    """Holidays of one centre-month; `count` is the server's figure."""

    holidays: list[Holiday] = field(default_factory=list)
    count: int = 0


@dataclass(frozen=True)
class MonthlyStatistics:
    present: int = 0
    absent: int = 0
    holiday: int = 0
    sunday: int = 0
    total: int = 0
    percentage: int = 0

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class StatusStyle:
    color: str
    label: str


@dataclass(frozen=True)
class CalendarCell:
    day: Optional[int]
    status: Optional[str] = None
    color: Optional[str] = None
    label: str = ""
    holiday_title: Optional[str] = None


@dataclass(frozen=True)
class MonthView:
    """Read-model for one month of the attendance calendar."""

    student_id: str
    year: int
    month: int
    month_name: str
    month_key: str
    cells: list[CalendarCell]
    statistics: MonthlyStatistics
    holidays: list[Holiday]
    holiday_count: int = 0
    error: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "student_id": self.student_id,
            "year": self.year,
            "month": self.month,
            "month_name": self.month_name,
            "month_key": self.month_key,
            "cells": [asdict(c) for c in self.cells],
            "statistics": self.statistics.to_dict(),
            "holidays": [asdict(h) for h in self.holidays],
            "holiday_count": self.holiday_count,
            "error": self.error,
        }
