"""Print a student's attendance calendar for one month.

Usage: python scripts/month_calendar.py STUDENT_ID [--year 2025 --month 2] [--center 273]
"""

from __future__ import annotations

import argparse
import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.omcti_portal.omcti_portal.attendance.model import MonthView
from src.omcti_portal.omcti_portal.container import build_container
from src.omcti_portal.omcti_portal.core.exceptions import DomainError


def render(view: MonthView) -> str:
    lines = [f"{view.month_name} {view.year}".center(35), " Su   Mo   Tu   We   Th   Fr   Sa"]
    week = []
    for cell in view.cells:
        if cell.day is None:
            week.append("    ")
        else:
            week.append(f"{cell.day:>2}{cell.label or '.':<2}")
        if len(week) == 7:
            lines.append(" ".join(week).rstrip())
            week = []

    s = view.statistics
    lines.append("")
    lines.append(
        f"present={s.present} absent={s.absent} holiday={s.holiday} sunday={s.sunday} "
        f"total={s.total} attendance={s.percentage}%"
    )
    for h in view.holidays:
        lines.append(f"  {h.date}  {h.title}")
    if view.error:
        lines.append(f"error: {view.error}")
    return "\n".join(lines)


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("student_id")
    parser.add_argument("--year", type=int)
    parser.add_argument("--month", type=int)
    parser.add_argument("--center", default=None)
    args = parser.parse_args()

    settings = importlib.import_module(get_settings_module())
    container = build_container(api_config=settings.API_CONFIG, default_center_id=settings.DEFAULT_CENTER_ID)
    try:
        view = container.attendance_service.month_view(
            args.student_id, year=args.year, month=args.month, center_id=args.center
        )
    except DomainError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    print(render(view))
    return 1 if view.error else 0


if __name__ == "__main__":
    raise SystemExit(main())
