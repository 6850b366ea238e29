from __future__ import annotations

import logging
from typing import Any, Mapping

from ..attendance.service import AttendanceService
from ..core.exceptions import ApiError
from .model import CenterStrength, Overview
from .repository import DashboardRepository

log = logging.getLogger(__name__)

_STRENGTH_ID_FIELDS = ("center_id", "center_name", "center_code")


def _to_strength(row: Mapping[str, Any]) -> CenterStrength:
    return CenterStrength(
        center_id=str(row.get("center_id") or ""),
        center_name=str(row.get("center_name") or ""),
        center_code=str(row.get("center_code") or ""),
        counts={k: v for k, v in row.items() if k not in _STRENGTH_ID_FIELDS},
    )


class DashboardService:
    """Use cases: role dashboards. Each section loads independently."""

    def __init__(self, dashboard: DashboardRepository, attendance: AttendanceService):
        self._dashboard = dashboard
        self._attendance = attendance

    def admin_overview(self, user_id: str) -> Overview:
        errors: list[str] = []
        summary = self._load(errors, "summary", lambda: dict(self._dashboard.get_admin_summary(user_id)))
        counts = self._load(errors, "counts", lambda: dict(self._dashboard.get_counts()))
        strength_body = self._load(errors, "strength", lambda: dict(self._dashboard.get_strength())) or {}

        rows = strength_body.get("data") or []
        totals = strength_body.get("totals") or {}
        return Overview(
            summary=summary,
            counts=counts,
            strength=[_to_strength(r) for r in rows if isinstance(r, Mapping)],
            totals=dict(totals) if isinstance(totals, Mapping) else {},
            errors=errors,
        )

    def client_overview(self, center_id: str) -> Overview:
        errors: list[str] = []
        summary = self._load(errors, "summary", lambda: dict(self._dashboard.get_client_summary(center_id)))
        return Overview(summary=summary, errors=errors)

    def student_overview(self, student_id: str, *, center_id: str | None = None) -> dict:
        view = self._attendance.month_view(student_id, center_id=center_id)
        return {
            "student_id": student_id,
            "month": view.month_name,
            "year": view.year,
            "attendance": view.statistics.to_dict(),
            "error": view.error,
        }

    @staticmethod
    def _load(errors: list[str], section: str, fetch):
        try:
            return fetch()
        except ApiError as e:
            log.warning("dashboard section %s unavailable: %s", section, e)
            errors.append(f"{section}: {e}")
            return None
