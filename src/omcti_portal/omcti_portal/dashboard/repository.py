from __future__ import annotations

from typing import Any, Mapping, Protocol


class DashboardRepository(Protocol):
    def get_counts(self) -> Mapping[str, Any]:
        raise NotImplementedError

    def get_strength(self) -> Mapping[str, Any]:
        """Centre-wise strength: {"data": [...], "totals": {...}}."""

        raise NotImplementedError

    def get_admin_summary(self, user_id: str) -> Mapping[str, Any]:
        raise NotImplementedError

    def get_client_summary(self, center_id: str) -> Mapping[str, Any]:
        raise NotImplementedError
