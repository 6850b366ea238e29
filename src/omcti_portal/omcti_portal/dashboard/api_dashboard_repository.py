from __future__ import annotations

from typing import Any, Mapping

from ..api.client import ApiClient, require_success
from ..core.exceptions import ApiResponseError
from .repository import DashboardRepository


def _as_mapping(body: Any, task: str) -> Mapping[str, Any]:
    if not isinstance(body, Mapping):
        raise ApiResponseError("Failed to load data", task=task, body=body)
    return body


class ApiDashboardRepository(DashboardRepository):
    def __init__(self, client: ApiClient):
        self._client = client

    def get_counts(self) -> Mapping[str, Any]:
        return _as_mapping(self._client.get("dash_couts"), "dash_couts")

    def get_strength(self) -> Mapping[str, Any]:
        return _as_mapping(self._client.get("strength"), "strength")

    def get_admin_summary(self, user_id: str) -> Mapping[str, Any]:
        body = require_success(
            self._client.get("admin_dashboard", {"user_id": user_id}),
            task="admin_dashboard",
            default_message="Failed to fetch dashboard data",
        )
        return _as_mapping(body.get("data") or {}, "admin_dashboard")

    def get_client_summary(self, center_id: str) -> Mapping[str, Any]:
        body = require_success(
            self._client.post("client_dashboard", {"center_id": center_id}),
            task="client_dashboard",
            default_message="Failed to fetch dashboard data",
        )
        return _as_mapping(body.get("data") or {}, "client_dashboard")
