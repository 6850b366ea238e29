from __future__ import annotations

from typing import Any, Mapping

from ..api.client import ApiClient, require_success
from .repository import AuthRepository


class ApiAuthRepository(AuthRepository):
    def __init__(self, client: ApiClient):
        self._client = client

    def verify_login(self, *, user_name: str, user_pass: str) -> Mapping[str, Any]:
        body = self._client.post("verify_login", {"user_name": user_name, "user_pass": user_pass})
        return require_success(body, task="verify_login", default_message="Invalid credentials")
