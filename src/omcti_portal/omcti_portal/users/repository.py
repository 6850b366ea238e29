from __future__ import annotations

from typing import Any, Mapping, Protocol


class AuthRepository(Protocol):
    def verify_login(self, *, user_name: str, user_pass: str) -> Mapping[str, Any]:
        """Return the successful login payload; raise ApiResponseError otherwise."""

        raise NotImplementedError
