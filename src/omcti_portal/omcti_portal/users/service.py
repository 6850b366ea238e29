from __future__ import annotations

import logging

from ..common.validators import require_non_empty, require_text
from ..core.enums import UserType
from ..core.exceptions import ApiResponseError, AuthenticationError, ValidationError
from .repository import AuthRepository
from .session import SessionContext

log = logging.getLogger(__name__)


class AuthService:
    """Use case: authenticate user (login) against the remote API."""

    def __init__(self, auth: AuthRepository):
        self._auth = auth

    def authenticate(self, username: str, password: str) -> SessionContext:
        username = require_text(username, "Username")
        password = require_text(password, "Password")
        if not username.strip() or not password.strip():
            raise ValidationError("Please enter both username and password to continue.")
        username = require_non_empty(username, "Username")

        try:
            result = self._auth.verify_login(user_name=username, user_pass=password)
        except ApiResponseError:
            raise AuthenticationError("The credentials you entered are invalid.")

        try:
            user_type = UserType(result.get("user_type"))
        except ValueError:
            log.warning("login for %s returned unsupported user_type=%r", username, result.get("user_type"))
            raise AuthenticationError("Unsupported account type")

        user_id = result.get("id")
        if user_id in (None, ""):
            raise AuthenticationError("Login response did not include a user id")

        center_id = None
        if user_type == UserType.CLIENT:
            center_id = self._client_center_id(result)
            if not center_id:
                raise AuthenticationError("No centre is linked to this account")

        log.info("user %s logged in as %s", user_id, user_type.value)
        return SessionContext(user_id=str(user_id), user_type=user_type, center_id=center_id)

    @staticmethod
    def _client_center_id(result) -> str | None:
        data = result.get("data")
        if isinstance(data, list) and data and isinstance(data[0], dict):
            value = data[0].get("center_id")
            return str(value) if value not in (None, "") else None
        return None
