from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, MutableMapping, Optional

from ..core.enums import UserType

_USER_ID = "user_id"
_USER_TYPE = "user_type"
_CENTER_ID = "center_id"

_HOME_ENDPOINTS = {
    UserType.ADMIN: "admin_dashboard",
    UserType.CLIENT: "client_dashboard",
    UserType.STUDENT: "student_dashboard",
}


@dataclass(frozen=True)
class SessionContext:
    """Who is logged in: the only state shared between screens.

    Loaded from and saved to a session mapping (the Flask session) with an
    explicit lifecycle instead of screens reading raw keys on their own.
    """

    user_id: str
    user_type: UserType
    center_id: Optional[str] = None

    @classmethod
    def load(cls, store: Mapping[str, Any]) -> Optional["SessionContext"]:
        user_id = store.get(_USER_ID)
        raw_type = store.get(_USER_TYPE)
        if not user_id or not raw_type:
            return None
        try:
            user_type = UserType(raw_type)
        except ValueError:
            return None
        center_id = store.get(_CENTER_ID)
        return cls(user_id=str(user_id), user_type=user_type, center_id=str(center_id) if center_id else None)

    def save(self, store: MutableMapping[str, Any]) -> None:
        store[_USER_ID] = self.user_id
        store[_USER_TYPE] = self.user_type.value
        if self.center_id:
            store[_CENTER_ID] = self.center_id
        else:
            store.pop(_CENTER_ID, None)

    @staticmethod
    def clear(store: MutableMapping[str, Any]) -> None:
        for key in (_USER_ID, _USER_TYPE, _CENTER_ID):
            store.pop(key, None)

    def has_role(self, *types: UserType) -> bool:
        return self.user_type in types

    def home_endpoint(self) -> str:
        return _HOME_ENDPOINTS[self.user_type]

    def to_dict(self) -> dict:
        return {
            "user_id": self.user_id,
            "user_type": self.user_type.value,
            "center_id": self.center_id,
            "home": self.home_endpoint(),
        }
