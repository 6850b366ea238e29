from __future__ import annotations

from typing import Any, Mapping, Protocol, Sequence

from .model import StudentSummary


class StudentRepository(Protocol):
    def search(self, *, value: str, user_id: str) -> Sequence[StudentSummary]:
        raise NotImplementedError

    def list_pending(self) -> Sequence[StudentSummary]:
        raise NotImplementedError

    def verify(self, ids: Sequence[str]) -> Mapping[str, Any]:
        raise NotImplementedError

    def get_profile(self, student_id: str) -> Mapping[str, Any]:
        raise NotImplementedError
