from __future__ import annotations

from typing import Any, Mapping, Sequence

from ..api.client import ApiClient, require_success
from ..core.exceptions import ApiResponseError
from .model import StudentSummary
from .repository import StudentRepository


class ApiStudentRepository(StudentRepository):
    def __init__(self, client: ApiClient):
        self._client = client

    def search(self, *, value: str, user_id: str) -> Sequence[StudentSummary]:
        body = self._client.post("search_student", {"value": value, "userId": user_id})
        body = require_success(body, task="search_student", default_message="No students found")
        rows = body.get("data")
        if not isinstance(rows, list):
            return []
        return [StudentSummary.from_row(r) for r in rows if isinstance(r, Mapping)]

    def list_pending(self) -> Sequence[StudentSummary]:
        body = self._client.get("pending_student")
        if not isinstance(body, list):
            raise ApiResponseError("Failed to load students", task="pending_student", body=body)
        return [StudentSummary.from_row(r) for r in body if isinstance(r, Mapping)]

    def verify(self, ids: Sequence[str]) -> Mapping[str, Any]:
        body = self._client.post("verify_student", {"ids": list(ids)})
        return body if isinstance(body, Mapping) else {}

    def get_profile(self, student_id: str) -> Mapping[str, Any]:
        body = self._client.post("student_profile", {"student_id": student_id})
        if not isinstance(body, Mapping) or not body.get("id"):
            raise ApiResponseError("Failed to load student profile", task="student_profile", body=body)
        return body
