from __future__ import annotations

import logging
from typing import Iterable, Sequence

from ..common.validators import require_min_length, require_non_empty
from ..core.constants import MIN_SEARCH_CHARS
from ..core.exceptions import ApiResponseError, ValidationError
from .model import SearchResult, StudentSummary
from .repository import StudentRepository
from .search_gate import LatestRequestGate

log = logging.getLogger(__name__)


def filter_students(students: Iterable[StudentSummary], text: str) -> list[StudentSummary]:
    """Case-insensitive match on name, roll, centre code, course code or centre name."""
    needle = (text or "").strip().lower()
    students = list(students)
    if not needle:
        return students
    return [
        s
        for s in students
        if needle in s.student_name.lower()
        or needle in s.student_roll.lower()
        or needle in s.center_code.lower()
        or needle in s.course_code.lower()
        or needle in s.center_name.lower()
    ]


class StudentService:
    def __init__(self, students: StudentRepository, *, gate: LatestRequestGate | None = None):
        self._students = students
        self._gate = gate or LatestRequestGate()

    def search(self, *, user_id: str, query: str) -> SearchResult:
        query = (query or "").strip()
        if not query:
            return SearchResult(query="")
        require_min_length(query, "Search query", MIN_SEARCH_CHARS)
        user_id = require_non_empty(str(user_id or ""), "User session")

        token = self._gate.begin(user_id)
        try:
            rows = list(self._students.search(value=query, user_id=user_id))
        except ApiResponseError:
            rows = []

        if not self._gate.is_current(user_id, token):
            log.debug("dropping stale search %r for user=%s", query, user_id)
            return SearchResult(query=query, stale=True)
        return SearchResult(query=query, students=rows)

    def pending(self, *, text: str = "") -> list[StudentSummary]:
        return filter_students(self._students.list_pending(), text)

    def verify(self, ids: Sequence) -> int:
        if not isinstance(ids, (list, tuple)):
            raise ValidationError("Student ids must be a list")
        cleaned = [str(i).strip() for i in ids if i is not None and str(i).strip()]
        if not cleaned:
            raise ValidationError("Please select at least one student")

        body = self._students.verify(cleaned)
        status = body.get("status")
        if status not in (None, "success"):
            raise ApiResponseError(str(body.get("message") or "Failed to verify students"), task="verify_student", body=body)
        log.info("verified %d student(s)", len(cleaned))
        return len(cleaned)

    def profile(self, student_id: str) -> dict:
        student_id = require_non_empty(str(student_id or ""), "Student id")
        return dict(self._students.get_profile(student_id))
