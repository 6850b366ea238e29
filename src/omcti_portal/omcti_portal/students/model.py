from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Mapping, Optional


def _s(value: Any) -> str:
    return "" if value is None else str(value)


@dataclass(frozen=True)
class StudentSummary:
    """List row used by search, pending and verified student screens."""

    student_id: str
    student_name: str
    student_roll: str
    course_code: str = ""
    course_name: str = ""
    center_name: str = ""
    center_code: str = ""
    student_mobile: str = ""
    status: str = ""
    grade: Optional[str] = None
    percentage: Optional[str] = None

    @classmethod
    def from_row(cls, r: Mapping[str, Any]) -> "StudentSummary":
        return cls(
            student_id=_s(r.get("student_id") or r.get("id")),
            student_name=_s(r.get("student_name")),
            student_roll=_s(r.get("student_roll")),
            course_code=_s(r.get("course_code")),
            course_name=_s(r.get("course_name")),
            center_name=_s(r.get("center_name")),
            center_code=_s(r.get("center_code")),
            student_mobile=_s(r.get("student_mobile")),
            status=_s(r.get("status")),
            grade=r.get("grade"),
            percentage=None if r.get("percentage") is None else _s(r.get("percentage")),
        )

    @property
    def accessible(self) -> bool:
        """Profile can be opened: the row has an id and is not still pending."""
        return bool(self.student_id) and self.status.strip().upper() != "PENDING"

    def to_dict(self) -> dict:
        return {**asdict(self), "accessible": self.accessible}


@dataclass(frozen=True)
class SearchResult:
    query: str
    students: list[StudentSummary] = field(default_factory=list)
    stale: bool = False

    def to_dict(self) -> dict:
        return {
            "query": self.query,
            "stale": self.stale,
            "count": len(self.students),
            "students": [s.to_dict() for s in self.students],
        }
