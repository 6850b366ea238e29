from __future__ import annotations

import pytest

from src.omcti_portal.omcti_portal.core.exceptions import ApiResponseError, ValidationError
from src.omcti_portal.omcti_portal.students.model import SearchResult, StudentSummary
from src.omcti_portal.omcti_portal.students.search_gate import LatestRequestGate
from src.omcti_portal.omcti_portal.students.service import StudentService, filter_students


def student(sid, name, roll="R1", center_code="C01", course_code="DCA", center_name="Main"):
    return StudentSummary(
        student_id=sid,
        student_name=name,
        student_roll=roll,
        course_code=course_code,
        center_code=center_code,
        center_name=center_name,
    )


class FakeStudentsRepo:
    def __init__(self, rows=None, on_search=None, verify_reply=None):
        self.rows = rows or []
        self.on_search = on_search
        self.verify_reply = verify_reply if verify_reply is not None else {"status": "success"}
        self.searches = []
        self.verified = None

    def search(self, *, value, user_id):
        self.searches.append((value, user_id))
        if self.on_search:
            self.on_search()
        return self.rows

    def list_pending(self):
        return self.rows

    def verify(self, ids):
        self.verified = list(ids)
        return self.verify_reply

    def get_profile(self, student_id):
        return {"id": student_id, "student_name": "Asha"}


def test_search_trims_and_returns_rows():
    repo = FakeStudentsRepo([student("1", "Asha")])

    result = StudentService(repo).search(user_id="7", query="  asha ")

    assert result.students[0].student_name == "Asha"
    assert repo.searches == [("asha", "7")]


def test_empty_query_returns_nothing_without_request():
    repo = FakeStudentsRepo()

    result = StudentService(repo).search(user_id="7", query="   ")

    assert result.students == []
    assert repo.searches == []


def test_short_query_rejected():
    with pytest.raises(ValidationError):
        StudentService(FakeStudentsRepo()).search(user_id="7", query="as")


def test_reply_superseded_by_newer_search_is_stale():
    gate = LatestRequestGate()
    repo = FakeStudentsRepo([student("1", "Asha")])
    # a newer search from the same user starts while this one is in flight
    repo.on_search = lambda: gate.begin("7")

    result = StudentService(repo, gate=gate).search(user_id="7", query="asha")

    assert result.stale is True
    assert result.students == []


def test_searches_of_other_users_do_not_interfere():
    gate = LatestRequestGate()
    repo = FakeStudentsRepo([student("1", "Asha")])
    repo.on_search = lambda: gate.begin("other-user")

    result = StudentService(repo, gate=gate).search(user_id="7", query="asha")

    assert result.stale is False
    assert len(result.students) == 1


def test_non_success_search_reply_gives_empty_list():
    class Failing(FakeStudentsRepo):
        def search(self, *, value, user_id):
            raise ApiResponseError("No students found")

    result = StudentService(Failing()).search(user_id="7", query="zzz")

    assert result.students == []
    assert result.stale is False


def test_pending_filter_matches_any_listed_field():
    rows = [
        student("1", "Asha Das", roll="OM-101"),
        student("2", "Ravi", center_code="BBSR", center_name="Bhubaneswar"),
        student("3", "Mina", course_code="PGDCA"),
    ]

    assert [s.student_id for s in filter_students(rows, "om-1")] == ["1"]
    assert [s.student_id for s in filter_students(rows, "bbsr")] == ["2"]
    assert [s.student_id for s in filter_students(rows, "pgd")] == ["3"]
    assert [s.student_id for s in filter_students(rows, "bhuban")] == ["2"]
    assert len(filter_students(rows, "  ")) == 3


def test_verify_requires_selection_and_sends_ids():
    repo = FakeStudentsRepo()
    svc = StudentService(repo)

    with pytest.raises(ValidationError):
        svc.verify([])

    assert svc.verify([11, "12"]) == 2
    assert repo.verified == ["11", "12"]


def test_verify_error_status_raises():
    repo = FakeStudentsRepo(verify_reply={"status": "error", "message": "Already verified"})

    with pytest.raises(ApiResponseError, match="Already verified"):
        StudentService(repo).verify(["1"])


def test_pending_or_id_less_rows_are_not_accessible():
    pending = StudentSummary.from_row({"student_id": "5", "student_name": "Asha", "status": " pending "})
    no_id = StudentSummary.from_row({"student_name": "Ravi", "status": "DISPATCHED"})
    ready = StudentSummary.from_row({"student_id": "6", "student_name": "Mina", "status": "COMPLETED"})

    assert pending.accessible is False
    assert no_id.accessible is False
    assert ready.accessible is True
    assert [s["accessible"] for s in SearchResult(query="asha", students=[pending, ready]).to_dict()["students"]] == [False, True]
