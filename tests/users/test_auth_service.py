from __future__ import annotations

import pytest

from src.omcti_portal.omcti_portal.core.enums import UserType
from src.omcti_portal.omcti_portal.core.exceptions import ApiResponseError, AuthenticationError, ValidationError
from src.omcti_portal.omcti_portal.users.service import AuthService
from src.omcti_portal.omcti_portal.users.session import SessionContext


class FakeAuthRepo:
    def __init__(self, result=None, error=None):
        self.result = result
        self.error = error
        self.calls = []

    def verify_login(self, *, user_name, user_pass):
        self.calls.append((user_name, user_pass))
        if self.error:
            raise self.error
        return self.result


def test_client_login_takes_centre_from_first_row():
    repo = FakeAuthRepo({"status": "success", "user_type": "CLIENT", "id": 12, "data": [{"center_id": 273}]})

    ctx = AuthService(repo).authenticate(" centre1 ", "pw")

    assert ctx == SessionContext(user_id="12", user_type=UserType.CLIENT, center_id="273")
    assert repo.calls == [("centre1", "pw")]
    assert ctx.home_endpoint() == "client_dashboard"


def test_student_login_has_no_centre():
    repo = FakeAuthRepo({"status": "success", "user_type": "STUDENT", "id": 48936})

    ctx = AuthService(repo).authenticate("s", "pw")

    assert ctx.center_id is None
    assert ctx.home_endpoint() == "student_dashboard"


def test_missing_credentials_rejected_before_calling_api():
    repo = FakeAuthRepo()

    with pytest.raises(ValidationError):
        AuthService(repo).authenticate("user", "  ")
    assert repo.calls == []


def test_failed_login_raises_authentication_error():
    repo = FakeAuthRepo(error=ApiResponseError("Invalid credentials"))

    with pytest.raises(AuthenticationError):
        AuthService(repo).authenticate("user", "wrong")


def test_client_without_centre_rejected():
    repo = FakeAuthRepo({"status": "success", "user_type": "CLIENT", "id": 3, "data": []})

    with pytest.raises(AuthenticationError):
        AuthService(repo).authenticate("user", "pw")


def test_unknown_user_type_rejected():
    repo = FakeAuthRepo({"status": "success", "user_type": "GUEST", "id": 3})

    with pytest.raises(AuthenticationError):
        AuthService(repo).authenticate("user", "pw")


def test_non_text_username_rejected_before_calling_api():
    repo = FakeAuthRepo()

    with pytest.raises(ValidationError):
        AuthService(repo).authenticate(12345, "pw")
    assert repo.calls == []
