from __future__ import annotations

from datetime import datetime

import pytest

from src.omcti_portal.omcti_portal.attendance.model import AttendanceMonth, Holiday, MonthHolidays
from src.omcti_portal.omcti_portal.core.exceptions import ApiConnectionError
from tests.fakes import FakeSession


@pytest.fixture
def fixed_now():
    return datetime(2025, 2, 14, 9, 30, 0)


@pytest.fixture
def feb_2025_history():
    return [
        AttendanceMonth(att_month="jan_2025", days={1: "H", 2: "P", 3: "P"}),
        AttendanceMonth(att_month="feb_2025", days={1: "P", 2: "A"}),
    ]


@pytest.fixture
def founders_day():
    return [Holiday(date="2025-02-03", title="Founders Day")]


class InMemoryAttendance:
    def __init__(self, history=None, holidays=None, *, holiday_count=None, history_error=None, holidays_error=None):
        self.history = list(history or [])
        self.holidays = list(holidays or [])
        self.holiday_count = len(self.holidays) if holiday_count is None else holiday_count
        self.history_error = history_error
        self.holidays_error = holidays_error
        self.holiday_calls = []

    def get_attendance_months(self, student_id):
        if self.history_error:
            raise self.history_error
        return self.history

    def get_holidays(self, *, center_id, year, month):
        self.holiday_calls.append((center_id, year, month))
        if self.holidays_error:
            raise self.holidays_error
        return MonthHolidays(holidays=self.holidays, count=self.holiday_count)


@pytest.fixture
def in_memory_attendance():
    return InMemoryAttendance


@pytest.fixture
def offline_error():
    return ApiConnectionError("Unable to reach server (attendance)")


@pytest.fixture
def fake_http():
    return FakeSession()


@pytest.fixture
def app(fake_http):
    from src.omcti_portal.omcti_portal.main import create_app

    app = create_app(settings_module="config.testing", http_session=fake_http)
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def login_as(client):
    def _login(user_id="1", user_type="ADMIN", center_id=None):
        with client.session_transaction() as sess:
            sess["user_id"] = user_id
            sess["user_type"] = user_type
            if center_id:
                sess["center_id"] = center_id
        return client

    return _login
