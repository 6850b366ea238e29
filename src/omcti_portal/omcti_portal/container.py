from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import requests

from .api.client import ApiClient, ApiConfig
from .attendance.api_attendance_repository import ApiAttendanceRepository
from .attendance.service import AttendanceService
from .core.constants import DEFAULT_API_BASE_URL, DEFAULT_API_TIMEOUT, DEFAULT_QR_BASE_URL
from .dashboard.api_dashboard_repository import ApiDashboardRepository
from .dashboard.service import DashboardService
from .payments.api_payment_repository import ApiPaymentRepository
from .payments.service import FeeService, WalletService
from .students.api_student_repository import ApiStudentRepository
from .students.service import StudentService
from .users.api_auth_repository import ApiAuthRepository
from .users.service import AuthService


@dataclass(frozen=True)
class Container:
    api_client: ApiClient

    attendance_repo: ApiAttendanceRepository
    auth_repo: ApiAuthRepository
    payments_repo: ApiPaymentRepository
    students_repo: ApiStudentRepository
    dashboard_repo: ApiDashboardRepository

    auth_service: AuthService
    attendance_service: AttendanceService
    fee_service: FeeService
    wallet_service: WalletService
    student_service: StudentService
    dashboard_service: DashboardService


def build_container(*, api_config: dict, default_center_id: str, session: Optional[requests.Session] = None) -> Container:
    config = ApiConfig(
        base_url=str(api_config.get("base_url", DEFAULT_API_BASE_URL)),
        timeout=float(api_config.get("timeout", DEFAULT_API_TIMEOUT)),
        qr_base_url=str(api_config.get("qr_base_url", DEFAULT_QR_BASE_URL)),
    )
    client = ApiClient(config, session=session)

    attendance_repo = ApiAttendanceRepository(client)
    auth_repo = ApiAuthRepository(client)
    payments_repo = ApiPaymentRepository(client)
    students_repo = ApiStudentRepository(client)
    dashboard_repo = ApiDashboardRepository(client)

    attendance_service = AttendanceService(attendance_repo, default_center_id=default_center_id)

    return Container(
        api_client=client,
        attendance_repo=attendance_repo,
        auth_repo=auth_repo,
        payments_repo=payments_repo,
        students_repo=students_repo,
        dashboard_repo=dashboard_repo,
        auth_service=AuthService(auth_repo),
        attendance_service=attendance_service,
        fee_service=FeeService(payments_repo),
        wallet_service=WalletService(payments_repo),
        student_service=StudentService(students_repo),
        dashboard_service=DashboardService(dashboard_repo, attendance_service),
    )
