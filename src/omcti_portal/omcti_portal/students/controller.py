from __future__ import annotations

from flask import Flask, g, request

from ..common.responses import json_body, json_endpoint, json_ok
from ..container import Container
from ..core.enums import UserType
from ..users.guards import ensure_student_access, login_required, role_required


def register(app: Flask, container: Container) -> None:
    @app.route("/students/search", endpoint="search_students")
    @role_required(UserType.ADMIN, UserType.CLIENT)
    @json_endpoint
    def search_students():
        result = container.student_service.search(
            user_id=g.session_context.user_id,
            query=request.args.get("q", ""),
        )
        return json_ok(result=result.to_dict())

    @app.route("/students/pending", endpoint="pending_students")
    @role_required(UserType.ADMIN)
    @json_endpoint
    def pending_students():
        students = container.student_service.pending(text=request.args.get("q", ""))
        return json_ok(count=len(students), students=[s.to_dict() for s in students])

    @app.route("/students/verify", methods=["POST"], endpoint="verify_students")
    @role_required(UserType.ADMIN)
    @json_endpoint
    def verify_students():
        data = json_body()
        count = container.student_service.verify(data.get("ids") or [])
        return json_ok(message=f"Successfully verified {count} student(s)", count=count)

    @app.route("/students/<student_id>/profile", endpoint="student_profile")
    @login_required
    @json_endpoint
    def student_profile(student_id: str):
        ensure_student_access(g.session_context, student_id)
        return json_ok(profile=container.student_service.profile(student_id))
