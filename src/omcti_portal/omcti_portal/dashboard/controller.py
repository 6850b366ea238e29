from __future__ import annotations

from flask import Flask, g

from ..common.responses import json_endpoint, json_error, json_ok
from ..container import Container
from ..core.enums import UserType
from ..users.guards import role_required


def register(app: Flask, container: Container) -> None:
    @app.route("/dashboard/admin", endpoint="admin_dashboard")
    @role_required(UserType.ADMIN)
    @json_endpoint
    def admin_dashboard():
        overview = container.dashboard_service.admin_overview(g.session_context.user_id)
        return json_ok(dashboard=overview.to_dict())

    @app.route("/dashboard/client", endpoint="client_dashboard")
    @role_required(UserType.CLIENT)
    @json_endpoint
    def client_dashboard():
        center_id = g.session_context.center_id
        if not center_id:
            return json_error("No centre is linked to this account", 400)
        overview = container.dashboard_service.client_overview(center_id)
        return json_ok(dashboard=overview.to_dict())

    @app.route("/dashboard/student", endpoint="student_dashboard")
    @role_required(UserType.STUDENT)
    @json_endpoint
    def student_dashboard():
        ctx = g.session_context
        return json_ok(dashboard=container.dashboard_service.student_overview(ctx.user_id, center_id=ctx.center_id))
