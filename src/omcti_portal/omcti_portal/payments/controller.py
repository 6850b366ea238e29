from __future__ import annotations

from flask import Flask, g, request

from ..common.responses import json_body, json_endpoint, json_error, json_ok
from ..container import Container
from ..core.enums import UserType
from ..users.guards import ensure_center_access, ensure_student_access, login_required, role_required


def register(app: Flask, container: Container) -> None:
    @app.route("/students/<student_id>/payments", endpoint="student_payments")
    @login_required
    @json_endpoint
    def student_payments(student_id: str):
        ensure_student_access(g.session_context, student_id)
        history = container.fee_service.history(student_id)
        return json_ok(history=history.to_dict())

    @app.route("/students/<student_id>/fees", methods=["POST"], endpoint="pay_fee")
    @role_required(UserType.ADMIN, UserType.CLIENT)
    @json_endpoint
    def pay_fee(student_id: str):
        data = json_body()
        result = container.fee_service.pay_fee(
            student_id=student_id,
            paid_date=data.get("paid_date", ""),
            paid_amount=data.get("paid_amount"),
            previous_dues=data.get("previous_dues"),
            remarks=data.get("remarks", ""),
            send_sms=bool(data.get("send_sms", False)),
            receipt_no=data.get("receipt_no"),
        )
        return json_ok(payment=result.to_dict())

    @app.route("/centers/<center_id>/wallet", endpoint="wallet_statement")
    @role_required(UserType.ADMIN, UserType.CLIENT)
    @json_endpoint
    def wallet_statement(center_id: str):
        ensure_center_access(g.session_context, center_id)
        page = request.args.get("page", 1, type=int)
        statement = container.wallet_service.statement(center_id, page=page)
        return json_ok(statement=statement.to_dict())

    @app.route("/wallet", endpoint="my_wallet")
    @role_required(UserType.CLIENT)
    @json_endpoint
    def my_wallet():
        center_id = g.session_context.center_id
        if not center_id:
            return json_error("No centre is linked to this account", 400)
        page = request.args.get("page", 1, type=int)
        statement = container.wallet_service.statement(center_id, page=page)
        return json_ok(statement=statement.to_dict())
