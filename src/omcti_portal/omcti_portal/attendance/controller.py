from __future__ import annotations

import io
from urllib.parse import urlencode

import qrcode
from flask import Flask, g, request, send_file

from ..common.responses import json_endpoint, json_ok
from ..container import Container
from ..users.guards import ensure_student_access, login_required


def register(app: Flask, container: Container) -> None:
    @app.route("/students/<student_id>/attendance", endpoint="student_attendance")
    @login_required
    @json_endpoint
    def student_attendance(student_id: str):
        ctx = g.session_context
        ensure_student_access(ctx, student_id)

        year = request.args.get("year", type=int)
        month = request.args.get("month", type=int)
        step = request.args.get("step", 0, type=int)
        center_id = request.args.get("center_id") or ctx.center_id

        if step:
            view = container.attendance_service.adjacent_month_view(
                student_id, year=year, month=month, delta=step, center_id=center_id
            )
        else:
            view = container.attendance_service.month_view(student_id, year=year, month=month, center_id=center_id)
        return json_ok(attendance=view.to_dict())

    @app.route("/students/<student_id>/qr", endpoint="student_qr")
    @login_required
    @json_endpoint
    def student_qr(student_id: str):
        ensure_student_access(g.session_context, student_id)

        url = f"{container.api_client.config.qr_base_url}?{urlencode({'student_id': student_id})}"
        img = qrcode.make(url)
        buf = io.BytesIO()
        img.save(buf)
        buf.seek(0)
        return send_file(buf, mimetype="image/png", download_name=f"student_{student_id}_qr.png")
