from __future__ import annotations

from flask import Flask, g, session, url_for

from ..common.responses import json_body, json_endpoint, json_ok
from ..container import Container
from .guards import login_required
from .session import SessionContext


def register(app: Flask, container: Container) -> None:
    @app.route("/login", methods=["POST"], endpoint="login")
    @json_endpoint
    def login():
        data = json_body(allow_form=True)
        ctx = container.auth_service.authenticate(data.get("username", ""), data.get("password", ""))

        SessionContext.clear(session)
        ctx.save(session)
        return json_ok(user=ctx.to_dict(), redirect=url_for(ctx.home_endpoint()))

    @app.route("/logout", methods=["POST"], endpoint="logout")
    def logout():
        SessionContext.clear(session)
        return json_ok(message="Logged out")

    @app.route("/me", endpoint="me")
    @login_required
    def me():
        return json_ok(user=g.session_context.to_dict())
