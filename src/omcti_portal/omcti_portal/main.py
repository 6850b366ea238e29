from __future__ import annotations

import importlib
import logging
from typing import Optional

import requests
from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import build_container
from .attendance.controller import register as register_attendance
from .dashboard.controller import register as register_dashboard
from .payments.controller import register as register_payments
from .students.controller import register as register_students
from .users.controller import register as register_users

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def create_app(*, settings_module: Optional[str] = None, http_session: Optional[requests.Session] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    api_config = getattr(settings, "API_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(level=getattr(settings, "LOG_LEVEL", "INFO"), format=LOG_FORMAT)
    log = logging.getLogger("omcti_portal")
    log.info("settings=%s api=%s", settings_module, api_config.get("base_url"))

    container = build_container(
        api_config=api_config,
        default_center_id=str(getattr(settings, "DEFAULT_CENTER_ID", "")),
        session=http_session,
    )
    app.extensions["omcti_container"] = container

    register_users(app, container)
    register_attendance(app, container)
    register_payments(app, container)
    register_students(app, container)
    register_dashboard(app, container)

    return app
