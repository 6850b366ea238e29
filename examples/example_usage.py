"""Example: use the service layer directly (without Flask).

Controllers are a thin layer; the attendance month view is built by the service.
"""

import importlib

from config import get_settings_module

from src.omcti_portal.omcti_portal.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(api_config=settings.API_CONFIG, default_center_id=settings.DEFAULT_CENTER_ID)
    view = container.attendance_service.month_view("48936", year=2025, month=2)
    print(view.statistics)


if __name__ == "__main__":
    main()
