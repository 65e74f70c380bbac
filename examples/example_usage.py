"""Example: use the service layer directly (no Flask).

Controllers are thin; the leave rules live in the services.
"""

import importlib
from datetime import date

from config import get_settings_module

from src.hr_portal.hr_portal.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)

    summary = container.leave_service.preview_duration(start_date=date(2025, 8, 11), end_date=date(2025, 8, 17))
    print(summary.describe())
    print(container.leave_service.get_balance(employee_id="u-emp-1"))


if __name__ == "__main__":
    main()
