"""Example: logging a night shift through the service layer (no Flask).

Controllers stay thin; the business rules live in the services and the pure
``timeentries`` modules.
"""

import importlib
from datetime import date, timedelta

from config import get_settings_module

from src.tyotrack.tyotrack.common.logging import setup_logging
from src.tyotrack.tyotrack.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    container = build_container(db_config=settings.DB_CONFIG)

    result = container.time_entry_service.log_time(
        user_id=2,
        work_date=date.today() - timedelta(days=1),
        start_time="22:00",
        end_time="02:00",
        project_id=1,
        description="Night maintenance",
    )
    print(result.message, result.entry_ids)


if __name__ == "__main__":
    main()
