"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; the dashboard numbers and KPI scores come from
the same services the views call.
"""

import importlib

from config import get_settings_module

from src.hr_console.hr_console.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)

    stats = container.dashboard_service.get_stats()
    for key, value in stats.to_dict().items():
        print(f"{key:>20}: {value}")

    employees = {e.id: e.full_name for e in container.employees.list()}
    for summary in container.kpi_scores.summaries():
        print(f"{employees.get(summary.employee_id, summary.employee_id)}: {summary.display}")


if __name__ == "__main__":
    main()
