"""Example: use the service layer directly (no Flask).

Prints the current month's work-schedule grid as text, one week per line.
"""

import importlib

from config import get_settings_module

from src.work_schedule.work_schedule.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(settings=settings)
    view = container.calendar_service.month_view()

    print(view.title)
    print(" ".join(f"{name:>3}" for name in view.header))
    for row in view.weeks:
        print(" ".join("  ." if c.is_blank else (f"{c.day:>2}*" if c.is_today else f"{c.day:>3}") for c in row))


if __name__ == "__main__":
    main()
