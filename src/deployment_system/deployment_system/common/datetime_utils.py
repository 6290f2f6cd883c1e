from __future__ import annotations

from datetime import date, datetime


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mock it easier.
    """
    return datetime.now().date()
