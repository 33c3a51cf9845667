# utils/date_parser.py
from __future__ import annotations
from datetime import date, datetime
from typing import Any, Optional

import dateparser

FORMATS = ["%Y-%m-%d", "%Y/%m/%d", "%d.%m.%Y", "%d/%m/%Y"]


def parse_date(value: Any) -> Optional[date]:
    """
    Parses trip dates from form input. Supports:
    - date / datetime objects
    - YYYY-MM-DD
    - YYYY/MM/DD
    - DD.MM.YYYY
    - DD/MM/YYYY
    - Natural language dates (e.g., "12 March 2027", "next friday") via dateparser
    If parsing fails, returns None.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    v = str(value).strip()
    if not v:
        return None

    for fmt in FORMATS:
        try:
            return datetime.strptime(v, fmt).date()
        except ValueError:
            pass

    parsed = dateparser.parse(v, settings={"PREFER_DATES_FROM": "future"})
    if parsed:
        return parsed.date()
    return None
