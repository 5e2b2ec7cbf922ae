"""Date manipulation utilities"""

from datetime import date, datetime
from typing import Any, Optional


def parse_iso_date(value: Any, default: Optional[date] = None) -> Optional[date]:
    """Parse a YYYY-MM-DD (or ISO datetime) value, falling back to default"""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and value:
        try:
            return date.fromisoformat(value[:10])
        except ValueError:
            return default
    return default


def is_past(day: date, today: Optional[date] = None) -> bool:
    """True if day falls strictly before today"""
    return day < (today or date.today())
