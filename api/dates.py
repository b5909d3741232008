"""Default date range for collection queries"""

from datetime import date, datetime, timedelta, timezone
from typing import Dict, Optional


def format_date(value: date) -> str:
    return value.strftime("%Y-%m-%d")


def get_default_date_range(today: Optional[date] = None) -> Dict[str, str]:
    """Yesterday through today, as UTC calendar dates"""
    today = today or datetime.now(timezone.utc).date()
    yesterday = today - timedelta(days=1)

    return {
        "start_date": format_date(yesterday),
        "end_date": format_date(today),
    }


def resolve_date_range(start: Optional[str] = None, end: Optional[str] = None) -> Dict[str, str]:
    """Fill in whichever bound is missing from the default range"""
    defaults = get_default_date_range()
    return {
        "start_date": start or defaults["start_date"],
        "end_date": end or defaults["end_date"],
    }
