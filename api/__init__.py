"""Oura API access package"""

from .client import OuraClient
from .daily_sleep import fetch_daily_sleep
from .dates import get_default_date_range, resolve_date_range
from .sleep import fetch_sleep

__all__ = [
    "OuraClient",
    "fetch_daily_sleep",
    "fetch_sleep",
    "get_default_date_range",
    "resolve_date_range",
]
