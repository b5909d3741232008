"""Detailed sleep session collection"""

from typing import Any, Optional

from settings import SLEEP_PATH
from .client import OuraClient
from .dates import resolve_date_range


async def fetch_sleep(client: OuraClient, start: Optional[str] = None, end: Optional[str] = None) -> Any:
    """Fetch sleep sessions between start and end (YYYY-MM-DD, inclusive)"""
    return await client.request(SLEEP_PATH, resolve_date_range(start, end))
