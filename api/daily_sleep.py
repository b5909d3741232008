"""Daily sleep score collection"""

from typing import Any, Optional

from settings import DAILY_SLEEP_PATH
from .client import OuraClient
from .dates import resolve_date_range


async def fetch_daily_sleep(client: OuraClient, start: Optional[str] = None, end: Optional[str] = None) -> Any:
    """Fetch daily sleep scores between start and end (YYYY-MM-DD, inclusive)"""
    return await client.request(DAILY_SLEEP_PATH, resolve_date_range(start, end))
