"""Command handlers for the CLI"""

import json
from typing import Optional

from rich.console import Console

from api import OuraClient, fetch_daily_sleep, fetch_sleep
from oauth import run_oauth_flow
from utils.storage import CredentialStore


async def handle_auth(store: CredentialStore, console: Console) -> None:
    """Run the browser authorization flow and save the tokens"""
    await run_oauth_flow(store, console=console)


async def handle_score(store: CredentialStore, start: Optional[str], end: Optional[str]) -> str:
    """Fetch daily sleep scores and return them as pretty-printed JSON"""
    async with OuraClient(store) as client:
        data = await fetch_daily_sleep(client, start, end)
    return json.dumps(data, indent=2)


async def handle_sleep(store: CredentialStore, start: Optional[str], end: Optional[str]) -> str:
    """Fetch sleep sessions and return them as pretty-printed JSON"""
    async with OuraClient(store) as client:
        data = await fetch_sleep(client, start, end)
    return json.dumps(data, indent=2)
