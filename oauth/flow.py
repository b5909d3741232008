"""Interactive OAuth authorization-code flow"""

import asyncio
import logging
from typing import Callable, Optional

import httpx
from rich.console import Console

from settings import OAUTH_CALLBACK_PORT, OAUTH_CALLBACK_TIMEOUT
from utils.storage import CredentialStore
from .authorization import build_authorize_url, open_browser
from .callback_server import OAuthCallbackServer
from .token_exchange import TokenResponse, exchange_code

logger = logging.getLogger(__name__)


async def run_oauth_flow(
    store: CredentialStore,
    console: Optional[Console] = None,
    client: Optional[httpx.AsyncClient] = None,
    port: int = OAUTH_CALLBACK_PORT,
    timeout: Optional[float] = OAUTH_CALLBACK_TIMEOUT,
    launch_browser: Callable[[str], bool] = open_browser,
) -> TokenResponse:
    """Run the browser-based authorization flow end to end

    The callback server is always stopped before returning, including when
    the redirect carries an error or the code exchange fails.

    Args:
        store: Credential store receiving the tokens
        console: Console for user-facing messages (stderr by default)
        client: Optional HTTP client for the token exchange
        port: Local callback port
        timeout: Seconds to wait for the redirect (None or 0 waits forever)
        launch_browser: Opens a URL, returning False when it could not

    Returns:
        The token endpoint response
    """
    console = console or Console(stderr=True)
    auth_url = build_authorize_url()

    async with OAuthCallbackServer(port=port) as server:
        console.print("[bold]Opening browser for authorization...[/bold]")
        console.print(auth_url, soft_wrap=True)

        # Console browsers block until they exit, keep the listener serving
        if not await asyncio.to_thread(launch_browser, auth_url):
            console.print("[yellow]Could not open browser automatically, open the URL above manually[/yellow]")

        code = await server.wait_for_code(timeout)
        tokens = await exchange_code(code, store, client)

    console.print("[green]Authorization successful![/green] Tokens saved.")
    return tokens
