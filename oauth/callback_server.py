"""
Local OAuth callback server

Oura redirects the browser to REDIRECT_URI with either ``code`` or
``error`` in the query string. The first of those to arrive decides the
outcome of the flow; any other request (favicon, reloads) gets a
placeholder page.
"""
import asyncio
import html
import logging
from typing import Optional

from aiohttp import web

from settings import OAUTH_CALLBACK_HOST, OAUTH_CALLBACK_PORT
from utils.errors import AuthError
from .oneshot import OneShot

logger = logging.getLogger(__name__)

SUCCESS_PAGE = """
<html>
    <body>
        <h1>Authorization successful!</h1>
        <p>You can close this tab and return to the terminal.</p>
    </body>
</html>
"""

FAILURE_PAGE = """
<html>
    <body>
        <h1>Authorization failed</h1>
        <p>Error: {error}</p>
        <p>You can close this tab.</p>
    </body>
</html>
"""

WAITING_PAGE = "Waiting for authorization..."


class OAuthCallbackServer:
    """Local HTTP server capturing the OAuth redirect"""

    def __init__(self, port: int = OAUTH_CALLBACK_PORT, host: str = OAUTH_CALLBACK_HOST):
        self.host = host
        self.port = port
        self.result: OneShot[str] = OneShot()
        self.app = web.Application()
        self.runner: Optional[web.AppRunner] = None

        # Every path is answered; the redirect itself lands on "/"
        self.app.router.add_get("/{tail:.*}", self._handle_callback)

    async def _handle_callback(self, request: web.Request) -> web.Response:
        """Handle OAuth callback request"""
        error = request.query.get("error")
        code = request.query.get("code")

        if error:
            if self.result.set_exception(AuthError(f"OAuth error: {error}")):
                logger.warning(f"Authorization denied: {error}")
            return web.Response(
                text=FAILURE_PAGE.format(error=html.escape(error)),
                content_type="text/html",
                status=400,
            )

        if code:
            if self.result.set_result(code):
                logger.info("Authorization code received")
            else:
                logger.debug("Ignoring authorization code after the flow was already decided")
            return web.Response(text=SUCCESS_PAGE, content_type="text/html")

        return web.Response(text=WAITING_PAGE)

    async def start(self) -> None:
        """Start the callback server

        The runner is cleaned up again if binding the port fails.
        """
        self.runner = web.AppRunner(self.app)
        await self.runner.setup()

        site = web.TCPSite(self.runner, host=self.host, port=self.port)
        try:
            await site.start()
        except Exception:
            await self.runner.cleanup()
            self.runner = None
            raise
        logger.info(f"OAuth callback server listening on {self.host}:{self.port}")

    async def wait_for_code(self, timeout: Optional[float] = None) -> str:
        """
        Wait for the authorization code.

        Args:
            timeout: Maximum time to wait in seconds (None or 0 waits forever)

        Returns:
            The authorization code

        Raises:
            AuthError: If the redirect carried an error or the wait timed out
        """
        try:
            return await self.result.wait(timeout)
        except asyncio.TimeoutError:
            raise AuthError(f"Timed out after {timeout} seconds waiting for authorization")

    async def stop(self) -> None:
        """Stop the callback server"""
        if self.runner:
            await self.runner.cleanup()
            self.runner = None
            logger.debug("OAuth callback server stopped")

    async def __aenter__(self) -> "OAuthCallbackServer":
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.stop()
