"""Oura API HTTP client with transparent token refresh"""

import logging
from typing import Any, Dict, Optional

import httpx

from oauth.token_refresh import refresh_tokens
from settings import API_BASE, REQUEST_TIMEOUT
from utils.errors import ApiError, AuthError
from utils.storage import CredentialStore

logger = logging.getLogger(__name__)


class OuraClient:
    """Authenticated access to the Oura v2 API

    Every API call goes through request(). A 401 triggers exactly one
    token refresh followed by exactly one retry; whatever the retry
    returns is final.
    """

    def __init__(self, store: CredentialStore, client: Optional[httpx.AsyncClient] = None):
        self.store = store
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(timeout=REQUEST_TIMEOUT)

    async def _get(self, url: str, params: Dict[str, str], access_token: str) -> httpx.Response:
        return await self.client.get(
            url,
            params=params,
            headers={"Authorization": f"Bearer {access_token}"},
        )

    async def request(self, path: str, params: Optional[Dict[str, str]] = None) -> Any:
        """GET an API path and return the decoded JSON body

        Args:
            path: API path below API_BASE, e.g. /v2/usercollection/sleep
            params: Query parameters

        Returns:
            The parsed JSON response, unchanged

        Raises:
            AuthError: If no access token is stored or the refresh fails
            ApiError: If the API answers with a non-success status
        """
        access_token = self.store.read().access_token
        if not access_token:
            raise AuthError("No access token. Run 'ouraclaw auth' first.")

        url = f"{API_BASE}{path}"
        params = dict(params or {})

        logger.debug(f"GET {path} params={params}")
        response = await self._get(url, params, access_token)

        if response.status_code == 401:
            logger.info("Access token rejected, refreshing...")
            tokens = await refresh_tokens(self.store, self.client)
            response = await self._get(url, params, tokens.access_token)

        if not response.is_success:
            logger.error(f"API request to {path} failed with status {response.status_code}")
            raise ApiError(
                f"API request failed ({response.status_code}): {response.text}",
                status=response.status_code,
                body=response.text,
            )

        return response.json()

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance created it"""
        if self._owns_client:
            await self.client.aclose()

    async def __aenter__(self) -> "OuraClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()
