"""OAuth token refresh functionality"""

import logging
from typing import Optional

import httpx

from config.loader import get_client_id, get_client_secret
from utils.errors import AuthError
from utils.storage import CredentialStore
from .token_exchange import TokenResponse, post_token_request

logger = logging.getLogger(__name__)


async def refresh_tokens(
    store: CredentialStore,
    client: Optional[httpx.AsyncClient] = None,
) -> TokenResponse:
    """Exchange the stored refresh token for a new token pair

    Oura rotates refresh tokens, so both tokens are written back on success.

    Args:
        store: Credential store holding the refresh token
        client: Optional HTTP client

    Returns:
        The token endpoint response

    Raises:
        AuthError: If no refresh token is stored or the refresh is rejected
        ConfigError: If CLIENT_ID or CLIENT_SECRET is missing
    """
    refresh_token = store.read().refresh_token
    if not refresh_token:
        raise AuthError("No refresh token available. Run 'ouraclaw auth' first.")

    data = {
        "grant_type": "refresh_token",
        "refresh_token": refresh_token,
        "client_id": get_client_id(),
        "client_secret": get_client_secret(),
    }

    logger.info("Attempting to refresh OAuth tokens...")
    response = await post_token_request(data, client)

    if not response.is_success:
        logger.error(f"Token refresh failed with status {response.status_code}")
        raise AuthError(
            f"Token refresh failed ({response.status_code}): {response.text}",
            status=response.status_code,
            body=response.text,
        )

    tokens = TokenResponse.from_dict(response.json())
    store.write(tokens.access_token, tokens.refresh_token)

    logger.info("Successfully refreshed OAuth tokens")
    return tokens
