"""OAuth token exchange functionality"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx

from config.loader import get_client_id, get_client_secret
from settings import REDIRECT_URI, REQUEST_TIMEOUT, TOKEN_ENDPOINT
from utils.errors import AuthError
from utils.storage import CredentialStore

logger = logging.getLogger(__name__)


@dataclass
class TokenResponse:
    """OAuth token response from the Oura token endpoint

    Attributes:
        access_token: Bearer token for API requests
        refresh_token: Token for obtaining a new access token
        token_type: Token type, normally "Bearer"
        expires_in: Access token lifetime in seconds (informational only)
    """
    access_token: str
    refresh_token: str
    token_type: str = "Bearer"
    expires_in: int = 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TokenResponse":
        """Build from the token endpoint JSON payload"""
        return cls(
            access_token=data["access_token"],
            refresh_token=data["refresh_token"],
            token_type=data.get("token_type", "Bearer"),
            expires_in=data.get("expires_in", 0),
        )


async def post_token_request(
    data: Dict[str, str],
    client: Optional[httpx.AsyncClient] = None,
) -> httpx.Response:
    """POST a form-encoded grant to the token endpoint

    Args:
        data: Form fields of the grant
        client: HTTP client to use; a short-lived one is created when omitted

    Returns:
        The raw token endpoint response
    """
    headers = {"Content-Type": "application/x-www-form-urlencoded"}
    if client is not None:
        return await client.post(TOKEN_ENDPOINT, data=data, headers=headers)

    async with httpx.AsyncClient(timeout=REQUEST_TIMEOUT) as client:
        return await client.post(TOKEN_ENDPOINT, data=data, headers=headers)


async def exchange_code(
    code: str,
    store: CredentialStore,
    client: Optional[httpx.AsyncClient] = None,
) -> TokenResponse:
    """Exchange authorization code for tokens

    Args:
        code: Authorization code from the callback redirect
        store: Credential store receiving the new tokens
        client: Optional HTTP client

    Returns:
        The token endpoint response

    Raises:
        ConfigError: If CLIENT_ID or CLIENT_SECRET is missing
        AuthError: If the token endpoint rejects the code
    """
    data = {
        "grant_type": "authorization_code",
        "code": code,
        "redirect_uri": REDIRECT_URI,
        "client_id": get_client_id(),
        "client_secret": get_client_secret(),
    }

    logger.info("Exchanging authorization code for tokens...")
    response = await post_token_request(data, client)

    if not response.is_success:
        logger.error(f"Token exchange failed with status {response.status_code}")
        raise AuthError(
            f"Token exchange failed ({response.status_code}): {response.text}",
            status=response.status_code,
            body=response.text,
        )

    tokens = TokenResponse.from_dict(response.json())
    store.write(tokens.access_token, tokens.refresh_token)

    logger.info("OAuth tokens obtained and saved")
    return tokens
