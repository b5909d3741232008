"""OAuth authentication package for the Oura API"""

from .authorization import build_authorize_url, open_browser
from .callback_server import OAuthCallbackServer
from .flow import run_oauth_flow
from .oneshot import OneShot
from .token_exchange import TokenResponse, exchange_code, post_token_request
from .token_refresh import refresh_tokens

__all__ = [
    # Authorization
    "build_authorize_url",
    "open_browser",
    # Callback Server
    "OAuthCallbackServer",
    "OneShot",
    # Token Exchange
    "TokenResponse",
    "exchange_code",
    "post_token_request",
    # Token Refresh
    "refresh_tokens",
    # Flow
    "run_oauth_flow",
]
