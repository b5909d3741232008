"""Exception hierarchy shared by the OAuth flow, the API client and the CLI"""

from typing import Optional


class OuraClawError(Exception):
    """Base exception for all ouraclaw errors"""


class ConfigError(OuraClawError):
    """Raised when required configuration (client id/secret) is missing"""


class AuthError(OuraClawError):
    """Raised when authentication cannot be established or renewed

    Covers missing tokens, an OAuth error redirect and failed token
    exchange/refresh requests. For HTTP failures ``status`` and the raw
    response ``body`` are kept for diagnostics.
    """

    def __init__(self, message: str, status: Optional[int] = None, body: Optional[str] = None):
        super().__init__(message)
        self.status = status
        self.body = body


class ApiError(OuraClawError):
    """Raised when the Oura API answers with a non-success status"""

    def __init__(self, message: str, status: int, body: str):
        super().__init__(message)
        self.status = status
        self.body = body
