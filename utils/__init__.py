"""Shared utilities package for ouraclaw"""

from .errors import ApiError, AuthError, ConfigError, OuraClawError
from .storage import (
    CredentialPair,
    CredentialStore,
    EnvFileCredentialStore,
    upsert_env_line,
)

__all__ = [
    "OuraClawError",
    "AuthError",
    "ApiError",
    "ConfigError",
    "CredentialPair",
    "CredentialStore",
    "EnvFileCredentialStore",
    "upsert_env_line",
]
