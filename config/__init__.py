"""Configuration management package for ouraclaw"""

from .loader import (
    ConfigLoader,
    get_client_id,
    get_client_secret,
    get_config_loader,
    get_env_path,
    require_env,
)

__all__ = [
    "ConfigLoader",
    "get_config_loader",
    "get_env_path",
    "require_env",
    "get_client_id",
    "get_client_secret",
]
