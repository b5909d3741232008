"""Configuration loader for ouraclaw

Loads configuration from multiple sources with the following priority:
1. Environment variables (highest priority)
2. The env file (OURACLAW_ENV_PATH, or ~/.config/ouraclaw/.env)
3. Hardcoded defaults (lowest priority)

The env file doubles as the credential file: CLIENT_ID, CLIENT_SECRET,
ACCESS_TOKEN and REFRESH_TOKEN all live there.
"""

import logging
import os
from pathlib import Path
from typing import Any, Optional
from dotenv import load_dotenv

from utils.errors import ConfigError

# Set up logger for config loader
logger = logging.getLogger(__name__)

ENV_PATH_VAR = "OURACLAW_ENV_PATH"


def get_env_path() -> Path:
    """Resolve the env file path

    Returns:
        OURACLAW_ENV_PATH if set, otherwise ``.env`` in the per-user
        config directory (XDG_CONFIG_HOME or ~/.config)
    """
    override = os.getenv(ENV_PATH_VAR)
    if override:
        return Path(override).expanduser()

    config_home = os.getenv("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return Path(config_home) / "ouraclaw" / ".env"


class ConfigLoader:
    """Handles loading configuration from various sources"""

    def __init__(self, env_path: Optional[str] = None):
        """Initialize the config loader

        Args:
            env_path: Optional path to the env file.
                     Defaults to the result of get_env_path().
        """
        self.env_path = Path(env_path) if env_path else get_env_path()
        self._load_env_file()

    def _load_env_file(self):
        """Load environment variables from the env file if it exists"""
        if self.env_path.exists():
            # Already-set variables win over the file
            load_dotenv(dotenv_path=self.env_path, override=False)
            logger.debug(f"Loaded environment variables from {self.env_path}")
        else:
            logger.debug(f"Env file not found at {self.env_path}, using environment variables and defaults only")

    def get(self, env_var: str, default: Any) -> Any:
        """Get a configuration value with priority: env > default

        Args:
            env_var: Environment variable name to check
            default: Default value if not found in environment

        Returns:
            The configuration value from environment or default
        """
        env_value = os.getenv(env_var)
        if env_value is not None:
            # Try to parse as appropriate type
            if isinstance(default, bool):
                return env_value.lower() in ('true', '1', 'yes')
            elif isinstance(default, int):
                try:
                    return int(env_value)
                except ValueError:
                    logger.warning(f"Failed to parse {env_var}={env_value} as int, using default: {default}")
                    return default
            elif isinstance(default, float):
                try:
                    return float(env_value)
                except ValueError:
                    logger.warning(f"Failed to parse {env_var}={env_value} as float, using default: {default}")
                    return default
            return env_value
        return default


# Create a global instance
_config_loader = None

def get_config_loader() -> ConfigLoader:
    """Get or create the global ConfigLoader instance"""
    global _config_loader
    if _config_loader is None:
        _config_loader = ConfigLoader()
    return _config_loader


def require_env(name: str) -> str:
    """Read a required environment variable

    Raises:
        ConfigError: If the variable is unset or empty
    """
    value = os.getenv(name)
    if not value:
        raise ConfigError(f"Missing environment variable: {name}")
    return value


def get_client_id() -> str:
    """OAuth client id registered with Oura"""
    return require_env("CLIENT_ID")


def get_client_secret() -> str:
    """OAuth client secret registered with Oura"""
    return require_env("CLIENT_SECRET")
