import os
import platform
import re
from abc import ABC, abstractmethod
from pathlib import Path
from typing import MutableMapping, NamedTuple, Optional, Union

ACCESS_TOKEN_KEY = "ACCESS_TOKEN"
REFRESH_TOKEN_KEY = "REFRESH_TOKEN"


class CredentialPair(NamedTuple):
    """Bearer credentials for the Oura API (None when absent)"""
    access_token: Optional[str]
    refresh_token: Optional[str]


def upsert_env_line(content: str, key: str, value: str) -> str:
    """Set ``key=value`` in env-file content

    Replaces the first line defining ``key`` in place, otherwise appends a
    new line. Every other line is left untouched.

    Args:
        content: Current file content
        key: Variable name (matched case-sensitively)
        value: New value

    Returns:
        Updated file content
    """
    pattern = re.compile(rf"^{re.escape(key)}=.*$", re.MULTILINE)
    line = f"{key}={value}"

    if pattern.search(content):
        return pattern.sub(lambda _: line, content, count=1)

    if content and not content.endswith("\n"):
        content += "\n"
    return content + line + "\n"


class CredentialStore(ABC):
    """Read/write access to the persisted access and refresh tokens"""

    @abstractmethod
    def read(self) -> CredentialPair:
        """Return the current credentials without touching disk"""

    @abstractmethod
    def write(self, access_token: str, refresh_token: str) -> None:
        """Persist both tokens and make them visible to later reads"""


class EnvFileCredentialStore(CredentialStore):
    """Token storage in a KEY=VALUE env file, mirrored into the process environment

    The env file is the same one the config loader reads at startup, so
    unrelated keys such as CLIENT_ID and CLIENT_SECRET live alongside the
    tokens and are preserved on every write.
    """

    def __init__(self, env_path: Union[str, Path], environ: Optional[MutableMapping[str, str]] = None):
        self.env_path = Path(env_path)
        self._environ = os.environ if environ is None else environ
        self._cache = CredentialPair(
            access_token=self._environ.get(ACCESS_TOKEN_KEY) or None,
            refresh_token=self._environ.get(REFRESH_TOKEN_KEY) or None,
        )

    def _ensure_secure_directory(self):
        """Create parent directory with secure permissions"""
        parent_dir = self.env_path.parent
        if not parent_dir.exists():
            parent_dir.mkdir(parents=True, exist_ok=True)
            # Set directory permissions to 700 on Unix-like systems
            if platform.system() != "Windows":
                os.chmod(parent_dir, 0o700)

    def read(self) -> CredentialPair:
        return self._cache

    def write(self, access_token: str, refresh_token: str) -> None:
        self._ensure_secure_directory()

        content = self.env_path.read_text() if self.env_path.exists() else ""
        content = upsert_env_line(content, ACCESS_TOKEN_KEY, access_token)
        content = upsert_env_line(content, REFRESH_TOKEN_KEY, refresh_token)
        self.env_path.write_text(content)

        # Owner read/write only, the file holds bearer tokens
        if platform.system() != "Windows":
            os.chmod(self.env_path, 0o600)

        self._cache = CredentialPair(access_token=access_token or None, refresh_token=refresh_token or None)
        self._environ[ACCESS_TOKEN_KEY] = access_token
        self._environ[REFRESH_TOKEN_KEY] = refresh_token
