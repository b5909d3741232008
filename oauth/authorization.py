"""OAuth authorization URL construction"""

import logging
import webbrowser
from typing import Optional
from urllib.parse import urlencode

from config.loader import get_client_id
from settings import AUTHORIZE_ENDPOINT, REDIRECT_URI, SCOPES

logger = logging.getLogger(__name__)


def build_authorize_url(client_id: Optional[str] = None) -> str:
    """Construct the Oura OAuth authorize URL

    Args:
        client_id: OAuth client id; read from CLIENT_ID when omitted

    Returns:
        Full authorization URL
    """
    params = {
        "client_id": client_id if client_id is not None else get_client_id(),
        "redirect_uri": REDIRECT_URI,
        "response_type": "code",
        "scope": SCOPES,
    }

    return f"{AUTHORIZE_ENDPOINT}?{urlencode(params)}"


def open_browser(url: str) -> bool:
    """Open the authorization URL in the default browser

    Returns:
        True if a browser was launched, False otherwise
    """
    try:
        opened = webbrowser.open(url)
    except webbrowser.Error as e:
        logger.warning(f"Could not launch browser: {e}")
        return False

    if not opened:
        logger.warning("No runnable browser found")
    return opened
