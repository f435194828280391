import logging
from typing import Optional
from urllib.parse import urlparse

import requests

logger = logging.getLogger(__name__)

ALLOWED_SCHEMES = ('http', 'https')


def parse_server_url(server_url: Optional[str]) -> Optional[str]:
    """Return the normalised URL, or None when it cannot address a player server."""
    if not server_url:
        return None
    parsed = urlparse(server_url.strip())
    if parsed.scheme not in ALLOWED_SCHEMES or not parsed.hostname:
        return None
    try:
        parsed.port
    except ValueError:
        return None
    return parsed.geturl()


class PlayerServerClient:
    """
    Talks to the HTTP server a player registered.

    The gateway only sends lifecycle notifications; the per-tick game
    dialogue belongs to the game engine.
    """

    def __init__(self, timeout: float = 2.0, enabled: bool = True, session: requests.Session = None):
        self.timeout = timeout
        self.enabled = enabled
        self.session = session or requests.Session()

    def _endpoint(self, server_url: str, path: str) -> str:
        return f"{server_url.rstrip('/')}/{path}"

    def notify_reset(self, server_url: str, cause: str) -> bool:
        """Tell the player's server its game was reset. Returns False when it could not be reached."""
        if not self.enabled:
            return True

        url = self._endpoint(server_url, 'reset')
        try:
            resp = self.session.get(url, params={'cause': cause}, timeout=self.timeout)
            resp.raise_for_status()
            return True
        except requests.exceptions.RequestException as e:
            logger.warning(f"Reset notification to {url} failed: {e}")
            return False
