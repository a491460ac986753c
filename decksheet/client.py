"""HTTP client for the KeyForge deck API and card image hosts."""

import logging
from typing import Optional

import requests

from decksheet.config import Settings
from decksheet.errors import NetworkError

logger = logging.getLogger(__name__)


class KeyforgeClient:
    """Thin wrapper over a requests session.

    Every transport failure, including a non-2xx status, is raised as
    ``NetworkError`` with the requests exception chained. Requests are not
    retried.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        session: Optional[requests.Session] = None,
    ):
        """Initialize client.

        Args:
            settings: Endpoint, timeout and User-Agent (default Settings())
            session: Session to reuse (default: a new requests.Session)
        """
        self.settings = settings or Settings()
        self._session = session or requests.Session()
        self._session.headers.update({"User-Agent": self.settings.user_agent})

    def _get(self, url: str) -> requests.Response:
        logger.debug("GET %s", url)
        try:
            response = self._session.get(url, timeout=self.settings.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise NetworkError(f"Request failed: {url}") from e
        return response

    def get_text(self, url: str) -> str:
        """Download a UTF-8 document."""
        response = self._get(url)
        response.encoding = "utf-8"
        return response.text

    def get_bytes(self, url: str) -> bytes:
        """Download raw bytes."""
        return self._get(url).content

    def get_deck_text(self, deck_id: str) -> str:
        """Download the raw deck JSON, with linked card definitions, for ``deck_id``."""
        url = self.settings.deck_url_for(deck_id)
        logger.info("Fetching deck %s", deck_id)
        return self.get_text(url)

    def close(self) -> None:
        self._session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
