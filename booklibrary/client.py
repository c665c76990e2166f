"""HTTP client for the Open Library API."""
import requests
from typing import Optional, Dict, Any
import logging

from booklibrary.config import Config
from booklibrary.errors import TransportError, ParseError
from booklibrary.models import SearchQuery
from booklibrary.parse import bibkey

logger = logging.getLogger(__name__)


class OpenLibraryClient:
    """Blocking client for the Open Library search and books endpoints.

    Each call makes exactly one request. Failures are raised as
    TransportError or ParseError; nothing is retried.
    """

    SEARCH_URL = Config.SEARCH_URL
    BOOKS_URL = Config.BOOKS_URL

    def __init__(
        self,
        timeout: Optional[float] = Config.DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None
    ):
        """
        Initialize Open Library client.

        Args:
            timeout: Request timeout in seconds (None waits forever)
            session: Existing session to reuse (a new one is created otherwise)
        """
        self.timeout = timeout

        # Create session for connection pooling
        if session is None:
            session = requests.Session()
            session.headers.update({"User-Agent": Config.USER_AGENT})
        self.session = session

    def search(self, query: SearchQuery) -> Dict[str, Any]:
        """
        Search for books by title or author.

        Args:
            query: Validated search query

        Returns:
            Raw API response JSON
        """
        params = {query.mode.value: query.text}
        return self._get_json(self.SEARCH_URL, params)

    def book_details(self, isbn: str) -> Dict[str, Any]:
        """
        Fetch the data record for an ISBN.

        Args:
            isbn: Book ISBN

        Returns:
            Raw API response JSON, keyed by ``ISBN:<isbn>``
        """
        params = {
            "bibkeys": bibkey(isbn),
            "format": "json",
            "jscmd": "data"
        }
        return self._get_json(self.BOOKS_URL, params)

    def _get_json(self, url: str, params: Dict[str, Any]) -> Dict[str, Any]:
        """
        Make a single GET request and decode the JSON body.

        Args:
            url: Request URL
            params: Query parameters (encoded by requests)

        Returns:
            Decoded response body
        """
        try:
            logger.info(f"Request: {url} {params}")
            response = self.session.get(url, params=params, timeout=self.timeout)
        except requests.exceptions.Timeout as e:
            logger.warning(f"Timeout: {url}")
            raise TransportError(f"Request timed out: {e}") from e
        except requests.exceptions.RequestException as e:
            logger.warning(f"Connection error: {e}")
            raise TransportError(f"Request failed: {e}") from e

        if not 200 <= response.status_code < 300:
            logger.warning(f"Status {response.status_code} for {url}")
            raise TransportError(
                f"Unexpected status {response.status_code}",
                status_code=response.status_code
            )

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Invalid JSON from {url}: {e}")
            raise ParseError(f"Invalid JSON: {e}") from e

    def close(self):
        """Close the session."""
        self.session.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
