"""Async HTTP client for the Open Library API."""
import httpx
from typing import Optional, Dict, Any
import logging

from booklibrary.config import Config
from booklibrary.errors import TransportError, ParseError
from booklibrary.models import SearchQuery
from booklibrary.parse import bibkey

logger = logging.getLogger(__name__)


class AsyncOpenLibraryClient:
    """Async client; same requests and failures as OpenLibraryClient."""

    SEARCH_URL = Config.SEARCH_URL
    BOOKS_URL = Config.BOOKS_URL

    def __init__(
        self,
        timeout: Optional[float] = Config.DEFAULT_TIMEOUT,
        client: Optional[httpx.AsyncClient] = None
    ):
        """
        Initialize async client.

        Args:
            timeout: Request timeout (None waits forever)
            client: Existing httpx client to reuse
        """
        self.timeout = timeout

        # Create async HTTP client; a caller-supplied one keeps its own headers
        self.client = client or httpx.AsyncClient(
            timeout=timeout,
            headers={"User-Agent": Config.USER_AGENT}
        )

    async def search(self, query: SearchQuery) -> Dict[str, Any]:
        """
        Search for books asynchronously.

        Args:
            query: Validated search query

        Returns:
            Raw API response JSON
        """
        params = {query.mode.value: query.text}
        return await self._get_json(self.SEARCH_URL, params)

    async def book_details(self, isbn: str) -> Dict[str, Any]:
        """
        Fetch the data record for an ISBN asynchronously.

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
        return await self._get_json(self.BOOKS_URL, params)

    async def _get_json(self, url: str, params: Dict[str, Any]) -> Dict[str, Any]:
        try:
            logger.info(f"Async request: {url} {params}")
            response = await self.client.get(url, params=params)
        except httpx.TimeoutException as e:
            logger.warning(f"Timeout: {url}")
            raise TransportError(f"Request timed out: {e}") from e
        except httpx.HTTPError as e:
            logger.warning(f"Async request failed: {e}")
            raise TransportError(f"Request failed: {e}") from e

        if not response.is_success:
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

    async def close(self):
        """Close the HTTP client."""
        await self.client.aclose()

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()
