"""Resolve an ISBN into the catalog's detail record."""
from typing import Optional, Dict, Any
import logging

from booklibrary.client import OpenLibraryClient
from booklibrary.async_client import AsyncOpenLibraryClient
from booklibrary.errors import CatalogError
from booklibrary.models import DetailOutcome, DetailFound, DetailMissing, DetailFailed
from booklibrary.parse import parse_detail_response

logger = logging.getLogger(__name__)

INVALID_ISBN_MESSAGE = "Please enter a valid ISBN."


def _outcome(isbn: str, response_json: Dict[str, Any]) -> DetailOutcome:
    record = parse_detail_response(response_json, isbn)
    if record is None:
        logger.info(f"No detail record for ISBN {isbn}")
        return DetailMissing(isbn)
    return DetailFound(isbn, record)


class DetailResolver:
    """
    Looks up a single book by ISBN.

    ``lookup`` returns a DetailOutcome so callers can tell a failure from a
    missing record. ``resolve`` collapses both into None.
    """

    def __init__(self, client: OpenLibraryClient):
        self.client = client

    def lookup(self, isbn: str) -> DetailOutcome:
        """
        Fetch the detail record for an ISBN.

        Args:
            isbn: Book ISBN (surrounding whitespace is ignored)

        Returns:
            DetailFound, DetailMissing, or DetailFailed
        """
        isbn = (isbn or "").strip()
        if not isbn:
            return DetailFailed(isbn, INVALID_ISBN_MESSAGE)

        try:
            return _outcome(isbn, self.client.book_details(isbn))
        except CatalogError as e:
            logger.error(f"Error fetching book details for ISBN {isbn}: {e}")
            return DetailFailed(isbn, f"Failed to fetch book details: {e}")
        except Exception as e:
            logger.error(f"Unexpected error fetching book details for ISBN {isbn}: {e}")
            return DetailFailed(isbn, f"Failed to fetch book details: {e}")

    def resolve(self, isbn: str) -> Optional[Dict[str, Any]]:
        """
        Fetch the detail record for an ISBN.

        Args:
            isbn: Book ISBN

        Returns:
            The record as returned by the catalog, or None if it is missing
            or the lookup failed
        """
        return self.lookup(isbn).record


class AsyncDetailResolver:
    """Async variant of DetailResolver."""

    def __init__(self, client: AsyncOpenLibraryClient):
        self.client = client

    async def lookup(self, isbn: str) -> DetailOutcome:
        """
        Fetch the detail record for an ISBN asynchronously.

        Args:
            isbn: Book ISBN (surrounding whitespace is ignored)

        Returns:
            DetailFound, DetailMissing, or DetailFailed
        """
        isbn = (isbn or "").strip()
        if not isbn:
            return DetailFailed(isbn, INVALID_ISBN_MESSAGE)

        try:
            return _outcome(isbn, await self.client.book_details(isbn))
        except CatalogError as e:
            logger.error(f"Error fetching book details for ISBN {isbn}: {e}")
            return DetailFailed(isbn, f"Failed to fetch book details: {e}")
        except Exception as e:
            logger.error(f"Unexpected error fetching book details for ISBN {isbn}: {e}")
            return DetailFailed(isbn, f"Failed to fetch book details: {e}")

    async def resolve(self, isbn: str) -> Optional[Dict[str, Any]]:
        """
        Fetch the detail record for an ISBN asynchronously.

        Args:
            isbn: Book ISBN

        Returns:
            The record, or None if it is missing or the lookup failed
        """
        outcome = await self.lookup(isbn)
        return outcome.record
