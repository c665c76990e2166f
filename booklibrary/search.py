"""Turn a search query into a SearchOutcome."""
from typing import Dict, Any
import logging

from booklibrary.client import OpenLibraryClient
from booklibrary.async_client import AsyncOpenLibraryClient
from booklibrary.errors import CatalogError, ValidationError
from booklibrary.models import (
    SearchQuery, SearchOutcome, Error, Empty, Results, FETCH_FAILED_MESSAGE
)
from booklibrary.parse import parse_search_response

logger = logging.getLogger(__name__)


def outcome_from_response(response_json: Dict[str, Any]) -> SearchOutcome:
    """
    Map a search response onto Empty or Results.

    Raises ParseError if the payload is not the expected shape.
    """
    books = parse_search_response(response_json)
    if not books:
        return Empty()
    return Results(books)


class QueryExecutor:
    """Runs one search per call; never raises."""

    def __init__(self, client: OpenLibraryClient):
        self.client = client

    def execute(self, query: SearchQuery) -> SearchOutcome:
        """
        Run a search against the catalog.

        Args:
            query: Text and search mode

        Returns:
            Results, Empty, or Error with a user-facing message
        """
        try:
            query.validate()
        except ValidationError as e:
            return Error(str(e))

        try:
            outcome = outcome_from_response(self.client.search(query))
        except CatalogError as e:
            logger.error(f"Search for {query.mode.value}={query.text!r} failed: {e}")
            return Error(FETCH_FAILED_MESSAGE)
        except Exception as e:
            logger.error(f"Unexpected error searching {query.mode.value}={query.text!r}: {e}")
            return Error(FETCH_FAILED_MESSAGE)

        logger.info(f"Search {query.mode.value}={query.text!r}: {len(outcome.books)} books")
        return outcome


class AsyncQueryExecutor:
    """Async variant of QueryExecutor."""

    def __init__(self, client: AsyncOpenLibraryClient):
        self.client = client

    async def execute(self, query: SearchQuery) -> SearchOutcome:
        """
        Run a search against the catalog asynchronously.

        Args:
            query: Text and search mode

        Returns:
            Results, Empty, or Error with a user-facing message
        """
        try:
            query.validate()
        except ValidationError as e:
            return Error(str(e))

        try:
            outcome = outcome_from_response(await self.client.search(query))
        except CatalogError as e:
            logger.error(f"Search for {query.mode.value}={query.text!r} failed: {e}")
            return Error(FETCH_FAILED_MESSAGE)
        except Exception as e:
            logger.error(f"Unexpected error searching {query.mode.value}={query.text!r}: {e}")
            return Error(FETCH_FAILED_MESSAGE)

        logger.info(f"Search {query.mode.value}={query.text!r}: {len(outcome.books)} books")
        return outcome
