"""Parse and normalize Open Library API responses."""
from typing import Dict, Any, List, Optional

from booklibrary.config import Config
from booklibrary.errors import ParseError
from booklibrary.models import BookSummary


def cover_url(
    cover_id: Optional[int],
    covers_url: str = Config.COVERS_URL,
    placeholder: str = Config.PLACEHOLDER_COVER_URL
) -> str:
    """
    Build the medium-size cover image URL for a cover identifier.

    Args:
        cover_id: Open Library ``cover_i`` value (may be missing)
        covers_url: Base URL of the covers service
        placeholder: URL used when there is no cover

    Returns:
        Image URL
    """
    if not cover_id:
        return placeholder
    return f"{covers_url.rstrip('/')}/b/id/{cover_id}-M.jpg"


def _list_field(doc: Dict[str, Any], name: str) -> List[Any]:
    """Return a list-valued hit field, [] when missing."""
    value = doc.get(name)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ParseError(f"Expected a list for '{name}', got {type(value).__name__}")
    return value


def parse_hit(doc: Dict[str, Any]) -> BookSummary:
    """
    Parse a single hit from the search endpoint.

    Args:
        doc: One entry of the ``docs`` list

    Returns:
        BookSummary with display defaults filled in
    """
    if not isinstance(doc, dict):
        raise ParseError(f"Expected a hit object, got {type(doc).__name__}")

    authors = _list_field(doc, "author_name")
    publishers = _list_field(doc, "publisher")

    return BookSummary(
        id=doc.get("key"),
        cover_url=cover_url(doc.get("cover_i")),
        title=doc.get("title"),
        authors=", ".join(authors) if authors else "Unknown",
        publisher=publishers[0] if publishers else "Unknown"
    )


def parse_search_response(response_json: Dict[str, Any]) -> List[BookSummary]:
    """
    Parse a full search response.

    Args:
        response_json: Complete API response JSON

    Returns:
        List of BookSummary objects in upstream order (empty if no hits)
    """
    if not isinstance(response_json, dict):
        raise ParseError("Search response is not a JSON object")

    docs = response_json.get("docs")
    if not isinstance(docs, list):
        raise ParseError("Search response has no 'docs' list")

    try:
        return [parse_hit(doc) for doc in docs]
    except (TypeError, AttributeError) as e:
        # e.g. author_name holding non-strings
        raise ParseError(f"Malformed hit: {e}") from e


def bibkey(isbn: str) -> str:
    """Key the books endpoint uses for an ISBN."""
    return f"ISBN:{isbn}"


def parse_detail_response(response_json: Dict[str, Any], isbn: str) -> Optional[Dict[str, Any]]:
    """Pull the record for ``isbn`` out of a books endpoint response."""
    if not isinstance(response_json, dict):
        raise ParseError("Detail response is not a JSON object")
    return response_json.get(bibkey(isbn))
