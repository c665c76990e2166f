"""Data models for book searches."""
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, List, Dict, Any

from booklibrary.errors import ValidationError


INVALID_QUERY_MESSAGE = "Please enter a valid search query."
FETCH_FAILED_MESSAGE = "Failed to fetch books. Please check your network connection or try again."


class SearchMode(str, Enum):
    """Which search parameter the query text is sent as."""
    TITLE = "title"
    AUTHOR = "author"


@dataclass(frozen=True)
class SearchQuery:
    """Free-text query plus the field it searches."""
    text: str
    mode: SearchMode = SearchMode.TITLE

    def __post_init__(self):
        # Accept plain strings for the mode ("title" / "author")
        object.__setattr__(self, "mode", SearchMode(self.mode))

    @property
    def is_blank(self) -> bool:
        return not (self.text or "").strip()

    def validate(self):
        """Raise ValidationError if the text is empty after trimming."""
        if self.is_blank:
            raise ValidationError(INVALID_QUERY_MESSAGE)


@dataclass(frozen=True)
class BookSummary:
    """Normalized search hit, ready for display."""
    id: str
    cover_url: str
    title: str
    authors: str
    publisher: str


class SearchOutcome:
    """Base for the single value describing a search session."""

    kind = "outcome"

    @property
    def books(self) -> List[BookSummary]:
        return []


@dataclass(frozen=True)
class Idle(SearchOutcome):
    """Nothing searched yet."""
    kind = "idle"


@dataclass(frozen=True)
class Loading(SearchOutcome):
    """A request is in flight."""
    kind = "loading"


@dataclass(frozen=True)
class Error(SearchOutcome):
    """Validation or transport failure with a user-facing message."""
    message: str
    kind = "error"


@dataclass(frozen=True)
class Empty(SearchOutcome):
    """The catalog returned no hits."""
    kind = "empty"


@dataclass(frozen=True)
class Results(SearchOutcome):
    """Hits in upstream order."""
    items: List[BookSummary] = field(default_factory=list)
    kind = "results"

    @property
    def books(self) -> List[BookSummary]:
        return list(self.items)


class DetailOutcome:
    """Base for the result of a detail lookup."""

    kind = "detail"

    @property
    def record(self) -> Optional[Dict[str, Any]]:
        return None


@dataclass(frozen=True)
class DetailFound(DetailOutcome):
    isbn: str
    data: Dict[str, Any]
    kind = "found"

    @property
    def record(self) -> Optional[Dict[str, Any]]:
        return self.data


@dataclass(frozen=True)
class DetailMissing(DetailOutcome):
    isbn: str
    kind = "missing"


@dataclass(frozen=True)
class DetailFailed(DetailOutcome):
    isbn: str
    message: str
    kind = "failed"
