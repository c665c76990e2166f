"""Text rendering of search and detail outcomes."""
import json
from typing import Dict, Any, List
from tabulate import tabulate

from booklibrary.models import (
    SearchOutcome, BookSummary, DetailOutcome, Idle, Loading, Error, Empty,
    Results, DetailFound, DetailMissing, DetailFailed
)

LOADING_MESSAGE = "Loading..."
NO_RESULTS_MESSAGE = "No books found for your search query. Try a different keyword."
START_MESSAGE = "Start by searching for books."
NOT_FOUND_MESSAGE = "No details found for ISBN {isbn}."

FORMATS = ("table", "json", "compact")


def _truncate(value: str, width: int) -> str:
    value = value or ""
    return value[:width] + "..." if len(value) > width else value


def render_books(books: List[BookSummary], format_type: str = "table") -> str:
    """Render a list of summaries in the given format."""
    if format_type == "json":
        return json.dumps(
            [
                {
                    "id": book.id,
                    "title": book.title,
                    "authors": book.authors,
                    "publisher": book.publisher,
                    "cover_url": book.cover_url
                }
                for book in books
            ],
            indent=2
        )

    if format_type == "compact":
        return "\n".join(
            f"{i}. {book.title} - {book.authors}" for i, book in enumerate(books, 1)
        )

    headers = ["Title", "Authors", "Publisher", "Key"]
    rows = [
        [
            _truncate(book.title, 50),
            _truncate(book.authors, 30),
            _truncate(book.publisher, 30),
            book.id
        ]
        for book in books
    ]
    return tabulate(rows, headers=headers, tablefmt="grid")


def render_outcome(outcome: SearchOutcome, format_type: str = "table") -> str:
    """Render exactly one view for the current outcome."""
    if isinstance(outcome, Results):
        return render_books(outcome.books, format_type)
    if isinstance(outcome, Loading):
        return LOADING_MESSAGE
    if isinstance(outcome, Error):
        return f"⚠️  {outcome.message}"
    if isinstance(outcome, Empty):
        return f"🔍 {NO_RESULTS_MESSAGE}"
    if isinstance(outcome, Idle):
        return START_MESSAGE
    raise TypeError(f"Unknown outcome: {outcome!r}")


def _names(entries: Any) -> str:
    # jscmd=data lists look like [{"name": ..., "url": ...}, ...]
    if not entries:
        return "Unknown"
    return ", ".join(e.get("name", "") if isinstance(e, dict) else str(e) for e in entries)


def detail_rows(record: Dict[str, Any]) -> List[List[Any]]:
    """Key fields of a detail record as (label, value) rows."""
    cover = record.get("cover") or {}
    return [
        ["Title", record.get("title", "Unknown")],
        ["Subtitle", record.get("subtitle", "")],
        ["Authors", _names(record.get("authors"))],
        ["Publishers", _names(record.get("publishers"))],
        ["Published", record.get("publish_date", "Unknown")],
        ["Pages", record.get("number_of_pages", "N/A")],
        ["Subjects", _truncate(_names(record.get("subjects")), 80)],
        ["Cover", cover.get("medium", "")],
        ["URL", record.get("url", "")],
    ]


def render_detail(outcome: DetailOutcome, format_type: str = "table") -> str:
    """Render the detail view for a lookup outcome."""
    if isinstance(outcome, DetailFound):
        if format_type == "json":
            return json.dumps(outcome.record, indent=2)
        return tabulate(detail_rows(outcome.record), tablefmt="grid")
    if isinstance(outcome, DetailMissing):
        return f"🔍 {NOT_FOUND_MESSAGE.format(isbn=outcome.isbn)}"
    if isinstance(outcome, DetailFailed):
        return f"⚠️  {outcome.message}"
    raise TypeError(f"Unknown detail outcome: {outcome!r}")
