"""Tests for the blocking query executor."""
import pytest
import requests

from booklibrary.models import (
    SearchQuery, SearchMode, Error, Empty, Results, FETCH_FAILED_MESSAGE, INVALID_QUERY_MESSAGE
)
from booklibrary.search import QueryExecutor

from fakes import SAMPLE_SEARCH


@pytest.mark.parametrize("text", ["", "   ", "\t\n"])
def test_blank_query_makes_no_request(sync_client, text):
    """Whitespace-only text is rejected before any network call."""
    client = sync_client(payload=SAMPLE_SEARCH)
    
    outcome = QueryExecutor(client).execute(SearchQuery(text))
    
    assert outcome == Error(INVALID_QUERY_MESSAGE)
    assert outcome.books == []
    client.session.get.assert_not_called()


def test_title_search_results(sync_client):
    client = sync_client(payload=SAMPLE_SEARCH)
    
    outcome = QueryExecutor(client).execute(SearchQuery("the lord of the rings"))
    
    assert isinstance(outcome, Results)
    assert [book.id for book in outcome.books] == ["/works/OL27448W", "/works/OL45804W"]
    assert outcome.books[0].cover_url == "https://covers.openlibrary.org/b/id/12345-M.jpg"
    assert outcome.books[1].authors == "Unknown"
    
    client.session.get.assert_called_once()
    args, kwargs = client.session.get.call_args
    assert args[0] == "https://openlibrary.org/search.json"
    assert kwargs["params"] == {"title": "the lord of the rings"}


def test_author_search_uses_author_parameter(sync_client):
    client = sync_client(payload=SAMPLE_SEARCH)
    
    QueryExecutor(client).execute(SearchQuery("tolkien", SearchMode.AUTHOR))
    
    _, kwargs = client.session.get.call_args
    assert kwargs["params"] == {"author": "tolkien"}


def test_mode_accepts_plain_strings():
    assert SearchQuery("tolkien", "author").mode is SearchMode.AUTHOR
    with pytest.raises(ValueError):
        SearchQuery("tolkien", "isbn")


def test_no_hits_is_empty(sync_client):
    client = sync_client(payload={"numFound": 0, "docs": []})
    
    outcome = QueryExecutor(client).execute(SearchQuery("zzzzzz"))
    
    assert outcome == Empty()
    assert outcome.books == []


@pytest.mark.parametrize("status_code", [404, 429, 500, 503])
def test_error_status(sync_client, status_code):
    client = sync_client(status_code=status_code, payload={"docs": []})
    
    outcome = QueryExecutor(client).execute(SearchQuery("dune"))
    
    assert outcome == Error(FETCH_FAILED_MESSAGE)
    assert outcome.books == []


@pytest.mark.parametrize("exc", [
    requests.exceptions.ConnectionError("connection refused"),
    requests.exceptions.Timeout("timed out"),
])
def test_network_failure(sync_client, exc):
    client = sync_client(exc=exc)
    
    outcome = QueryExecutor(client).execute(SearchQuery("dune"))
    
    assert outcome == Error(FETCH_FAILED_MESSAGE)
    assert client.session.get.call_count == 1


def test_malformed_json(sync_client):
    client = sync_client(payload=ValueError("Expecting value"))
    
    outcome = QueryExecutor(client).execute(SearchQuery("dune"))
    
    assert outcome == Error(FETCH_FAILED_MESSAGE)


def test_missing_docs_field(sync_client):
    client = sync_client(payload={"error": "oops"})
    
    assert QueryExecutor(client).execute(SearchQuery("dune")) == Error(FETCH_FAILED_MESSAGE)


def test_malformed_hit(sync_client):
    """A hit with a non-list publisher becomes the generic error."""
    client = sync_client(payload={"docs": [{"key": "/works/OL1W", "title": "T", "publisher": {"name": "X"}}]})
    
    outcome = QueryExecutor(client).execute(SearchQuery("dune"))
    
    assert outcome == Error(FETCH_FAILED_MESSAGE)


def test_unexpected_client_error(sync_client):
    client = sync_client(exc=RuntimeError("session closed"))
    
    outcome = QueryExecutor(client).execute(SearchQuery("dune"))
    
    assert outcome == Error(FETCH_FAILED_MESSAGE)
