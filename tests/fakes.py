"""Canned responses and fake transports for client tests."""
import asyncio
import json
from unittest.mock import Mock

import httpx

from booklibrary.async_client import AsyncOpenLibraryClient


SAMPLE_SEARCH = {
    "numFound": 2,
    "docs": [
        {
            "key": "/works/OL27448W",
            "cover_i": 12345,
            "title": "The Lord of the Rings",
            "author_name": ["J.R.R. Tolkien"],
            "publisher": ["Allen & Unwin"]
        },
        {
            "key": "/works/OL45804W",
            "title": "Fantastic Mr Fox"
        }
    ]
}

SAMPLE_DETAIL = {
    "ISBN:0451526538": {
        "title": "The adventures of Tom Sawyer",
        "authors": [{"name": "Mark Twain", "url": "https://openlibrary.org/authors/OL18319A"}],
        "publishers": [{"name": "Signet Classic"}],
        "publish_date": "1997",
        "number_of_pages": 216,
        "url": "https://openlibrary.org/books/OL1017798M"
    }
}


def make_session(status_code=200, payload=None, exc=None):
    """Fake requests session returning one canned response."""
    session = Mock()
    session.headers = {}
    if exc is not None:
        session.get.side_effect = exc
        return session
    
    response = Mock(status_code=status_code)
    if isinstance(payload, Exception):
        response.json.side_effect = payload
    else:
        response.json.return_value = payload
    session.get.return_value = response
    return session


class RecordingHandler:
    """httpx MockTransport handler that records requests."""
    
    def __init__(self, status_code=200, payload=None, content=None, exc=None):
        self.status_code = status_code
        self.payload = payload
        self.content = content
        self.exc = exc
        self.requests = []
    
    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content)
        return httpx.Response(self.status_code, content=json.dumps(self.payload))


def async_client_for(handler) -> AsyncOpenLibraryClient:
    transport = httpx.MockTransport(handler)
    return AsyncOpenLibraryClient(client=httpx.AsyncClient(transport=transport))


def run(coro):
    return asyncio.run(coro)
