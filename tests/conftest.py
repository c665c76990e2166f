"""Shared fixtures for client tests."""
import pytest

from booklibrary.client import OpenLibraryClient

from fakes import make_session


@pytest.fixture
def sync_client():
    """Factory for an OpenLibraryClient backed by a fake session."""
    def factory(**kwargs):
        return OpenLibraryClient(session=make_session(**kwargs))
    return factory
