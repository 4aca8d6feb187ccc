"""Shared fixtures for quack tests."""

import pytest

from quack.config import ValidationSettings
from quack.constants import ACTIVITYSTREAMS_CONTEXT_URI
from quack.resources import ReferenceCache, ReferenceFetchError, ReferenceResolver
from quack.validation import ValidationContext


class FakeFetcher:
    """Serves documents from a dict, recording every URI it is asked for."""

    def __init__(self, documents=None):
        self.documents = documents or {}
        self.calls = []

    def __call__(self, uri, timeout):
        self.calls.append(uri)
        if uri not in self.documents:
            raise ReferenceFetchError(uri, "HTTP error 404: Not Found")
        return self.documents[uri]


def codes(faults):
    """The fault codes in `faults`, in order."""
    return [f.fault for f in faults]


@pytest.fixture
def fetcher():
    """Fake fetcher with no documents; tests add what they need."""
    return FakeFetcher()


@pytest.fixture
def ctx(fetcher):
    """Context with reification off and an isolated cache."""
    return ValidationContext(resolver=ReferenceResolver(fetcher=fetcher, cache=ReferenceCache()))


@pytest.fixture
def reifying_ctx(fetcher):
    """Context with reification on, a fake fetcher and an isolated cache."""
    return ValidationContext(
        settings=ValidationSettings(reify_refs=True),
        resolver=ReferenceResolver(fetcher=fetcher, cache=ReferenceCache()),
    )


@pytest.fixture
def note():
    """A faultless transient object."""
    return {
        "@context": ACTIVITYSTREAMS_CONTEXT_URI,
        "id": "https://example.com/notes/1",
        "type": "Note",
        "content": "Hello, world",
    }


@pytest.fixture
def person():
    """A faultless actor."""
    return {
        "@context": ACTIVITYSTREAMS_CONTEXT_URI,
        "id": "https://example.com/users/alice",
        "type": "Person",
        "name": "Alice",
        "preferredUsername": "alice",
        "inbox": "https://example.com/users/alice/inbox",
        "outbox": "https://example.com/users/alice/outbox",
    }


@pytest.fixture
def create_activity():
    """A faultless Create activity."""
    return {
        "@context": ACTIVITYSTREAMS_CONTEXT_URI,
        "id": "https://example.com/activities/1",
        "type": "Create",
        "summary": "Alice created a note",
        "actor": "https://example.com/users/alice",
        "object": {
            "id": "https://example.com/notes/1",
            "type": "Note",
            "content": "Hello, world",
        },
        "published": "2023-01-15T10:30:00Z",
    }


@pytest.fixture
def link():
    """A faultless link."""
    return {
        "@context": ACTIVITYSTREAMS_CONTEXT_URI,
        "type": "Link",
        "href": "https://example.com/images/cat.png",
        "mediaType": "image/png",
        "hreflang": "en",
        "height": 100,
        "width": 200,
    }


@pytest.fixture
def simple_collection():
    """A faultless simple collection."""
    return {
        "@context": ACTIVITYSTREAMS_CONTEXT_URI,
        "id": "https://example.com/collections/1",
        "type": "Collection",
        "totalItems": 2,
        "items": [
            "https://example.com/notes/1",
            {"id": "https://example.com/notes/2", "type": "Note", "content": "inline"},
        ],
    }
