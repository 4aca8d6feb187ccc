"""
Reference resolver for reifying referenced ActivityStreams documents.

Fetches the document a URI points at, parses it as JSON and caches the
outcome for the lifetime of the process. Fetched content for a given URI is
treated as immutable within a run, so concurrent writes of the same key are
harmless.
"""
from __future__ import annotations

import http.client
import json
import logging
from typing import Any, Callable, Dict, Optional
from urllib.error import HTTPError, URLError
from urllib.parse import urlsplit
from urllib.request import Request, urlopen

logger = logging.getLogger(__name__)

ACCEPT_HEADER = 'application/activity+json, application/ld+json; profile="https://www.w3.org/ns/activitystreams", application/json;q=0.8'

Fetcher = Callable[[str, float], Any]


class ReferenceFetchError(Exception):
    """Raised when the target of a reference cannot be fetched or parsed."""

    def __init__(self, uri: str, reason: str):
        self.uri = uri
        self.reason = reason
        super().__init__(f"Could not reify {uri}: {reason}")


def fetch_document(uri: str, timeout: float) -> Any:
    """
    Fetch and parse the JSON document at this `uri`.

    Args:
        uri: http, https or file URI of the document
        timeout: Seconds to wait before giving up

    Returns:
        The parsed JSON value

    Raises:
        ReferenceFetchError: If the URI is malformed, not found, not
            accessible, or does not hold JSON
    """
    scheme = urlsplit(uri).scheme
    if scheme not in ("http", "https", "file"):
        raise ReferenceFetchError(uri, f"unsupported scheme {scheme!r}")

    request = Request(uri, headers={"Accept": ACCEPT_HEADER})
    try:
        with urlopen(request, timeout=timeout) as response:
            body = response.read()
    except HTTPError as e:
        raise ReferenceFetchError(uri, f"HTTP error {e.code}: {e.reason}") from e
    except URLError as e:
        raise ReferenceFetchError(uri, f"connection error: {e.reason}") from e
    except (OSError, ValueError, http.client.HTTPException) as e:
        raise ReferenceFetchError(uri, str(e)) from e

    try:
        return json.loads(body.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ReferenceFetchError(uri, f"not a JSON document: {e}") from e


class ReferenceCache:
    """
    Write-once cache from URI to fetched document or fetch failure.
    """

    def __init__(self):
        self._entries: Dict[str, Any] = {}

    def get(self, uri: str) -> Optional[Any]:
        return self._entries.get(uri)

    def put(self, uri: str, outcome: Any) -> Any:
        """Record `outcome` for `uri` unless something already has; return the stored outcome."""
        return self._entries.setdefault(uri, outcome)

    def __contains__(self, uri: str) -> bool:
        return uri in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def clear(self) -> None:
        self._entries.clear()


_process_cache = ReferenceCache()


def process_cache() -> ReferenceCache:
    """The cache shared by every resolver that is not given its own."""
    return _process_cache


class ReferenceResolver:
    """
    Resolves references to the documents they point at.

    Each URI is fetched at most once per cache; failures are cached too, so a
    dead reference that appears many times costs one fetch.
    """

    def __init__(self, fetcher: Optional[Fetcher] = None,
                 cache: Optional[ReferenceCache] = None,
                 timeout: float = 10.0):
        """
        Initialize reference resolver.

        Args:
            fetcher: Callable taking a URI and a timeout and returning parsed JSON
            cache: Cache to use (default: the process-wide cache)
            timeout: Seconds to wait on each fetch
        """
        self.fetcher = fetcher or fetch_document
        self.cache = cache if cache is not None else process_cache()
        self.timeout = timeout

    def resolve(self, uri: str) -> Any:
        """
        Return the document at this `uri`.

        Raises:
            ReferenceFetchError: If the document could not be fetched, now or
                on an earlier attempt
        """
        if uri in self.cache:
            logger.debug(f"Reference cache hit for {uri}")
            outcome = self.cache.get(uri)
        else:
            try:
                outcome = self.fetcher(uri, self.timeout)
            except ReferenceFetchError as e:
                logger.warning(f"Reification target {uri} could not be fetched: {e.reason}")
                outcome = e
            outcome = self.cache.put(uri, outcome)

        if isinstance(outcome, ReferenceFetchError):
            raise outcome
        return outcome
