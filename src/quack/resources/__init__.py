"""Reference reification for quack.

Fetches and caches the documents that URI references point at.
"""

from .reference_resolver import (
    ReferenceCache,
    ReferenceFetchError,
    ReferenceResolver,
    fetch_document,
    process_cache,
)

__all__ = [
    "ReferenceCache",
    "ReferenceFetchError",
    "ReferenceResolver",
    "fetch_document",
    "process_cache",
]
