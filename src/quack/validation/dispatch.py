"""Pick the right validator for a document from its declared type."""

from typing import Any

from ..constants import ACTOR_TYPES, ALL_COLLECTION_TYPES, LINK_TYPES, VERB_TYPES
from ..faults import Fault
from .activities import activity_faults
from .actors import actor_faults
from .collections import collection_faults
from .context import ValidationContext, ensure_context
from .links import link_faults
from .objects import object_faults
from .utils import has_type, is_object, is_sequence

SHAPES = ("object", "actor", "activity", "link", "collection")


def document_shape(x: Any) -> str:
    """Name the shape of document `x`, as judged by its `type`."""
    if has_type(x, VERB_TYPES):
        return "activity"
    if has_type(x, ACTOR_TYPES):
        return "actor"
    if has_type(x, LINK_TYPES):
        return "link"
    if has_type(x, ALL_COLLECTION_TYPES):
        return "collection"
    return "object"


_VALIDATORS = {
    "object": object_faults,
    "actor": actor_faults,
    "activity": activity_faults,
    "link": link_faults,
    "collection": collection_faults,
}


def document_faults(x: Any, shape: str | None = None, ctx: ValidationContext | None = None) -> list[Fault]:
    """Return the faults in `x`, validated as `shape` or as its type suggests."""
    ctx = ensure_context(ctx)
    shape = shape or document_shape(x)
    if shape not in _VALIDATORS:
        raise ValueError(f"Unknown document shape {shape!r}; expected one of {', '.join(SHAPES)}")
    return _VALIDATORS[shape](x, ctx=ctx)


def documents_faults(docs: Any, shape: str | None = None,
                     ctx: ValidationContext | None = None) -> list[list[Fault]]:
    """Validate a single document or a list of them, one fault list per document."""
    ctx = ensure_context(ctx)
    if is_sequence(docs) and not is_object(docs):
        return [document_faults(doc, shape, ctx) for doc in docs]
    return [document_faults(docs, shape, ctx)]
