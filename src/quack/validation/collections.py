"""Validation of collections and collection pages.

A collection is either simple, carrying its items directly, or paged,
carrying references to its first and last pages. A collection page is a
simple collection which may also point at its parent and neighbours.

See https://www.w3.org/TR/activitystreams-core/#collections
"""

import logging
from typing import Any

from ..constants import ALL_COLLECTION_TYPES, COLLECTION_PAGE_TYPES
from ..faults import Fault, Severity, concat_faults
from .context import ValidationContext, ensure_context
from .objects import object_faults
from .references import object_reference_or_faults
from .utils import has_type, has_type_or_fault, is_object, is_sequence, type_values

logger = logging.getLogger(__name__)

ITEMS_KEYS = ("orderedItems", "items")
PAGING_KEYS = ("first", "last")


def _items(x: Any) -> Any:
    for key in ITEMS_KEYS:
        if x.get(key) is not None:
            return x[key]
    return None


def _reference_faults(value: Any, expected_type: Any, ctx: ValidationContext,
                      severity: Severity, token: str) -> list[Fault]:
    """Check a reference found in the document, faulting values of the wrong shape."""
    if isinstance(value, str) or is_object(value):
        return object_reference_or_faults(value, expected_type, severity, token, ctx)
    return [ctx.fault(severity, token)]


def _optional_reference_faults(x: Any, key: str, expected_type: Any, ctx: ValidationContext,
                               severity: Severity, token: str) -> list[Fault]:
    if x.get(key) is None:
        return []
    return _reference_faults(x[key], expected_type, ctx, severity, token)


def _base_faults(x: Any, collection_type: Any, ctx: ValidationContext) -> list[Fault]:
    return concat_faults(
        object_faults(x, ctx=ctx),
        has_type_or_fault(x, collection_type, ctx, Severity.CRITICAL, "expected-collection"),
    )


def _item_faults(x: Any, ctx: ValidationContext) -> list[Fault]:
    items = _items(x)
    if not is_sequence(items):
        return [ctx.fault(Severity.MUST, "no-items-collection")]
    faults: list[Fault] = []
    for item in items:
        faults.extend(_reference_faults(item, None, ctx, Severity.MUST, "not-object-reference"))
    return faults


def simple_collection_faults(x: Any, collection_type: Any = ALL_COLLECTION_TYPES,
                             ctx: ValidationContext | None = None) -> list[Fault]:
    """Return a list of faults found in `x` considered as a non-paged
    collection of this `collection_type`."""
    ctx = ensure_context(ctx)
    if not is_object(x):
        return object_faults(x, ctx=ctx)
    return concat_faults(_base_faults(x, collection_type, ctx), _item_faults(x, ctx))


def paged_collection_faults(x: Any, collection_type: Any = ALL_COLLECTION_TYPES,
                            ctx: ValidationContext | None = None) -> list[Fault]:
    """Return a list of faults found in `x` considered as a paged collection
    of this `collection_type`."""
    ctx = ensure_context(ctx)
    if not is_object(x):
        return object_faults(x, ctx=ctx)
    first = x.get("first")
    return concat_faults(
        _base_faults(x, collection_type, ctx),
        [ctx.fault(Severity.MUST, "no-first-page")] if first is None
        else _reference_faults(first, None, ctx, Severity.MUST, "no-first-page"),
        [ctx.fault(Severity.SHOULD, "no-last-page")] if x.get("last") is None
        else _reference_faults(x["last"], None, ctx, Severity.SHOULD, "no-last-page"),
    )


def _parent_type(page_type: str) -> str:
    return page_type.removesuffix("Page")


def collection_page_faults(x: Any, page_type: Any = COLLECTION_PAGE_TYPES,
                           ctx: ValidationContext | None = None) -> list[Fault]:
    """Return a list of faults found in `x` considered as a page of a
    collection, of this `page_type`."""
    ctx = ensure_context(ctx)
    if not is_object(x):
        return object_faults(x, ctx=ctx)
    page_types = {page_type} if isinstance(page_type, str) else set(page_type)
    declared = [t for t in type_values(x) if t in page_types] or sorted(page_types)
    parent_types = {_parent_type(t) for t in declared}
    return concat_faults(
        simple_collection_faults(x, page_type, ctx),
        _optional_reference_faults(x, "partOf", parent_types, ctx, Severity.SHOULD, "no-part-of"),
        _optional_reference_faults(x, "next", page_types, ctx, Severity.MINOR, "no-next-page"),
        _optional_reference_faults(x, "prev", page_types, ctx, Severity.MINOR, "no-prev-page"),
    )


def collection_faults(x: Any, ctx: ValidationContext | None = None) -> list[Fault]:
    """Return a list of faults found in collection `x`, whichever kind it is.

    Collection pages are checked as pages; other collections as simple if
    they carry items, as paged if they carry first or last page references,
    and faulted `no-items` if they carry neither.
    """
    ctx = ensure_context(ctx)
    if not is_object(x):
        return object_faults(x, ctx=ctx)

    if has_type(x, COLLECTION_PAGE_TYPES):
        return collection_page_faults(x, ctx=ctx)
    if any(x.get(key) is not None for key in ITEMS_KEYS):
        return simple_collection_faults(x, ctx=ctx)
    if any(x.get(key) is not None for key in PAGING_KEYS):
        return paged_collection_faults(x, ctx=ctx)

    logger.debug("Collection has neither items nor pages")
    return concat_faults(
        _base_faults(x, ALL_COLLECTION_TYPES, ctx),
        ctx.fault(Severity.MUST, "no-items"),
    )
