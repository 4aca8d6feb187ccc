"""Baseline validation of ActivityStreams objects.

Generally each `*_faults` function returns an empty list if no faults were
found, else a list of `Fault` records.
"""

from collections.abc import Iterable
from typing import Any

from ..faults import Fault, Severity, concat_faults
from .context import ValidationContext, ensure_context
from .properties import check_all_properties
from .utils import (
    fault_unless,
    has_context,
    has_type_or_fault,
    is_object,
    is_uri,
    uri_scheme,
)


def object_faults(x: Any, expected_type: str | Iterable[str] | None = None,
                  ctx: ValidationContext | None = None, embedded: bool = False) -> list[Fault]:
    """Return a list of faults found in object `x`.

    If `expected_type` is also passed, verify that `x` has a type in it; it
    may be a single type name or a set of them. Objects embedded in another
    document inherit its context, so `embedded` ones are not required to
    declare one.

    Anything which is not a JSON object yields a single critical
    `not-an-object` fault and is not examined further.
    """
    ctx = ensure_context(ctx)
    if not is_object(x):
        return [ctx.fault(Severity.CRITICAL, "not-an-object")]

    return concat_faults(
        None if embedded else fault_unless(has_context(x), ctx, Severity.SHOULD, "no-context"),
        fault_unless(x.get("type") is not None, ctx, Severity.MINOR, "no-type"),
        fault_unless("id" in x, ctx, Severity.MINOR, "no-id-transient"),
        check_all_properties(x, ctx),
        has_type_or_fault(x, expected_type, ctx, Severity.CRITICAL, "unexpected-type"),
    )


def _persistent_id_fault(x: Any, ctx: ValidationContext) -> Fault | None:
    if "id" not in x:
        return ctx.fault(Severity.MUST, "no-id-persistent")
    identifier = x["id"]
    if identifier is None:
        return ctx.fault(Severity.MUST, "null-id-persistent")
    if not is_uri(identifier):
        return ctx.fault(Severity.MUST, "id-not-uri")
    if uri_scheme(identifier) != "https":
        return ctx.fault(Severity.SHOULD, "id-not-https")
    return None


def persistent_object_faults(x: Any, ctx: ValidationContext | None = None) -> list[Fault]:
    """Return a list of faults found in persistent object `x`.

    Transient objects need not have an `id`, but persistent ones must have a
    non-null one which is a dereferencable URI, and should use https.
    """
    ctx = ensure_context(ctx)
    faults = object_faults(x, ctx=ctx)
    if not is_object(x):
        return faults
    return concat_faults(faults, _persistent_id_fault(x, ctx))
