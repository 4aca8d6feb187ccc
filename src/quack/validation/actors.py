"""Validation of actors.

See https://www.w3.org/TR/activitypub/#actor-objects
"""

from typing import Any

from ..faults import Fault, Severity, concat_faults
from .context import ValidationContext, ensure_context
from .objects import persistent_object_faults
from .utils import fault_unless, has_actor_type, is_object, uri_or_fault


def actor_faults(x: Any, ctx: ValidationContext | None = None) -> list[Fault]:
    """Return a list of faults found in actor `x`."""
    ctx = ensure_context(ctx)
    faults = persistent_object_faults(x, ctx)
    if not is_object(x):
        return faults
    return concat_faults(
        faults,
        fault_unless(has_actor_type(x), ctx, Severity.MUST, "not-actor-type"),
        uri_or_fault(x.get("inbox"), ctx, Severity.MUST, "no-inbox", "invalid-inbox-uri"),
        uri_or_fault(x.get("outbox"), ctx, Severity.MUST, "no-outbox", "invalid-outbox-uri"),
    )
