"""Validation of Link objects.

A link is required to have an `href`. It may have any of `rel`,
`mediaType`, `name`, `hreflang`, `height`, `width` and `preview`, all of
which are optional; when present they are checked by the property table.

See https://www.w3.org/TR/activitystreams-vocabulary/#dfn-link
"""

from typing import Any

from ..constants import LINK_TYPES
from ..faults import Fault, Severity, concat_faults
from .context import ValidationContext, ensure_context
from .properties import check_all_properties
from .utils import has_type_or_fault, is_object, uri_or_fault


def link_faults(x: Any, ctx: ValidationContext | None = None) -> list[Fault]:
    """Return a list of faults found in link `x`."""
    ctx = ensure_context(ctx)
    if not is_object(x):
        return [ctx.fault(Severity.CRITICAL, "not-an-object")]
    return concat_faults(
        has_type_or_fault(x, LINK_TYPES, ctx, Severity.CRITICAL, "expected-link"),
        uri_or_fault(x.get("href"), ctx, Severity.MUST, "no-href-uri", "invalid-href-uri"),
        check_all_properties(x, ctx),
    )
