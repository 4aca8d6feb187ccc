"""Validation of properties whose values may be objects or references to them.

A value in such a position may be

1. an inline object, which is validated directly;
2. a URI referencing an object, which is fetched and validated only when
   reference reification is enabled; or
3. a Link object, whose `href` is then treated as in case 2.
"""

import logging
from collections.abc import Iterable
from typing import Any

from ..constants import LINK_TYPES
from ..faults import Fault, InvalidArgumentError, Severity
from ..resources import ReferenceFetchError
from .context import ValidationContext, ensure_context
from .objects import object_faults
from .utils import has_type, is_object, is_sequence, is_uri

logger = logging.getLogger(__name__)

ExpectedType = str | Iterable[str] | None


def _accepts_link(expected_type: ExpectedType) -> bool:
    if expected_type is None:
        return True
    if isinstance(expected_type, str):
        return expected_type in LINK_TYPES
    return any(t in LINK_TYPES for t in expected_type)


def _with_cause(faults: list[Fault], ctx: ValidationContext,
                severity: Severity | str, token: str) -> list[Fault]:
    """Prepend the caller's fault to `faults`, if there are any."""
    if not faults:
        return []
    return [ctx.fault(severity, token), *faults]


def _uri_reference_faults(uri: str, expected_type: ExpectedType, ctx: ValidationContext,
                          severity: Severity | str, token: str) -> list[Fault]:
    if not is_uri(uri):
        return [ctx.fault(severity, token)]
    if not ctx.reify_refs:
        return []
    if uri in ctx.visited:
        logger.debug(f"Reference cycle through {uri}; not following it again")
        return []
    if ctx.depth >= ctx.settings.max_reference_depth:
        logger.warning(f"Reference depth limit {ctx.settings.max_reference_depth} reached at {uri}; not reifying")
        return []

    try:
        target = ctx.resolver.resolve(uri)
    except ReferenceFetchError as e:
        logger.debug(f"Reference {uri} degraded to {token}: {e.reason}")
        return [ctx.fault(severity, token)]

    return _with_cause(object_faults(target, expected_type, ctx.descend(uri)), ctx, severity, token)


def object_reference_or_faults(value: Any, expected_type: ExpectedType, severity: Severity | str,
                               token: str, ctx: ValidationContext | None = None) -> list[Fault]:
    """Return no faults if `value` is, or references, a valid object of `expected_type`.

    Otherwise return a fault with this `severity` and `token` followed by the
    faults found in the referenced object. `expected_type` may be a type
    name, a set of them, or None meaning any type will do.

    Note that unless reification is enabled in the context, referenced
    objects are not actually checked.

    Raises:
        InvalidArgumentError: if `value` is neither a string nor an object
    """
    ctx = ensure_context(ctx)
    if isinstance(value, str):
        return _uri_reference_faults(value, expected_type, ctx, severity, token)
    if is_object(value):
        if has_type(value, LINK_TYPES):
            # A link where a link is acceptable is fine as it stands.
            if _accepts_link(expected_type):
                return []
            href = value.get("href")
            if not isinstance(href, str):
                return [ctx.fault(severity, token)]
            return _uri_reference_faults(href, expected_type, ctx, severity, token)
        return _with_cause(object_faults(value, expected_type, ctx, embedded=True), ctx, severity, token)

    raise InvalidArgumentError(
        "Argument `value` was not an object or a link to an object",
        {"value": value, "expected_type": expected_type, "severity": severity, "token": token},
    )


def coll_object_reference_or_faults(value: Any, expected_type: ExpectedType, severity: Severity | str,
                                    token: str, ctx: ValidationContext | None = None) -> list[Fault]:
    """As `object_reference_or_faults`, except `value` may also be a list of
    objects and/or references, each of which is checked.

    Raises:
        InvalidArgumentError: if `value` is neither an object, a reference,
            nor a list of these
    """
    ctx = ensure_context(ctx)
    if isinstance(value, str) or is_object(value):
        return object_reference_or_faults(value, expected_type, severity, token, ctx)
    if is_sequence(value):
        faults: list[Fault] = []
        for item in value:
            faults.extend(object_reference_or_faults(item, expected_type, severity, token, ctx))
        return faults

    raise InvalidArgumentError(
        "Argument `value` was not an object, a link to an object, nor a list of these.",
        {"value": value, "expected_type": expected_type, "severity": severity, "token": token},
    )
