"""Utility predicates and fault helpers supporting the validators."""

import re
from collections.abc import Iterable, Mapping
from typing import Any
from urllib.parse import urlsplit

from ..constants import (
    ACTIVITYSTREAMS_CONTEXT_URI,
    ACTOR_TYPES,
    CONTEXT_KEY,
    LINK_TYPES,
    VERB_TYPES,
)
from ..faults import Fault, InvalidArgumentError, Severity
from .context import ValidationContext

# Characters which may not appear unescaped anywhere in a URI
_URI_FORBIDDEN = re.compile(r'[\s<>"{}|\\^`\x00-\x1f\x7f]')
_SCHEME = re.compile(r"[A-Za-z][A-Za-z0-9+.\-]*")


def is_object(x: Any) -> bool:
    """True if `x` is object-shaped, that is a JSON object."""
    return isinstance(x, Mapping)


def is_sequence(x: Any) -> bool:
    """True if `x` is a JSON array (not a string and not an object)."""
    return isinstance(x, Iterable) and not isinstance(x, (str, bytes, Mapping))


def is_uri(x: Any) -> bool:
    """True if `x` is a string which parses as an absolute URI."""
    if not isinstance(x, str) or not x or _URI_FORBIDDEN.search(x):
        return False
    try:
        parts = urlsplit(x)
    except ValueError:
        return False
    if not parts.scheme or not _SCHEME.fullmatch(parts.scheme):
        return False
    return bool(parts.netloc or parts.path)


def uri_scheme(x: str) -> str:
    return urlsplit(x).scheme.lower()


def type_values(x: Any) -> list[str]:
    """The declared types of object `x`, always as a list."""
    if not is_object(x):
        return []
    tv = x.get("type")
    if tv is None:
        return []
    if isinstance(tv, str):
        return [tv]
    if is_sequence(tv):
        return [t for t in tv if isinstance(t, str)]
    return []


def _acceptable_set(acceptable: Any) -> frozenset[str]:
    if isinstance(acceptable, str):
        return frozenset({acceptable})
    if isinstance(acceptable, (set, frozenset, list, tuple)):
        return frozenset(acceptable)
    raise InvalidArgumentError(
        "`acceptable` argument not as expected.",
        {"acceptable": acceptable},
    )


def has_type(x: Any, acceptable: str | Iterable[str]) -> bool:
    """True if object `x` has a type in `acceptable`.

    `acceptable` may be a single type name or a set of them; the `type` of `x`
    may be a single name or a list, in which case any member will do.
    """
    wanted = _acceptable_set(acceptable)
    return any(t in wanted for t in type_values(x))


def has_actor_type(x: Any) -> bool:
    return has_type(x, ACTOR_TYPES)


def has_activity_type(x: Any) -> bool:
    return has_type(x, VERB_TYPES)


def is_context(x: Any) -> bool:
    """True iff `x` quacks like an ActivityStreams context.

    A context is either the ActivityStreams context URI, or a two element
    list comprising that URI and one map.
    """
    if isinstance(x, str):
        return x == ACTIVITYSTREAMS_CONTEXT_URI
    if is_sequence(x):
        items = list(x)
        maps = [i for i in items if is_object(i)]
        others = [i for i in items if not is_object(i)]
        return len(items) == 2 and len(maps) == 1 and others == [ACTIVITYSTREAMS_CONTEXT_URI]
    return False


def has_context(x: Any) -> bool:
    return is_object(x) and is_context(x.get(CONTEXT_KEY))


def object_or_uri(x: Any) -> bool:
    """Very basic check that `x` is either a typed object or a URI."""
    if isinstance(x, str):
        return is_uri(x)
    return is_object(x) and x.get("type") is not None


def link_or_uri(x: Any) -> bool:
    """Very basic check that `x` is either a link object or a URI."""
    if isinstance(x, str):
        return is_uri(x)
    return is_object(x) and has_type(x, LINK_TYPES)


def is_non_negative_int(x: Any) -> bool:
    return isinstance(x, int) and not isinstance(x, bool) and x >= 0


def is_number(x: Any) -> bool:
    return isinstance(x, (int, float)) and not isinstance(x, bool)


def fault_unless(condition: Any, ctx: ValidationContext, severity: Severity | str, token: str) -> Fault | None:
    """Return a fault with this `severity` and `token` unless `condition` holds."""
    return None if condition else ctx.fault(severity, token)


def has_type_or_fault(x: Any, acceptable: Any, ctx: ValidationContext,
                      severity: Severity | str, token: str) -> Fault | None:
    """Return a fault unless object `x` has a type in `acceptable`.

    If `acceptable` is None no type check is performed.
    """
    if acceptable is None:
        return None
    return fault_unless(has_type(x, acceptable), ctx, severity, token)


def uri_or_fault(u: Any, ctx: ValidationContext, severity: Severity | str,
                 if_missing_token: str, if_invalid_token: str | None = None) -> Fault | None:
    """Return a fault if `u` is missing or is not a valid URI, else None."""
    if u is None:
        return ctx.fault(severity, if_missing_token)
    if not is_uri(u):
        return ctx.fault(severity, if_invalid_token or if_missing_token)
    return None


def string_or_fault(value: Any, ctx: ValidationContext, severity: Severity | str,
                    token: str, pattern: str | None = None) -> Fault | None:
    """Return a fault unless `value` is a string (matching `pattern`, if given)."""
    if not isinstance(value, str):
        return ctx.fault(severity, token)
    if pattern is not None and not re.fullmatch(pattern, value):
        return ctx.fault(severity, token)
    return None


def any_or_faults(options: Iterable[list[Fault]], ctx: ValidationContext,
                  severity_if_none: Severity | str, token: str) -> list[Fault]:
    """Return no faults if any of these `options` validated cleanly.

    Otherwise return a fault with this `severity_if_none` and `token`
    followed by every fault from every option.
    """
    options = [list(option) for option in options]
    if any(not option for option in options):
        return []
    return [ctx.fault(severity_if_none, token)] + [f for option in options for f in option]
