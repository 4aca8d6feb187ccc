"""Validation of activities.

Each activity type has a set of required properties, each with its own
checker. Most types share the base set; a few restrict or extend it.

See https://www.w3.org/TR/activitystreams-vocabulary/#activity-types
"""

from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any

from ..constants import (
    ACCEPT_TARGET_TYPES,
    ACTOR_TYPES,
    INTRANSITIVE_VERB_TYPES,
    INVITE_TARGET_TYPES,
    VERB_TYPES,
)
from ..faults import Fault, Severity, concat_faults
from .context import ValidationContext, ensure_context
from .objects import persistent_object_faults
from .references import ExpectedType, coll_object_reference_or_faults
from .utils import fault_unless, has_activity_type, is_object, is_sequence, type_values


Checker = Callable[[Any, ValidationContext], list[Fault]]
RequirementSet = Mapping[str, Checker]


def _is_reference_shaped(value: Any) -> bool:
    if isinstance(value, str) or is_object(value):
        return True
    if is_sequence(value):
        items = list(value)
        return bool(items) and all(isinstance(i, str) or is_object(i) for i in items)
    return False


def reference_checker(expected_type: ExpectedType, severity: Severity, token: str) -> Checker:
    """Return a checker requiring a value which is, or references, an object of `expected_type`."""
    def check(value: Any, ctx: ValidationContext) -> list[Fault]:
        if not _is_reference_shaped(value):
            return [ctx.fault(severity, token)]
        return coll_object_reference_or_faults(value, expected_type, severity, token, ctx)
    return check


def _requirements(base: Mapping[str, Checker], **overrides: Checker | None) -> RequirementSet:
    merged = dict(base)
    for name, checker in overrides.items():
        if checker is None:
            merged.pop(name, None)
        else:
            merged[name] = checker
    return MappingProxyType(merged)


# https://www.w3.org/TR/activitystreams-vocabulary/#dfn-activity
BASE_ACTIVITY_REQUIRED_PROPERTIES: RequirementSet = MappingProxyType({
    "actor": reference_checker(ACTOR_TYPES, Severity.MUST, "no-actor"),
    "object": reference_checker(None, Severity.MUST, "no-object"),
})

# https://www.w3.org/TR/activitystreams-vocabulary/#dfn-intransitiveactivity
INTRANSITIVE_ACTIVITY_REQUIRED_PROPERTIES = _requirements(
    BASE_ACTIVITY_REQUIRED_PROPERTIES, object=None,
)

ACCEPT_REQUIRED_PROPERTIES = _requirements(
    BASE_ACTIVITY_REQUIRED_PROPERTIES,
    object=reference_checker(ACCEPT_TARGET_TYPES, Severity.MUST, "bad-accept-target"),
)

INVITE_REQUIRED_PROPERTIES = _requirements(
    BASE_ACTIVITY_REQUIRED_PROPERTIES,
    target=reference_checker(INVITE_TARGET_TYPES, Severity.MUST, "bad-invite-target"),
)

_OVERRIDES = {
    "Accept": ACCEPT_REQUIRED_PROPERTIES,
    "TentativeAccept": ACCEPT_REQUIRED_PROPERTIES,
    "Invite": INVITE_REQUIRED_PROPERTIES,
}

ACTIVITY_REQUIRED_PROPERTIES: Mapping[str, RequirementSet] = MappingProxyType({
    verb: _OVERRIDES.get(
        verb,
        INTRANSITIVE_ACTIVITY_REQUIRED_PROPERTIES if verb in INTRANSITIVE_VERB_TYPES
        else BASE_ACTIVITY_REQUIRED_PROPERTIES,
    )
    for verb in sorted(VERB_TYPES)
})


def activity_type_faults(x: Any, activity_type: str | None = None,
                         ctx: ValidationContext | None = None) -> list[Fault]:
    """Return the faults in the type-specific required properties of activity `x`.

    If `activity_type` is given only its requirements are checked, else
    those of every type `x` declares. Unrecognised types have none.
    """
    ctx = ensure_context(ctx)
    if not is_object(x):
        return []
    types = [activity_type] if activity_type is not None else type_values(x)

    faults: list[Fault] = []
    for t in types:
        checks = ACTIVITY_REQUIRED_PROPERTIES.get(t)
        if checks is None:
            continue
        for name, checker in checks.items():
            faults.extend(checker(x.get(name), ctx))
    return faults


def activity_faults(x: Any, ctx: ValidationContext | None = None) -> list[Fault]:
    """Return a list of faults found in activity `x`."""
    ctx = ensure_context(ctx)
    faults = persistent_object_faults(x, ctx)
    if not is_object(x):
        return faults
    return concat_faults(
        faults,
        activity_type_faults(x, ctx=ctx),
        fault_unless(has_activity_type(x), ctx, Severity.MUST, "not-activity-type"),
        fault_unless(isinstance(x.get("summary"), str), ctx, Severity.SHOULD, "no-summary"),
    )
