"""Property rule table for ActivityStreams vocabulary properties.

Each recognised property has one immutable rule saying whether it is
required, how many values it may have, how each value is checked, and which
faults to report when it is missing or invalid. Properties not in the table
are never faulted: the vocabulary is open.

See https://www.w3.org/TR/activitystreams-vocabulary/#properties
"""

import logging
import re
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any

from ..constants import ALL_COLLECTION_TYPES, COLLECTION_TYPES, LANGUAGE_TAG_PATTERN, MIME_TYPE_PATTERN, UNITS
from ..faults import Fault, Severity
from .context import ValidationContext, ensure_context
from .time import xsd_date_time, xsd_duration
from .utils import (
    has_type,
    is_non_negative_int,
    is_number,
    is_object,
    is_sequence,
    is_uri,
    link_or_uri,
    object_or_uri,
)

logger = logging.getLogger(__name__)

Document = Mapping[str, Any]
ValuePredicate = Callable[[Any], bool]


class Cardinality(str, Enum):
    """How many values a property may carry."""
    SINGLE = "single"            # exactly one value
    COLLECTION = "collection"    # a list of values
    ONE_OR_MORE = "one-or-more"  # one value, or a list of them


class AlwaysRequired:
    def holds(self, doc: Document) -> bool:
        return True

    def __repr__(self) -> str:
        return "AlwaysRequired()"


class NeverRequired:
    def holds(self, doc: Document) -> bool:
        return False

    def __repr__(self) -> str:
        return "NeverRequired()"


@dataclass(frozen=True)
class RequiredIf:
    """Required only when `predicate` holds of the containing document."""
    predicate: Callable[[Document], bool]
    description: str = ""

    def holds(self, doc: Document) -> bool:
        return bool(self.predicate(doc))


Requirement = AlwaysRequired | NeverRequired | RequiredIf

ALWAYS = AlwaysRequired()
NEVER = NeverRequired()


@dataclass(frozen=True)
class FaultSpec:
    severity: Severity
    token: str


@dataclass(frozen=True)
class PropertyRule:
    """Validation contract for one vocabulary property."""
    name: str
    cardinality: Cardinality
    validator: ValuePredicate
    invalid: FaultSpec
    required: Requirement = NEVER
    missing: FaultSpec | None = None
    # Referenced objects are fetched and validated when reification is on.
    reify: bool = False
    reference_type: str | frozenset[str] | None = None

    def value_valid(self, value: Any) -> bool:
        """Apply the validator to `value` according to cardinality."""
        if self.cardinality == Cardinality.SINGLE:
            return bool(self.validator(value))
        if self.cardinality == Cardinality.COLLECTION:
            return is_sequence(value) and all(self.validator(v) for v in value)
        if is_sequence(value):
            return all(self.validator(v) for v in value)
        return bool(self.validator(value))


# Value predicates


def _string(v: Any) -> bool:
    return isinstance(v, str)


def _pattern(pattern: str) -> ValuePredicate:
    compiled = re.compile(pattern)
    return lambda v: isinstance(v, str) and compiled.fullmatch(v) is not None


_LANGUAGE_TAG = re.compile(LANGUAGE_TAG_PATTERN)


def _language_map(v: Any) -> bool:
    return is_object(v) and all(
        isinstance(k, str) and _LANGUAGE_TAG.fullmatch(k) and isinstance(s, str)
        for k, s in v.items()
    )


def _in_range(low: float | None, high: float | None) -> ValuePredicate:
    def check(v: Any) -> bool:
        if not is_number(v):
            return False
        return (low is None or v >= low) and (high is None or v <= high)
    return check


def _image_link_or_uri(v: Any) -> bool:
    return link_or_uri(v) or (is_object(v) and has_type(v, "Image"))


def _object_or_bare_uri(v: Any) -> bool:
    return is_uri(v) or is_object(v)


def _closed(v: Any) -> bool:
    return isinstance(v, bool) or xsd_date_time(v) or object_or_uri(v)


def _rel(v: Any) -> bool:
    return isinstance(v, str) and re.search(r"[\s,]", v) is None


def _units(v: Any) -> bool:
    return (isinstance(v, str) and v in UNITS) or is_uri(v)


def _former_type(v: Any) -> bool:
    return isinstance(v, str) or is_object(v)


def _is_tombstone(doc: Document) -> bool:
    return has_type(doc, "Tombstone")


def _invalid(token: str, severity: Severity = Severity.MUST) -> FaultSpec:
    return FaultSpec(severity, token)


def _reference_rule(name: str, token: str, cardinality: Cardinality = Cardinality.ONE_OR_MORE,
                    validator: ValuePredicate = object_or_uri,
                    severity: Severity = Severity.MUST, reify: bool = False,
                    reference_type: str | frozenset[str] | None = None) -> PropertyRule:
    return PropertyRule(
        name, cardinality, validator, _invalid(token, severity),
        reify=reify, reference_type=reference_type,
    )


def _date_time_rule(name: str, required: Requirement = NEVER,
                    missing: FaultSpec | None = None) -> PropertyRule:
    return PropertyRule(
        name, Cardinality.SINGLE, xsd_date_time,
        _invalid("not-valid-date-time"), required, missing,
    )


def _build_rules(rules: Iterable[PropertyRule]) -> Mapping[str, PropertyRule]:
    return MappingProxyType({rule.name: rule for rule in rules})


# `@context`, `id` and `type` are checked by the object validator itself;
# `href`, `inbox` and `outbox` by the link and actor validators.
PROPERTY_RULES: Mapping[str, PropertyRule] = _build_rules([
    # Object-valued properties
    _reference_rule("actor", "invalid-actor"),
    _reference_rule("anyOf", "invalid-any-of", Cardinality.COLLECTION, reify=True),
    _reference_rule("attachment", "invalid-attachment"),
    _reference_rule("attributedTo", "invalid-attributed-to", reify=True),
    _reference_rule("audience", "invalid-audience"),
    _reference_rule("bcc", "invalid-bcc"),
    _reference_rule("bto", "invalid-bto"),
    _reference_rule("cc", "invalid-cc"),
    _reference_rule("context", "invalid-context"),
    _reference_rule("current", "invalid-current", Cardinality.SINGLE),
    _reference_rule("describes", "invalid-describes", Cardinality.SINGLE, _object_or_bare_uri, reify=True),
    _reference_rule("endpoints", "invalid-endpoints", Cardinality.SINGLE, _object_or_bare_uri),
    _reference_rule("first", "invalid-first", Cardinality.SINGLE),
    _reference_rule("followers", "invalid-followers", Cardinality.SINGLE,
                    reify=True, reference_type=COLLECTION_TYPES),
    _reference_rule("following", "invalid-following", Cardinality.SINGLE,
                    reify=True, reference_type=COLLECTION_TYPES),
    _reference_rule("generator", "invalid-generator", reify=True),
    _reference_rule("icon", "invalid-icon", validator=_image_link_or_uri),
    _reference_rule("image", "invalid-image", validator=_image_link_or_uri),
    _reference_rule("inReplyTo", "invalid-in-reply-to", reify=True),
    _reference_rule("instrument", "invalid-instrument", reify=True),
    _reference_rule("items", "invalid-items", Cardinality.COLLECTION, _object_or_bare_uri),
    _reference_rule("last", "invalid-last", Cardinality.SINGLE),
    _reference_rule("liked", "invalid-liked", Cardinality.SINGLE,
                    reify=True, reference_type=COLLECTION_TYPES),
    _reference_rule("location", "invalid-location", reify=True),
    _reference_rule("next", "invalid-next", Cardinality.SINGLE),
    _reference_rule("object", "invalid-object"),
    _reference_rule("oneOf", "invalid-one-of", Cardinality.COLLECTION, reify=True),
    _reference_rule("orderedItems", "invalid-ordered-items", Cardinality.COLLECTION, _object_or_bare_uri),
    _reference_rule("origin", "invalid-origin", reify=True),
    _reference_rule("partOf", "invalid-part-of", Cardinality.SINGLE),
    _reference_rule("prev", "invalid-prev", Cardinality.SINGLE),
    _reference_rule("preview", "invalid-preview"),
    _reference_rule("relationship", "invalid-relationship", validator=_object_or_bare_uri, reify=True),
    _reference_rule("replies", "invalid-replies", Cardinality.SINGLE,
                    reify=True, reference_type=ALL_COLLECTION_TYPES),
    _reference_rule("result", "invalid-result", reify=True),
    _reference_rule("streams", "invalid-streams", Cardinality.COLLECTION,
                    reify=True, reference_type=COLLECTION_TYPES),
    _reference_rule("subject", "invalid-subject", Cardinality.SINGLE, reify=True),
    _reference_rule("tag", "invalid-tag", reify=True),
    _reference_rule("target", "invalid-target"),
    _reference_rule("to", "invalid-to"),
    _reference_rule("url", "invalid-url", validator=link_or_uri),

    # Literal-valued properties
    PropertyRule("accuracy", Cardinality.SINGLE, _in_range(0, 100), _invalid("invalid-accuracy", Severity.SHOULD)),
    PropertyRule("altitude", Cardinality.SINGLE, is_number, _invalid("invalid-altitude", Severity.SHOULD)),
    PropertyRule("closed", Cardinality.ONE_OR_MORE, _closed, _invalid("invalid-closed")),
    PropertyRule("content", Cardinality.SINGLE, _string, _invalid("invalid-content")),
    PropertyRule("contentMap", Cardinality.SINGLE, _language_map, _invalid("invalid-content-map")),
    PropertyRule("duration", Cardinality.SINGLE, xsd_duration, _invalid("invalid-duration")),
    PropertyRule("formerType", Cardinality.ONE_OR_MORE, _former_type, _invalid("invalid-former-type", Severity.SHOULD)),
    PropertyRule("height", Cardinality.SINGLE, is_non_negative_int, _invalid("invalid-height")),
    PropertyRule("hreflang", Cardinality.SINGLE, _pattern(LANGUAGE_TAG_PATTERN), _invalid("invalid-hreflang", Severity.SHOULD)),
    PropertyRule("latitude", Cardinality.SINGLE, _in_range(-90, 90), _invalid("invalid-latitude")),
    PropertyRule("longitude", Cardinality.SINGLE, _in_range(-180, 180), _invalid("invalid-longitude")),
    PropertyRule("mediaType", Cardinality.SINGLE, _pattern(MIME_TYPE_PATTERN), _invalid("invalid-media-type", Severity.MINOR)),
    PropertyRule("name", Cardinality.SINGLE, _string, _invalid("invalid-name")),
    PropertyRule("nameMap", Cardinality.SINGLE, _language_map, _invalid("invalid-name-map")),
    PropertyRule("preferredUsername", Cardinality.SINGLE, _string, _invalid("invalid-preferred-username")),
    PropertyRule("radius", Cardinality.SINGLE, _in_range(0, None), _invalid("invalid-radius")),
    PropertyRule("rel", Cardinality.ONE_OR_MORE, _rel, _invalid("invalid-rel", Severity.SHOULD)),
    PropertyRule("startIndex", Cardinality.SINGLE, is_non_negative_int, _invalid("invalid-start-index")),
    PropertyRule("summary", Cardinality.SINGLE, _string, _invalid("invalid-summary")),
    PropertyRule("summaryMap", Cardinality.SINGLE, _language_map, _invalid("invalid-summary-map")),
    PropertyRule("totalItems", Cardinality.SINGLE, is_non_negative_int, _invalid("invalid-total-items")),
    PropertyRule("units", Cardinality.SINGLE, _units, _invalid("invalid-units", Severity.SHOULD)),
    PropertyRule("width", Cardinality.SINGLE, is_non_negative_int, _invalid("invalid-width")),

    # Date-time properties
    _date_time_rule(
        "deleted",
        RequiredIf(_is_tombstone, "type is Tombstone"),
        FaultSpec(Severity.SHOULD, "no-deleted-tombstone"),
    ),
    _date_time_rule("endTime"),
    _date_time_rule("published"),
    _date_time_rule("startTime"),
    _date_time_rule("updated"),
])

REQUIRED_PROPERTY_NAMES = frozenset(
    name for name, rule in PROPERTY_RULES.items() if not isinstance(rule.required, NeverRequired)
)


def check_property(doc: Document, name: str, ctx: ValidationContext | None = None) -> list[Fault]:
    """Return the faults in property `name` of `doc` according to its rule.

    Unrecognised properties are ignored. The required check and the value
    check are independent; both may fire.
    """
    rule = PROPERTY_RULES.get(name)
    if rule is None:
        return []
    ctx = ensure_context(ctx)
    faults: list[Fault] = []

    present = name in doc and doc[name] is not None
    if rule.required.holds(doc) and not present and rule.missing is not None:
        faults.append(ctx.fault(rule.missing.severity, rule.missing.token))
    if present and not rule.value_valid(doc[name]):
        logger.debug(f"Property {name} failed validation")
        faults.append(ctx.fault(rule.invalid.severity, rule.invalid.token))
    elif present and rule.reify and ctx.reify_refs:
        faults.extend(_referenced_faults(rule, doc[name], ctx))
    return faults


def _referenced_faults(rule: PropertyRule, value: Any, ctx: ValidationContext) -> list[Fault]:
    """Fetch and validate the objects that URI values of `rule` point at.

    Inline objects and links are left as the value check found them.
    """
    # references imports objects, which imports this module
    from .references import coll_object_reference_or_faults

    uris = [v for v in (value if is_sequence(value) else [value]) if isinstance(v, str)]
    if not uris:
        return []
    return coll_object_reference_or_faults(
        uris, rule.reference_type, rule.invalid.severity, rule.invalid.token, ctx
    )


def check_all_properties(doc: Document, ctx: ValidationContext | None = None) -> list[Fault]:
    """Check every property present in `doc`, and every required one.

    Required properties are checked even when absent, since they contribute
    no key to iterate over.
    """
    ctx = ensure_context(ctx)
    names = sorted(set(doc.keys()) | REQUIRED_PROPERTY_NAMES, key=str)
    faults: list[Fault] = []
    for name in names:
        faults.extend(check_property(doc, name, ctx))
    return faults
