"""Tests for the property rule table."""

import pytest
from conftest import codes

from quack.faults import Severity
from quack.validation.properties import (
    PROPERTY_RULES,
    REQUIRED_PROPERTY_NAMES,
    Cardinality,
    NeverRequired,
    PropertyRule,
    RequiredIf,
    check_all_properties,
    check_property,
)


class TestRuleTable:
    """Test the shape of the rule table."""

    def test_immutable(self):
        with pytest.raises(TypeError):
            PROPERTY_RULES["content"] = None

    def test_rules_named_by_key(self):
        assert all(rule.name == name for name, rule in PROPERTY_RULES.items())

    def test_specialised_properties_not_in_table(self):
        """Properties owned by specific validators are not checked generically."""
        for name in ("@context", "id", "type", "href", "inbox", "outbox"):
            assert name not in PROPERTY_RULES

    def test_deleted_required_for_tombstones(self):
        rule = PROPERTY_RULES["deleted"]
        assert isinstance(rule.required, RequiredIf)
        assert rule.missing.token == "no-deleted-tombstone"
        assert REQUIRED_PROPERTY_NAMES == frozenset({"deleted"})

    def test_reified_properties(self):
        """Properties followed by other validators, addressing and media are never fetched here."""
        for name in ("actor", "object", "target", "first", "last", "next", "prev", "partOf",
                     "current", "items", "orderedItems", "to", "cc", "bto", "bcc", "audience",
                     "url", "icon", "image"):
            assert not PROPERTY_RULES[name].reify
        assert PROPERTY_RULES["attributedTo"].reify
        assert PROPERTY_RULES["attributedTo"].reference_type is None
        assert "OrderedCollection" in PROPERTY_RULES["followers"].reference_type

    def test_rule_is_frozen(self):
        with pytest.raises(AttributeError):
            PROPERTY_RULES["content"].name = "other"


class TestCardinality:
    """Test how cardinality governs value validation."""

    def rule(self, cardinality):
        return PropertyRule("x", cardinality, lambda v: v == "ok", invalid=None)

    def test_single(self):
        assert self.rule(Cardinality.SINGLE).value_valid("ok")
        assert not self.rule(Cardinality.SINGLE).value_valid(["ok"])

    def test_collection(self):
        assert self.rule(Cardinality.COLLECTION).value_valid(["ok", "ok"])
        assert self.rule(Cardinality.COLLECTION).value_valid([])
        assert not self.rule(Cardinality.COLLECTION).value_valid("ok")
        assert not self.rule(Cardinality.COLLECTION).value_valid(["ok", "bad"])

    def test_one_or_more(self):
        assert self.rule(Cardinality.ONE_OR_MORE).value_valid("ok")
        assert self.rule(Cardinality.ONE_OR_MORE).value_valid(["ok", "ok"])
        assert not self.rule(Cardinality.ONE_OR_MORE).value_valid(["ok", "bad"])

    def test_default_requirement(self):
        assert isinstance(self.rule(Cardinality.SINGLE).required, NeverRequired)


class TestCheckProperty:
    """Test checking single properties."""

    def test_unknown_property_ignored(self, ctx):
        assert check_property({"sensitive": "maybe"}, "sensitive", ctx) == []

    def test_absent_optional_property(self, ctx):
        assert check_property({}, "content", ctx) == []

    def test_null_treated_as_absent(self, ctx):
        assert check_property({"content": None}, "content", ctx) == []

    @pytest.mark.parametrize("name,value,code", [
        ("content", 42, "invalid-content"),
        ("name", ["a"], "invalid-name"),
        ("latitude", 91, "invalid-latitude"),
        ("longitude", -181, "invalid-longitude"),
        ("accuracy", 101, "invalid-accuracy"),
        ("height", -1, "invalid-height"),
        ("width", 1.5, "invalid-width"),
        ("totalItems", True, "invalid-total-items"),
        ("mediaType", "png", "invalid-media-type"),
        ("hreflang", "en_GB", "invalid-hreflang"),
        ("rel", "alternate canonical", "invalid-rel"),
        ("units", "parsecs", "invalid-units"),
        ("units", ["m"], "invalid-units"),
        ("units", {"a": 1}, "invalid-units"),
        ("duration", "2 hours", "invalid-duration"),
        ("published", "last tuesday", "not-valid-date-time"),
        ("contentMap", {"en": 3}, "invalid-content-map"),
        ("url", {"type": "Note"}, "invalid-url"),
        ("attributedTo", "not a uri", "invalid-attributed-to"),
        ("items", "https://example.com/a", "invalid-items"),
        ("icon", {"type": "Note"}, "invalid-icon"),
    ])
    def test_invalid_values(self, ctx, name, value, code):
        assert codes(check_property({name: value}, name, ctx)) == [code]

    @pytest.mark.parametrize("name,value", [
        ("content", "hello"),
        ("latitude", -33.9),
        ("accuracy", 100),
        ("mediaType", "application/activity+json"),
        ("hreflang", "en-GB"),
        ("rel", ["alternate", "canonical"]),
        ("units", "https://example.com/units/furlongs"),
        ("duration", "PT5M"),
        ("published", "2023-01-15T10:30:00Z"),
        ("nameMap", {"en": "Hello", "fr": "Bonjour"}),
        ("url", "https://example.com/a"),
        ("to", ["https://example.com/a", {"type": "Person", "id": "https://example.com/b"}]),
        ("icon", {"type": "Image", "url": "https://example.com/a.png"}),
        ("closed", True),
        ("items", ["https://example.com/a", {"content": "untyped"}]),
    ])
    def test_valid_values(self, ctx, name, value):
        assert check_property({name: value}, name, ctx) == []

    def test_severity_from_rule(self, ctx):
        (fault,) = check_property({"mediaType": "png"}, "mediaType", ctx)
        assert fault.severity is Severity.MINOR


class TestConditionalRequirement:
    """Test properties required only in some documents."""

    def test_tombstone_without_deleted(self, ctx):
        faults = check_property({"type": "Tombstone"}, "deleted", ctx)
        assert codes(faults) == ["no-deleted-tombstone"]
        assert faults[0].severity is Severity.SHOULD

    def test_tombstone_with_deleted(self, ctx):
        assert check_property({"type": "Tombstone", "deleted": "2023-01-15T10:30:00Z"}, "deleted", ctx) == []

    def test_other_types_need_no_deleted(self, ctx):
        assert check_property({"type": "Note"}, "deleted", ctx) == []

    def test_invalid_deleted_on_tombstone(self, ctx):
        assert codes(check_property({"type": "Tombstone", "deleted": "never"}, "deleted", ctx)) == ["not-valid-date-time"]


class TestCheckAllProperties:
    """Test checking whole documents."""

    def test_clean(self, ctx, note):
        assert check_all_properties(note, ctx) == []

    def test_required_absent_property_checked(self, ctx):
        assert codes(check_all_properties({"type": "Tombstone"}, ctx)) == ["no-deleted-tombstone"]

    def test_collects_every_fault(self, ctx):
        faults = check_all_properties({"content": 1, "name": 2, "custom": object()}, ctx)
        assert sorted(codes(faults)) == ["invalid-content", "invalid-name"]
