"""Tests for the validation utility predicates."""

import pytest

from quack.constants import ACTIVITYSTREAMS_CONTEXT_URI
from quack.faults import InvalidArgumentError, Severity, make_fault
from quack.validation.time import xsd_date_time, xsd_duration
from quack.validation.utils import (
    any_or_faults,
    has_activity_type,
    has_actor_type,
    has_context,
    has_type,
    has_type_or_fault,
    is_context,
    is_uri,
    link_or_uri,
    object_or_uri,
    string_or_fault,
    type_values,
    uri_or_fault,
)


class TestIsUri:
    """Test URI recognition."""

    @pytest.mark.parametrize("value", [
        "https://example.com/users/alice",
        "http://localhost:8080/inbox",
        "urn:uuid:6e8bc430-9c3a-11d9-9669-0800200c9a66",
        "mailto:alice@example.com",
    ])
    def test_valid(self, value):
        assert is_uri(value)

    @pytest.mark.parametrize("value", [
        None, "", 42, "not a uri", "example.com/no-scheme", "https://exa mple.com", "1http://x", {},
    ])
    def test_invalid(self, value):
        assert not is_uri(value)


class TestTypes:
    """Test type predicates."""

    def test_type_values(self):
        assert type_values({"type": "Note"}) == ["Note"]
        assert type_values({"type": ["Note", "Article"]}) == ["Note", "Article"]
        assert type_values({}) == []
        assert type_values("Note") == []

    def test_has_type_single_or_set(self):
        assert has_type({"type": "Note"}, "Note")
        assert has_type({"type": ["Note", "Article"]}, {"Article", "Image"})
        assert not has_type({"type": "Note"}, {"Person"})

    def test_has_type_bad_acceptable(self):
        """An acceptable type that is neither a name nor a set is a contract error."""
        with pytest.raises(InvalidArgumentError):
            has_type({"type": "Note"}, 42)

    def test_actor_and_activity(self):
        assert has_actor_type({"type": "Service"})
        assert not has_actor_type({"type": "Note"})
        assert has_activity_type({"type": "Create"})
        assert not has_activity_type({"type": "Person"})


class TestContext:
    """Test context recognition."""

    def test_uri_context(self):
        assert is_context(ACTIVITYSTREAMS_CONTEXT_URI)

    def test_extended_context(self):
        assert is_context([ACTIVITYSTREAMS_CONTEXT_URI, {"toot": "http://joinmastodon.org/ns#"}])

    @pytest.mark.parametrize("value", [
        None,
        "https://example.com/ns",
        [ACTIVITYSTREAMS_CONTEXT_URI],
        [ACTIVITYSTREAMS_CONTEXT_URI, {"a": 1}, {"b": 2}],
        ["https://example.com/ns", {"a": 1}],
    ])
    def test_not_context(self, value):
        assert not is_context(value)

    def test_has_context(self):
        assert has_context({"@context": ACTIVITYSTREAMS_CONTEXT_URI})
        assert not has_context({"type": "Note"})


class TestShallowPredicates:
    """Test the shallow value checks."""

    def test_object_or_uri(self):
        assert object_or_uri("https://example.com/a")
        assert object_or_uri({"type": "Note"})
        assert not object_or_uri({"content": "untyped"})
        assert not object_or_uri("nope")

    def test_link_or_uri(self):
        assert link_or_uri("https://example.com/a")
        assert link_or_uri({"type": "Mention", "href": "https://example.com/a"})
        assert not link_or_uri({"type": "Note"})


class TestFaultHelpers:
    """Test the fault-producing helpers."""

    def test_has_type_or_fault(self, ctx):
        assert has_type_or_fault({"type": "Note"}, "Note", ctx, Severity.MUST, "unexpected-type") is None
        assert has_type_or_fault({"type": "Note"}, None, ctx, Severity.MUST, "unexpected-type") is None
        fault = has_type_or_fault({"type": "Note"}, "Person", ctx, Severity.MUST, "unexpected-type")
        assert fault.fault == "unexpected-type"

    def test_uri_or_fault(self, ctx):
        assert uri_or_fault("https://example.com/inbox", ctx, Severity.MUST, "no-inbox", "invalid-inbox-uri") is None
        assert uri_or_fault(None, ctx, Severity.MUST, "no-inbox", "invalid-inbox-uri").fault == "no-inbox"
        assert uri_or_fault("inbox", ctx, Severity.MUST, "no-inbox", "invalid-inbox-uri").fault == "invalid-inbox-uri"
        assert uri_or_fault("inbox", ctx, Severity.MUST, "no-inbox").fault == "no-inbox"

    def test_string_or_fault(self, ctx):
        assert string_or_fault("abc", ctx, Severity.MINOR, "invalid-name") is None
        assert string_or_fault(3, ctx, Severity.MINOR, "invalid-name").fault == "invalid-name"
        assert string_or_fault("abc", ctx, Severity.MINOR, "invalid-name", r"\d+").fault == "invalid-name"

    def test_any_or_faults_passes_on_any_clean_option(self, ctx):
        bad = [make_fault(Severity.MUST, "no-actor")]
        assert any_or_faults([bad, []], ctx, Severity.MUST, "bad-accept-target") == []

    def test_any_or_faults_collects_everything(self, ctx):
        first = [make_fault(Severity.MUST, "no-actor")]
        second = [make_fault(Severity.MINOR, "no-type")]
        faults = any_or_faults([first, second], ctx, Severity.MUST, "bad-accept-target")
        assert [f.fault for f in faults] == ["bad-accept-target", "no-actor", "no-type"]


class TestTime:
    """Test date-time and duration recognition."""

    @pytest.mark.parametrize("value", [
        "2023-01-15T10:30:00Z", "2023-01-15T10:30:00.123+05:30", "2023-01-15T10:30:00",
    ])
    def test_valid_date_time(self, value):
        assert xsd_date_time(value)

    @pytest.mark.parametrize("value", [
        "2023-01-15", "2023-13-45T10:30:00Z", "yesterday", 20230115, None,
        "-2023-01-15T10:30:00Z", "12023-01-15T10:30:00Z", "0000-01-15T10:30:00Z",
    ])
    def test_invalid_date_time(self, value):
        assert not xsd_date_time(value)

    @pytest.mark.parametrize("value", ["PT2H", "P1Y2M3DT4H5M6.5S", "P5D", "-PT30M"])
    def test_valid_duration(self, value):
        assert xsd_duration(value)

    @pytest.mark.parametrize("value", ["P", "PT", "2H", "P1H", 5])
    def test_invalid_duration(self, value):
        assert not xsd_duration(value)
