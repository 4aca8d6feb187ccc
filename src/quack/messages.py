"""Narrative text for fault codes.

The engine only needs a callable mapping a fault code to text (or None).
This module provides the built-in British English table used when no other
narrator is supplied.
"""

from typing import Callable

Narrator = Callable[[str], str | None]

MESSAGES: dict[str, str] = {
    # Baseline object shape
    "not-an-object": "ActivityStreams objects must be JSON objects.",
    "no-context": (
        "Section 3 of the ActivityPub specification states Implementers SHOULD include "
        "the ActivityPub context in their object definitions."
    ),
    "no-type": (
        "The ActivityPub specification states that the `type` field is optional, but it "
        "is hard to process objects with no known type."
    ),
    "no-id-transient": (
        "The ActivityPub specification allows objects without `id` fields only if they "
        "are intentionally transient; even so it is preferred that the object should "
        "have an explicit null id."
    ),
    "unexpected-type": "The `type` value of the object was not one expected in this position.",

    # Persistent objects
    "no-id-persistent": "Persistent objects MUST have unique global identifiers.",
    "null-id-persistent": "Persistent objects MUST have non-null identifiers.",
    "id-not-uri": "Identifiers must be publicly dereferencable URIs.",
    "id-not-https": "Publicly facing content SHOULD use HTTPS URIs.",

    # Actors
    "not-actor-type": "The `type` value of the object was not a recognised actor type.",
    "no-inbox": (
        "Actor objects MUST have an `inbox` property, whose value MUST be a reference "
        "to an ordered collection."
    ),
    "invalid-inbox-uri": "The `inbox` value of an actor MUST be a valid URI.",
    "no-outbox": (
        "Actor objects MUST have an `outbox` property, whose value MUST be a reference "
        "to an ordered collection."
    ),
    "invalid-outbox-uri": "The `outbox` value of an actor MUST be a valid URI.",

    # Links
    "expected-link": "A Link object was expected here.",
    "no-href-uri": "Link objects MUST have an `href` property.",
    "invalid-href-uri": "The `href` value of a Link MUST be a valid URI.",
    "invalid-media-type": "The `mediaType` value should be a MIME media type.",
    "invalid-hreflang": "The `hreflang` value should be a BCP47 language tag.",
    "invalid-rel": "Link relations may not contain whitespace or commas.",
    "invalid-height": "The `height` value must be a non-negative integer.",
    "invalid-width": "The `width` value must be a non-negative integer.",

    # Activities
    "not-activity-type": "The `type` value of the object was not a recognised activity type.",
    "no-summary": "Activities SHOULD have a `summary` property.",
    "no-actor": "Activities MUST have an `actor` which is, or references, an actor.",
    "no-object": "Transitive activities MUST have an `object` property.",
    "bad-accept-target": "The object of an Accept MUST be an Invite or a Person.",
    "bad-invite-target": "The target of an Invite MUST be an Event or a Group.",

    # Collections
    "expected-collection": "A collection object was expected here.",
    "no-items": "A collection should have either items or pages of items.",
    "no-items-collection": "The items of a simple collection MUST be a list.",
    "not-object-reference": "Collection items MUST be objects or references to objects.",
    "no-first-page": "Paged collections MUST have a `first` page.",
    "no-last-page": "Paged collections SHOULD have a `last` page.",
    "no-part-of": "A collection page SHOULD reference the collection it is part of.",
    "no-next-page": "The `next` value of a collection page should reference a page.",
    "no-prev-page": "The `prev` value of a collection page should reference a page.",
    "invalid-total-items": "The `totalItems` value must be a non-negative integer.",
    "invalid-start-index": "The `startIndex` value must be a non-negative integer.",
    "invalid-items": "The `items` value must be a list of objects or references.",
    "invalid-ordered-items": "The `orderedItems` value must be a list of objects or references.",
    "invalid-first": "The `first` value must be a collection page or a reference to one.",
    "invalid-last": "The `last` value must be a collection page or a reference to one.",
    "invalid-current": "The `current` value must be a collection page or a reference to one.",
    "invalid-next": "The `next` value must be a collection page or a reference to one.",
    "invalid-prev": "The `prev` value must be a collection page or a reference to one.",
    "invalid-part-of": "The `partOf` value must be a collection or a reference to one.",

    # Time
    "not-valid-date-time": "Date and time values MUST be valid xsd:dateTime strings.",
    "invalid-duration": "The `duration` value must be a valid xsd:duration string.",
    "no-deleted-tombstone": "A Tombstone should record when the object was `deleted`.",

    # Object-valued properties
    "invalid-actor": "The `actor` value must be an object, a link or a URI.",
    "invalid-attachment": "The `attachment` value must be an object, a link or a URI.",
    "invalid-attributed-to": "The `attributedTo` value must be an object, a link or a URI.",
    "invalid-audience": "The `audience` value must be an object, a link or a URI.",
    "invalid-bcc": "The `bcc` value must be an object, a link or a URI.",
    "invalid-bto": "The `bto` value must be an object, a link or a URI.",
    "invalid-cc": "The `cc` value must be an object, a link or a URI.",
    "invalid-context": "The `context` value must be an object, a link or a URI.",
    "invalid-generator": "The `generator` value must be an object, a link or a URI.",
    "invalid-icon": "The `icon` value must be an Image, a link or a URI.",
    "invalid-image": "The `image` value must be an Image, a link or a URI.",
    "invalid-in-reply-to": "The `inReplyTo` value must be an object, a link or a URI.",
    "invalid-instrument": "The `instrument` value must be an object, a link or a URI.",
    "invalid-location": "The `location` value must be an object, a link or a URI.",
    "invalid-object": "The `object` value must be an object, a link or a URI.",
    "invalid-origin": "The `origin` value must be an object, a link or a URI.",
    "invalid-preview": "The `preview` value must be an object, a link or a URI.",
    "invalid-replies": "The `replies` value must be a collection or a reference to one.",
    "invalid-result": "The `result` value must be an object, a link or a URI.",
    "invalid-tag": "The `tag` value must be an object, a link or a URI.",
    "invalid-target": "The `target` value must be an object, a link or a URI.",
    "invalid-to": "The `to` value must be an object, a link or a URI.",
    "invalid-url": "The `url` value must be a link or a URI.",
    "invalid-one-of": "The `oneOf` value must be a list of objects or references.",
    "invalid-any-of": "The `anyOf` value must be a list of objects or references.",
    "invalid-closed": "The `closed` value must be an object, a URI, a date-time or a boolean.",
    "invalid-subject": "The `subject` value must be an object, a link or a URI.",
    "invalid-relationship": "The `relationship` value must be an object or a URI.",
    "invalid-describes": "The `describes` value must be an object or a URI.",
    "invalid-former-type": "The `formerType` value must be a type name or an object.",
    "invalid-following": "The `following` value must be a collection or a reference to one.",
    "invalid-followers": "The `followers` value must be a collection or a reference to one.",
    "invalid-liked": "The `liked` value must be a collection or a reference to one.",
    "invalid-streams": "The `streams` value must be a list of collections or references.",
    "invalid-endpoints": "The `endpoints` value must be an object or a URI.",

    # Literal-valued properties
    "invalid-accuracy": "The `accuracy` value must be a number between 0 and 100.",
    "invalid-altitude": "The `altitude` value must be a number.",
    "invalid-content": "The `content` value must be a string.",
    "invalid-content-map": "The `contentMap` value must map language tags to strings.",
    "invalid-name": "The `name` value must be a string.",
    "invalid-name-map": "The `nameMap` value must map language tags to strings.",
    "invalid-summary": "The `summary` value must be a string.",
    "invalid-summary-map": "The `summaryMap` value must map language tags to strings.",
    "invalid-latitude": "The `latitude` value must be a number between -90 and 90.",
    "invalid-longitude": "The `longitude` value must be a number between -180 and 180.",
    "invalid-radius": "The `radius` value must be a non-negative number.",
    "invalid-units": "The `units` value must be a recognised unit or a URI.",
    "invalid-preferred-username": "The `preferredUsername` value must be a string.",
}


def get_message(code: str) -> str | None:
    """Return the narrative registered for this fault `code`, or None."""
    return MESSAGES.get(code)
