"""Vocabulary constants for the quack validator.

Type sets and URIs from the ActivityStreams 2.0 vocabulary
(https://www.w3.org/TR/activitystreams-vocabulary/) and the fault report
vocabulary.
"""

ACTIVITYSTREAMS_CONTEXT_URI = "https://www.w3.org/ns/activitystreams"

VALIDATION_FAULT_CONTEXT_URI = "https://simon-brooke.github.io/dog-and-duck/codox/Validation_Faults.html"

CONTEXT_KEY = "@context"

# https://www.w3.org/TR/activitystreams-vocabulary/#actor-types
ACTOR_TYPES = frozenset({
    "Application",
    "Group",
    "Organization",
    "Person",
    "Service",
})

# https://www.w3.org/TR/activitystreams-vocabulary/#activity-types
VERB_TYPES = frozenset({
    "Accept", "Add", "Announce", "Arrive", "Block", "Create", "Delete",
    "Dislike", "Flag", "Follow", "Ignore", "Invite", "Join", "Leave", "Like",
    "Listen", "Move", "Offer", "Question", "Reject", "Read", "Remove",
    "TentativeAccept", "TentativeReject", "Travel", "Undo", "Update", "View",
})

INTRANSITIVE_VERB_TYPES = frozenset({"Arrive", "Question", "Travel"})

LINK_TYPES = frozenset({"Link", "Mention"})

COLLECTION_TYPES = frozenset({"Collection", "OrderedCollection"})

COLLECTION_PAGE_TYPES = frozenset({"CollectionPage", "OrderedCollectionPage"})

ALL_COLLECTION_TYPES = COLLECTION_TYPES | COLLECTION_PAGE_TYPES

# Types accepted as the object of an Accept or TentativeAccept
ACCEPT_TARGET_TYPES = frozenset({"Invite", "Person"})

# Types one may be invited to
INVITE_TARGET_TYPES = frozenset({"Event", "Group"})

MIME_TYPE_PATTERN = r"\w+/[-+.\w]+"

# BCP47 language tag, loosely
LANGUAGE_TAG_PATTERN = r"[A-Za-z]{1,8}(-[A-Za-z0-9]{1,8})*"

UNITS = frozenset({"cm", "feet", "inches", "km", "m", "miles"})
