"""Fault-finder for ActivityStreams and ActivityPub documents.

Each `*_faults` function returns an empty list if no faults were found,
else a list of `Fault` records. Each fault carries a severity, a stable
fault code and a narrative, and can be serialised as an ActivityStreams
shaped document in its own right.
"""

from ..faults import (
    Fault,
    InvalidArgumentError,
    Severity,
    concat_faults,
    fault_distribution,
    filter_by_severity,
    make_fault,
)
from .activities import ACTIVITY_REQUIRED_PROPERTIES, activity_faults, activity_type_faults
from .actors import actor_faults
from .collections import (
    collection_faults,
    collection_page_faults,
    paged_collection_faults,
    simple_collection_faults,
)
from .context import ValidationContext
from .dispatch import document_faults, document_shape, documents_faults
from .links import link_faults
from .objects import object_faults, persistent_object_faults
from .predicates import (
    is_activity,
    is_actor,
    is_collection,
    is_link,
    is_object,
    is_persistent_object,
)
from .properties import PROPERTY_RULES, check_all_properties, check_property
from .references import coll_object_reference_or_faults, object_reference_or_faults

__all__ = [
    "ACTIVITY_REQUIRED_PROPERTIES",
    "PROPERTY_RULES",
    "Fault",
    "InvalidArgumentError",
    "Severity",
    "ValidationContext",
    "activity_faults",
    "activity_type_faults",
    "actor_faults",
    "check_all_properties",
    "check_property",
    "coll_object_reference_or_faults",
    "collection_faults",
    "collection_page_faults",
    "concat_faults",
    "document_faults",
    "document_shape",
    "documents_faults",
    "fault_distribution",
    "filter_by_severity",
    "is_activity",
    "is_actor",
    "is_collection",
    "is_link",
    "is_object",
    "is_persistent_object",
    "link_faults",
    "make_fault",
    "object_faults",
    "object_reference_or_faults",
    "paged_collection_faults",
    "persistent_object_faults",
    "simple_collection_faults",
]
