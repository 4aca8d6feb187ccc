"""Duck-typing predicates: if it walks like a duck, and it quacks like a duck...

Each predicate validates its argument and answers whether no fault reached
the rejection severity. In practice documents seen in the wild are rarely
fully valid, and this need not matter; the threshold tunes how picky the
answer is. None of these raise.
"""

import logging
from collections.abc import Callable
from typing import Any

from ..faults import Fault, Severity, filter_by_severity
from .activities import activity_faults
from .actors import actor_faults
from .collections import collection_faults
from .context import ValidationContext, ensure_context
from .links import link_faults
from .objects import object_faults, persistent_object_faults

logger = logging.getLogger(__name__)


def _passes(validator: Callable[..., list[Fault]], x: Any,
            threshold: Severity | str | None, ctx: ValidationContext | None) -> bool:
    try:
        ctx = ensure_context(ctx)
        threshold = threshold or ctx.settings.reject_severity
        return not filter_by_severity(validator(x, ctx=ctx), threshold)
    except Exception as e:
        logger.debug(f"{validator.__name__} raised {type(e).__name__}: {e}")
        return False


def is_object(x: Any, threshold: Severity | str | None = None,
              ctx: ValidationContext | None = None) -> bool:
    """True iff `x` is recognisably an ActivityStreams object."""
    return _passes(object_faults, x, threshold, ctx)


def is_persistent_object(x: Any, threshold: Severity | str | None = None,
                         ctx: ValidationContext | None = None) -> bool:
    """True iff `x` is an object with a dereferencable identifier."""
    return _passes(persistent_object_faults, x, threshold, ctx)


def is_actor(x: Any, threshold: Severity | str | None = None,
             ctx: ValidationContext | None = None) -> bool:
    return _passes(actor_faults, x, threshold, ctx)


def is_activity(x: Any, threshold: Severity | str | None = None,
                ctx: ValidationContext | None = None) -> bool:
    return _passes(activity_faults, x, threshold, ctx)


def is_link(x: Any, threshold: Severity | str | None = None,
            ctx: ValidationContext | None = None) -> bool:
    return _passes(link_faults, x, threshold, ctx)


def is_collection(x: Any, threshold: Severity | str | None = None,
                  ctx: ValidationContext | None = None) -> bool:
    return _passes(collection_faults, x, threshold, ctx)
