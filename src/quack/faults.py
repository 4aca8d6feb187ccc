"""Fault model for the quack validator.

Every check returns a list of faults; an empty list means the check passed.
Faults are immutable records which can themselves be serialised as
ActivityStreams-shaped documents.
"""

import itertools
import logging
import os
import socket
import time
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .constants import CONTEXT_KEY, VALIDATION_FAULT_CONTEXT_URI
from .messages import Narrator, get_message

logger = logging.getLogger(__name__)


class InvalidArgumentError(ValueError):
    """Raised when the engine itself is called with arguments it cannot handle.

    This indicates a bug in the calling code, not a fault in a document.
    """

    def __init__(self, message: str, arguments: dict[str, Any] | None = None):
        self.arguments = arguments or {}
        super().__init__(message)


class Severity(str, Enum):
    """Severity of faults found, least to most severe.

    0. ``info`` not actually a fault, but an issue noted during validation;
    1. ``minor`` things which breach good practice but not the vocabulary;
    2. ``should`` the vocabulary says something SHOULD be done, which isn't;
    3. ``must`` the vocabulary says something MUST be done, which isn't;
    4. ``critical`` the object cannot be meaningfully processed.
    """
    INFO = "info"
    MINOR = "minor"
    SHOULD = "should"
    MUST = "must"
    CRITICAL = "critical"

    @property
    def rank(self) -> int:
        return _SEVERITY_RANKS[self]

    def __lt__(self, other):
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other):
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other):
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other):
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank >= other.rank

    __hash__ = str.__hash__


_SEVERITY_RANKS = {severity: rank for rank, severity in enumerate(Severity)}

_fault_serial = itertools.count()


def _mint_fault_id() -> str:
    """Mint a diagnostic identifier unique to this process and moment."""
    millis = int(time.time() * 1000)
    return f"https://{socket.gethostname()}/fault/{os.getpid()}:{millis}:{next(_fault_serial)}"


@dataclass(frozen=True)
class Fault:
    """A single rule violation found in a document."""
    severity: Severity
    fault: str
    narrative: str
    id: str
    context: str = VALIDATION_FAULT_CONTEXT_URI
    type: str = "Fault"

    def to_dict(self) -> dict[str, Any]:
        """Convert to the literal fault record shape."""
        return {
            CONTEXT_KEY: self.context,
            "id": self.id,
            "type": self.type,
            "severity": self.severity.value,
            "fault": self.fault,
            "narrative": self.narrative,
        }

    def __str__(self) -> str:
        return f"[{self.severity.value.upper()}] {self.fault}: {self.narrative}"


def make_fault(severity: Severity | str, code: str, narrator: Narrator | None = None) -> Fault:
    """Return a fault with this `severity` and `code`.

    The narrative is looked up by `code`; if nothing is registered for it a
    warning is logged and the code itself is used as narrative.
    """
    lookup = narrator or get_message
    narrative = lookup(code)
    if narrative is None:
        logger.warning(f"No narrative provided for fault token {code}")
        narrative = code
    return Fault(
        severity=Severity(severity),
        fault=code,
        narrative=narrative,
        id=_mint_fault_id(),
    )


def concat_faults(*groups: "Iterable[Fault | None] | Fault | None") -> list[Fault]:
    """Concatenate fault groups, dropping None and empty entries.

    Each argument may be a single fault, None, or an iterable of faults and
    Nones. The result is always a list; an empty list means no faults.
    """
    result: list[Fault] = []
    for group in groups:
        if group is None:
            continue
        if isinstance(group, Fault):
            result.append(group)
            continue
        result.extend(fault for fault in group if fault is not None)
    return result


def filter_by_severity(faults: Iterable[Fault] | None, threshold: Severity | str) -> list[Fault]:
    """Return those of these `faults` whose severity is at or above `threshold`.

    Raises:
        InvalidArgumentError: if `faults` is not a collection of faults
    """
    if faults is None:
        return []
    try:
        threshold = Severity(threshold)
    except ValueError as e:
        raise InvalidArgumentError(
            f"Unknown severity threshold: {threshold!r}",
            {"faults": faults, "severity": threshold},
        ) from e
    if isinstance(faults, (str, bytes, dict)) or not isinstance(faults, Iterable):
        raise InvalidArgumentError(
            "Argument `faults` was not a collection of fault reports",
            {"faults": faults, "severity": threshold},
        )
    faults = list(faults)
    if not all(isinstance(fault, Fault) for fault in faults):
        raise InvalidArgumentError(
            "Argument `faults` was not a collection of fault reports",
            {"faults": faults, "severity": threshold},
        )
    return [fault for fault in faults if fault.severity >= threshold]


def fault_distribution(faults: Iterable[Fault]) -> dict[str, int]:
    """Count occurrences of each fault code in `faults`."""
    return dict(Counter(fault.fault for fault in faults))
