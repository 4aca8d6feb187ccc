"""quack - fault-finding validator for ActivityStreams and ActivityPub documents.

quack checks loosely structured ActivityStreams documents against the
vocabulary and reports a severity-ranked list of faults rather than a
single pass/fail verdict.
"""

__version__ = "0.1.0"
__author__ = "quack contributors"
__description__ = "Fault-finding validator for ActivityStreams and ActivityPub documents"

from quack.config import QuackConfig, ValidationSettings

__all__ = [
    "__version__",
    "__author__",
    "__description__",
    "QuackConfig",
    "ValidationSettings",
]
