"""Call-scoped validation context.

Settings, narrator and resolver are passed explicitly to every check rather
than held in module state.
"""

from dataclasses import dataclass, field, replace

from ..config import ValidationSettings
from ..faults import Fault, Severity, make_fault
from ..messages import Narrator, get_message
from ..resources import ReferenceResolver


@dataclass(frozen=True)
class ValidationContext:
    """Everything a validation call needs besides the document itself."""
    settings: ValidationSettings = field(default_factory=ValidationSettings)
    narrator: Narrator = get_message
    resolver: ReferenceResolver | None = None
    depth: int = 0
    visited: frozenset[str] = frozenset()

    def __post_init__(self):
        if self.resolver is None:
            object.__setattr__(self, "resolver", ReferenceResolver(timeout=self.settings.fetch_timeout))

    def fault(self, severity: Severity | str, code: str) -> Fault:
        return make_fault(severity, code, self.narrator)

    def descend(self, uri: str | None = None) -> "ValidationContext":
        """Return a context one reference deeper, remembering `uri` if given."""
        visited = self.visited | {uri} if uri else self.visited
        return replace(self, depth=self.depth + 1, visited=visited)

    @property
    def reify_refs(self) -> bool:
        return self.settings.reify_refs


def ensure_context(ctx: ValidationContext | None) -> ValidationContext:
    return ctx if ctx is not None else ValidationContext()
