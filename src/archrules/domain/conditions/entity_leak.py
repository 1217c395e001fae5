"""Entity-leak guard for method return types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from archrules.domain.model.event import ConditionOutcome

if TYPE_CHECKING:
    from archrules.domain.model.method import MethodDescriptor
    from archrules.domain.predicates.base import ClassPredicate

# Return types compared by prefix: java.util.List also covers java.util.ListIterator
DEFAULT_CONTAINER_PREFIXES: tuple[str, ...] = (
    "java.util.List",
    "java.util.Collection",
    "java.util.Set",
)

DEFAULT_ENVELOPE_TYPES: frozenset[str] = frozenset(
    {"org.springframework.http.ResponseEntity"}
)


@dataclass(frozen=True, slots=True)
class EntityLeakGuard:
    """Method must not return a domain entity directly.

    Known limitation: the model carries raw return types only, so a
    container or envelope return type (List<User>, ResponseEntity<User>)
    is always satisfied. An entity leaked inside one is not detected.

    Attributes:
        is_entity: Predicate identifying domain entity classes
        container_prefixes: Raw return type prefixes treated as containers
        envelope_types: Raw return types treated as response envelopes
    """

    is_entity: ClassPredicate
    container_prefixes: tuple[str, ...] = DEFAULT_CONTAINER_PREFIXES
    envelope_types: frozenset[str] = DEFAULT_ENVELOPE_TYPES

    @property
    def description(self) -> str:
        return f"not return classes that {self.is_entity.description}"

    def evaluate(self, candidate: MethodDescriptor) -> ConditionOutcome:
        return_type = candidate.return_type
        if return_type.startswith(self.container_prefixes):
            return ConditionOutcome.holds(
                f"{candidate.full_name} returns container {return_type}, element type not checked"
            )
        if return_type in self.envelope_types:
            return ConditionOutcome.holds(
                f"{candidate.full_name} returns envelope {return_type}, body type not checked"
            )

        returned = candidate.return_class
        if returned is not None and self.is_entity(returned):
            return ConditionOutcome.fails(
                f"{candidate.full_name} returns domain entity {returned.simple_name} directly"
            )
        return ConditionOutcome.holds(f"{candidate.full_name} does not return a domain entity")
