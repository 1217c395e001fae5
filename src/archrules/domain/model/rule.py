"""Rule definition."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from archrules.domain.conditions.base import Condition
    from archrules.domain.model.enums import UnitKind
    from archrules.domain.predicates.base import Predicate


@dataclass(frozen=True, slots=True)
class Rule:
    """Declarative architecture rule.

    Stateless: one Rule may be evaluated against any number of models,
    concurrently.

    Attributes:
        id: Rule identifier used in reports
        unit: Kind of unit the rule evaluates
        condition: What must hold for every selected candidate
        selector: Which units the rule applies to, None = all units of kind
        rationale: Why the rule exists (the "because" clause)
        allow_empty_selection: Empty selection is a vacuous pass instead of an error
    """

    id: str
    unit: UnitKind
    condition: Condition
    selector: Predicate[Any] | None = None
    rationale: str = ""
    allow_empty_selection: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.id:
            raise ValueError("rule id must not be empty")
        if self.unit is None:
            raise TypeError("unit must not be None")
        if self.condition is None:
            raise TypeError("condition must not be None")

    @property
    def description(self) -> str:
        """Rule in words: '<units> that <selector> should <condition>'."""
        subject = self.unit.value
        if self.selector is not None:
            subject = f"{subject} that {self.selector.description}"
        return f"{subject} should {self.condition.description}"
