"""Composite conditions: negation, disjunction, conjunction."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from archrules.domain.model.event import ConditionOutcome

if TYPE_CHECKING:
    from archrules.domain.conditions.base import Condition


@dataclass(frozen=True, slots=True)
class NegatedCondition:
    """Holds iff the inner condition does not hold ("no X should Y").

    The inner message already states the observed fact, so it is kept
    and only the verdict flips.

    Attributes:
        inner: Negated condition
    """

    inner: Condition

    @property
    def description(self) -> str:
        return f"not {self.inner.description}"

    def evaluate(self, candidate: Any) -> ConditionOutcome:
        outcome = self.inner.evaluate(candidate)
        return ConditionOutcome(satisfied=not outcome.satisfied, message=outcome.message)


@dataclass(frozen=True, slots=True)
class AnyOfCondition:
    """Holds iff at least one alternative holds (should A orShould B).

    Every alternative is evaluated, so on failure the message names
    each attempted alternative with its own diagnostic.

    Attributes:
        alternatives: At least two conditions
    """

    alternatives: tuple[Condition, ...]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if len(self.alternatives) < 2:
            raise ValueError("AnyOfCondition requires at least two alternatives")

    @property
    def description(self) -> str:
        return " or ".join(c.description for c in self.alternatives)

    def evaluate(self, candidate: Any) -> ConditionOutcome:
        outcomes = [c.evaluate(candidate) for c in self.alternatives]
        for outcome in outcomes:
            if outcome.satisfied:
                return outcome
        attempted = "; ".join(
            f"[{c.description}] {o.message}"
            for c, o in zip(self.alternatives, outcomes, strict=True)
        )
        return ConditionOutcome.fails(f"none of the alternatives hold: {attempted}")


@dataclass(frozen=True, slots=True)
class AllOfCondition:
    """Holds iff every part holds (should A andShould B).

    Attributes:
        parts: At least two conditions
    """

    parts: tuple[Condition, ...]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if len(self.parts) < 2:
            raise ValueError("AllOfCondition requires at least two parts")

    @property
    def description(self) -> str:
        return " and ".join(c.description for c in self.parts)

    def evaluate(self, candidate: Any) -> ConditionOutcome:
        outcomes = [c.evaluate(candidate) for c in self.parts]
        failed = [o.message for o in outcomes if not o.satisfied]
        if failed:
            return ConditionOutcome.fails("; ".join(failed))
        return ConditionOutcome.holds("; ".join(o.message for o in outcomes))
