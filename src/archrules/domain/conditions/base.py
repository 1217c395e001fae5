"""Condition variants.

A condition is either a described predicate or a custom evaluator.
Both answer one question per candidate with a ConditionOutcome.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from archrules.domain.model.event import ConditionOutcome
from archrules.domain.predicates.base import Predicate

if TYPE_CHECKING:
    from archrules.domain.conditions.composite import (
        AllOfCondition,
        AnyOfCondition,
        NegatedCondition,
    )


@runtime_checkable
class ConditionEvaluator(Protocol):
    """Contract of a custom check.

    Implementations are standalone classes, no base class required.
    evaluate() must be pure: no I/O, no state, same answer every time.
    """

    @property
    def description(self) -> str:
        """What the evaluator requires, phrased after 'should'."""
        ...

    def evaluate(self, candidate: Any) -> ConditionOutcome:
        """Check one candidate."""
        ...


def subject_name(candidate: Any) -> str:
    """Name used for a candidate in diagnostics."""
    return getattr(candidate, "qualified_name", None) or str(candidate)


@dataclass(frozen=True, slots=True)
class PredicateCondition:
    """Condition holding iff a predicate holds.

    Attributes:
        predicate: Predicate over the candidate
    """

    predicate: Predicate[Any]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.predicate, Predicate):
            raise TypeError(f"expected Predicate, got {type(self.predicate).__name__}")

    @property
    def description(self) -> str:
        return self.predicate.description

    def evaluate(self, candidate: Any) -> ConditionOutcome:
        """Run predicate, message states the observed fact."""
        subject = subject_name(candidate)
        if self.predicate(candidate):
            return ConditionOutcome.holds(f"{subject} matches '{self.description}'")
        return ConditionOutcome.fails(f"{subject} does not match '{self.description}'")


@dataclass(frozen=True, slots=True)
class CustomCondition:
    """Condition delegating to a custom evaluator.

    Attributes:
        evaluator: Any ConditionEvaluator
    """

    evaluator: ConditionEvaluator

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.evaluator, ConditionEvaluator):
            raise TypeError(
                f"{type(self.evaluator).__name__} does not implement ConditionEvaluator"
            )

    @property
    def description(self) -> str:
        return self.evaluator.description

    def evaluate(self, candidate: Any) -> ConditionOutcome:
        return self.evaluator.evaluate(candidate)


type Condition = (
    PredicateCondition | CustomCondition | NegatedCondition | AnyOfCondition | AllOfCondition
)


def as_condition(value: Any) -> Condition:
    """Wrap a predicate or evaluator into a condition.

    Conditions pass through unchanged.

    Raises:
        TypeError: If value is neither a condition, a Predicate nor an evaluator
    """
    from archrules.domain.conditions.composite import (
        AllOfCondition,
        AnyOfCondition,
        NegatedCondition,
    )

    if isinstance(
        value,
        PredicateCondition | CustomCondition | NegatedCondition | AnyOfCondition | AllOfCondition,
    ):
        return value
    if isinstance(value, Predicate):
        return PredicateCondition(value)
    if isinstance(value, ConditionEvaluator):
        return CustomCondition(value)
    raise TypeError(f"cannot use {type(value).__name__} as a condition")
