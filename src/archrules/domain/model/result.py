"""Evaluation results."""

from __future__ import annotations

from dataclasses import dataclass

from archrules.domain.model.event import ConditionEvent

EMPTY_SELECTION_ALLOWED = "empty selection allowed"
NO_CROSS_LAYER_DEPENDENCIES = "no cross-layer dependencies"


@dataclass(frozen=True, slots=True)
class EvaluationResult:
    """Result of evaluating one rule against one model.

    Attributes:
        rule_id: Evaluated rule
        description: Rule in words
        rationale: Rule rationale (may be empty)
        events: One event per selected candidate
        vacuous: Holds without any event (empty selection allowed, or
            nothing to check)
        vacuous_reason: Why the result is vacuous, shown in reports
    """

    rule_id: str
    description: str
    rationale: str
    events: tuple[ConditionEvent, ...]
    vacuous: bool = False
    vacuous_reason: str = ""

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.rule_id:
            raise ValueError("rule_id must not be empty")
        if self.vacuous and self.events:
            raise ValueError("vacuous result must not have events")
        if not self.vacuous and not self.events:
            raise ValueError("non-vacuous result requires at least one event")
        if self.vacuous_reason and not self.vacuous:
            raise ValueError("vacuous_reason requires a vacuous result")
        foreign = {e.rule_id for e in self.events} - {self.rule_id}
        if foreign:
            raise ValueError(f"events of other rules in result: {sorted(foreign)}")

    @property
    def violations(self) -> tuple[ConditionEvent, ...]:
        """Violated events."""
        return tuple(e for e in self.events if e.violated)

    @property
    def total_count(self) -> int:
        """Number of evaluated candidates."""
        return len(self.events)

    @property
    def violated_count(self) -> int:
        """Number of violated candidates."""
        return sum(1 for e in self.events if e.violated)

    @property
    def satisfied_count(self) -> int:
        """Number of satisfied candidates."""
        return self.total_count - self.violated_count

    @property
    def passed(self) -> bool:
        """True if no candidate violated the rule."""
        return self.violated_count == 0

    @property
    def failed(self) -> bool:
        """True if at least one candidate violated the rule."""
        return not self.passed


@dataclass(frozen=True, slots=True)
class SuiteResult:
    """Results of several rules evaluated against the same model.

    Attributes:
        results: One result per rule, in rule order
    """

    results: tuple[EvaluationResult, ...]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        ids = [r.rule_id for r in self.results]
        duplicates = sorted({i for i in ids if ids.count(i) > 1})
        if duplicates:
            raise ValueError(f"duplicate rule ids in suite: {duplicates}")

    @property
    def failed_results(self) -> tuple[EvaluationResult, ...]:
        """Results with at least one violation."""
        return tuple(r for r in self.results if r.failed)

    @property
    def violations(self) -> tuple[ConditionEvent, ...]:
        """All violations of all rules."""
        return tuple(v for r in self.results for v in r.violations)

    @property
    def passed(self) -> bool:
        """True if every rule passed."""
        return not self.failed_results
