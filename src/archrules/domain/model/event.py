"""Condition outcomes and events."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ConditionOutcome:
    """Result of checking one candidate against one condition.

    The message states the observed fact, so a negated condition
    can reuse it unchanged.

    Attributes:
        satisfied: Condition holds for the candidate
        message: What was observed
    """

    satisfied: bool
    message: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.message:
            raise ValueError("message must not be empty")

    @classmethod
    def holds(cls, message: str) -> ConditionOutcome:
        """Satisfied outcome."""
        return cls(satisfied=True, message=message)

    @classmethod
    def fails(cls, message: str) -> ConditionOutcome:
        """Violated outcome."""
        return cls(satisfied=False, message=message)


@dataclass(frozen=True, slots=True)
class ConditionEvent:
    """One event per evaluated candidate.

    Attributes:
        rule_id: Rule that produced the event
        subject: Qualified name of the candidate (class, method or field)
        message: Diagnostic message
        violated: True if the candidate failed the rule
    """

    rule_id: str
    subject: str
    message: str
    violated: bool

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.rule_id:
            raise ValueError("rule_id must not be empty")
        if not self.subject:
            raise ValueError("subject must not be empty")
        if not self.message:
            raise ValueError("message must not be empty")

    @classmethod
    def from_outcome(cls, rule_id: str, subject: str, outcome: ConditionOutcome) -> ConditionEvent:
        """Create event from condition outcome."""
        return cls(
            rule_id=rule_id,
            subject=subject,
            message=outcome.message,
            violated=not outcome.satisfied,
        )
