"""Line formats shared by every reporter.

Violation: <rule id>: <subject> — <message> (because: <rationale>)
Summary:   <rule id>: N of M candidates violated (<vacuous reason>)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from archrules.domain.model.result import EMPTY_SELECTION_ALLOWED

if TYPE_CHECKING:
    from collections.abc import Iterable

    from archrules.domain.model.event import ConditionEvent
    from archrules.domain.model.result import EvaluationResult


def format_violation(event: ConditionEvent, rationale: str = "") -> str:
    """Format one violation line.

    The "(because: ...)" suffix is omitted for rules without rationale.
    """
    line = f"{event.rule_id}: {event.subject} — {event.message}"
    if rationale:
        line = f"{line} (because: {rationale})"
    return line


def format_summary(result: EvaluationResult) -> str:
    """Format the summary line of one rule."""
    line = f"{result.rule_id}: {result.violated_count} of {result.total_count} candidates violated"
    if result.vacuous:
        line = f"{line} ({result.vacuous_reason or EMPTY_SELECTION_ALLOWED})"
    return line


def format_result(result: EvaluationResult) -> list[str]:
    """Violation lines of one rule followed by its summary line."""
    lines = [format_violation(v, result.rationale) for v in result.violations]
    lines.append(format_summary(result))
    return lines


def format_report(results: Iterable[EvaluationResult]) -> str:
    """Format violations and summaries of several rules, in rule order."""
    lines: list[str] = []
    for result in results:
        lines.extend(format_result(result))
    return "\n".join(lines)
