"""JSON reporter for machine-readable output.

Stdlib-only reporter for JSON output.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from archrules.domain.model.event import ConditionEvent
    from archrules.domain.model.result import EvaluationResult, SuiteResult


class JsonReporter:
    """JSON reporter for CI/CD integration and parsing by other tools."""

    def __init__(self, *, indent: int | None = 2) -> None:
        """Initialize reporter.

        Args:
            indent: JSON indentation (default: 2, None for compact)
        """
        self._indent = indent

    def report(self, result: SuiteResult) -> str:
        """Format suite result as JSON.

        Args:
            result: Suite result

        Returns:
            JSON document
        """
        return json.dumps(self._suite_to_dict(result), indent=self._indent)

    def _suite_to_dict(self, result: SuiteResult) -> dict[str, object]:
        """Convert SuiteResult to JSON-serializable dict."""
        return {
            "passed": result.passed,
            "summary": {
                "rule_count": len(result.results),
                "failed_rule_count": len(result.failed_results),
                "violation_count": len(result.violations),
            },
            "rules": [self._result_to_dict(r) for r in result.results],
        }

    def _result_to_dict(self, result: EvaluationResult) -> dict[str, object]:
        """Convert EvaluationResult to dict."""
        return {
            "id": result.rule_id,
            "description": result.description,
            "rationale": result.rationale,
            "passed": result.passed,
            "vacuous": result.vacuous,
            "vacuous_reason": result.vacuous_reason,
            "total_count": result.total_count,
            "satisfied_count": result.satisfied_count,
            "violated_count": result.violated_count,
            "violations": [self._event_to_dict(v) for v in result.violations],
        }

    def _event_to_dict(self, event: ConditionEvent) -> dict[str, object]:
        """Convert violated event to dict."""
        return {
            "subject": event.subject,
            "message": event.message,
        }
