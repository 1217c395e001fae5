"""Architecture violation exception."""

from __future__ import annotations

from typing import TYPE_CHECKING

from archrules.domain.exceptions.base import ArchRulesError

if TYPE_CHECKING:
    from archrules.domain.model.result import EvaluationResult


class ArchitectureViolationError(ArchRulesError):
    """Architecture rules violated.

    Raised by check_or_fail() / check_all_or_fail() when violations found.
    The message is the complete formatted report.

    Attributes:
        results: Failed evaluation results (each has at least one violation)
    """

    def __init__(self, results: tuple[EvaluationResult, ...], report: str) -> None:
        if not results:
            raise ValueError("ArchitectureViolationError requires at least one result")
        if not all(r.failed for r in results):
            raise ValueError("ArchitectureViolationError accepts failed results only")
        if not report:
            raise ValueError("report must not be empty")

        self.results = results
        self.report = report
        super().__init__(report)

    @property
    def violation_count(self) -> int:
        """Total number of violations across all results."""
        return sum(len(r.violations) for r in self.results)
