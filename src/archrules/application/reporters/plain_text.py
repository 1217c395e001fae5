"""Plain text reporter.

Stdlib-only reporter: violation lines and summary lines, nothing else.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from archrules.application.reporters.formatting import format_report

if TYPE_CHECKING:
    from archrules.domain.model.result import SuiteResult


class PlainTextReporter:
    """Plain text reporter.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, *, show_passed: bool = True) -> None:
        """Initialize reporter.

        Args:
            show_passed: Include summary lines of passing rules
        """
        self._show_passed = show_passed

    def report(self, result: SuiteResult) -> str:
        """Format suite result as plain text.

        Args:
            result: Suite result

        Returns:
            One line per violation and one summary line per rule,
            followed by the overall status
        """
        results = result.results if self._show_passed else result.failed_results
        body = format_report(results)
        status = "PASSED" if result.passed else "FAILED"
        footer = f"Result: {status} ({len(result.violations)} violations)"
        return f"{body}\n{footer}" if body else footer
