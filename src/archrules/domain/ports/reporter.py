"""Reporter protocol for output formatting.

Users extend archrules by implementing this Protocol.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from archrules.domain.model.result import SuiteResult


@runtime_checkable
class ReporterProtocol(Protocol):
    """Contract for reporters.

    archrules provides PlainTextReporter, JsonReporter and ConsoleReporter.
    """

    def report(self, result: SuiteResult) -> str:
        """Render suite results.

        Args:
            result: Results of every evaluated rule

        Returns:
            Rendered report
        """
        ...
