"""Console reporter: SuiteResult → rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from archrules.application.reporters.formatting import format_summary
from archrules.domain.model.result import NO_CROSS_LAYER_DEPENDENCIES

if TYPE_CHECKING:
    from archrules.domain.model.result import EvaluationResult, SuiteResult

_VACUOUS_STATUS = {NO_CROSS_LAYER_DEPENDENCIES: "[yellow]NO EDGES[/yellow]"}


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    Attributes:
        width: Console width in characters
        show_passed: Show rows of passing rules in the summary table
        max_violations: Max violations listed per rule. None = unlimited
    """

    width: int = 120
    show_passed: bool = True
    max_violations: int | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width < 40:
            raise ValueError(f"width must be >= 40, got {self.width}")
        if self.max_violations is not None and self.max_violations < 0:
            raise ValueError(f"max_violations must be >= 0, got {self.max_violations}")


class ConsoleReporter:
    """Console reporter: outputs rich formatted text.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()

    def report(self, result: SuiteResult) -> str:
        """Format suite result as rich formatted string.

        Args:
            result: Suite result to format.

        Returns:
            Formatted string with colors and tables.
        """
        output = StringIO()
        console = Console(file=output, force_terminal=True, width=self._config.width)

        console.print()
        console.rule("[bold]ARCHITECTURE RULES[/bold]")
        console.print()
        self._render_table(console, result)

        for failed in result.failed_results:
            self._render_violations(console, failed)

        status = "[bold green]PASSED[/bold green]"
        if not result.passed:
            status = "[bold red]FAILED[/bold red]"
        console.print(f"Result: {status} ({len(result.violations)} violations)")
        return output.getvalue()

    def _render_table(self, console: Console, result: SuiteResult) -> None:
        """Render one row per rule."""
        table = Table(title="Rules")
        table.add_column("Rule", style="cyan")
        table.add_column("Status")
        table.add_column("Violated", justify="right")
        table.add_column("Candidates", justify="right")

        for rule in result.results:
            if rule.passed and not self._config.show_passed:
                continue
            status = "[red]FAIL[/red]" if rule.failed else "[green]PASS[/green]"
            if rule.vacuous:
                status = _VACUOUS_STATUS.get(rule.vacuous_reason, "[yellow]EMPTY[/yellow]")
            table.add_row(
                escape(rule.rule_id), status, str(rule.violated_count), str(rule.total_count)
            )

        console.print(table)
        console.print()

    def _render_violations(self, console: Console, result: EvaluationResult) -> None:
        """Render violations of one failed rule."""
        console.print(f"[bold red]{escape(format_summary(result))}[/bold red]")
        console.print(f"  [dim]{escape(result.description)}[/dim]")
        if result.rationale:
            console.print(f"  [dim]because: {escape(result.rationale)}[/dim]")

        violations = result.violations
        limit = self._config.max_violations
        shown = violations if limit is None else violations[:limit]
        for event in shown:
            console.print(f"  [yellow]{escape(event.subject)}[/yellow]", highlight=False)
            console.print(f"    {event.message}", markup=False, highlight=False)
        if len(shown) < len(violations):
            console.print(f"  [dim]... {len(violations) - len(shown)} more[/dim]")
        console.print()
