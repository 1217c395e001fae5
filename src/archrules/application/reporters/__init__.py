"""Reporters for rule evaluation results.

PlainTextReporter and JsonReporter use stdlib only,
ConsoleReporter renders with rich.
"""

from archrules.application.reporters.console import ConsoleConfig, ConsoleReporter
from archrules.application.reporters.formatting import (
    format_report,
    format_result,
    format_summary,
    format_violation,
)
from archrules.application.reporters.json_reporter import JsonReporter
from archrules.application.reporters.plain_text import PlainTextReporter

__all__ = [
    "format_violation",
    "format_summary",
    "format_result",
    "format_report",
    "PlainTextReporter",
    "JsonReporter",
    "ConsoleConfig",
    "ConsoleReporter",
]
