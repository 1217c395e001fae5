"""Tests for ConsoleReporter.

Tests:
- ConsoleConfig defaults and validation
- Header, rule table and result line
- Violation listing and truncation
"""

import pytest

from archrules.application.reporters.console import ConsoleConfig, ConsoleReporter
from archrules.domain.model.result import NO_CROSS_LAYER_DEPENDENCIES, EvaluationResult, SuiteResult
from tests.factories import make_event, make_result


class TestConsoleConfig:
    """Tests for ConsoleConfig."""

    def test_default_values(self) -> None:
        """Default values are set correctly."""
        config = ConsoleConfig()
        assert config.width == 120
        assert config.show_passed is True
        assert config.max_violations is None

    def test_narrow_width_rejected(self) -> None:
        with pytest.raises(ValueError, match="width"):
            ConsoleConfig(width=20)

    def test_negative_max_violations_rejected(self) -> None:
        with pytest.raises(ValueError, match="max_violations"):
            ConsoleConfig(max_violations=-1)


class TestConsoleReporter:
    """Tests for ConsoleReporter."""

    def test_report_contains_header(self) -> None:
        """report() contains the section header."""
        output = ConsoleReporter().report(SuiteResult((make_result("naming", violated=0, satisfied=1),)))
        assert "ARCHITECTURE RULES" in output

    def test_passed_suite(self) -> None:
        output = ConsoleReporter().report(SuiteResult((make_result("naming", violated=0, satisfied=1),)))
        assert "PASS" in output
        assert "PASSED" in output

    def test_failed_rule_lists_violations(self) -> None:
        output = ConsoleReporter().report(SuiteResult((make_result("naming", violated=2),)))
        assert "FAIL" in output
        assert "com.example.Bad0" in output
        assert "Bad1 is wrong" in output
        assert "FAILED" in output

    def test_vacuous_rule_marked_empty(self) -> None:
        output = ConsoleReporter().report(SuiteResult((make_result("naming", violated=0),)))
        assert "EMPTY" in output

    def test_layering_without_edges_not_marked_empty(self) -> None:
        result = EvaluationResult(
            "layers", "layers", "", (), vacuous=True, vacuous_reason=NO_CROSS_LAYER_DEPENDENCIES
        )
        output = ConsoleReporter().report(SuiteResult((result,)))
        assert "NO EDGES" in output
        assert "EMPTY" not in output

    def test_hide_passed_rows(self) -> None:
        suite = SuiteResult((make_result("failing-rule"), make_result("passing-rule", violated=0, satisfied=1)))
        output = ConsoleReporter(ConsoleConfig(show_passed=False)).report(suite)
        assert "failing-rule" in output
        assert "passing-rule" not in output

    def test_max_violations(self) -> None:
        output = ConsoleReporter(ConsoleConfig(max_violations=1)).report(
            SuiteResult((make_result("naming", violated=3),))
        )
        assert "Bad0 is wrong" in output
        assert "Bad2 is wrong" not in output
        assert "more" in output

    def test_markup_in_messages_is_literal(self) -> None:
        """Brackets in messages are not parsed as rich markup."""
        result = EvaluationResult(
            rule_id="layers",
            description="layered",
            rationale="",
            events=(make_event("layers", "app.A", "may only be accessed by layers [Service]"),),
        )
        output = ConsoleReporter().report(SuiteResult((result,)))
        assert "[Service]" in output
