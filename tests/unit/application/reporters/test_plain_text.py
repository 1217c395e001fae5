"""Tests for PlainTextReporter."""

from archrules.application.reporters.plain_text import PlainTextReporter
from archrules.domain.model.result import SuiteResult
from tests.factories import make_result


class TestPlainTextReporter:
    """Tests for PlainTextReporter."""

    def test_failed_suite(self) -> None:
        suite = SuiteResult((make_result("a", violated=1), make_result("b", violated=0, satisfied=1)))
        output = PlainTextReporter().report(suite)
        assert output.splitlines() == [
            "a: com.example.Bad0 — Bad0 is wrong",
            "a: 1 of 1 candidates violated",
            "b: 0 of 1 candidates violated",
            "Result: FAILED (1 violations)",
        ]

    def test_hide_passed(self) -> None:
        suite = SuiteResult((make_result("a", violated=1), make_result("b", violated=0, satisfied=1)))
        output = PlainTextReporter(show_passed=False).report(suite)
        assert "b: 0 of 1" not in output
        assert "a: 1 of 1 candidates violated" in output

    def test_passed_suite_hidden_body(self) -> None:
        suite = SuiteResult((make_result("b", violated=0, satisfied=1),))
        assert PlainTextReporter(show_passed=False).report(suite) == "Result: PASSED (0 violations)"
