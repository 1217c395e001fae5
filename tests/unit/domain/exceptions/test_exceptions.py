"""Tests for domain exceptions."""

import pytest

from archrules.domain.exceptions import (
    ArchitectureViolationError,
    ArchRulesError,
    ConfigurationError,
    ConfigurationErrorKind,
    ProviderError,
)
from tests.factories import make_result


class TestConfigurationError:
    """Message prefix names the kind."""

    @pytest.mark.parametrize(
        ("kind", "prefix"),
        [
            (ConfigurationErrorKind.NO_MATCHING_CANDIDATES, "no matching candidates"),
            (ConfigurationErrorKind.AMBIGUOUS_LAYER_MEMBERSHIP, "ambiguous layer membership"),
            (ConfigurationErrorKind.INVALID_GLOB, "invalid glob syntax"),
        ],
    )
    def test_prefix(self, kind: ConfigurationErrorKind, prefix: str) -> None:
        assert str(ConfigurationError(kind, "detail")).startswith(f"{prefix}: ")

    def test_rule_id_in_message(self) -> None:
        error = ConfigurationError(ConfigurationErrorKind.INVALID_RULE, "broken", "r1")
        assert str(error) == "invalid rule definition in rule 'r1': broken"
        assert error.rule_id == "r1"

    def test_is_archrules_error(self) -> None:
        assert issubclass(ConfigurationError, ArchRulesError)

    def test_detail_required(self) -> None:
        with pytest.raises(ValueError):
            ConfigurationError(ConfigurationErrorKind.INVALID_GLOB, "")


class TestProviderError:
    """Tests for ProviderError."""

    def test_message(self) -> None:
        error = ProviderError("model.yaml", "unresolved type")
        assert str(error) == "Failed to build class model from model.yaml: unresolved type"
        assert error.source == "model.yaml"


class TestArchitectureViolationError:
    """Tests for ArchitectureViolationError."""

    def test_carries_results_and_report(self) -> None:
        results = (make_result("a", violated=2), make_result("b", violated=1))
        error = ArchitectureViolationError(results, "report text")
        assert error.violation_count == 3
        assert str(error) == "report text"

    def test_requires_failed_results(self) -> None:
        with pytest.raises(ValueError, match="failed results"):
            ArchitectureViolationError((make_result(violated=0, satisfied=1),), "report")

    def test_requires_results(self) -> None:
        with pytest.raises(ValueError):
            ArchitectureViolationError((), "report")
