"""pytest fixtures for architecture testing.

Session scoped: the model is built once per test run and shared
read-only by every test. Override arch_config in conftest.py to
configure without ini options.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from archrules.application.engine.evaluator import check_or_fail, evaluate
from archrules.application.engine.suite import check_all_or_fail
from archrules.infrastructure.config.layers_loader import load_layered_architecture
from archrules.infrastructure.config.settings import (
    INI_LAYERS_FILE,
    INI_MODEL_FILE,
    ArchRulesConfig,
)
from archrules.infrastructure.providers.yaml_provider import YamlModelProvider
from archrules.presentation.api.dsl import RuleBuilder

if TYPE_CHECKING:
    from collections.abc import Sequence

    from archrules.application.engine.evaluator import Checkable
    from archrules.domain.model.architecture import LayeredArchitecture
    from archrules.domain.model.class_model import ClassModel
    from archrules.domain.model.result import EvaluationResult, SuiteResult


class RuleChecker:
    """Checks rules against one model.

    Accepts built rules, rule builders and layered architectures.
    """

    def __init__(self, model: ClassModel, *, max_workers: int | None = None) -> None:
        """Initialize checker.

        Args:
            model: Class model every rule is checked against
            max_workers: Thread pool size for check_all()
        """
        self._model = model
        self._max_workers = max_workers

    @property
    def model(self) -> ClassModel:
        return self._model

    def evaluate(self, rule: Checkable | RuleBuilder) -> EvaluationResult:
        """Evaluate without raising on violations."""
        return evaluate(_built(rule), self._model)

    def check(self, rule: Checkable | RuleBuilder) -> EvaluationResult:
        """Evaluate one rule, raise on violations.

        Raises:
            ArchitectureViolationError: If the rule is violated
        """
        return check_or_fail(_built(rule), self._model)

    def check_all(self, rules: Sequence[Checkable | RuleBuilder]) -> SuiteResult:
        """Evaluate every rule, raise once listing all violations.

        Raises:
            ArchitectureViolationError: If any rule is violated
        """
        return check_all_or_fail(
            [_built(r) for r in rules], self._model, max_workers=self._max_workers
        )


def _built(rule: Checkable | RuleBuilder) -> Checkable:
    return rule.as_rule() if isinstance(rule, RuleBuilder) else rule


@pytest.fixture(scope="session")
def arch_config(request: pytest.FixtureRequest) -> ArchRulesConfig:
    """Settings from ini options.

    Override in conftest.py to configure in code.

    Returns:
        ArchRulesConfig
    """
    return ArchRulesConfig.from_pytest_config(request.config)


@pytest.fixture(scope="session")
def arch_model(arch_config: ArchRulesConfig) -> ClassModel:
    """Class model read from the configured model file.

    Returns:
        Linked ClassModel

    Raises:
        FileNotFoundError: If no model file is configured
        ProviderError: If the model cannot be built
    """
    if arch_config.model_file is None:
        raise FileNotFoundError(
            f"No class model configured. Set {INI_MODEL_FILE} in pytest.ini or pyproject.toml."
        )
    return YamlModelProvider(arch_config.model_file).load(arch_config.roots)


@pytest.fixture(scope="session")
def arch_layers(arch_config: ArchRulesConfig) -> LayeredArchitecture:
    """Layered architecture read from the configured layers file.

    Raises:
        FileNotFoundError: If no layers file is configured
        ConfigurationError: If the file is invalid
    """
    if arch_config.layers_file is None:
        raise FileNotFoundError(
            f"No layered architecture configured. Set {INI_LAYERS_FILE} "
            "in pytest.ini or pyproject.toml."
        )
    return load_layered_architecture(arch_config.layers_file)


@pytest.fixture(scope="session")
def arch_rules(arch_model: ClassModel, arch_config: ArchRulesConfig) -> RuleChecker:
    """Rule checker bound to the session model.

    Returns:
        RuleChecker
    """
    return RuleChecker(arch_model, max_workers=arch_config.max_workers)
