"""Single rule evaluation."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from archrules.application.layered.checker import check_layered_architecture
from archrules.application.reporters.formatting import format_report
from archrules.domain.conditions.base import subject_name
from archrules.domain.exceptions.configuration import (
    ConfigurationError,
    ConfigurationErrorKind,
)
from archrules.domain.exceptions.violation import ArchitectureViolationError
from archrules.domain.model.architecture import LayeredArchitecture
from archrules.domain.model.event import ConditionEvent
from archrules.domain.model.result import EMPTY_SELECTION_ALLOWED, EvaluationResult
from archrules.domain.model.rule import Rule

if TYPE_CHECKING:
    from archrules.domain.model.class_model import ClassModel

logger = logging.getLogger(__name__)

type Checkable = Rule | LayeredArchitecture


def evaluate(rule: Checkable, model: ClassModel) -> EvaluationResult:
    """Evaluate one rule against a model.

    Pipeline:
    1. Select candidates of the rule's unit kind
    2. Empty selection: ConfigurationError, or vacuous pass if allowed
    3. One event per candidate, satisfied or violated
    4. Rule fails iff any event is violated

    Pure: same rule and model give the same result.

    Args:
        rule: Rule, or layered architecture
        model: Class model

    Returns:
        EvaluationResult

    Raises:
        ConfigurationError: NO_MATCHING_CANDIDATES on disallowed empty selection
    """
    if isinstance(rule, LayeredArchitecture):
        return check_layered_architecture(rule, model)
    if not isinstance(rule, Rule):
        raise TypeError(f"cannot evaluate {type(rule).__name__}")

    candidates = model.units(rule.unit)
    selector = rule.selector
    selection = candidates if selector is None else tuple(c for c in candidates if selector(c))
    logger.debug(
        "%s: selected %d of %d %s", rule.id, len(selection), len(candidates), rule.unit.value
    )

    if not selection:
        if not rule.allow_empty_selection:
            scope = rule.unit.value
            if selector is not None:
                scope = f"{scope} that {selector.description}"
            raise ConfigurationError(
                ConfigurationErrorKind.NO_MATCHING_CANDIDATES,
                f"no {scope} in model",
                rule.id,
            )
        logger.debug("%s: empty selection allowed, vacuous pass", rule.id)
        return EvaluationResult(
            rule_id=rule.id,
            description=rule.description,
            rationale=rule.rationale,
            events=(),
            vacuous=True,
            vacuous_reason=EMPTY_SELECTION_ALLOWED,
        )

    events = tuple(
        ConditionEvent.from_outcome(rule.id, subject_name(c), rule.condition.evaluate(c))
        for c in selection
    )
    return EvaluationResult(
        rule_id=rule.id,
        description=rule.description,
        rationale=rule.rationale,
        events=events,
    )


def check_or_fail(rule: Checkable, model: ClassModel) -> EvaluationResult:
    """Evaluate rule, raise with formatted report on violations.

    Returns:
        Passing EvaluationResult

    Raises:
        ArchitectureViolationError: If any candidate violated the rule
        ConfigurationError: On disallowed empty selection
    """
    result = evaluate(rule, model)
    if result.failed:
        raise ArchitectureViolationError((result,), format_report((result,)))
    return result
