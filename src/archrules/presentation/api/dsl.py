"""Fluent API (DSL) for architecture rules.

Example:
    rule = (
        classes()
        .that(resides_in_package("..controller.."))
        .should(have_simple_name_ending_with("Controller"))
        .because("controllers are found by name")
        .as_rule("controller-naming")
    )
    evaluate(rule, model)

    no_classes().that(resides_in_package("..domain..")).should(
        depend_on_classes_that(resides_in_package("..service.."))
    ).check(model)
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

from archrules.application.engine.evaluator import check_or_fail, evaluate
from archrules.domain.conditions.base import as_condition
from archrules.domain.conditions.composite import AllOfCondition, AnyOfCondition, NegatedCondition
from archrules.domain.exceptions.configuration import (
    ConfigurationError,
    ConfigurationErrorKind,
)
from archrules.domain.model.enums import UnitKind
from archrules.domain.model.rule import Rule

if TYPE_CHECKING:
    from archrules.domain.conditions.base import Condition, ConditionEvaluator
    from archrules.domain.model.class_model import ClassModel
    from archrules.domain.model.result import EvaluationResult
    from archrules.domain.predicates.base import Predicate

type ConditionLike = Condition | Predicate[Any] | ConditionEvaluator

_AND = "and"
_OR = "or"


@dataclass(frozen=True, slots=True)
class RuleBuilder:
    """Immutable rule builder.

    Every step returns a new builder, so a partial chain can be
    shared as a template. Selector steps combine left to right:
    that(A).or_that(B).and_that(C) selects (A or B) and C.
    """

    _unit: UnitKind
    _negated: bool = False
    _selector: Predicate[Any] | None = None
    _conditions: tuple[Condition, ...] = ()
    _combinator: str | None = None
    _rationale: str = ""
    _allow_empty: bool = False

    def _invalid(self, detail: str) -> ConfigurationError:
        return ConfigurationError(ConfigurationErrorKind.INVALID_RULE, detail)

    # Selection

    def that(self, predicate: Predicate[Any]) -> RuleBuilder:
        """Restrict the rule to units matching predicate.

        Raises:
            ConfigurationError: If a selector is already set
        """
        if self._selector is not None:
            raise self._invalid("selector already set, use and_that() or or_that()")
        return replace(self, _selector=predicate)

    def and_that(self, predicate: Predicate[Any]) -> RuleBuilder:
        """Narrow the selection: selected units must also match predicate."""
        if self._selector is None:
            raise self._invalid("and_that() requires that() first")
        return replace(self, _selector=self._selector & predicate)

    def or_that(self, predicate: Predicate[Any]) -> RuleBuilder:
        """Widen the selection: units matching predicate are selected too."""
        if self._selector is None:
            raise self._invalid("or_that() requires that() first")
        return replace(self, _selector=self._selector | predicate)

    # Conditions

    def should(self, condition: ConditionLike) -> RuleBuilder:
        """Set what must hold for every selected unit.

        Accepts a condition, a predicate or a custom evaluator.

        Raises:
            ConfigurationError: If a condition is already set
        """
        if self._conditions:
            raise self._invalid("condition already set, use and_should() or or_should()")
        return replace(self, _conditions=(as_condition(condition),))

    def and_should(self, condition: ConditionLike) -> RuleBuilder:
        """Add a condition that must hold as well."""
        return self._combine(_AND, condition)

    def or_should(self, condition: ConditionLike) -> RuleBuilder:
        """Add an alternative: a unit passes if any alternative holds."""
        return self._combine(_OR, condition)

    def _combine(self, combinator: str, condition: ConditionLike) -> RuleBuilder:
        if not self._conditions:
            raise self._invalid(f"{combinator}_should() requires should() first")
        if self._combinator not in (None, combinator):
            raise self._invalid("cannot mix and_should() and or_should() in one rule")
        return replace(
            self,
            _conditions=(*self._conditions, as_condition(condition)),
            _combinator=combinator,
        )

    # Options

    def because(self, rationale: str) -> RuleBuilder:
        """Attach the reason the rule exists."""
        return replace(self, _rationale=rationale)

    def allow_empty_should(self, allow: bool = True) -> RuleBuilder:
        """Treat an empty selection as a vacuous pass instead of an error."""
        return replace(self, _allow_empty=allow)

    # Terminal steps

    @property
    def condition(self) -> Condition:
        """Effective condition, negation and composition applied.

        Raises:
            ConfigurationError: If no condition was set
        """
        if not self._conditions:
            raise self._invalid("rule has no condition, call should() first")
        match self._conditions:
            case (single,):
                condition = single
            case parts if self._combinator == _OR:
                condition = AnyOfCondition(parts)
            case parts:
                condition = AllOfCondition(parts)
        return NegatedCondition(condition) if self._negated else condition

    def as_rule(self, rule_id: str | None = None) -> Rule:
        """Build the rule.

        Args:
            rule_id: Identifier in reports. Default: the rule in words

        Returns:
            Rule
        """
        condition = self.condition
        rule = Rule(
            id=rule_id or self._unit.value,
            unit=self._unit,
            condition=condition,
            selector=self._selector,
            rationale=self._rationale,
            allow_empty_selection=self._allow_empty,
        )
        return rule if rule_id else replace(rule, id=rule.description)

    def evaluate(self, model: ClassModel, rule_id: str | None = None) -> EvaluationResult:
        """Build and evaluate the rule."""
        return evaluate(self.as_rule(rule_id), model)

    def check(self, model: ClassModel, rule_id: str | None = None) -> EvaluationResult:
        """Build and evaluate the rule, raise on violations.

        Raises:
            ArchitectureViolationError: If any selected unit violates the rule
            ConfigurationError: On disallowed empty selection
        """
        return check_or_fail(self.as_rule(rule_id), model)


def classes() -> RuleBuilder:
    """Rule over classes."""
    return RuleBuilder(UnitKind.CLASS)


def no_classes() -> RuleBuilder:
    """Negated rule over classes: no selected class may satisfy the condition."""
    return RuleBuilder(UnitKind.CLASS, _negated=True)


def methods() -> RuleBuilder:
    """Rule over methods."""
    return RuleBuilder(UnitKind.METHOD)


def no_methods() -> RuleBuilder:
    """Negated rule over methods."""
    return RuleBuilder(UnitKind.METHOD, _negated=True)


def fields() -> RuleBuilder:
    """Rule over fields."""
    return RuleBuilder(UnitKind.FIELD)


def no_fields() -> RuleBuilder:
    """Negated rule over fields."""
    return RuleBuilder(UnitKind.FIELD, _negated=True)
