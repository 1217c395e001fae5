"""Tests for condition variants and composites."""

import pytest

from archrules.domain.conditions import (
    AllOfCondition,
    AnyOfCondition,
    CustomCondition,
    NegatedCondition,
    PredicateCondition,
    as_condition,
    be_annotated_with,
    have_simple_name_ending_with,
)
from archrules.domain.conditions.naming import NamingConventionGuard
from archrules.domain.predicates import annotated_with
from tests.factories import ENTITY, TABLE, make_annotation, make_class


class TestPredicateCondition:
    """Tests for PredicateCondition."""

    def test_holds(self) -> None:
        outcome = be_annotated_with(ENTITY).evaluate(
            make_class(annotations=[make_annotation(ENTITY)])
        )
        assert outcome.satisfied is True
        assert outcome.message == "com.example.domain.User matches 'annotated with @Entity'"

    def test_fails(self) -> None:
        outcome = be_annotated_with(ENTITY).evaluate(make_class())
        assert outcome.satisfied is False
        assert outcome.message == "com.example.domain.User does not match 'annotated with @Entity'"

    def test_rejects_non_predicate(self) -> None:
        with pytest.raises(TypeError, match="Predicate"):
            PredicateCondition(lambda c: True)  # type: ignore[arg-type]


class TestCustomCondition:
    """Tests for CustomCondition."""

    def test_delegates(self) -> None:
        condition = CustomCondition(NamingConventionGuard())
        assert condition.description == NamingConventionGuard().description

    def test_rejects_non_evaluator(self) -> None:
        with pytest.raises(TypeError, match="ConditionEvaluator"):
            CustomCondition(object())  # type: ignore[arg-type]


class TestAsCondition:
    """Tests for as_condition."""

    def test_predicate(self) -> None:
        assert isinstance(as_condition(annotated_with(ENTITY)), PredicateCondition)

    def test_evaluator(self) -> None:
        assert isinstance(as_condition(NamingConventionGuard()), CustomCondition)

    def test_condition_passes_through(self) -> None:
        condition = be_annotated_with(ENTITY)
        assert as_condition(condition) is condition

    def test_rejects_other(self) -> None:
        with pytest.raises(TypeError, match="cannot use"):
            as_condition("annotated")


class TestNegatedCondition:
    """Negation flips the verdict for exactly the matching candidates."""

    def test_violates_where_inner_holds(self) -> None:
        entity = make_class("app.domain.User", annotations=[make_annotation(ENTITY)])
        plain = make_class("app.domain.Name")
        negated = NegatedCondition(be_annotated_with(ENTITY))
        assert negated.evaluate(entity).satisfied is False
        assert negated.evaluate(plain).satisfied is True

    def test_keeps_inner_message(self) -> None:
        entity = make_class("app.domain.User", annotations=[make_annotation(ENTITY)])
        outcome = NegatedCondition(be_annotated_with(ENTITY)).evaluate(entity)
        assert outcome.message == "app.domain.User matches 'annotated with @Entity'"

    def test_description(self) -> None:
        assert NegatedCondition(be_annotated_with(ENTITY)).description == "not annotated with @Entity"


class TestAnyOfCondition:
    """should(A).or_should(B) violates only candidates failing both."""

    def _condition(self) -> AnyOfCondition:
        return AnyOfCondition((be_annotated_with(ENTITY), have_simple_name_ending_with("Dto")))

    def test_first_alternative(self) -> None:
        cls = make_class("app.User", annotations=[make_annotation(ENTITY)])
        assert self._condition().evaluate(cls).satisfied is True

    def test_second_alternative(self) -> None:
        assert self._condition().evaluate(make_class("app.UserDto")).satisfied is True

    def test_both_fail_names_every_alternative(self) -> None:
        outcome = self._condition().evaluate(make_class("app.User"))
        assert outcome.satisfied is False
        assert "[annotated with @Entity]" in outcome.message
        assert "[have simple name ending with 'Dto']" in outcome.message

    def test_requires_two_alternatives(self) -> None:
        with pytest.raises(ValueError):
            AnyOfCondition((be_annotated_with(ENTITY),))


class TestAllOfCondition:
    """Tests for AllOfCondition."""

    def test_all_hold(self) -> None:
        condition = AllOfCondition((be_annotated_with(ENTITY), be_annotated_with(TABLE)))
        cls = make_class(annotations=[make_annotation(ENTITY), make_annotation(TABLE)])
        assert condition.evaluate(cls).satisfied is True

    def test_one_fails(self) -> None:
        condition = AllOfCondition((be_annotated_with(ENTITY), be_annotated_with(TABLE)))
        outcome = condition.evaluate(make_class(annotations=[make_annotation(ENTITY)]))
        assert outcome.satisfied is False
        assert "annotated with @Table" in outcome.message
        assert condition.description == "annotated with @Entity and annotated with @Table"
