"""Tests for presentation/api/dsl.py.

Tests:
- Builder immutability and chaining order
- Selector combination (and_that / or_that)
- Condition combination and negation
- Misuse raises ConfigurationError at definition time
- evaluate() / check() terminals
"""

import pytest

from archrules.domain.conditions.composite import AllOfCondition, AnyOfCondition, NegatedCondition
from archrules.domain.exceptions import (
    ArchitectureViolationError,
    ConfigurationError,
    ConfigurationErrorKind,
)
from archrules.domain.model.enums import UnitKind
from archrules.presentation.api import (
    NamingConventionGuard,
    annotated_with,
    be_annotated_with,
    classes,
    depend_on_classes_that,
    fields,
    has_simple_name_ending_with,
    have_simple_name_ending_with,
    is_declared_in_class_that,
    is_final,
    methods,
    no_classes,
    no_fields,
    no_methods,
    resides_in_package,
)
from tests.factories import (
    ENTITY,
    REST_CONTROLLER,
    TABLE,
    make_annotation,
    make_class,
    make_field,
    make_method,
    make_model,
)


def _model():
    return make_model(
        make_class(
            "app.controller.UserController",
            annotations=[make_annotation(REST_CONTROLLER)],
            methods=[make_method("getUser"), make_method("fetchAll")],
            depends_on=["app.service.UserService"],
        ),
        make_class("app.controller.AdminApi", annotations=[make_annotation(REST_CONTROLLER)]),
        make_class("app.service.UserService", depends_on=["app.domain.User"]),
        make_class(
            "app.domain.User",
            annotations=[make_annotation(ENTITY), make_annotation(TABLE)],
            fields=[make_field("id", is_final=True)],
        ),
    )


class TestEntryPoints:
    """classes() / methods() / fields() and their negated forms."""

    @pytest.mark.parametrize(
        ("factory", "unit", "negated"),
        [
            (classes, UnitKind.CLASS, False),
            (no_classes, UnitKind.CLASS, True),
            (methods, UnitKind.METHOD, False),
            (no_methods, UnitKind.METHOD, True),
            (fields, UnitKind.FIELD, False),
            (no_fields, UnitKind.FIELD, True),
        ],
    )
    def test_unit_and_negation(self, factory, unit: UnitKind, negated: bool) -> None:
        rule = factory().should(be_annotated_with(ENTITY)).as_rule("r")
        assert rule.unit is unit
        assert isinstance(rule.condition, NegatedCondition) is negated


class TestRuleBuilder:
    """Tests for RuleBuilder."""

    def test_steps_return_new_builders(self) -> None:
        base = classes().that(annotated_with(ENTITY))
        first = base.should(be_annotated_with(TABLE))
        second = base.should(have_simple_name_ending_with("Entity"))
        assert first.as_rule("a").condition != second.as_rule("b").condition
        with pytest.raises(ConfigurationError):
            base.condition

    def test_default_id_is_description(self) -> None:
        rule = classes().that(annotated_with(ENTITY)).should(be_annotated_with(TABLE)).as_rule()
        assert rule.id == rule.description
        assert rule.id == "classes that annotated with @Entity should annotated with @Table"

    def test_because_and_allow_empty(self) -> None:
        rule = (
            classes()
            .that(annotated_with(ENTITY))
            .should(be_annotated_with(TABLE))
            .because("explicit table names")
            .allow_empty_should()
            .as_rule("tables")
        )
        assert rule.rationale == "explicit table names"
        assert rule.allow_empty_selection is True

    def test_predicate_accepted_as_condition(self) -> None:
        result = classes().that(annotated_with(ENTITY)).should(annotated_with(TABLE)).evaluate(_model())
        assert result.passed

    def test_evaluator_accepted_as_condition(self) -> None:
        result = (
            methods()
            .that(is_declared_in_class_that(has_simple_name_ending_with("Controller")))
            .should(NamingConventionGuard())
            .evaluate(_model(), "method-naming")
        )
        assert result.violated_count == 1
        assert result.violations[0].subject == "app.controller.UserController.fetchAll()"


class TestSelectors:
    """that() / and_that() / or_that()."""

    def test_and_that_narrows(self) -> None:
        result = (
            classes()
            .that(annotated_with(REST_CONTROLLER))
            .and_that(has_simple_name_ending_with("Controller"))
            .should(be_annotated_with(REST_CONTROLLER))
            .evaluate(_model(), "r")
        )
        assert [e.subject for e in result.events] == ["app.controller.UserController"]

    def test_or_that_widens(self) -> None:
        result = (
            classes()
            .that(resides_in_package("..service.."))
            .or_that(resides_in_package("..domain.."))
            .should(be_annotated_with(ENTITY))
            .evaluate(_model(), "r")
        )
        assert result.total_count == 2
        assert [v.subject for v in result.violations] == ["app.service.UserService"]

    def test_second_that_rejected(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            classes().that(annotated_with(ENTITY)).that(annotated_with(TABLE))
        assert exc_info.value.kind is ConfigurationErrorKind.INVALID_RULE

    def test_and_that_without_that(self) -> None:
        with pytest.raises(ConfigurationError, match="requires that"):
            classes().and_that(annotated_with(ENTITY))


class TestConditions:
    """should() / and_should() / or_should()."""

    def test_and_should_composes_all(self) -> None:
        rule = (
            classes()
            .should(be_annotated_with(ENTITY))
            .and_should(be_annotated_with(TABLE))
            .as_rule("r")
        )
        assert isinstance(rule.condition, AllOfCondition)

    def test_or_should_composes_any(self) -> None:
        rule = (
            classes()
            .that(resides_in_package("..controller.."))
            .should(have_simple_name_ending_with("Controller"))
            .or_should(have_simple_name_ending_with("Api"))
            .as_rule("r")
        )
        assert isinstance(rule.condition, AnyOfCondition)

    def test_or_should_evaluates(self) -> None:
        result = (
            classes()
            .that(resides_in_package("..controller.."))
            .should(have_simple_name_ending_with("Controller"))
            .or_should(have_simple_name_ending_with("Api"))
            .evaluate(_model(), "r")
        )
        assert result.passed

    def test_mixing_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="cannot mix"):
            (
                classes()
                .should(be_annotated_with(ENTITY))
                .and_should(be_annotated_with(TABLE))
                .or_should(have_simple_name_ending_with("Entity"))
            )

    def test_second_should_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="condition already set"):
            classes().should(be_annotated_with(ENTITY)).should(be_annotated_with(TABLE))

    def test_and_should_without_should(self) -> None:
        with pytest.raises(ConfigurationError, match="requires should"):
            classes().and_should(be_annotated_with(ENTITY))

    def test_missing_condition(self) -> None:
        with pytest.raises(ConfigurationError, match="no condition"):
            classes().that(annotated_with(ENTITY)).as_rule()

    def test_non_condition_rejected(self) -> None:
        with pytest.raises(TypeError, match="cannot use"):
            classes().should("be annotated")  # type: ignore[arg-type]


class TestTerminals:
    """evaluate() and check()."""

    def test_negated_rule_reports_forbidden_dependency(self) -> None:
        result = (
            no_classes()
            .that(resides_in_package("..controller.."))
            .should(depend_on_classes_that(resides_in_package("..domain..")))
            .evaluate(_model(), "controllers-skip-domain")
        )
        assert result.passed

        result = (
            no_classes()
            .that(resides_in_package("..service.."))
            .should(depend_on_classes_that(resides_in_package("..domain..")))
            .evaluate(_model(), "services-skip-domain")
        )
        assert [v.subject for v in result.violations] == ["app.service.UserService"]

    def test_check_raises(self) -> None:
        with pytest.raises(ArchitectureViolationError) as exc_info:
            (
                classes()
                .that(annotated_with(REST_CONTROLLER))
                .should(have_simple_name_ending_with("Controller"))
                .because("controllers are found by name")
                .check(_model(), "controller-naming")
            )
        assert "(because: controllers are found by name)" in str(exc_info.value)

    def test_fields_rule(self) -> None:
        result = fields().should(is_final()).evaluate(_model(), "final-fields")
        assert result.passed
