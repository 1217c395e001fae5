"""Tests for domain/conditions/parameters.py."""

from archrules.domain.conditions import ExplicitBindingNameGuard, ParameterCoOccurrenceGuard
from archrules.domain.model.method import MethodDescriptor
from archrules.domain.model.parameter import ParameterDescriptor
from tests.factories import (
    PATH_VARIABLE,
    REQUEST_BODY,
    VALID,
    make_annotation,
    make_class,
    make_method,
    make_parameter,
)


def _bound(*parameters: ParameterDescriptor) -> MethodDescriptor:
    method = make_method("updateUser", parameters=parameters)
    make_class("app.web.UserController", methods=[method])
    return method


class TestParameterCoOccurrenceGuard:
    """Every @RequestBody parameter must carry @Valid."""

    def test_no_body_parameter_is_vacuous(self) -> None:
        outcome = ParameterCoOccurrenceGuard().evaluate(_bound(make_parameter(0)))
        assert outcome.satisfied is True

    def test_all_validated(self) -> None:
        method = _bound(
            make_parameter(0, "app.dto.UserDto", [make_annotation(REQUEST_BODY), make_annotation(VALID)])
        )
        assert ParameterCoOccurrenceGuard().evaluate(method).satisfied is True

    def test_one_of_two_validated_gives_one_violation(self) -> None:
        method = _bound(
            make_parameter(0, "app.dto.UserDto", [make_annotation(REQUEST_BODY), make_annotation(VALID)]),
            make_parameter(1, "app.dto.AuditDto", [make_annotation(REQUEST_BODY)]),
        )
        outcome = ParameterCoOccurrenceGuard().evaluate(method)
        assert outcome.satisfied is False
        assert outcome.message.count("without @Valid") == 1
        assert "positions [1]" in outcome.message

    def test_two_unvalidated_still_one_message(self) -> None:
        method = _bound(
            make_parameter(0, "app.dto.UserDto", [make_annotation(REQUEST_BODY)]),
            make_parameter(1, "app.dto.AuditDto", [make_annotation(REQUEST_BODY)]),
        )
        outcome = ParameterCoOccurrenceGuard().evaluate(method)
        assert outcome.satisfied is False
        assert "positions [0, 1]" in outcome.message

    def test_validation_marker_alone_is_irrelevant(self) -> None:
        method = _bound(make_parameter(0, "app.dto.UserDto", [make_annotation(VALID)]))
        assert ParameterCoOccurrenceGuard().evaluate(method).satisfied is True

    def test_description(self) -> None:
        assert ParameterCoOccurrenceGuard().description == (
            "annotate every @RequestBody parameter with @Valid"
        )


class TestExplicitBindingNameGuard:
    """@PathVariable must name what it binds."""

    def test_default_slot(self) -> None:
        method = _bound(make_parameter(0, annotations=[make_annotation(PATH_VARIABLE, value="id")]))
        assert ExplicitBindingNameGuard().evaluate(method).satisfied is True

    def test_named_slot(self) -> None:
        method = _bound(make_parameter(0, annotations=[make_annotation(PATH_VARIABLE, name="id")]))
        assert ExplicitBindingNameGuard().evaluate(method).satisfied is True

    def test_either_slot_non_empty(self) -> None:
        method = _bound(
            make_parameter(0, annotations=[make_annotation(PATH_VARIABLE, value="", name="id")])
        )
        assert ExplicitBindingNameGuard().evaluate(method).satisfied is True

    def test_unnamed(self) -> None:
        method = _bound(make_parameter(0, annotations=[make_annotation(PATH_VARIABLE)]))
        outcome = ExplicitBindingNameGuard().evaluate(method)
        assert outcome.satisfied is False
        assert "positions [0]" in outcome.message

    def test_both_slots_empty(self) -> None:
        method = _bound(
            make_parameter(0, annotations=[make_annotation(PATH_VARIABLE, value="", name="")])
        )
        assert ExplicitBindingNameGuard().evaluate(method).satisfied is False

    def test_no_path_variable(self) -> None:
        assert ExplicitBindingNameGuard().evaluate(_bound()).satisfied is True
