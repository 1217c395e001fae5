"""Built-in should-conditions.

Thin factories over the predicate library, plus the dependency checks
whose diagnostics must name each offending edge.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from archrules.domain.conditions.base import Condition, CustomCondition, PredicateCondition
from archrules.domain.model.class_model import PRIMITIVE_TYPES
from archrules.domain.model.event import ConditionOutcome
from archrules.domain.predicates import common, member_predicates

if TYPE_CHECKING:
    from archrules.domain.model.class_ import ClassDescriptor
    from archrules.domain.model.dependency import Dependency
    from archrules.domain.predicates.base import ClassPredicate, Predicate


def be(predicate: Predicate[Any]) -> Condition:
    """Use any predicate as a condition."""
    return PredicateCondition(predicate)


def be_annotated_with(type_name: str) -> Condition:
    """Condition: candidate carries annotation of type."""
    return PredicateCondition(common.annotated_with(type_name))


def reside_in_any_package(*patterns: str) -> Condition:
    """Condition: candidate's package matches any glob."""
    return PredicateCondition(common.resides_in_package(*patterns))


def have_simple_name_ending_with(suffix: str) -> Condition:
    """Condition: simple name ends with suffix."""
    return PredicateCondition(common.has_simple_name_ending_with(suffix))


def be_public() -> Condition:
    """Condition: declared public."""
    return PredicateCondition(common.is_public())


def have_raw_return_type(type_name: str) -> Condition:
    """Condition: method's declared return type equals type_name."""
    return PredicateCondition(member_predicates.has_raw_return_type(type_name))


def be_declared_in_classes_that(owner: ClassPredicate) -> Condition:
    """Condition: member's declaring class matches."""
    return PredicateCondition(member_predicates.is_declared_in_class_that(owner))


def depend_on_classes_that(target: ClassPredicate) -> Condition:
    """Condition: class has at least one dependency matching target."""
    return CustomCondition(DependsOnClassesThat(target))


def only_depend_on_classes_that(target: ClassPredicate) -> Condition:
    """Condition: every dependency of the class matches target."""
    return CustomCondition(OnlyDependsOnClassesThat(target))


def have_only_final_fields() -> Condition:
    """Condition: every field of the class is final."""
    return CustomCondition(OnlyFinalFields())


def _relevant(cls: ClassDescriptor, dependency: Dependency) -> bool:
    # primitives and self references are never architecture dependencies
    return (
        dependency.target is not None
        and dependency.target.qualified_name not in PRIMITIVE_TYPES
        and dependency.target is not cls
    )


def _describe_edges(cls: ClassDescriptor, dependencies: list[Dependency]) -> str:
    return ", ".join(d.describe(cls.qualified_name) for d in dependencies)


@dataclass(frozen=True, slots=True)
class DependsOnClassesThat:
    """Holds iff at least one dependency target matches.

    Message lists every matching edge, so "no classes should depend on"
    rules name each offending dependency.
    """

    target: ClassPredicate

    @property
    def description(self) -> str:
        return f"depend on classes that {self.target.description}"

    def evaluate(self, candidate: ClassDescriptor) -> ConditionOutcome:
        matching = [
            d
            for d in candidate.dependencies
            if _relevant(candidate, d) and d.target is not None and self.target(d.target)
        ]
        if matching:
            return ConditionOutcome.holds(
                f"{candidate.qualified_name} depends on classes that "
                f"{self.target.description}: {_describe_edges(candidate, matching)}"
            )
        return ConditionOutcome.fails(
            f"{candidate.qualified_name} does not depend on classes that "
            f"{self.target.description}"
        )


@dataclass(frozen=True, slots=True)
class OnlyDependsOnClassesThat:
    """Holds iff every dependency target matches."""

    target: ClassPredicate

    @property
    def description(self) -> str:
        return f"only depend on classes that {self.target.description}"

    def evaluate(self, candidate: ClassDescriptor) -> ConditionOutcome:
        offending = [
            d
            for d in candidate.dependencies
            if _relevant(candidate, d) and d.target is not None and not self.target(d.target)
        ]
        if offending:
            return ConditionOutcome.fails(
                f"{candidate.qualified_name} depends on classes that do not "
                f"{self.target.description}: {_describe_edges(candidate, offending)}"
            )
        return ConditionOutcome.holds(
            f"{candidate.qualified_name} only depends on classes that {self.target.description}"
        )


@dataclass(frozen=True, slots=True)
class OnlyFinalFields:
    """Holds iff every declared field is final."""

    @property
    def description(self) -> str:
        return "have only final fields"

    def evaluate(self, candidate: ClassDescriptor) -> ConditionOutcome:
        mutable = [f.name for f in candidate.fields if not f.is_final]
        if mutable:
            return ConditionOutcome.fails(
                f"{candidate.qualified_name} has non-final fields {mutable}"
            )
        return ConditionOutcome.holds(f"{candidate.qualified_name} has only final fields")
