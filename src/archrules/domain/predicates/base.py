"""Described predicates and their composition."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from archrules.domain.model.class_ import ClassDescriptor
    from archrules.domain.model.field_ import FieldDescriptor
    from archrules.domain.model.method import MethodDescriptor


@dataclass(frozen=True, slots=True)
class Predicate[T]:
    """Pure boolean test carrying a human-readable description.

    Composition keeps descriptions so that diagnostics read like the
    rule that produced them.

    Example:
        entity = annotated_with("jakarta.persistence.Entity")
        pred = entity & resides_in_package("..domain..")
        pred.description  # "annotated with @Entity and reside in package '..domain..'"

    Attributes:
        description: What the predicate tests
        test: The test itself
    """

    description: str
    test: Callable[[T], bool]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.description:
            raise ValueError("predicate description must not be empty")
        if not callable(self.test):
            raise TypeError("predicate test must be callable")

    def __call__(self, item: T) -> bool:
        return self.test(item)

    def and_(self, other: Predicate[T]) -> Predicate[T]:
        """Both predicates hold."""
        left, right = self.test, other.test
        return Predicate(
            f"{self.description} and {other.description}",
            lambda item: left(item) and right(item),
        )

    def or_(self, other: Predicate[T]) -> Predicate[T]:
        """At least one predicate holds."""
        left, right = self.test, other.test
        return Predicate(
            f"{self.description} or {other.description}",
            lambda item: left(item) or right(item),
        )

    def negate(self) -> Predicate[T]:
        """Predicate does not hold."""
        inner = self.test
        return Predicate(f"not {self.description}", lambda item: not inner(item))

    def __and__(self, other: Predicate[T]) -> Predicate[T]:
        return self.and_(other)

    def __or__(self, other: Predicate[T]) -> Predicate[T]:
        return self.or_(other)

    def __invert__(self) -> Predicate[T]:
        return self.negate()

    def __str__(self) -> str:
        return self.description


def describe[T](description: str, test: Callable[[T], bool]) -> Predicate[T]:
    """Wrap a plain callable as a described predicate."""
    return Predicate(description, test)


# Type aliases per unit kind
type ClassPredicate = Predicate[ClassDescriptor]
type MethodPredicate = Predicate[MethodDescriptor]
type FieldPredicate = Predicate[FieldDescriptor]
