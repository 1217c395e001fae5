"""Class predicates."""

from __future__ import annotations

from typing import TYPE_CHECKING

from archrules.domain.predicates.base import ClassPredicate, Predicate

if TYPE_CHECKING:
    from archrules.domain.model.class_ import ClassDescriptor


def depends_on_classes_that(target: ClassPredicate) -> ClassPredicate:
    """Create predicate: class has a dependency whose target matches.

    Args:
        target: Predicate over the dependency target class

    Returns:
        Predicate
    """

    def predicate(cls: ClassDescriptor) -> bool:
        return any(d.target is not None and target(d.target) for d in cls.dependencies)

    return Predicate(f"depend on classes that {target.description}", predicate)


def is_external() -> ClassPredicate:
    """Create predicate: class is a stub outside the imported roots."""
    return Predicate("external", lambda cls: cls.is_external)


def has_method_annotated_with(type_name: str) -> ClassPredicate:
    """Create predicate: class declares a method with annotation."""

    def predicate(cls: ClassDescriptor) -> bool:
        return any(m.is_annotated_with(type_name) for m in cls.methods)

    label = type_name.rsplit(".", 1)[-1]
    return Predicate(f"have method annotated with @{label}", predicate)
