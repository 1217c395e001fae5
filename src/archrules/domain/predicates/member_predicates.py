"""Method and field predicates."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from archrules.domain.predicates.base import ClassPredicate, MethodPredicate, Predicate

if TYPE_CHECKING:
    from archrules.domain.model.method import MethodDescriptor


def is_declared_in_class_that(owner: ClassPredicate) -> Predicate[Any]:
    """Create predicate: member's declaring class matches.

    Works for methods and fields.
    """

    def predicate(member: Any) -> bool:
        return member.owner is not None and owner(member.owner)

    return Predicate(f"declared in classes that {owner.description}", predicate)


def has_parameter_annotated_with(type_name: str) -> MethodPredicate:
    """Create predicate: at least one parameter carries annotation."""
    if not type_name:
        raise ValueError("type_name must not be empty")

    def predicate(method: MethodDescriptor) -> bool:
        return any(p.is_annotated_with(type_name) for p in method.parameters)

    label = type_name.rsplit(".", 1)[-1]
    return Predicate(f"have parameter annotated with @{label}", predicate)


def has_raw_return_type(type_name: str) -> MethodPredicate:
    """Create predicate: declared return type equals type_name."""
    if not type_name:
        raise ValueError("type_name must not be empty")
    return Predicate(
        f"have raw return type {type_name}",
        lambda method: method.return_type == type_name,
    )
