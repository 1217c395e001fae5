"""Method descriptor."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from archrules.domain.model.annotation import AnnotationInstance, find_annotation
from archrules.domain.model.enums import Visibility

if TYPE_CHECKING:
    from archrules.domain.model.class_ import ClassDescriptor
    from archrules.domain.model.parameter import ParameterDescriptor


@dataclass(frozen=True, slots=True)
class MethodDescriptor:
    """Method declared in a class.

    `owner` is bound by the owning ClassDescriptor on construction and
    `return_class` by ClassModel.build(). Neither takes part in equality.

    Attributes:
        name: Method name
        parameters: Parameters in declaration order
        return_type: Qualified return type ("void" for none)
        visibility: Access modifier
        is_static: Declared static
        annotations: Annotations on the method
        owner: Declaring class (back-reference)
        return_class: Resolved return type (set by ClassModel)
    """

    name: str
    parameters: tuple[ParameterDescriptor, ...] = ()
    return_type: str = "void"
    visibility: Visibility = Visibility.PUBLIC
    is_static: bool = False
    annotations: tuple[AnnotationInstance, ...] = ()
    owner: ClassDescriptor | None = field(default=None, compare=False, repr=False)
    return_class: ClassDescriptor | None = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("method name must not be empty")
        if not self.return_type:
            raise ValueError("return_type must not be empty")

        positions = [p.position for p in self.parameters]
        if positions != list(range(len(self.parameters))):
            raise ValueError(
                f"method '{self.name}' parameter positions must be 0..n-1 in order, "
                f"got {positions}"
            )

    @property
    def owner_name(self) -> str:
        """Qualified name of declaring class.

        Raises:
            ValueError: If method is not bound to a class
        """
        if self.owner is None:
            raise ValueError(f"method '{self.name}' is not bound to a class")
        return self.owner.qualified_name

    @property
    def full_name(self) -> str:
        """Owner.name(ParamType, ...)."""
        params = ", ".join(p.type_name for p in self.parameters)
        return f"{self.owner_name}.{self.name}({params})"

    @property
    def qualified_name(self) -> str:
        """Subject name used in diagnostics."""
        return self.full_name

    @property
    def package_name(self) -> str:
        """Package of declaring class."""
        if self.owner is None:
            raise ValueError(f"method '{self.name}' is not bound to a class")
        return self.owner.package_name

    def is_annotated_with(self, type_name: str) -> bool:
        """Check if method carries annotation of type."""
        return find_annotation(self.annotations, type_name) is not None

    def annotation(self, type_name: str) -> AnnotationInstance | None:
        """Get annotation of type. Returns None if absent."""
        return find_annotation(self.annotations, type_name)
