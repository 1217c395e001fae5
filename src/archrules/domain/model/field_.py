"""Field descriptor."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from archrules.domain.model.annotation import AnnotationInstance, find_annotation
from archrules.domain.model.enums import Visibility

if TYPE_CHECKING:
    from archrules.domain.model.class_ import ClassDescriptor


@dataclass(frozen=True, slots=True)
class FieldDescriptor:
    """Field declared in a class.

    Attributes:
        name: Field name
        type_name: Qualified field type
        visibility: Access modifier
        is_final: Declared final
        is_static: Declared static
        annotations: Annotations on the field
        owner: Declaring class (back-reference, bound by the owner)
    """

    name: str
    type_name: str
    visibility: Visibility = Visibility.PRIVATE
    is_final: bool = False
    is_static: bool = False
    annotations: tuple[AnnotationInstance, ...] = ()
    owner: ClassDescriptor | None = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("field name must not be empty")
        if not self.type_name:
            raise ValueError("field type_name must not be empty")

    @property
    def owner_name(self) -> str:
        """Qualified name of declaring class.

        Raises:
            ValueError: If field is not bound to a class
        """
        if self.owner is None:
            raise ValueError(f"field '{self.name}' is not bound to a class")
        return self.owner.qualified_name

    @property
    def qualified_name(self) -> str:
        """Owner.name."""
        return f"{self.owner_name}.{self.name}"

    @property
    def package_name(self) -> str:
        """Package of declaring class."""
        if self.owner is None:
            raise ValueError(f"field '{self.name}' is not bound to a class")
        return self.owner.package_name

    def is_annotated_with(self, type_name: str) -> bool:
        """Check if field carries annotation of type."""
        return find_annotation(self.annotations, type_name) is not None
