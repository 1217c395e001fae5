"""Class descriptor."""

from __future__ import annotations

from dataclasses import dataclass

from archrules.domain.model.annotation import AnnotationInstance, find_annotation
from archrules.domain.model.dependency import Dependency
from archrules.domain.model.enums import Visibility
from archrules.domain.model.field_ import FieldDescriptor
from archrules.domain.model.method import MethodDescriptor


@dataclass(frozen=True, slots=True)
class ClassDescriptor:
    """Structural snapshot of one class.

    Binds itself as owner of its methods and fields on construction.
    A member belongs to exactly one class.

    Attributes:
        qualified_name: Full name (package.Simple)
        annotations: Annotations on the class
        methods: Declared methods, in declaration order
        fields: Declared fields
        dependencies: Outgoing dependency edges
        visibility: Access modifier
        is_final: Declared final
        is_external: Stub for a type outside the imported roots
    """

    qualified_name: str
    annotations: tuple[AnnotationInstance, ...] = ()
    methods: tuple[MethodDescriptor, ...] = ()
    fields: tuple[FieldDescriptor, ...] = ()
    dependencies: tuple[Dependency, ...] = ()
    visibility: Visibility = Visibility.PUBLIC
    is_final: bool = False
    is_external: bool = False

    def __post_init__(self) -> None:
        """Validate invariants and bind members. FAIL-FIRST."""
        if not self.qualified_name:
            raise ValueError("qualified_name must not be empty")
        if self.qualified_name.startswith(".") or self.qualified_name.endswith("."):
            raise ValueError(f"qualified_name '{self.qualified_name}' is malformed")

        field_names = [f.name for f in self.fields]
        if len(field_names) != len(set(field_names)):
            raise ValueError(f"class '{self.qualified_name}' has duplicate field names")

        for member in (*self.methods, *self.fields):
            if member.owner is not None and member.owner is not self:
                raise ValueError(
                    f"member '{member.name}' already belongs to '{member.owner.qualified_name}'"
                )
            object.__setattr__(member, "owner", self)

    @property
    def simple_name(self) -> str:
        """Class name without package."""
        return self.qualified_name.rsplit(".", 1)[-1]

    @property
    def package_name(self) -> str:
        """Package path, empty for the default package."""
        parts = self.qualified_name.rsplit(".", 1)
        return parts[0] if len(parts) == 2 else ""

    def is_annotated_with(self, type_name: str) -> bool:
        """Check if class carries annotation of type."""
        return find_annotation(self.annotations, type_name) is not None

    def annotation(self, type_name: str) -> AnnotationInstance | None:
        """Get annotation of type. Returns None if absent."""
        return find_annotation(self.annotations, type_name)

    def __str__(self) -> str:
        return self.qualified_name
