"""Method parameter value object."""

from __future__ import annotations

from dataclasses import dataclass

from archrules.domain.model.annotation import AnnotationInstance, find_annotation


@dataclass(frozen=True, slots=True)
class ParameterDescriptor:
    """Method parameter.

    Attributes:
        position: 0-based position in the signature
        type_name: Qualified parameter type
        annotations: Annotations on the parameter
        name: Source name, None when the provider does not know it
    """

    position: int
    type_name: str
    annotations: tuple[AnnotationInstance, ...] = ()
    name: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.position < 0:
            raise ValueError(f"position must be >= 0, got {self.position}")
        if not self.type_name:
            raise ValueError("parameter type_name must not be empty")

    def is_annotated_with(self, type_name: str) -> bool:
        """Check if parameter carries annotation of type."""
        return find_annotation(self.annotations, type_name) is not None

    def annotation(self, type_name: str) -> AnnotationInstance | None:
        """Get annotation of type. Returns None if absent."""
        return find_annotation(self.annotations, type_name)
