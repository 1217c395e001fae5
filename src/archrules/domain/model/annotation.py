"""Annotation instance value object."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

# Attribute slot used when an annotation is written without a key,
# e.g. @PathVariable("id") fills "value".
DEFAULT_ATTRIBUTE = "value"

type AttributeValue = str | int | float | bool | tuple[AttributeValue, ...]


def _freeze(value: object) -> AttributeValue:
    """Normalize attribute value to an immutable, hashable form."""
    if isinstance(value, list | tuple):
        return tuple(_freeze(v) for v in value)
    if isinstance(value, str | int | float | bool):
        return value
    raise TypeError(f"unsupported annotation attribute value: {value!r}")


@dataclass(frozen=True, slots=True)
class AnnotationInstance:
    """Annotation applied to a class, member or parameter.

    Attributes are extracted once when the model is built; rules only
    read this mapping and never introspect the subject program.

    Attributes:
        type_name: Qualified annotation type (e.g. "jakarta.persistence.Entity")
        attributes: Attribute key -> value (read-only)
    """

    type_name: str
    attributes: Mapping[str, AttributeValue] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.type_name:
            raise ValueError("annotation type_name must not be empty")
        frozen = MappingProxyType({k: _freeze(v) for k, v in self.attributes.items()})
        object.__setattr__(self, "attributes", frozen)

    def __hash__(self) -> int:
        return hash((self.type_name, tuple(sorted(self.attributes.items()))))

    @property
    def simple_name(self) -> str:
        """Annotation type without package."""
        return self.type_name.rsplit(".", 1)[-1]

    def is_of_type(self, type_name: str) -> bool:
        """Check annotation type.

        A dotted name is compared with the qualified type, a plain name
        with the simple name.
        """
        if "." in type_name:
            return self.type_name == type_name
        return self.simple_name == type_name

    def get(
        self,
        key: str,
        *aliases: str,
        default: AttributeValue | None = None,
    ) -> AttributeValue | None:
        """Get attribute by key, falling back to synonymous keys.

        Args:
            key: Primary attribute key
            *aliases: Keys naming the same semantic slot
            default: Returned when no key is present

        Returns:
            First present value, or default
        """
        for candidate in (key, *aliases):
            if candidate in self.attributes:
                return self.attributes[candidate]
        return default

    def first_non_empty(self, *keys: str) -> AttributeValue | None:
        """Get the first attribute among keys whose value is non-empty.

        Returns:
            Value, or None if every key is absent or empty
        """
        for key in keys:
            value = self.attributes.get(key)
            if value not in (None, "", ()):
                return value
        return None

    def __str__(self) -> str:
        """Format as @SimpleName."""
        return f"@{self.simple_name}"


def find_annotation(
    annotations: tuple[AnnotationInstance, ...],
    type_name: str,
) -> AnnotationInstance | None:
    """Find first annotation of type. Returns None if absent."""
    for annotation in annotations:
        if annotation.is_of_type(type_name):
            return annotation
    return None
