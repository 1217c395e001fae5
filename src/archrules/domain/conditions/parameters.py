"""Parameter annotation guards."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from archrules.domain.model.annotation import DEFAULT_ATTRIBUTE
from archrules.domain.model.event import ConditionOutcome

if TYPE_CHECKING:
    from archrules.domain.model.method import MethodDescriptor


def _label(type_name: str) -> str:
    return f"@{type_name.rsplit('.', 1)[-1]}"


@dataclass(frozen=True, slots=True)
class ParameterCoOccurrenceGuard:
    """Every parameter marked with `marker` must also carry `required`.

    Methods without a marked parameter hold vacuously. An offending
    method yields one message, however many parameters fail.

    Attributes:
        marker: Annotation selecting the checked parameters
        required: Annotation each selected parameter must carry
    """

    marker: str = "org.springframework.web.bind.annotation.RequestBody"
    required: str = "jakarta.validation.Valid"

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.marker or not self.required:
            raise ValueError("marker and required annotation types must not be empty")

    @property
    def description(self) -> str:
        return f"annotate every {_label(self.marker)} parameter with {_label(self.required)}"

    def evaluate(self, candidate: MethodDescriptor) -> ConditionOutcome:
        marked = [p for p in candidate.parameters if p.is_annotated_with(self.marker)]
        if not marked:
            return ConditionOutcome.holds(
                f"{candidate.full_name} has no {_label(self.marker)} parameter"
            )
        missing = [p.position for p in marked if not p.is_annotated_with(self.required)]
        if missing:
            return ConditionOutcome.fails(
                f"{candidate.full_name} has {_label(self.marker)} parameters without "
                f"{_label(self.required)} at positions {missing}"
            )
        return ConditionOutcome.holds(
            f"every {_label(self.marker)} parameter of {candidate.full_name} "
            f"carries {_label(self.required)}"
        )


@dataclass(frozen=True, slots=True)
class ExplicitBindingNameGuard:
    """Parameters marked with `marker` must name what they bind.

    The bound name lives in either of two synonymous slots, the unnamed
    default attribute or an explicitly named one. Either being
    non-empty is enough.

    Attributes:
        marker: Positional-binding annotation
        name_keys: Synonymous attribute slots holding the bound name
    """

    marker: str = "org.springframework.web.bind.annotation.PathVariable"
    name_keys: tuple[str, ...] = (DEFAULT_ATTRIBUTE, "name")

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.marker:
            raise ValueError("marker must not be empty")
        if not self.name_keys:
            raise ValueError("name_keys must not be empty")

    @property
    def description(self) -> str:
        return f"name every {_label(self.marker)} binding explicitly"

    def evaluate(self, candidate: MethodDescriptor) -> ConditionOutcome:
        bindings = [
            (p, p.annotation(self.marker))
            for p in candidate.parameters
            if p.is_annotated_with(self.marker)
        ]
        if not bindings:
            return ConditionOutcome.holds(
                f"{candidate.full_name} has no {_label(self.marker)} parameter"
            )
        unnamed = [
            p.position
            for p, annotation in bindings
            if annotation is None or annotation.first_non_empty(*self.name_keys) is None
        ]
        if unnamed:
            return ConditionOutcome.fails(
                f"{candidate.full_name} has {_label(self.marker)} parameters without "
                f"explicit name at positions {unnamed}"
            )
        return ConditionOutcome.holds(
            f"every {_label(self.marker)} of {candidate.full_name} is named explicitly"
        )
