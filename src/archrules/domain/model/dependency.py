"""Class-to-class dependency edge."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from archrules.domain.model.enums import DependencyOrigin

if TYPE_CHECKING:
    from archrules.domain.model.class_ import ClassDescriptor


@dataclass(frozen=True, slots=True)
class Dependency:
    """Outgoing dependency of a class.

    Attributes:
        target_name: Qualified name of the class depended upon
        origin: Where the edge comes from
        detail: Member or annotation causing the edge (may be empty)
        target: Resolved target (set by ClassModel.build)
    """

    target_name: str
    origin: DependencyOrigin
    detail: str = ""
    target: ClassDescriptor | None = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.target_name:
            raise ValueError("target_name must not be empty")

    def describe(self, origin_class: str) -> str:
        """Format as 'A -> B (origin: detail)'."""
        via = self.origin.value
        if self.detail:
            via = f"{via}: {self.detail}"
        return f"{origin_class} -> {self.target_name} ({via})"
