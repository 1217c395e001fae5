"""Generated-constructor heuristics.

Both guards read annotation attributes only. The model has no
constructor bodies, so they are proxies, not proofs.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from archrules.domain.model.event import ConditionOutcome

if TYPE_CHECKING:
    from archrules.domain.model.annotation import AnnotationInstance
    from archrules.domain.model.class_ import ClassDescriptor

NO_ARGS_CONSTRUCTOR = "lombok.NoArgsConstructor"
ALL_ARGS_CONSTRUCTOR = "lombok.AllArgsConstructor"

RESTRICTED_ACCESS: frozenset[str] = frozenset({"PROTECTED", "PRIVATE"})

# Value of an access attribute left at its default
DEFAULT_ACCESS = "PUBLIC"


def access_level(annotation: AnnotationInstance) -> str:
    """Declared access level, normalized: 'AccessLevel.PROTECTED' -> 'PROTECTED'."""
    value = annotation.get("access", default=DEFAULT_ACCESS)
    return str(value).rsplit(".", 1)[-1].upper()


@dataclass(frozen=True, slots=True)
class ConstructorAccessGuard:
    """Generated constructors of a class must not be public.

    Applies only to classes carrying both markers; other classes hold.

    Attributes:
        no_args_marker: "generate no-args constructor" annotation
        all_args_marker: "generate all-args constructor" annotation
    """

    no_args_marker: str = NO_ARGS_CONSTRUCTOR
    all_args_marker: str = ALL_ARGS_CONSTRUCTOR

    @property
    def description(self) -> str:
        return "restrict access of generated constructors to protected or private"

    def evaluate(self, candidate: ClassDescriptor) -> ConditionOutcome:
        no_args = candidate.annotation(self.no_args_marker)
        all_args = candidate.annotation(self.all_args_marker)
        if no_args is None or all_args is None:
            return ConditionOutcome.holds(
                f"{candidate.qualified_name} does not generate both constructors"
            )

        levels = {str(no_args): access_level(no_args), str(all_args): access_level(all_args)}
        if all(level in RESTRICTED_ACCESS for level in levels.values()):
            return ConditionOutcome.holds(
                f"{candidate.qualified_name} restricts generated constructors"
            )
        rendered = ", ".join(f"{marker}: {level}" for marker, level in levels.items())
        return ConditionOutcome.fails(
            f"{candidate.qualified_name} has unrestricted generated constructors "
            f"({rendered}), expected protected or private"
        )


@dataclass(frozen=True, slots=True)
class DefaultInitializerGuard:
    """Generated no-args constructor must not force field initialization.

    force=true is taken as evidence of hidden initialization logic.
    This is a heuristic over the annotation, not a constructor body
    inspection; an explicit constructor with logic goes unnoticed.

    Attributes:
        no_args_marker: "generate no-args constructor" annotation
        force_key: Attribute enabling forced initialization
    """

    no_args_marker: str = NO_ARGS_CONSTRUCTOR
    force_key: str = "force"

    @property
    def description(self) -> str:
        return "have a default constructor without forced initialization"

    def evaluate(self, candidate: ClassDescriptor) -> ConditionOutcome:
        no_args = candidate.annotation(self.no_args_marker)
        if no_args is None:
            return ConditionOutcome.holds(
                f"{candidate.qualified_name} does not generate a default constructor"
            )
        if no_args.get(self.force_key, default=False) is True:
            return ConditionOutcome.fails(
                f"{candidate.qualified_name} sets {no_args}({self.force_key}=true), "
                "the default constructor may initialize fields"
            )
        return ConditionOutcome.holds(
            f"{candidate.qualified_name} has a plain default constructor"
        )
