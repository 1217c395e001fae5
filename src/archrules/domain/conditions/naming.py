"""Naming-convention guard."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from archrules.domain.model.event import ConditionOutcome

ALLOWED_VERB_PREFIXES: tuple[str, ...] = (
    "get",
    "find",
    "retrieve",
    "create",
    "add",
    "update",
    "modify",
    "delete",
    "remove",
    "process",
    "handle",
    "execute",
    "perform",
)

LOWER_CAMEL_CASE = re.compile(r"[a-z][a-zA-Z0-9]*")


@dataclass(frozen=True, slots=True)
class NamingConventionGuard:
    """Name must start with an allowed verb and be lower camel case.

    Prefix match is case-sensitive: "Get_user" fails the prefix check
    as well as the shape check. Failing either is one violation.

    Attributes:
        prefixes: Allowed verb prefixes
    """

    prefixes: tuple[str, ...] = ALLOWED_VERB_PREFIXES

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.prefixes or not all(self.prefixes):
            raise ValueError("prefixes must be non-empty strings")

    @property
    def description(self) -> str:
        return "have a lower camel case name starting with a verb"

    def evaluate(self, candidate: Any) -> ConditionOutcome:
        name: str = candidate.name
        subject = getattr(candidate, "qualified_name", name)

        problems = []
        if not name.startswith(self.prefixes):
            problems.append(f"does not start with one of {', '.join(self.prefixes)}")
        if LOWER_CAMEL_CASE.fullmatch(name) is None:
            problems.append("is not lower camel case")

        if problems:
            return ConditionOutcome.fails(f"name '{name}' of {subject} {' and '.join(problems)}")
        return ConditionOutcome.holds(f"name '{name}' of {subject} follows the naming convention")
