"""Rule configuration exceptions."""

from __future__ import annotations

from enum import Enum

from archrules.domain.exceptions.base import ArchRulesError


class ConfigurationErrorKind(Enum):
    """What is wrong with a rule definition.

    The value is used as message prefix so that a maintainer can tell
    a broken rule definition apart from broken subject code.
    """

    NO_MATCHING_CANDIDATES = "no matching candidates"
    AMBIGUOUS_LAYER_MEMBERSHIP = "ambiguous layer membership"
    INVALID_GLOB = "invalid glob syntax"
    INVALID_RULE = "invalid rule definition"


class ConfigurationError(ArchRulesError):
    """Rule definition is unusable.

    Fatal for the affected rule: raised before any condition runs,
    no partial result is produced.

    Attributes:
        kind: Error category
        detail: What exactly is wrong (must not be empty)
        rule_id: Affected rule, None when raised outside of a rule
    """

    def __init__(
        self,
        kind: ConfigurationErrorKind,
        detail: str,
        rule_id: str | None = None,
    ) -> None:
        # FAIL-FIRST validation
        if kind is None:
            raise TypeError("kind must not be None")
        if not detail:
            raise ValueError("detail must not be empty")

        self.kind = kind
        self.detail = detail
        self.rule_id = rule_id

        prefix = f"{kind.value}"
        if rule_id is not None:
            prefix = f"{prefix} in rule '{rule_id}'"
        super().__init__(f"{prefix}: {detail}")
