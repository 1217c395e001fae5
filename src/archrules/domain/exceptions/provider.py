"""Class model provider exceptions."""

from archrules.domain.exceptions.base import ArchRulesError


class ProviderError(ArchRulesError):
    """Class model could not be built.

    Fatal for the whole run: no rule is evaluated against a model
    that failed to build.

    Attributes:
        source: What was being loaded (file path, mapping, roots)
        reason: Why it failed (must not be empty)
    """

    def __init__(self, source: str, reason: str) -> None:
        # FAIL-FIRST: validate required parameters
        if not source:
            raise ValueError("source must not be empty")
        if not reason:
            raise ValueError("reason must not be empty")

        self.source = source
        self.reason = reason
        super().__init__(f"Failed to build class model from {source}: {reason}")
