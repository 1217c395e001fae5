"""Domain exceptions."""

from archrules.domain.exceptions.base import ArchRulesError
from archrules.domain.exceptions.configuration import (
    ConfigurationError,
    ConfigurationErrorKind,
)
from archrules.domain.exceptions.provider import ProviderError
from archrules.domain.exceptions.violation import ArchitectureViolationError

__all__ = [
    "ArchRulesError",
    "ArchitectureViolationError",
    "ConfigurationError",
    "ConfigurationErrorKind",
    "ProviderError",
]
