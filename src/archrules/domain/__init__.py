"""archrules domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, dataclasses, enum, re, types, collections.abc, logging
"""

from archrules.domain.exceptions import (
    ArchitectureViolationError,
    ArchRulesError,
    ConfigurationError,
    ConfigurationErrorKind,
    ProviderError,
)
from archrules.domain.model import (
    AccessPolicy,
    AnnotationInstance,
    ClassDescriptor,
    ClassModel,
    ConditionEvent,
    ConditionOutcome,
    Dependency,
    EvaluationResult,
    FieldDescriptor,
    Layer,
    LayeredArchitecture,
    MethodDescriptor,
    ParameterDescriptor,
    Rule,
    SuiteResult,
    UnitKind,
)

__all__ = [
    # Exceptions
    "ArchRulesError",
    "ArchitectureViolationError",
    "ConfigurationError",
    "ConfigurationErrorKind",
    "ProviderError",
    # Model
    "AnnotationInstance",
    "ParameterDescriptor",
    "MethodDescriptor",
    "FieldDescriptor",
    "Dependency",
    "ClassDescriptor",
    "ClassModel",
    "UnitKind",
    "Rule",
    "ConditionOutcome",
    "ConditionEvent",
    "EvaluationResult",
    "SuiteResult",
    "Layer",
    "AccessPolicy",
    "LayeredArchitecture",
]
