"""Domain model."""

from archrules.domain.model.annotation import DEFAULT_ATTRIBUTE, AnnotationInstance
from archrules.domain.model.architecture import AccessPolicy, Layer, LayeredArchitecture
from archrules.domain.model.class_ import ClassDescriptor
from archrules.domain.model.class_model import PRIMITIVE_TYPES, ClassModel
from archrules.domain.model.dependency import Dependency
from archrules.domain.model.enums import AccessKind, DependencyOrigin, UnitKind, Visibility
from archrules.domain.model.event import ConditionEvent, ConditionOutcome
from archrules.domain.model.field_ import FieldDescriptor
from archrules.domain.model.method import MethodDescriptor
from archrules.domain.model.parameter import ParameterDescriptor
from archrules.domain.model.result import EvaluationResult, SuiteResult
from archrules.domain.model.rule import Rule

__all__ = [
    # Enums
    "AccessKind",
    "DependencyOrigin",
    "UnitKind",
    "Visibility",
    # Value objects
    "DEFAULT_ATTRIBUTE",
    "AnnotationInstance",
    "ParameterDescriptor",
    "Dependency",
    # Entities
    "MethodDescriptor",
    "FieldDescriptor",
    "ClassDescriptor",
    "ClassModel",
    "PRIMITIVE_TYPES",
    # Rules
    "Rule",
    "ConditionOutcome",
    "ConditionEvent",
    "EvaluationResult",
    "SuiteResult",
    # Architecture
    "Layer",
    "AccessPolicy",
    "LayeredArchitecture",
]
