"""Conditions: what must hold for every selected candidate."""

from archrules.domain.conditions.base import (
    Condition,
    ConditionEvaluator,
    CustomCondition,
    PredicateCondition,
    as_condition,
    subject_name,
)
from archrules.domain.conditions.builtin import (
    DependsOnClassesThat,
    OnlyDependsOnClassesThat,
    OnlyFinalFields,
    be,
    be_annotated_with,
    be_declared_in_classes_that,
    be_public,
    depend_on_classes_that,
    have_only_final_fields,
    have_raw_return_type,
    have_simple_name_ending_with,
    only_depend_on_classes_that,
    reside_in_any_package,
)
from archrules.domain.conditions.composite import (
    AllOfCondition,
    AnyOfCondition,
    NegatedCondition,
)
from archrules.domain.conditions.constructors import (
    ConstructorAccessGuard,
    DefaultInitializerGuard,
)
from archrules.domain.conditions.entity_leak import EntityLeakGuard
from archrules.domain.conditions.naming import ALLOWED_VERB_PREFIXES, NamingConventionGuard
from archrules.domain.conditions.parameters import (
    ExplicitBindingNameGuard,
    ParameterCoOccurrenceGuard,
)

__all__ = [
    # Variants
    "Condition",
    "ConditionEvaluator",
    "PredicateCondition",
    "CustomCondition",
    "NegatedCondition",
    "AnyOfCondition",
    "AllOfCondition",
    "as_condition",
    "subject_name",
    # Built-in
    "be",
    "be_annotated_with",
    "be_declared_in_classes_that",
    "be_public",
    "depend_on_classes_that",
    "have_only_final_fields",
    "have_raw_return_type",
    "have_simple_name_ending_with",
    "only_depend_on_classes_that",
    "reside_in_any_package",
    "DependsOnClassesThat",
    "OnlyDependsOnClassesThat",
    "OnlyFinalFields",
    # Custom evaluators
    "EntityLeakGuard",
    "ParameterCoOccurrenceGuard",
    "ExplicitBindingNameGuard",
    "NamingConventionGuard",
    "ALLOWED_VERB_PREFIXES",
    "ConstructorAccessGuard",
    "DefaultInitializerGuard",
]
