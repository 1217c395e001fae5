"""Public rule-definition API.

Entry points, predicates and conditions in one import:

    from archrules.presentation.api import classes, resides_in_package, be_public
"""

from archrules.domain.conditions import (
    ConstructorAccessGuard,
    DefaultInitializerGuard,
    EntityLeakGuard,
    ExplicitBindingNameGuard,
    NamingConventionGuard,
    ParameterCoOccurrenceGuard,
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
from archrules.domain.predicates import (
    annotated_with,
    depends_on_classes_that,
    has_method_annotated_with,
    has_name_matching,
    has_parameter_annotated_with,
    has_raw_return_type,
    has_simple_name,
    has_simple_name_ending_with,
    is_declared_in_class_that,
    is_external,
    is_final,
    is_public,
    is_static,
    resides_in_any_package,
    resides_in_package,
)
from archrules.presentation.api.dsl import (
    RuleBuilder,
    classes,
    fields,
    methods,
    no_classes,
    no_fields,
    no_methods,
)

__all__ = [
    # Entry points
    "RuleBuilder",
    "classes",
    "no_classes",
    "methods",
    "no_methods",
    "fields",
    "no_fields",
    # Predicates
    "annotated_with",
    "depends_on_classes_that",
    "has_method_annotated_with",
    "has_name_matching",
    "has_parameter_annotated_with",
    "has_raw_return_type",
    "has_simple_name",
    "has_simple_name_ending_with",
    "is_declared_in_class_that",
    "is_external",
    "is_final",
    "is_public",
    "is_static",
    "resides_in_any_package",
    "resides_in_package",
    # Conditions
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
    # Custom evaluators
    "EntityLeakGuard",
    "ParameterCoOccurrenceGuard",
    "ExplicitBindingNameGuard",
    "NamingConventionGuard",
    "ConstructorAccessGuard",
    "DefaultInitializerGuard",
]
