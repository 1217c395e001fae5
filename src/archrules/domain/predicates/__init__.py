"""Domain predicates."""

from archrules.domain.predicates.base import (
    ClassPredicate,
    FieldPredicate,
    MethodPredicate,
    Predicate,
    describe,
)
from archrules.domain.predicates.class_predicates import (
    depends_on_classes_that,
    has_method_annotated_with,
    is_external,
)
from archrules.domain.predicates.common import (
    annotated_with,
    has_name_matching,
    has_simple_name,
    has_simple_name_ending_with,
    is_final,
    is_public,
    is_static,
    resides_in_any_package,
    resides_in_package,
)
from archrules.domain.predicates.member_predicates import (
    has_parameter_annotated_with,
    has_raw_return_type,
    is_declared_in_class_that,
)
from archrules.domain.predicates.package_glob import PackageGlob, compile_glob

__all__ = [
    # Base
    "Predicate",
    "ClassPredicate",
    "MethodPredicate",
    "FieldPredicate",
    "describe",
    # Package globs
    "PackageGlob",
    "compile_glob",
    # Shared predicates
    "annotated_with",
    "resides_in_package",
    "resides_in_any_package",
    "has_simple_name",
    "has_simple_name_ending_with",
    "has_name_matching",
    "is_public",
    "is_static",
    "is_final",
    # Class predicates
    "depends_on_classes_that",
    "has_method_annotated_with",
    "is_external",
    # Member predicates
    "is_declared_in_class_that",
    "has_parameter_annotated_with",
    "has_raw_return_type",
]
