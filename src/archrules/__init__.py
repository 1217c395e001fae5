"""archrules - declarative architecture rules over a structural class model."""

__version__ = "0.1.0"

from archrules.application.engine import check_all_or_fail, check_or_fail, evaluate, evaluate_all
from archrules.application.layered import check_layered_architecture
from archrules.domain.model.class_model import ClassModel
from archrules.presentation.api.dsl import (
    classes,
    fields,
    methods,
    no_classes,
    no_fields,
    no_methods,
)

__all__ = [
    "ClassModel",
    "__version__",
    "check_all_or_fail",
    "check_layered_architecture",
    "check_or_fail",
    "classes",
    "evaluate",
    "evaluate_all",
    "fields",
    "methods",
    "no_classes",
    "no_fields",
    "no_methods",
]
