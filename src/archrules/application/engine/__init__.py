"""Rule evaluation."""

from archrules.application.engine.evaluator import Checkable, check_or_fail, evaluate
from archrules.application.engine.suite import check_all_or_fail, evaluate_all

__all__ = [
    "Checkable",
    "evaluate",
    "check_or_fail",
    "evaluate_all",
    "check_all_or_fail",
]
