"""Suite evaluation.

Rules share nothing but the read-only model, so they run on a thread
pool. Each worker builds its own result; collecting the futures in
rule order is the join point before anything is reported.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING

from archrules.application.engine.evaluator import evaluate
from archrules.application.reporters.formatting import format_report
from archrules.domain.exceptions.violation import ArchitectureViolationError
from archrules.domain.model.result import SuiteResult

if TYPE_CHECKING:
    from collections.abc import Sequence

    from archrules.application.engine.evaluator import Checkable
    from archrules.domain.model.class_model import ClassModel

logger = logging.getLogger(__name__)


def evaluate_all(
    rules: Sequence[Checkable],
    model: ClassModel,
    *,
    max_workers: int | None = None,
) -> SuiteResult:
    """Evaluate every rule, concurrently.

    Violations never stop sibling rules. A ConfigurationError of any
    rule propagates; no partial suite result is returned.

    Args:
        rules: Rules and layered architectures, ids must be unique
        model: Class model shared by all rules
        max_workers: Thread pool size (None = executor default)

    Returns:
        SuiteResult with results in rule order

    Raises:
        ValueError: If rules is empty or ids repeat
        ConfigurationError: If any rule definition is broken
    """
    if not rules:
        raise ValueError("rules must not be empty")
    ids = [r.id for r in rules]
    duplicates = sorted({i for i in ids if ids.count(i) > 1})
    if duplicates:
        raise ValueError(f"duplicate rule ids: {duplicates}")
    if max_workers is not None and max_workers < 1:
        raise ValueError(f"max_workers must be >= 1, got {max_workers}")

    with ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="archrules") as executor:
        futures = [executor.submit(evaluate, rule, model) for rule in rules]
        results = tuple(future.result() for future in futures)

    suite = SuiteResult(results)
    logger.info(
        "evaluated %d rules: %d failed, %d violations",
        len(results),
        len(suite.failed_results),
        len(suite.violations),
    )
    return suite


def check_all_or_fail(
    rules: Sequence[Checkable],
    model: ClassModel,
    *,
    max_workers: int | None = None,
) -> SuiteResult:
    """Evaluate every rule, raise once with every violation of every rule.

    Raises:
        ArchitectureViolationError: If any rule failed
        ConfigurationError: If any rule definition is broken
    """
    suite = evaluate_all(rules, model, max_workers=max_workers)
    if not suite.passed:
        raise ArchitectureViolationError(suite.failed_results, format_report(suite.results))
    return suite
