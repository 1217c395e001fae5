"""Layered architecture checker.

Projects class-to-class dependency edges onto layers and checks every
edge into a layer against the access policy of that layer. Classes
outside every layer are origins like any other; their edges into a
layer need the policy to admit access from outside all layers.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from archrules.application.reporters.formatting import format_report
from archrules.domain.exceptions.configuration import (
    ConfigurationError,
    ConfigurationErrorKind,
)
from archrules.domain.exceptions.violation import ArchitectureViolationError
from archrules.domain.model.event import ConditionEvent
from archrules.domain.model.result import NO_CROSS_LAYER_DEPENDENCIES, EvaluationResult

if TYPE_CHECKING:
    from collections.abc import Mapping

    from archrules.domain.model.architecture import LayeredArchitecture
    from archrules.domain.model.class_model import ClassModel
    from archrules.domain.model.dependency import Dependency

logger = logging.getLogger(__name__)

NO_LAYER = "no layer"


def assign_layers(architecture: LayeredArchitecture, model: ClassModel) -> dict[str, str]:
    """Map every imported class to its unique layer.

    Classes matching no layer are left out of the mapping. Computed once
    per check, so edge projection is a dictionary lookup.

    Args:
        architecture: Layer definitions
        model: Class model

    Returns:
        Qualified class name -> layer name

    Raises:
        ConfigurationError: AMBIGUOUS_LAYER_MEMBERSHIP if a class matches two layers
    """
    membership: dict[str, str] = {}
    unassigned: list[str] = []

    for cls in model.classes():
        matching = [layer.name for layer in architecture.layers if layer.contains(cls.package_name)]
        if len(matching) > 1:
            raise ConfigurationError(
                ConfigurationErrorKind.AMBIGUOUS_LAYER_MEMBERSHIP,
                f"class '{cls.qualified_name}' matches layers {matching}",
                architecture.id,
            )
        if matching:
            membership[cls.qualified_name] = matching[0]
        else:
            unassigned.append(cls.qualified_name)

    if unassigned:
        logger.warning(
            "%s: %d classes belong to no layer, checked as origins only: %s",
            architecture.id,
            len(unassigned),
            ", ".join(unassigned),
        )
    logger.debug("%s: layer membership %s", architecture.id, membership)
    return membership


def _require_populated(architecture: LayeredArchitecture, membership: Mapping[str, str]) -> None:
    """Fail on layers no class belongs to, unless explicitly allowed."""
    populated = set(membership.values())
    empty = [name for name in architecture.layer_names if name not in populated]
    if not empty:
        return
    if architecture.allow_empty_layers:
        logger.debug("%s: empty layers allowed: %s", architecture.id, empty)
        return
    raise ConfigurationError(
        ConfigurationErrorKind.NO_MATCHING_CANDIDATES,
        f"layers {empty} match no class",
        architecture.id,
    )


def check_layered_architecture(
    architecture: LayeredArchitecture,
    model: ClassModel,
) -> EvaluationResult:
    """Check every cross-layer dependency against the access policies.

    One event per (origin class, target class) pair whose layers differ.
    Several dependencies between the same pair (a field and a
    constructor parameter, say) collapse into one event listing all of
    them. An origin outside every layer is checked as "no layer": only an
    unrestricted target layer admits it. Same-layer edges and edges to
    classes outside every layer are not checked. Without any cross-layer
    edge the result is vacuous.

    Args:
        architecture: Layers and access policies
        model: Class model

    Returns:
        EvaluationResult

    Raises:
        ConfigurationError: On ambiguous membership or empty layers
    """
    membership = assign_layers(architecture, model)
    _require_populated(architecture, membership)

    pairs: dict[tuple[str, str], list[Dependency]] = {}
    for origin, dependency in model.edges():
        target = dependency.target
        if target is None:
            continue
        origin_layer = membership.get(origin.qualified_name)
        target_layer = membership.get(target.qualified_name)
        if target_layer is None or origin_layer == target_layer:
            continue
        pairs.setdefault((origin.qualified_name, target.qualified_name), []).append(dependency)

    events = []
    for (origin_name, target_name), dependencies in pairs.items():
        origin_layer = membership.get(origin_name)
        target_layer = membership[target_name]
        policy = architecture.policy_for(target_layer)
        via = ", ".join(
            f"{d.origin.value}: {d.detail}" if d.detail else d.origin.value for d in dependencies
        )
        permitted = policy.permits(origin_layer)
        verdict = "accesses" if permitted else "illegally accesses"
        origin_label = origin_layer or NO_LAYER
        message = (
            f"{origin_name} ({origin_label}) {verdict} {target_name} ({target_layer}) "
            f"via {via}; layer '{target_layer}' {policy.describe()}"
        )
        events.append(
            ConditionEvent(
                rule_id=architecture.id,
                subject=origin_name,
                message=message,
                violated=not permitted,
            )
        )

    logger.debug(
        "%s: %d edges, %d cross-layer class pairs", architecture.id, model.edge_count, len(pairs)
    )
    return EvaluationResult(
        rule_id=architecture.id,
        description=architecture.description,
        rationale=architecture.rationale,
        events=tuple(events),
        vacuous=not events,
        vacuous_reason="" if events else NO_CROSS_LAYER_DEPENDENCIES,
    )


def check_layered_architecture_or_fail(
    architecture: LayeredArchitecture,
    model: ClassModel,
) -> EvaluationResult:
    """Check layering, raise on violations.

    Raises:
        ArchitectureViolationError: If any cross-layer edge is forbidden
        ConfigurationError: On ambiguous membership or empty layers
    """
    result = check_layered_architecture(architecture, model)
    if result.failed:
        raise ArchitectureViolationError((result,), format_report((result,)))
    return result
