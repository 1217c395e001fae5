"""Predicates shared by classes, methods and fields.

Work on anything exposing the attribute they read (duck-typed),
so one `annotated_with` serves all three unit kinds.
"""

from __future__ import annotations

import re
from typing import Any

from archrules.domain.model.annotation import AnnotationInstance
from archrules.domain.model.enums import Visibility
from archrules.domain.predicates.base import Predicate
from archrules.domain.predicates.package_glob import compile_globs, matches_any


def _annotation_label(type_name: str) -> str:
    return f"@{type_name.rsplit('.', 1)[-1]}"


def annotated_with(type_name: str) -> Predicate[Any]:
    """Create predicate: unit carries annotation of type.

    Args:
        type_name: Qualified annotation type, or simple name

    Returns:
        Predicate
    """
    if not type_name:
        raise ValueError("type_name must not be empty")

    def predicate(unit: Any) -> bool:
        annotations: tuple[AnnotationInstance, ...] = unit.annotations
        return any(a.is_of_type(type_name) for a in annotations)

    return Predicate(f"annotated with {_annotation_label(type_name)}", predicate)


def resides_in_package(*patterns: str) -> Predicate[Any]:
    """Create predicate: unit's package matches any glob.

    Globs are compiled here, so a malformed pattern fails when the
    rule is defined, not when it runs.

    Args:
        *patterns: Package globs (at least one)

    Returns:
        Predicate

    Raises:
        ConfigurationError: INVALID_GLOB for malformed patterns
    """
    globs = compile_globs(patterns)
    quoted = ", ".join(f"'{p}'" for p in patterns)
    noun = "package" if len(patterns) == 1 else "any package of"

    def predicate(unit: Any) -> bool:
        return matches_any(unit.package_name, globs)

    return Predicate(f"reside in {noun} {quoted}", predicate)


resides_in_any_package = resides_in_package


def has_simple_name_ending_with(suffix: str) -> Predicate[Any]:
    """Create predicate: simple name ends with suffix."""
    if not suffix:
        raise ValueError("suffix must not be empty")

    def predicate(unit: Any) -> bool:
        return _simple_name(unit).endswith(suffix)

    return Predicate(f"have simple name ending with '{suffix}'", predicate)


def has_simple_name(name: str) -> Predicate[Any]:
    """Create predicate: simple name equals name."""
    if not name:
        raise ValueError("name must not be empty")
    return Predicate(f"have simple name '{name}'", lambda unit: _simple_name(unit) == name)


def has_name_matching(regex: str) -> Predicate[Any]:
    """Create predicate: simple name matches regex.

    Raises:
        ValueError: If regex is invalid
    """
    try:
        compiled = re.compile(regex)
    except re.error as e:
        raise ValueError(f"Invalid regex '{regex}': {e}") from e

    def predicate(unit: Any) -> bool:
        return compiled.fullmatch(_simple_name(unit)) is not None

    return Predicate(f"have name matching '{regex}'", predicate)


def is_public() -> Predicate[Any]:
    """Create predicate: declared public."""
    return Predicate("public", lambda unit: unit.visibility is Visibility.PUBLIC)


def is_static() -> Predicate[Any]:
    """Create predicate: declared static (methods and fields)."""
    return Predicate("static", lambda unit: unit.is_static)


def is_final() -> Predicate[Any]:
    """Create predicate: declared final (classes and fields)."""
    return Predicate("final", lambda unit: unit.is_final)


def _simple_name(unit: Any) -> str:
    # classes have simple_name, members have name
    return getattr(unit, "simple_name", None) or unit.name
