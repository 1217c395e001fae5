"""Segment-based package glob matching.

Syntax:
    ..   zero or more whole package segments
    *    any characters inside one segment
    .    segment separator

Examples:
    ..service..      com.example.service, a.b.service.c
                     (not com.example.myservice, not com.example.servicex)
    com.example..    com.example and everything below it
    java.*.util      java.foo.util
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from archrules.domain.exceptions.configuration import (
    ConfigurationError,
    ConfigurationErrorKind,
)

_SEGMENT = re.compile(r"^[\w$*]+$")


class _AnySegments:
    """Token for '..'."""

    def __repr__(self) -> str:
        return ".."


_ANY = _AnySegments()

type _Token = _AnySegments | re.Pattern[str]


@dataclass(frozen=True, slots=True)
class PackageGlob:
    """Compiled package glob.

    Attributes:
        original: Pattern as written
        tokens: Segment matchers and '..' markers
    """

    original: str
    tokens: tuple[_Token, ...]

    def matches(self, package: str) -> bool:
        """Check if package matches glob.

        Matching walks whole segments, so a literal segment never matches
        part of a package segment.

        Args:
            package: Dotted package name, empty for the default package

        Returns:
            True if package matches

        Complexity: O(T * S) where T=tokens, S=package segments
        """
        if package is None:
            raise TypeError("package must not be None")
        segments = package.split(".") if package else []

        # positions: how many segments the consumed tokens can cover
        positions = {0}
        for token in self.tokens:
            if token is _ANY:
                positions = set(range(min(positions), len(segments) + 1))
            else:
                positions = {
                    i + 1
                    for i in positions
                    if i < len(segments) and token.fullmatch(segments[i])
                }
            if not positions:
                return False
        return len(segments) in positions

    def __str__(self) -> str:
        return self.original


def _invalid(pattern: str, reason: str) -> ConfigurationError:
    return ConfigurationError(
        ConfigurationErrorKind.INVALID_GLOB,
        f"'{pattern}': {reason}",
    )


def _compile_segment(pattern: str, segment: str) -> re.Pattern[str]:
    if not segment:
        raise _invalid(pattern, "empty package segment")
    if not _SEGMENT.match(segment):
        raise _invalid(pattern, f"illegal characters in segment '{segment}'")
    return re.compile(".*".join(re.escape(part) for part in segment.split("*")))


def compile_glob(pattern: str) -> PackageGlob:
    """Compile package glob.

    FAIL-FIRST: raises for invalid patterns.

    Args:
        pattern: Glob pattern string

    Returns:
        Compiled PackageGlob

    Raises:
        ConfigurationError: INVALID_GLOB if pattern is empty or malformed
    """
    if not pattern:
        raise _invalid(pattern, "pattern must not be empty")
    if "..." in pattern:
        raise _invalid(pattern, "'...' is not valid, use '..'")

    parts = pattern.split("..")
    tokens: list[_Token] = []
    for index, part in enumerate(parts):
        if index > 0:
            tokens.append(_ANY)
        if not part:
            if 0 < index < len(parts) - 1:
                raise _invalid(pattern, "consecutive '..' markers")
            continue
        if part.startswith(".") or part.endswith("."):
            raise _invalid(pattern, "stray '.' next to a segment")
        tokens.extend(_compile_segment(pattern, s) for s in part.split("."))

    return PackageGlob(original=pattern, tokens=tuple(tokens))


def compile_globs(patterns: tuple[str, ...]) -> tuple[PackageGlob, ...]:
    """Compile several globs, at least one required.

    Raises:
        ConfigurationError: INVALID_GLOB if no pattern given or one is malformed
    """
    if not patterns:
        raise ConfigurationError(
            ConfigurationErrorKind.INVALID_GLOB,
            "at least one package pattern required",
        )
    return tuple(compile_glob(p) for p in patterns)


def matches_any(package: str, globs: tuple[PackageGlob, ...]) -> bool:
    """Check if package matches at least one glob."""
    return any(g.matches(package) for g in globs)
