"""Layered architecture definition.

A plain declarative structure: layers plus one access policy per layer,
consumed by check_layered_architecture().
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from archrules.domain.exceptions.configuration import (
    ConfigurationError,
    ConfigurationErrorKind,
)
from archrules.domain.model.enums import AccessKind
from archrules.domain.predicates.package_glob import PackageGlob, compile_globs, matches_any


@dataclass(frozen=True, slots=True)
class Layer:
    """Named partition of the class model.

    Attributes:
        name: Layer name (must not be empty)
        packages: Package globs defining membership (at least one)
        globs: Compiled packages (derived)
    """

    name: str
    packages: tuple[str, ...]
    globs: tuple[PackageGlob, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("layer name must not be empty")
        object.__setattr__(self, "globs", compile_globs(self.packages))

    def contains(self, package: str) -> bool:
        """Check if package belongs to this layer."""
        return matches_any(package, self.globs)


@dataclass(frozen=True, slots=True)
class AccessPolicy:
    """Who may depend on a layer.

    Attributes:
        kind: UNREACHABLE / ONLY_BY / UNRESTRICTED
        allowed: Layers allowed to access (ONLY_BY only)
    """

    kind: AccessKind
    allowed: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.kind is not AccessKind.ONLY_BY and self.allowed:
            raise ValueError(f"{self.kind.name} policy must not list allowed layers")

    @classmethod
    def unreachable(cls) -> AccessPolicy:
        """No other layer may access."""
        return cls(AccessKind.UNREACHABLE)

    @classmethod
    def only_by(cls, *layers: str) -> AccessPolicy:
        """Only the listed layers may access."""
        return cls(AccessKind.ONLY_BY, frozenset(layers))

    @classmethod
    def unrestricted(cls) -> AccessPolicy:
        """Any layer may access."""
        return cls(AccessKind.UNRESTRICTED)

    def permits(self, origin_layer: str | None) -> bool:
        """Check if origin_layer may access the guarded layer.

        None stands for a class outside every layer, admitted only by
        an unrestricted policy.
        """
        match self.kind:
            case AccessKind.UNREACHABLE:
                return False
            case AccessKind.ONLY_BY:
                return origin_layer in self.allowed
            case AccessKind.UNRESTRICTED:
                return True

    def describe(self) -> str:
        """Policy in words."""
        match self.kind:
            case AccessKind.UNREACHABLE:
                return "may not be accessed by any layer"
            case AccessKind.ONLY_BY:
                names = ", ".join(sorted(self.allowed)) or "none"
                return f"may only be accessed by layers [{names}]"
            case AccessKind.UNRESTRICTED:
                return "may be accessed by any layer"


@dataclass(frozen=True, slots=True)
class LayeredArchitecture:
    """Layers and access policies checked as one rule.

    Layers without a policy are unrestricted.

    Attributes:
        layers: Ordered layer definitions
        policies: Layer name -> access policy
        id: Rule id used in reports
        rationale: Why the layering exists
        allow_empty_layers: Layers matching no class are tolerated
    """

    layers: tuple[Layer, ...]
    policies: Mapping[str, AccessPolicy] = field(default_factory=dict)
    id: str = "layered-architecture"
    rationale: str = ""
    allow_empty_layers: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.id:
            raise ValueError("id must not be empty")
        if not self.layers:
            raise self._invalid("at least one layer required")

        names = [layer.name for layer in self.layers]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise self._invalid(f"duplicate layer names {duplicates}")

        known = set(names)
        unknown = set(self.policies) - known
        for policy in self.policies.values():
            unknown |= policy.allowed - known
        if unknown:
            raise self._invalid(f"policies reference unknown layers {sorted(unknown)}")

        object.__setattr__(self, "policies", MappingProxyType(dict(self.policies)))

    def _invalid(self, detail: str) -> ConfigurationError:
        return ConfigurationError(ConfigurationErrorKind.INVALID_RULE, detail, self.id)

    def policy_for(self, layer: str) -> AccessPolicy:
        """Get policy of layer, unrestricted if none declared."""
        return self.policies.get(layer, AccessPolicy.unrestricted())

    @property
    def layer_names(self) -> tuple[str, ...]:
        """Layer names in declaration order."""
        return tuple(layer.name for layer in self.layers)

    @property
    def description(self) -> str:
        """Architecture in words."""
        parts = [
            f"layer '{layer.name}' {self.policy_for(layer.name).describe()}"
            for layer in self.layers
        ]
        return "; ".join(parts)
