"""Class model aggregate root."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType

from archrules.domain.exceptions.provider import ProviderError
from archrules.domain.model.class_ import ClassDescriptor
from archrules.domain.model.dependency import Dependency
from archrules.domain.model.enums import UnitKind
from archrules.domain.model.field_ import FieldDescriptor
from archrules.domain.model.method import MethodDescriptor

logger = logging.getLogger(__name__)

PRIMITIVE_TYPES: frozenset[str] = frozenset(
    {"void", "boolean", "byte", "char", "short", "int", "long", "float", "double"}
)

type Unit = ClassDescriptor | MethodDescriptor | FieldDescriptor


def element_type(type_name: str) -> str:
    """Strip array suffixes: 'User[][]' -> 'User'."""
    while type_name.endswith("[]"):
        type_name = type_name[:-2]
    return type_name


@dataclass(frozen=True, slots=True)
class ClassModel:
    """Immutable structural snapshot of a code base.

    Fully materialized and linked on build(); nothing is resolved lazily
    and nothing is mutated afterwards, so rules may read it concurrently.

    Attributes:
        classes_by_name: Qualified name -> ClassDescriptor, external stubs included
        roots: Package roots the model was built for
    """

    classes_by_name: Mapping[str, ClassDescriptor] = field(default_factory=dict)
    roots: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def build(
        cls,
        classes: Iterable[ClassDescriptor],
        *,
        external: Iterable[str] = (),
        roots: Iterable[str] = (),
        source: str = "<memory>",
    ) -> ClassModel:
        """Assemble and link a model.

        The model links copies of `classes`; the given descriptors are
        not modified. Primitive types and every name in `external` become external stubs
        unless declared in `classes`. Dependency targets and method return
        types are resolved to descriptors.

        Args:
            classes: Declared classes
            external: Type names known to exist outside the model
            roots: Package roots the classes were loaded for
            source: Description of the input, used in errors

        Returns:
            Linked ClassModel

        Raises:
            ProviderError: On duplicate classes or unresolved references
        """
        by_name: dict[str, ClassDescriptor] = {}
        for descriptor in classes:
            if descriptor.qualified_name in by_name:
                raise ProviderError(source, f"duplicate class '{descriptor.qualified_name}'")
            by_name[descriptor.qualified_name] = _detach(descriptor)

        for name in (*external, *PRIMITIVE_TYPES):
            if name not in by_name:
                by_name[name] = ClassDescriptor(qualified_name=name, is_external=True)

        for descriptor in by_name.values():
            _link(descriptor, by_name, source)

        logger.debug(
            "class model built from %s: %d classes, %d external",
            source,
            sum(1 for c in by_name.values() if not c.is_external),
            sum(1 for c in by_name.values() if c.is_external),
        )
        return cls(
            classes_by_name=MappingProxyType(dict(sorted(by_name.items()))),
            roots=frozenset(roots),
        )

    def get(self, qualified_name: str) -> ClassDescriptor | None:
        """Get class by qualified name. Returns None if not found."""
        return self.classes_by_name.get(qualified_name)

    def classes(self) -> tuple[ClassDescriptor, ...]:
        """Imported (non-external) classes, sorted by name."""
        return tuple(c for c in self.classes_by_name.values() if not c.is_external)

    def methods(self) -> tuple[MethodDescriptor, ...]:
        """Methods of all imported classes."""
        return tuple(m for c in self.classes() for m in c.methods)

    def fields(self) -> tuple[FieldDescriptor, ...]:
        """Fields of all imported classes."""
        return tuple(f for c in self.classes() for f in c.fields)

    def units(self, kind: UnitKind) -> tuple[Unit, ...]:
        """Units of one kind, the candidate pool of a rule."""
        match kind:
            case UnitKind.CLASS:
                return self.classes()
            case UnitKind.METHOD:
                return self.methods()
            case UnitKind.FIELD:
                return self.fields()

    def edges(self) -> Iterator[tuple[ClassDescriptor, Dependency]]:
        """Outgoing dependency edges of imported classes."""
        for descriptor in self.classes():
            for dependency in descriptor.dependencies:
                yield descriptor, dependency

    @property
    def edge_count(self) -> int:
        """Number of dependency edges of imported classes."""
        return sum(len(c.dependencies) for c in self.classes())

    def __len__(self) -> int:
        return len(self.classes())

    def __contains__(self, qualified_name: object) -> bool:
        return qualified_name in self.classes_by_name


def _detach(descriptor: ClassDescriptor) -> ClassDescriptor:
    """Copy a class with unbound members and unresolved dependencies.

    Each model links its own copies, so descriptors passed to build()
    stay untouched and can be reused for another model.
    """
    return replace(
        descriptor,
        methods=tuple(replace(m, owner=None, return_class=None) for m in descriptor.methods),
        fields=tuple(replace(f, owner=None) for f in descriptor.fields),
        dependencies=tuple(replace(d, target=None) for d in descriptor.dependencies),
    )


def _link(
    descriptor: ClassDescriptor,
    by_name: Mapping[str, ClassDescriptor],
    source: str,
) -> None:
    """Resolve dependency targets and return types of one class."""
    for dependency in descriptor.dependencies:
        target = by_name.get(element_type(dependency.target_name))
        if target is None:
            raise ProviderError(
                source,
                f"unresolved dependency {dependency.describe(descriptor.qualified_name)}",
            )
        object.__setattr__(dependency, "target", target)

    for method in descriptor.methods:
        return_class = by_name.get(element_type(method.return_type))
        if return_class is None:
            raise ProviderError(
                source,
                f"unresolved return type '{method.return_type}' of {method.full_name}",
            )
        object.__setattr__(method, "return_class", return_class)
