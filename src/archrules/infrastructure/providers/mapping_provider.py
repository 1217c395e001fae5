"""Class model from a plain mapping.

Document shape (YAML or JSON parse into it directly):

    external_packages: [java, jakarta, org.springframework, lombok]
    classes:
      - name: app.users.controller.UserController
        superclass: app.common.BaseController        # optional
        visibility: public                           # default public
        final: false
        annotations:
          - org.springframework.web.bind.annotation.RestController
          - type: org.springframework.web.bind.annotation.RequestMapping
            attributes: {value: /api/users}
        fields:
          - {name: userService, type: app.users.service.UserService, final: true}
        methods:
          - name: getUser
            returns: org.springframework.http.ResponseEntity
            parameters:
              - type: java.lang.Long
                annotations: [{type: ...PathVariable, attributes: {value: id}}]
        accesses:
          - {target: app.users.service.UserService, detail: "calls findById()"}

Types are raw: generic arguments are not modelled.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from archrules.domain.exceptions.provider import ProviderError
from archrules.domain.model.annotation import AnnotationInstance
from archrules.domain.model.class_ import ClassDescriptor
from archrules.domain.model.class_model import PRIMITIVE_TYPES, ClassModel, element_type
from archrules.domain.model.dependency import Dependency
from archrules.domain.model.enums import DependencyOrigin, Visibility
from archrules.domain.model.field_ import FieldDescriptor
from archrules.domain.model.method import MethodDescriptor
from archrules.domain.model.parameter import ParameterDescriptor

logger = logging.getLogger(__name__)


def in_packages(type_name: str, packages: Iterable[str]) -> bool:
    """Check if type is declared in or below any of packages."""
    return any(type_name == p or type_name.startswith(f"{p}.") for p in packages)


class MappingModelProvider:
    """Builds a ClassModel from an already parsed mapping.

    Dependency edges are derived, not listed: field types, method
    parameter and return types, annotation types and the superclass,
    plus explicit `accesses`.
    """

    def __init__(self, data: Mapping[str, Any], *, source: str = "<mapping>") -> None:
        """Initialize provider.

        Args:
            data: Parsed model document
            source: Description of the input, used in errors
        """
        self._data = data
        self._source = source

    def load(self, roots: Iterable[str] = ()) -> ClassModel:
        """Build the model.

        Declared classes outside every root become external stubs.
        No roots means every declared class is imported.

        Args:
            roots: Package roots to import

        Returns:
            Linked ClassModel

        Raises:
            ProviderError: On malformed document or unresolved types
        """
        roots = tuple(roots)
        try:
            return self._load(roots)
        except (KeyError, TypeError, ValueError) as e:
            raise ProviderError(self._source, f"{type(e).__name__}: {e}") from e

    def _load(self, roots: tuple[str, ...]) -> ClassModel:
        if not isinstance(self._data, Mapping):
            raise ProviderError(self._source, "document must be a mapping")

        entries = self._data.get("classes", [])
        if not isinstance(entries, list):
            raise ProviderError(self._source, "'classes' must be a list")
        external_packages = tuple(self._data.get("external_packages", ()))

        classes: list[ClassDescriptor] = []
        for idx, entry in enumerate(entries):
            if not isinstance(entry, Mapping):
                raise ProviderError(self._source, f"class at index {idx} must be a mapping")
            name = entry.get("name")
            if not isinstance(name, str) or not name:
                raise ProviderError(self._source, f"class at index {idx} missing 'name'")
            if roots and not in_packages(name, roots):
                classes.append(_parse_stub(name, entry))
            else:
                classes.append(_parse_class(name, entry))

        declared = {c.qualified_name for c in classes}
        referenced = {
            element_type(name)
            for c in classes
            for name in (
                *(d.target_name for d in c.dependencies),
                *(m.return_type for m in c.methods),
            )
        }
        external = sorted(
            name
            for name in referenced - declared
            if name not in PRIMITIVE_TYPES and in_packages(name, external_packages)
        )

        model = ClassModel.build(classes, external=external, roots=roots, source=self._source)
        logger.debug(
            "loaded %s: %d classes, %d edges, roots %s",
            self._source,
            len(model),
            model.edge_count,
            list(roots) or "<all>",
        )
        return model


def _parse_annotation(raw: Any) -> AnnotationInstance:
    if isinstance(raw, str):
        return AnnotationInstance(raw)
    if not isinstance(raw, Mapping):
        raise TypeError(f"annotation must be a string or mapping, got {raw!r}")
    return AnnotationInstance(raw["type"], raw.get("attributes") or {})


def _parse_annotations(raw: Any) -> tuple[AnnotationInstance, ...]:
    return tuple(_parse_annotation(a) for a in raw or ())


def _parse_visibility(raw: Any, default: Visibility) -> Visibility:
    if raw is None:
        return default
    try:
        return Visibility[str(raw).upper().replace("-", "_")]
    except KeyError:
        raise ValueError(f"unknown visibility '{raw}'") from None


def _parse_field(raw: Mapping[str, Any]) -> FieldDescriptor:
    return FieldDescriptor(
        name=raw["name"],
        type_name=raw["type"],
        visibility=_parse_visibility(raw.get("visibility"), Visibility.PRIVATE),
        is_final=bool(raw.get("final", False)),
        is_static=bool(raw.get("static", False)),
        annotations=_parse_annotations(raw.get("annotations")),
    )


def _parse_method(raw: Mapping[str, Any]) -> MethodDescriptor:
    parameters = tuple(
        ParameterDescriptor(
            position=position,
            type_name=p["type"],
            annotations=_parse_annotations(p.get("annotations")),
            name=p.get("name"),
        )
        for position, p in enumerate(raw.get("parameters") or ())
    )
    return MethodDescriptor(
        name=raw["name"],
        parameters=parameters,
        return_type=raw.get("returns", "void"),
        visibility=_parse_visibility(raw.get("visibility"), Visibility.PUBLIC),
        is_static=bool(raw.get("static", False)),
        annotations=_parse_annotations(raw.get("annotations")),
    )


def _derive_dependencies(
    name: str,
    raw: Mapping[str, Any],
    annotations: tuple[AnnotationInstance, ...],
    fields: tuple[FieldDescriptor, ...],
    methods: tuple[MethodDescriptor, ...],
) -> tuple[Dependency, ...]:
    """Dependency edges of one class, deduplicated, in discovery order."""
    found: dict[tuple[str, DependencyOrigin, str], None] = {}

    def add(type_name: str, origin: DependencyOrigin, detail: str) -> None:
        target = element_type(type_name)
        if target == name or target in PRIMITIVE_TYPES:
            return
        found[(target, origin, detail)] = None

    superclass = raw.get("superclass")
    if superclass:
        add(superclass, DependencyOrigin.INHERITANCE, "extends")
    for annotation in annotations:
        add(annotation.type_name, DependencyOrigin.ANNOTATION, str(annotation))
    for f in fields:
        add(f.type_name, DependencyOrigin.FIELD_TYPE, f.name)
        for annotation in f.annotations:
            add(annotation.type_name, DependencyOrigin.ANNOTATION, f"{annotation} on {f.name}")
    for m in methods:
        add(m.return_type, DependencyOrigin.METHOD_SIGNATURE, f"{m.name}() return")
        for annotation in m.annotations:
            add(annotation.type_name, DependencyOrigin.ANNOTATION, f"{annotation} on {m.name}()")
        for p in m.parameters:
            position = f"{m.name}() parameter {p.position}"
            add(p.type_name, DependencyOrigin.METHOD_SIGNATURE, position)
            for annotation in p.annotations:
                detail = f"{annotation} on {position}"
                add(annotation.type_name, DependencyOrigin.ANNOTATION, detail)
    for access in raw.get("accesses") or ():
        add(access["target"], DependencyOrigin.ACCESS, str(access.get("detail", "")))

    return tuple(
        Dependency(target_name=t, origin=o, detail=d) for t, o, d in found
    )


def _parse_class(name: str, raw: Mapping[str, Any]) -> ClassDescriptor:
    annotations = _parse_annotations(raw.get("annotations"))
    fields = tuple(_parse_field(f) for f in raw.get("fields") or ())
    methods = tuple(_parse_method(m) for m in raw.get("methods") or ())
    return ClassDescriptor(
        qualified_name=name,
        annotations=annotations,
        methods=methods,
        fields=fields,
        dependencies=_derive_dependencies(name, raw, annotations, fields, methods),
        visibility=_parse_visibility(raw.get("visibility"), Visibility.PUBLIC),
        is_final=bool(raw.get("final", False)),
    )


def _parse_stub(name: str, raw: Mapping[str, Any]) -> ClassDescriptor:
    """Declared class outside the roots: identity and annotations only."""
    return ClassDescriptor(
        qualified_name=name,
        annotations=_parse_annotations(raw.get("annotations")),
        visibility=_parse_visibility(raw.get("visibility"), Visibility.PUBLIC),
        is_external=True,
    )
