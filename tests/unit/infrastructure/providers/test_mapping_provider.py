"""Tests for infrastructure/providers/mapping_provider.py."""

import pytest

from archrules.domain.exceptions import ProviderError
from archrules.domain.model.enums import DependencyOrigin, Visibility
from archrules.infrastructure.providers import MappingModelProvider
from archrules.infrastructure.providers.mapping_provider import in_packages

CONTROLLER = "app.users.controller.UserController"
SERVICE = "app.users.service.UserService"
REST_CONTROLLER = "org.springframework.web.bind.annotation.RestController"
PATH_VARIABLE = "org.springframework.web.bind.annotation.PathVariable"


def _document() -> dict[str, object]:
    return {
        "external_packages": ["java", "org.springframework"],
        "classes": [
            {
                "name": CONTROLLER,
                "annotations": [REST_CONTROLLER],
                "fields": [{"name": "userService", "type": SERVICE, "final": True}],
                "methods": [
                    {
                        "name": "getUser",
                        "returns": "java.lang.String",
                        "parameters": [
                            {
                                "type": "java.lang.Long",
                                "name": "id",
                                "annotations": [{"type": PATH_VARIABLE, "attributes": {"value": "id"}}],
                            }
                        ],
                    }
                ],
                "accesses": [{"target": SERVICE, "detail": "calls findUser()"}],
            },
            {
                "name": SERVICE,
                "visibility": "package-private",
                "methods": [{"name": "findUser", "returns": "long"}],
            },
        ],
    }


class TestInPackages:
    """Tests for in_packages()."""

    def test_below_package(self) -> None:
        assert in_packages("java.util.List", ["java"])

    def test_prefix_is_not_package(self) -> None:
        assert not in_packages("javax.inject.Inject", ["java"])

    def test_exact(self) -> None:
        assert in_packages("lombok", ["lombok"])


class TestMappingModelProvider:
    """Tests for MappingModelProvider.load()."""

    def test_classes_imported(self) -> None:
        model = MappingModelProvider(_document()).load()
        assert [c.qualified_name for c in model.classes()] == [CONTROLLER, SERVICE]

    def test_referenced_library_types_external(self) -> None:
        model = MappingModelProvider(_document()).load()
        for name in ("java.lang.String", "java.lang.Long", REST_CONTROLLER, PATH_VARIABLE):
            descriptor = model.get(name)
            assert descriptor is not None
            assert descriptor.is_external

    def test_members_parsed(self) -> None:
        controller = MappingModelProvider(_document()).load().get(CONTROLLER)
        assert controller is not None
        (field,) = controller.fields
        assert field.is_final is True
        assert field.visibility is Visibility.PRIVATE
        (method,) = controller.methods
        (parameter,) = method.parameters
        assert parameter.name == "id"
        assert parameter.annotations[0].get("value") == "id"

    def test_visibility_parsed(self) -> None:
        service = MappingModelProvider(_document()).load().get(SERVICE)
        assert service is not None
        assert service.visibility is Visibility.PACKAGE_PRIVATE

    def test_dependencies_derived(self) -> None:
        controller = MappingModelProvider(_document()).load().get(CONTROLLER)
        assert controller is not None
        edges = {(d.target_name, d.origin, d.detail) for d in controller.dependencies}
        assert (SERVICE, DependencyOrigin.FIELD_TYPE, "userService") in edges
        assert (SERVICE, DependencyOrigin.ACCESS, "calls findUser()") in edges
        assert (REST_CONTROLLER, DependencyOrigin.ANNOTATION, "@RestController") in edges
        assert ("java.lang.Long", DependencyOrigin.METHOD_SIGNATURE, "getUser() parameter 0") in edges
        assert (
            PATH_VARIABLE,
            DependencyOrigin.ANNOTATION,
            "@PathVariable on getUser() parameter 0",
        ) in edges

    def test_primitive_types_not_dependencies(self) -> None:
        service = MappingModelProvider(_document()).load().get(SERVICE)
        assert service is not None
        assert service.dependencies == ()

    def test_dependency_targets_resolved(self) -> None:
        controller = MappingModelProvider(_document()).load().get(CONTROLLER)
        assert controller is not None
        assert all(d.target is not None for d in controller.dependencies)

    def test_roots_make_other_classes_stubs(self) -> None:
        model = MappingModelProvider(_document()).load(["app.users.controller"])
        assert [c.qualified_name for c in model.classes()] == [CONTROLLER]
        service = model.get(SERVICE)
        assert service is not None
        assert service.is_external
        assert service.methods == ()

    def test_unresolved_type(self) -> None:
        document = {"classes": [{"name": "app.A", "fields": [{"name": "b", "type": "app.Missing"}]}]}
        with pytest.raises(ProviderError, match="app.Missing"):
            MappingModelProvider(document, source="model.yaml").load()

    def test_missing_key_wrapped(self) -> None:
        document = {"classes": [{"name": "app.A", "fields": [{"type": "java.lang.Long"}]}]}
        with pytest.raises(ProviderError) as exc_info:
            MappingModelProvider(document, source="model.yaml").load()
        assert exc_info.value.source == "model.yaml"
        assert "KeyError" in exc_info.value.reason

    def test_unknown_visibility(self) -> None:
        document = {"classes": [{"name": "app.A", "visibility": "friend"}]}
        with pytest.raises(ProviderError, match="unknown visibility"):
            MappingModelProvider(document).load()

    def test_class_without_name(self) -> None:
        with pytest.raises(ProviderError, match="missing 'name'"):
            MappingModelProvider({"classes": [{"final": True}]}).load()

    def test_classes_not_a_list(self) -> None:
        with pytest.raises(ProviderError, match="'classes' must be a list"):
            MappingModelProvider({"classes": {"name": "app.A"}}).load()
