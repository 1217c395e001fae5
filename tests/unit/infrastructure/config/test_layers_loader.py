"""Tests for infrastructure/config/layers_loader.py."""

from pathlib import Path

import pytest

from archrules.domain.exceptions import ConfigurationError, ConfigurationErrorKind
from archrules.domain.model.enums import AccessKind
from archrules.infrastructure.config import load_layered_architecture, parse_layered_architecture

LAYERS = """\
id: users-layering
because: Controllers go through services
layers:
  - {name: Controller, packages: ["..controller.."]}
  - {name: Service, packages: "..service.."}
  - {name: Repository, packages: ["..repository.."]}
  - {name: Domain, packages: ["..domain.."]}
access:
  Controller: none
  Service: [Controller]
  Repository: [Service]
  Domain: any
"""


def _document(**overrides: object) -> dict[str, object]:
    document: dict[str, object] = {
        "layers": [
            {"name": "Controller", "packages": ["..controller.."]},
            {"name": "Service", "packages": ["..service.."]},
        ],
        "access": {"Controller": "none"},
    }
    document.update(overrides)
    return document


class TestParseLayeredArchitecture:
    """Tests for parse_layered_architecture()."""

    def test_defaults(self) -> None:
        architecture = parse_layered_architecture(_document())
        assert architecture.id == "layered-architecture"
        assert architecture.rationale == ""
        assert architecture.allow_empty_layers is False
        assert architecture.layer_names == ("Controller", "Service")

    def test_omitted_access_is_unrestricted(self) -> None:
        architecture = parse_layered_architecture(_document())
        assert architecture.policy_for("Service").kind is AccessKind.UNRESTRICTED

    def test_missing_layers(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            parse_layered_architecture({"access": {}}, "layers.yaml")
        assert exc_info.value.kind is ConfigurationErrorKind.INVALID_RULE
        assert "layers.yaml: 'layers' must be a non-empty list" in str(exc_info.value)

    def test_layer_without_name(self) -> None:
        with pytest.raises(ConfigurationError, match="missing required 'name'"):
            parse_layered_architecture(_document(layers=[{"packages": ["..web.."]}]))

    def test_layer_without_packages(self) -> None:
        with pytest.raises(ConfigurationError, match="'packages' must be a non-empty list"):
            parse_layered_architecture(_document(layers=[{"name": "Web", "packages": []}]))

    def test_bad_access_value(self) -> None:
        with pytest.raises(ConfigurationError, match="access of layer 'Controller'"):
            parse_layered_architecture(_document(access={"Controller": "nobody"}))

    def test_access_for_unknown_layer(self) -> None:
        with pytest.raises(ConfigurationError, match="unknown layers"):
            parse_layered_architecture(_document(access={"Persistence": "none"}))

    def test_invalid_glob(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            parse_layered_architecture(_document(layers=[{"name": "Web", "packages": ["app..."]}]))
        assert exc_info.value.kind is ConfigurationErrorKind.INVALID_GLOB

    def test_not_a_mapping(self) -> None:
        with pytest.raises(ConfigurationError, match="document must be a mapping"):
            parse_layered_architecture(["Controller"])


class TestLoadLayeredArchitecture:
    """Tests for load_layered_architecture()."""

    def test_load(self, tmp_path: Path) -> None:
        path = tmp_path / "layers.yaml"
        path.write_text(LAYERS, encoding="utf-8")
        architecture = load_layered_architecture(path)
        assert architecture.id == "users-layering"
        assert architecture.rationale == "Controllers go through services"
        assert architecture.layer_names == ("Controller", "Service", "Repository", "Domain")
        assert architecture.policy_for("Controller").kind is AccessKind.UNREACHABLE
        assert architecture.policy_for("Repository").allowed == frozenset({"Service"})
        assert architecture.policy_for("Domain").kind is AccessKind.UNRESTRICTED

    def test_packages_as_string(self, tmp_path: Path) -> None:
        path = tmp_path / "layers.yaml"
        path.write_text(LAYERS, encoding="utf-8")
        service = load_layered_architecture(path).layers[1]
        assert service.packages == ("..service..",)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError, match="cannot read file"):
            load_layered_architecture(tmp_path / "absent.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "layers.yaml"
        path.write_text("layers: [unclosed", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="invalid YAML"):
            load_layered_architecture(path)
