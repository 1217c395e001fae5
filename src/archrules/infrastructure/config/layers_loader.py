"""Layered architecture from a YAML file.

    id: layered-architecture
    because: Controllers go through services, services through repositories
    allow_empty_layers: false
    layers:
      - {name: Controller, packages: ["..controller.."]}
      - {name: Service, packages: ["..service.."]}
      - {name: Repository, packages: ["..repository.."]}
      - {name: Domain, packages: ["..domain.."]}
    access:
      Controller: none              # unreachable
      Service: [Controller]         # only by
      Repository: [Service]
      Domain: any                   # unrestricted, same as omitting it
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from archrules.domain.exceptions.configuration import (
    ConfigurationError,
    ConfigurationErrorKind,
)
from archrules.domain.model.architecture import AccessPolicy, Layer, LayeredArchitecture

logger = logging.getLogger(__name__)

ACCESS_NONE = "none"
ACCESS_ANY = "any"


def _invalid(source: str, detail: str) -> ConfigurationError:
    return ConfigurationError(ConfigurationErrorKind.INVALID_RULE, f"{source}: {detail}")


def _parse_layer(source: str, idx: int, raw: Any) -> Layer:
    if not isinstance(raw, dict):
        raise _invalid(source, f"layer at index {idx} must be a mapping")

    name = raw.get("name")
    if not isinstance(name, str) or not name.strip():
        raise _invalid(source, f"layer at index {idx} missing required 'name' field")

    packages = raw.get("packages")
    if isinstance(packages, str):
        packages = [packages]
    if not isinstance(packages, list) or not packages:
        raise _invalid(source, f"layer '{name}': 'packages' must be a non-empty list")

    return Layer(name=name, packages=tuple(str(p) for p in packages))


def _parse_policy(source: str, layer: str, raw: Any) -> AccessPolicy:
    if raw == ACCESS_NONE:
        return AccessPolicy.unreachable()
    if raw == ACCESS_ANY:
        return AccessPolicy.unrestricted()
    if isinstance(raw, list) and all(isinstance(item, str) for item in raw):
        return AccessPolicy.only_by(*raw)
    raise _invalid(
        source,
        f"access of layer '{layer}' must be '{ACCESS_NONE}', '{ACCESS_ANY}' "
        f"or a list of layer names, got {raw!r}",
    )


def parse_layered_architecture(
    data: Any,
    source: str = "<mapping>",
) -> LayeredArchitecture:
    """Build a LayeredArchitecture from a parsed document.

    Args:
        data: Parsed document
        source: Description of the input, used in errors

    Returns:
        LayeredArchitecture

    Raises:
        ConfigurationError: INVALID_RULE on schema errors, INVALID_GLOB on bad packages
    """
    if not isinstance(data, dict):
        raise _invalid(source, "document must be a mapping")

    layers_raw = data.get("layers")
    if not isinstance(layers_raw, list) or not layers_raw:
        raise _invalid(source, "'layers' must be a non-empty list")
    layers = tuple(_parse_layer(source, idx, raw) for idx, raw in enumerate(layers_raw))

    access_raw = data.get("access", {})
    if not isinstance(access_raw, dict):
        raise _invalid(source, "'access' must be a mapping")
    policies = {
        str(layer): _parse_policy(source, str(layer), raw) for layer, raw in access_raw.items()
    }

    return LayeredArchitecture(
        layers=layers,
        policies=policies,
        id=str(data.get("id", "layered-architecture")),
        rationale=str(data.get("because", "")),
        allow_empty_layers=bool(data.get("allow_empty_layers", False)),
    )


def load_layered_architecture(path: Path | str) -> LayeredArchitecture:
    """Read a LayeredArchitecture from a YAML file.

    Args:
        path: YAML file

    Returns:
        LayeredArchitecture

    Raises:
        ConfigurationError: If the file is unreadable, not YAML, or invalid
    """
    path = Path(path)
    source = str(path)
    try:
        with path.open("r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except OSError as e:
        raise _invalid(source, f"cannot read file: {e}") from e
    except yaml.YAMLError as e:
        raise _invalid(source, f"invalid YAML: {e}") from e

    architecture = parse_layered_architecture(data, source)
    logger.debug("loaded layered architecture '%s' from %s", architecture.id, source)
    return architecture
