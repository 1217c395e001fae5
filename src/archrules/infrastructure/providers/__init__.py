"""Class model providers."""

from archrules.infrastructure.providers.mapping_provider import MappingModelProvider
from archrules.infrastructure.providers.yaml_provider import YamlModelProvider

__all__ = [
    "MappingModelProvider",
    "YamlModelProvider",
]
