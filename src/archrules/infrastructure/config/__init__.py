"""Configuration loading."""

from archrules.infrastructure.config.layers_loader import (
    load_layered_architecture,
    parse_layered_architecture,
)
from archrules.infrastructure.config.settings import ArchRulesConfig

__all__ = [
    "ArchRulesConfig",
    "load_layered_architecture",
    "parse_layered_architecture",
]
