"""pytest plugin for archrules.

Provides fixtures for architecture testing:
    arch_config: Settings (override in conftest.py)
    arch_model: Class model from arch_model_file
    arch_layers: Layered architecture from arch_layers_file
    arch_rules: RuleChecker bound to arch_model

Configuration (pytest.ini or pyproject.toml):
    arch_model_file: YAML class model document
    arch_roots: Package roots to import (default: every declared class)
    arch_layers_file: YAML layered architecture
    arch_max_workers: Thread pool size for check_all (default: executor default)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from archrules.infrastructure.config.settings import (
    INI_LAYERS_FILE,
    INI_MAX_WORKERS,
    INI_MODEL_FILE,
    INI_ROOTS,
)

# Register fixtures from fixtures module
from archrules.presentation.pytest_plugin.fixtures import (
    RuleChecker,
    arch_config,
    arch_layers,
    arch_model,
    arch_rules,
)

if TYPE_CHECKING:
    import pytest

# Export fixtures for pytest discovery
__all__ = [
    "RuleChecker",
    "arch_config",
    "arch_layers",
    "arch_model",
    "arch_rules",
]


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register ini options."""
    parser.addini(INI_MODEL_FILE, "archrules: YAML class model document", default="")
    parser.addini(
        INI_ROOTS, "archrules: package roots to import", type="linelist", default=[]
    )
    parser.addini(INI_LAYERS_FILE, "archrules: YAML layered architecture", default="")
    parser.addini(INI_MAX_WORKERS, "archrules: thread pool size for suites", default="")


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest plugin with markers."""
    config.addinivalue_line(
        "markers",
        "arch: mark test as architecture test",
    )
