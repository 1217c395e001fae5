"""Integration fixtures: the demo users application as a YAML model."""

from pathlib import Path

import pytest

from archrules.infrastructure.config import ArchRulesConfig

FIXTURES = Path(__file__).parent.parent / "fixtures"


@pytest.fixture(scope="session")
def arch_config() -> ArchRulesConfig:
    """Point the plugin fixtures at the demo application."""
    return ArchRulesConfig(
        model_file=FIXTURES / "demo_app.yaml",
        roots=("app.demoarchunit",),
        layers_file=FIXTURES / "layers.yaml",
        max_workers=4,
    )
