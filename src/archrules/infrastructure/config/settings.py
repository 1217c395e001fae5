"""archrules settings.

Read from pytest ini options (pytest.ini or [tool.pytest.ini_options]).
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import pytest

INI_MODEL_FILE = "arch_model_file"
INI_ROOTS = "arch_roots"
INI_LAYERS_FILE = "arch_layers_file"
INI_MAX_WORKERS = "arch_max_workers"


@dataclass(frozen=True, slots=True)
class ArchRulesConfig:
    """Where the model comes from and how rules run.

    None = feature disabled.

    Attributes:
        model_file: YAML model document. None = no model configured
        roots: Package roots to import. Empty = every declared class
        layers_file: YAML layered architecture. None = no layering configured
        max_workers: Thread pool size for suites. None = executor default
    """

    model_file: Path | None = None
    roots: tuple[str, ...] = ()
    layers_file: Path | None = None
    max_workers: int | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.max_workers is not None and self.max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {self.max_workers}")
        if any(not root for root in self.roots):
            raise ValueError("roots must not contain empty names")

    @classmethod
    def from_pytest_config(cls, config: pytest.Config) -> ArchRulesConfig:
        """Read settings from ini options.

        Relative paths are resolved against the pytest rootdir.

        Raises:
            ValueError: If arch_max_workers is not a positive integer
        """
        root = Path(config.rootpath)

        def path_option(name: str) -> Path | None:
            value = str(config.getini(name) or "").strip()
            if not value:
                return None
            path = Path(value)
            return path if path.is_absolute() else root / path

        workers_raw = str(config.getini(INI_MAX_WORKERS) or "").strip()
        try:
            max_workers = int(workers_raw) if workers_raw else None
        except ValueError:
            raise ValueError(f"{INI_MAX_WORKERS} must be an integer, got '{workers_raw}'") from None

        return cls(
            model_file=path_option(INI_MODEL_FILE),
            roots=tuple(config.getini(INI_ROOTS) or ()),
            layers_file=path_option(INI_LAYERS_FILE),
            max_workers=max_workers,
        )
