"""Class model from a YAML document."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import yaml

from archrules.domain.exceptions.provider import ProviderError
from archrules.infrastructure.providers.mapping_provider import MappingModelProvider

if TYPE_CHECKING:
    from collections.abc import Iterable

    from archrules.domain.model.class_model import ClassModel

logger = logging.getLogger(__name__)


class YamlModelProvider:
    """Reads a model document (see mapping_provider) from a YAML file.

    The file is read on every load(); the provider holds no model.
    """

    def __init__(self, path: Path | str) -> None:
        """Initialize provider.

        Args:
            path: YAML model file
        """
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self, roots: Iterable[str] = ()) -> ClassModel:
        """Read and build the model.

        Args:
            roots: Package roots to import

        Returns:
            Linked ClassModel

        Raises:
            ProviderError: If the file is unreadable, not YAML, or malformed
        """
        source = str(self._path)
        try:
            with self._path.open("r", encoding="utf-8") as fh:
                data = yaml.safe_load(fh)
        except OSError as e:
            raise ProviderError(source, f"cannot read file: {e}") from e
        except yaml.YAMLError as e:
            raise ProviderError(source, f"invalid YAML: {e}") from e

        if not isinstance(data, dict):
            raise ProviderError(source, "document must be a YAML mapping")

        logger.debug("read model document %s", source)
        return MappingModelProvider(data, source=source).load(roots)
