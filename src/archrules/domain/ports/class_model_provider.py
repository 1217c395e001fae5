"""Class model provider protocol."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterable

    from archrules.domain.model.class_model import ClassModel


@runtime_checkable
class ClassModelProvider(Protocol):
    """Contract for whatever extracts the structural model of a code base.

    Providers are idempotent: the same roots yield a structurally equal
    model. The returned model is fully linked, nothing is resolved later.

    Example:
        class MyProvider:
            def load(self, roots: Iterable[str]) -> ClassModel:
                return ClassModel.build(scan(roots), roots=roots)
    """

    def load(self, roots: Iterable[str]) -> ClassModel:
        """Build the model for the given package roots.

        Args:
            roots: Package roots to import (e.g. "app.demoarchunit")

        Returns:
            Immutable, linked ClassModel

        Raises:
            ProviderError: If the input cannot be read or references do not resolve
        """
        ...
