"""Domain ports (protocols)."""

from archrules.domain.ports.class_model_provider import ClassModelProvider
from archrules.domain.ports.reporter import ReporterProtocol

__all__ = [
    "ClassModelProvider",
    "ReporterProtocol",
]
