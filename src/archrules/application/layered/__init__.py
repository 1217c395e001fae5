"""Layered architecture checking."""

from archrules.application.layered.checker import (
    assign_layers,
    check_layered_architecture,
    check_layered_architecture_or_fail,
)

__all__ = [
    "assign_layers",
    "check_layered_architecture",
    "check_layered_architecture_or_fail",
]
