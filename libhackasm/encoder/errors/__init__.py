"""Errors collections that encoder may raise (user-facing ones)."""

from .unknown_computation import UnknownComputationError
from .unknown_jump import UnknownJumpError

__all__ = [
    "UnknownComputationError",
    "UnknownJumpError",
]
