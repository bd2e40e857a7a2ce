"""Errors collections that symbol resolver may raise (user-facing ones)."""

from .duplicate_label import DuplicateLabelError
from .literal_out_of_range import LiteralOutOfRangeError
from .variable_address_overflow import VariableAddressOverflowError

__all__ = [
    "DuplicateLabelError",
    "LiteralOutOfRangeError",
    "VariableAddressOverflowError",
]
