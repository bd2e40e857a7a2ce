"""Errors collections that lexer may raise (user-facing ones)."""

from .bad_decimal_literal import BadDecimalLiteralError
from .empty_computation import EmptyComputationError
from .malformed_destination import MalformedDestinationError
from .malformed_identifier import MalformedIdentifierError
from .malformed_instruction import MalformedInstructionError

__all__ = [
    "BadDecimalLiteralError",
    "EmptyComputationError",
    "MalformedDestinationError",
    "MalformedIdentifierError",
    "MalformedInstructionError",
]
