"""Symbol table and two-pass resolution of labels and variables."""

from .predefined import PREDEFINED_SYMBOLS
from .resolver import ResolvedProgram, bind_labels, bind_variables, resolve_symbols
from .table import SymbolTable

__all__ = [
    "PREDEFINED_SYMBOLS",
    "ResolvedProgram",
    "SymbolTable",
    "bind_labels",
    "bind_variables",
    "resolve_symbols",
]
