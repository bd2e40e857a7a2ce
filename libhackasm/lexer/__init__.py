"""Lexer package that strips raw assembly source and classifies it into typed statements.

Stages:
- Decommenter: truncates line at `//`
- Normalizer: removes all whitespace, drops empty lines (remembering source line of each)
- Statement parser: label declarations `(NAME)`, A-instructions `@value`, C-instructions `dest=comp;jump`
"""

from .lexer import (
    decomment_lines,
    normalize_lines,
    parse_statement,
    parse_statements,
    strip_source,
)

__all__ = [
    "decomment_lines",
    "normalize_lines",
    "parse_statement",
    "parse_statements",
    "strip_source",
]
