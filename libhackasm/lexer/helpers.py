from __future__ import annotations

from string import ascii_letters, digits

SINGLE_LINE_COMMENT = "//"

IDENTIFIER_PUNCTUATION = "_.$:"
IDENTIFIER_START_ALPHABET = frozenset(ascii_letters + IDENTIFIER_PUNCTUATION)
IDENTIFIER_ALPHABET = frozenset(ascii_letters + digits + IDENTIFIER_PUNCTUATION)


def strip_comment(line: str) -> str:
    """Truncate line at first comment mark (if any)."""
    idx = line.find(SINGLE_LINE_COMMENT)
    if idx == -1:
        return line
    return line[:idx]


def remove_whitespace(line: str) -> str:
    """Remove all whitespace characters, both edge and interior ones."""
    return "".join(c for c in line if not c.isspace())


def is_valid_identifier(text: str) -> bool:
    """Is given text can be used as symbol name (label or variable)?."""
    if not text or text[0] not in IDENTIFIER_START_ALPHABET:
        return False
    return all(c in IDENTIFIER_ALPHABET for c in text[1:])


def is_decimal_literal_candidate(text: str) -> bool:
    """Is given text meant to be a number (even malformed one)?

    Identifiers cannot start with digit or sign, so such operands are always treated as literals.
    """
    return text.startswith(("-", "+", *digits))


def is_valid_decimal_literal(text: str) -> bool:
    # `isdigit` accepts unicode digits like superscripts, that are not part of grammar
    return bool(text) and all(c in digits for c in text)
