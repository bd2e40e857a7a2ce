from __future__ import annotations

from typing import TYPE_CHECKING

from libhackasm.config import A_INSTRUCTION_MAX_VALUE
from libhackasm.lexer.errors import (
    BadDecimalLiteralError,
    EmptyComputationError,
    MalformedDestinationError,
    MalformedIdentifierError,
    MalformedInstructionError,
)
from libhackasm.lexer.helpers import (
    is_decimal_literal_candidate,
    is_valid_decimal_literal,
    is_valid_identifier,
    remove_whitespace,
    strip_comment,
)
from libhackasm.lexer.instructions import (
    AInstruction,
    CInstruction,
    LabelDeclaration,
    Statement,
)
from libhackasm.lexer.tokens import SourceLine, SourceLocation
from libhackasm.symbols.errors.literal_out_of_range import LiteralOutOfRangeError

if TYPE_CHECKING:
    from collections.abc import Generator, Iterable
    from pathlib import Path


A_INSTRUCTION_MARK = "@"
LABEL_OPEN_MARK = "("
LABEL_CLOSE_MARK = ")"

DEST_SEPARATOR = "="
JUMP_SEPARATOR = ";"
DEST_ALPHABET = "ADM"


def decomment_lines(lines: Iterable[str]) -> Generator[str]:
    """Remove line comments, yields exactly one line per each input line."""
    for line in lines:
        yield strip_comment(line)


def normalize_lines(
    lines: Iterable[str],
    filepath: Path | None = None,
) -> Generator[SourceLine]:
    """Remove all whitespace and drop empty lines, remembering source location of each line.

    Expects already decommented lines, so line numbers are still the same as in raw source.
    """
    for row, line in enumerate(lines, start=0):
        text = remove_whitespace(line)
        if not text:
            continue
        yield SourceLine(
            text=text,
            location=SourceLocation(line_number=row, filepath=filepath),
        )


def strip_source(
    lines: Iterable[str],
    filepath: Path | None = None,
) -> Generator[SourceLine]:
    """Decomment and normalize given raw source lines."""
    return normalize_lines(decomment_lines(lines), filepath=filepath)


def parse_statements(lines: Iterable[SourceLine]) -> Generator[Statement]:
    """Classify each stripped line into typed statement, in order."""
    for line in lines:
        yield parse_statement(line)


def parse_statement(line: SourceLine) -> Statement:
    """Classify stripped line as label declaration, A-instruction or C-instruction."""
    assert line.text, "Stripped line must never be empty"
    assert not any(c.isspace() for c in line.text), "Stripped line contains whitespace"

    if line.text.startswith(LABEL_OPEN_MARK):
        return _parse_label_declaration(line)
    if line.text.startswith(A_INSTRUCTION_MARK):
        return _parse_a_instruction(line)
    return _parse_c_instruction(line)


def _parse_label_declaration(line: SourceLine) -> LabelDeclaration:
    text = line.text
    if len(text) < 2 or not text.endswith(LABEL_CLOSE_MARK):
        raise MalformedInstructionError(at=line.location, token=text)

    name = text[1:-1]
    if not is_valid_identifier(name):
        raise MalformedIdentifierError(at=line.location, token=name)
    return LabelDeclaration(name=name, location=line.location)


def _parse_a_instruction(line: SourceLine) -> AInstruction:
    operand = line.text.removeprefix(A_INSTRUCTION_MARK)
    if not operand:
        raise MalformedInstructionError(at=line.location, token=line.text)

    if is_decimal_literal_candidate(operand):
        if not is_valid_decimal_literal(operand):
            raise BadDecimalLiteralError(at=line.location, token=operand)
        return AInstruction(
            operand=_parse_decimal_literal(line, operand),
            location=line.location,
        )

    if not is_valid_identifier(operand):
        raise MalformedIdentifierError(at=line.location, token=operand)
    return AInstruction(operand=operand, location=line.location)


def _parse_decimal_literal(line: SourceLine, operand: str) -> int:
    # `int` refuses digit strings longer than interpreter conversion limit
    significant = operand.lstrip("0") or "0"
    if len(significant) > len(str(A_INSTRUCTION_MAX_VALUE)):
        raise LiteralOutOfRangeError(
            at=line.location,
            token=operand,
            max_value=A_INSTRUCTION_MAX_VALUE,
        )
    return int(significant, 10)


def _parse_c_instruction(line: SourceLine) -> CInstruction:
    text = line.text
    if text.count(DEST_SEPARATOR) > 1 or text.count(JUMP_SEPARATOR) > 1:
        raise MalformedInstructionError(at=line.location, token=text)

    dest, comp, jump = "", text, ""
    if JUMP_SEPARATOR in comp:
        comp, jump = comp.split(JUMP_SEPARATOR, maxsplit=1)
        if not jump:
            raise MalformedInstructionError(at=line.location, token=text)
    if DEST_SEPARATOR in comp:
        dest, comp = comp.split(DEST_SEPARATOR, maxsplit=1)
        _validate_destination(line, dest)
    elif DEST_SEPARATOR in jump:
        # `=` placed after `;`
        raise MalformedInstructionError(at=line.location, token=text)

    if not comp:
        raise EmptyComputationError(at=line.location, token=text)
    return CInstruction(dest=dest, comp=comp, jump=jump, location=line.location)


def _validate_destination(line: SourceLine, dest: str) -> None:
    is_valid = (
        bool(dest)
        and all(c in DEST_ALPHABET for c in dest)
        and len(set(dest)) == len(dest)
    )
    if not is_valid:
        raise MalformedDestinationError(at=line.location, token=line.text, dest=dest)
