"""Assembler core entry."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from libhackasm.config import DEFAULT_ASSEMBLER_CONFIG, AssemblerConfig
from libhackasm.encoder import encode_instructions
from libhackasm.lexer import parse_statements, strip_source
from libhackasm.lexer.io import open_source_file_line_stream
from libhackasm.symbols import ResolvedProgram, resolve_symbols

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

SOURCE_FILE_SUFFIX = ".asm"
OUTPUT_FILE_SUFFIX = ".hack"


def assemble_lines(
    lines: Iterable[str],
    *,
    filepath: Path | None = None,
    config: AssemblerConfig = DEFAULT_ASSEMBLER_CONFIG,
) -> list[str]:
    """Translate raw assembly source lines into binary instruction lines.

    Halts at first error (raises `HackAssemblerError`), so no partial output is ever returned.
    Given filepath is only used for error locations.
    """
    program = resolve_source_lines(lines, filepath=filepath, config=config)
    return list(encode_instructions(program.instructions))


def resolve_source_lines(
    lines: Iterable[str],
    *,
    filepath: Path | None = None,
    config: AssemblerConfig = DEFAULT_ASSEMBLER_CONFIG,
) -> ResolvedProgram:
    """Strip, classify and resolve symbols of raw source lines without encoding them."""
    stripped = strip_source(lines, filepath=filepath)
    return resolve_symbols(parse_statements(stripped), config=config)


def assemble_file(
    filepath: Path,
    *,
    config: AssemblerConfig = DEFAULT_ASSEMBLER_CONFIG,
) -> list[str]:
    """Read and translate whole assembly source file."""
    io = open_source_file_line_stream(filepath)
    return assemble_lines(io, filepath=filepath, config=config)


def write_hack_file(filepath: Path, encoded: Iterable[str]) -> None:
    """Write encoded instructions one per line, each terminated with platform newline."""
    with filepath.open("w", encoding="ascii", newline=os.linesep) as fd:
        fd.writelines(f"{line}\n" for line in encoded)


def infer_output_filepath(source_filepath: Path) -> Path:
    """Infer output path by replacing source `.asm` suffix with `.hack`."""
    assert source_filepath.suffix == SOURCE_FILE_SUFFIX, (
        f"Expected `{SOURCE_FILE_SUFFIX}` source file, got {source_filepath}"
    )
    return source_filepath.with_suffix(OUTPUT_FILE_SUFFIX)
