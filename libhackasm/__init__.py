"""Hack assembler library.

Translates assembly programs for the Hack computer (Nand2Tetris) into its machine code.
Pipeline: Decommenter -> Normalizer -> (statements) -> Symbol resolver -> Encoder
"""

from .assembler import (
    assemble_file,
    assemble_lines,
    resolve_source_lines,
    write_hack_file,
)
from .config import AssemblerConfig
from .exceptions import HackAssemblerError

__all__ = [
    "AssemblerConfig",
    "HackAssemblerError",
    "assemble_file",
    "assemble_lines",
    "resolve_source_lines",
    "write_hack_file",
]
