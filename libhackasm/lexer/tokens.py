from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Location of a line within assembly source.

    `line_number` is zero-based index of the raw source line (before any stripping).
    """

    line_number: int
    filepath: Path | None = None

    def __repr__(self) -> str:
        if self.filepath is None:
            return f"'line {self.line_number + 1}'"
        return f"'{self.filepath.name}:{self.line_number + 1}'"


@dataclass(frozen=True, slots=True)
class SourceLine:
    """Stripped source line: no comment, no whitespace and never empty."""

    text: str
    location: SourceLocation
