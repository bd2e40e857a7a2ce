from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Generator
    from pathlib import Path


def open_source_file_line_stream(filepath: Path) -> Generator[str]:
    """Read assembly source file line by line, with line endings stripped.

    Decoding errors are replaced as only ASCII is meaningful to assembler.
    """
    with filepath.open(encoding="utf-8", errors="replace", newline=None) as fd:
        for line in fd:
            yield line.rstrip("\r\n")
