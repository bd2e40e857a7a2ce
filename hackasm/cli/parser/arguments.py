from dataclasses import dataclass
from pathlib import Path

from libhackasm.config import AssemblerConfig


@dataclass(slots=True, frozen=True)
class CLIArguments:
    """Arguments from argument parser provided for whole assembler toolchain process."""

    source_filepath: Path | None
    output_filepath: Path | None

    version: bool
    preprocess_only: bool
    symbols: bool

    verbose: bool

    assembler_config: AssemblerConfig

    cli_debug_user_friendly_errors: bool
