from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from hackasm.cli.output import cli_fatal_abort
from hackasm.cli.parser.arguments import CLIArguments
from libhackasm.assembler import SOURCE_FILE_SUFFIX, infer_output_filepath
from libhackasm.config import DEFAULT_ASSEMBLER_CONFIG

if TYPE_CHECKING:
    from argparse import Namespace


def parse_cli_arguments(args: Namespace) -> CLIArguments:
    """Parse CLI arguments from argparse into custom DTO."""
    _validate_mutually_exclusive_goals(args)
    source_filepath = _process_source_filepath(args)
    output_filepath = _process_output_path(source_filepath, args)

    return CLIArguments(
        # Goals.
        version=bool(args.version),
        preprocess_only=bool(args.preprocess_only),
        symbols=bool(args.symbols),
        # Rest of these are mostly goal-specific
        source_filepath=source_filepath,
        output_filepath=output_filepath,
        verbose=bool(args.verbose),
        assembler_config=DEFAULT_ASSEMBLER_CONFIG,
        cli_debug_user_friendly_errors=bool(args.cli_debug_user_friendly_errors),
    )


def _validate_mutually_exclusive_goals(args: Namespace) -> None:
    """Validate that goal flags is not present as mutually exclusive."""
    if sum([args.version, args.preprocess_only, args.symbols]) in (0, 1):
        return None

    return cli_fatal_abort("Goal flags is mutually exclusive!")


def _process_source_filepath(args: Namespace) -> Path | None:
    """Process input source file as path and validate it."""
    if args.version:
        return None

    if not args.source_file:
        return cli_fatal_abort("Expected source file to assemble!")

    path = Path(args.source_file)
    if path.suffix != SOURCE_FILE_SUFFIX:
        return cli_fatal_abort(
            f"Source file {path} does not end with `{SOURCE_FILE_SUFFIX}`!",
        )

    if not path.is_file():
        return cli_fatal_abort(
            f"Source file {path} does not exist or is not a file!",
        )

    return path


def _process_output_path(
    source_filepath: Path | None,
    args: Namespace,
) -> Path | None:
    """Process output path with auto inference if not passed."""
    if source_filepath is None:
        return None
    if args.output:
        return Path(args.output)
    return infer_output_filepath(source_filepath)
