from __future__ import annotations

import sys
from typing import TYPE_CHECKING, NoReturn

from hackasm.cli.output import cli_message
from hackasm.cli.perf import wrap_with_perf_time_taken
from libhackasm.assembler import resolve_source_lines, write_hack_file
from libhackasm.encoder import encode_instructions
from libhackasm.lexer.io import open_source_file_line_stream

if TYPE_CHECKING:
    from hackasm.cli.parser.arguments import CLIArguments


def cli_perform_assemble_goal(args: CLIArguments) -> NoReturn:
    """Process full pipeline onto input source file and write machine code file."""
    assert args.source_filepath is not None
    assert args.output_filepath is not None

    cli_message(
        level="INFO",
        text=f"Reading file: {args.source_filepath}",
        verbose=args.verbose,
    )
    # Read whole file before translation so I/O failures are reported apart from translation
    lines = list(open_source_file_line_stream(args.source_filepath))

    with wrap_with_perf_time_taken("Symbol resolution", verbose=args.verbose):
        program = resolve_source_lines(
            lines,
            filepath=args.source_filepath,
            config=args.assembler_config,
        )

    with wrap_with_perf_time_taken("Encoding", verbose=args.verbose):
        encoded = list(encode_instructions(program.instructions))

    cli_message(
        level="INFO",
        text=f"Resolved {len(program.instructions)} instructions, {len(program.variables)} variables.",
        verbose=args.verbose,
    )

    cli_message(
        level="INFO",
        text=f"Writing output to: {args.output_filepath}",
        verbose=args.verbose,
    )
    write_hack_file(args.output_filepath, encoded)

    cli_message(
        level="INFO",
        text=f"Translation complete. Output saved to: {args.output_filepath}",
        verbose=args.verbose,
    )
    return sys.exit(0)
