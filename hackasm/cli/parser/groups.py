import argparse
from argparse import ArgumentParser


def add_output_group(parser: ArgumentParser) -> None:
    """Construct and inject argument group with output options into given parser."""
    group = parser.add_argument_group("Output", "Output file configuration")
    group.add_argument(
        "--output",
        "-o",
        type=str,
        required=False,
        help="Path to output machine code file, by default source path with `.hack` instead of `.asm`",
    )


def add_debug_group(parser: ArgumentParser) -> None:
    """Construct and inject argument group with debug options into given parser."""
    group = parser.add_argument_group("Debug", "Debugging and intermediate stages inspection")

    group.add_argument(
        "--preprocess-only",
        "-E",
        required=False,
        action="store_true",
        help="If passed will just emit stripped (no comments and whitespace) source of provided file into stdout.",
    )

    group.add_argument(
        "--symbols",
        required=False,
        action="store_true",
        help="If passed will just emit resolved symbol table of provided file into stdout.",
    )

    group.add_argument(
        "--verbose",
        "-v",
        required=False,
        action="store_true",
        help="If passed will enable INFO level logs from assembler.",
    )


def add_toolchain_debug_group(parser: ArgumentParser) -> None:
    """Construct and inject argument group with internal toolchain debug options into given parser."""
    parser.add_argument(
        "--debug-unwrap-errors",
        dest="cli_debug_user_friendly_errors",
        action="store_false",
        default=True,
        help=argparse.SUPPRESS,
    )
