from argparse import ArgumentParser

from hackasm.cli.parser import groups


def build_cli_parser(prog: str) -> ArgumentParser:
    """Get argument parser instance to parse incoming arguments."""
    parser = ArgumentParser(
        description="Hack Assembler - translates Hack assembly (`.asm`) into Hack machine code (`.hack`)",
        usage=f"{prog} file.asm [options] [-h]",
        add_help=True,
        allow_abbrev=False,
        prog=prog,
    )

    parser.add_argument(
        "source_file",
        help="Input source code file in Hack assembly to process (`.asm` file)",
        nargs="?",
        default=None,
    )

    parser.add_argument(
        "--version",
        default=False,
        action="store_true",
        help="Show version info",
    )

    groups.add_output_group(parser)
    groups.add_debug_group(parser)
    groups.add_toolchain_debug_group(parser)
    return parser
