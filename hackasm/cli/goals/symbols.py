import sys
from typing import NoReturn

from hackasm.cli.parser.arguments import CLIArguments
from libhackasm.assembler import resolve_source_lines
from libhackasm.lexer.io import open_source_file_line_stream


def cli_perform_symbols_goal(args: CLIArguments) -> NoReturn:
    """Perform symbols goal that emits resolved symbol table into stdout, ordered by address."""
    assert args.source_filepath is not None

    io = open_source_file_line_stream(args.source_filepath)
    program = resolve_source_lines(
        io,
        filepath=args.source_filepath,
        config=args.assembler_config,
    )

    variables = set(program.variables)
    for name, address in sorted(program.symbols.items(), key=lambda s: (s[1], s[0])):
        if program.symbols.is_predefined(name):
            origin = "predefined"
        elif name in variables:
            origin = "variable"
        else:
            origin = "label"
        print(f"{address:>5} {name} ({origin})")
    return sys.exit(0)
