import sys
from typing import NoReturn

from hackasm.cli.parser.arguments import CLIArguments
from libhackasm.lexer import strip_source
from libhackasm.lexer.io import open_source_file_line_stream


def cli_perform_preprocess_goal(args: CLIArguments) -> NoReturn:
    """Perform preprocess only goal that emits stripped source into stdout."""
    assert args.source_filepath is not None

    io = open_source_file_line_stream(args.source_filepath)
    for line in strip_source(io, filepath=args.source_filepath):
        print(line.text)
    return sys.exit(0)
