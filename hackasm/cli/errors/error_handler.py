import sys
from collections.abc import Generator
from contextlib import contextmanager
from typing import NoReturn

from hackasm.cli.output import cli_fatal_abort, cli_message
from libhackasm.exceptions import HackAssemblerError


@contextmanager
def cli_assembler_error_handler(
    *,
    debug_user_friendly_errors: bool = True,
) -> Generator[None, None, NoReturn]:
    """Wrap function to properly emit assembler errors."""
    try:
        yield
    except HackAssemblerError as ae:
        if debug_user_friendly_errors:
            return cli_fatal_abort(repr(ae))
        raise  # re-throw exception due to unfriendly flag set for debugging
    except OSError as oe:
        if not debug_user_friendly_errors:
            raise
        filename = f" ({oe.filename})" if oe.filename else ""
        return cli_fatal_abort(f"I/O failure{filename}: {oe.strerror or oe}")
    except KeyboardInterrupt:
        print(file=sys.stderr)
        cli_message("INFO", "Interrupted by user (Ctrl+C)!")
        return sys.exit(0)
    # This is unreachable but error wrapper must fail
    cli_fatal_abort("Bug in a CLI: error handler must has no-return")
