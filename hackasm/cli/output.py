"""CLI output helpers, all diagnostics go into stderr while goal results go into stdout."""

import sys
from typing import Literal, NoReturn, TypeAlias

MESSAGE_LEVEL_T: TypeAlias = Literal["INFO", "WARNING", "ERROR"]


def cli_message(
    level: MESSAGE_LEVEL_T,
    text: str,
    *,
    verbose: bool = True,
) -> None:
    """Emit message into stderr, INFO messages are only shown within verbose mode."""
    if level == "INFO" and not verbose:
        return
    print(f"[{level}] {text}", file=sys.stderr)


def cli_fatal_abort(text: str) -> NoReturn:
    """Emit error message and exit with non-zero code."""
    cli_message("ERROR", text)
    sys.exit(1)
