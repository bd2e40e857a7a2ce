"""Entry point for CLI.

Only for calling via `python -m hackasm`, installed `hackasm` executable is preferred.
"""

from hackasm.cli.main import cli_entry_point

if __name__ == "__main__":
    cli_entry_point()
