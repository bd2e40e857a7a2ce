import sys
from importlib.metadata import PackageNotFoundError, version
from platform import platform, python_implementation, python_version
from typing import NoReturn

from hackasm.cli.parser.arguments import CLIArguments
from libhackasm.symbols.predefined import PREDEFINED_SYMBOLS

DISTRIBUTION_NAME = "hackasm"


def cli_perform_version_goal(args: CLIArguments) -> NoReturn:
    """Perform version goal that display information about host and toolchain."""
    print("[Hack assembler toolchain]")
    print(f"\tVersion: {_get_distribution_version()}")
    print("Assembler configuration:")
    print(f"\tVariables start address: {args.assembler_config.variables_start_address}")
    print(f"\tVariables max address: {args.assembler_config.variables_max_address}")
    print(f"\tPredefined symbols: {len(PREDEFINED_SYMBOLS)}")
    print("Host machine:")
    print(f"\tPlatform: {platform()}")
    print(f"\tPython: {python_implementation()} {python_version()}")
    return sys.exit(0)


def _get_distribution_version() -> str:
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        return "(not installed)"
