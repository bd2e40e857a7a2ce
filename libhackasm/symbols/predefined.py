"""Symbols that are bound in every translation (virtual registers, pointers and memory-mapped I/O)."""

from types import MappingProxyType

SCREEN_BASE_ADDRESS = 0x4000
KEYBOARD_ADDRESS = 0x6000

VIRTUAL_REGISTERS_COUNT = 16

PREDEFINED_SYMBOLS = MappingProxyType(
    {
        "SP": 0,
        "LCL": 1,
        "ARG": 2,
        "THIS": 3,
        "THAT": 4,
        **{f"R{i}": i for i in range(VIRTUAL_REGISTERS_COUNT)},
        "SCREEN": SCREEN_BASE_ADDRESS,
        "KBD": KEYBOARD_ADDRESS,
    },
)
