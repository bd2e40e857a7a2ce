from __future__ import annotations

from dataclasses import dataclass

# A-instruction carries 15-bit value (MSB is opcode)
A_INSTRUCTION_MAX_VALUE = (1 << 15) - 1


@dataclass(frozen=True, slots=True)
class AssemblerConfig:
    """Configuration for translation of single program."""

    # Data memory window where variables are allocated in first-reference order
    # R0-R15 live below that, screen memory map starts right after
    variables_start_address: int = 16
    variables_max_address: int = 16383

    def __post_init__(self) -> None:
        assert 0 <= self.variables_start_address <= self.variables_max_address
        assert self.variables_max_address <= A_INSTRUCTION_MAX_VALUE


DEFAULT_ASSEMBLER_CONFIG = AssemblerConfig()
