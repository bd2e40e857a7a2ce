"""Two-pass symbol resolution.

First pass binds labels to ROM addresses and drops label declarations from the stream,
second pass allocates data addresses for variables and rewrites every symbolic A-instruction into literal one.
Both passes never mutate given symbol table, they return new one instead.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from libhackasm.config import (
    A_INSTRUCTION_MAX_VALUE,
    DEFAULT_ASSEMBLER_CONFIG,
    AssemblerConfig,
)
from libhackasm.lexer.instructions import (
    AInstruction,
    CInstruction,
    Instruction,
    LabelDeclaration,
    Statement,
)
from libhackasm.symbols.errors import (
    DuplicateLabelError,
    LiteralOutOfRangeError,
    VariableAddressOverflowError,
)
from libhackasm.symbols.table import SymbolTable

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence


@dataclass(frozen=True, slots=True)
class ResolvedProgram:
    """Instruction stream with only literal A-instructions and symbol table it was resolved with."""

    instructions: Sequence[Instruction]
    symbols: SymbolTable

    # Names in order of allocation, addresses are contiguous from variables start address
    variables: Sequence[str] = ()


def resolve_symbols(
    statements: Iterable[Statement],
    *,
    config: AssemblerConfig = DEFAULT_ASSEMBLER_CONFIG,
) -> ResolvedProgram:
    """Perform both resolution passes starting from predefined symbols."""
    instructions, symbols = bind_labels(statements, SymbolTable.with_predefined())
    return bind_variables(instructions, symbols, config=config)


def bind_labels(
    statements: Iterable[Statement],
    symbols: SymbolTable,
) -> tuple[list[Instruction], SymbolTable]:
    """First pass: bind each label to index of next instruction, drop label declarations."""
    symbols = symbols.copy()
    instructions: list[Instruction] = []

    for statement in statements:
        if not isinstance(statement, LabelDeclaration):
            instructions.append(statement)
            continue

        if statement.name in symbols:
            raise DuplicateLabelError(
                at=statement.location,
                token=statement.name,
                bound_address=symbols[statement.name],
                is_predefined=symbols.is_predefined(statement.name),
            )
        # Label at the end binds to one-past-last instruction
        symbols.bind(statement.name, len(instructions))

    return instructions, symbols


def bind_variables(
    instructions: Iterable[Instruction],
    symbols: SymbolTable,
    *,
    config: AssemblerConfig = DEFAULT_ASSEMBLER_CONFIG,
) -> ResolvedProgram:
    """Second pass: allocate unbound symbols as variables and rewrite A-instructions into literals."""
    symbols = symbols.copy()
    resolved: list[Instruction] = []
    variables: list[str] = []
    next_address = config.variables_start_address

    for instruction in instructions:
        if isinstance(instruction, CInstruction):
            resolved.append(instruction)
            continue

        operand = instruction.operand
        if isinstance(operand, str):
            if operand not in symbols:
                if next_address > config.variables_max_address:
                    raise VariableAddressOverflowError(
                        at=instruction.location,
                        token=operand,
                        max_address=config.variables_max_address,
                    )
                symbols.bind(operand, next_address)
                variables.append(operand)
                next_address += 1
            instruction = replace(instruction, operand=symbols[operand])

        _validate_literal_range(instruction, token=str(operand))
        resolved.append(instruction)

    return ResolvedProgram(
        instructions=resolved,
        symbols=symbols,
        variables=variables,
    )


def _validate_literal_range(instruction: AInstruction, token: str) -> None:
    assert isinstance(instruction.operand, int)
    if not 0 <= instruction.operand <= A_INSTRUCTION_MAX_VALUE:
        raise LiteralOutOfRangeError(
            at=instruction.location,
            token=token,
            max_value=A_INSTRUCTION_MAX_VALUE,
        )
