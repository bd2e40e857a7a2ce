from __future__ import annotations

from typing import TYPE_CHECKING, assert_never

from libhackasm.config import A_INSTRUCTION_MAX_VALUE
from libhackasm.encoder.errors import UnknownComputationError, UnknownJumpError
from libhackasm.encoder.tables import (
    A_INSTRUCTION_OPCODE,
    C_INSTRUCTION_OPCODE,
    COMP_BITS,
    DEST_BITS,
    INSTRUCTION_WIDTH,
    JUMP_BITS,
)
from libhackasm.lexer.instructions import AInstruction, CInstruction
from libhackasm.symbols.errors import LiteralOutOfRangeError

if TYPE_CHECKING:
    from collections.abc import Generator, Iterable

    from libhackasm.lexer.instructions import Instruction


def encode_instructions(instructions: Iterable[Instruction]) -> Generator[str]:
    """Encode resolved instructions into binary text lines, in order."""
    for instruction in instructions:
        yield encode_instruction(instruction)


def encode_instruction(instruction: Instruction) -> str:
    """Encode single resolved instruction into 16 characters of '0' and '1' (MSB first)."""
    match instruction:
        case AInstruction():
            encoded = encode_a_instruction(instruction)
        case CInstruction():
            encoded = encode_c_instruction(instruction)
        case _:
            assert_never(instruction)

    assert len(encoded) == INSTRUCTION_WIDTH
    return encoded


def encode_a_instruction(instruction: AInstruction) -> str:
    assert isinstance(instruction.operand, int), (
        f"A-instruction `{instruction}` must be resolved before encoding"
    )
    if not 0 <= instruction.operand <= A_INSTRUCTION_MAX_VALUE:
        raise LiteralOutOfRangeError(
            at=instruction.location,
            token=str(instruction.operand),
            max_value=A_INSTRUCTION_MAX_VALUE,
        )
    width = INSTRUCTION_WIDTH - len(A_INSTRUCTION_OPCODE)
    return A_INSTRUCTION_OPCODE + format(instruction.operand, f"0{width}b")


def encode_c_instruction(instruction: CInstruction) -> str:
    return (
        C_INSTRUCTION_OPCODE
        + encode_computation(instruction)
        + encode_destination(instruction)
        + encode_jump(instruction)
    )


def encode_computation(instruction: CInstruction) -> str:
    bits = COMP_BITS.get(instruction.comp)
    if bits is None:
        raise UnknownComputationError(at=instruction.location, token=instruction.comp)
    return bits


def encode_destination(instruction: CInstruction) -> str:
    mask = 0
    for register in instruction.dest:
        assert register in DEST_BITS, f"Unexpected destination register `{register}`"
        mask |= DEST_BITS[register]
    return format(mask, "03b")


def encode_jump(instruction: CInstruction) -> str:
    bits = JUMP_BITS.get(instruction.jump)
    if bits is None:
        raise UnknownJumpError(at=instruction.location, token=instruction.jump)
    return bits
