"""Instruction set tables of C-instruction fields.

Each value is already rendered bit string (MSB first) as it goes into final instruction.
"""

from types import MappingProxyType

# `a c1 c2 c3 c4 c5 c6`, where `a` selects M (memory at A) instead of A as ALU operand
COMP_BITS = MappingProxyType(
    {
        # a=0
        "0": "0101010",
        "1": "0111111",
        "-1": "0111010",
        "D": "0001100",
        "A": "0110000",
        "!D": "0001101",
        "!A": "0110001",
        "-D": "0001111",
        "-A": "0110011",
        "D+1": "0011111",
        "A+1": "0110111",
        "D-1": "0001110",
        "A-1": "0110010",
        "D+A": "0000010",
        "D-A": "0010011",
        "A-D": "0000111",
        "D&A": "0000000",
        "D|A": "0010101",
        # a=1
        "M": "1110000",
        "!M": "1110001",
        "-M": "1110011",
        "M+1": "1110111",
        "M-1": "1110010",
        "D+M": "1000010",
        "D-M": "1010011",
        "M-D": "1000111",
        "D&M": "1000000",
        "D|M": "1010101",
    },
)

# `j1 j2 j3` as (out < 0, out = 0, out > 0)
JUMP_BITS = MappingProxyType(
    {
        "": "000",
        "JGT": "001",
        "JEQ": "010",
        "JGE": "011",
        "JLT": "100",
        "JNE": "101",
        "JLE": "110",
        "JMP": "111",
    },
)

# `d1 d2 d3` bit masks, by register
DEST_BITS = MappingProxyType(
    {
        "A": 0b100,
        "D": 0b010,
        "M": 0b001,
    },
)

A_INSTRUCTION_OPCODE = "0"
C_INSTRUCTION_OPCODE = "111"

INSTRUCTION_WIDTH = 16
