"""Typed instructions that stripped source lines are classified into."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from libhackasm.lexer.tokens import SourceLocation


@dataclass(frozen=True, slots=True)
class LabelDeclaration:
    """`(NAME)` pseudo-instruction, binds name to the next instruction address."""

    name: str
    location: SourceLocation


@dataclass(frozen=True, slots=True)
class AInstruction:
    """`@value` instruction.

    Operand is either an decimal literal (`int`) or an symbol (`str`) which must be resolved
    into an literal before encoding.
    """

    operand: int | str
    location: SourceLocation

    @property
    def is_symbolic(self) -> bool:
        return isinstance(self.operand, str)

    def __str__(self) -> str:
        return f"@{self.operand}"


@dataclass(frozen=True, slots=True)
class CInstruction:
    """`dest=comp;jump` instruction, `dest` and `jump` are empty when omitted."""

    dest: str
    comp: str
    jump: str
    location: SourceLocation

    def __str__(self) -> str:
        text = self.comp
        if self.dest:
            text = f"{self.dest}={text}"
        if self.jump:
            text = f"{text};{self.jump}"
        return text


Instruction: TypeAlias = AInstruction | CInstruction
Statement: TypeAlias = LabelDeclaration | Instruction
