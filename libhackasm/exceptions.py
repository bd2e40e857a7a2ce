from __future__ import annotations

import re
from abc import abstractmethod
from typing import TYPE_CHECKING, ClassVar, Literal, TypeAlias

if TYPE_CHECKING:
    from libhackasm.lexer.tokens import SourceLocation

ERROR_KIND_T: TypeAlias = Literal["syntax", "lookup", "range", "symbol"]


def camel_to_kebab(s: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "-", s).lower()


class HackAssemblerError(Exception):
    """Parent for all assembler errors (exceptions).

    Every error points to the source line it was raised for and the offending token.
    """

    kind: ClassVar[ERROR_KIND_T]

    def __init__(self, *args: object, at: SourceLocation, token: str) -> None:
        super().__init__(*args)
        self.at = at
        self.token = token

    @abstractmethod
    def __repr__(self) -> str:
        return f"Some internal error occurred ({super().__repr__()}), that is currently not documented"

    def __str__(self) -> str:
        return repr(self)

    @property
    def generic_error_name(self) -> str:
        return f"[{camel_to_kebab(self.__class__.__name__)}]"


class AssemblerSyntaxError(HackAssemblerError):
    """Line does not match any instruction shape or contains malformed parts."""

    kind = "syntax"


class AssemblerLookupError(HackAssemblerError):
    """Mnemonic is not known to the instruction set."""

    kind = "lookup"


class AssemblerRangeError(HackAssemblerError):
    """Value does not fit into the machine address space."""

    kind = "range"


class AssemblerSymbolError(HackAssemblerError):
    """Symbol table cannot accept the binding."""

    kind = "symbol"
