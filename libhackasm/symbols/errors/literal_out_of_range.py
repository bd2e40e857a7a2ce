from libhackasm.exceptions import AssemblerRangeError
from libhackasm.lexer.tokens import SourceLocation


class LiteralOutOfRangeError(AssemblerRangeError):
    def __init__(
        self,
        *args: object,
        at: SourceLocation,
        token: str,
        max_value: int,
    ) -> None:
        super().__init__(*args, at=at, token=token)
        self.max_value = max_value

    def __repr__(self) -> str:
        return f"""Literal {self.token} at {self.at} does not fit into A-instruction!

A-instruction holds 15-bit value, allowed range is [0, {self.max_value}]

{self.generic_error_name}"""
