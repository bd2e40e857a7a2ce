from libhackasm.exceptions import AssemblerRangeError
from libhackasm.lexer.tokens import SourceLocation


class VariableAddressOverflowError(AssemblerRangeError):
    def __init__(
        self,
        *args: object,
        at: SourceLocation,
        token: str,
        max_address: int,
    ) -> None:
        super().__init__(*args, at=at, token=token)
        self.max_address = max_address

    def __repr__(self) -> str:
        return f"""Out of data memory for variable `{self.token}` at {self.at}!

Variables are allocated up to address {self.max_address}, higher addresses are reserved for memory-mapped I/O
Consider reusing variables or addressing memory directly

{self.generic_error_name}"""
