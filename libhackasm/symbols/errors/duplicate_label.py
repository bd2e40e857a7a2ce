from libhackasm.exceptions import AssemblerSymbolError
from libhackasm.lexer.tokens import SourceLocation


class DuplicateLabelError(AssemblerSymbolError):
    def __init__(
        self,
        *args: object,
        at: SourceLocation,
        token: str,
        bound_address: int,
        is_predefined: bool,
    ) -> None:
        super().__init__(*args, at=at, token=token)
        self.bound_address = bound_address
        self.is_predefined = is_predefined

    def __repr__(self) -> str:
        origin = "predefined symbol" if self.is_predefined else "label"
        return f"""Label `{self.token}` at {self.at} is already defined!

`{self.token}` is already bound as {origin} to address {self.bound_address}
Symbols cannot be redefined, consider renaming that label

{self.generic_error_name}"""
