from libhackasm.exceptions import AssemblerSyntaxError
from libhackasm.lexer.tokens import SourceLocation


class MalformedDestinationError(AssemblerSyntaxError):
    def __init__(
        self,
        *args: object,
        at: SourceLocation,
        token: str,
        dest: str,
    ) -> None:
        super().__init__(*args, at=at, token=token)
        self.dest = dest

    def __repr__(self) -> str:
        return f"""Malformed destination `{self.dest}` in C-instruction `{self.token}` at {self.at}!

Destination may only contain registers `A`, `D`, `M`, each at most once (e.g `AM=`, `MD=`)

{self.generic_error_name}"""
