from libhackasm.exceptions import AssemblerSyntaxError


class EmptyComputationError(AssemblerSyntaxError):
    def __repr__(self) -> str:
        return f"""Missing computation in C-instruction `{self.token}` at {self.at}!

Expected `dest=comp;jump` where `comp` is always present (e.g `D=M`, `0;JMP`)

{self.generic_error_name}"""
