from libhackasm.encoder.tables import JUMP_BITS
from libhackasm.exceptions import AssemblerLookupError


class UnknownJumpError(AssemblerLookupError):
    def __repr__(self) -> str:
        return f"""Unknown jump `{self.token}` at {self.at}!

Available jumps: {", ".join(j for j in JUMP_BITS if j)}

{self.generic_error_name}"""
