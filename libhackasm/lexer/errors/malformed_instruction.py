from libhackasm.exceptions import AssemblerSyntaxError


class MalformedInstructionError(AssemblerSyntaxError):
    def __repr__(self) -> str:
        return f"""Unable to recognize instruction `{self.token}` at {self.at}!

Expected one of:
    (LABEL)         - label declaration
    @value          - A-instruction
    dest=comp;jump  - C-instruction (dest and jump are optional)

{self.generic_error_name}"""
