from libhackasm.exceptions import AssemblerSyntaxError


class MalformedIdentifierError(AssemblerSyntaxError):
    def __repr__(self) -> str:
        return f"""Malformed symbol name '{self.token}' at {self.at}!

Symbols must start with a letter or one of `_.$:` and continue with letters, digits or `_.$:`

{self.generic_error_name}"""
