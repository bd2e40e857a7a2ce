from libhackasm.exceptions import AssemblerSyntaxError


class BadDecimalLiteralError(AssemblerSyntaxError):
    def __repr__(self) -> str:
        return f"""Bad decimal literal at {self.at}!

Invalid number: '{self.token}'
A-instruction literals must consist only from decimal digits (0-9) without sign

{self.generic_error_name}"""
