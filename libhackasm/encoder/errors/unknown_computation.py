from difflib import get_close_matches

from libhackasm.encoder.tables import COMP_BITS
from libhackasm.exceptions import AssemblerLookupError


class UnknownComputationError(AssemblerLookupError):
    def __repr__(self) -> str:
        best_match = get_close_matches(self.token, COMP_BITS.keys(), n=1)
        return f"""Unknown computation `{self.token}` at {self.at}!

Available computations: {", ".join(COMP_BITS.keys())}""" + (
            f"\nDid you mean `{best_match[0]}`?" if best_match else ""
        ) + f"""

{self.generic_error_name}"""
