from __future__ import annotations

from typing import Self

from libhackasm.symbols.predefined import PREDEFINED_SYMBOLS


class SymbolTable(dict[str, int]):
    """Mapping of symbol names to their addresses within single translation.

    Bindings are never overwritten, use `bind` to add new ones.
    """

    def bind(self, name: str, address: int) -> None:
        assert name not in self, f"Symbol `{name}` is already bound"
        assert address >= 0, "Symbol address must be non-negative"
        self.__setitem__(name, address)

    def is_predefined(self, name: str) -> bool:
        return name in PREDEFINED_SYMBOLS and self.get(name) == PREDEFINED_SYMBOLS[name]

    def copy(self) -> SymbolTable:
        return SymbolTable(super().copy())

    @classmethod
    def with_predefined(cls) -> Self:
        """Construct new table seeded with predefined symbols."""
        return cls(PREDEFINED_SYMBOLS)
