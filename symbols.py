"""Symbol table and symbol representations.

This module defines the `SymbolType` enum, a `Symbol` dataclass for declared
variables, and `SymbolTable`, which records `var` declarations in order and
rejects a second declaration of the same name. The parser builds one table per
parse and only writes to it; uses of identifiers in statements are not looked
up.
"""

from __future__ import annotations
from enum import Enum, auto
from dataclasses import dataclass
from typing import Dict, Iterator
from errors import DeclarationError


class SymbolType(Enum):
    INT = auto()

    def __str__(self) -> str:
        return self.name.lower()


@dataclass
class Symbol:
    name: str
    type: SymbolType = SymbolType.INT

    def __repr__(self) -> str:
        return f"Symbol({self.name}, {self.type})"


class SymbolTable:
    def __init__(self):
        self.symbols: Dict[str, Symbol] = {}

    def declare(self, name: str, type_: SymbolType = SymbolType.INT) -> Symbol:
        """Declare a new variable."""
        if name in self.symbols:
            raise DeclarationError(name)

        symbol = Symbol(name, type_)
        self.symbols[name] = symbol
        return symbol

    def exists(self, name: str) -> bool:
        return name in self.symbols

    def __contains__(self, name: object) -> bool:
        return name in self.symbols

    def __len__(self) -> int:
        return len(self.symbols)

    def __iter__(self) -> Iterator[Symbol]:
        return iter(self.symbols.values())
