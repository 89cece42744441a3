"""Token definitions for the lexer.

This module defines the `TokenType` enum for the sixteen token kinds
recognized by the lexer and a small `Token` dataclass that holds a token type,
the lexeme it was recognized from and its source position. Tokens are the
atomic units produced by the lexer and consumed by the parser.
"""

from __future__ import annotations
from enum import Enum, auto
from dataclasses import dataclass
from typing import Dict


class TokenType(Enum):
    # Special
    EOF = auto()

    # Literals
    ID = auto()
    INTLITERAL = auto()

    # Keywords
    VAR = auto()
    WRITE = auto()
    INIT = auto()

    # Operators
    EQUALS = auto()
    NOTEQUALS = auto()

    # More keywords
    IF = auto()
    THEN = auto()
    ENDIF = auto()
    WHILE = auto()
    DO = auto()
    ENDWHILE = auto()
    CALCULATE = auto()

    PLUS = auto()

    def __str__(self) -> str:
        return self.name


# Reserved words map straight onto their keyword token kinds.
KEYWORDS: Dict[str, TokenType] = {
    "var": TokenType.VAR,
    "write": TokenType.WRITE,
    "init": TokenType.INIT,
    "if": TokenType.IF,
    "then": TokenType.THEN,
    "endif": TokenType.ENDIF,
    "while": TokenType.WHILE,
    "do": TokenType.DO,
    "endwhile": TokenType.ENDWHILE,
    "calculate": TokenType.CALCULATE,
}


@dataclass
class Token:
    type: TokenType
    value: str = ""
    line: int = 0
    column: int = 0

    def __repr__(self) -> str:
        return f"Token({self.type}, {repr(self.value)})"

    @property
    def lexeme(self) -> str:
        return self.value
