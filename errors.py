"""Error taxonomy for the front end.

Every error is a subclass of the built-in `SyntaxError`, so callers that only
care about "the program was rejected" can catch `SyntaxError` and still reach
the structured fields when they need them:

- `LexError`: an unrecognized character, or `!` not followed by `=`.
- `TokenMismatchError`: the lookahead token is not what the grammar expects.
- `DeclarationError`: a variable is declared twice.
- `NestingError`: `if`/`while` bodies nest deeper than the parser can follow.
"""

from __future__ import annotations
from typing import Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from tokens import TokenType


class LexError(SyntaxError):
    def __init__(self, char: str, line: int = 0, column: int = 0, message: str = ""):
        self.char = char
        self.line = line
        self.column = column
        if not message:
            shown = char if char else "end of input"
            message = f"Unexpected char: {shown}"
        super().__init__(
            f"Lexical error at line {line}, column {column}: {message}"
        )


class TokenMismatchError(SyntaxError):
    def __init__(
        self,
        expected: Tuple[TokenType, ...],
        actual: TokenType,
        lexeme: str,
        line: int = 0,
        column: int = 0,
    ):
        self.expected = tuple(expected)
        self.actual = actual
        self.lexeme = lexeme
        self.line = line
        self.column = column
        expected_str = " or ".join(str(t) for t in self.expected)
        super().__init__(
            f"Parse Error\nExpected: {expected_str}\nReceived: {actual}\nBuffer: {lexeme}"
        )


class DeclarationError(SyntaxError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Variable already declared: {name}")


class NestingError(SyntaxError):
    def __init__(self, line: int = 0, column: int = 0):
        self.line = line
        self.column = column
        super().__init__(
            f"Program nested too deeply at line {line}, column {column}"
        )
