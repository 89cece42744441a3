"""
Lexer for the small imperative language.

Overview:
- This module implements a small hand-written lexical analyzer (scanner) that
    transforms an input source string into `Token` objects defined in
    `tokens.py`, one token per `scan()` call.
- It recognizes the ten reserved words (`var`, `write`, `init`, `if`, `then`,
    `endif`, `while`, `do`, `endwhile`, `calculate`), identifiers, integer
    literals and the operators `+`, `=` and `!=`, and skips whitespace.

Examples:
    Input:  "var a init a = 5 write a"
    Tokens: [VAR, ID('a'), INIT, ID('a'), EQUALS, INTLITERAL('5'), WRITE, ID('a'), EOF]

Implementation notes:
- The lexer is a simple stateful scanner using `self.pos` and `self.current_char`
    over an in-memory string; `peek_char()` gives one character of lookahead so
    digit and identifier runs stop without consuming the following character.
- Identifiers are scanned and then mapped to keywords using `KEYWORDS`.
- A character that starts no token (or a `!` without `=`) is a lexical error.
    The error is logged and appended to `self.errors`, and an EOF token is
    returned in its place, so the token stream ends at the first bad character.
    The stand-in EOF token keeps the offending character as its lexeme.
"""

from __future__ import annotations
import logging
from typing import Optional, List
from tokens import Token, TokenType, KEYWORDS
from errors import LexError

logger = logging.getLogger(__name__)


def _is_ident_char(ch: Optional[str]) -> bool:
    return ch is not None and (ch.isalpha() or ch.isdecimal())


class Lexer:
    def __init__(self, text: str, log_errors: bool = True):
        self.text: Optional[str] = text
        self.log_errors = log_errors
        self.pos = 0
        self.line = 1
        self.column = 1
        self.current_char = self.text[self.pos] if self.text else None
        self.errors: List[LexError] = []

    def __enter__(self) -> Lexer:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def closed(self) -> bool:
        return self.text is None

    def close(self) -> None:
        """Release the source text. Scanning afterwards is an error."""
        self.text = None
        self.current_char = None

    def error(self, char: str, message: str = "") -> LexError:
        err = LexError(char, self.line, self.column, message)
        self.errors.append(err)
        if self.log_errors:
            logger.warning("Scan error: %s", err)
        return err

    def advance(self) -> None:
        """Advance to next character."""
        if self.current_char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1

        self.pos += 1
        if self.pos < len(self.text):
            self.current_char = self.text[self.pos]
        else:
            self.current_char = None

    def peek_char(self) -> Optional[str]:
        """Look at next character without consuming it."""
        next_pos = self.pos + 1
        if next_pos < len(self.text):
            return self.text[next_pos]
        return None

    def skip_whitespace(self) -> None:
        """Skip whitespace characters."""
        while self.current_char is not None and self.current_char.isspace():
            self.advance()

    def integer(self) -> str:
        """Consume a maximal run of digits."""
        result = [self.current_char]
        while self.peek_char() is not None and self.peek_char().isdecimal():
            self.advance()
            result.append(self.current_char)
        self.advance()
        return "".join(result)

    def identifier(self) -> str:
        """Consume a letter followed by a maximal run of letters or digits."""
        result = [self.current_char]
        while _is_ident_char(self.peek_char()):
            self.advance()
            result.append(self.current_char)
        self.advance()
        return "".join(result)

    def scan(self) -> Token:
        """Lexical analyzer that returns tokens one at a time."""
        if self.closed:
            raise ValueError("scan on a closed lexer")

        self.skip_whitespace()
        line, column = self.line, self.column

        if self.current_char is None:
            return Token(TokenType.EOF, "", line, column)

        # Numbers: integer literals
        if self.current_char.isdecimal():
            return Token(TokenType.INTLITERAL, self.integer(), line, column)

        # Identifiers and keywords
        if self.current_char.isalpha():
            ident = self.identifier()
            return Token(KEYWORDS.get(ident, TokenType.ID), ident, line, column)

        match self.current_char:
            case "+":
                self.advance()
                return Token(TokenType.PLUS, "+", line, column)
            case "=":
                self.advance()
                return Token(TokenType.EQUALS, "=", line, column)
            case "!":
                if self.peek_char() == "=":
                    self.advance()
                    self.advance()
                    return Token(TokenType.NOTEQUALS, "!=", line, column)
                self.error("!", "Unexpected char: ! (expected '!=')")
                self.advance()
                return Token(TokenType.EOF, "!", line, column)

        # If we reach here, the character is not recognized.
        bad_char = self.current_char
        self.error(bad_char)
        self.advance()
        return Token(TokenType.EOF, bad_char, line, column)

    def tokenize(self) -> List[Token]:
        """Return all tokens from the input string, EOF included."""
        tokens = []
        while True:
            token = self.scan()
            tokens.append(token)
            if token.type == TokenType.EOF:
                break
        return tokens
