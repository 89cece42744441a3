from lexer import Lexer
from parser import Parser, parse_program


def lex(text: str):
    """Return a list of tokens for the given source text."""
    with Lexer(text) as lexer:
        return lexer.tokenize()


def token_kinds(text: str):
    """Return just the token kinds for the given source text."""
    return [t.type for t in lex(text)]


def parse_text(text: str):
    """Convenience: parse a source text into an AST, raising on errors."""
    return Parser(text).parse()


def parse_result(text: str, on_match=None):
    """Parse without raising and return the ParseResult."""
    return parse_program(text, on_match=on_match)
