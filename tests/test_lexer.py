import logging

import pytest

from errors import LexError
from lexer import Lexer
from tests.utils import lex, token_kinds
from tokens import TokenType


def test_lexer_recognizes_scenario_a_tokens():
    tokens = lex("var a\ninit a = 5\nwrite a")
    assert [(t.type, t.lexeme) for t in tokens] == [
        (TokenType.VAR, "var"),
        (TokenType.ID, "a"),
        (TokenType.INIT, "init"),
        (TokenType.ID, "a"),
        (TokenType.EQUALS, "="),
        (TokenType.INTLITERAL, "5"),
        (TokenType.WRITE, "write"),
        (TokenType.ID, "a"),
        (TokenType.EOF, ""),
    ]


def test_lexer_recognizes_every_reserved_word():
    src = "var write init if then endif while do endwhile calculate"
    assert token_kinds(src) == [
        TokenType.VAR,
        TokenType.WRITE,
        TokenType.INIT,
        TokenType.IF,
        TokenType.THEN,
        TokenType.ENDIF,
        TokenType.WHILE,
        TokenType.DO,
        TokenType.ENDWHILE,
        TokenType.CALCULATE,
        TokenType.EOF,
    ]


def test_keywords_are_case_sensitive_and_prefixes_are_identifiers():
    tokens = lex("VAR variable endwhilex If")
    assert [t.type for t in tokens[:-1]] == [TokenType.ID] * 4
    assert tokens[1].lexeme == "variable"


def test_identifiers_may_contain_digits_after_first_letter():
    tokens = lex("var score123")
    assert tokens[1].type == TokenType.ID
    assert tokens[1].lexeme == "score123"


def test_integer_literal_is_maximal_digit_run():
    tokens = lex("init score = 600")
    assert tokens[3].type == TokenType.INTLITERAL
    assert tokens[3].lexeme == "600"


def test_digits_followed_by_letters_split_into_two_tokens():
    tokens = lex("12ab")
    assert [(t.type, t.lexeme) for t in tokens] == [
        (TokenType.INTLITERAL, "12"),
        (TokenType.ID, "ab"),
        (TokenType.EOF, ""),
    ]


def test_operators_without_whitespace():
    assert token_kinds("a=b+1") == [
        TokenType.ID,
        TokenType.EQUALS,
        TokenType.ID,
        TokenType.PLUS,
        TokenType.INTLITERAL,
        TokenType.EOF,
    ]
    assert token_kinds("x!=y") == [
        TokenType.ID,
        TokenType.NOTEQUALS,
        TokenType.ID,
        TokenType.EOF,
    ]


def test_while_statement_tokens():
    src = "while x != y do calculate x = x + 1 endwhile"
    assert token_kinds(src) == [
        TokenType.WHILE,
        TokenType.ID,
        TokenType.NOTEQUALS,
        TokenType.ID,
        TokenType.DO,
        TokenType.CALCULATE,
        TokenType.ID,
        TokenType.EQUALS,
        TokenType.ID,
        TokenType.PLUS,
        TokenType.INTLITERAL,
        TokenType.ENDWHILE,
        TokenType.EOF,
    ]


@pytest.mark.parametrize("src", ["", "   ", "\n\t \r\n"])
def test_empty_or_blank_input_is_eof(src):
    assert token_kinds(src) == [TokenType.EOF]


def test_eof_is_sticky():
    lexer = Lexer("a")
    assert lexer.scan().type == TokenType.ID
    assert lexer.scan().type == TokenType.EOF
    assert lexer.scan().type == TokenType.EOF


def test_tokenization_is_deterministic():
    src = "var a var b while a != b do calculate a = a + 1 endwhile"
    assert lex(src) == lex(src)


def test_tokens_carry_line_and_column():
    tokens = lex("var a\n  write a")
    write = tokens[2]
    assert (write.line, write.column) == (2, 3)
    assert (tokens[3].line, tokens[3].column) == (2, 9)


def test_unknown_character_yields_eof_and_records_error(caplog):
    lexer = Lexer("a & b")
    with caplog.at_level(logging.WARNING, logger="lexer"):
        assert lexer.scan().type == TokenType.ID
        assert lexer.scan().type == TokenType.EOF
    assert len(lexer.errors) == 1
    err = lexer.errors[0]
    assert isinstance(err, LexError)
    assert err.char == "&"
    assert (err.line, err.column) == (1, 3)
    assert "Unexpected char: &" in caplog.text


@pytest.mark.parametrize("src", ["!", "! =", "!x"])
def test_bang_without_equals_is_a_lexical_error(src):
    lexer = Lexer(src)
    assert lexer.scan().type == TokenType.EOF
    assert len(lexer.errors) == 1
    assert lexer.errors[0].char == "!"


def test_lexical_error_token_is_indistinguishable_from_end_of_input():
    bad = Lexer("&").scan()
    end = Lexer("").scan()
    assert bad.type == end.type == TokenType.EOF
    assert end.lexeme == ""


@pytest.mark.parametrize("src, char", [("&", "&"), ("write #", "#"), ("!x", "!")])
def test_stand_in_eof_keeps_offending_character(src, char):
    tokens = Lexer(src).tokenize()
    assert tokens[-1].type == TokenType.EOF
    assert tokens[-1].lexeme == char


def test_lexical_errors_can_be_recorded_without_logging(caplog):
    lexer = Lexer("var a &", log_errors=False)
    with caplog.at_level(logging.WARNING, logger="lexer"):
        lexer.tokenize()
    assert len(lexer.errors) == 1
    assert "Scan error" not in caplog.text


def test_closed_lexer_refuses_to_scan():
    with Lexer("var a") as lexer:
        assert lexer.scan().type == TokenType.VAR
    assert lexer.closed
    with pytest.raises(ValueError):
        lexer.scan()
