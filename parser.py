"""
Parser for the small imperative language.

Overview and approach:
- This parser is a hand-written recursive-descent parser for an LL(1)
    grammar. Each grammar rule has one `parse_*` method and every decision is
    made from the current lookahead token alone, so no backtracking is needed:

        Program  ::= Vars Stmts EOF
        Vars     ::= VarDecl*
        VarDecl  ::= 'var' Id
        Stmts    ::= Stmt*
        Stmt     ::= 'write' Id
                   | 'init' Id '=' IntLiteral
                   | 'calculate' Id '=' Expr
                   | 'if' Id '=' Id 'then' Stmts 'endif'
                   | 'while' Id '!=' Id 'do' Stmts 'endwhile'
        Expr     ::= Value ('+' Value)*
        Value    ::= Id | IntLiteral

- Tokens are pulled from the `Lexer` one at a time as the parse advances; the
    parser never holds more than the current lookahead.

Key points:
- `match()` is the only way a token is consumed. It returns the matched token
    and reports it to the optional `on_match` callback, which is how callers
    get a trace of the parse without the parser printing anything.
- `var` declarations are recorded in a `SymbolTable`; a second declaration
    of a name raises `DeclarationError`. Identifiers used in statements are
    not checked against the table.
- A `Parser` is one parse session: it owns the lexer, the lookahead and the
    symbol table. Parse another program with another `Parser`.
- Bodies nested past the interpreter's recursion limit raise `NestingError`.
- The first error aborts the parse. `parse_program()` turns it into a failed
    `ParseResult` with no AST.

Examples:
    result = parse_program("var a init a = 5 write a")
    result.success   # True
    result.program   # ProgramNode(vars=VarsNode([IdNode('a')]), ...)
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional
from tokens import Token, TokenType
from ast_nodes import *
from errors import DeclarationError, LexError, NestingError, TokenMismatchError
from lexer import Lexer
from symbols import SymbolTable, SymbolType

logger = logging.getLogger(__name__)

MatchCallback = Callable[[Token], None]

# FIRST sets of the two repeating rules.
VARS_FIRST = frozenset({TokenType.VAR})
STMTS_FIRST = frozenset(
    {
        TokenType.WRITE,
        TokenType.INIT,
        TokenType.IF,
        TokenType.WHILE,
        TokenType.CALCULATE,
    }
)


@dataclass
class ParseResult:
    success: bool
    program: Optional[ProgramNode] = None
    error: Optional[SyntaxError] = None
    lex_errors: List[LexError] = field(default_factory=list)


class Parser:
    def __init__(self, text: str, on_match: Optional[MatchCallback] = None):
        self.text = text
        self.on_match = on_match
        self.lexer: Optional[Lexer] = None
        self.current = Token(TokenType.EOF, "")
        self.symbol_table = SymbolTable()

    @property
    def lex_errors(self) -> List[LexError]:
        return list(self.lexer.errors) if self.lexer is not None else []

    def advance(self) -> Token:
        """Move to next token."""
        self.current = self.lexer.scan()
        return self.current

    def match(self, expected_type: TokenType) -> Token:
        """Consume the lookahead if it is of the expected kind."""
        if self.current.type != expected_type:
            self.fail(expected_type)

        token = self.current
        if self.on_match is not None:
            self.on_match(token)
        # Nothing follows EOF; scanning past it would only re-read the end.
        if expected_type != TokenType.EOF:
            self.advance()
        return token

    def fail(self, *expected: TokenType) -> None:
        raise TokenMismatchError(
            expected,
            self.current.type,
            self.current.lexeme,
            self.current.line,
            self.current.column,
        )

    def parse_id(self) -> IdNode:
        token = self.match(TokenType.ID)
        return IdNode(name=token.lexeme, line=token.line, column=token.column)

    def parse_int_literal(self) -> IntLiteralNode:
        token = self.match(TokenType.INTLITERAL)
        return IntLiteralNode(
            value=int(token.lexeme), line=token.line, column=token.column
        )

    def parse_value(self) -> Expr:
        """Parse a value: Id | IntLiteral"""
        match self.current.type:
            case TokenType.ID:
                return self.parse_id()
            case TokenType.INTLITERAL:
                return self.parse_int_literal()
            case _:
                self.fail(TokenType.ID, TokenType.INTLITERAL)

    def parse_expression(self) -> Expr:
        """Parse an expression: Value ('+' Value)*, left-associative."""
        left = self.parse_value()
        while self.current.type == TokenType.PLUS:
            self.match(TokenType.PLUS)
            right = self.parse_value()
            left = PlusNode(left=left, right=right, line=left.line, column=left.column)
        return left

    def parse_variable_declaration(self) -> IdNode:
        """Parse variable declaration: 'var' Id"""
        self.match(TokenType.VAR)
        name = self.current.lexeme
        if self.current.type == TokenType.ID:
            self.symbol_table.declare(name, SymbolType.INT)
        return self.parse_id()

    def parse_vars(self) -> VarsNode:
        vars_node = VarsNode(line=self.current.line, column=self.current.column)
        while self.current.type in VARS_FIRST:
            vars_node.add(self.parse_variable_declaration())
        return vars_node

    def parse_write_statement(self) -> WriteNode:
        """Parse write statement: 'write' Id"""
        keyword = self.match(TokenType.WRITE)
        target = self.parse_id()
        return WriteNode(target=target, line=keyword.line, column=keyword.column)

    def parse_init_statement(self) -> InitNode:
        """Parse init statement: 'init' Id '=' IntLiteral"""
        keyword = self.match(TokenType.INIT)
        target = self.parse_id()
        self.match(TokenType.EQUALS)
        value = self.parse_int_literal()
        return InitNode(
            target=target, value=value, line=keyword.line, column=keyword.column
        )

    def parse_calculate_statement(self) -> CalculateNode:
        """Parse calculate statement: 'calculate' Id '=' Expr"""
        keyword = self.match(TokenType.CALCULATE)
        target = self.parse_id()
        self.match(TokenType.EQUALS)
        expr = self.parse_expression()
        return CalculateNode(
            target=target, expr=expr, line=keyword.line, column=keyword.column
        )

    def parse_if_statement(self) -> IfNode:
        """Parse if statement: 'if' Id '=' Id 'then' Stmts 'endif'"""
        keyword = self.match(TokenType.IF)
        left = self.parse_id()
        self.match(TokenType.EQUALS)
        right = self.parse_id()
        self.match(TokenType.THEN)
        body = self.parse_statements()
        self.match(TokenType.ENDIF)
        return IfNode(
            left=left, right=right, body=body, line=keyword.line, column=keyword.column
        )

    def parse_while_statement(self) -> WhileNode:
        """Parse while statement: 'while' Id '!=' Id 'do' Stmts 'endwhile'"""
        keyword = self.match(TokenType.WHILE)
        left = self.parse_id()
        self.match(TokenType.NOTEQUALS)
        right = self.parse_id()
        self.match(TokenType.DO)
        body = self.parse_statements()
        self.match(TokenType.ENDWHILE)
        return WhileNode(
            left=left, right=right, body=body, line=keyword.line, column=keyword.column
        )

    def parse_statement(self) -> Stmt:
        """Parse a statement, chosen by its leading keyword."""
        match self.current.type:
            case TokenType.WRITE:
                return self.parse_write_statement()
            case TokenType.INIT:
                return self.parse_init_statement()
            case TokenType.CALCULATE:
                return self.parse_calculate_statement()
            case TokenType.IF:
                return self.parse_if_statement()
            case TokenType.WHILE:
                return self.parse_while_statement()
            case _:
                self.fail(*sorted(STMTS_FIRST, key=lambda t: t.value))

    def parse_statements(self) -> StmtsNode:
        stmts = StmtsNode(line=self.current.line, column=self.current.column)
        while self.current.type in STMTS_FIRST:
            stmts.add(self.parse_statement())
        return stmts

    def parse_program(self) -> ProgramNode:
        """Parse a complete program: Vars Stmts EOF"""
        vars_node = self.parse_vars()
        stmts = self.parse_statements()
        self.match(TokenType.EOF)
        return ProgramNode(vars=vars_node, stmts=stmts, line=1, column=1)

    def parse(self) -> ProgramNode:
        """Parse the whole source text, raising on the first error."""
        logger.info("Parsing %d characters", len(self.text))
        with Lexer(self.text) as lexer:
            self.lexer = lexer
            self.advance()
            try:
                program = self.parse_program()
            except RecursionError:
                raise NestingError(self.current.line, self.current.column) from None
        logger.info(
            "Parsed %d declarations and %d statements",
            len(program.vars.variables),
            len(program.stmts.statements),
        )
        return program


def parse_program(
    text: str, on_match: Optional[MatchCallback] = None
) -> ParseResult:
    """Parse `text` and report the outcome instead of raising."""
    parser = Parser(text, on_match=on_match)
    try:
        program = parser.parse()
    except (TokenMismatchError, DeclarationError, NestingError) as e:
        logger.info("Parse failed: %s", e)
        return ParseResult(False, None, e, parser.lex_errors)
    return ParseResult(True, program, None, parser.lex_errors)
