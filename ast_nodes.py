"""AST node definitions for the small imperative language.

This module defines the concrete AST node dataclasses built by the parser.
The node set is closed: `NodeType` lists all eleven kinds, and every consumer
(pretty-printer, JSON export, Graphviz export) dispatches on the node with a
`match` statement covering each kind.

Conventions:
- All AST node dataclasses inherit from `ASTNode`, which records the node
    kind (`NodeType`) and the source `line`/`column` of the node's first token.
- Children are owned by their parent. `StmtsNode` and `VarsNode` hold plain
    lists that the parser only appends to while building the tree.
- `Expr` is the union of `IdNode`, `IntLiteralNode` and `PlusNode`.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterator, List, Tuple, Union


class NodeType(Enum):
    ID = auto()
    INT_LITERAL = auto()
    PLUS = auto()
    WRITE = auto()
    INIT = auto()
    CALCULATE = auto()
    IF = auto()
    WHILE = auto()
    STMTS = auto()
    VARS = auto()
    PROGRAM = auto()

    def __str__(self) -> str:
        return self.name


# Base AST Node
@dataclass
class ASTNode:
    type: NodeType
    line: int = field(default=0, compare=False)
    column: int = field(default=0, compare=False)


# Expression Nodes
@dataclass
class IdNode(ASTNode):
    type: NodeType = NodeType.ID
    name: str = ""


@dataclass
class IntLiteralNode(ASTNode):
    type: NodeType = NodeType.INT_LITERAL
    value: int = 0


@dataclass
class PlusNode(ASTNode):
    type: NodeType = NodeType.PLUS
    left: Expr = field(default_factory=lambda: IntLiteralNode())
    right: Expr = field(default_factory=lambda: IntLiteralNode())


Expr = Union[IdNode, IntLiteralNode, PlusNode]


# Statement Nodes
@dataclass
class WriteNode(ASTNode):
    type: NodeType = NodeType.WRITE
    target: IdNode = field(default_factory=lambda: IdNode())


@dataclass
class InitNode(ASTNode):
    type: NodeType = NodeType.INIT
    target: IdNode = field(default_factory=lambda: IdNode())
    value: IntLiteralNode = field(default_factory=lambda: IntLiteralNode())


@dataclass
class CalculateNode(ASTNode):
    type: NodeType = NodeType.CALCULATE
    target: IdNode = field(default_factory=lambda: IdNode())
    expr: Expr = field(default_factory=lambda: IntLiteralNode())


@dataclass
class StmtsNode(ASTNode):
    type: NodeType = NodeType.STMTS
    statements: List[ASTNode] = field(default_factory=list)

    def add(self, stmt: ASTNode) -> None:
        if stmt is None:
            raise ValueError("statement list cannot hold None")
        self.statements.append(stmt)


@dataclass
class IfNode(ASTNode):
    # Condition: left = right
    type: NodeType = NodeType.IF
    left: IdNode = field(default_factory=lambda: IdNode())
    right: IdNode = field(default_factory=lambda: IdNode())
    body: StmtsNode = field(default_factory=lambda: StmtsNode())


@dataclass
class WhileNode(ASTNode):
    # Condition: left != right
    type: NodeType = NodeType.WHILE
    left: IdNode = field(default_factory=lambda: IdNode())
    right: IdNode = field(default_factory=lambda: IdNode())
    body: StmtsNode = field(default_factory=lambda: StmtsNode())


Stmt = Union[WriteNode, InitNode, CalculateNode, IfNode, WhileNode]


# Declaration Nodes
@dataclass
class VarsNode(ASTNode):
    type: NodeType = NodeType.VARS
    variables: List[IdNode] = field(default_factory=list)

    def add(self, ident: IdNode) -> None:
        if ident is None:
            raise ValueError("variable list cannot hold None")
        self.variables.append(ident)


# Program Node
@dataclass
class ProgramNode(ASTNode):
    type: NodeType = NodeType.PROGRAM
    vars: VarsNode = field(default_factory=lambda: VarsNode())
    stmts: StmtsNode = field(default_factory=lambda: StmtsNode())


def child_nodes(node: ASTNode) -> Iterator[Tuple[str, ASTNode]]:
    """Yield `(field label, child)` pairs for the direct children of `node`."""
    match node:
        case PlusNode(left=left, right=right):
            yield "left", left
            yield "right", right
        case WriteNode(target=target):
            yield "target", target
        case InitNode(target=target, value=value):
            yield "target", target
            yield "value", value
        case CalculateNode(target=target, expr=expr):
            yield "target", target
            yield "expr", expr
        case IfNode(left=left, right=right, body=body) | WhileNode(
            left=left, right=right, body=body
        ):
            yield "left", left
            yield "right", right
            yield "body", body
        case StmtsNode(statements=stmts):
            for i, stmt in enumerate(stmts):
                yield f"stmt[{i}]", stmt
        case VarsNode(variables=variables):
            for i, ident in enumerate(variables):
                yield f"var[{i}]", ident
        case ProgramNode(vars=vars_, stmts=stmts):
            yield "vars", vars_
            yield "stmts", stmts
        case IdNode() | IntLiteralNode():
            pass
        case _:
            raise TypeError(f"Unknown node type: {type(node)}")


def plus_operands(node: PlusNode) -> List[Expr]:
    """Flatten a left-deep `+` chain into its operands, left to right.

    `Plus(Plus(a, b), c)` gives `[a, b, c]`. Only the left spine is unrolled;
    a `PlusNode` on the right is returned as a single operand.
    """
    operands = []
    current: Expr = node
    while isinstance(current, PlusNode):
        operands.append(current.right)
        current = current.left
    operands.append(current)
    operands.reverse()
    return operands


def iter_nodes(node: ASTNode) -> Iterator[ASTNode]:
    """Yield `node` and all of its descendants in depth-first pre-order."""
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed([child for _, child in child_nodes(current)]))
