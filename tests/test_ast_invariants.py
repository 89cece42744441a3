import pytest

from ast_nodes import *
from pretty_printer import PrettyPrinter
from tests.utils import parse_text

PROGRAM = """
var a
var b
init a = 1
init b = 5
while a != b do
    calculate a = a + 1
    write a
    if a = b then
        write a
    endif
endwhile
"""


def test_no_node_is_shared_between_parents():
    ast = parse_text(PROGRAM)
    nodes = list(iter_nodes(ast))
    assert len({id(n) for n in nodes}) == len(nodes)


def test_every_node_kind_is_reachable_from_program():
    ast = parse_text(PROGRAM)
    kinds = {n.type for n in iter_nodes(ast)}
    assert kinds == set(NodeType)


def test_lists_never_hold_none():
    ast = parse_text(PROGRAM)
    for node in iter_nodes(ast):
        if isinstance(node, StmtsNode):
            assert all(s is not None for s in node.statements)
        if isinstance(node, VarsNode):
            assert all(v is not None for v in node.variables)


def test_add_rejects_none():
    with pytest.raises(ValueError):
        StmtsNode().add(None)
    with pytest.raises(ValueError):
        VarsNode().add(None)


def test_declared_names_are_unique():
    ast = parse_text(PROGRAM)
    names = [v.name for v in ast.vars.variables]
    assert len(names) == len(set(names))


def test_equality_ignores_source_positions():
    assert IdNode(name="a", line=1, column=1) == IdNode(name="a", line=3, column=9)
    assert IdNode(name="a") != IdNode(name="b")


@pytest.mark.parametrize(
    "src",
    [
        "",
        "var a",
        "write a",
        "init a = 42",
        "calculate a = 1",
        "calculate a = b + 2 + c",
        "if a = b then endif",
        "while a != b do write a endwhile",
        PROGRAM,
    ],
)
def test_surface_rendering_parses_back_to_same_tree(src):
    ast = parse_text(src)
    assert parse_text(PrettyPrinter.print_surface(ast)) == ast


def test_iter_nodes_handles_long_addition_chain():
    ast = parse_text("calculate a = " + " + ".join(["x"] * 2000))
    kinds = [n.type for n in iter_nodes(ast)]
    assert kinds.count(NodeType.PLUS) == 1999
    assert kinds.count(NodeType.ID) == 2001


def test_plus_operands_unrolls_left_spine():
    expr = parse_text("calculate r = a + 2 + b").stmts.statements[0].expr
    assert plus_operands(expr) == [
        IdNode(name="a"),
        IntLiteralNode(value=2),
        IdNode(name="b"),
    ]
