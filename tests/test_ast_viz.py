"""Tests for ast_viz: ensure a Digraph is produced and contains node labels."""

from ast_viz import render_ast_dot
from tests.utils import parse_text


def test_ast_viz_dot_source():
    ast = parse_text("var a calculate a = a + 1 while a != a do write a endwhile")
    dot = render_ast_dot(ast)
    src = dot.source
    assert "Program" in src
    assert "Plus (+)" in src
    assert "While (!=)" in src
    assert "stmt[0]" in src
    assert "n0 -> n1" in src


def test_ast_viz_node_count_matches_tree():
    ast = parse_text("var a write a")
    src = render_ast_dot(ast).source
    # Program, Vars, Id, Stmts, Write, Id
    assert "n5" in src
    assert "n6" not in src
