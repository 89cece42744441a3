"""Graphviz visualization helpers for the AST.

Provides `render_ast_dot(program)` which returns a `graphviz.Digraph` object
(not rendered). Optionally `write_and_render` can write the file to disk.

Tree layout: each node is drawn as a box labelled with its kind (and name or
value for leaves). Edges run from parent to child and carry the field name
(`left`, `body`, `stmt[0]`, ...), so the picture reads top-down in the same
depth-first order as `PrettyPrinter.print_ast`.
"""

from graphviz import Digraph
from ast_nodes import *

# Fill colors per node family.
_COLORS = {
    NodeType.ID: "#e8f0fe",
    NodeType.INT_LITERAL: "#e8f0fe",
    NodeType.PLUS: "#fff4e0",
    NodeType.STMTS: "#eeeeee",
    NodeType.VARS: "#eeeeee",
    NodeType.PROGRAM: "#ffffff",
}


def _label(node: ASTNode) -> str:
    match node:
        case IdNode(name=n):
            return f"Id\\n{n}"
        case IntLiteralNode(value=v):
            return f"IntLiteral\\n{v}"
        case PlusNode():
            return "Plus (+)"
        case IfNode():
            return "If (=)"
        case WhileNode():
            return "While (!=)"
        case _:
            return node.type.name.title()


def render_ast_dot(node: ASTNode) -> Digraph:
    """Return a graphviz.Digraph for the given AST.

    The caller may call `dot.source` to inspect the dot text, or call
    `dot.render(filename, format=...)` to write files (requires Graphviz installed).
    """
    dot = Digraph(format="svg")
    dot.attr("graph", rankdir="TB")
    dot.attr("node", shape="box", style="rounded,filled", fontsize="10")

    counter = 0
    stack = [(None, "", node)]
    while stack:
        parent_id, edge_label, current = stack.pop()
        node_id = f"n{counter}"
        counter += 1
        dot.node(
            node_id,
            label=_label(current),
            fillcolor=_COLORS.get(current.type, "#f3fbe9"),
        )
        if parent_id is not None:
            dot.edge(parent_id, node_id, label=edge_label, fontsize="8")
        # Push in reverse so children are numbered left to right.
        for label, child in reversed(list(child_nodes(current))):
            stack.append((node_id, label, child))

    return dot


def write_and_render(node: ASTNode, out_path: str, fmt: str = "svg") -> None:
    """Write and render the AST to the given path (without extension).

    Example: write_and_render(ast, 'out/ast', fmt='png') will create out/ast.png
    (requires Graphviz)."""
    dot = render_ast_dot(node)
    dot.format = fmt
    # Note: render will append extension automatically
    dot.render(out_path, cleanup=True)
