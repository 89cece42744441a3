"""Pretty-printer for the AST.

Provides `PrettyPrinter.print_ast(node, indent, prefix)` which renders an
AST into a readable multi-line string, one line per node in depth-first
order, and `PrettyPrinter.print_surface(node)` which renders a node back into
source syntax.

Examples:
    PrettyPrinter.print_ast(program_node)
    PrettyPrinter.print_surface(program_node)  # "var a\ninit a = 5\nwrite a"
"""

from __future__ import annotations
from ast_nodes import *


class PrettyPrinter:
    @staticmethod
    def print_ast(node: ASTNode, indent: int = 0, prefix: str = "") -> str:
        """Pretty print AST and return as string."""
        lines = []
        indent_str = " " * indent

        if not isinstance(node, ASTNode):
            lines.append(f"{indent_str}{prefix}{node}")
            return "\n".join(lines)

        match node:
            case IdNode(name=n):
                lines.append(f"{indent_str}{prefix}Id({n})")

            case IntLiteralNode(value=v):
                lines.append(f"{indent_str}{prefix}IntLiteral({v})")

            case PlusNode():
                # Unroll the left spine so long `+` chains do not recurse.
                operands = plus_operands(node)
                depth = len(operands) - 1
                for i in range(depth):
                    label = prefix if i == 0 else "left: "
                    lines.append(f"{' ' * (indent + 2 * i)}{label}Plus")
                lines.append(
                    PrettyPrinter.print_ast(operands[0], indent + 2 * depth, "left: ")
                )
                for k in range(1, depth + 1):
                    lines.append(
                        PrettyPrinter.print_ast(
                            operands[k], indent + 2 * (depth - k + 1), "right: "
                        )
                    )

            case WriteNode(target=target):
                lines.append(f"{indent_str}{prefix}Write")
                lines.append(PrettyPrinter.print_ast(target, indent + 2, "target: "))

            case InitNode(target=target, value=value):
                lines.append(f"{indent_str}{prefix}Init")
                lines.append(PrettyPrinter.print_ast(target, indent + 2, "target: "))
                lines.append(PrettyPrinter.print_ast(value, indent + 2, "value: "))

            case CalculateNode(target=target, expr=expr):
                lines.append(f"{indent_str}{prefix}Calculate")
                lines.append(PrettyPrinter.print_ast(target, indent + 2, "target: "))
                lines.append(PrettyPrinter.print_ast(expr, indent + 2, "expr: "))

            case IfNode(left=left, right=right, body=body):
                lines.append(f"{indent_str}{prefix}If")
                lines.append(PrettyPrinter.print_ast(left, indent + 4, "left: "))
                lines.append(PrettyPrinter.print_ast(right, indent + 4, "right: "))
                lines.append(PrettyPrinter.print_ast(body, indent + 4, "body: "))

            case WhileNode(left=left, right=right, body=body):
                lines.append(f"{indent_str}{prefix}While")
                lines.append(PrettyPrinter.print_ast(left, indent + 4, "left: "))
                lines.append(PrettyPrinter.print_ast(right, indent + 4, "right: "))
                lines.append(PrettyPrinter.print_ast(body, indent + 4, "body: "))

            case StmtsNode(statements=stmts):
                lines.append(f"{indent_str}{prefix}Stmts")
                for i, stmt in enumerate(stmts):
                    lines.append(PrettyPrinter.print_ast(stmt, indent + 4, f"stmt[{i}]: "))

            case VarsNode(variables=variables):
                lines.append(f"{indent_str}{prefix}Vars")
                for i, ident in enumerate(variables):
                    lines.append(PrettyPrinter.print_ast(ident, indent + 4, f"var[{i}]: "))

            case ProgramNode(vars=vars_, stmts=stmts):
                lines.append(f"{indent_str}{prefix}Program")
                lines.append(PrettyPrinter.print_ast(vars_, indent + 2))
                lines.append(PrettyPrinter.print_ast(stmts, indent + 2))

            case _:
                lines.append(f"{indent_str}{prefix}Unknown node type: {type(node)}")

        return "\n".join(line for line in lines if line)

    @staticmethod
    def print_surface(node: ASTNode, indent: int = 0) -> str:
        """Return the source-syntax rendering of an AST node.

        Statements are rendered one per line and nested bodies are indented by
        four spaces, so the output of a `ProgramNode` parses back to an equal
        tree.
        """
        if node is None:
            return ""

        pad = " " * indent

        def _p(n: ASTNode) -> str:
            return PrettyPrinter.print_surface(n) if isinstance(n, ASTNode) else str(n)

        def _body(stmts: StmtsNode) -> List[str]:
            rendered = PrettyPrinter.print_surface(stmts, indent + 4)
            return [rendered] if rendered else []

        match node:
            case IdNode(name=n):
                return n
            case IntLiteralNode(value=v):
                return str(v)
            case PlusNode():
                return " + ".join(_p(operand) for operand in plus_operands(node))
            case WriteNode(target=t):
                return f"{pad}write {_p(t)}"
            case InitNode(target=t, value=v):
                return f"{pad}init {_p(t)} = {_p(v)}"
            case CalculateNode(target=t, expr=e):
                return f"{pad}calculate {_p(t)} = {_p(e)}"
            case IfNode(left=l, right=r, body=body):
                lines = [f"{pad}if {_p(l)} = {_p(r)} then"]
                lines.extend(_body(body))
                lines.append(f"{pad}endif")
                return "\n".join(lines)
            case WhileNode(left=l, right=r, body=body):
                lines = [f"{pad}while {_p(l)} != {_p(r)} do"]
                lines.extend(_body(body))
                lines.append(f"{pad}endwhile")
                return "\n".join(lines)
            case StmtsNode(statements=stmts):
                return "\n".join(PrettyPrinter.print_surface(s, indent) for s in stmts)
            case VarsNode(variables=variables):
                return "\n".join(f"{pad}var {_p(v)}" for v in variables)
            case ProgramNode(vars=vars_, stmts=stmts):
                parts = [
                    PrettyPrinter.print_surface(vars_, indent),
                    PrettyPrinter.print_surface(stmts, indent),
                ]
                return "\n".join(p for p in parts if p)
            case _:
                s = PrettyPrinter.print_ast(node)
                return " ".join(line.strip() for line in s.splitlines())
