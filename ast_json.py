"""Convert AST nodes into JSON-serializable structures.

This module provides `ast_to_json(node)` which returns a nested structure
of dicts/lists/primitives describing the AST node. Each dict carries a
`node_type` key naming the node kind, followed by the node's fields.
"""

from typing import Any, Optional
from ast_nodes import *


def ast_to_json(node: Optional[ASTNode]) -> Any:
    if node is None:
        return None

    match node:
        case IdNode(name=name):
            return {"node_type": "Id", "name": name}
        case IntLiteralNode(value=value):
            return {"node_type": "IntLiteral", "value": value}
        case PlusNode():
            # Build the left spine bottom-up so long `+` chains do not recurse.
            operands = plus_operands(node)
            data = ast_to_json(operands[0])
            for operand in operands[1:]:
                data = {
                    "node_type": "Plus",
                    "left": data,
                    "right": ast_to_json(operand),
                }
            return data
        case WriteNode(target=target):
            return {"node_type": "Write", "target": ast_to_json(target)}
        case InitNode(target=target, value=value):
            return {
                "node_type": "Init",
                "target": ast_to_json(target),
                "value": ast_to_json(value),
            }
        case CalculateNode(target=target, expr=expr):
            return {
                "node_type": "Calculate",
                "target": ast_to_json(target),
                "expr": ast_to_json(expr),
            }
        case IfNode(left=left, right=right, body=body):
            return {
                "node_type": "If",
                "left": ast_to_json(left),
                "right": ast_to_json(right),
                "body": ast_to_json(body),
            }
        case WhileNode(left=left, right=right, body=body):
            return {
                "node_type": "While",
                "left": ast_to_json(left),
                "right": ast_to_json(right),
                "body": ast_to_json(body),
            }
        case StmtsNode(statements=stmts):
            return {
                "node_type": "Stmts",
                "statements": [ast_to_json(s) for s in stmts],
            }
        case VarsNode(variables=variables):
            return {
                "node_type": "Vars",
                "variables": [ast_to_json(v) for v in variables],
            }
        case ProgramNode(vars=vars_, stmts=stmts):
            return {
                "node_type": "Program",
                "vars": ast_to_json(vars_),
                "stmts": ast_to_json(stmts),
            }

    raise TypeError(f"Unknown node type: {type(node)}")
