"""
Canonical AST printer.

Renders any expression tree as a fully parenthesized string. The output is a
debugging and golden-test aid; it is not meant to be evaluated.
"""

from typing import List, Union

from .ast_nodes import (
    ASTVisitor, Expression, Name, Assign, Call, Conditional, Prefix, Postfix, Infix
)

_WorkItem = Union[str, Expression]


class ASTPrinter(ASTVisitor):
    """
    Visitor that writes the canonical form of a tree into a buffer.

    Traversal uses an explicit work stack rather than recursion, so trees of
    any depth can be printed. ``visit`` expands one node into its pieces:
    literal text and child nodes still to be printed.
    """

    def __init__(self):
        self._out: List[str] = []
        self._pending: List[_WorkItem] = []

    def print(self, node: Expression) -> str:
        self._out = []
        self._pending = [node]

        while self._pending:
            item = self._pending.pop()
            if isinstance(item, str):
                self._out.append(item)
            else:
                item.accept(self)

        return "".join(self._out)

    def visit(self, node: Expression) -> None:
        if isinstance(node, Name):
            pieces: List[_WorkItem] = [node.name]
        elif isinstance(node, Assign):
            pieces = [f"({node.name} = ", node.right, ")"]
        elif isinstance(node, Conditional):
            pieces = ["(", node.condition, " ? ", node.then_branch, " : ", node.else_branch, ")"]
        elif isinstance(node, Call):
            pieces = [node.function, "("]
            for i, arg in enumerate(node.args):
                if i > 0:
                    pieces.append(", ")
                pieces.append(arg)
            pieces.append(")")
        elif isinstance(node, Infix):
            pieces = ["(", node.left, f" {node.operator.punctuator} ", node.right, ")"]
        elif isinstance(node, Prefix):
            pieces = [f"({node.operator.punctuator}", node.right, ")"]
        elif isinstance(node, Postfix):
            pieces = ["(", node.left, f"{node.operator.punctuator})"]
        else:
            raise TypeError(f"Cannot print node of type {type(node).__name__}")

        # Last piece goes on the stack first so the first piece is printed next
        self._pending.extend(reversed(pieces))


def print_expression(node: Expression) -> str:
    """Render ``node`` as a fully parenthesized string."""
    return ASTPrinter().print(node)
