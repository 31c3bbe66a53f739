"""Expression trees built from prefix notation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

OPERATORS = frozenset("+-*/")


@dataclass(slots=True)
class ExpressionNode:
    """A node holding an operand letter or a binary operator."""

    data: str
    left: Optional[ExpressionNode] = None
    right: Optional[ExpressionNode] = None


def parse_prefix(expression: str) -> ExpressionNode:
    """Build a tree from a prefix expression of letters and ``+ - * /``.

    Characters that are neither letters nor operators are ignored.
    """
    stack: list[ExpressionNode] = []
    for char in reversed(expression):
        if char.isascii() and char.isalpha():
            stack.append(ExpressionNode(char))
        elif char in OPERATORS:
            if len(stack) < 2:
                raise ValueError(f"operator {char!r} is missing an operand")
            left = stack.pop()
            right = stack.pop()
            stack.append(ExpressionNode(char, left, right))
    if not stack:
        raise ValueError("expression has no operands")
    return stack.pop()


def preorder(node: Optional[ExpressionNode]) -> str:
    """Node, left, right."""
    out: list[str] = []
    stack = [node] if node is not None else []
    while stack:
        current = stack.pop()
        out.append(current.data)
        stack.extend(child for child in (current.right, current.left) if child is not None)
    return "".join(out)


def postorder(node: Optional[ExpressionNode]) -> str:
    """Left, right, node, computed with two stacks."""
    pending = [node] if node is not None else []
    visited: list[ExpressionNode] = []
    while pending:
        current = pending.pop()
        visited.append(current)
        pending.extend(child for child in (current.left, current.right) if child is not None)
    return "".join(n.data for n in reversed(visited))


def deletion_order(node: Optional[ExpressionNode]) -> list[str]:
    """Order in which nodes are released: children before their parent."""
    if node is None:
        return []
    return [*deletion_order(node.left), *deletion_order(node.right), node.data]