"""Binary search trees over integers, including a weighted-probability variant."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(slots=True)
class _Node:
    value: Any
    left: Optional[_Node] = None
    right: Optional[_Node] = None


class BinarySearchTree:
    """Unbalanced binary search tree; equal values go to the right."""

    def __init__(self, values=()) -> None:
        self._root: Optional[_Node] = None
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> None:
        """Insert ``value``, placing duplicates in the right subtree."""
        new = _Node(value)
        if self._root is None:
            self._root = new
            return
        node = self._root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = new
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = new
                    return
                node = node.right

    def __contains__(self, value: object) -> bool:
        node = self._root
        while node is not None:
            if node.value == value:
                return True
            node = node.left if value < node.value else node.right
        return False

    def __iter__(self) -> Iterator[Any]:
        """Yield the values in order (left, node, right)."""
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path."""
        level = [self._root] if self._root is not None else []
        depth = 0
        while level:
            depth += 1
            level = [child for n in level for child in (n.left, n.right) if child is not None]
        return depth

    def minimum(self) -> Any:
        """Return the smallest value; raise ``ValueError`` if the tree is empty."""
        if self._root is None:
            raise ValueError("The tree is empty.")
        node = self._root
        while node.left is not None:
            node = node.left
        return node.value

    def mirror(self) -> None:
        """Swap the left and right children of every node in place."""
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            node.left, node.right = node.right, node.left
            stack.extend(child for child in (node.left, node.right) if child is not None)

    def render(self) -> str:
        """Draw the tree one node per line, children indented under parents."""
        lines: list[str] = []
        stack: list[tuple[_Node, str, bool]] = []
        if self._root is not None:
            stack.append((self._root, "", True))
        while stack:
            node, indent, last = stack.pop()
            lines.append(f"{indent}+-{node.value}\n")
            child_indent = indent + ("  " if last else "| ")
            if node.right is not None:
                stack.append((node.right, child_indent, True))
            if node.left is not None:
                stack.append((node.left, child_indent, False))
        return "".join(lines)


@dataclass(slots=True)
class _WeightedNode:
    key: Any
    probability: float
    left: Optional[_WeightedNode] = None
    right: Optional[_WeightedNode] = None


class ProbabilityTree:
    """Binary search tree whose keys carry search probabilities."""

    def __init__(self) -> None:
        self._root: Optional[_WeightedNode] = None

    def insert(self, key: Any, probability: float) -> None:
        """Insert ``key``; a key already present is left unchanged."""
        new = _WeightedNode(key, probability)
        if self._root is None:
            self._root = new
            return
        node = self._root
        while True:
            if key < node.key:
                if node.left is None:
                    node.left = new
                    return
                node = node.left
            elif key > node.key:
                if node.right is None:
                    node.right = new
                    return
                node = node.right
            else:
                return

    def search_cost(self) -> float:
        """Sum of the search probabilities of all nodes."""
        total = 0.0
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            total += node.probability
            stack.extend(child for child in (node.left, node.right) if child is not None)
        return total


def build_probability_tree(keys: Sequence[Any], probabilities: Sequence[float]) -> ProbabilityTree:
    """Build a tree by inserting each key with its probability in order."""
    if len(keys) != len(probabilities):
        raise ValueError("keys and probabilities must have the same length")
    tree = ProbabilityTree()
    for key, probability in zip(keys, probabilities):
        tree.insert(key, probability)
    return tree