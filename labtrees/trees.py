"""General binary trees built by explicit directions, and book hierarchies."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any, Optional

MAX_CHILDREN = 10


@dataclass(slots=True)
class _Node:
    value: Any
    left: Optional[_Node] = None
    right: Optional[_Node] = None


class BinaryTree:
    """Binary tree where each insertion is steered by a path of directions."""

    def __init__(self) -> None:
        self._root: Optional[_Node] = None

    def insert(self, value: Any, path: Iterable[str] = ()) -> None:
        """Insert ``value`` by following ``path`` from the root.

        Each step is ``'r'``/``'R'`` for right; anything else means left.
        The value is placed at the first empty child reached; directions
        beyond that point are ignored. The first value becomes the root.
        """
        new = _Node(value)
        if self._root is None:
            self._root = new
            return
        node = self._root
        for step in path:
            if step in ("r", "R"):
                if node.right is None:
                    node.right = new
                    return
                node = node.right
            else:
                if node.left is None:
                    node.left = new
                    return
                node = node.left
        raise ValueError("path ended before reaching an empty position")

    def __bool__(self) -> bool:
        return self._root is not None

    def inorder(self) -> list[Any]:
        """Values in left, node, right order."""
        return list(self._inorder())

    def _inorder(self) -> Iterator[Any]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def levels(self) -> list[list[Any]]:
        """Values grouped by depth, each level left to right."""
        result: list[list[Any]] = []
        level = [self._root] if self._root is not None else []
        while level:
            result.append([n.value for n in level])
            level = [c for n in level for c in (n.left, n.right) if c is not None]
        return result

    def height(self) -> int:
        """Number of levels; 0 for an empty tree."""
        return len(self.levels())


@dataclass
class BookNode:
    """A book, chapter, section or subsection with its children."""

    label: str
    children: list[BookNode] = field(default_factory=list)

    def __post_init__(self) -> None:
        if len(self.children) > MAX_CHILDREN:
            raise ValueError(f"at most {MAX_CHILDREN} children are supported")


def format_book(book: Optional[BookNode]) -> str:
    """Render a book's chapters, sections and subsections as indented text."""
    if book is None:
        return ""
    parts = ["\n\t\t\t-----Book Hierarchy---", f"\n Book title : {book.label}"]
    for number, chapter in enumerate(book.children, start=1):
        parts.append(f"\n\tChapter: {number} {chapter.label}")
        for section in chapter.children:
            parts.append(f"\n\t\t Sections: \n\t\t {section.label}")
            for subsection in section.children:
                parts.append(f"\n\t\t\t Subsections: \n\t\t\t{subsection.label}")
    return "".join(parts)