"""Undirected landmark graphs and weighted city route maps."""

from __future__ import annotations

from collections import deque
from collections.abc import Hashable, Iterable, Iterator, Sequence
from typing import Any

MAX_CITIES = 20


class Graph:
    """Undirected graph stored as an adjacency mapping of neighbour sets."""

    def __init__(self, edges: Iterable[tuple[Hashable, Hashable]] = ()) -> None:
        self._adjacent: dict[Any, set[Any]] = {}
        for a, b in edges:
            self.add_edge(a, b)

    def add_edge(self, a: Any, b: Any) -> None:
        """Connect ``a`` and ``b`` in both directions."""
        self._adjacent.setdefault(a, set()).add(b)
        self._adjacent.setdefault(b, set()).add(a)

    def neighbours(self, node: Any) -> list[Any]:
        """Return the neighbours of ``node`` in ascending order."""
        try:
            return sorted(self._adjacent[node])
        except KeyError:
            raise KeyError(f"unknown node: {node!r}") from None

    def __contains__(self, node: object) -> bool:
        return node in self._adjacent

    def __iter__(self) -> Iterator[Any]:
        return iter(sorted(self._adjacent))

    def bfs(self, start: Any) -> list[Any]:
        """Breadth-first order of the nodes reachable from ``start``."""
        self._require(start)
        visited = {start}
        order: list[Any] = []
        queue = deque([start])
        while queue:
            node = queue.popleft()
            order.append(node)
            for nxt in self.neighbours(node):
                if nxt not in visited:
                    visited.add(nxt)
                    queue.append(nxt)
        return order

    def dfs(self, start: Any) -> list[Any]:
        """Depth-first (preorder) order of the nodes reachable from ``start``."""
        self._require(start)
        visited = {start}
        order = [start]
        stack = [iter(self.neighbours(start))]
        while stack:
            for nxt in stack[-1]:
                if nxt not in visited:
                    visited.add(nxt)
                    order.append(nxt)
                    stack.append(iter(self.neighbours(nxt)))
                    break
            else:
                stack.pop()
        return order

    def _require(self, node: Any) -> None:
        if node not in self._adjacent:
            raise KeyError(f"unknown node: {node!r}")


class CityMap:
    """Directed travel times between named cities, kept as a matrix."""

    def __init__(self, cities: Sequence[str]) -> None:
        cities = tuple(cities)
        if len(cities) > MAX_CITIES:
            raise ValueError(f"at most {MAX_CITIES} cities are supported")
        if len(set(cities)) != len(cities):
            raise ValueError("city names must be unique")
        self.cities = cities
        self._index = {name: i for i, name in enumerate(cities)}
        self._matrix = [[0] * len(cities) for _ in cities]

    def _position(self, city: str) -> int:
        try:
            return self._index[city]
        except KeyError:
            raise KeyError(f"unknown city: {city!r}") from None

    def add_route(self, source: str, target: str, minutes: int) -> None:
        """Record the travel time from ``source`` to ``target``; 0 means no path."""
        self._matrix[self._position(source)][self._position(target)] = minutes

    def adjacency_matrix(self) -> list[list[int]]:
        """Return a copy of the travel-time matrix."""
        return [list(row) for row in self._matrix]

    def adjacency_list(self) -> dict[str, list[str]]:
        """Map each city to the cities reachable from it, in city order."""
        return {
            city: [target for target, minutes in zip(self.cities, row) if minutes != 0]
            for city, row in zip(self.cities, self._matrix)
        }

    def routes(self) -> list[tuple[str, str, int]]:
        """All routes as ``(source, target, minutes)`` in matrix order."""
        return [
            (source, target, minutes)
            for source, row in zip(self.cities, self._matrix)
            for target, minutes in zip(self.cities, row)
            if minutes != 0
        ]

    def format_matrix(self) -> str:
        """Render the matrix as tab-separated text with city headings."""
        parts = ["\n"]
        parts.extend(f"\t{city}" for city in self.cities)
        for city, row in zip(self.cities, self._matrix):
            cells = "".join(f"\t{minutes}" for minutes in row)
            parts.append(f"\n {city}{cells}\n")
        return "".join(parts)

    def format_list(self) -> str:
        """Render the adjacency list followed by every route and its time."""
        parts = ["\n Adjacency list is"]
        for city, targets in self.adjacency_list().items():
            parts.append(f"\n{city}" + "".join(f"-> {t}" for t in targets))
        parts.append("\n Path and time required to reach cities is: ")
        for source, target, minutes in self.routes():
            parts.append(f"\n{source}-> {target}\n   [time required: {minutes} min ]")
        return "".join(parts)