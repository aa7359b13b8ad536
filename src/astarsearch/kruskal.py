"""Random perfect mazes from a random minimum spanning tree (Kruskal)."""
from __future__ import annotations

from collections.abc import Hashable
import heapq
import random
from typing import Generic, TypeVar

from .maze import FINISH, SPACE, START, WALL, Location, Maze, MazeConfig

T = TypeVar("T", bound=Hashable)


class DisjointSet(Generic[T]):
    """Union-find with path compression and union by rank."""

    def __init__(self) -> None:
        self._parent: dict[T, T] = {}
        self._rank: dict[T, int] = {}

    def __contains__(self, x: T) -> bool:
        return x in self._parent

    def make_set(self, x: T) -> None:
        if x not in self._parent:
            self._parent[x] = x
            self._rank[x] = 0

    def find(self, x: T) -> T:
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def union(self, a: T, b: T) -> bool:
        ra, rb = self.find(a), self.find(b)
        if ra == rb:
            return False
        if self._rank[ra] < self._rank[rb]:
            ra, rb = rb, ra
        self._parent[rb] = ra
        if self._rank[ra] == self._rank[rb]:
            self._rank[ra] += 1
        return True

    def connected(self, a: T, b: T) -> bool:
        return self.find(a) == self.find(b)


def random_maze(
    rows: int, cols: int, seed: int | None = None, config: MazeConfig | None = None
) -> Maze:
    """Carve a ``rows`` x ``cols`` cell maze; every cell is reachable from every other.

    Cell ``(i, j)`` sits at text position ``(2i+1, 2j+1)``; the walls between
    them are broken along the edges of a random spanning tree.
    """
    if rows <= 0 or cols <= 0:
        raise ValueError(f"maze size must be positive, got {rows}x{cols}")
    rng = random.Random(seed)
    edges: list[tuple[float, Location, Location]] = []
    cells: DisjointSet[Location] = DisjointSet()
    for i in range(rows):
        for j in range(cols):
            if j < cols - 1:
                heapq.heappush(edges, (rng.random(), Location(i, j), Location(i, j + 1)))
            if i < rows - 1:
                heapq.heappush(edges, (rng.random(), Location(i, j), Location(i + 1, j)))
            cells.make_set(Location(i, j))

    grid = [
        [SPACE if i % 2 == 1 and j % 2 == 1 else WALL for j in range(cols * 2 + 1)]
        for i in range(rows * 2 + 1)
    ]

    while edges:
        _, v1, v2 = heapq.heappop(edges)
        if cells.union(v1, v2):
            if v1.i == v2.i:
                grid[v1.i * 2 + 1][v1.j * 2 + 2] = SPACE
            else:
                grid[v1.i * 2 + 2][v1.j * 2 + 1] = SPACE

    start = Location(rows * 2 - 1, 1)
    finish = Location(1, cols * 2 - 1)
    grid[start.i][start.j] = START
    grid[finish.i][finish.j] = FINISH
    return Maze(grid, start, finish, config)
