"""Largest island after turning at most one water cell into land."""

from collections import deque
from collections.abc import Iterator, Sequence

_STEPS = ((1, 0), (-1, 0), (0, 1), (0, -1))


class DisjointSet:
    """Union-find over ``0..n-1`` with union by size and path compression."""

    def __init__(self, n: int) -> None:
        self._parent = list(range(n))
        self._size = [1] * n

    def find(self, x: int) -> int:
        """Representative of the set holding ``x``."""
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def unite(self, x: int, y: int) -> None:
        """Merge the sets holding ``x`` and ``y``."""
        rx, ry = self.find(x), self.find(y)
        if rx == ry:
            return
        if self._size[rx] < self._size[ry]:
            rx, ry = ry, rx
        self._parent[ry] = rx
        self._size[rx] += self._size[ry]

    def size_of(self, x: int) -> int:
        """Number of elements in the set holding ``x``."""
        return self._size[self.find(x)]


def _neighbours(r: int, c: int, n: int) -> Iterator[tuple[int, int]]:
    for dr, dc in _STEPS:
        nr, nc = r + dr, c + dc
        if 0 <= nr < n and 0 <= nc < n:
            yield nr, nc


def largest_island(grid: Sequence[Sequence[int]]) -> int:
    """Largest island in a square grid after flipping at most one 0 to 1."""
    n = len(grid)
    sets = DisjointSet(n * n)
    land = [(r, c) for r in range(n) for c in range(n) if grid[r][c] == 1]
    for r, c in land:
        for nr, nc in _neighbours(r, c, n):
            if grid[nr][nc] == 1:
                sets.unite(r * n + c, nr * n + nc)

    best = max((sets.size_of(r * n + c) for r, c in land), default=0)
    for r in range(n):
        for c in range(n):
            if grid[r][c] != 0:
                continue
            roots = {
                sets.find(nr * n + nc)
                for nr, nc in _neighbours(r, c, n)
                if grid[nr][nc] == 1
            }
            best = max(best, 1 + sum(sets.size_of(root) for root in roots))
    return best


def largest_island_bfs(grid: Sequence[Sequence[int]]) -> int:
    """Same as :func:`largest_island`, labelling islands by breadth-first search."""
    n = len(grid)
    label = [[0] * n for _ in range(n)]
    sizes: list[int] = []
    for r in range(n):
        for c in range(n):
            if label[r][c] or not grid[r][c]:
                continue
            sizes.append(0)
            ident = len(sizes)
            label[r][c] = ident
            queue = deque([(r, c)])
            while queue:
                cr, cc = queue.popleft()
                sizes[-1] += 1
                for nr, nc in _neighbours(cr, cc, n):
                    if grid[nr][nc] and not label[nr][nc]:
                        label[nr][nc] = ident
                        queue.append((nr, nc))

    best = max(sizes, default=0) + 1
    for r in range(n):
        for c in range(n):
            if grid[r][c]:
                continue
            adjacent = {label[nr][nc] for nr, nc in _neighbours(r, c, n) if label[nr][nc]}
            best = max(best, 1 + sum(sizes[i - 1] for i in adjacent))
    return min(n * n, best)