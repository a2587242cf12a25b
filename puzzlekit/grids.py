"""Breadth-first and priority searches over rectangular grids."""

import heapq
from collections import deque
from collections.abc import Sequence

# Direction signs 1..4 point right, left, down and up.
_SIGNED_MOVES = ((0, 1), (0, -1), (1, 0), (-1, 0))
_NEIGHBOURS = ((1, 0), (-1, 0), (0, 1), (0, -1))


def _neighbours(r: int, c: int, rows: int, cols: int):
    for dr, dc in _NEIGHBOURS:
        nr, nc = r + dr, c + dc
        if 0 <= nr < rows and 0 <= nc < cols:
            yield nr, nc


def min_cost_path(grid: Sequence[Sequence[int]]) -> int:
    """Fewest sign changes needed to follow the grid's arrows from top-left to bottom-right."""
    rows, cols = len(grid), len(grid[0])
    dist = [[float("inf")] * cols for _ in range(rows)]
    dist[0][0] = 0
    queue = deque([(0, 0)])
    while queue:
        r, c = queue.popleft()
        for sign, (dr, dc) in enumerate(_SIGNED_MOVES, start=1):
            nr, nc = r + dr, c + dc
            if not (0 <= nr < rows and 0 <= nc < cols):
                continue
            step = int(sign != grid[r][c])
            cost = dist[r][c] + step
            if cost < dist[nr][nc]:
                dist[nr][nc] = cost
                if step:
                    queue.append((nr, nc))
                else:
                    queue.appendleft((nr, nc))
    return int(dist[rows - 1][cols - 1])


def trap_rain_water(height_map: Sequence[Sequence[int]]) -> int:
    """Volume of water held by a 2-D elevation map."""
    rows, cols = len(height_map), len(height_map[0])
    visited = [[False] * cols for _ in range(rows)]
    heap: list[tuple[int, int, int]] = []
    for r in range(rows):
        for c in range(cols):
            if r in (0, rows - 1) or c in (0, cols - 1):
                heap.append((height_map[r][c], r, c))
                visited[r][c] = True
    heapq.heapify(heap)

    water = 0
    while heap:
        level, r, c = heapq.heappop(heap)
        for nr, nc in _neighbours(r, c, rows, cols):
            if visited[nr][nc]:
                continue
            visited[nr][nc] = True
            height = height_map[nr][nc]
            water += max(0, level - height)
            heapq.heappush(heap, (max(level, height), nr, nc))
    return water


def highest_peak(is_water: Sequence[Sequence[int]]) -> list[list[int]]:
    """Heights where water is 0 and neighbours differ by at most one, maximised."""
    rows, cols = len(is_water), len(is_water[0])
    heights = [[-1] * cols for _ in range(rows)]
    queue: deque[tuple[int, int]] = deque()
    for r, row in enumerate(is_water):
        for c, water in enumerate(row):
            if water:
                heights[r][c] = 0
                queue.append((r, c))
    while queue:
        r, c = queue.popleft()
        for nr, nc in _neighbours(r, c, rows, cols):
            if heights[nr][nc] == -1:
                heights[nr][nc] = heights[r][c] + 1
                queue.append((nr, nc))
    return heights


def count_servers(grid: Sequence[Sequence[int]]) -> int:
    """Count servers sharing a row or a column with at least one other server."""
    row_counts = [sum(row) for row in grid]
    col_counts = [sum(col) for col in zip(*grid)]
    return sum(
        1
        for r, row in enumerate(grid)
        for c, cell in enumerate(row)
        if cell and (row_counts[r] > 1 or col_counts[c] > 1)
    )


def find_max_fish(grid: Sequence[Sequence[int]]) -> int:
    """Largest total of fish in one connected region of water cells."""
    rows, cols = len(grid), len(grid[0])
    remaining = [list(row) for row in grid]
    best = 0
    for r in range(rows):
        for c in range(cols):
            if not remaining[r][c]:
                continue
            total = remaining[r][c]
            remaining[r][c] = 0
            queue = deque([(r, c)])
            while queue:
                cr, cc = queue.popleft()
                for nr, nc in _neighbours(cr, cc, rows, cols):
                    if remaining[nr][nc]:
                        total += remaining[nr][nc]
                        remaining[nr][nc] = 0
                        queue.append((nr, nc))
            best = max(best, total)
    return best