"""Small stateful containers and query processing."""

import heapq
from collections import Counter
from collections.abc import Sequence


def query_results(limit: int, queries: Sequence[Sequence[int]]) -> list[int]:
    """After each ``[ball, color]`` query, the number of distinct colours in use.

    ``limit`` is the largest ball label; balls are stored sparsely so it only bounds input.
    """
    ball_colors: dict[int, int] = {}
    color_counts: Counter[int] = Counter()
    distinct = 0
    result = []
    for ball, color in queries:
        previous = ball_colors.get(ball, 0)
        if previous:
            color_counts[previous] -= 1
            if color_counts[previous] == 0:
                distinct -= 1
        ball_colors[ball] = color
        if color_counts[color] == 0:
            distinct += 1
        color_counts[color] += 1
        result.append(distinct)
    return result


class NumberContainers:
    """Indexed slots holding numbers, answering the smallest index holding a number."""

    def __init__(self) -> None:
        self._slots: dict[int, int] = {}
        self._indices: dict[int, list[int]] = {}

    def change(self, index: int, number: int) -> None:
        """Store ``number`` at ``index``, replacing whatever was there."""
        self._slots[index] = number
        heapq.heappush(self._indices.setdefault(number, []), index)

    def find(self, number: int) -> int:
        """Smallest index currently holding ``number``, or -1."""
        heap = self._indices.get(number)
        if not heap:
            return -1
        while heap and self._slots.get(heap[0]) != number:
            heapq.heappop(heap)
        return heap[0] if heap else -1


class ProductOfNumbers:
    """A stream of integers answering the product of its last ``k`` values."""

    def __init__(self) -> None:
        self._prefix = [1]

    def add(self, num: int) -> None:
        """Append ``num`` to the stream."""
        if num == 0:
            self._prefix = [1]
        else:
            self._prefix.append(self._prefix[-1] * num)

    def get_product(self, k: int) -> int:
        """Product of the last ``k`` values added."""
        if k >= len(self._prefix):
            return 0
        return self._prefix[-1] // self._prefix[-1 - k]