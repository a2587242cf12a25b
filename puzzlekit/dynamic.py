"""Counting and optimisation problems solved with dynamic programming."""

from collections import Counter
from collections.abc import Sequence

MOD = 1_000_000_007

_PASS_LENGTHS = (1, 7, 30)
_UNREACHABLE = 500_000


def num_ways(words: Sequence[str], target: str) -> int:
    """Count ways to build ``target`` from columns of ``words`` in increasing order.

    All words have the same length. The result is taken modulo 1e9+7.
    """
    if not words:
        return 0
    width = len(words[0])
    columns = [Counter(word[j] for word in words) for j in range(width)]

    previous = [1] * (width + 1)
    for letter in target:
        current = [0] * (width + 1)
        for j, column in enumerate(columns, start=1):
            current[j] = (current[j - 1] + previous[j - 1] * column[letter]) % MOD
        previous = current
    return previous[width]


def count_good_strings(low: int, high: int, zero: int, one: int) -> int:
    """Count strings with length in ``[low, high]`` made of blocks of ``zero`` and ``one``."""
    ways = [0] * (high + 1)
    ways[0] = 1
    total = 0
    for length in range(1, high + 1):
        if length >= zero:
            ways[length] = (ways[length] + ways[length - zero]) % MOD
        if length >= one:
            ways[length] = (ways[length] + ways[length - one]) % MOD
        if length >= low:
            total = (total + ways[length]) % MOD
    return total


def mincost_tickets(days: Sequence[int], costs: Sequence[int]) -> int:
    """Cheapest set of 1-, 7- and 30-day passes covering every travel day of a year."""
    travel = set(days)
    best = [0] * 366
    for day in range(1, 366):
        if day in travel:
            best[day] = min(
                best[day - 1] + costs[0],
                best[max(0, day - 7)] + costs[1],
                best[max(0, day - 30)] + costs[2],
            )
        else:
            best[day] = best[day - 1]
    return best[365]


def mincost_tickets_carry(days: Sequence[int], costs: Sequence[int]) -> int:
    """Same as :func:`mincost_tickets`, tracking how many covered days are left over."""
    previous = [_UNREACHABLE] * 30
    previous[0] = 0
    last_day = 0
    for day in days:
        gap = day - last_day
        last_day = day
        current = [_UNREACHABLE] * 30
        for extra, cost in enumerate(previous):
            if extra >= gap:
                remaining = extra - gap
                current[remaining] = min(current[remaining], cost)
        cheapest = min(previous)
        for length, price in zip(_PASS_LENGTHS, costs):
            current[length - 1] = min(current[length - 1], cheapest + price)
        previous = current
    return min(previous)