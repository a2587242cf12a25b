"""Problems over integer sequences and small integer grids."""

import heapq
from collections import Counter
from collections.abc import Sequence
from functools import reduce
from itertools import combinations, pairwise
from operator import xor


def is_array_special(nums: Sequence[int]) -> bool:
    """True when every pair of neighbours has different parity."""
    return all((a ^ b) & 1 for a, b in pairwise(nums))


def is_sorted_rotated(nums: Sequence[int]) -> bool:
    """True when ``nums`` is a rotation of a non-decreasing sequence."""
    if not nums:
        return True
    shifted = list(nums[1:]) + [nums[0]]
    drops = sum(a > b for a, b in zip(nums, shifted))
    return drops <= 1


def is_sorted_rotated_by_offset(nums: Sequence[int]) -> bool:
    """Same as :func:`is_sorted_rotated`, locating the rotation point first."""
    n = len(nums)
    if n == 0:
        return True
    start = min(range(n), key=nums.__getitem__)
    offset = start
    while nums[offset] == nums[start]:
        offset = (offset - 1) % n
        if offset == start:
            break
    offset = (offset + 1) % n
    rotated = list(nums[offset:]) + list(nums[:offset])
    return all(a <= b for a, b in pairwise(rotated))


def longest_monotonic_subarray(nums: Sequence[int]) -> int:
    """Length of the longest strictly increasing or strictly decreasing run."""
    best = rising = falling = 1
    for prev, cur in pairwise(nums):
        if cur > prev:
            rising += 1
            falling = 1
            best = max(best, rising)
        elif cur < prev:
            falling += 1
            rising = 1
            best = max(best, falling)
        else:
            rising = falling = 1
    return best


def max_ascending_sum(nums: Sequence[int]) -> int:
    """Largest sum of a strictly ascending contiguous run."""
    best = current = nums[0]
    for prev, cur in pairwise(nums):
        current = current + cur if cur > prev else cur
        best = max(best, current)
    return best


def tuple_same_product(nums: Sequence[int]) -> int:
    """Count tuples (a, b, c, d) of distinct elements with a*b == c*d."""
    products = Counter(a * b for a, b in combinations(nums, 2))
    return sum(count * (count - 1) // 2 * 8 for count in products.values())


def count_bad_pairs(nums: Sequence[int]) -> int:
    """Count pairs i < j with j - i != nums[j] - nums[i]."""
    n = len(nums)
    groups = Counter(value - i for i, value in enumerate(nums))
    good = sum(count * (count - 1) // 2 for count in groups.values())
    return n * (n - 1) // 2 - good


def _digit_sum(n: int) -> int:
    total = 0
    while n:
        n, digit = divmod(n, 10)
        total += digit
    return total


def maximum_digit_sum_pair(nums: Sequence[int]) -> int:
    """Largest sum of two elements sharing a digit sum, or -1 if there is none."""
    best = -1
    largest: dict[int, int] = {}
    for value in nums:
        key = _digit_sum(value)
        seen = largest.get(key, 0)
        if seen:
            best = max(best, value + seen)
        largest[key] = max(seen, value)
    return best


def min_operations_to_threshold(nums: Sequence[int], k: int) -> int:
    """Merges of the two smallest values (2*min + max) until all reach ``k``."""
    heap = list(nums)
    heapq.heapify(heap)
    operations = 0
    while len(heap) >= 2 and heap[0] < k:
        x = heapq.heappop(heap)
        y = heapq.heappop(heap)
        heapq.heappush(heap, min(x, y) * 2 + max(x, y))
        operations += 1
    return operations


def ways_to_split_array(nums: Sequence[int]) -> int:
    """Count split points where the left sum is at least the right sum."""
    total = sum(nums)
    doubled_prefix = 0
    ways = 0
    for value in nums[:-1]:
        doubled_prefix += 2 * value
        if doubled_prefix >= total:
            ways += 1
    return ways


def box_moves(boxes: str) -> list[int]:
    """For each box, the moves needed to bring every ball into it."""
    result = [0] * len(boxes)
    for order in (range(len(boxes)), reversed(range(len(boxes)))):
        balls = cost = 0
        for i in order:
            result[i] += cost
            balls += boxes[i] == "1"
            cost += balls
    return result


def prefix_common_array(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """For each prefix length, how many values appear in both prefixes."""
    seen_a = seen_b = 0
    result = []
    for x, y in zip(a, b):
        seen_a |= 1 << x
        seen_b |= 1 << y
        result.append((seen_a & seen_b).bit_count())
    return result


def minimize_xor(num1: int, num2: int) -> int:
    """The value with as many set bits as ``num2`` whose xor with ``num1`` is least."""
    result = num1
    ones = num1.bit_count()
    goal = num2.bit_count()
    bit = 0
    while ones != goal:
        if (result >> bit) & 1:
            if goal < ones:
                result ^= 1 << bit
                ones -= 1
        elif goal > ones:
            result ^= 1 << bit
            ones += 1
        bit += 1
    return result


def xor_all_nums(nums1: Sequence[int], nums2: Sequence[int]) -> int:
    """Xor of ``a ^ b`` over every pair drawn from the two sequences."""
    result = 0
    if len(nums2) & 1:
        result ^= reduce(xor, nums1, 0)
    if len(nums1) & 1:
        result ^= reduce(xor, nums2, 0)
    return result


def does_valid_array_exist(derived: Sequence[int]) -> bool:
    """True when some binary array has ``derived`` as its cyclic neighbour xor."""
    return reduce(xor, derived, 0) == 0


def first_complete_index(arr: Sequence[int], mat: Sequence[Sequence[int]]) -> int:
    """Earliest index in ``arr`` at which a whole row or column of ``mat`` is painted."""
    position = {value: i for i, value in enumerate(arr)}
    lines = [*mat, *zip(*mat)]
    return min([len(arr) + 1, *(max(position[v] for v in line) for line in lines)])


def grid_game(grid: Sequence[Sequence[int]]) -> int:
    """Points left for the second robot when the first plays to minimise them."""
    top, bottom = grid[0], grid[1]
    best = sum(top[1:])
    left, right = 0, best
    for below, above in zip(bottom, top[1:]):
        left += below
        right -= above
        best = min(best, max(left, right))
    return best


def lexicographically_smallest_array(nums: Sequence[int], limit: int) -> list[int]:
    """Smallest arrangement reachable by swapping values that differ by at most ``limit``."""
    result = list(nums)
    ordered = sorted((value, i) for i, value in enumerate(nums))
    groups: list[list[tuple[int, int]]] = []
    for entry in ordered:
        if groups and entry[0] - groups[-1][-1][0] <= limit:
            groups[-1].append(entry)
        else:
            groups.append([entry])
    for group in groups:
        indices = sorted(i for _, i in group)
        for index, (value, _) in zip(indices, group):
            result[index] = value
    return result