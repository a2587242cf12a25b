import random

import pytest

from puzzlekit.dynamic import (
    count_good_strings,
    mincost_tickets,
    mincost_tickets_carry,
    num_ways,
)

MOD = 1_000_000_007


def test_num_ways_no_words():
    assert num_ways([], "abc") == 0


def test_num_ways_worked_example():
    assert num_ways(["acca", "bbbb", "caca"], "aba") == 6


def test_num_ways_single_word_equal_to_target():
    assert num_ways(["abc"], "abc") == 1


def test_num_ways_missing_letter_gives_zero():
    assert num_ways(["abc", "bca"], "z") == 0


def test_num_ways_target_longer_than_words():
    assert num_ways(["ab", "ba"], "aba") == 0


def test_num_ways_independent_of_word_order():
    words = ["acca", "bbbb", "caca", "abab"]
    assert num_ways(words, "ab") == num_ways(list(reversed(words)), "ab")


def test_num_ways_stays_below_modulus():
    words = ["a" * 60] * 50
    result = num_ways(words, "a" * 30)
    assert 0 <= result < MOD


def test_count_good_strings_binary_strings():
    assert count_good_strings(3, 3, 1, 1) == 8


@pytest.mark.parametrize("low,mid,high,zero,one", [(1, 4, 9, 1, 2), (2, 5, 12, 2, 3), (3, 3, 8, 1, 1)])
def test_count_good_strings_splits_additively(low, mid, high, zero, one):
    whole = count_good_strings(low, high, zero, one)
    left = count_good_strings(low, mid, zero, one)
    right = count_good_strings(mid + 1, high, zero, one)
    assert whole == (left + right) % MOD


def test_count_good_strings_unreachable_lengths():
    assert count_good_strings(1, 1, 2, 2) == 0


def test_count_good_strings_large_is_reduced():
    assert 0 <= count_good_strings(1, 100_000, 1, 1) < MOD


def test_mincost_tickets_no_days():
    assert mincost_tickets([], [2, 7, 15]) == 0
    assert mincost_tickets_carry([], [2, 7, 15]) == 0


def test_mincost_tickets_single_day_uses_cheapest_pass():
    costs = [9, 4, 6]
    assert mincost_tickets([100], costs) == min(costs)
    assert mincost_tickets_carry([100], costs) == min(costs)


@pytest.mark.parametrize(
    "days,costs",
    [
        ([1, 4, 6, 7, 8, 20], [2, 7, 15]),
        ([1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 30, 31], [2, 7, 15]),
        ([5, 40, 41, 42, 43, 44, 45, 200, 365], [3, 10, 20]),
    ],
)
def test_mincost_tickets_variants_agree(days, costs):
    assert mincost_tickets(days, costs) == mincost_tickets_carry(days, costs)


def test_mincost_tickets_variants_agree_random():
    rng = random.Random(7)
    for _ in range(30):
        days = sorted(rng.sample(range(1, 366), rng.randint(1, 60)))
        costs = [rng.randint(1, 20), rng.randint(1, 60), rng.randint(1, 150)]
        assert mincost_tickets(days, costs) == mincost_tickets_carry(days, costs)


def test_mincost_tickets_bounded_by_daily_passes():
    days = [1, 4, 6, 7, 8, 20, 90, 91]
    costs = [2, 7, 15]
    assert mincost_tickets(days, costs) <= len(days) * costs[0]


def test_mincost_tickets_more_days_never_cheaper():
    costs = [2, 7, 15]
    fewer = [1, 4, 6, 7, 8, 20]
    more = sorted(fewer + [50, 51])
    assert mincost_tickets(more, costs) >= mincost_tickets(fewer, costs)