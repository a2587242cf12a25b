"""String problems: edits, matching, counting and bracket balancing."""

from collections import Counter
from collections.abc import Sequence
from functools import reduce
from itertools import accumulate, combinations

_VOWELS = frozenset("aeiou")
_DIGITS = frozenset("0123456789")
_ALPHABET = 26


def are_almost_equal(s1: str, s2: str) -> bool:
    """True when at most one swap of two letters in one string makes them equal."""
    if len(s1) != len(s2):
        return False
    diffs = [i for i, (a, b) in enumerate(zip(s1, s2)) if a != b]
    if not diffs:
        return True
    if len(diffs) != 2:
        return False
    first, second = diffs
    return s1[first] == s2[second] and s1[second] == s2[first]


def clear_digits(s: str) -> str:
    """Remove each digit together with the closest non-digit to its left."""
    kept: list[str] = []
    for ch in s:
        if ch in _DIGITS:
            if kept:
                kept.pop()
        else:
            kept.append(ch)
    return "".join(kept)


def remove_occurrences(s: str, part: str) -> str:
    """Repeatedly delete the leftmost occurrence of ``part`` until none is left."""
    if not part:
        raise ValueError("part must not be empty")
    while part in s:
        s = s.replace(part, "", 1)
    return s


def max_split_score(s: str) -> int:
    """Best score over splits into two non-empty parts: zeros on the left plus ones on the right."""
    if len(s) < 2:
        raise ValueError("string must have at least two characters")
    zeros = ones = 0
    best = None
    for ch in s[:-1]:
        zeros += ch == "0"
        ones += ch == "1"
        score = zeros - ones
        if best is None or score > best:
            best = score
    return best + s.count("1")


def _is_vowel_word(word: str) -> bool:
    return word[0] in _VOWELS and word[-1] in _VOWELS


def vowel_strings(words: Sequence[str], queries: Sequence[Sequence[int]]) -> list[int]:
    """For each inclusive range, count the words starting and ending with a vowel."""
    prefix = [0, *accumulate(int(_is_vowel_word(w)) for w in words)]
    return [prefix[right + 1] - prefix[left] for left, right in queries]


def vowel_strings_sparse(words: Sequence[str], queries: Sequence[Sequence[int]]) -> list[int]:
    """Same as :func:`vowel_strings`, answering ranges from a table of power-of-two sums."""
    table = [[int(_is_vowel_word(w)) for w in words]]
    width = 1
    while 2 * width <= len(words):
        previous = table[-1]
        table.append([previous[j] + previous[j + width] for j in range(len(words) - 2 * width + 1)])
        width *= 2

    def query(left: int, right: int) -> int:
        total = 0
        for level in reversed(range(len(table))):
            size = 1 << level
            if size <= right - left + 1:
                total += table[level][left]
                left += size
        return total

    return [query(left, right) for left, right in queries]


def count_palindromic_subsequence(s: str) -> int:
    """Count distinct length-3 palindromic subsequences."""
    total = 0
    for letter in set(s):
        first, last = s.index(letter), s.rindex(letter)
        if last > first:
            total += len(set(s[first + 1:last]))
    return total


def shifting_letters(s: str, shifts: Sequence[Sequence[int]]) -> str:
    """Apply range shifts ``[start, end, direction]``; direction 0 moves letters backwards."""
    deltas = [0] * (len(s) + 1)
    for start, end, direction in shifts:
        step = 1 if direction else -1
        deltas[start] += step
        deltas[end + 1] -= step
    shifted = []
    for ch, offset in zip(s, accumulate(deltas)):
        shifted.append(chr((ord(ch) - ord("a") + offset) % _ALPHABET + ord("a")))
    return "".join(shifted)


def string_matching(words: Sequence[str]) -> list[str]:
    """Words that occur as a substring of some other word, in input order."""
    return [
        word
        for i, word in enumerate(words)
        if any(word in other for j, other in enumerate(words) if j != i)
    ]


def count_prefix_suffix_pairs(words: Sequence[str]) -> int:
    """Count pairs i < j where ``words[i]`` is both a prefix and a suffix of ``words[j]``."""
    return sum(
        later.startswith(earlier) and later.endswith(earlier)
        for earlier, later in combinations(words, 2)
    )


def prefix_count(words: Sequence[str], pref: str) -> int:
    """Count the words that start with ``pref``."""
    return sum(word.startswith(pref) for word in words)


def word_subsets(words1: Sequence[str], words2: Sequence[str]) -> list[str]:
    """Words of ``words1`` that contain every word of ``words2`` as a letter multiset."""
    required = reduce(lambda acc, word: acc | Counter(word), words2, Counter())
    result = []
    for word in words1:
        counts = Counter(word)
        if all(counts[ch] >= need for ch, need in required.items()):
            result.append(word)
    return result


def can_construct(s: str, k: int) -> bool:
    """True when all letters of ``s`` can form exactly ``k`` non-empty palindromes."""
    if len(s) < k:
        return False
    odd = sum(count & 1 for count in Counter(s).values())
    return k >= max(1, odd)


def _sweep(pairs, opener: str) -> tuple[int, int] | None:
    opens = closes = free = 0
    for ch, lock in pairs:
        if ch == opener:
            opens += 1
        else:
            if lock == "0":
                free += 1
            closes += 1
        if closes > opens:
            if not free:
                return None
            opens += 1
            closes -= 1
            free -= 1
    return opens, closes


def can_be_valid(s: str, locked: str) -> bool:
    """True when flipping unlocked brackets can make ``s`` balanced."""
    forward = _sweep(zip(s, locked), "(")
    if forward is None:
        return False
    left, right = forward
    if (left & 1) != (right & 1):
        return False
    if left == right:
        return True
    return _sweep(zip(reversed(s), reversed(locked)), ")") is not None


def minimum_length(s: str) -> int:
    """Shortest length after repeatedly deleting a letter's nearest copies on both sides."""
    return sum(2 - (count & 1) for count in Counter(s).values())