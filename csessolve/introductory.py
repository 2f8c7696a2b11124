"""Solvers for the introductory problem set."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Iterator
from itertools import groupby

from .errors import NoSolutionError


def coin_piles(a: int, b: int) -> bool:
    """Tell whether both piles can be emptied by taking 2+1 or 1+2 coins."""
    x = 2 * a - b
    y = 2 * b - a
    return x >= 0 and y >= 0 and x % 3 == 0


def creating_strings(text: str) -> list[str]:
    """Return every distinct arrangement of the characters, in sorted order.

    Whitespace in the input is ignored.
    """
    counts = Counter(ch for ch in text if not ch.isspace())
    letters = sorted(counts)
    length = sum(counts.values())
    result: list[str] = []
    prefix: list[str] = []

    def extend() -> None:
        if len(prefix) == length:
            result.append("".join(prefix))
            return
        for ch in letters:
            if not counts[ch]:
                continue
            counts[ch] -= 1
            prefix.append(ch)
            extend()
            prefix.pop()
            counts[ch] += 1

    extend()
    return result


def gray_code(n: int) -> list[str]:
    """Return the 2**n codes of a Gray code, lowest bit written first."""
    codes = []
    for i in range(1 << n):
        gray = i ^ (i >> 1)
        codes.append("".join(str((gray >> bit) & 1) for bit in range(n)))
    return codes


def increasing_array(values: Iterable[int]) -> int:
    """Return the number of unit increments that make the sequence non-decreasing."""
    moves = 0
    highest: int | None = None
    for value in values:
        if highest is None or value >= highest:
            highest = value
        else:
            moves += highest - value
    return moves


def missing_number(n: int, numbers: Iterable[int]) -> int:
    """Return the number of 1..n that is absent from ``numbers``."""
    return n * (n + 1) // 2 - sum(numbers)


def number_spiral(x: int, y: int) -> int:
    """Return the number at coordinates (x, y) of the infinite number spiral."""
    diag = max(x, y) - 1
    diagonal = 1 + diag * (diag + 1)
    sign = -1 if diag % 2 else 1
    return sign * (y - x) + diagonal


def palindrome_reorder(text: str) -> str:
    """Rearrange the characters into a palindrome.

    Raises NoSolutionError when more than one character occurs an odd
    number of times.
    """
    counts = Counter(text)
    odd_chars = [ch for ch in sorted(counts) if counts[ch] % 2]
    if len(odd_chars) > 1:
        raise NoSolutionError()
    odd = odd_chars[0] if odd_chars else None

    paired = [ch for ch in sorted(counts) if ch != odd]
    left = "".join(ch * (counts[ch] // 2) for ch in reversed(paired))
    middle = odd * counts[odd] if odd is not None else ""
    right = "".join(ch * (counts[ch] // 2) for ch in paired)
    return left + middle + right


def _check_permutation_size(n: int) -> None:
    if n != 1 and n < 4:
        raise NoSolutionError()


def permutation_by_blocks(n: int) -> list[int]:
    """Return a permutation of 1..n with no neighbours differing by one.

    Built from blocks of four; raises NoSolutionError when none exists.
    """
    _check_permutation_size(n)
    if n == 1:
        return [1]

    result: list[int] = []
    start, limit = 0, n
    remainder = n % 4
    if remainder == 1:
        start = 1
    elif remainder == 2:
        start, limit = 1, n - 1
        result.append(1)
    elif remainder == 3:
        start, limit = 3, n - 1
        result.extend((3, 1))

    while start // 4 < limit // 4:
        x = start + 1
        result.extend((x + 1, x + 3, x, x + 2))
        start += 4

    if remainder == 1:
        result.append(1)
    elif remainder == 2:
        result.append(n)
    elif remainder == 3:
        result.append(2)
    return result


def permutation_by_parity(n: int) -> list[int]:
    """Return a permutation of 1..n with no neighbours differing by one.

    Lists the even numbers, then the odd ones; raises NoSolutionError
    when none exists.
    """
    _check_permutation_size(n)
    if n == 1:
        return [1]
    return [*range(2, n + 1, 2), *range(1, n + 1, 2)]


def longest_repetition(sequence: str) -> int:
    """Return the length of the longest run of one repeated character."""
    return max((sum(1 for _ in run) for _, run in groupby(sequence)), default=0)


def stick_lengths(lengths: Iterable[int]) -> int:
    """Return the least total cost of making all sticks equally long."""
    ordered = sorted(lengths)
    if not ordered:
        raise ValueError("at least one stick is required")
    target = ordered[len(ordered) // 2]
    return sum(abs(length - target) for length in ordered)


def _hanoi(source: int, target: int, spare: int, depth: int) -> Iterator[tuple[int, int]]:
    if depth < 0:
        return
    yield from _hanoi(source, spare, target, depth - 1)
    yield source, target
    yield from _hanoi(spare, target, source, depth - 1)


def tower_of_hanoi(n: int) -> list[tuple[int, int]]:
    """Return the moves that carry n disks from peg 1 to peg 3."""
    return list(_hanoi(1, 3, 2, n - 1))


def trailing_zeros(n: int) -> int:
    """Return the number of trailing zeros of n factorial."""
    zeros = 0
    power = 5
    while n >= power:
        zeros += n // power
        power *= 5
    return zeros


def two_knights(n: int) -> list[int]:
    """For k = 1..n, count the ways to place two non-attacking knights on a k×k board."""
    result = [value for size, value in ((1, 0), (2, 6), (3, 28), (4, 96)) if n >= size]
    for k in range(5, n + 1):
        area = k * k
        inner = k - 4
        placements = (
            4 * (area - 3)
            + 8 * (area - 4)
            + 4 * inner * (area - 5)
            + 4 * inner * (area - 7)
            + inner * inner * (area - 9)
            + 4 * (area - 5)
        )
        result.append(placements // 2)
    return result


def two_sets(n: int) -> tuple[list[int], list[int]]:
    """Split 1..n into two sets of equal sum.

    Raises NoSolutionError when the total is odd.
    """
    if n < 1:
        raise ValueError("n must be positive")
    half = n * (n + 1) // 2
    if half % 2:
        raise NoSolutionError("NO")
    half //= 2

    first: list[int] = []
    top = n
    while half > top:
        first.append(top)
        half -= top
        top -= 1
    first.append(half)
    second = [*range(1, half), *range(half + 1, top + 1)]
    return first, second


def weird_algorithm(n: int) -> list[int]:
    """Return the Collatz sequence starting at n and ending at 1."""
    if n < 1:
        raise ValueError("n must be positive")
    sequence = [n]
    while n != 1:
        n = n * 3 + 1 if n % 2 else n // 2
        sequence.append(n)
    return sequence