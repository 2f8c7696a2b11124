"""Solvers for the sorting and searching problem set."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Iterable, Sequence
from itertools import accumulate, chain, product

from .errors import NoSolutionError


def apartments(applicants: Iterable[int], sizes: Iterable[int], tolerance: int) -> int:
    """Return how many applicants get an apartment within ``tolerance`` of their wish."""
    wishes = sorted(applicants)
    flats = sorted(sizes)
    matched = 0
    j = 0
    for desired in wishes:
        while j < len(flats):
            size = flats[j]
            if size > desired + tolerance:
                break
            j += 1
            if abs(size - desired) <= tolerance:
                matched += 1
                break
    return matched


def apple_division(weights: Sequence[int]) -> int:
    """Return the least possible weight difference between two groups of apples."""
    return min(
        abs(sum(sign * weight for sign, weight in zip(signs, weights)))
        for signs in product((1, -1), repeat=len(weights))
    )


def concert_tickets(prices: Iterable[int], offers: Iterable[int]) -> list[int | None]:
    """Sell each customer the dearest ticket not above their offer.

    Each entry of the result is the price paid, or None when no ticket
    could be sold to that customer.
    """
    remaining = sorted(prices)
    sold: list[int | None] = []
    for offer in offers:
        index = bisect_right(remaining, offer)
        sold.append(remaining.pop(index - 1) if index else None)
    return sold


def distinct_numbers(values: Iterable[int]) -> int:
    """Return the number of distinct values."""
    return len(set(values))


def ferris_wheel(weights: Iterable[int], limit: int) -> int:
    """Return the least number of gondolas for children of the given weights.

    A gondola holds one or two children whose total weight does not
    exceed ``limit``.
    """
    ordered = sorted(weights)
    light = 0
    heavy = len(ordered)
    gondolas = 0
    while light < heavy:
        heavy -= 1
        gondolas += 1
        if light < heavy and ordered[light] + ordered[heavy] <= limit:
            light += 1
    return gondolas


def maximum_subarray_sum(values: Iterable[int]) -> int:
    """Return the largest sum of a non-empty contiguous run of values."""
    best: int | None = None
    current = 0
    for value in values:
        current = max(current + value, value)
        best = current if best is None else max(best, current)
    if best is None:
        raise ValueError("at least one value is required")
    return best


def missing_coin_sum(coins: Iterable[int]) -> int:
    """Return the smallest sum that no selection of the coins adds up to."""
    reachable = 0
    for coin in sorted(coins):
        if coin > reachable + 1:
            break
        reachable += coin
    return reachable + 1


def movie_festival(movies: Iterable[tuple[int, int]]) -> int:
    """Return the most movies that can be watched whole, one after another."""
    watched = 0
    free_from: int | None = None
    for start, end in sorted(movies, key=lambda movie: movie[1]):
        if free_from is None or start >= free_from:
            watched += 1
            free_from = end
    return watched


def restaurant_customers(visits: Iterable[tuple[int, int]]) -> int:
    """Return the largest number of customers present at the same time.

    A customer leaving at the moment another arrives is not counted twice.
    """
    events = sorted(
        chain.from_iterable(((arrival, 1), (departure, -1)) for arrival, departure in visits)
    )
    return max(chain([0], accumulate(delta for _, delta in events)))


def sum_of_two_values(values: Iterable[int], target: int) -> tuple[int, int]:
    """Return 1-based positions of two values summing to ``target``.

    The later position comes first. Raises NoSolutionError when no
    such pair exists.
    """
    seen: dict[int, int] = {}
    for position, value in enumerate(values, start=1):
        partner = seen.get(target - value)
        if partner is not None:
            return position, partner
        seen[value] = position
    raise NoSolutionError("IMPOSSIBLE")