"""Command line entry point: solve one problem from its standard input."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Sequence

from .errors import NoSolutionError
from .introductory import (
    coin_piles,
    creating_strings,
    gray_code,
    increasing_array,
    longest_repetition,
    missing_number,
    number_spiral,
    palindrome_reorder,
    permutation_by_parity,
    stick_lengths,
    tower_of_hanoi,
    trailing_zeros,
    two_knights,
    two_sets,
    weird_algorithm,
)
from .sorting import (
    apartments,
    apple_division,
    concert_tickets,
    distinct_numbers,
    ferris_wheel,
    maximum_subarray_sum,
    missing_coin_sum,
    movie_festival,
    restaurant_customers,
    sum_of_two_values,
)

Handler = Callable[[list[str]], list[str]]


def _ints(tokens: Iterable[str]) -> list[int]:
    return [int(token) for token in tokens]


def _pairs(tokens: Sequence[str], count: int) -> list[tuple[int, int]]:
    numbers = iter(_ints(tokens[: 2 * count]))
    return list(zip(numbers, numbers))


def _joined(values: Iterable[object]) -> str:
    return " ".join(str(value) for value in values)


def _weird_algorithm(tokens: list[str]) -> list[str]:
    return [_joined(weird_algorithm(int(tokens[0])))]


def _missing_number(tokens: list[str]) -> list[str]:
    return [str(missing_number(int(tokens[0]), _ints(tokens[1:])))]


def _repetitions(tokens: list[str]) -> list[str]:
    return [str(longest_repetition(tokens[0] if tokens else ""))]


def _increasing_array(tokens: list[str]) -> list[str]:
    return [str(increasing_array(_ints(tokens[1:])))]


def _permutations(tokens: list[str]) -> list[str]:
    try:
        return [_joined(permutation_by_parity(int(tokens[0])))]
    except NoSolutionError:
        return ["NO SOLUTION"]


def _number_spiral(tokens: list[str]) -> list[str]:
    return [str(number_spiral(x, y)) for x, y in _pairs(tokens[1:], int(tokens[0]))]


def _two_knights(tokens: list[str]) -> list[str]:
    return [str(count) for count in two_knights(int(tokens[0]))]


def _two_sets(tokens: list[str]) -> list[str]:
    try:
        first, second = two_sets(int(tokens[0]))
    except NoSolutionError:
        return ["NO"]
    return ["YES", str(len(first)), _joined(first), str(len(second)), _joined(second)]


def _trailing_zeros(tokens: list[str]) -> list[str]:
    return [str(trailing_zeros(int(tokens[0])))]


def _coin_piles(tokens: list[str]) -> list[str]:
    return [
        "YES" if coin_piles(a, b) else "NO"
        for a, b in _pairs(tokens[1:], int(tokens[0]))
    ]


def _palindrome_reorder(tokens: list[str]) -> list[str]:
    try:
        return [palindrome_reorder(tokens[0] if tokens else "")]
    except NoSolutionError:
        return ["NO SOLUTION"]


def _creating_strings(tokens: list[str]) -> list[str]:
    arrangements = creating_strings("".join(tokens))
    return [str(len(arrangements)), *arrangements]


def _gray_code(tokens: list[str]) -> list[str]:
    return gray_code(int(tokens[0]))


def _tower_of_hanoi(tokens: list[str]) -> list[str]:
    moves = tower_of_hanoi(int(tokens[0]))
    return [str(len(moves)), *(f"{source} {target}" for source, target in moves)]


def _apple_division(tokens: list[str]) -> list[str]:
    count = int(tokens[0])
    return [str(apple_division(_ints(tokens[1 : 1 + count])))]


def _stick_lengths(tokens: list[str]) -> list[str]:
    count = int(tokens[0])
    return [str(stick_lengths(_ints(tokens[1 : 1 + count])))]


def _distinct_numbers(tokens: list[str]) -> list[str]:
    count = int(tokens[0])
    return [str(distinct_numbers(_ints(tokens[1 : 1 + count])))]


def _apartments(tokens: list[str]) -> list[str]:
    n, m, k = _ints(tokens[:3])
    applicants = _ints(tokens[3 : 3 + n])
    sizes = _ints(tokens[3 + n : 3 + n + m])
    return [str(apartments(applicants, sizes, k))]


def _ferris_wheel(tokens: list[str]) -> list[str]:
    n, limit = _ints(tokens[:2])
    return [str(ferris_wheel(_ints(tokens[2 : 2 + n]), limit))]


def _concert_tickets(tokens: list[str]) -> list[str]:
    n, m = _ints(tokens[:2])
    prices = _ints(tokens[2 : 2 + n])
    offers = _ints(tokens[2 + n : 2 + n + m])
    return [str(-1 if price is None else price) for price in concert_tickets(prices, offers)]


def _restaurant_customers(tokens: list[str]) -> list[str]:
    return [str(restaurant_customers(_pairs(tokens[1:], int(tokens[0]))))]


def _movie_festival(tokens: list[str]) -> list[str]:
    return [str(movie_festival(_pairs(tokens[1:], int(tokens[0]))))]


def _sum_of_two_values(tokens: list[str]) -> list[str]:
    n, target = _ints(tokens[:2])
    try:
        first, second = sum_of_two_values(_ints(tokens[2 : 2 + n]), target)
    except NoSolutionError:
        return ["IMPOSSIBLE"]
    return [f"{first} {second}"]


def _maximum_subarray_sum(tokens: list[str]) -> list[str]:
    count = int(tokens[0])
    return [str(maximum_subarray_sum(_ints(tokens[1 : 1 + count])))]


def _missing_coin_sum(tokens: list[str]) -> list[str]:
    count = int(tokens[0])
    return [str(missing_coin_sum(_ints(tokens[1 : 1 + count])))]


_HANDLERS: dict[str, Handler] = {
    "weird-algorithm": _weird_algorithm,
    "missing-number": _missing_number,
    "repetitions": _repetitions,
    "increasing-array": _increasing_array,
    "permutations": _permutations,
    "number-spiral": _number_spiral,
    "two-knights": _two_knights,
    "two-sets": _two_sets,
    "trailing-zeros": _trailing_zeros,
    "coin-piles": _coin_piles,
    "palindrome-reorder": _palindrome_reorder,
    "creating-strings": _creating_strings,
    "gray-code": _gray_code,
    "tower-of-hanoi": _tower_of_hanoi,
    "apple-division": _apple_division,
    "stick-lengths": _stick_lengths,
    "distinct-numbers": _distinct_numbers,
    "apartments": _apartments,
    "ferris-wheel": _ferris_wheel,
    "concert-tickets": _concert_tickets,
    "restaurant-customers": _restaurant_customers,
    "movie-festival": _movie_festival,
    "sum-of-two-values": _sum_of_two_values,
    "maximum-subarray-sum": _maximum_subarray_sum,
    "missing-coin-sum": _missing_coin_sum,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Read a problem's input from standard input and print its answer."""
    parser = argparse.ArgumentParser(
        prog="csessolve",
        description="Solve a problem, reading its input from standard input.",
    )
    parser.add_argument("problem", choices=sorted(_HANDLERS), help="problem to solve")
    args = parser.parse_args(argv)

    tokens = sys.stdin.read().split()
    try:
        lines = _HANDLERS[args.problem](tokens)
    except (IndexError, ValueError) as exc:
        print(f"csessolve: invalid input: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write("\n".join(lines) + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())