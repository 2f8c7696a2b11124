# csessolve

Plain Python solutions to a set of classic algorithm problems. There are
two sets. The introductory set covers number puzzles, strings and
constructions. The sorting-and-searching set covers greedy and
two-pointer problems. The package has no dependencies outside the
standard library.

Each solution is an ordinary function. It takes Python values and
returns Python values. A separate `csessolve` command reads a problem's
input from standard input and prints the answer.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Library use

```python
from csessolve.introductory import missing_number, trailing_zeros
from csessolve.sorting import distinct_numbers

trailing_zeros(20)                 # 4
missing_number(5, [2, 3, 1, 5])    # 4
distinct_numbers([2, 3, 2, 2, 3])  # 2
```

Some problems can have no answer. In that case the function raises
`csessolve.errors.NoSolutionError`, which is a subclass of `ValueError`.
This applies to `palindrome_reorder`, both permutation constructions,
`two_sets` and `sum_of_two_values`. Some inputs are plainly invalid, such
as a non-positive `n` for `two_sets` or `weird_algorithm`, or an empty
input for `stick_lengths` or `maximum_subarray_sum`. These raise
`ValueError`.

```python
from csessolve.errors import NoSolutionError
from csessolve.introductory import palindrome_reorder

try:
    palindrome_reorder("ABC")
except NoSolutionError:
    print("no palindrome possible")
```

### Introductory problems (`csessolve.introductory`)

| Function | Returns |
| --- | --- |
| `coin_piles(a, b)` | `True` if both piles can be emptied by taking 2+1 or 1+2 coins |
| `creating_strings(text)` | every distinct arrangement of the characters, sorted; whitespace is ignored |
| `gray_code(n)` | the `2**n` codes of a Gray code as bit strings, lowest bit first |
| `increasing_array(values)` | unit increments needed to make the sequence non-decreasing |
| `missing_number(n, numbers)` | the number of `1..n` absent from `numbers` |
| `number_spiral(x, y)` | the value at a cell of the number spiral |
| `palindrome_reorder(text)` | a palindrome made from the characters of `text` |
| `permutation_by_blocks(n)` | a permutation of `1..n` with no neighbours differing by one, built from blocks of four |
| `permutation_by_parity(n)` | the same kind of permutation: the evens, then the odds |
| `longest_repetition(sequence)` | the length of the longest run of one character |
| `stick_lengths(lengths)` | the least total cost to make all sticks equally long |
| `tower_of_hanoi(n)` | the list of `(from, to)` peg moves that carry `n` discs from peg 1 to peg 3 |
| `trailing_zeros(n)` | the number of trailing zeros of `n!` |
| `two_knights(n)` | for each board size `1..n`, the number of ways to place two non-attacking knights |
| `two_sets(n)` | two lists that split `1..n` into equal sums |
| `weird_algorithm(n)` | the Collatz sequence from `n` down to 1 |

### Sorting and searching (`csessolve.sorting`)

| Function | Returns |
| --- | --- |
| `apartments(applicants, sizes, tolerance)` | how many applicants get an apartment within `tolerance` of their wish |
| `apple_division(weights)` | the least weight difference between two groups |
| `concert_tickets(prices, offers)` | for each customer, the price paid, or `None` if no ticket could be sold |
| `distinct_numbers(values)` | the number of distinct values |
| `ferris_wheel(weights, limit)` | the fewest gondolas, each holding one or two children within `limit` |
| `maximum_subarray_sum(values)` | the largest sum of a non-empty contiguous run |
| `missing_coin_sum(coins)` | the smallest sum that no selection of the coins makes |
| `movie_festival(movies)` | the most `(start, end)` movies that can be watched whole |
| `restaurant_customers(visits)` | the most customers present at once, from `(arrival, departure)` pairs |
| `sum_of_two_values(values, target)` | 1-based positions of two values summing to `target`, later position first |

## Command line

```
csessolve PROBLEM < input.txt
```

`PROBLEM` is one of these:

`apartments`, `apple-division`, `coin-piles`, `concert-tickets`,
`creating-strings`, `distinct-numbers`, `ferris-wheel`, `gray-code`,
`increasing-array`, `maximum-subarray-sum`, `missing-coin-sum`,
`missing-number`, `movie-festival`, `number-spiral`, `palindrome-reorder`,
`permutations`, `repetitions`, `restaurant-customers`,
`stick-lengths`, `sum-of-two-values`, `tower-of-hanoi`,
`trailing-zeros`, `two-knights`, `two-sets` and `weird-algorithm`.

The input is the problem's whitespace-separated tokens. Where a problem
has a list, a leading count comes first.

```
$ echo 3 | csessolve weird-algorithm
3 10 5 16 8 4 2 1
$ printf '3\n2 3\n1 1\n4 2\n' | csessolve number-spiral
8
1
15
```

When a problem has no answer, the command prints a marker line instead
of raising:

- `NO SOLUTION` for `permutations` and `palindrome-reorder`
- `NO` for `two-sets`
- `IMPOSSIBLE` for `sum-of-two-values`
- `-1` for each customer who gets no ticket in `concert-tickets`

The `permutations` command uses `permutation_by_parity`. If the input is
malformed, the command writes a message to standard error and exits
with status 1.

Run `csessolve --help` for the full usage.