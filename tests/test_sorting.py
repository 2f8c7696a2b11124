import pytest

from csessolve.errors import NoSolutionError
from csessolve.sorting import (
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


def test_apartments_identical_sizes_all_matched():
    wishes = [60, 45, 80, 60]
    assert apartments(wishes, list(wishes), 0) == len(wishes)


def test_apartments_bounded_by_smaller_side():
    applicants = [60, 45, 80, 60]
    sizes = [30, 60, 75]
    result = apartments(applicants, sizes, 5)
    assert result <= min(len(applicants), len(sizes))


def test_apartments_grows_with_tolerance():
    applicants = [60, 45, 80, 60, 12, 99]
    sizes = [30, 60, 75, 14, 50]
    counts = [apartments(applicants, sizes, k) for k in range(0, 60, 5)]
    assert counts == sorted(counts)
    assert counts[-1] == len(sizes)


def test_apartments_nothing_close_enough():
    assert apartments([10, 20], [100, 200], 5) == apartments([], [], 5)


def test_apple_division_equal_pair():
    assert apple_division([7, 7]) == apple_division([])


def test_apple_division_single_apple():
    assert apple_division([13]) == 13


def test_apple_division_parity_and_bound():
    weights = [3, 2, 7, 4, 1]
    result = apple_division(weights)
    assert (sum(weights) - result) % 2 == 0
    assert 0 <= result <= sum(weights)


def test_concert_tickets_example():
    assert concert_tickets([5, 3, 7, 8, 5], [4, 8, 3]) == [3, 8, None]


def test_concert_tickets_sells_within_offer_and_stock():
    prices = [5, 3, 7, 8, 5]
    offers = [6, 6, 6, 100, 100, 100]
    sold = concert_tickets(prices, offers)
    assert len(sold) == len(offers)
    for price, offer in zip(sold, offers):
        if price is not None:
            assert price <= offer
    taken = sorted(p for p in sold if p is not None)
    remaining = list(prices)
    for price in taken:
        remaining.remove(price)
    assert len(remaining) == len(prices) - len(taken)


def test_concert_tickets_no_tickets():
    assert concert_tickets([], [5, 9]) == [None, None]


def test_distinct_numbers_example():
    assert distinct_numbers([2, 3, 2, 2, 3]) == 2


def test_distinct_numbers_all_different():
    values = [9, 1, 4, 7]
    assert distinct_numbers(values) == len(values)


def test_ferris_wheel_example():
    assert ferris_wheel([7, 2, 3, 9], 10) == 3


def test_ferris_wheel_heavy_children_ride_alone():
    weights = [8, 9, 10, 7]
    assert ferris_wheel(weights, 10) == len(weights)


def test_ferris_wheel_bounds():
    weights = [1, 5, 2, 8, 3, 3, 6]
    result = ferris_wheel(weights, 9)
    assert (len(weights) + 1) // 2 <= result <= len(weights)


def test_ferris_wheel_empty():
    assert ferris_wheel([], 10) == len([])


def test_maximum_subarray_sum_example():
    assert maximum_subarray_sum([-1, 3, -2, 5, 3, -5, 2, 2]) == 9


def test_maximum_subarray_sum_all_positive_is_total():
    values = [4, 1, 6, 2]
    assert maximum_subarray_sum(values) == sum(values)


def test_maximum_subarray_sum_all_negative_is_largest():
    values = [-8, -3, -5]
    assert maximum_subarray_sum(values) == -3


def test_maximum_subarray_sum_empty_raises():
    with pytest.raises(ValueError):
        maximum_subarray_sum([])


def test_missing_coin_sum_example():
    assert missing_coin_sum([2, 9, 1, 2, 7]) == 6


def test_missing_coin_sum_all_ones():
    coins = [1] * 5
    assert missing_coin_sum(coins) == len(coins) + 1


def test_missing_coin_sum_powers_of_two_cover_everything():
    coins = [1, 2, 4, 8]
    assert missing_coin_sum(coins) == sum(coins) + 1


def test_movie_festival_example():
    assert movie_festival([(3, 5), (4, 9), (5, 8)]) == 2


def test_movie_festival_back_to_back():
    movies = [(1, 2), (2, 3), (3, 4), (4, 5)]
    assert movie_festival(movies) == len(movies)


def test_movie_festival_all_overlapping():
    assert movie_festival([(1, 10)] * 4) == movie_festival([(1, 10)])


def test_restaurant_customers_example():
    assert restaurant_customers([(5, 8), (2, 4), (3, 9)]) == 2


def test_restaurant_customers_nested_visits():
    visits = [(1, 100), (2, 90), (3, 80), (4, 70)]
    assert restaurant_customers(visits) == len(visits)


def test_restaurant_customers_disjoint_visits():
    assert restaurant_customers([(1, 2), (3, 4), (5, 6)]) == restaurant_customers([(1, 2)])


def test_sum_of_two_values_example():
    assert sum_of_two_values([2, 7, 5, 1], 8) == (4, 2)


def test_sum_of_two_values_positions_add_up():
    values = [10, 4, 9, 13, 6, 2]
    first, second = sum_of_two_values(values, 15)
    assert first != second
    assert values[first - 1] + values[second - 1] == 15


def test_sum_of_two_values_impossible():
    with pytest.raises(NoSolutionError):
        sum_of_two_values([1, 2, 3], 100)