import math

import pytest

from ari.cmp import compare_floating, partial_max, partial_min


def test_partial_min_documented_examples():
    assert partial_min(1, 2) == 1
    assert partial_min(2, 2) == 2


def test_partial_max_documented_examples():
    assert partial_max(1, 2) == 2
    assert partial_max(2, 2) == 2


def test_partial_min_prefers_first_on_equality():
    assert str(partial_min(1, 1.0)) == "1"
    assert str(partial_min(1.0, 1)) == "1.0"


def test_partial_max_prefers_first_on_equality():
    assert str(partial_max(1.0, 1)) == "1.0"
    assert str(partial_max(1, 1.0)) == "1"


def test_unordered_values_yield_second_argument():
    assert partial_min(math.nan, 3.0) == 3.0
    assert partial_max(math.nan, 3.0) == 3.0
    assert math.isnan(partial_min(3.0, math.nan))


@pytest.mark.parametrize("a, b", [(1.0, 2.0), (-5.0, 0.0), (0.5, math.inf)])
def test_compare_floating_orders_numbers(a, b):
    assert compare_floating(a, b) < 0
    assert compare_floating(b, a) > 0
    assert compare_floating(a, a) == 0


def test_compare_floating_nan_handling():
    assert compare_floating(math.nan, math.nan) == 0
    assert compare_floating(math.nan, 1.0) > 0
    assert compare_floating(1.0, math.nan) < 0


def test_compare_floating_places_nan_after_every_number():
    numbers = [-math.inf, -1.0, 0.0, 2.5, math.inf]
    results = [compare_floating(math.nan, number) for number in numbers]
    assert all(result > 0 for result in results)
    reversed_results = [compare_floating(number, math.nan) for number in numbers]
    assert all(result < 0 for result in reversed_results)