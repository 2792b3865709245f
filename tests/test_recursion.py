import itertools
import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.recursion import factorial, fibonacci, permutations, tail_factorial


def test_factorial_example():
    assert factorial(5) == 120
    assert tail_factorial(5) == 120


@given(st.integers(min_value=0, max_value=200))
def test_factorials_agree_with_math(n):
    assert factorial(n) == math.factorial(n)
    assert tail_factorial(n) == math.factorial(n)


@given(st.integers(min_value=0, max_value=50), st.integers(min_value=-100, max_value=100))
def test_tail_factorial_scales_accumulator(n, acc):
    assert tail_factorial(n, acc) == acc * factorial(n)


@pytest.mark.parametrize("func", [factorial, tail_factorial])
def test_factorial_rejects_negative(func):
    with pytest.raises(ValueError):
        func(-1)


def test_fibonacci_example():
    assert fibonacci(10) == 55


@pytest.mark.parametrize("n", [0, 1, -3])
def test_fibonacci_small_values_returned_as_is(n):
    assert fibonacci(n) == n


@given(st.integers(min_value=2, max_value=500))
def test_fibonacci_recurrence(n):
    assert fibonacci(n) == fibonacci(n - 1) + fibonacci(n - 2)


@given(st.lists(st.integers(), max_size=6))
def test_permutations_are_all_orderings(values):
    result = permutations(values)
    assert len(result) == math.factorial(len(values))
    assert sorted(result) == sorted(list(p) for p in itertools.permutations(values))


@given(st.lists(st.integers(), min_size=1, max_size=6))
def test_first_permutation_is_input_order(values):
    assert permutations(values)[0] == values


def test_permutations_leave_input_untouched():
    values = [1, 2, 3]
    result = permutations(values)
    assert values == [1, 2, 3]
    assert len({tuple(p) for p in result}) == len(result)