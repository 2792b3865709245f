import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.bits import bit_difference, count_set_bits, is_kth_bit_set, xor_swap


def test_count_set_bits_source_example():
    # 29 = 0b11101
    assert count_set_bits(29) == 4


def test_count_set_bits_zero():
    assert count_set_bits(0) == 0


def test_count_set_bits_negative_is_32_bit_word():
    assert count_set_bits(-1) == 32


@given(st.integers(min_value=0, max_value=2**64))
def test_count_set_bits_matches_binary_digits(n):
    assert count_set_bits(n) == bin(n).count("1")


def test_bit_difference_source_example():
    # 29 = 11101, 15 = 01111, XOR = 10010
    assert bit_difference(29, 15) == 2


def test_bit_difference_with_negative_operand():
    assert bit_difference(-1, 0) == 32


@given(st.integers(min_value=0, max_value=2**40), st.integers(min_value=0, max_value=2**40))
def test_bit_difference_is_symmetric(a, b):
    assert bit_difference(a, b) == bit_difference(b, a)


@given(st.integers(min_value=0, max_value=2**40))
def test_bit_difference_with_self_is_zero(a):
    assert bit_difference(a, a) == 0


def test_is_kth_bit_set_source_example():
    # 10 = 0b1010
    assert is_kth_bit_set(10, 1) is True
    assert is_kth_bit_set(10, 0) is False
    assert is_kth_bit_set(10, 3) is True


@given(st.integers(min_value=0, max_value=2**32), st.integers(min_value=0, max_value=40))
def test_is_kth_bit_set_agrees_with_mask(n, k):
    assert is_kth_bit_set(n, k) == (n & (1 << k) != 0)


def test_is_kth_bit_set_rejects_negative_position():
    with pytest.raises(ValueError):
        is_kth_bit_set(10, -1)


def test_xor_swap_source_example():
    assert xor_swap(5, 7) == (7, 5)


@given(st.integers(), st.integers())
def test_xor_swap_swaps_any_pair(a, b):
    assert xor_swap(a, b) == (b, a)


@given(st.integers())
def test_xor_swap_equal_values(a):
    assert xor_swap(a, a) == (a, a)