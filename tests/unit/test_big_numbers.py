"""
Тесты для Big Numbers — арифметика массивов цифр
"""

import math

import pytest

from src.algorithm.big_numbers import big_product, big_sum, factorial


def _digits(n):
    return [int(d) for d in str(n)]


class TestBigSum:
    """Тесты big_sum."""

    def test_carry_extends_length(self):
        assert big_sum([9, 9], [1]) == [1, 0, 0]

    def test_matches_int_arithmetic(self):
        a, b = 98765432109876543210, 12345678901234567890
        assert big_sum(_digits(a), _digits(b)) == _digits(a + b)

    def test_zero(self):
        assert big_sum([0], [0]) == [0]


class TestBigProduct:
    """Тесты big_product."""

    def test_small(self):
        assert big_product([1, 2], [1, 2]) == [1, 4, 4]

    def test_by_zero(self):
        assert big_product([1, 2, 3], [0]) == [0]

    def test_matches_int_arithmetic(self):
        a, b = 123456789123456789, 987654321987654321
        assert big_product(_digits(a), _digits(b)) == _digits(a * b)


class TestFactorial:
    """Тесты factorial."""

    @pytest.mark.parametrize("n", [0, 1, 5, 20, 30])
    def test_matches_math_factorial(self, n):
        assert factorial(n) == str(math.factorial(n))

    def test_negative_rejected(self):
        with pytest.raises(ValueError, match="negative"):
            factorial(-1)
