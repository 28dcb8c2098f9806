"""
Тесты для Matrices — полиномиальная и матричная арифметика
"""

import pytest

from src.algorithm.matrices import (
    arr_to_matrix,
    matrix_to_arr,
    sum_of_polynomials,
    sum_of_the_matrices,
    transpose_matrix,
)


class TestSumOfPolynomials:
    """Тесты sum_of_polynomials."""

    def test_equal_degree(self):
        assert sum_of_polynomials([1, 2, 3], [4, 5, 6]) == [5, 7, 9]

    def test_different_degree(self):
        # (5x^3 + 2x^2 - 7x + 3) + (7x + 1)
        assert sum_of_polynomials([3, -7, 2, 5], [1, 7]) == [4, 0, 2, 5]
        assert sum_of_polynomials([1], [0, 0, 2]) == [1, 0, 2]

    def test_empty(self):
        assert sum_of_polynomials([], []) == []
        assert sum_of_polynomials([], [1, 2]) == [1, 2]


class TestMatrices:
    """Тесты матричных операций."""

    def test_sum(self):
        a = [[1, 2], [3, 4]]
        b = [[10, 20], [30, 40]]
        assert sum_of_the_matrices(a, b) == [[11, 22], [33, 44]]

    def test_sum_does_not_mutate(self):
        a = [[1, 2]]
        b = [[3, 4]]
        sum_of_the_matrices(a, b)
        assert a == [[1, 2]]
        assert b == [[3, 4]]

    def test_sum_empty(self):
        assert sum_of_the_matrices([], []) == []

    def test_transpose(self):
        assert transpose_matrix([[1, 2, 3], [4, 5, 6]]) == [[1, 4], [2, 5], [3, 6]]

    def test_transpose_twice_is_identity(self):
        m = [[1, 2], [3, 4], [5, 6]]
        assert transpose_matrix(transpose_matrix(m)) == m

    def test_transpose_empty(self):
        assert transpose_matrix([]) == []


class TestReshape:
    """Тесты matrix_to_arr / arr_to_matrix."""

    def test_flatten(self):
        assert matrix_to_arr([[1, 2], [3, 4], [5, 6]]) == [1, 2, 3, 4, 5, 6]

    def test_reshape(self):
        assert arr_to_matrix([1, 2, 3, 4, 5, 6], 2, 3) == [[1, 2, 3], [4, 5, 6]]

    def test_reshape_size_mismatch(self):
        with pytest.raises(ValueError, match="cannot reshape"):
            arr_to_matrix([1, 2, 3], 2, 2)

    def test_reshape_empty(self):
        assert arr_to_matrix([], 0, 5) == []
