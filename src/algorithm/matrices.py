"""
Matrices — Полиномиальная и матричная арифметика

Поэлементные операции над числовыми последовательностями и матрицами.
Совпадение форм — предусловие вызывающей стороны: внутри не проверяется
(zip усекает до меньшей формы). Проверка формы входных данных выполняется
на границе, в src.core.contracts (схема matrix).
"""

from itertools import zip_longest
from typing import Any, List, Sequence

from src.core.types import Matrix, NumericT


def sum_of_polynomials(
    a: Sequence[NumericT], b: Sequence[NumericT]
) -> List[NumericT]:
    """
    Сумма двух полиномов, заданных коэффициентами от младшей степени к старшей.

    Например, A(x) = 5x^3 + 2x^2 - 7x + 3 задаётся как [3, -7, 2, 5].
    Более короткий полином дополняется нулями.

    Examples:
        >>> sum_of_polynomials([3, -7, 2, 5], [1, 7])
        [4, 0, 2, 5]
    """
    return [x + y for x, y in zip_longest(a, b, fillvalue=0)]


def sum_of_the_matrices(
    a: List[List[NumericT]], b: List[List[NumericT]]
) -> List[List[NumericT]]:
    """Поэлементная сумма двух матриц одинаковой формы."""
    return [[x + y for x, y in zip(row_a, row_b)] for row_a, row_b in zip(a, b)]


def transpose_matrix(matrix: Matrix) -> Matrix:
    """
    Транспонированная матрица.

    Examples:
        >>> transpose_matrix([[1, 2, 3], [4, 5, 6]])
        [[1, 4], [2, 5], [3, 6]]
    """
    return [list(column) for column in zip(*matrix)]


def matrix_to_arr(matrix: Matrix) -> List[Any]:
    """Матрица, развёрнутая в одномерный список построчно."""
    return [el for row in matrix for el in row]


def arr_to_matrix(arr: Sequence[Any], rows: int, cols: int) -> Matrix:
    """
    Матрица rows x cols, заполненная построчно элементами arr.

    Raises:
        ValueError: если rows * cols не совпадает с длиной arr
    """
    if rows < 0 or cols < 0 or rows * cols != len(arr):
        raise ValueError(
            f"cannot reshape {len(arr)} elements into {rows}x{cols} matrix"
        )
    return [list(arr[r * cols : (r + 1) * cols]) for r in range(rows)]
