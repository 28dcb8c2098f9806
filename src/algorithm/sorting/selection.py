"""
Selection Sort — сортировка выбором

Из неотсортированного суффикса выбирается экстремум и ставится в его начало.
Сложность: O(n^2) во всех случаях. Неустойчивая.
"""

from typing import List, MutableSequence

from src.algorithm.sorting.base import sort_rows
from src.core.checkings.predicates import is_out_of_order
from src.core.types import OrderedT, SortDirection


def selection_sort(
    seq: MutableSequence[OrderedT], direction: SortDirection = SortDirection.ASCENDING
) -> None:
    """
    Сортировка выбором на месте.

    Args:
        seq: Изменяемая последовательность сравнимых элементов
        direction: Направление сортировки
    """
    direction = SortDirection(direction)
    n = len(seq)
    for i in range(n - 1):
        extremum = i
        for j in range(i + 1, n):
            if is_out_of_order(seq[extremum], seq[j], direction):
                extremum = j
        if extremum != i:
            seq[i], seq[extremum] = seq[extremum], seq[i]


def selection_sort_2d(
    matrix: List[MutableSequence[OrderedT]],
    direction: SortDirection = SortDirection.ASCENDING,
) -> None:
    """Сортировка выбором каждой строки матрицы."""
    sort_rows(matrix, selection_sort, direction)
