"""
Insertion Sort — сортировка вставками

Каждый следующий элемент сдвигается в уже отсортированный префикс.
Сложность: O(n) лучший случай, O(n^2) средний и худший. Устойчивая.
"""

from typing import List, MutableSequence

from src.algorithm.sorting.base import sort_rows
from src.core.checkings.predicates import is_out_of_order
from src.core.types import OrderedT, SortDirection


def insertion_sort(
    seq: MutableSequence[OrderedT], direction: SortDirection = SortDirection.ASCENDING
) -> None:
    """
    Сортировка вставками на месте.

    Args:
        seq: Изменяемая последовательность сравнимых элементов
        direction: Направление сортировки
    """
    direction = SortDirection(direction)
    for i in range(1, len(seq)):
        current = seq[i]
        j = i - 1
        # Сдвиг только строго "больших" элементов сохраняет устойчивость
        while j >= 0 and is_out_of_order(seq[j], current, direction):
            seq[j + 1] = seq[j]
            j -= 1
        seq[j + 1] = current


def insertion_sort_2d(
    matrix: List[MutableSequence[OrderedT]],
    direction: SortDirection = SortDirection.ASCENDING,
) -> None:
    """Сортировка вставками каждой строки матрицы."""
    sort_rows(matrix, insertion_sort, direction)
