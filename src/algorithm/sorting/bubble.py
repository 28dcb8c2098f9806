"""
Bubble Sort — сортировка пузырьком

Проходы с обменом соседних элементов до первого прохода без обменов.
Сложность: O(n) лучший случай, O(n^2) средний и худший. Устойчивая.
"""

from typing import List, MutableSequence

from src.algorithm.sorting.base import sort_rows
from src.core.checkings.predicates import is_out_of_order
from src.core.types import OrderedT, SortDirection


def bubble_sort(
    seq: MutableSequence[OrderedT], direction: SortDirection = SortDirection.ASCENDING
) -> None:
    """
    Сортировка пузырьком на месте.

    После k-го прохода последние k элементов уже на своих местах,
    поэтому каждый следующий проход короче на один элемент.

    Args:
        seq: Изменяемая последовательность сравнимых элементов
        direction: Направление сортировки
    """
    direction = SortDirection(direction)
    unsorted_end = len(seq) - 1

    while unsorted_end > 0:
        swapped = False
        for i in range(unsorted_end):
            if is_out_of_order(seq[i], seq[i + 1], direction):
                seq[i], seq[i + 1] = seq[i + 1], seq[i]
                swapped = True
        if not swapped:
            return
        unsorted_end -= 1


def bubble_sort_2d(
    matrix: List[MutableSequence[OrderedT]],
    direction: SortDirection = SortDirection.ASCENDING,
) -> None:
    """Сортировка пузырьком каждой строки матрицы."""
    sort_rows(matrix, bubble_sort, direction)
