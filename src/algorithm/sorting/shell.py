"""
Shell Sort — сортировка Шелла

Сортировка вставками с убывающим шагом: gap = n // 2, затем gap //= 2 до 1.
Сложность: от O(n log n) до O(n^2) в зависимости от данных. Неустойчивая.
"""

from typing import List, MutableSequence

from src.algorithm.sorting.base import sort_rows
from src.core.checkings.predicates import is_out_of_order
from src.core.types import OrderedT, SortDirection


def shell_sort(
    seq: MutableSequence[OrderedT], direction: SortDirection = SortDirection.ASCENDING
) -> None:
    """
    Сортировка Шелла на месте.

    Последний проход (gap == 1) — обычная сортировка вставками
    по почти упорядоченной последовательности.

    Args:
        seq: Изменяемая последовательность сравнимых элементов
        direction: Направление сортировки
    """
    direction = SortDirection(direction)
    n = len(seq)
    gap = n // 2

    while gap > 0:
        for i in range(gap, n):
            current = seq[i]
            j = i
            while j >= gap and is_out_of_order(seq[j - gap], current, direction):
                seq[j] = seq[j - gap]
                j -= gap
            seq[j] = current
        gap //= 2


def shell_sort_2d(
    matrix: List[MutableSequence[OrderedT]],
    direction: SortDirection = SortDirection.ASCENDING,
) -> None:
    """Сортировка Шелла каждой строки матрицы."""
    sort_rows(matrix, shell_sort, direction)
