"""
Merge Sort — сортировка слиянием

Деление по середине (lo + hi) // 2, рекурсивная сортировка половин,
слияние через вспомогательный буфер. Сложность: O(n log n) во всех случаях,
O(n) дополнительной памяти. Устойчивая.
"""

from typing import List, MutableSequence

from src.algorithm.sorting.base import sort_rows
from src.core.checkings.predicates import is_out_of_order
from src.core.types import OrderedT, SortDirection


def _merge(
    seq: MutableSequence[OrderedT],
    buffer: list,
    lo: int,
    mid: int,
    hi: int,
    direction: SortDirection,
) -> None:
    """Слияние отсортированных seq[lo:mid] и seq[mid:hi] через buffer."""
    buffer.clear()
    i, j = lo, mid

    while i < mid and j < hi:
        # При равенстве берём из левой половины: устойчивость
        if is_out_of_order(seq[i], seq[j], direction):
            buffer.append(seq[j])
            j += 1
        else:
            buffer.append(seq[i])
            i += 1

    buffer.extend(seq[i:mid])
    buffer.extend(seq[j:hi])
    seq[lo:hi] = buffer


def _merge_sort_range(
    seq: MutableSequence[OrderedT],
    buffer: list,
    lo: int,
    hi: int,
    direction: SortDirection,
) -> None:
    """Сортировка полуинтервала seq[lo:hi)."""
    if hi - lo < 2:
        return
    mid = (lo + hi) // 2
    _merge_sort_range(seq, buffer, lo, mid, direction)
    _merge_sort_range(seq, buffer, mid, hi, direction)
    _merge(seq, buffer, lo, mid, hi, direction)


def merge_sort(
    seq: MutableSequence[OrderedT], direction: SortDirection = SortDirection.ASCENDING
) -> None:
    """
    Сортировка слиянием.

    Результат записывается обратно в seq; промежуточные слияния идут
    через один общий буфер.

    Args:
        seq: Изменяемая последовательность сравнимых элементов
        direction: Направление сортировки
    """
    direction = SortDirection(direction)
    _merge_sort_range(seq, [], 0, len(seq), direction)


def merge_sort_2d(
    matrix: List[MutableSequence[OrderedT]],
    direction: SortDirection = SortDirection.ASCENDING,
) -> None:
    """Сортировка слиянием каждой строки матрицы."""
    sort_rows(matrix, merge_sort, direction)
