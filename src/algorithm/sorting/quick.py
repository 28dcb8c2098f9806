"""
Quick Sort — быстрая сортировка (схема разбиения Хоара)

Опорный элемент — seq[(lo + hi) // 2]. Два указателя сходятся навстречу,
обменивая элементы, стоящие не по свою сторону от опорного.
Сложность: O(n log n) в среднем, O(n^2) в худшем случае. Неустойчивая.
"""

from typing import List, MutableSequence

from src.algorithm.sorting.base import sort_rows
from src.core.checkings.predicates import is_out_of_order
from src.core.types import OrderedT, SortDirection


def _hoare_partition(
    seq: MutableSequence[OrderedT], lo: int, hi: int, direction: SortDirection
) -> int:
    """
    Разбиение seq[lo..hi] вокруг опорного элемента.

    Returns:
        Индекс p (lo <= p < hi): seq[lo..p] не нарушает порядок относительно seq[p+1..hi]
    """
    pivot = seq[(lo + hi) // 2]
    i = lo - 1
    j = hi + 1

    while True:
        i += 1
        while is_out_of_order(pivot, seq[i], direction):
            i += 1
        j -= 1
        while is_out_of_order(seq[j], pivot, direction):
            j -= 1
        if i >= j:
            return j
        seq[i], seq[j] = seq[j], seq[i]


def _quick_sort_range(
    seq: MutableSequence[OrderedT], lo: int, hi: int, direction: SortDirection
) -> None:
    """
    Сортировка seq[lo..hi].

    Рекурсия только в меньшую часть, большая обрабатывается в цикле:
    глубина стека O(log n) при любом разбиении.
    """
    while lo < hi:
        p = _hoare_partition(seq, lo, hi, direction)
        if p - lo < hi - p:
            _quick_sort_range(seq, lo, p, direction)
            lo = p + 1
        else:
            _quick_sort_range(seq, p + 1, hi, direction)
            hi = p


def quick_sort(
    seq: MutableSequence[OrderedT], direction: SortDirection = SortDirection.ASCENDING
) -> None:
    """
    Быстрая сортировка на месте.

    Args:
        seq: Изменяемая последовательность сравнимых элементов
        direction: Направление сортировки
    """
    direction = SortDirection(direction)
    _quick_sort_range(seq, 0, len(seq) - 1, direction)


def quick_sort_2d(
    matrix: List[MutableSequence[OrderedT]],
    direction: SortDirection = SortDirection.ASCENDING,
) -> None:
    """Быстрая сортировка каждой строки матрицы."""
    sort_rows(matrix, quick_sort, direction)
