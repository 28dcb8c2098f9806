"""
Base — Общий контракт стратегий сортировки

Каждая стратегия — функция sort(seq, direction) -> None:
- переупорядочивает seq на месте
- соседние элементы после вызова не нарушают direction
- пустая и одноэлементная последовательности — no-op
"""

from typing import Callable, List, MutableSequence

from src.core.types import OrderedT, SortDirection

SortFunction = Callable[[MutableSequence[OrderedT], SortDirection], None]


def sort_rows(
    matrix: List[MutableSequence[OrderedT]],
    sort_fn: SortFunction,
    direction: SortDirection,
) -> None:
    """
    Применение 1D-сортировки к каждой строке матрицы независимо.

    Порядок строк и связи между строками не меняются.
    """
    for row in matrix:
        sort_fn(row, direction)
