"""
Sorting — шесть взаимозаменяемых стратегий сортировки на месте.

Каждая стратегия доступна как 1D-функция и как построчный 2D-вариант;
направление задаётся SortDirection.
"""

from src.algorithm.sorting.bubble import bubble_sort, bubble_sort_2d
from src.algorithm.sorting.engine import (
    STABLE_STRATEGIES,
    STRATEGIES,
    SortStrategy,
    sort,
    sort_2d,
    sorted_copy,
    strategy_from_config,
)
from src.algorithm.sorting.insertion import insertion_sort, insertion_sort_2d
from src.algorithm.sorting.merge import merge_sort, merge_sort_2d
from src.algorithm.sorting.quick import quick_sort, quick_sort_2d
from src.algorithm.sorting.selection import selection_sort, selection_sort_2d
from src.algorithm.sorting.shell import shell_sort, shell_sort_2d
from src.core.types import SortDirection

__all__ = [
    # Types
    "SortDirection",
    "SortStrategy",
    "STRATEGIES",
    "STABLE_STRATEGIES",
    # Engine
    "sort",
    "sort_2d",
    "sorted_copy",
    "strategy_from_config",
    # Strategies — 1D
    "bubble_sort",
    "insertion_sort",
    "selection_sort",
    "shell_sort",
    "quick_sort",
    "merge_sort",
    # Strategies — 2D
    "bubble_sort_2d",
    "insertion_sort_2d",
    "selection_sort_2d",
    "shell_sort_2d",
    "quick_sort_2d",
    "merge_sort_2d",
]
