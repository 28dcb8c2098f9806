"""
Sorting Engine — выбор стратегии сортировки

Все стратегии удовлетворяют одному внешнему контракту (см. base.py)
и различаются только стоимостью:

| Strategy  | Avg / Worst             | Stable |
|-----------|-------------------------|--------|
| BUBBLE    | O(n^2)                  | да     |
| INSERTION | O(n) best / O(n^2)      | да     |
| SELECTION | O(n^2)                  | нет    |
| SHELL     | O(n log n) .. O(n^2)    | нет    |
| QUICK     | O(n log n) / O(n^2)     | нет    |
| MERGE     | O(n log n)              | да     |
"""

from enum import Enum
from typing import Dict, Iterable, List, MutableSequence

from src.algorithm.sorting.base import SortFunction, sort_rows
from src.algorithm.sorting.bubble import bubble_sort
from src.algorithm.sorting.insertion import insertion_sort
from src.algorithm.sorting.merge import merge_sort
from src.algorithm.sorting.quick import quick_sort
from src.algorithm.sorting.selection import selection_sort
from src.algorithm.sorting.shell import shell_sort
from src.core.config import ToolkitConfig
from src.core.logger import get_logger
from src.core.types import OrderedT, SortDirection

logger = get_logger("sorting")


# =============================================================================
# STRATEGIES
# =============================================================================


class SortStrategy(str, Enum):
    """Стратегия сортировки"""

    BUBBLE = "bubble"
    INSERTION = "insertion"
    SELECTION = "selection"
    SHELL = "shell"
    QUICK = "quick"
    MERGE = "merge"


STRATEGIES: Dict[SortStrategy, SortFunction] = {
    SortStrategy.BUBBLE: bubble_sort,
    SortStrategy.INSERTION: insertion_sort,
    SortStrategy.SELECTION: selection_sort,
    SortStrategy.SHELL: shell_sort,
    SortStrategy.QUICK: quick_sort,
    SortStrategy.MERGE: merge_sort,
}

STABLE_STRATEGIES = frozenset(
    {SortStrategy.BUBBLE, SortStrategy.INSERTION, SortStrategy.MERGE}
)


def strategy_from_config(config: ToolkitConfig) -> SortStrategy:
    """Стратегия по умолчанию из конфигурации (LVT_SORT_STRATEGY)."""
    return SortStrategy(config.default_sort_strategy)


# =============================================================================
# ENTRY POINTS
# =============================================================================


def sort(
    seq: MutableSequence[OrderedT],
    direction: SortDirection = SortDirection.ASCENDING,
    strategy: SortStrategy = SortStrategy.MERGE,
) -> None:
    """
    Сортировка последовательности на месте выбранной стратегией.

    Args:
        seq: Изменяемая последовательность сравнимых элементов
        direction: Направление сортировки
        strategy: Стратегия (default: MERGE)
    """
    strategy = SortStrategy(strategy)
    direction = SortDirection(direction)
    logger.debug(
        "sort: strategy=%s direction=%s n=%d",
        strategy.value,
        direction.value,
        len(seq),
    )
    STRATEGIES[strategy](seq, direction)


def sort_2d(
    matrix: List[MutableSequence[OrderedT]],
    direction: SortDirection = SortDirection.ASCENDING,
    strategy: SortStrategy = SortStrategy.MERGE,
) -> None:
    """
    Построчная сортировка матрицы на месте.

    Каждая строка сортируется независимо; порядок строк не меняется.
    """
    strategy = SortStrategy(strategy)
    direction = SortDirection(direction)
    logger.debug(
        "sort_2d: strategy=%s direction=%s rows=%d",
        strategy.value,
        direction.value,
        len(matrix),
    )
    sort_rows(matrix, STRATEGIES[strategy], direction)


def sorted_copy(
    seq: Iterable,
    direction: SortDirection = SortDirection.ASCENDING,
    strategy: SortStrategy = SortStrategy.MERGE,
) -> list:
    """
    Отсортированная копия: исходная последовательность не изменяется.

    Единственная копирующая точка входа; использует ту же функцию
    стратегии, что и sort().
    """
    result = list(seq)
    sort(result, direction, strategy)
    return result
