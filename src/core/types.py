"""
Types — Базовые типы и ограничения элементов последовательностей

Модуль описывает ограничения на типы элементов, с которыми работают алгоритмы:
- SupportsOrdering: элемент поддерживает полный порядок (<, >, ==)
- SupportsArithmetic: элемент поддерживает сложение, вычитание и умножение
- SupportsOrderedArithmetic: оба ограничения сразу
- SortDirection: направление сортировки (ASCENDING/DESCENDING)

Ограничения выражены через typing.Protocol: проверка выполняется type checker'ом,
а не инспекцией типов во время выполнения.
"""

from enum import Enum
from typing import Any, List, Protocol, Tuple, TypeVar


# =============================================================================
# PROTOCOLS
# =============================================================================


class SupportsOrdering(Protocol):
    """Элемент с полным порядком: сравнения < и > согласованы с ==."""

    def __lt__(self, other: Any) -> bool: ...

    def __gt__(self, other: Any) -> bool: ...


class SupportsArithmetic(Protocol):
    """Числовой элемент: сложение, вычитание и умножение."""

    def __add__(self, other: Any) -> Any: ...

    def __sub__(self, other: Any) -> Any: ...

    def __mul__(self, other: Any) -> Any: ...


class SupportsOrderedArithmetic(SupportsOrdering, SupportsArithmetic, Protocol):
    """Упорядоченный числовой элемент (суммы сравниваются, расстояния вычисляются)."""


# =============================================================================
# TYPE VARIABLES & ALIASES
# =============================================================================

T = TypeVar("T")
OrderedT = TypeVar("OrderedT", bound=SupportsOrdering)
NumericT = TypeVar("NumericT", bound=SupportsArithmetic)
OrderedNumericT = TypeVar("OrderedNumericT", bound=SupportsOrderedArithmetic)

# Строки матрицы имеют одинаковую длину (предусловие вызывающей стороны)
Matrix = List[List[Any]]

# (start, end), start <= end
Interval = Tuple[int, int]


# =============================================================================
# ENUMS
# =============================================================================


class SortDirection(str, Enum):
    """Направление сортировки"""

    ASCENDING = "ascending"
    DESCENDING = "descending"
