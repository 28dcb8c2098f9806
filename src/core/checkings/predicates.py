"""
Predicates — Предикаты и компараторы для обобщённых алгоритмов

Модуль содержит:
- Обёртки сравнения (is_equal, is_lower, is_bigger), используемые всеми сортировками
- is_out_of_order: единое правило порядка для ASCENDING/DESCENDING
- Символьные и строковые предикаты (гласные, числовые строки)
- Проверку скобочной последовательности ()[]{}

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Равные элементы никогда не считаются нарушающими порядок (нет зацикливания на ties)
2. Все предикаты чистые: без побочных эффектов и без I/O
"""

import numbers
import re
from typing import Any, Final

from src.core.types import SortDirection, SupportsOrdering


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

VOWELS: Final[frozenset[str]] = frozenset("aeiouAEIOU")

# Закрывающая скобка -> соответствующая открывающая
BRACKET_PAIRS: Final[dict[str, str]] = {")": "(", "]": "[", "}": "{"}

_UINT_RE: Final[re.Pattern[str]] = re.compile(r"\d+")
_INT_RE: Final[re.Pattern[str]] = re.compile(r"[+-]?\d+")
_FLOAT_RE: Final[re.Pattern[str]] = re.compile(
    r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?"
)


# =============================================================================
# КОМПАРАТОРЫ
# =============================================================================


def is_equal(a: Any, b: Any) -> bool:
    """True если оба значения равны."""
    return a == b


def is_lower(a: SupportsOrdering, b: SupportsOrdering) -> bool:
    """True если первое значение меньше второго."""
    return a < b


def is_bigger(a: SupportsOrdering, b: SupportsOrdering) -> bool:
    """True если первое значение больше второго."""
    return a > b


def is_out_of_order(
    a: SupportsOrdering, b: SupportsOrdering, direction: SortDirection
) -> bool:
    """
    Проверка, что пара (a, b) нарушает требуемое направление сортировки.

    ASCENDING: a > b
    DESCENDING: a < b

    Args:
        a: Элемент, стоящий раньше
        b: Элемент, стоящий позже
        direction: Направление сортировки

    Returns:
        True если a должен стоять после b. Для равных элементов всегда False.

    Raises:
        ValueError: Неизвестное направление
    """
    if direction == SortDirection.ASCENDING:
        return is_bigger(a, b)
    if direction == SortDirection.DESCENDING:
        return is_lower(a, b)
    raise ValueError(f"unknown sort direction: {direction!r}")


# =============================================================================
# СИМВОЛЬНЫЕ И ТИПОВЫЕ ПРЕДИКАТЫ
# =============================================================================


def is_vowel(ch: str) -> bool:
    """True если ch — гласная латинского алфавита (в любом регистре)."""
    return ch in VOWELS


def is_arithmetic_type(value: Any) -> bool:
    """
    Проверка, что значение имеет арифметический тип.

    Числа (int, float, complex, Fraction, Decimal, bool) — True.
    Строки и контейнеры — False.
    """
    return isinstance(value, numbers.Number)


def is_uint_number(s: str) -> bool:
    """True если строка — беззнаковое целое число ("42")."""
    return _UINT_RE.fullmatch(s) is not None


def is_int_number(s: str) -> bool:
    """True если строка — знаковое целое число ("-42", "+7", "13")."""
    return _INT_RE.fullmatch(s) is not None


def is_floating_number(s: str) -> bool:
    """
    True если строка — число с плавающей точкой.

    Examples:
        >>> is_floating_number("3.14")
        True
        >>> is_floating_number("-.5e3")
        True
        >>> is_floating_number("1.2.3")
        False
    """
    return _FLOAT_RE.fullmatch(s) is not None


# =============================================================================
# СКОБОЧНАЯ ПОСЛЕДОВАТЕЛЬНОСТЬ
# =============================================================================


def is_bracket_sequence_valid(seq: str) -> bool:
    """
    Проверка скобочной последовательности из ()[]{}.

    Открывающая скобка кладётся в стек, закрывающая снимает вершину стека
    и сравнивается с ней. Символы, не являющиеся скобками, пропускаются.

    Args:
        seq: Последовательность скобок

    Returns:
        True если ни одно снятие не дало несоответствия и стек пуст в конце

    Examples:
        >>> is_bracket_sequence_valid("{[()]}")
        True
        >>> is_bracket_sequence_valid("{[(])}")
        False
    """
    openers = set(BRACKET_PAIRS.values())
    stack: list[str] = []

    for ch in seq:
        if ch in openers:
            stack.append(ch)
        elif ch in BRACKET_PAIRS:
            if not stack or stack.pop() != BRACKET_PAIRS[ch]:
                return False

    return not stack
