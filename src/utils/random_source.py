"""
RandomSource — Источник псевдослучайных данных для вызывающего кода

Генератор передаётся явно тем, кому он нужен; глобального состояния нет.
Алгоритмическое ядро (src.algorithm) от этого модуля не зависит.
"""

import random
import string
from datetime import date, timedelta
from typing import Final, List, Optional

from src.core.config import ToolkitConfig

DIGITS: Final[str] = string.digits
ALL_SYMBOLS: Final[str] = string.ascii_letters + string.digits + string.punctuation

# Возрастной диапазон по умолчанию для date_of_birth
DEFAULT_LOWEST_AGE: Final[int] = 18
DEFAULT_HIGHEST_AGE: Final[int] = 100


class RandomSource:
    """
    Детерминируемый источник случайных значений.

    Один и тот же seed даёт одну и ту же последовательность значений.
    """

    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)

    @classmethod
    def from_config(cls, config: Optional[ToolkitConfig] = None) -> "RandomSource":
        """Источник с seed из ToolkitConfig (LVT_RANDOM_SEED)."""
        config = config or ToolkitConfig.load()
        return cls(config.random_seed)

    def next_double(self, lo: float = 0.0, hi: float = 10.0) -> float:
        """Равномерное вещественное число в [lo, hi]."""
        if lo > hi:
            raise ValueError(f"lo must not exceed hi, got lo={lo}, hi={hi}")
        return self._rng.uniform(lo, hi)

    def next_int(self, lo: int, hi: int) -> int:
        """Равномерное целое число в [lo, hi]."""
        if lo > hi:
            raise ValueError(f"lo must not exceed hi, got lo={lo}, hi={hi}")
        return self._rng.randint(lo, hi)

    def next_string(self, length: int, digits_only: bool = False) -> str:
        """
        Случайная строка заданной длины.

        Args:
            length: Длина строки
            digits_only: Только цифры (иначе буквы, цифры и пунктуация)
        """
        if length < 0:
            raise ValueError(f"length must be non-negative, got {length}")
        alphabet = DIGITS if digits_only else ALL_SYMBOLS
        return "".join(self._rng.choice(alphabet) for _ in range(length))

    def int_sequence(self, size: int = 10, lo: int = -50, hi: int = 50) -> List[int]:
        """Список из size случайных целых в [lo, hi]."""
        return [self.next_int(lo, hi) for _ in range(size)]

    def int_matrix(
        self, rows: int, cols: int, offset: int = 1, value_range: int = 100
    ) -> List[List[int]]:
        """Матрица rows x cols случайных целых в [offset, offset + value_range - 1]."""
        if value_range < 1:
            raise ValueError(f"value_range must be positive, got {value_range}")
        hi = offset + value_range - 1
        return [[self.next_int(offset, hi) for _ in range(cols)] for _ in range(rows)]

    def date_of_birth(
        self,
        lowest_age: int = DEFAULT_LOWEST_AGE,
        highest_age: int = DEFAULT_HIGHEST_AGE,
        today: Optional[date] = None,
    ) -> str:
        """
        Случайная дата рождения человека с возрастом в [lowest_age, highest_age].

        Returns:
            Дата в формате dd/mm/yyyy
        """
        if not 0 <= lowest_age <= highest_age:
            raise ValueError(
                f"invalid age range [{lowest_age}; {highest_age}]"
            )
        today = today or date.today()
        # Самая поздняя дата — ровно lowest_age лет назад,
        # самая ранняя — на день позже, чем highest_age + 1 лет назад
        latest = _years_before(today, lowest_age)
        earliest = _years_before(today, highest_age + 1) + timedelta(days=1)
        offset = self._rng.randint(0, (latest - earliest).days)
        return (earliest + timedelta(days=offset)).strftime("%d/%m/%Y")


def _years_before(day: date, years: int) -> date:
    """Та же календарная дата years лет назад (29 февраля -> 28 февраля)."""
    try:
        return day.replace(year=day.year - years)
    except ValueError:
        return day.replace(year=day.year - years, day=28)
