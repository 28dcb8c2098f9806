"""
Results — Явный результат алгоритмов с документированным отказом

Заменяет sentinel-значения (-1, минимум типа) на явный тип результата:
- AlgorithmResult.success(value) — успешное вычисление
- AlgorithmResult.failure(kind, details) — документированное условие отказа

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Условия отказа совпадают с исходными условиям возврата sentinel
2. Результат immutable (frozen dataclass)
3. Исключение возникает только при явном unwrap() неуспешного результата
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


# =============================================================================
# ENUMS
# =============================================================================


class AlgorithmErrorKind(str, Enum):
    """Вид документированного отказа алгоритма"""

    MALFORMED_INTERVAL = "MALFORMED_INTERVAL"
    INSUFFICIENT_ELEMENTS = "INSUFFICIENT_ELEMENTS"
    NEGATIVE_ELEMENT = "NEGATIVE_ELEMENT"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class AlgorithmDomainError(Exception):
    """
    Попытка получить значение из неуспешного AlgorithmResult.

    Алгоритмы сами не выбрасывают это исключение: оно возникает только
    в AlgorithmResult.unwrap(), когда вызывающая сторона решила не проверять ok.
    """

    def __init__(self, kind: AlgorithmErrorKind, details: str):
        super().__init__(f"{kind.value}: {details}")
        self.kind = kind
        self.details = details


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class AlgorithmResult(Generic[T]):
    """Результат алгоритма с явным признаком отказа."""

    value: Optional[T]
    error_kind: Optional[AlgorithmErrorKind] = None
    details: str = ""

    @classmethod
    def success(cls, value: T) -> "AlgorithmResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, kind: AlgorithmErrorKind, details: str) -> "AlgorithmResult[T]":
        return cls(value=None, error_kind=kind, details=details)

    @property
    def ok(self) -> bool:
        return self.error_kind is None

    def unwrap(self) -> T:
        """
        Значение успешного результата.

        Raises:
            AlgorithmDomainError: если результат неуспешный
        """
        if self.error_kind is not None:
            raise AlgorithmDomainError(self.error_kind, self.details)
        return self.value  # type: ignore[return-value]

    def unwrap_or(self, default: T) -> T:
        """Значение успешного результата или default при отказе."""
        if self.error_kind is not None:
            return default
        return self.value  # type: ignore[return-value]
