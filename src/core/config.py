"""
Config — Конфигурация toolkit из переменных окружения

Переменные окружения:
- LVT_LOG_LEVEL: уровень логирования (default: INFO)
- LVT_RANDOM_SEED: seed для RandomSource (default: не задан)
- LVT_FILE_MASK: regex-маска для list_files (default: .*\\.txt$)
- LVT_SORT_STRATEGY: стратегия сортировки по умолчанию (default: merge)

Immutable Pydantic модель. Алгоритмическое ядро конфигурацию не читает:
она нужна только collaborators и логгеру.
"""

import os
from typing import Final, Literal, Mapping, Optional

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# DEFAULTS
# =============================================================================

DEFAULT_LOG_LEVEL: Final[str] = "INFO"
DEFAULT_FILE_MASK: Final[str] = r".*\.txt$"
DEFAULT_SORT_STRATEGY: Final[str] = "merge"

ENV_PREFIX: Final[str] = "LVT_"


# =============================================================================
# CONFIG MODEL
# =============================================================================


class ToolkitConfig(BaseModel):
    """
    Конфигурация toolkit.

    Immutable модель (frozen=True): для других значений создаётся новый экземпляр.
    """

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        DEFAULT_LOG_LEVEL, description="Уровень логирования"
    )
    random_seed: Optional[int] = Field(
        None, description="Seed генератора случайных чисел (None — недетерминированно)"
    )
    file_mask: str = Field(
        DEFAULT_FILE_MASK, min_length=1, description="Regex-маска имён файлов"
    )
    default_sort_strategy: Literal[
        "bubble", "insertion", "selection", "shell", "quick", "merge"
    ] = Field(DEFAULT_SORT_STRATEGY, description="Стратегия сортировки по умолчанию")

    model_config = {"frozen": True}  # Immutable

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: object) -> object:
        """Уровень логирования принимается в любом регистре."""
        return v.upper() if isinstance(v, str) else v

    @field_validator("default_sort_strategy", mode="before")
    @classmethod
    def normalize_sort_strategy(cls, v: object) -> object:
        return v.lower() if isinstance(v, str) else v

    @classmethod
    def load(cls, environ: Optional[Mapping[str, str]] = None) -> "ToolkitConfig":
        """
        Загрузка конфигурации из окружения.

        Args:
            environ: Источник переменных (default: os.environ)

        Returns:
            ToolkitConfig с заданными значениями, остальные — по умолчанию

        Raises:
            pydantic.ValidationError: если значение переменной невалидно
        """
        env = os.environ if environ is None else environ
        fields = {
            "log_level": env.get(f"{ENV_PREFIX}LOG_LEVEL"),
            "random_seed": env.get(f"{ENV_PREFIX}RANDOM_SEED"),
            "file_mask": env.get(f"{ENV_PREFIX}FILE_MASK"),
            "default_sort_strategy": env.get(f"{ENV_PREFIX}SORT_STRATEGY"),
        }
        return cls(**{name: value for name, value in fields.items() if value is not None})
