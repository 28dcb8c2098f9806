"""Логгер проекта lvt."""

import logging
import os
import sys
from typing import Optional, Tuple

from pydantic import ValidationError

from src.core.config import DEFAULT_LOG_LEVEL, ENV_PREFIX, ToolkitConfig

__all__ = ["LOGGER_NAME", "get_logger", "setup_logger"]

LOGGER_NAME = "lvt"


def _level_from_environment() -> Tuple[str, Optional[str]]:
    """
    Уровень из LVT_LOG_LEVEL.

    Невалидное значение не ломает импорт библиотеки: используется
    DEFAULT_LOG_LEVEL, а исходное значение возвращается для предупреждения.

    Returns:
        (уровень, отвергнутое значение или None)
    """
    raw = os.environ.get(f"{ENV_PREFIX}LOG_LEVEL")
    if raw is None:
        return DEFAULT_LOG_LEVEL, None
    try:
        return ToolkitConfig(log_level=raw).log_level, None
    except ValidationError:
        return DEFAULT_LOG_LEVEL, raw


def _owned_handlers(logger: logging.Logger) -> list:
    """Handlers, добавленные setup_logger (точный тип StreamHandler)."""
    return [h for h in logger.handlers if type(h) is logging.StreamHandler]


def setup_logger(
    name: str = LOGGER_NAME,
    level: Optional[str] = None,
    format_string: Optional[str] = None,
) -> logging.Logger:
    """
    Настройка и получение логгера.

    Args:
        name: Имя логгера (имя проекта)
        level: Уровень (DEBUG, INFO, WARNING, ERROR, CRITICAL);
            по умолчанию берётся из LVT_LOG_LEVEL, невалидное значение
            заменяется на INFO с предупреждением
        format_string: Пользовательский формат сообщений

    Returns:
        Настроенный логгер
    """
    rejected = None
    if level is None:
        level, rejected = _level_from_environment()
    format_string = format_string or (
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    logger = logging.getLogger(name)

    # Настраиваем только один раз; чужие handlers (pytest и т.п.) не учитываются
    if not _owned_handlers(logger):
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(getattr(logging, level.upper()))
        logger.propagate = False
        if rejected is not None:
            logger.warning(
                "invalid %sLOG_LEVEL=%r, using %s", ENV_PREFIX, rejected, level
            )

    return logger


def get_logger(module: str) -> logging.Logger:
    """Дочерний логгер модуля: lvt.<module>."""
    setup_logger()
    return logging.getLogger(f"{LOGGER_NAME}.{module}")
