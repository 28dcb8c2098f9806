"""
Files — Перечисление и чтение файлов

Имена файлов фильтруются по regex-маске (re.fullmatch по имени файла).
Маска по умолчанию берётся из ToolkitConfig (LVT_FILE_MASK).
"""

import re
from pathlib import Path
from typing import List, Optional, Union

from src.core.config import ToolkitConfig
from src.core.logger import get_logger

logger = get_logger("files")

PathLike = Union[str, Path]


def list_files(
    path: PathLike = ".", pattern: Optional[str] = None, recursive: bool = False
) -> List[str]:
    """
    Пути файлов в каталоге, имена которых соответствуют маске.

    Args:
        path: Каталог поиска
        pattern: Regex-маска имени файла (default: ToolkitConfig.file_mask)
        recursive: Искать также во вложенных каталогах

    Returns:
        Отсортированный список путей

    Raises:
        NotADirectoryError: если path не является каталогом
        re.error: если маска не является корректным regex
    """
    root = Path(path)
    if not root.is_dir():
        raise NotADirectoryError(f"Not a directory: {root}")

    mask = re.compile(pattern if pattern is not None else ToolkitConfig.load().file_mask)
    candidates = root.rglob("*") if recursive else root.iterdir()

    result = sorted(
        str(p) for p in candidates if p.is_file() and mask.fullmatch(p.name)
    )
    logger.debug(
        "list_files: path=%s pattern=%s recursive=%s found=%d",
        root,
        mask.pattern,
        recursive,
        len(result),
    )
    return result


def read_file_to_str(path: PathLike, encoding: str = "utf-8") -> str:
    """Всё содержимое файла одной строкой."""
    return Path(path).read_text(encoding=encoding)


def file_size(path: PathLike) -> int:
    """Размер файла в байтах."""
    return Path(path).stat().st_size


def file_exists(path: PathLike) -> bool:
    """True если по пути существует обычный файл."""
    return Path(path).is_file()
