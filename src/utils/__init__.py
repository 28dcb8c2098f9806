"""
Utils — collaborators для кода поверх алгоритмического ядра:
случайность, время, построчный вывод, файловая система.
"""

from src.utils.files import file_exists, file_size, list_files, read_file_to_str
from src.utils.printing import LinePrinter
from src.utils.random_source import RandomSource
from src.utils.timing import (
    Timer,
    measure_execution_time,
    str_to_timestamp,
    timestamp_to_str,
)

__all__ = [
    "RandomSource",
    "Timer",
    "measure_execution_time",
    "str_to_timestamp",
    "timestamp_to_str",
    "LinePrinter",
    "list_files",
    "read_file_to_str",
    "file_size",
    "file_exists",
]
