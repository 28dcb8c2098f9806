"""
Printing — Построчный вывод последовательностей и матриц

Вывод идёт в sink: функцию, принимающую одну строку (по умолчанию print).
"""

from typing import Any, Callable, Iterable, Mapping, Sequence, Tuple

LineSink = Callable[[str], Any]


class LinePrinter:
    """Построчный вывод через переданный sink."""

    def __init__(self, sink: LineSink = print, separator: str = " "):
        self._sink = sink
        self._separator = separator

    def write_line(self, text: str) -> None:
        self._sink(text)

    def print_range(self, values: Iterable[Any]) -> None:
        """Все элементы в одну строку через разделитель."""
        self.write_line(self._separator.join(str(v) for v in values))

    def print_matrix(self, matrix: Sequence[Sequence[Any]]) -> None:
        """Каждая строка матрицы — отдельная строка вывода."""
        for row in matrix:
            self.print_range(row)

    def print_pairs(self, pairs: Iterable[Tuple[Any, Any]]) -> None:
        """Пары в формате "first second", по одной на строку."""
        for first, second in pairs:
            self.write_line(f"{first}{self._separator}{second}")

    def print_dictionary(self, mapping: Mapping[Any, Any]) -> None:
        """Словарь в формате "key: value", ключи по возрастанию."""
        for key in sorted(mapping):
            self.write_line(f"{key}: {mapping[key]}")
