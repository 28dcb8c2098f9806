"""
JSON Schema Contract Validators

Модуль валидации входных данных на границе toolkit согласно JSON Schema.
Алгоритмы внутри себя входные данные не проверяют: проверка формы
выполняется здесь, один раз, до вызова алгоритма.

Схемы (schema/ рядом с модулем, ставятся как package data):
- numeric_sequence.json
- matrix.json
- intervals.json
- sort_request.json
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

from src.core.logger import get_logger

logger = get_logger("contracts")


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Находит схемы в каталоге schema/ рядом с этим модулем.
    """

    def __init__(self):
        self._schema_dir = Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'matrix')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Meta-validation самой схемы
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    Подклассы добавляют проверки, не выразимые в JSON Schema,
    переопределяя iter_errors.
    """

    def __init__(self, schema_name: str):
        """
        Инициализация валидатора.

        Args:
            schema_name: Имя схемы для валидации
        """
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        """
        Итератор по всем ошибкам валидации.

        Yields:
            ValidationError для каждой найденной ошибки
        """
        return self.validator.iter_errors(data)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют контракту
                (первая найденная ошибка)
        """
        for error in self.iter_errors(data):
            logger.debug("%s contract violation: %s", self.schema_name, error.message)
            raise error

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """
        Проверка валидности данных без exception.

        Returns:
            True если данные валидны, False иначе
        """
        return next(iter(self.iter_errors(data)), None) is None


class NumericSequenceValidator(ContractValidator):
    """Валидатор числовой последовательности."""

    def __init__(self):
        super().__init__("numeric_sequence")


class MatrixValidator(ContractValidator):
    """
    Валидатор матрицы.

    Помимо схемы проверяет, что все строки имеют одинаковую длину.
    """

    def __init__(self):
        super().__init__("matrix")

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        schema_errors = list(self.validator.iter_errors(data))
        yield from schema_errors
        if schema_errors:
            return

        rows = data["rows"]
        if not rows:
            return
        width = len(rows[0])
        for i, row in enumerate(rows):
            if len(row) != width:
                yield ValidationError(
                    f"row {i} has length {len(row)}, expected {width}",
                    path=["rows", i],
                )


class IntervalsValidator(ContractValidator):
    """
    Валидатор интервалов.

    Помимо схемы проверяет start <= end для каждого интервала.
    """

    def __init__(self):
        super().__init__("intervals")

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        schema_errors = list(self.validator.iter_errors(data))
        yield from schema_errors
        if schema_errors:
            return

        for i, (start, end) in enumerate(data["intervals"]):
            if start > end:
                yield ValidationError(
                    f"interval {i} has start {start} > end {end}",
                    path=["intervals", i],
                )


class SortRequestValidator(ContractValidator):
    """
    Валидатор запроса сортировки.

    Помимо схемы проверяет, что значения одного типа (все числа или все строки).
    """

    def __init__(self):
        super().__init__("sort_request")

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        schema_errors = list(self.validator.iter_errors(data))
        yield from schema_errors
        if schema_errors:
            return

        kinds = {isinstance(v, str) for v in data["values"]}
        if len(kinds) > 1:
            yield ValidationError(
                "values mix numbers and strings", path=["values"]
            )


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_numeric_sequence(data: Dict[str, Any]) -> None:
    """
    Валидация числовой последовательности.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    NumericSequenceValidator().validate(data)


def validate_matrix(data: Dict[str, Any]) -> None:
    """
    Валидация матрицы.

    Raises:
        ValidationError: Если данные не соответствуют схеме или строки разной длины
    """
    MatrixValidator().validate(data)


def validate_intervals(data: Dict[str, Any]) -> None:
    """
    Валидация интервалов.

    Raises:
        ValidationError: Если данные не соответствуют схеме или start > end
    """
    IntervalsValidator().validate(data)


def validate_sort_request(data: Dict[str, Any]) -> None:
    """
    Валидация запроса сортировки.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    SortRequestValidator().validate(data)
