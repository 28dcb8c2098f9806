"""
Contract Validation Module

Модуль для валидации JSON-данных на границе toolkit.
"""

from .validators import (
    ContractValidator,
    IntervalsValidator,
    MatrixValidator,
    NumericSequenceValidator,
    SchemaLoader,
    SortRequestValidator,
    validate_intervals,
    validate_matrix,
    validate_numeric_sequence,
    validate_sort_request,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "NumericSequenceValidator",
    "MatrixValidator",
    "IntervalsValidator",
    "SortRequestValidator",
    # Functions
    "validate_numeric_sequence",
    "validate_matrix",
    "validate_intervals",
    "validate_sort_request",
]
