"""
Checkings — предикаты и компараторы, общие для всех алгоритмов.
"""

from src.core.checkings.predicates import (
    BRACKET_PAIRS,
    VOWELS,
    is_arithmetic_type,
    is_bigger,
    is_bracket_sequence_valid,
    is_equal,
    is_floating_number,
    is_int_number,
    is_lower,
    is_out_of_order,
    is_uint_number,
    is_vowel,
)

__all__ = [
    # Constants
    "BRACKET_PAIRS",
    "VOWELS",
    # Comparators
    "is_equal",
    "is_lower",
    "is_bigger",
    "is_out_of_order",
    # Predicates
    "is_vowel",
    "is_arithmetic_type",
    "is_uint_number",
    "is_int_number",
    "is_floating_number",
    "is_bracket_sequence_valid",
]
