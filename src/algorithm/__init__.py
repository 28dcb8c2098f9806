"""
Algorithm — обобщённые алгоритмы над последовательностями и строками.

Чистые однопоточные вычисления в памяти: без I/O, случайности и часов.
"""

# Sorting
from src.algorithm.sorting import (
    SortDirection,
    SortStrategy,
    sort,
    sort_2d,
    sorted_copy,
)

# Sequence analytics
from src.algorithm.sequences import (
    approx_bin_search,
    calculate_intervals_length,
    find_closest,
    get_unique_elements_from_two_sequences,
    k_most_freq_elem,
    max_pairwise_product,
    max_product_of_3_elems,
    max_subarray_sum,
    most_freq_elem,
    tribonacci,
)

# Matrices
from src.algorithm.matrices import (
    sum_of_polynomials,
    sum_of_the_matrices,
    transpose_matrix,
)

# Strings
from src.algorithm.strings import (
    calculate_ngram_frequencies,
    common_letters,
    common_prefix,
    length_of_longest_substring,
    string_permutations,
)

__all__ = [
    # Sorting
    "SortDirection",
    "SortStrategy",
    "sort",
    "sort_2d",
    "sorted_copy",
    # Sequence analytics
    "approx_bin_search",
    "calculate_intervals_length",
    "find_closest",
    "get_unique_elements_from_two_sequences",
    "k_most_freq_elem",
    "max_pairwise_product",
    "max_product_of_3_elems",
    "max_subarray_sum",
    "most_freq_elem",
    "tribonacci",
    # Matrices
    "sum_of_polynomials",
    "sum_of_the_matrices",
    "transpose_matrix",
    # Strings
    "calculate_ngram_frequencies",
    "common_letters",
    "common_prefix",
    "length_of_longest_substring",
    "string_permutations",
]
