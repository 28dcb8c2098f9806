"""
Big Numbers — Арифметика чисел, представленных массивами цифр

Число хранится как список десятичных цифр от старшей к младшей:
1203 -> [1, 2, 0, 3]. Операции выполняются столбиком, без перевода
в int, результат нормализован (без ведущих нулей, ноль — [0]).
"""

from typing import List, Sequence


def _normalize(digits: List[int]) -> List[int]:
    """Удаление ведущих нулей; пустой результат -> [0]."""
    first_nonzero = 0
    while first_nonzero < len(digits) - 1 and digits[first_nonzero] == 0:
        first_nonzero += 1
    return digits[first_nonzero:] or [0]


def big_sum(a: Sequence[int], b: Sequence[int]) -> List[int]:
    """
    Сумма двух чисел столбиком.

    Examples:
        >>> big_sum([9, 9], [1])
        [1, 0, 0]
    """
    result = []
    carry = 0
    i, j = len(a) - 1, len(b) - 1

    while i >= 0 or j >= 0 or carry:
        total = carry
        if i >= 0:
            total += a[i]
            i -= 1
        if j >= 0:
            total += b[j]
            j -= 1
        carry, digit = divmod(total, 10)
        result.append(digit)

    result.reverse()
    return _normalize(result)


def big_product(a: Sequence[int], b: Sequence[int]) -> List[int]:
    """
    Произведение двух чисел столбиком: O(len(a) * len(b)).

    Examples:
        >>> big_product([1, 2], [1, 2])
        [1, 4, 4]
    """
    if not a or not b:
        return [0]

    # Разряды от младшего к старшему
    acc = [0] * (len(a) + len(b))
    for i, da in enumerate(reversed(a)):
        carry = 0
        for j, db in enumerate(reversed(b)):
            carry, acc[i + j] = divmod(acc[i + j] + da * db + carry, 10)
        k = i + len(b)
        while carry:
            carry, acc[k] = divmod(acc[k] + carry, 10)
            k += 1

    acc.reverse()
    return _normalize(acc)


def factorial(n: int) -> str:
    """
    n! в виде десятичной строки.

    Raises:
        ValueError: при n < 0

    Examples:
        >>> factorial(20)
        '2432902008176640000'
    """
    if n < 0:
        raise ValueError(f"factorial is undefined for negative n={n}")

    result = [1]
    for k in range(2, n + 1):
        result = big_product(result, [int(d) for d in str(k)])

    return "".join(str(d) for d in result)
