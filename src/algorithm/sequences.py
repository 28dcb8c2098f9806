"""
Sequence Analytics — Аналитические алгоритмы над обобщёнными последовательностями

Модуль содержит:
- Kadane: максимальная сумма непрерывного подмассива
- Частотный анализ: самый частый элемент, k самых частых элементов
- Приближённый поиск ближайшего значения в отсортированной последовательности
- Длина объединения целочисленных интервалов
- Максимальное произведение двух/трёх элементов за один линейный проход
- Tribonacci (обобщённая k-членная линейная рекуррента)
- Вспомогательные операции над последовательностями (цифры числа, срезы, пары)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Входная последовательность никогда не изменяется: результат — новый объект
2. Пустая последовательность — валидный вход с нулевым/пустым результатом
3. Документированные отказы возвращаются как AlgorithmResult, а не sentinel
4. Предусловия (отсортированность, форма) не проверяются внутри алгоритмов
"""

from bisect import bisect_left
from collections import Counter
from typing import Any, Callable, Hashable, List, Optional, Sequence, Tuple, TypeVar

from src.core.logger import get_logger
from src.core.results import AlgorithmErrorKind, AlgorithmResult
from src.core.types import Interval, OrderedNumericT

logger = get_logger("sequences")

T = TypeVar("T")
H = TypeVar("H", bound=Hashable)


# =============================================================================
# MAXIMUM SUBARRAY
# =============================================================================


def max_subarray_sum(seq: Sequence[OrderedNumericT]) -> OrderedNumericT:
    """
    Максимальная сумма непрерывного подмассива (алгоритм Кадане).

    Оба аккумулятора (локальная сумма и максимум) стартуют с нуля,
    локальная сумма сбрасывается в ноль, когда становится отрицательной.
    Поэтому для последовательности без положительных элементов
    результат равен 0 (пустой подмассив), а не наименьшему по модулю элементу.

    Args:
        seq: Числовая последовательность

    Returns:
        Максимальная сумма (0 для пустой или неположительной последовательности)

    Examples:
        >>> max_subarray_sum([1, -2, 3, 4, -1])
        7
        >>> max_subarray_sum([-2, -3, -1])
        0
    """
    best = 0
    local = 0

    for el in seq:
        local += el
        if local > best:
            best = local
        if local < 0:
            local = 0

    return best


# =============================================================================
# FREQUENCY ANALYSIS
# =============================================================================


def most_freq_elem(seq: Sequence[H]) -> Optional[H]:
    """
    Самый частый элемент последовательности.

    При равных частотах выигрывает элемент, встреченный первым.
    Для пустой последовательности — None.
    """
    top = k_most_freq_elem(seq, 1)
    return top[0] if top else None


def k_most_freq_elem(seq: Sequence[H], k: int) -> List[H]:
    """
    k самых частых элементов последовательности.

    Строит частотную таблицу (Counter) и выбирает k элементов с наибольшими
    частотами. Tie-break: среди элементов с равной частотой раньше идёт
    тот, что раньше встретился во входной последовательности
    (Counter сохраняет порядок вставки, сортировка устойчивая).

    Args:
        seq: Последовательность hashable элементов
        k: Количество элементов в результате

    Returns:
        До k элементов по убыванию частоты; [] при k <= 0;
        все различные элементы, если их меньше k

    Examples:
        >>> k_most_freq_elem([1, 1, 1, 2, 2, 3], 2)
        [1, 2]
        >>> k_most_freq_elem(["b", "a", "b", "a", "c"], 2)
        ['b', 'a']
    """
    if k <= 0:
        return []

    frequencies = Counter(seq)
    ranked = sorted(frequencies.items(), key=lambda item: -item[1])
    return [value for value, _ in ranked[:k]]


# =============================================================================
# APPROXIMATE NEAREST-VALUE SEARCH
# =============================================================================


def find_closest(
    sorted_seq: Sequence[OrderedNumericT], value: OrderedNumericT
) -> Optional[OrderedNumericT]:
    """
    Ближайший к value элемент отсортированной по возрастанию последовательности.

    Бинарный поиск позиции вставки, затем сравнение двух соседей.
    При равном расстоянии выбирается меньшее значение.

    Args:
        sorted_seq: Отсортированная по возрастанию последовательность
            (не проверяется; для неотсортированной результат не определён)
        value: Искомое значение

    Returns:
        Ближайший элемент или None для пустой последовательности

    Examples:
        >>> find_closest([1, 3, 5, 7], 4)
        3
        >>> find_closest([1, 3, 5, 7], 6)
        5
    """
    if not sorted_seq:
        return None

    idx = bisect_left(sorted_seq, value)

    if idx == 0:
        return sorted_seq[0]
    if idx == len(sorted_seq):
        return sorted_seq[-1]

    lower = sorted_seq[idx - 1]
    upper = sorted_seq[idx]

    if value - lower <= upper - value:
        return lower
    return upper


def approx_bin_search(
    sorted_ref: Sequence[OrderedNumericT], queries: Sequence[OrderedNumericT]
) -> List[OrderedNumericT]:
    """
    Приближённый бинарный поиск между двумя последовательностями.

    Для каждого элемента queries находит ближайший элемент sorted_ref
    (при равном расстоянии — меньший).

    Args:
        sorted_ref: Отсортированная по возрастанию опорная последовательность
        queries: Значения для поиска

    Returns:
        Список той же длины, что queries; [] если sorted_ref пуста
    """
    if not sorted_ref:
        return []
    return [find_closest(sorted_ref, q) for q in queries]


# =============================================================================
# INTERVALS
# =============================================================================


def calculate_intervals_length(intervals: Sequence[Interval]) -> AlgorithmResult[int]:
    """
    Суммарная длина объединения целочисленных интервалов.

    Интервалы сортируются по началу, затем проход со слиянием:
    интервал, начинающийся не позже текущего конца, расширяет текущий.
    Длина интервала (start, end) равна end - start.

    Args:
        intervals: Пары (start, end)

    Returns:
        AlgorithmResult с длиной объединения (0 для пустого входа);
        failure(MALFORMED_INTERVAL), если у какого-то интервала start > end

    Examples:
        >>> calculate_intervals_length([(1, 4), (3, 6)]).value
        5
    """
    for start, end in intervals:
        if start > end:
            details = f"interval ({start}, {end}) has start > end"
            logger.debug("calculate_intervals_length: %s", details)
            return AlgorithmResult.failure(AlgorithmErrorKind.MALFORMED_INTERVAL, details)

    if not intervals:
        return AlgorithmResult.success(0)

    ordered = sorted(intervals, key=lambda interval: interval[0])

    total = 0
    cur_start, cur_end = ordered[0]

    for start, end in ordered[1:]:
        if start <= cur_end:
            cur_end = max(cur_end, end)
        else:
            total += cur_end - cur_start
            cur_start, cur_end = start, end

    total += cur_end - cur_start
    return AlgorithmResult.success(total)


# =============================================================================
# MAX PRODUCTS
# =============================================================================


def max_pairwise_product(seq: Sequence[int]) -> AlgorithmResult[int]:
    """
    Максимальное произведение двух элементов неотрицательной последовательности.

    Один линейный проход с отслеживанием двух наибольших значений (O(n)).

    Returns:
        AlgorithmResult с произведением;
        failure(INSUFFICIENT_ELEMENTS) при длине < 2;
        failure(NEGATIVE_ELEMENT) при наличии отрицательного элемента
    """
    if len(seq) < 2:
        details = f"need at least 2 elements, got {len(seq)}"
        logger.debug("max_pairwise_product: %s", details)
        return AlgorithmResult.failure(AlgorithmErrorKind.INSUFFICIENT_ELEMENTS, details)

    first = second = 0
    for el in seq:
        if el < 0:
            details = f"negative element {el}"
            logger.debug("max_pairwise_product: %s", details)
            return AlgorithmResult.failure(AlgorithmErrorKind.NEGATIVE_ELEMENT, details)
        if el > first:
            first, second = el, first
        elif el > second:
            second = el

    return AlgorithmResult.success(first * second)


def max_product_of_3_elems(seq: Sequence[int]) -> AlgorithmResult[int]:
    """
    Максимальное произведение трёх элементов с учётом знаков.

    Один линейный проход: три наибольших и два наименьших значения.
    Ответ — max(max1*max2*max3, max1*min1*min2): два больших по модулю
    отрицательных элемента дают положительное произведение.

    Returns:
        AlgorithmResult с произведением;
        failure(INSUFFICIENT_ELEMENTS) при длине < 3

    Examples:
        >>> max_product_of_3_elems([-10, -10, 1, 3, 2]).value
        300
    """
    if len(seq) < 3:
        details = f"need at least 3 elements, got {len(seq)}"
        logger.debug("max_product_of_3_elems: %s", details)
        return AlgorithmResult.failure(AlgorithmErrorKind.INSUFFICIENT_ELEMENTS, details)

    max1, max2, max3 = seq[0], None, None
    min1, min2 = seq[0], None

    for el in seq[1:]:
        if el > max1:
            max1, max2, max3 = el, max1, max2
        elif max2 is None or el > max2:
            max2, max3 = el, max2
        elif max3 is None or el > max3:
            max3 = el

        if el < min1:
            min1, min2 = el, min1
        elif min2 is None or el < min2:
            min2 = el

    return AlgorithmResult.success(max(max1 * max2 * max3, max1 * min1 * min2))


# =============================================================================
# SET COMBINATION
# =============================================================================


def get_unique_elements_from_two_sequences(
    a: Sequence[int], b: Sequence[int]
) -> List[int]:
    """
    Объединение двух целочисленных последовательностей без повторов.

    Каждое значение встречается в результате ровно один раз;
    результат упорядочен по возрастанию.
    """
    return sorted(set(a).union(b))


# =============================================================================
# RECURRENCES
# =============================================================================


def tribonacci(signature: Sequence[int], n: int) -> List[int]:
    """
    Первые n членов k-членной линейной рекурренты.

    k = len(signature); каждый новый член — сумма k предыдущих.
    Для signature длины 3 — классическая последовательность Tribonacci.

    Args:
        signature: Начальные члены
        n: Длина результата

    Returns:
        n членов; префикс signature при n <= len(signature);
        [] при n <= 0 или пустой signature

    Examples:
        >>> tribonacci([0, 1, 1], 6)
        [0, 1, 1, 2, 4, 7]
        >>> tribonacci([1, 1], 5)
        [1, 1, 2, 3, 5]
    """
    k = len(signature)
    if n <= 0 or k == 0:
        return []
    if n <= k:
        return list(signature[:n])

    result = list(signature)
    window = sum(result)

    while len(result) < n:
        result.append(window)
        # Скользящая сумма: добавили новый член, убрали выпавший из окна
        window += result[-1] - result[-1 - k]

    return result


# =============================================================================
# DIGITS
# =============================================================================


def split_number_on_digits(number: int) -> List[int]:
    """
    Цифры неотрицательного целого числа, начиная с младшей.

    Examples:
        >>> split_number_on_digits(1203)
        [3, 0, 2, 1]
        >>> split_number_on_digits(0)
        [0]
    """
    if number < 0:
        raise ValueError(f"number must be non-negative, got {number}")

    digits = []
    while True:
        number, digit = divmod(number, 10)
        digits.append(digit)
        if number == 0:
            return digits


def compose_number_with_digits(digits: Sequence[int]) -> int:
    """
    Число из цифр, записанных от старшей к младшей.

    Examples:
        >>> compose_number_with_digits([1, 2, 0, 3])
        1203
    """
    number = 0
    for digit in digits:
        number = number * 10 + digit
    return number


# =============================================================================
# SEQUENCE HELPERS
# =============================================================================


def remove_same_elems(seq: Sequence[T]) -> List[T]:
    """Последовательность без подряд идущих повторов: [1, 1, 2, 1] -> [1, 2, 1]."""
    result: List[T] = []
    for el in seq:
        if not result or result[-1] != el:
            result.append(el)
    return result


def slice_sequence(seq: Sequence[T], first: int, last: int) -> List[T]:
    """Срез [first, last] включительно с обеих сторон."""
    return list(seq[first : last + 1])


def find_all(seq: Sequence[T], predicate: Callable[[T], bool]) -> List[int]:
    """Индексы всех элементов, удовлетворяющих предикату."""
    return [i for i, el in enumerate(seq) if predicate(el)]


def make_pairs(a: Sequence[T], b: Sequence[Any]) -> List[Tuple[T, Any]]:
    """Пары (a[i], b[i]) для последовательностей одинаковой длины."""
    return list(zip(a, b))


def duplicate_sequence(seq: Sequence[T]) -> List[T]:
    """Последовательность, повторённая дважды: [1, 2] -> [1, 2, 1, 2]."""
    return list(seq) * 2
