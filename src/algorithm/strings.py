"""
String Analytics — Алгоритмы над строками

Модуль содержит:
- Скользящее окно: длина наибольшей подстроки без повторяющихся символов
- Общий префикс и общие буквы набора строк
- Перечисление различных перестановок символов строки
- Частоты символьных n-грамм
- Преобразования строк (гласные, пробелы, пунктуация, регистр, разбиение, склейка)
- Сжатие пар "символ + число", regex find-all
- Слова в одинаковых контекстах

Все функции чистые: входные строки не изменяются (str immutable),
результат — новое значение.
"""

import re
import string
from collections import Counter
from typing import Dict, Iterable, List, Sequence, Tuple

from src.core.checkings.predicates import is_vowel

_PUNCT_TABLE = str.maketrans("", "", string.punctuation)
_WORD_RE = re.compile(r"\w+")


# =============================================================================
# SLIDING WINDOW
# =============================================================================


def length_of_longest_substring(s: str) -> int:
    """
    Длина наибольшей подстроки без повторяющихся символов.

    Скользящее окно [start, i]: для каждого символа хранится индекс
    последнего вхождения. Если символ уже встречался внутри окна,
    начало окна переносится сразу за предыдущее вхождение.

    Examples:
        >>> length_of_longest_substring("abcabcbb")
        3
        >>> length_of_longest_substring("")
        0
    """
    last_seen: Dict[str, int] = {}
    start = 0
    best = 0

    for i, ch in enumerate(s):
        prev = last_seen.get(ch)
        if prev is not None and prev >= start:
            start = prev + 1
        last_seen[ch] = i
        best = max(best, i - start + 1)

    return best


# =============================================================================
# COMMON PREFIX / LETTERS
# =============================================================================


def common_prefix(strings: Sequence[str]) -> str:
    """
    Общий префикс всех строк.

    Посимвольный проход по позициям до первого несовпадения
    или до конца самой короткой строки. Для пустого набора — "".

    Examples:
        >>> common_prefix(["flower", "flow", "flight"])
        'fl'
    """
    if not strings:
        return ""

    prefix = []
    for chars in zip(*strings):
        if any(ch != chars[0] for ch in chars[1:]):
            break
        prefix.append(chars[0])

    return "".join(prefix)


def common_letters(words: Sequence[str]) -> str:
    """
    Общие буквы набора слов с учётом кратности.

    Пересечение частотных таблиц: буква, встречающаяся дважды в каждом слове,
    входит в результат дважды. Порядок букв — порядок в первом слове.

    Examples:
        >>> common_letters(["bella", "label", "roller"])
        'ell'
    """
    if not words:
        return ""

    common = Counter(words[0])
    for word in words[1:]:
        common &= Counter(word)

    result = []
    for ch in words[0]:
        if common[ch] > 0:
            result.append(ch)
            common[ch] -= 1

    return "".join(result)


# =============================================================================
# PERMUTATIONS
# =============================================================================


def string_permutations(s: str) -> List[str]:
    """
    Все различные перестановки символов строки в лексикографическом порядке.

    Backtracking по отсортированным символам: одинаковый символ на одну
    и ту же позицию ставится только один раз, поэтому повторяющиеся символы
    не порождают повторяющихся перестановок.

    Examples:
        >>> string_permutations("aab")
        ['aab', 'aba', 'baa']
    """
    chars = sorted(s)
    used = [False] * len(chars)
    current: List[str] = []
    result: List[str] = []

    def backtrack() -> None:
        if len(current) == len(chars):
            result.append("".join(current))
            return
        for i, ch in enumerate(chars):
            if used[i]:
                continue
            # Дубликат ставится только после своего левого двойника
            if i > 0 and chars[i - 1] == ch and not used[i - 1]:
                continue
            used[i] = True
            current.append(ch)
            backtrack()
            current.pop()
            used[i] = False

    backtrack()
    return result


# =============================================================================
# N-GRAMS
# =============================================================================


def calculate_ngram_frequencies(
    words: Iterable[str], n: int
) -> List[Tuple[str, int]]:
    """
    Частоты символьных n-грамм в наборе слов.

    Каждое слово режется на окна длины n; слова короче n не дают n-грамм.

    Args:
        words: Слова
        n: Длина n-граммы

    Returns:
        Пары (n-грамма, частота), отсортированные по убыванию частоты,
        при равной частоте — лексикографически; [] при n <= 0

    Examples:
        >>> calculate_ngram_frequencies(["abab"], 2)
        [('ab', 2), ('ba', 1)]
    """
    if n <= 0:
        return []

    frequencies: Counter[str] = Counter()
    for word in words:
        for i in range(len(word) - n + 1):
            frequencies[word[i : i + n]] += 1

    return sorted(frequencies.items(), key=lambda item: (-item[1], item[0]))


# =============================================================================
# COUNTING
# =============================================================================


def count_of_unique_symbols(s: str) -> int:
    """Количество различных символов строки."""
    return len(set(s))


def sum_of_only_digits(s: str) -> int:
    """Сумма цифр, встречающихся в строке: "a1b2c3" -> 6."""
    return sum(int(ch) for ch in s if ch.isdigit())


def _runs(s: str) -> List[int]:
    """Длины серий подряд идущих одинаковых символов."""
    runs: List[int] = []
    prev = None
    for ch in s:
        if runs and ch == prev:
            runs[-1] += 1
        else:
            runs.append(1)
        prev = ch
    return runs


def count_of_consecutive_occurrences_at(s: str, n: int = 1) -> int:
    """
    Длина n-й (с единицы) серии одинаковых символов.

    Examples:
        >>> count_of_consecutive_occurrences_at("aaabbc", 2)
        2

    Returns:
        0 если серии с таким номером нет
    """
    runs = _runs(s)
    if n < 1 or n > len(runs):
        return 0
    return runs[n - 1]


def first_count_of_consecutive_occurrences(s: str) -> int:
    """Длина первой серии одинаковых символов: "aaab" -> 3."""
    return count_of_consecutive_occurrences_at(s, 1)


def max_count_of_consecutive_occurrences(s: str) -> int:
    """Длина самой длинной серии одинаковых символов (0 для пустой строки)."""
    return max(_runs(s), default=0)


# =============================================================================
# TRANSFORMATIONS
# =============================================================================


def remove_vowels(s: str) -> str:
    """Строка без гласных."""
    return "".join(ch for ch in s if not is_vowel(ch))


def remove_consecutive_spaces(s: str) -> str:
    """Серии пробелов схлопываются в один пробел."""
    result = []
    for ch in s:
        if ch == " " and result and result[-1] == " ":
            continue
        result.append(ch)
    return "".join(result)


def split_str(s: str, delim: str = " ") -> List[str]:
    """Разбиение строки по разделителю (пустые части сохраняются)."""
    return s.split(delim)


def join(tokens: Iterable[str], delim: str) -> str:
    """Склейка строк через разделитель."""
    return delim.join(tokens)


def extract_non_empty_dirs(paths: Iterable[str]) -> List[str]:
    """
    Все непустые каталоги и подкаталоги по списку путей к файлам.

    Каталог непуст, если какой-то путь проходит через него.
    Каждый каталог возвращается с завершающим "/" один раз,
    в лексикографическом порядке.

    Examples:
        >>> extract_non_empty_dirs(["/a/b/file.txt", "/a/c.txt"])
        ['/a/', '/a/b/']
    """
    dirs = set()
    for path in paths:
        for i, ch in enumerate(path):
            if ch == "/" and i > 0:
                dirs.add(path[: i + 1])
    return sorted(dirs)


def str_to_lower(s: str) -> str:
    return s.lower()


def str_to_upper(s: str) -> str:
    return s.upper()


def remove_punct(s: str) -> str:
    """Строка без знаков пунктуации ASCII (string.punctuation)."""
    return s.translate(_PUNCT_TABLE)


def is_contains(strings: Iterable[str], s: str) -> bool:
    """True если s совпадает с одной из строк."""
    return s in strings


# =============================================================================
# PAIRS / REGEX
# =============================================================================


def compress_pairs(tokens: Iterable[str]) -> List[Tuple[str, int]]:
    """
    Сжатие списка пар "символ + число".

    Каждый токен — символ-ключ и целое число за ним ("a5", "b-2").
    Повторяющиеся ключи схлопываются, их значения суммируются;
    ключи идут в порядке первого появления.

    Raises:
        ValueError: если токен не имеет вида "<символ><целое>"

    Examples:
        >>> compress_pairs(["a5", "b3", "a2"])
        [('a', 7), ('b', 3)]
    """
    totals: Dict[str, int] = {}
    for token in tokens:
        if len(token) < 2:
            raise ValueError(f"malformed pair token: {token!r}")
        key, raw = token[0], token[1:]
        try:
            value = int(raw)
        except ValueError:
            raise ValueError(f"malformed pair token: {token!r}") from None
        totals[key] = totals.get(key, 0) + value
    return list(totals.items())


def regex_find_all(s: str, pattern: str, is_match: bool = True) -> List[str]:
    """
    Все совпадения pattern в s либо всё, что между ними.

    Args:
        s: Строка для поиска
        pattern: Регулярное выражение
        is_match: True — список совпадений; False — непустые фрагменты
            строки, не попавшие ни в одно совпадение

    Raises:
        re.error: если pattern невалиден

    Examples:
        >>> regex_find_all("a1b22c", "[0-9]+")
        ['1', '22']
        >>> regex_find_all("a1b22c", "[0-9]+", is_match=False)
        ['a', 'b', 'c']
    """
    compiled = re.compile(pattern)
    if is_match:
        return [m.group(0) for m in compiled.finditer(s)]

    pieces = []
    pos = 0
    for m in compiled.finditer(s):
        pieces.append(s[pos : m.start()])
        pos = m.end()
    pieces.append(s[pos:])
    return [piece for piece in pieces if piece]


# =============================================================================
# CONTEXTS
# =============================================================================


def get_words_in_same_contexts(text: str) -> List[str]:
    """
    Слова, встречающиеся в одинаковых контекстах.

    Контекст вхождения слова — пара соседних слов (предыдущее, следующее).
    Слово попадает в результат, если хотя бы один его контекст совпадает
    с контекстом другого слова. Слова выделяются как последовательности
    \\w+ без учёта регистра; первое и последнее слово текста контекста
    не имеют.

    Returns:
        Уникальные слова в нижнем регистре, лексикографически

    Examples:
        >>> get_words_in_same_contexts("the cat sat, the dog sat")
        ['cat', 'dog']
    """
    words = [w.lower() for w in _WORD_RE.findall(text)]

    by_context: Dict[Tuple[str, str], set] = {}
    for prev, word, nxt in zip(words, words[1:], words[2:]):
        by_context.setdefault((prev, nxt), set()).add(word)

    result = set()
    for group in by_context.values():
        if len(group) > 1:
            result.update(group)
    return sorted(result)
