"""
Тесты для String Analytics

Проверяемые инварианты:
1. Скользящее окно: длина наибольшей подстроки без повторов, "" -> 0
2. Перестановки без дубликатов при повторяющихся символах
3. n-граммы: сортировка по убыванию частоты, затем лексикографически
4. Общие буквы учитывают кратность
5. Сжатие пар суммирует значения повторяющихся ключей
6. Слова в одинаковых контекстах определяются парой соседей
"""

import pytest

from src.algorithm.strings import (
    calculate_ngram_frequencies,
    common_letters,
    common_prefix,
    count_of_consecutive_occurrences_at,
    count_of_unique_symbols,
    compress_pairs,
    extract_non_empty_dirs,
    first_count_of_consecutive_occurrences,
    get_words_in_same_contexts,
    is_contains,
    join,
    length_of_longest_substring,
    max_count_of_consecutive_occurrences,
    regex_find_all,
    remove_consecutive_spaces,
    remove_punct,
    remove_vowels,
    split_str,
    str_to_lower,
    str_to_upper,
    string_permutations,
    sum_of_only_digits,
)


class TestLengthOfLongestSubstring:
    """Тесты скользящего окна."""

    @pytest.mark.parametrize(
        "s, expected",
        [
            ("abcabcbb", 3),
            ("", 0),
            ("bbbbb", 1),
            ("pwwkew", 3),
            ("abba", 2),
            ("dvdf", 3),
            ("abcdef", 6),
        ],
    )
    def test_examples(self, s, expected):
        assert length_of_longest_substring(s) == expected


class TestCommonPrefix:
    """Тесты common_prefix."""

    def test_basic(self):
        assert common_prefix(["flower", "flow", "flight"]) == "fl"

    def test_no_common(self):
        assert common_prefix(["dog", "racecar", "car"]) == ""

    def test_one_string_is_prefix(self):
        assert common_prefix(["inter", "internet", "interval"]) == "inter"

    def test_contains_empty_string(self):
        assert common_prefix(["abc", ""]) == ""

    def test_single(self):
        assert common_prefix(["alone"]) == "alone"

    def test_empty(self):
        assert common_prefix([]) == ""


class TestCommonLetters:
    """Тесты common_letters."""

    def test_multiplicity(self):
        """Буква, дважды встречающаяся в каждом слове, входит дважды."""
        assert common_letters(["bella", "label", "roller"]) == "ell"

    def test_no_common(self):
        assert common_letters(["abc", "def"]) == ""

    def test_order_of_first_word(self):
        assert common_letters(["cool", "lock", "cook"]) == "co"

    def test_empty(self):
        assert common_letters([]) == ""


class TestStringPermutations:
    """Тесты string_permutations."""

    def test_duplicates_collapsed(self):
        assert string_permutations("aab") == ["aab", "aba", "baa"]

    def test_distinct_characters(self):
        result = string_permutations("abc")
        assert result == ["abc", "acb", "bac", "bca", "cab", "cba"]

    def test_all_same(self):
        assert string_permutations("zzz") == ["zzz"]

    def test_count_with_repeats(self):
        """4! / (2! * 2!) = 6."""
        result = string_permutations("abab")
        assert len(result) == 6
        assert len(set(result)) == 6

    def test_empty(self):
        assert string_permutations("") == [""]


class TestNGramFrequencies:
    """Тесты calculate_ngram_frequencies."""

    def test_sorted_by_frequency_then_lexicographic(self):
        result = calculate_ngram_frequencies(["abab", "ba"], 2)
        assert result == [("ab", 2), ("ba", 2)]

    def test_frequency_order(self):
        result = calculate_ngram_frequencies(["aaa", "ab"], 2)
        assert result == [("aa", 2), ("ab", 1)]

    def test_short_words_ignored(self):
        assert calculate_ngram_frequencies(["a", "bc"], 3) == []

    def test_unigrams(self):
        result = calculate_ngram_frequencies(["cab", "b"], 1)
        assert result == [("b", 2), ("a", 1), ("c", 1)]

    def test_non_positive_n(self):
        assert calculate_ngram_frequencies(["abc"], 0) == []


class TestCounting:
    """Тесты подсчётов по строке."""

    def test_unique_symbols(self):
        assert count_of_unique_symbols("hello") == 4
        assert count_of_unique_symbols("") == 0

    def test_sum_of_only_digits(self):
        assert sum_of_only_digits("a1b2c3") == 6
        assert sum_of_only_digits("no digits") == 0

    def test_consecutive_occurrences_at(self):
        assert count_of_consecutive_occurrences_at("aaabbc") == 3
        assert count_of_consecutive_occurrences_at("aaabbc", 2) == 2
        assert count_of_consecutive_occurrences_at("aaabbc", 3) == 1
        assert count_of_consecutive_occurrences_at("aaabbc", 4) == 0

    def test_first_consecutive(self):
        assert first_count_of_consecutive_occurrences("aaab") == 3
        assert first_count_of_consecutive_occurrences("") == 0

    def test_max_consecutive(self):
        assert max_count_of_consecutive_occurrences("abbcccdd") == 3
        assert max_count_of_consecutive_occurrences("") == 0


class TestTransformations:
    """Тесты преобразований строк."""

    def test_remove_vowels(self):
        assert remove_vowels("Hello World") == "Hll Wrld"

    def test_remove_consecutive_spaces(self):
        assert remove_consecutive_spaces("a   b  c d") == "a b c d"

    def test_split_and_join(self):
        parts = split_str("a,b,,c", ",")
        assert parts == ["a", "b", "", "c"]
        assert join(parts, ",") == "a,b,,c"

    def test_extract_non_empty_dirs(self):
        paths = ["/usr/lib/libc.so", "/usr/bin/ls", "/tmp/x", "/usr/lib/x/y.so"]
        assert extract_non_empty_dirs(paths) == [
            "/tmp/",
            "/usr/",
            "/usr/bin/",
            "/usr/lib/",
            "/usr/lib/x/",
        ]

    def test_extract_relative_dirs(self):
        assert extract_non_empty_dirs(["a/b/c.txt"]) == ["a/", "a/b/"]

    def test_remove_punct(self):
        assert remove_punct("Hello, world! (ok?)") == "Hello world ok"
        assert remove_punct("") == ""

    def test_case(self):
        assert str_to_lower("MiXeD 1") == "mixed 1"
        assert str_to_upper("MiXeD 1") == "MIXED 1"

    def test_is_contains(self):
        assert is_contains(["alpha", "beta"], "beta")
        assert not is_contains(["alpha", "beta"], "bet")
        assert not is_contains([], "x")


class TestCompressPairs:
    """Тесты compress_pairs."""

    def test_repeating_keys_summed(self):
        assert compress_pairs(["a5", "b3", "a2"]) == [("a", 7), ("b", 3)]

    def test_first_seen_order(self):
        assert compress_pairs(["z1", "a1", "z1"]) == [("z", 2), ("a", 1)]

    def test_multi_digit_and_negative(self):
        assert compress_pairs(["x10", "x-4"]) == [("x", 6)]

    def test_empty(self):
        assert compress_pairs([]) == []

    @pytest.mark.parametrize("token", ["a", "", "ab", "a1.5"])
    def test_malformed_token(self, token):
        with pytest.raises(ValueError, match="malformed pair token"):
            compress_pairs([token])


class TestRegexFindAll:
    """Тесты regex_find_all."""

    def test_matches(self):
        assert regex_find_all("a1b22c333", "[0-9]+") == ["1", "22", "333"]

    def test_non_matching_fragments(self):
        assert regex_find_all("a1b22c333", "[0-9]+", is_match=False) == ["a", "b", "c"]

    def test_no_match(self):
        assert regex_find_all("abc", "[0-9]") == []
        assert regex_find_all("abc", "[0-9]", is_match=False) == ["abc"]

    def test_empty_string(self):
        assert regex_find_all("", "a") == []
        assert regex_find_all("", "a", is_match=False) == []


class TestWordsInSameContexts:
    """Тесты get_words_in_same_contexts."""

    def test_shared_context(self):
        assert get_words_in_same_contexts("the cat sat, the dog sat") == ["cat", "dog"]

    def test_case_insensitive(self):
        text = "I like tea. I LOVE tea. I hate coffee."
        assert get_words_in_same_contexts(text) == ["like", "love"]

    def test_no_shared_context(self):
        assert get_words_in_same_contexts("one two three four") == []

    def test_same_word_repeated_is_not_enough(self):
        assert get_words_in_same_contexts("a b c a b c") == []

    def test_short_text(self):
        assert get_words_in_same_contexts("") == []
        assert get_words_in_same_contexts("just two") == []
