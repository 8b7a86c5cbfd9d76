import pytest

from practicekit.strings import (
    ALPHABET,
    KEY,
    InvalidRomanNumeral,
    length_of_last_word,
    longest_common_prefix,
    roman_to_int,
    str_str,
    substitute,
)


@pytest.mark.parametrize(
    "haystack,needle",
    [("sadbutsad", "sad"), ("hello", "ll"), ("aaa", "a"), ("mississippi", "issip")],
)
def test_str_str_finds_first_occurrence(haystack, needle):
    index = str_str(haystack, needle)
    assert index >= 0
    assert haystack[index:index + len(needle)] == needle
    assert needle not in haystack[:index + len(needle) - 1]


def test_str_str_source_example():
    assert str_str("aaa", "a") == 0


@pytest.mark.parametrize("haystack,needle", [("leetcode", "leeto"), ("abc", "abcd"), ("abc", "")])
def test_str_str_not_found(haystack, needle):
    assert str_str(haystack, needle) == -1


@pytest.mark.parametrize(
    "prefix,word,trailing",
    [("Hello", "World", ""), ("  fly me   to   the", "moon", "  "), ("", "luffy", "   ")],
)
def test_length_of_last_word(prefix, word, trailing):
    assert length_of_last_word(f"{prefix} {word}{trailing}") == len(word)


def test_length_of_last_word_blank():
    assert length_of_last_word("    ") == 0


def test_longest_common_prefix_source_example():
    assert longest_common_prefix(["flower", "flow", "flight"]) == "fl"


@pytest.mark.parametrize(
    "strs",
    [["dog", "racecar", "car"], ["interspecies", "interstellar", "interstate"], ["same", "same"], ["solo"]],
)
def test_longest_common_prefix_is_maximal(strs):
    prefix = longest_common_prefix(strs)
    assert all(s.startswith(prefix) for s in strs)
    if len(prefix) < min(len(s) for s in strs):
        longer = strs[0][:len(prefix) + 1]
        assert not all(s.startswith(longer) for s in strs)


def test_longest_common_prefix_empty_list():
    assert longest_common_prefix([]) == ""


def _to_roman(n):
    table = [
        (1000, "M"), (900, "CM"), (500, "D"), (400, "CD"), (100, "C"), (90, "XC"),
        (50, "L"), (40, "XL"), (10, "X"), (9, "IX"), (5, "V"), (4, "IV"), (1, "I"),
    ]
    parts = []
    for value, symbol in table:
        count, n = divmod(n, value)
        parts.append(symbol * count)
    return "".join(parts)


def test_roman_round_trip():
    for n in range(1, 4000):
        numeral = _to_roman(n)
        assert roman_to_int(numeral) == n
        assert roman_to_int(numeral.lower()) == n


def test_roman_known_value():
    assert roman_to_int("MCMXCIV") == 1994


@pytest.mark.parametrize("text", ["a", "XIZ", "12", "X I"])
def test_roman_invalid_character(text):
    with pytest.raises(InvalidRomanNumeral):
        roman_to_int(text)


def test_substitute_maps_alphabet_to_key():
    assert substitute(ALPHABET) == KEY


def test_substitute_is_a_bijection_on_letters():
    assert len(set(substitute(ALPHABET))) == len(ALPHABET)
    assert set(substitute(ALPHABET)) == set(ALPHABET)


def test_substitute_leaves_other_characters():
    other = "123 !?,.\n-_"
    assert substitute(other) == other


def test_substitute_per_character():
    message = "Hi there, 42!"
    encoded = substitute(message)
    assert len(encoded) == len(message)
    for plain, coded in zip(message, encoded):
        if plain in ALPHABET:
            assert coded == KEY[ALPHABET.index(plain)]
        else:
            assert coded == plain