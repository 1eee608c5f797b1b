import pytest

from minishell.strings import (
    split,
    strchr,
    strcmp,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


def test_split_drops_empty_pieces():
    assert split("  a  b ", " ") == ["a", "b"]


def test_split_with_no_separator_present():
    assert split("abc", ",") == ["abc"]


def test_split_only_separators_gives_nothing():
    assert split(",,,", ",") == []


def test_split_joins_back_without_empty_words():
    text = "one:two::three:"
    parts = split(text, ":")
    assert ":".join(parts) == "one:two:three"
    assert all(parts)


def test_split_rejects_none():
    with pytest.raises(TypeError):
        split(None, " ")


def test_strtrim_both_ends():
    assert strtrim("xxhelloxy", "xy") == "hello"


def test_strtrim_everything_removed():
    assert strtrim("aaaa", "a") == ""


def test_strtrim_empty_set_keeps_text():
    assert strtrim("  hi  ", "") == "  hi  "


def test_strtrim_rejects_none():
    with pytest.raises(TypeError):
        strtrim("abc", None)


def test_strnstr_found_within_limit():
    hay = "hello world"
    index = strnstr(hay, "world", len(hay))
    assert hay[index : index + 5] == "world"


def test_strnstr_limit_too_short():
    hay = "hello world"
    assert strnstr(hay, "world", len(hay) - 1) is None


def test_strnstr_empty_needle():
    assert strnstr("abc", "", 0) == 0


def test_strnstr_missing():
    assert strnstr("abc", "zz", 3) is None


def test_strncmp_equal_prefix():
    assert strncmp("abcdef", "abcxyz", 3) == 0


def test_strncmp_ordering():
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0


def test_strncmp_zero_length():
    assert strncmp("a", "b", 0) == 0


def test_strncmp_shorter_string_sorts_first():
    assert strncmp("ab", "abc", 5) < 0


def test_strcmp_equal_and_antisymmetric():
    assert strcmp("same", "same") == 0
    assert strcmp("apple", "banana") == -strcmp("banana", "apple")
    assert strcmp("apple", "banana") < 0


def test_strcmp_difference_is_char_difference():
    assert strcmp("a", "c") == ord("a") - ord("c")


def test_substr_basic():
    assert substr("hello", 1, 3) == "ell"


def test_substr_start_past_end():
    assert substr("hi", 5, 2) == ""


def test_substr_length_clamped():
    assert substr("hello", 2, 100) == "llo"


def test_substr_negative_rejected():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


def test_strchr_first_occurrence():
    text = "hello"
    index = strchr(text, "l")
    assert text[index] == "l"
    assert "l" not in text[:index]


def test_strchr_missing_and_nul():
    assert strchr("hello", "z") is None
    assert strchr("hello", "\0") == len("hello")


def test_strrchr_last_occurrence():
    text = "hello"
    index = strrchr(text, "l")
    assert text[index] == "l"
    assert "l" not in text[index + 1 :]


def test_strrchr_missing_and_nul():
    assert strrchr("abc", "q") is None
    assert strrchr("abc", 0) == len("abc")


def test_strmapi_uses_index():
    assert strmapi("abc", lambda i, c: c.upper() if i == 1 else c) == "aBc"


def test_strmapi_identity_round_trip():
    text = "unchanged"
    assert strmapi(text, lambda i, c: c) == text