import pytest

from minishell.printf import HEX_LOWER, HEX_UPPER, printf, sprintf, to_base


def test_plain_text_passes_through():
    assert sprintf("hello world") == "hello world"


def test_none_format_is_empty():
    assert sprintf(None) == ""
    assert printf(None) == 0


def test_char_from_str_and_int():
    assert sprintf("%c%c", "a", ord("b")) == "ab"


def test_string_and_null():
    assert sprintf("[%s]", "abc") == "[abc]"
    assert sprintf("%s", None) == "(null)"


@pytest.mark.parametrize("n", [0, 7, -7, 123456, -(2**31), 2**31 - 1])
def test_decimal_round_trip(n):
    assert int(sprintf("%d", n)) == n
    assert sprintf("%i", n) == sprintf("%d", n)


def test_decimal_wraps_to_32_bits():
    assert int(sprintf("%d", 2**31)) == -(2**31)


def test_unsigned_of_minus_one():
    assert sprintf("%u", -1) == "4294967295"


@pytest.mark.parametrize("n", [0, 1, 255, 4096, 0xDEADBEEF])
def test_hex_round_trip(n):
    assert int(sprintf("%x", n), 16) == n
    assert sprintf("%X", n) == sprintf("%x", n).upper()


def test_pointer_null_and_value():
    assert sprintf("%p", None) == "0x0"
    assert int(sprintf("%p", 4096), 16) == 4096
    assert sprintf("%p", 4096).startswith("0x")


def test_percent_literal():
    assert sprintf("100%%") == "100%"


def test_trailing_percent_is_dropped():
    assert sprintf("abc%") == "abc"


def test_unknown_conversion_writes_char():
    assert sprintf("%z%q") == "zq"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        sprintf("%d %d", 1)


def test_wrong_argument_type_raises():
    with pytest.raises(TypeError):
        sprintf("%d", "x")


def test_printf_writes_and_counts(capsys):
    count = printf("%s-%d%%", "ab", 12)
    out = capsys.readouterr().out
    assert out == "ab-12%"
    assert count == len(out)


@pytest.mark.parametrize("n", [0, 9, 10, 255, 65535, 10**12])
def test_to_base_matches_builtin_formats(n):
    assert to_base(n, "0123456789") == str(n)
    assert to_base(n, HEX_LOWER) == format(n, "x")
    assert to_base(n, HEX_UPPER) == format(n, "X")
    assert to_base(n, "01") == format(n, "b")


def test_to_base_rejects_bad_input():
    with pytest.raises(ValueError):
        to_base(-1, "0123456789")
    with pytest.raises(ValueError):
        to_base(5, "0")