import io

import pytest

from pushswap.output import (
    format_printf,
    printf,
    put_char,
    put_endl,
    put_nbr,
    put_str,
)


def test_put_char_accepts_str_and_int():
    buf = io.StringIO()
    put_char("a", buf)
    put_char(ord("b"), buf)
    assert buf.getvalue() == "ab"


def test_put_char_rejects_long_string():
    with pytest.raises(ValueError):
        put_char("ab", io.StringIO())


def test_put_str_and_endl():
    buf = io.StringIO()
    put_str("hello", buf)
    put_endl("world", buf)
    assert buf.getvalue() == "helloworld\n"


def test_put_nbr_min_int():
    buf = io.StringIO()
    put_nbr(-2147483648, buf)
    assert buf.getvalue() == "-2147483648"


@pytest.mark.parametrize("n", [0, 7, -42, 123456])
def test_put_nbr_round_trip(n):
    buf = io.StringIO()
    put_nbr(n, buf)
    assert int(buf.getvalue()) == n


def test_put_defaults_to_stdout(capsys):
    put_str("pa")
    put_endl("pb")
    assert capsys.readouterr().out == "papb\n"


def test_format_plain_text_and_percent():
    assert format_printf("sa\n") == "sa\n"
    assert format_printf("100%%") == "100%"


def test_format_string_and_char():
    assert format_printf("%s-%c", "rra", "x") == "rra-x"


def test_format_null_string():
    assert format_printf("%s", None) == "(null)"


def test_format_null_pointer():
    assert format_printf("%p", 0) == "(nil)"


def test_format_pointer_round_trip():
    text = format_printf("%p", 4096)
    assert text.startswith("0x")
    assert int(text[2:], 16) == 4096


@pytest.mark.parametrize("n", [0, 5, -5, 2147483647, -2147483648])
def test_format_decimal_round_trip(n):
    assert int(format_printf("%d", n)) == n
    assert format_printf("%i", n) == format_printf("%d", n)


def test_format_decimal_wraps_to_32_bits():
    assert int(format_printf("%d", 2**31)) == -(2**31)


def test_format_unsigned_of_negative():
    assert int(format_printf("%u", -1)) == 2**32 - 1


@pytest.mark.parametrize("n", [0, 10, 255, 48879])
def test_format_hex_round_trip(n):
    lower = format_printf("%x", n)
    assert int(lower, 16) == n
    assert lower == lower.lower()
    assert format_printf("%X", n) == lower.upper()


def test_format_unknown_conversion_prints_nothing_and_keeps_arg():
    assert format_printf("%q%d", 3) == "3"


def test_format_trailing_percent_dropped():
    assert format_printf("ab%") == "ab"


def test_format_missing_argument():
    with pytest.raises(TypeError):
        format_printf("%d")


def test_format_none_format():
    with pytest.raises(TypeError):
        format_printf(None)


def test_printf_writes_and_counts(capsys):
    count = printf("%s %d\n", "ra", 12)
    out = capsys.readouterr().out
    assert out == "ra 12\n"
    assert count == len(out)