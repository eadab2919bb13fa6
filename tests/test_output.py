import io

import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.kml.output import (
    format_printf,
    printf,
    put_char,
    put_endl,
    put_nbr,
    put_str,
)

INT32 = st.integers(min_value=-(2**31), max_value=2**31 - 1)


@given(INT32)
def test_decimal_round_trip(n):
    assert int(format_printf("%d", n)) == n
    assert format_printf("%i", n) == format_printf("%d", n)


def test_int_min_is_written_in_full():
    assert format_printf("%d", -2147483648) == "-2147483648"


@given(INT32)
def test_unsigned_round_trip(n):
    assert int(format_printf("%u", n)) == n % 2**32


@given(INT32)
def test_hex_round_trip(n):
    lower = format_printf("%x", n)
    upper = format_printf("%X", n)
    assert int(lower, 16) == n % 2**32
    assert lower.upper() == upper
    assert lower == lower.lower()


def test_null_string_and_nil_pointer():
    assert format_printf("%s", None) == "(null)"
    assert format_printf("%p", 0) == "(nil)"
    assert format_printf("%p", None) == "(nil)"


@given(st.integers(min_value=1, max_value=2**64 - 1))
def test_pointer_round_trip(addr):
    text = format_printf("%p", addr)
    assert text.startswith("0x")
    assert int(text[2:], 16) == addr


def test_string_char_and_percent():
    assert format_printf("%s!", "hello") == "hello!"
    assert format_printf("%c", ord("z")) == "z"
    assert format_printf("%c", "q") == "q"
    assert format_printf("100%%") == "100%"


def test_unknown_conversion_writes_nothing():
    assert format_printf("a%qb") == "ab"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_printf("%d %d", 1)


def test_none_format_raises():
    with pytest.raises(TypeError):
        printf(None)


def test_printf_writes_to_stdout(capsys):
    count = printf("%s=%d\n", "x", 7)
    out = capsys.readouterr().out
    assert out == format_printf("%s=%d\n", "x", 7)
    assert count == len(out)


def test_printf_empty_format(capsys):
    assert printf("") == 0
    assert capsys.readouterr().out == ""


def test_put_char_and_str():
    stream = io.StringIO()
    assert put_char("a", stream) == 1
    assert put_str("bcd", stream) == 3
    assert stream.getvalue() == "abcd"


def test_put_endl_appends_newline():
    stream = io.StringIO()
    assert put_endl("abc", stream) == 4
    assert stream.getvalue() == "abc\n"


def test_put_str_none_raises():
    with pytest.raises(TypeError):
        put_str(None, io.StringIO())


@given(INT32)
def test_put_nbr_round_trip(n):
    stream = io.StringIO()
    put_nbr(n, stream)
    assert int(stream.getvalue()) == n