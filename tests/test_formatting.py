import io

import pytest

from solong.formatting import format_message, print_message


def test_plain_text_passes_through():
    assert format_message("Map successfully checked\n") == "Map successfully checked\n"


def test_int_min_is_printed_whole():
    assert format_message("%d", -2147483648) == "-2147483648"


@pytest.mark.parametrize("value", [0, 7, 42, -1, -99, 2147483647])
def test_signed_decimal_matches_python(value):
    assert format_message("%d", value) == str(value)
    assert format_message("%i", value) == str(value)


def test_signed_decimal_wraps_to_32_bits():
    assert int(format_message("%d", 2**31)) == -(2**31)


def test_unsigned_of_negative_wraps():
    assert int(format_message("%u", -1)) == 2**32 - 1


@pytest.mark.parametrize("value", [0, 9, 10, 255, 4096, 0xDEADBEEF])
def test_hex_round_trip(value):
    lower = format_message("%x", value)
    upper = format_message("%X", value)
    assert int(lower, 16) == value
    assert upper == lower.upper()
    assert lower == lower.lower()


def test_null_pointer_and_string():
    assert format_message("%p", 0) == "(nil)"
    assert format_message("%p", None) == "(nil)"
    assert format_message("%s", None) == "(null)"


def test_pointer_is_prefixed_hex():
    text = format_message("%p", 0x1234ABCD)
    assert text.startswith("0x")
    assert int(text[2:], 16) == 0x1234ABCD


def test_char_from_int_and_str():
    assert format_message("%c", 65) == chr(65)
    assert format_message("[%c]", "P") == "[P]"


def test_percent_and_unknown_spec():
    assert format_message("100%%") == "100%"
    assert format_message("%q", 5) == "q"


def test_mixed_arguments_in_order():
    assert format_message("%s has %d coins", "player", 3) == "player has 3 coins"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_message("%d %d", 1)


def test_trailing_percent_raises():
    with pytest.raises(ValueError):
        format_message("oops %")


def test_print_message_writes_and_counts():
    out = io.StringIO()
    count = print_message("Error\n%s", "Impossible map", stream=out)
    assert out.getvalue() == "Error\nImpossible map"
    assert count == len(out.getvalue())