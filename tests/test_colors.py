import pytest

from solong.colors import lookup_color, parse_color


@pytest.mark.parametrize(
    "name, expected",
    [
        ("red", 0xFF0000),
        ("snow", 0xFFFAFA),
        ("navy", 0x80),
        ("gray50", 0x7F7F7F),
        ("lightgreen", 0x90EE90),
        ("black", 0x0),
    ],
)
def test_lookup_known_names(name, expected):
    assert lookup_color(name) == expected


def test_lookup_ignores_case():
    assert lookup_color("RED") == lookup_color("red")
    assert lookup_color("Ghost White") == 0xF8F8FF


def test_lookup_none_is_transparent():
    assert lookup_color("none") == -1


def test_lookup_first_duplicate_wins():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light slate") == 0x778899
    assert lookup_color("light goldenrod") == 0xFAFAD2


def test_lookup_unknown_raises():
    with pytest.raises(KeyError):
        lookup_color("not a colour")


def test_gray_and_grey_agree():
    for n in range(101):
        assert lookup_color(f"gray{n}") == lookup_color(f"grey{n}")


def test_parse_hex_spec():
    assert parse_color("#ff00ff") == 0xFF00FF
    assert parse_color("#4F3818", None) == 0x4F3818


def test_parse_hex_ignores_extra():
    assert parse_color("#00ff00", "ignored") == 0x00FF00


def test_parse_hex_without_digits_is_zero():
    assert parse_color("#") == 0
    assert parse_color("#zz") == 0


def test_parse_hex_stops_at_first_non_digit():
    assert parse_color("#12g4") == 0x12


def test_parse_hex_wraps_to_signed_32_bits():
    assert parse_color("#FFFFFFFF") == lookup_color("none")


def test_parse_two_word_name():
    assert parse_color("light", "grey") == 0xD3D3D3
    assert parse_color("ghost", "white") == lookup_color("ghost white")


def test_parse_single_name():
    assert parse_color("None") == -1
    assert parse_color("white", None) == 0xFFFFFF


def test_parse_unknown_name_gives_zero():
    assert parse_color("bogus") == 0
    assert parse_color("bogus", "name") == 0


def test_parse_long_spec_is_truncated():
    assert parse_color("red", "x" * 100) == 0
    assert parse_color("r" * 70) == 0