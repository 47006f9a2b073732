import pytest

from solong.xpm import (
    TRANSPARENT,
    XpmError,
    load_xpm,
    parse_xpm,
    parse_xpm_text,
    quoted_lines,
    strip_comments,
)

SAMPLE = """/* XPM */
static char *sample[] = {
/* columns rows colors chars-per-pixel */
"2 2 3 1",
"a c #FF0000",
"b c blue",
". c None",
/* pixels */
"ab",
".a"
};
"""


def test_strip_comments_keeps_length_and_removes_comments():
    text = 'x /* gone */ "keep /* this */" // tail\n"y"'
    result = strip_comments(text)
    assert len(result) == len(text)
    assert "gone" not in result
    assert "tail" not in result
    assert '"keep /* this */"' in result


def test_quoted_lines():
    assert list(quoted_lines('"ab" junk "cd" "unterminated')) == ["ab", "cd"]


def test_parse_sample_text():
    image = parse_xpm_text(SAMPLE)
    assert (image.width, image.height) == (2, 2)
    assert image.get_pixel(0, 0) == 0xFF0000
    assert image.get_pixel(1, 0) == 0xFF
    assert image.get_pixel(0, 1) == TRANSPARENT
    assert image.get_pixel(1, 1) == image.get_pixel(0, 0)


def test_two_word_colour_name():
    image = parse_xpm(["1 1 1 1", "n c navy blue", "n"])
    assert image.get_pixel(0, 0) == 0x80


def test_two_chars_per_pixel():
    image = parse_xpm(["2 1 2 2", "aa c #00FF00", "bb c #0000FF", "bbaa"])
    assert image.get_pixel(0, 0) == 0x0000FF
    assert image.get_pixel(1, 0) == 0x00FF00


def test_many_chars_per_pixel_first_entry_wins():
    image = parse_xpm(["1 1 2 3", "abc c #112233", "abc c #445566", "abc"])
    assert image.get_pixel(0, 0) == 0x112233


def test_few_chars_per_pixel_last_entry_wins():
    image = parse_xpm(["1 1 2 1", "a c #112233", "a c #445566", "a"])
    assert image.get_pixel(0, 0) == 0x445566


def test_unknown_key_is_black():
    image = parse_xpm(["2 1 1 1", "a c #123456", "az"])
    assert image.get_pixel(1, 0) == 0
    assert image.get_pixel(0, 0) == 0x123456


@pytest.mark.parametrize(
    "lines",
    [
        ["0 1 1 1", "a c red", "a"],
        ["1 1 1", "a c red", "a"],
        ["1 1 1 1", "a s name", "a"],
        ["1 1 1 1", "a c", "a"],
        ["1 2 1 1", "a c red", "a"],
        [],
    ],
)
def test_invalid_data_raises(lines):
    with pytest.raises(XpmError):
        parse_xpm(lines)


def test_load_xpm_from_file(tmp_path):
    path = tmp_path / "sample.xpm"
    path.write_text(SAMPLE)
    image = load_xpm(path)
    assert image.to_rgb_bytes() == parse_xpm_text(SAMPLE).to_rgb_bytes()


def test_load_missing_file(tmp_path):
    with pytest.raises(XpmError):
        load_xpm(tmp_path / "missing.xpm")