import pytest

from cubecaster.config import CubError
from cubecaster.xpm import (
    TRANSPARENT,
    XpmError,
    load_xpm,
    parse_xpm,
    split_fields,
    strip_comments,
    text_to_rgb,
)

SAMPLE = """/* XPM */
static char *sample[] = {
/* columns rows colors chars-per-pixel */
"2 2 2 1",
"a c #FF0000",
"b c None",
/* pixels */
"ab",
"ba"
};
"""


def test_split_fields_spaces_and_tabs():
    assert split_fields("  a\tb   c \t") == ["a", "b", "c"]


def test_split_fields_empty():
    assert split_fields(" \t ") == []


def test_strip_comments_keeps_length_and_removes_text():
    text = '/* gone */ "x" // also gone\n"y"'
    result = strip_comments(text)
    assert len(result) == len(text)
    assert "gone" not in result
    assert '"x"' in result and '"y"' in result


def test_strip_comments_ignores_markers_inside_quotes():
    text = '"a/*b//c" /* z */'
    result = strip_comments(text)
    assert result.startswith('"a/*b//c"')
    assert "z" not in result


def test_strip_comments_unterminated_block_runs_to_end():
    assert strip_comments('"k" /* open').rstrip() == '"k"'


def test_text_to_rgb_hex():
    assert text_to_rgb("#FF0000", None) == 0xFF0000


def test_text_to_rgb_named_and_case_insensitive():
    assert text_to_rgb("RED", None) == 0xFF0000


def test_text_to_rgb_two_word_name():
    assert text_to_rgb("light", "blue") == 0xADD8E6


def test_text_to_rgb_none_and_unknown():
    assert text_to_rgb("None", None) == -1
    assert text_to_rgb("nosuchcolour", None) == 0


def test_parse_xpm_sample():
    texture = parse_xpm(SAMPLE)
    assert (texture.width, texture.height) == (2, 2)
    assert texture.pixels == [0xFF0000, TRANSPARENT, TRANSPARENT, 0xFF0000]
    assert texture.color_at(1, 0) == TRANSPARENT


def test_parse_xpm_two_chars_per_pixel():
    text = '"1 1 1 2", "ab c #00FF00", "ab"'
    assert parse_xpm(text).pixels == [0x00FF00]


def test_parse_xpm_short_codes_last_definition_wins():
    text = '"1 1 2 1", "a c #000001", "a c #000002", "a"'
    assert parse_xpm(text).pixels == [0x000002]


def test_parse_xpm_long_codes_first_definition_wins():
    text = '"1 1 2 3", "abc c #000001", "abc c #000002", "abc"'
    assert parse_xpm(text).pixels == [0x000001]


def test_parse_xpm_unknown_pixel_code_is_black():
    text = '"2 1 1 1", "a c #0000FF", "az"'
    assert parse_xpm(text).pixels == [0x0000FF, 0]


def test_parse_xpm_comment_with_quotes_is_skipped():
    text = '/* "9 9 9 9" */ "1 1 1 1", "a c #123456", "a"'
    assert parse_xpm(text).pixels == [0x123456]


@pytest.mark.parametrize(
    "text",
    [
        "",
        '"1 1 1"',
        '"0 1 1 1", "a c #000000", "a"',
        '"1 1 1 1", "a x #000000", "a"',
        '"1 1 1 1", "a c", "a"',
        '"1 2 1 1", "a c #000000", "a"',
        '"3 1 1 1", "a c #000000", "aa"',
    ],
)
def test_parse_xpm_rejects_bad_data(text):
    with pytest.raises(XpmError):
        parse_xpm(text)


def test_xpm_error_is_cub_error():
    with pytest.raises(CubError):
        parse_xpm('"x"')


def test_load_xpm_round_trip(tmp_path):
    path = tmp_path / "wall.xpm"
    path.write_text(SAMPLE)
    assert load_xpm(path).pixels == parse_xpm(SAMPLE).pixels


def test_load_xpm_missing_file(tmp_path):
    with pytest.raises(XpmError):
        load_xpm(tmp_path / "missing.xpm")