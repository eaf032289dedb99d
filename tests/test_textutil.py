import pytest

from cubecaster.config import CubError
from cubecaster.textutil import (
    parse_color_value,
    split_words,
    to_rgb,
    trim,
    trim_back,
)


def test_trim_both_ends():
    assert trim(" \t NO ./tex.xpm \r\n") == "NO ./tex.xpm"


def test_trim_all_delimiters_gives_empty():
    assert trim(" \t\v\f\r\n") == ""


def test_trim_custom_set():
    assert trim("xxabcxx", "x") == "abc"


def test_trim_back_keeps_leading_spaces():
    assert trim_back("   1011  \n") == "   1011"


def test_trim_back_all_delimiters_gives_empty():
    assert trim_back("  \t ") == ""


def test_split_words_drops_empty_pieces():
    assert split_words(",,1,,2,3,", ",") == ["1", "2", "3"]


def test_split_words_no_separator():
    assert split_words("abc", ",") == ["abc"]


def test_split_words_only_separators():
    assert split_words(",,,", ",") == []


@pytest.mark.parametrize("value", [0, 1, 128, 255])
def test_parse_color_value_round_trip(value):
    assert parse_color_value(str(value)) == value


def test_parse_color_value_leading_whitespace():
    assert parse_color_value("  42") == 42


def test_parse_color_value_out_of_range():
    with pytest.raises(CubError, match="out of range"):
        parse_color_value("256")


def test_parse_color_value_empty():
    with pytest.raises(CubError, match="empty"):
        parse_color_value("   ")


@pytest.mark.parametrize("text", ["abc", "-5", "12x", "1 a"])
def test_parse_color_value_not_integer(text):
    with pytest.raises(CubError, match="integer"):
        parse_color_value(text)


def test_to_rgb_white():
    assert to_rgb("255,255,255") == 0xFFFFFF


def test_to_rgb_black():
    assert to_rgb("0,0,0") == 0


@pytest.mark.parametrize("rgb", [(220, 100, 0), (1, 2, 3), (0, 255, 17)])
def test_to_rgb_channels_round_trip(rgb):
    red, green, blue = rgb
    packed = to_rgb(f" {red} , {green} ,{blue} ")
    assert (packed >> 16) & 0xFF == red
    assert (packed >> 8) & 0xFF == green
    assert packed & 0xFF == blue


@pytest.mark.parametrize("text", ["1,2", "1,2,3,4", "", "10"])
def test_to_rgb_requires_three_parts(text):
    with pytest.raises(CubError, match="RGB required"):
        to_rgb(text)


def test_to_rgb_channel_out_of_range():
    with pytest.raises(CubError, match="out of range"):
        to_rgb("1,300,2")


def test_to_rgb_blank_channel():
    with pytest.raises(CubError, match="empty"):
        to_rgb("1, ,2")