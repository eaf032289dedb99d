import pytest

from cubecaster.xpm_colors import COLORS, lookup_color


@pytest.mark.parametrize(
    "name, expected",
    [
        ("red", 0xFF0000),
        ("navy", 0x80),
        ("white", 0xFFFFFF),
        ("black", 0x0),
        ("gray50", 0x7F7F7F),
    ],
)
def test_known_names(name, expected):
    assert lookup_color(name) == expected


def test_lookup_ignores_case():
    assert lookup_color("RED") == lookup_color("red")
    assert lookup_color("Ghost White") == lookup_color("ghost white")


def test_first_entry_wins_for_repeated_names():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light goldenrod") == 0xFAFAD2


def test_none_is_transparent():
    assert lookup_color("none") == -1


def test_unknown_name_gives_none():
    assert lookup_color("no such colour") is None
    assert lookup_color("") is None


@pytest.mark.parametrize("level", [0, 1, 37, 64, 99, 100])
def test_gray_and_grey_spellings_agree(level):
    assert lookup_color(f"gray{level}") == lookup_color(f"grey{level}")


def test_numbered_first_variant_matches_base_name():
    for base in ("snow", "bisque", "ivory", "azure", "tomato", "orange"):
        assert lookup_color(f"{base}1") == lookup_color(base)


def test_spaced_and_joined_names_agree():
    assert lookup_color("alice blue") == lookup_color("aliceblue")
    assert lookup_color("dodger blue") == lookup_color("dodgerblue")


def test_table_values_fit_in_24_bits():
    assert all(-1 <= color <= 0xFFFFFF for color in COLORS.values())


def test_every_table_name_is_found_in_upper_case():
    for name, color in COLORS.items():
        assert lookup_color(name.upper()) == color


def test_table_is_read_only():
    with pytest.raises(TypeError):
        COLORS["red"] = 0  # type: ignore[index]
    assert lookup_color("red") == 0xFF0000