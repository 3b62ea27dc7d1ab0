import pytest

from fdfview.colornames import text_to_rgb


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("red", 0xFF0000),
        ("snow", 0xFFFAFA),
        ("navy", 0x80),
        ("gray50", 0x7F7F7F),
        ("lightgoldenrodyellow", 0xFAFAD2),
        ("light green", 0x90EE90),
        ("black", 0x0),
    ],
)
def test_known_names(name, expected):
    assert text_to_rgb(name, None) == expected


def test_lookup_ignores_case():
    assert text_to_rgb("ReD", None) == text_to_rgb("red", None)
    assert text_to_rgb("DarkSlateGray", None) == text_to_rgb("darkslategray", None)


def test_two_words_are_joined_with_a_space():
    assert text_to_rgb("navy", "blue") == text_to_rgb("navy blue", None)
    assert text_to_rgb("light", "grey") == text_to_rgb("lightgrey", None)


def test_first_entry_wins_for_duplicate_names():
    assert text_to_rgb("dark", "slate") == 0x2F4F4F
    assert text_to_rgb("light", "slate") == 0x778899
    assert text_to_rgb("light", "goldenrod") == text_to_rgb("lightgoldenrodyellow", None)


def test_none_is_transparent():
    assert text_to_rgb("none", None) == -1
    assert text_to_rgb("None", None) == -1


def test_unknown_name_gives_zero():
    assert text_to_rgb("notacolour", None) == 0
    assert text_to_rgb("red", "ish") == 0


def test_hex_specification():
    assert text_to_rgb("#ff00ff", None) == 0xFF00FF
    assert text_to_rgb("#FFFFFF", None) == text_to_rgb("white", None)


def test_hex_ignores_end_word():
    assert text_to_rgb("#00ff00", "extra") == text_to_rgb("green", None)


def test_hex_stops_at_first_non_hex_digit():
    assert text_to_rgb("#ffzz", None) == text_to_rgb("#ff", None)
    assert text_to_rgb("#", None) == 0
    assert text_to_rgb("#zz", None) == 0


def test_hex_wraps_to_signed_32_bits():
    assert text_to_rgb("#ffffffff", None) == -1


def test_long_joined_name_is_truncated_and_not_found():
    assert text_to_rgb("a" * 60, "red") == 0