import pytest

from spine_anim.colour import DEFAULT_COLOUR, parse_colour


def test_eight_digit_colour_is_taken_as_is():
    assert parse_colour("ffffffff") == DEFAULT_COLOUR
    assert parse_colour("12345678") == 0x12345678


def test_case_does_not_matter():
    assert parse_colour("ABCDEF12") == parse_colour("abcdef12")


def test_six_digit_colour_gets_full_low_byte():
    assert parse_colour("000000") == 0xFF


def test_six_digit_colour_is_shifted():
    result = parse_colour("abcdef")
    assert result & 0xFF == 0xFF
    assert result > 0xABCDEF


def test_other_lengths_are_not_shifted():
    assert parse_colour("fff") == 0xFFF
    assert parse_colour("1234567") == 0x1234567


@pytest.mark.parametrize("text", ["", "xyz", "12 34", "0x1234", "123456789"])
def test_invalid_colours_raise(text):
    with pytest.raises(ValueError):
        parse_colour(text)


def test_non_string_raises():
    with pytest.raises(ValueError):
        parse_colour(0xFFFFFF)