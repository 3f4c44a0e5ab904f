import pytest

from wirestack.fdf.numbers import fpart, ipart, parse_color, parse_height, rfpart, split_words


@pytest.mark.parametrize("text", ["42", "-7", "+5", "0", "2147483647", "-2147483648"])
def test_parse_height_round_trip(text):
    assert parse_height(text) == int(text)


@pytest.mark.parametrize("text", ["", "-", "+", "12a", "2147483648", "-2147483649", " 1", "1.5"])
def test_parse_height_rejects(text):
    with pytest.raises(ValueError):
        parse_height(text)


def test_parse_color_known_values():
    assert parse_color("0xFF") == 255
    assert parse_color("0xffffff") == 0xFFFFFF
    assert parse_color("0XFFFFFF") == 0xFFFFFF


@pytest.mark.parametrize("value", [0, 1, 0x123456, 0xABCDEF, 0xFF0000])
def test_parse_color_round_trip(value):
    assert parse_color(f"0x{value:06x}") == value
    assert parse_color(f"0X{value:06X}") == value


@pytest.mark.parametrize("text", ["0x", "0xFFFFFFF", "FF", "1xFF", "0xGG", "0x1_0", "0x-1"])
def test_parse_color_rejects(text):
    with pytest.raises(ValueError):
        parse_color(text)


def test_split_words():
    assert split_words("  a  b ", " ") == ["a", "b"]
    assert split_words("", " ") == []
    assert split_words(",,,", ",") == []
    assert split_words("10,0xFF", ",") == ["10", "0xFF"]


def test_split_words_default_separator():
    assert split_words("1 2   3") == ["1", "2", "3"]


def test_ipart_rounds_down():
    assert ipart(2.7) == 2
    assert ipart(-0.5) == -1
    assert ipart(3.0) == 3


@pytest.mark.parametrize("x", [0.0, 0.25, 2.75, -1.25, 100.5, -3.0])
def test_fractional_parts_invariants(x):
    assert ipart(x) + fpart(x) == pytest.approx(x)
    assert 0.0 <= fpart(x) < 1.0
    assert fpart(x) + rfpart(x) == pytest.approx(1.0)