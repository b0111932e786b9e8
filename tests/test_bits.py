import pytest

from mcuframe import bits


@pytest.mark.parametrize(
    "a,b,expected",
    [(0, 0, False), (0, 5, True), (3, 0, True), (2, 7, False)],
)
def test_xor(a, b, expected):
    assert bits.xor(a, b) is expected


def test_flag_set_and_clear_round_trip():
    flag = bits.flag_set(0b0001, 0b0100)
    assert bits.flag_is(flag, 0b0100)
    flag = bits.flag_clear(flag, 0b0100)
    assert flag == 0b0001
    assert not bits.flag_is(flag, 0b0100)


def test_flag_mask():
    assert bits.flag_mask(0b1011, 0b0011) == 0b0011


@pytest.mark.parametrize("width", [8, 16, 32])
def test_set_then_test_then_clear(width):
    words = [0, 0, 0]
    bit = width + 3
    bits.set_bit(words, bit, width)
    assert words[1] == 1 << 3
    assert bits.test_bit(words, bit, width)
    bits.clear_bit(words, bit, width)
    assert words == [0, 0, 0]


def test_toggle_twice_restores():
    words = bytearray(b"\x5a\x00")
    bits.toggle_bit(words, 9, 8)
    assert bits.test_bit(words, 9, 8)
    bits.toggle_bit(words, 9, 8)
    assert words == bytearray(b"\x5a\x00")


def test_bytearray_low_bit_order():
    words = bytearray(1)
    bits.set_bit(words, 7, 8)
    assert words[0] == 0x80


def test_bad_width():
    with pytest.raises(ValueError):
        bits.set_bit([0], 0, 12)


def test_negative_bit():
    with pytest.raises(ValueError):
        bits.test_bit([0], -1)