import pytest

from algorithmics.bits import (
    clear_bit,
    clear_bits_range,
    clear_last_bits,
    count_set_bits,
    count_set_bits_fast,
    get_bit,
    set_bit,
    update_bit,
)


def test_source_examples():
    assert clear_last_bits(15, 2) == 12
    assert clear_bits_range(31, 1, 3) == 17
    assert count_set_bits(15) == 4
    assert count_set_bits_fast(15) == 4


@pytest.mark.parametrize("n", [0, 1, 5, 42, 255, 1024, 123456])
@pytest.mark.parametrize("position", [0, 1, 3, 7, 10])
def test_set_and_clear_round_trip(n, position):
    assert get_bit(set_bit(n, position), position) == 1
    assert get_bit(clear_bit(n, position), position) == 0
    assert update_bit(n, position, get_bit(n, position)) == n


@pytest.mark.parametrize("n", [0, 6, 99, 1023])
def test_get_bit_matches_binary_representation(n):
    digits = bin(n)[2:][::-1]
    for position, digit in enumerate(digits):
        assert get_bit(n, position) == int(digit)


def test_setting_touches_only_one_bit():
    n = 0b1010
    for position in range(8):
        changed = set_bit(n, position) ^ n
        assert changed in (0, 1 << position)


def test_update_bit_rejects_non_bits():
    with pytest.raises(ValueError):
        update_bit(5, 1, 2)


@pytest.mark.parametrize("n", [0, 7, 255, 1000])
def test_clear_last_bits_invariants(n):
    for count in range(12):
        result = clear_last_bits(n, count)
        assert result % (1 << count) == 0
        assert result >> count == n >> count


def test_clear_bits_range_invariants():
    n = 0b1111_1111_1111
    result = clear_bits_range(n, 2, 5)
    for position in range(12):
        expected = 0 if 2 <= position <= 5 else 1
        assert get_bit(result, position) == expected


def test_clear_bits_range_rejects_reversed_range():
    with pytest.raises(ValueError):
        clear_bits_range(31, 3, 1)


@pytest.mark.parametrize("n", [0, 1, 2, 15, 1 << 40, 987654321, (1 << 64) - 1])
def test_count_set_bits_agree_with_binary_string(n):
    expected = bin(n).count("1")
    assert count_set_bits(n) == expected
    assert count_set_bits_fast(n) == expected


@pytest.mark.parametrize("counter", [count_set_bits, count_set_bits_fast])
def test_count_set_bits_rejects_negative(counter):
    with pytest.raises(ValueError):
        counter(-1)