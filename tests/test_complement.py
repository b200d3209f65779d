import pytest

from asterixkit.complement import two_complement16, two_complement32


def test_two_complement16_positive_number():
    assert two_complement16(10, 0x010F) == 271


def test_two_complement16_negative_number():
    assert two_complement16(11, 0x040F) == -1009


def test_two_complement32_positive_number():
    assert two_complement32(20, 0x0007EE0F) == 519695


def test_two_complement32_negative_number():
    assert two_complement32(20, 0x000FEE0F) == -4593


@pytest.mark.parametrize("size_bits", [2, 5, 10, 11, 15])
def test_two_complement16_values_without_sign_bit_are_unchanged(size_bits):
    value = (1 << (size_bits - 1)) - 1
    assert two_complement16(size_bits, value) == value


@pytest.mark.parametrize("size_bits", [2, 10, 20, 31])
def test_two_complement32_sign_bit_alone_is_most_negative(size_bits):
    assert two_complement32(size_bits, 1 << (size_bits - 1)) == -(1 << (size_bits - 1))


def test_two_complement16_result_stays_in_range():
    for data in range(0, 0x10000, 257):
        result = two_complement16(16, data)
        assert -32768 <= result <= 32767


@pytest.mark.parametrize("size_bits", [0, 17])
def test_two_complement16_rejects_bad_width(size_bits):
    with pytest.raises(ValueError):
        two_complement16(size_bits, 1)


def test_two_complement32_rejects_bad_width():
    with pytest.raises(ValueError):
        two_complement32(33, 1)