import pytest

from asterixkit.lengthwidth import (
    TABLE_LW_V1,
    TABLE_LW_V2,
    LengthWidth,
    lookup_length_width,
)


def test_first_code():
    assert lookup_length_width(0, 1) == LengthWidth("L < 15", "W < 11.5")
    assert lookup_length_width(0, 2) == LengthWidth("L < 15", "W < 11.5")


def test_last_code_differs_between_versions():
    assert lookup_length_width(15, 1) == LengthWidth("L < 85", "W > 80")
    assert lookup_length_width(15, 2) == LengthWidth("L > 85", "W > 80")


def test_tables_cover_four_bits():
    assert sorted(TABLE_LW_V1) == list(range(16))
    assert sorted(TABLE_LW_V2) == list(range(16))
    assert [lookup_length_width(code, 1) for code in range(16)] == [
        TABLE_LW_V1[code] for code in range(16)
    ]
    assert [lookup_length_width(code, 2) for code in range(16)] == [
        TABLE_LW_V2[code] for code in range(16)
    ]


def test_tables_agree_below_fifteen():
    for code in range(15):
        assert lookup_length_width(code, 1) == lookup_length_width(code, 2)


def test_default_version_is_two():
    assert lookup_length_width(15) == TABLE_LW_V2[15]


@pytest.mark.parametrize("code", [-1, 16, 255])
def test_code_out_of_range(code):
    with pytest.raises(ValueError):
        lookup_length_width(code, 1)


@pytest.mark.parametrize("version", [0, 3])
def test_unknown_version(version):
    with pytest.raises(ValueError):
        lookup_length_width(0, version)