import pytest
from ssnkit.codes import (
    CENTURY_BANDS,
    century_offset,
    day_codes,
    month_code,
    year_code,
)


def test_century_bands_are_contiguous_and_cover_1800_2299():
    assert CENTURY_BANDS[0].start == 1800
    assert CENTURY_BANDS[-1].end == 2299
    for prev, cur in zip(CENTURY_BANDS, CENTURY_BANDS[1:]):
        assert cur.start == prev.end + 1
    assert [b.offset for b in CENTURY_BANDS] == [80, 0, 20, 40, 60]


@pytest.mark.parametrize(
    "year, offset",
    [(1799, None), (1800, 80), (1899, 80), (1900, 0), (1999, 0), (2000, 20),
     (2100, 40), (2299, 60), (2300, None)],
)
def test_century_offset(year, offset):
    assert century_offset(year) == offset


def test_day_codes():
    codes = day_codes(1)
    assert (codes.male, codes.female) == ("11", "51")
    codes = day_codes(31)
    assert (codes.male, codes.female) == ("41", "81")
    assert day_codes(0) is None
    assert day_codes(32) is None


def test_month_code():
    assert month_code(12, 1999) == "12"
    assert month_code(1, 2000) == "21"
    assert month_code(12, 1899) == "92"
    assert month_code(1, 2299) == "61"
    assert month_code(6, 2150) == "46"
    assert month_code(1, 2300) is None


def test_year_code():
    assert year_code(1990) == "90"
    assert year_code(2005) == "05"
    assert year_code(2000) == "00"
