from datetime import date

import pytest
from ssnkit import GenerationOptions, decode_ssn, generate_ssn


def test_decode_male_20th_century():
    decoded = decode_ssn("2506901238")
    assert decoded.sex == "male"
    assert decoded.birth_date == date(1990, 6, 15)
    assert decoded.sequence == 123
    assert decoded.check_digit == "8"


def test_decode_female_19th_century():
    decoded = decode_ssn("5483500106")
    assert decoded.sex == "female"
    assert decoded.birth_date == date(1850, 3, 4)
    assert decoded.sequence == 10


def test_decode_21st_century_with_whitespace():
    decoded = decode_ssn("20 25 05 001 5")
    assert decoded.birth_date == date(2005, 5, 10)


def test_decode_reverses_generate():
    ssn = generate_ssn("2150-06-15", GenerationOptions(sex="female", sequence=321))
    decoded = decode_ssn(ssn)
    assert (decoded.sex, decoded.birth_date, decoded.sequence) == (
        "female", date(2150, 6, 15), 321,
    )


@pytest.mark.parametrize(
    "ssn",
    [
        "",
        "abc",
        "0006901238",   # day segment below 11
        "4506901238",   # between male and female ranges
        "2513901238",   # month 13
        "4102901238",   # 31 February
        "2506900008",   # sequence 000
        None,
    ],
)
def test_undecodable(ssn):
    assert decode_ssn(ssn) is None
