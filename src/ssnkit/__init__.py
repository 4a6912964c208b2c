"""ssnkit — validate and generate birth-date encoded 10-digit identifiers."""

from .codes import CENTURY_BANDS, CenturyBand, DayCodes, day_codes, month_code, year_code
from .config import GenerationOptions, Sex, ValidationOptions
from .decoder import DecodedSSN, decode_ssn
from .errors import (
    ConfigError,
    DayOutOfRangeError,
    GenerationExhaustedError,
    InvalidBirthDateError,
    SSNGenerationError,
    SSNKitError,
    UnsupportedYearError,
)
from .generator import default_check_digit, generate_ssn, iter_ssns
from .validator import validate_ssn

__version__ = "0.1.0"

__all__ = [
    "CENTURY_BANDS",
    "CenturyBand",
    "DayCodes",
    "day_codes",
    "month_code",
    "year_code",
    "GenerationOptions",
    "ValidationOptions",
    "Sex",
    "DecodedSSN",
    "decode_ssn",
    "ConfigError",
    "DayOutOfRangeError",
    "GenerationExhaustedError",
    "InvalidBirthDateError",
    "SSNGenerationError",
    "SSNKitError",
    "UnsupportedYearError",
    "default_check_digit",
    "generate_ssn",
    "iter_ssns",
    "validate_ssn",
]
