"""
Exception hierarchy.

Validation and decoding never raise; these come from the generator and the
config loader.
"""

from __future__ import annotations


class SSNKitError(Exception):
    """Base class for every error raised by ssnkit."""


class ConfigError(SSNKitError):
    """The YAML config file could not be read or did not match the schema."""


class SSNGenerationError(SSNKitError, ValueError):
    """An identifier could not be generated for the given inputs."""


class InvalidBirthDateError(SSNGenerationError):
    def __init__(self, value: object) -> None:
        super().__init__(f"Invalid birth date: {value!r}")
        self.value = value


class DayOutOfRangeError(SSNGenerationError):
    def __init__(self, day: int) -> None:
        super().__init__(f"Birth day must be between 1 and 31, got {day}")
        self.day = day


class UnsupportedYearError(SSNGenerationError):
    def __init__(self, year: int) -> None:
        super().__init__(
            f"Birth year {year} is outside the supported span (1800-2299)"
        )
        self.year = year


class GenerationExhaustedError(SSNGenerationError):
    def __init__(self, attempts: int) -> None:
        super().__init__(
            f"Unable to generate SSN without forbidden patterns after {attempts} attempts"
        )
        self.attempts = attempts
