from __future__ import annotations

from typing import Optional


class MyKADError(ValueError):
    """Base class for NRIC parsing errors.

    ``field`` names the positional field that failed (``"nric"``, ``"date_of_birth"``,
    ``"place_of_birth"`` or ``"gender"``) and ``nric`` is the offending input.
    """

    field = "nric"

    def __init__(self, message: str, nric: Optional[str] = None) -> None:
        super().__init__(message)
        self.nric = nric


class InvalidFormatError(MyKADError):
    """Raised when the input does not decompose into YYMMDD, PB, SSS and G."""


class InvalidDateError(MyKADError):
    """Raised when the first six digits are not a calendar date."""

    field = "date_of_birth"


class InvalidPlaceOfBirthError(MyKADError):
    """Raised when the place-of-birth code is unparseable or unassigned."""

    field = "place_of_birth"


class InvalidGenderDigitError(MyKADError):
    """Raised when the last character is not a decimal digit."""

    field = "gender"


class CodeTableError(Exception):
    """Raised when a place-of-birth code table fails validation."""
