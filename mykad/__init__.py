"""Parse, validate and generate Malaysian NRIC (MyKAD) numbers.

    >>> import mykad
    >>> card = mykad.parse("880808-10-5029")
    >>> card.place_of_birth.province
    'Selangor'
    >>> mykad.validate("880808-99-0001")
    Traceback (most recent call last):
    ...
    mykad.errors.InvalidPlaceOfBirthError: Invalid place of birth: code 99 is not assigned
"""

from __future__ import annotations

from .errors import (
    CodeTableError,
    InvalidDateError,
    InvalidFormatError,
    InvalidGenderDigitError,
    InvalidPlaceOfBirthError,
    MyKADError,
)
from .generator import generate, generate_many
from .models import CitizenType, Gender, MyKAD, PlaceOfBirth
from .nric import decompose, format_nric, is_valid, parse, strip_nric, validate
from .tables import PlaceOfBirthTable, default_table, load_table

__all__ = [
    "__version__",
    "CitizenType",
    "CodeTableError",
    "Gender",
    "InvalidDateError",
    "InvalidFormatError",
    "InvalidGenderDigitError",
    "InvalidPlaceOfBirthError",
    "MyKAD",
    "MyKADError",
    "PlaceOfBirth",
    "PlaceOfBirthTable",
    "decompose",
    "default_table",
    "format_nric",
    "generate",
    "generate_many",
    "is_valid",
    "load_table",
    "parse",
    "strip_nric",
    "validate",
]
__version__ = "0.1.0"
