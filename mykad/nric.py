"""NRIC decomposition and classification.

An NRIC is ``YYMMDD-PB-SSSG``:

  - YYMMDD: date of birth, two-digit year
  - PB:     place-of-birth code (see :mod:`mykad.tables`)
  - SSS:    serial, not interpreted here
  - G:      gender digit, odd = male, even = female

Either hyphen may be omitted. Two-digit years follow the ``strptime`` pivot:
69-99 map to 1969-1999 and 00-68 map to 2000-2068. No other century
adjustment is made.
"""

from __future__ import annotations

import re
from datetime import date, datetime
from typing import Any, NamedTuple, Optional, Tuple

from .errors import (
    InvalidDateError,
    InvalidFormatError,
    InvalidGenderDigitError,
    InvalidPlaceOfBirthError,
    MyKADError,
)
from .models import MALAYSIA, CitizenType, Gender, MyKAD, PlaceOfBirth
from .tables import PlaceOfBirthTable, default_table

NRIC_LENGTH = 12

# [0-9] rather than \d: \d also matches non-ASCII digits.
_NRIC_RE = re.compile(r"([0-9]{6})-?([0-9]{2})-?([0-9]{3})([0-9])")
_DATE_RE = re.compile(r"[0-9]{6}")
_PLACE_RE = re.compile(r"[0-9]{2}")
_GENDER_RE = re.compile(r"[0-9]")


class NRICFields(NamedTuple):
    date: str
    place: str
    serial: str
    gender: str


def decompose(nric: Any) -> NRICFields:
    """Split an NRIC into its four positional fields.

    A 12-character input is sliced by offset with no content checks; the
    classifier reports bad digits per field. Anything else must match the
    punctuated form.
    """
    if not isinstance(nric, str):
        raise InvalidFormatError(f"Invalid NRIC: expected a string, got {type(nric).__name__}")

    if len(nric) == NRIC_LENGTH:
        return NRICFields(nric[0:6], nric[6:8], nric[8:11], nric[11:12])

    m = _NRIC_RE.fullmatch(nric)
    if m is None:
        raise InvalidFormatError(
            f"Invalid NRIC: {nric!r} (expected YYMMDD-PB-SSSG, hyphens optional)", nric
        )
    return NRICFields(*m.groups())


def _parse_date(value: str, nric: str) -> date:
    if not _DATE_RE.fullmatch(value):
        raise InvalidDateError(f"Invalid date of birth: {value!r} (expected YYMMDD digits)", nric)
    try:
        return datetime.strptime(value, "%y%m%d").date()
    except ValueError as e:
        raise InvalidDateError(f"Invalid date of birth: {value!r} ({e})", nric) from e


def _parse_place(value: str, nric: str, table: PlaceOfBirthTable) -> Tuple[CitizenType, PlaceOfBirth]:
    if not _PLACE_RE.fullmatch(value):
        raise InvalidPlaceOfBirthError(
            f"Invalid place of birth: could not parse code {value!r}", nric
        )
    code = int(value)

    if table.is_malaysian(code):
        return CitizenType.MALAYSIAN, PlaceOfBirth(country=MALAYSIA, province=table.lookup(code))
    if table.is_foreigner(code):
        return CitizenType.FOREIGNER, PlaceOfBirth(country=table.lookup(code), province="")
    raise InvalidPlaceOfBirthError(f"Invalid place of birth: code {value} is not assigned", nric)


def _parse_gender(value: str, nric: str) -> Gender:
    if not _GENDER_RE.fullmatch(value):
        raise InvalidGenderDigitError(f"Invalid gender digit: {value!r}", nric)
    return Gender.from_digit(int(value))


def parse(nric: str, *, table: Optional[PlaceOfBirthTable] = None) -> MyKAD:
    """Parse an NRIC into a :class:`~mykad.models.MyKAD` record.

    Checks run in order and the first failure is raised: format, date,
    place of birth, gender digit.

    Raises:
        InvalidFormatError, InvalidDateError, InvalidPlaceOfBirthError,
        InvalidGenderDigitError (all subclasses of MyKADError).
    """
    fields = decompose(nric)
    tbl = table if table is not None else default_table()

    dob = _parse_date(fields.date, nric)
    citizen_type, place_of_birth = _parse_place(fields.place, nric, tbl)
    gender = _parse_gender(fields.gender, nric)

    return MyKAD(
        nric=nric,
        date_of_birth=dob,
        place_of_birth=place_of_birth,
        citizen_type=citizen_type,
        gender=gender,
    )


def validate(nric: str, *, table: Optional[PlaceOfBirthTable] = None) -> None:
    """Raise the same error :func:`parse` would, or return None."""
    parse(nric, table=table)


def is_valid(nric: Any, *, table: Optional[PlaceOfBirthTable] = None) -> bool:
    try:
        parse(nric, table=table)
    except MyKADError:
        return False
    return True


def strip_nric(nric: str) -> str:
    """Return the 12 digits of an NRIC without hyphens."""
    return "".join(decompose(nric))


def format_nric(nric: str) -> str:
    """Return the canonical ``YYMMDD-PB-SSSG`` form. Does not validate content."""
    f = decompose(nric)
    return f"{f.date}-{f.place}-{f.serial}{f.gender}"
