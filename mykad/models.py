from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any, Dict

MALAYSIA = "Malaysia"


class CitizenType(str, Enum):
    MALAYSIAN = "Malaysian"
    FOREIGNER = "Foreigner"


class Gender(str, Enum):
    MALE = "Male"
    FEMALE = "Female"

    @classmethod
    def from_digit(cls, digit: int) -> "Gender":
        """Even digits (including 0) are female, odd digits are male."""
        return cls.FEMALE if digit % 2 == 0 else cls.MALE


@dataclass(frozen=True)
class PlaceOfBirth:
    country: str
    province: str = ""


@dataclass(frozen=True)
class MyKAD:
    """Structured view of a parsed NRIC number.

    ``nric`` is the caller's input verbatim, including any hyphens. Build
    instances with :func:`mykad.parse` or :meth:`MyKAD.from_nric`.
    """

    nric: str
    date_of_birth: date
    place_of_birth: PlaceOfBirth
    citizen_type: CitizenType
    gender: Gender

    @classmethod
    def from_nric(cls, nric: str) -> "MyKAD":
        from .nric import parse

        return parse(nric)

    @property
    def digits(self) -> str:
        from .nric import strip_nric

        return strip_nric(self.nric)

    @property
    def place_of_birth_code(self) -> int:
        return int(self.digits[6:8])

    @property
    def serial(self) -> str:
        return self.digits[8:11]

    @property
    def formatted(self) -> str:
        d = self.digits
        return f"{d[:6]}-{d[6:8]}-{d[8:]}"

    @property
    def is_malaysian(self) -> bool:
        return self.citizen_type is CitizenType.MALAYSIAN

    @property
    def is_foreigner(self) -> bool:
        return self.citizen_type is CitizenType.FOREIGNER

    @property
    def is_male(self) -> bool:
        return self.gender is Gender.MALE

    @property
    def is_female(self) -> bool:
        return self.gender is Gender.FEMALE

    def to_dict(self) -> Dict[str, Any]:
        return {
            "nric": self.nric,
            "date_of_birth": self.date_of_birth.isoformat(),
            "place_of_birth": {
                "country": self.place_of_birth.country,
                "province": self.place_of_birth.province,
            },
            "citizen_type": self.citizen_type.value,
            "gender": self.gender.value,
        }
