"""Place-of-birth code tables.

Digits 7-8 of an NRIC encode where the holder was born. The 00..99 code space
is split into three disjoint classes:

  - malaysian: a state or federal territory (``lookup`` returns the state)
  - foreigner: a country or world region (``lookup`` returns the country)
  - invalid:   everything else

The authoritative mapping lives in ``data/place_of_birth.yml``. It is loaded
and validated once per process; the resulting table is read-only.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple, Union

import jsonschema
import yaml

from .errors import CodeTableError, InvalidPlaceOfBirthError

logger = logging.getLogger(__name__)

DEFAULT_TABLE_PATH = Path(__file__).resolve().parent / "data" / "place_of_birth.yml"

PARTITIONS = ("malaysian", "foreigner")


def _table_schema() -> Dict[str, Any]:
    codes = {
        "type": "array",
        "minItems": 1,
        "items": {"type": "string", "pattern": "^[0-9]{2}$"},
    }
    partition = {
        "type": "object",
        "minProperties": 1,
        "propertyNames": {"minLength": 1},
        "additionalProperties": codes,
    }
    return {
        "$schema": "https://json-schema.org/draft/2020-12/schema",
        "type": "object",
        "required": list(PARTITIONS),
        "properties": {k: partition for k in PARTITIONS},
        "additionalProperties": False,
    }


@dataclass(frozen=True)
class PlaceOfBirthTable:
    """Immutable code -> label mapping for both partitions."""

    malaysian: Mapping[int, str]
    foreigner: Mapping[int, str]

    def is_malaysian(self, code: int) -> bool:
        return code in self.malaysian

    def is_foreigner(self, code: int) -> bool:
        return code in self.foreigner

    def is_valid(self, code: int) -> bool:
        return self.is_malaysian(code) or self.is_foreigner(code)

    def lookup(self, code: int) -> str:
        if code in self.malaysian:
            return self.malaysian[code]
        if code in self.foreigner:
            return self.foreigner[code]
        raise InvalidPlaceOfBirthError(f"Invalid place of birth code: {code:02d}")

    def malaysian_codes(self) -> Tuple[int, ...]:
        return tuple(sorted(self.malaysian))

    def foreigner_codes(self) -> Tuple[int, ...]:
        return tuple(sorted(self.foreigner))

    def valid_codes(self) -> Tuple[int, ...]:
        return tuple(sorted([*self.malaysian, *self.foreigner]))

    def codes_for(self, label: str) -> Tuple[int, ...]:
        """Reverse lookup: every code assigned to ``label`` (either partition)."""
        want = str(label or "").strip().casefold()
        out = [c for c, v in self.malaysian.items() if v.casefold() == want]
        out += [c for c, v in self.foreigner.items() if v.casefold() == want]
        return tuple(sorted(out))


def _build_partition(raw: Mapping[str, Any], name: str, seen: Dict[int, str]) -> Mapping[int, str]:
    out: Dict[int, str] = {}
    for label, codes in raw.items():
        for c in codes:
            code = int(c)
            if code in seen:
                raise CodeTableError(
                    f"place-of-birth code {c} assigned twice: {seen[code]!r} and {name}.{label}"
                )
            seen[code] = f"{name}.{label}"
            out[code] = str(label)
    return MappingProxyType(out)


def load_table(path: Union[str, Path, None] = None) -> PlaceOfBirthTable:
    """Load and validate a place-of-birth table from YAML.

    Raises:
        CodeTableError: missing file, bad YAML, schema violation or a code
        assigned more than once.
    """
    p = Path(path) if path is not None else DEFAULT_TABLE_PATH
    if not p.exists():
        raise CodeTableError(f"place-of-birth table not found: {p}")

    try:
        data = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise CodeTableError(f"place-of-birth table is not valid YAML: {p}: {e}") from e

    try:
        jsonschema.validate(instance=data, schema=_table_schema())
    except jsonschema.ValidationError as e:
        raise CodeTableError(f"place-of-birth table schema validation failed: {p}: {e.message}") from e

    seen: Dict[int, str] = {}
    malaysian = _build_partition(data["malaysian"], "malaysian", seen)
    foreigner = _build_partition(data["foreigner"], "foreigner", seen)

    logger.debug(
        "loaded place-of-birth table %s: %d malaysian codes, %d foreigner codes",
        p,
        len(malaysian),
        len(foreigner),
    )
    return PlaceOfBirthTable(malaysian=malaysian, foreigner=foreigner)


_DEFAULT: Optional[PlaceOfBirthTable] = None
_LOCK = threading.Lock()


def default_table() -> PlaceOfBirthTable:
    """Return the bundled table, loading it on first use."""
    global _DEFAULT
    if _DEFAULT is None:
        with _LOCK:
            if _DEFAULT is None:
                _DEFAULT = load_table()
    return _DEFAULT


def lookup(code: int) -> str:
    return default_table().lookup(code)


def is_malaysian(code: int) -> bool:
    return default_table().is_malaysian(code)


def is_foreigner(code: int) -> bool:
    return default_table().is_foreigner(code)


def is_valid_code(code: int) -> bool:
    return default_table().is_valid(code)
