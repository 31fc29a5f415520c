"""Random NRIC generator.

Output is always in the canonical ``YYMMDD-PB-SSSG`` form and always parses.
Numbers are plausible, not unique: nothing prevents two calls returning the
same value.
"""

from __future__ import annotations

import logging
import random
import secrets
from datetime import date, datetime, timedelta
from typing import List, Optional

from .errors import CodeTableError
from .tables import PlaceOfBirthTable, default_table

logger = logging.getLogger(__name__)

MIN_AGE = 12
MAX_AGE = 112  # Guinness world record

# Upper bound (exclusive) of the place-of-birth draw.
PLACE_CODE_DRAW = 99

# OS entropy; safe to share between threads and never reseeded.
_SYSTEM_RANDOM = secrets.SystemRandom()


def _years_before(moment: datetime, years: int) -> datetime:
    try:
        return moment.replace(year=moment.year - years)
    except ValueError:
        # Feb 29 in a non-leap target year.
        return moment.replace(year=moment.year - years, day=28)


def random_date_of_birth(
    *,
    rng: Optional[random.Random] = None,
    now: Optional[datetime] = None,
    min_age: int = MIN_AGE,
    max_age: int = MAX_AGE,
) -> date:
    """Pick an instant uniformly in ``[now - max_age, now - min_age)`` years."""
    if min_age < 0 or max_age <= min_age:
        raise ValueError(f"expected 0 <= min_age < max_age, got min_age={min_age} max_age={max_age}")
    r = rng or _SYSTEM_RANDOM
    n = now or datetime.now()

    start = _years_before(n, max_age)
    end = _years_before(n, min_age)
    span = int((end - start).total_seconds())
    return (start + timedelta(seconds=r.randrange(span))).date()


def random_place_of_birth_code(
    *,
    rng: Optional[random.Random] = None,
    table: Optional[PlaceOfBirthTable] = None,
) -> int:
    r = rng or _SYSTEM_RANDOM
    tbl = table or default_table()
    if not any(c < PLACE_CODE_DRAW for c in tbl.valid_codes()):
        raise CodeTableError(f"place-of-birth table has no code below {PLACE_CODE_DRAW}")

    draws = 1
    code = r.randrange(PLACE_CODE_DRAW)
    while not tbl.is_valid(code):
        draws += 1
        code = r.randrange(PLACE_CODE_DRAW)
    logger.debug("place-of-birth code %02d accepted after %d draws", code, draws)
    return code


def generate(
    *,
    rng: Optional[random.Random] = None,
    now: Optional[datetime] = None,
    table: Optional[PlaceOfBirthTable] = None,
) -> str:
    """Return a random, parseable NRIC such as ``880808-14-5029``.

    Pass a seeded ``random.Random`` as ``rng`` for reproducible output.

    Raises:
        CodeTableError: ``table`` assigns no code in 00..98.
    """
    r = rng or _SYSTEM_RANDOM

    dob = random_date_of_birth(rng=r, now=now)
    place = random_place_of_birth_code(rng=r, table=table)
    special = r.randrange(10000)

    return f"{dob:%y%m%d}-{place:02d}-{special:04d}"


def generate_many(
    count: int,
    *,
    rng: Optional[random.Random] = None,
    now: Optional[datetime] = None,
    table: Optional[PlaceOfBirthTable] = None,
) -> List[str]:
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    return [generate(rng=rng, now=now, table=table) for _ in range(count)]
