from __future__ import annotations

import random
import re
import unittest
from datetime import date, datetime

from _testutil import ensure_repo_on_path

_CANONICAL_RE = re.compile(r"[0-9]{6}-[0-9]{2}-[0-9]{4}")


class TestGenerate(unittest.TestCase):
    def test_output_always_parses(self) -> None:
        ensure_repo_on_path()

        from mykad import generate, parse

        for _ in range(1000):
            s = generate()
            self.assertEqual(len(s), 14, s)
            self.assertTrue(_CANONICAL_RE.fullmatch(s), s)
            card = parse(s)
            self.assertEqual(card.nric, s)

    def test_seeded_rng_is_reproducible(self) -> None:
        ensure_repo_on_path()

        from mykad import generate

        now = datetime(2024, 6, 1, 12, 0, 0)
        a = [generate(rng=random.Random(42), now=now) for _ in range(3)]
        b = [generate(rng=random.Random(42), now=now) for _ in range(3)]
        self.assertEqual(a, b)

    def test_generate_many(self) -> None:
        ensure_repo_on_path()

        from mykad import generate_many, is_valid

        rng = random.Random(7)
        out = generate_many(50, rng=rng)
        self.assertEqual(len(out), 50)
        self.assertTrue(all(is_valid(s) for s in out))
        self.assertEqual(generate_many(0), [])
        with self.assertRaises(ValueError):
            generate_many(-1)

    def test_only_assigned_place_codes(self) -> None:
        ensure_repo_on_path()

        from mykad.generator import random_place_of_birth_code
        from mykad.tables import default_table

        t = default_table()
        rng = random.Random(1234)
        seen = {random_place_of_birth_code(rng=rng) for _ in range(2000)}
        self.assertTrue(seen <= set(t.valid_codes()))
        self.assertNotIn(99, seen)
        # Both partitions are reachable.
        self.assertTrue(seen & set(t.malaysian_codes()))
        self.assertTrue(seen & set(t.foreigner_codes()))

    def test_table_without_drawable_codes_is_rejected(self) -> None:
        ensure_repo_on_path()

        from types import MappingProxyType

        from mykad import CodeTableError, PlaceOfBirthTable, generate
        from mykad.generator import random_place_of_birth_code

        t = PlaceOfBirthTable(malaysian=MappingProxyType({99: "Test State"}), foreigner=MappingProxyType({}))
        with self.assertRaises(CodeTableError):
            random_place_of_birth_code(rng=random.Random(3), table=t)
        with self.assertRaises(CodeTableError):
            generate(rng=random.Random(3), table=t)

    def test_custom_table_codes_only(self) -> None:
        ensure_repo_on_path()

        from types import MappingProxyType

        from mykad import PlaceOfBirthTable, generate, parse

        t = PlaceOfBirthTable(malaysian=MappingProxyType({10: "Selangor"}), foreigner=MappingProxyType({74: "China"}))
        rng = random.Random(11)
        for _ in range(50):
            s = generate(rng=rng, table=t)
            self.assertIn(s[7:9], ("10", "74"))
            parse(s, table=t)


class TestRandomDateOfBirth(unittest.TestCase):
    def test_within_age_window(self) -> None:
        ensure_repo_on_path()

        from mykad.generator import random_date_of_birth

        now = datetime(2024, 6, 1, 12, 0, 0)
        rng = random.Random(99)
        for _ in range(500):
            d = random_date_of_birth(rng=rng, now=now)
            self.assertGreaterEqual(d, date(1912, 6, 1))
            self.assertLessEqual(d, date(2012, 6, 1))

    def test_leap_day_now(self) -> None:
        ensure_repo_on_path()

        from mykad.generator import random_date_of_birth

        now = datetime(2024, 2, 29, 8, 30, 0)
        d = random_date_of_birth(rng=random.Random(5), now=now, min_age=12, max_age=13)
        self.assertGreaterEqual(d, date(2011, 2, 28))
        self.assertLessEqual(d, date(2012, 2, 29))

    def test_bad_age_window(self) -> None:
        ensure_repo_on_path()

        from mykad.generator import random_date_of_birth

        with self.assertRaises(ValueError):
            random_date_of_birth(min_age=20, max_age=20)
        with self.assertRaises(ValueError):
            random_date_of_birth(min_age=-1, max_age=20)


if __name__ == "__main__":
    unittest.main()
