"""
Tests for the primitive combinators and the Arbitrary wrapper.
"""

import re

import pytest

from src.generators.arbitrary import Arbitrary, create_engine
from src.generators.combinators import elements, regex
from src.generators.errors import EmptyPoolError


class TestElements:

    def test_picks_from_pool(self):
        engine = create_engine(0)
        gen = elements(["a", "b", "c"]).make_gen()
        for _ in range(20):
            assert gen(engine, "en") in ("a", "b", "c")

    def test_empty_pool_raises(self):
        with pytest.raises(EmptyPoolError):
            elements([])

    def test_covers_whole_pool(self):
        engine = create_engine(4)
        values = elements([1, 2, 3]).sample(engine, count=200)
        assert set(values) == {1, 2, 3}

    def test_same_seed_same_draws(self):
        arbitrary = elements(list(range(100)))
        assert arbitrary.sample(create_engine(8), 25) == arbitrary.sample(create_engine(8), 25)


class TestRegex:

    def test_alternation(self):
        engine = create_engine(1)
        values = regex(re.compile("a|b")).sample(engine, count=50)
        assert set(values) == {"a", "b"}

    def test_accepts_plain_string(self):
        value = regex(r"\d{3}").generate(create_engine(6))
        assert re.fullmatch(r"\d{3}", value)

    def test_reproducible(self):
        pattern = re.compile(r"[a-z]{5}\d{2}")
        first = regex(pattern).sample(create_engine(12), 10)
        second = regex(pattern).sample(create_engine(12), 10)
        assert first == second
        assert all(re.fullmatch(pattern, value) for value in first)


    def test_verbose_pattern_parsed_as_written(self):
        pattern = re.compile(r"\d{3} - \d{4}  # local number", re.VERBOSE)
        for value in regex(pattern).sample(create_engine(9), 10):
            assert re.fullmatch(pattern, value)
            assert re.fullmatch(r"\d{3}-\d{4}", value)

    def test_ignorecase_pattern_still_matches(self):
        pattern = re.compile(r"[a-c]{4}", re.IGNORECASE)
        for value in regex(pattern).sample(create_engine(9), 10):
            assert re.fullmatch(pattern, value)


class TestArbitrary:
    """Tests for the deferred generator wrapper."""

    def test_pool_is_passed_to_factory(self):
        seen = []

        def gen(pool=None):
            seen.append(pool)
            return lambda engine, locale="en": pool

        arbitrary = Arbitrary(gen)
        assert arbitrary.generate(create_engine(0), "en", pool=["x"]) == ["x"]
        assert arbitrary.make_gen()(create_engine(0), "en") is None
        assert seen == [["x"], None]

    def test_transform_receives_value_locale_engine(self):
        engine = create_engine(0)
        calls = []

        def record(value, locale, eng):
            calls.append((value, locale, eng))
            return value.upper()

        arbitrary = elements(["abc"]).transform(record)
        assert arbitrary.generate(engine, "fr") == "ABC"
        assert calls == [("abc", "fr", engine)]

    def test_sample_length(self):
        assert len(elements([1]).sample(create_engine(0), count=7)) == 7

    def test_arbitrary_is_reusable(self):
        arbitrary = elements(["a", "b"])
        gen = arbitrary.make_gen()
        engine = create_engine(3)
        draws = [gen(engine, "en") for _ in range(10)]
        assert len(draws) == 10
        assert gen(create_engine(3), "en") == draws[0]
