"""
Arbitrary: a deferred, engine- and locale-parameterized generator.

An Arbitrary holds no state of its own. Each draw depends only on the
engine and locale handed to it, and on whatever its generation function
reads at that moment.
"""

import random
from typing import Any, Callable, List, Optional, Sequence

GenFn = Callable[..., Any]
GenFactory = Callable[[Optional[Sequence[Any]]], GenFn]
TransformFn = Callable[[Any, str, random.Random], Any]


def create_engine(random_seed: Optional[int] = None) -> random.Random:
    """Create a randomness engine; a fixed seed gives a replayable engine."""
    return random.Random(random_seed)


class Arbitrary:
    """
    Wraps a generation factory ``gen(pool) -> (engine, locale) -> value``.

    ``pool`` is None when not supplied. A supplied pool, even an empty one,
    replaces whatever the factory would otherwise look up.
    """

    def __init__(self, gen: GenFactory):
        self._gen = gen

    def make_gen(self, pool: Optional[Sequence[Any]] = None) -> GenFn:
        """Realize the per-call function ``(engine, locale) -> value``."""
        return self._gen(pool)

    def generate(
        self,
        engine: random.Random,
        locale: Optional[str] = None,
        pool: Optional[Sequence[Any]] = None,
    ) -> Any:
        """Draw one value."""
        return self.make_gen(pool)(engine, locale)

    def sample(
        self,
        engine: random.Random,
        count: int = 10,
        locale: Optional[str] = None,
    ) -> List[Any]:
        """Draw ``count`` independent values from the same engine."""
        gen = self.make_gen()
        return [gen(engine, locale) for _ in range(count)]

    def transform(self, fn: TransformFn) -> "Arbitrary":
        """
        Map every draw through ``fn(value, locale, engine)``.

        The argument order matches Definitions.formater, so a formatter can
        be passed straight in.
        """
        source = self._gen

        def gen(pool: Optional[Sequence[Any]] = None) -> GenFn:
            inner = source(pool)

            def run(engine: random.Random, locale: Optional[str] = None) -> Any:
                return fn(inner(engine, locale), locale, engine)

            return run

        return Arbitrary(gen)
