"""
Primitive combinators: uniform choice over a pool and regex synthesis.
"""

import random
import re
from typing import Any, Optional, Sequence, Union

import rstr

from .arbitrary import Arbitrary, GenFn
from .errors import EmptyPoolError


def elements(pool: Sequence[Any]) -> Arbitrary:
    """
    Pick one element of ``pool`` with uniform probability.

    Raises:
        EmptyPoolError: if the pool has no elements
    """
    items = list(pool)
    if not items:
        raise EmptyPoolError("elements() needs at least one value to choose from")

    def gen(_pool: Optional[Sequence[Any]] = None) -> GenFn:
        def run(engine: random.Random, locale: Optional[str] = None) -> Any:
            return engine.choice(items)

        return run

    return Arbitrary(gen)


_INLINE_FLAGS = (
    (re.IGNORECASE, "i"),
    (re.MULTILINE, "m"),
    (re.DOTALL, "s"),
    (re.VERBOSE, "x"),
)


def _pattern_source(pattern: Union[str, "re.Pattern[str]"]) -> str:
    """Pattern text with a compiled pattern's flags carried inline."""
    if isinstance(pattern, str):
        return pattern
    letters = "".join(letter for flag, letter in _INLINE_FLAGS if pattern.flags & flag)
    return f"(?{letters}){pattern.pattern}" if letters else pattern.pattern


def regex(pattern: Union[str, "re.Pattern[str]"]) -> Arbitrary:
    """
    Synthesize one string matching ``pattern`` per draw.

    Flags of a compiled pattern are prefixed inline so ``re.VERBOSE`` is
    parsed as written. Case, multiline and dotall flags only widen what
    matches, so the synthesized string still matches the flagged pattern.
    ASCII and LOCALE flags are not carried over.
    """
    source = _pattern_source(pattern)

    def gen(_pool: Optional[Sequence[Any]] = None) -> GenFn:
        def run(engine: random.Random, locale: Optional[str] = None) -> str:
            # Rstr routes every choice through the engine it is built on
            return rstr.Rstr(engine).xeger(source)

        return run

    return Arbitrary(gen)
