"""Random string generation by rejection sampling over Unicode code points.

:class:`RandomStringGenerator` draws candidate code points uniformly from an
inclusive range and keeps those that

- are not unassigned (``Cn``), private use (``Co``) or surrogates (``Cs``), and
- satisfy at least one configured :class:`~randstr.predicates.CharacterPredicate`
  (when any are configured).

Generators are built through :class:`RandomStringGeneratorBuilder`, which
validates the range once.  A built generator is immutable and can be shared
between threads; see :mod:`randstr.random_source` for the randomness contract.

There is no cap on the number of rejected candidates.  A range that contains no
acceptable code point makes :meth:`RandomStringGenerator.generate` loop forever.
"""

from __future__ import annotations

import operator
import unicodedata
from dataclasses import dataclass

from .predicates import CharacterPredicate
from .random_source import RandomSource, draw_in_range
from .utils.constants import EXCLUDED_CATEGORIES, MAX_CODE_POINT, MIN_CODE_POINT
from .utils.errors import (
    InvertedRangeError,
    MaximumOutOfRangeError,
    NegativeLengthError,
    NegativeMinimumError,
)
from .utils.logging import get_logger

__all__ = [
    "DEFAULT_MINIMUM_CODE_POINT",
    "DEFAULT_MAXIMUM_CODE_POINT",
    "GenerationConfig",
    "RandomStringGenerator",
    "RandomStringGeneratorBuilder",
]

DEFAULT_MINIMUM_CODE_POINT = MIN_CODE_POINT
DEFAULT_MAXIMUM_CODE_POINT = MAX_CODE_POINT

logger = get_logger(__name__)


@dataclass(slots=True, frozen=True)
class GenerationConfig:
    """Immutable generation parameters.

    ``predicates`` is ``None`` when no filter is configured.  The range invariant
    ``0 <= minimum_code_point <= maximum_code_point <= 0x10FFFF`` is enforced by
    :meth:`RandomStringGeneratorBuilder.within_range`, not here.
    """

    minimum_code_point: int = DEFAULT_MINIMUM_CODE_POINT
    maximum_code_point: int = DEFAULT_MAXIMUM_CODE_POINT
    predicates: frozenset[CharacterPredicate] | None = None
    random_source: RandomSource | None = None


class RandomStringGenerator:
    """Generate random strings of an exact code point length."""

    __slots__ = ("_config",)

    def __init__(self, config: GenerationConfig) -> None:
        self._config = config

    @classmethod
    def builder(cls) -> RandomStringGeneratorBuilder:
        """Return a fresh builder with default settings."""

        return RandomStringGeneratorBuilder()

    @property
    def config(self) -> GenerationConfig:
        return self._config

    def _accepts(self, code_point: int) -> bool:
        if unicodedata.category(chr(code_point)) in EXCLUDED_CATEGORIES:
            return False
        predicates = self._config.predicates
        if predicates is None:
            return True
        return any(predicate.test(code_point) for predicate in predicates)

    def generate(self, length: int) -> str:
        """Return a string of exactly ``length`` code points.

        Raises
        ------
        NegativeLengthError
            If ``length`` is negative.
        TypeError
            If ``length`` is not an integer.
        """

        length = operator.index(length)
        if length < 0:
            raise NegativeLengthError(f"Length {length} is smaller than zero.")
        if length == 0:
            return ""

        cfg = self._config
        chars: list[str] = []
        remaining = length
        rejected = 0
        while remaining > 0:
            code_point = draw_in_range(
                cfg.random_source, cfg.minimum_code_point, cfg.maximum_code_point
            )
            if not self._accepts(code_point):
                rejected += 1
                continue
            chars.append(chr(code_point))
            remaining -= 1

        logger.debug("Generated %d code points, rejected %d candidates", length, rejected)
        return "".join(chars)

    def __repr__(self) -> str:
        cfg = self._config
        return (
            f"{type(self).__name__}(range=[{cfg.minimum_code_point:#x}, "
            f"{cfg.maximum_code_point:#x}], predicates={len(cfg.predicates or ())})"
        )


class RandomStringGeneratorBuilder:
    """Accumulate generator settings; not safe for concurrent mutation.

    Every setter returns the builder so calls can be chained, and the last call
    wins.  :meth:`build` snapshots the current state, so later changes never leak
    into generators that were already built.
    """

    def __init__(self) -> None:
        self._minimum_code_point = DEFAULT_MINIMUM_CODE_POINT
        self._maximum_code_point = DEFAULT_MAXIMUM_CODE_POINT
        self._predicates: set[CharacterPredicate] | None = None
        self._random_source: RandomSource | None = None

    def within_range(self, minimum: int, maximum: int) -> RandomStringGeneratorBuilder:
        """Restrict generated code points to ``[minimum, maximum]``.

        Raises
        ------
        InvertedRangeError
            If ``minimum > maximum``.
        NegativeMinimumError
            If ``minimum < 0``.
        MaximumOutOfRangeError
            If ``maximum`` exceeds ``0x10FFFF``.
        """

        if minimum > maximum:
            raise InvertedRangeError(
                f"Minimum code point {minimum} is larger than maximum code point {maximum}"
            )
        if minimum < 0:
            raise NegativeMinimumError(f"Minimum code point {minimum} is negative")
        if maximum > MAX_CODE_POINT:
            raise MaximumOutOfRangeError(
                f"Maximum code point {maximum} is larger than {MAX_CODE_POINT} (0x10FFFF)"
            )
        self._minimum_code_point = minimum
        self._maximum_code_point = maximum
        return self

    def filtered_by(self, *predicates: CharacterPredicate | None) -> RandomStringGeneratorBuilder:
        """Replace the predicate set; no predicates clears the filter."""

        given = {predicate for predicate in predicates if predicate is not None}
        self._predicates = given or None
        return self

    def using_random(self, source: RandomSource | None) -> RandomStringGeneratorBuilder:
        """Set the randomness source, or restore the default with ``None``."""

        self._random_source = source
        return self

    def build(self) -> RandomStringGenerator:
        """Return a generator for a snapshot of the current settings."""

        predicates = frozenset(self._predicates) if self._predicates is not None else None
        config = GenerationConfig(
            minimum_code_point=self._minimum_code_point,
            maximum_code_point=self._maximum_code_point,
            predicates=predicates,
            random_source=self._random_source,
        )
        logger.debug(
            "Built generator for [%#x, %#x] with %d predicate(s), %s random source",
            config.minimum_code_point,
            config.maximum_code_point,
            len(predicates or ()),
            "custom" if config.random_source is not None else "default",
        )
        return RandomStringGenerator(config)
