"""Random Unicode string generation.

Build a generator once, then call :meth:`RandomStringGenerator.generate` as
often as needed::

    from randstr import CharacterPredicates, RandomStringGenerator

    gen = (
        RandomStringGenerator.builder()
        .within_range(ord("0"), ord("z"))
        .filtered_by(CharacterPredicates.LETTERS, CharacterPredicates.DIGITS)
        .build()
    )
    token = gen.generate(20)
"""

from .generator import GenerationConfig, RandomStringGenerator, RandomStringGeneratorBuilder
from .predicates import CharacterPredicate, CharacterPredicates, FunctionPredicate
from .random_source import RandomSource
from .utils.errors import (
    InvalidArgumentError,
    InvertedRangeError,
    MaximumOutOfRangeError,
    NegativeLengthError,
    NegativeMinimumError,
    UnknownPredicateError,
)

__version__ = "0.1.0"

__all__ = [
    "CharacterPredicate",
    "CharacterPredicates",
    "FunctionPredicate",
    "GenerationConfig",
    "InvalidArgumentError",
    "InvertedRangeError",
    "MaximumOutOfRangeError",
    "NegativeLengthError",
    "NegativeMinimumError",
    "RandomSource",
    "RandomStringGenerator",
    "RandomStringGeneratorBuilder",
    "UnknownPredicateError",
    "__version__",
]
