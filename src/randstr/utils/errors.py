"""Typed exceptions for generator configuration and invocation."""


class InvalidArgumentError(ValueError):
    """Base class for rejected arguments."""


class NegativeLengthError(InvalidArgumentError):
    """Raised when a negative string length is requested."""


class InvertedRangeError(InvalidArgumentError):
    """Raised when the minimum code point is larger than the maximum."""


class NegativeMinimumError(InvalidArgumentError):
    """Raised when the minimum code point is negative."""


class MaximumOutOfRangeError(InvalidArgumentError):
    """Raised when the maximum code point exceeds the Unicode scalar range."""


class UnknownPredicateError(InvalidArgumentError):
    """Raised when a predicate name cannot be resolved."""
