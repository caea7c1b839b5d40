"""Character acceptance predicates.

The generator only depends on the :class:`CharacterPredicate` protocol: any
object with a ``test(code_point) -> bool`` method can be used as a filter.  The
:class:`CharacterPredicates` enumeration bundles the commonly needed character
classes and :class:`FunctionPredicate` adapts a plain callable.

Predicates are stored in sets, so they must be hashable.  Enum members and
frozen dataclasses are.
"""

from __future__ import annotations

import unicodedata
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Protocol, runtime_checkable

from .utils.constants import DECIMAL_DIGIT, LETTER_CATEGORIES
from .utils.errors import UnknownPredicateError

__all__ = ["CharacterPredicate", "CharacterPredicates", "FunctionPredicate"]


@runtime_checkable
class CharacterPredicate(Protocol):
    """Protocol for code point filters."""

    def test(self, code_point: int) -> bool:
        """Return ``True`` if ``code_point`` is acceptable."""

        ...


def _category(code_point: int) -> str:
    return unicodedata.category(chr(code_point))


def _in(code_point: int, low: str, high: str) -> bool:
    return ord(low) <= code_point <= ord(high)


class CharacterPredicates(Enum):
    """Ready-made predicates for common character classes."""

    LETTERS = "letters"
    DIGITS = "digits"
    ARABIC_NUMERALS = "arabic_numerals"
    ASCII_LOWERCASE_LETTERS = "ascii_lowercase_letters"
    ASCII_UPPERCASE_LETTERS = "ascii_uppercase_letters"
    ASCII_LETTERS = "ascii_letters"
    ASCII_ALPHA_NUMERALS = "ascii_alpha_numerals"

    def test(self, code_point: int) -> bool:
        """Return ``True`` if ``code_point`` belongs to this character class."""

        if self is CharacterPredicates.LETTERS:
            return _category(code_point) in LETTER_CATEGORIES
        if self is CharacterPredicates.DIGITS:
            return _category(code_point) == DECIMAL_DIGIT
        if self is CharacterPredicates.ARABIC_NUMERALS:
            return _in(code_point, "0", "9")
        if self is CharacterPredicates.ASCII_LOWERCASE_LETTERS:
            return _in(code_point, "a", "z")
        if self is CharacterPredicates.ASCII_UPPERCASE_LETTERS:
            return _in(code_point, "A", "Z")
        if self is CharacterPredicates.ASCII_LETTERS:
            return _in(code_point, "a", "z") or _in(code_point, "A", "Z")
        return (
            _in(code_point, "a", "z") or _in(code_point, "A", "Z") or _in(code_point, "0", "9")
        )

    @classmethod
    def from_name(cls, name: str) -> CharacterPredicates:
        """Resolve ``name`` (case-insensitive, ``-`` or ``_``) to a member."""

        key = name.strip().lower().replace("-", "_")
        try:
            return cls(key)
        except ValueError:
            choices = ", ".join(member.value for member in cls)
            raise UnknownPredicateError(
                f"Unknown predicate {name!r}; expected one of: {choices}"
            ) from None


@dataclass(slots=True, frozen=True)
class FunctionPredicate:
    """Adapt a ``Callable[[int], bool]`` to :class:`CharacterPredicate`."""

    func: Callable[[int], bool]

    def test(self, code_point: int) -> bool:
        return bool(self.func(code_point))
