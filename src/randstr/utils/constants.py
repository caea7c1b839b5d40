"""Unicode constants shared by the generator and configuration modules."""

from __future__ import annotations

__all__ = [
    "MIN_CODE_POINT",
    "MAX_CODE_POINT",
    "UNASSIGNED",
    "PRIVATE_USE",
    "SURROGATE",
    "EXCLUDED_CATEGORIES",
    "LETTER_CATEGORIES",
    "DECIMAL_DIGIT",
]

MIN_CODE_POINT: int = 0
MAX_CODE_POINT: int = 0x10FFFF

UNASSIGNED: str = "Cn"
PRIVATE_USE: str = "Co"
SURROGATE: str = "Cs"

EXCLUDED_CATEGORIES: frozenset[str] = frozenset({UNASSIGNED, PRIVATE_USE, SURROGATE})

LETTER_CATEGORIES: frozenset[str] = frozenset({"Lu", "Ll", "Lt", "Lm", "Lo"})
DECIMAL_DIGIT: str = "Nd"
