from __future__ import annotations

import pytest

from randstr import (
    CharacterPredicate,
    CharacterPredicates,
    FunctionPredicate,
    RandomStringGenerator,
    UnknownPredicateError,
)


def test_enum_members_satisfy_protocol() -> None:
    for member in CharacterPredicates:
        assert isinstance(member, CharacterPredicate)


def test_function_predicate_satisfies_protocol() -> None:
    pred = FunctionPredicate(lambda cp: cp % 2 == 0)
    assert isinstance(pred, CharacterPredicate)
    assert pred.test(4) is True
    assert pred.test(5) is False


@pytest.mark.parametrize(
    ("predicate", "accepted", "rejected"),
    [
        (CharacterPredicates.LETTERS, "aZéж中", "1 _!"),
        (CharacterPredicates.DIGITS, "09٣", "a!"),
        (CharacterPredicates.ARABIC_NUMERALS, "0123456789", "٣a"),
        (CharacterPredicates.ASCII_LOWERCASE_LETTERS, "az", "AZé"),
        (CharacterPredicates.ASCII_UPPERCASE_LETTERS, "AZ", "azÉ"),
        (CharacterPredicates.ASCII_LETTERS, "azAZ", "09é"),
        (CharacterPredicates.ASCII_ALPHA_NUMERALS, "az09AZ", "_é "),
    ],
)
def test_character_classes(
    predicate: CharacterPredicates, accepted: str, rejected: str
) -> None:
    assert all(predicate.test(ord(ch)) for ch in accepted)
    assert not any(predicate.test(ord(ch)) for ch in rejected)


@pytest.mark.parametrize("name", ["digits", "DIGITS", "Digits", " digits "])
def test_from_name_case_insensitive(name: str) -> None:
    assert CharacterPredicates.from_name(name) is CharacterPredicates.DIGITS


def test_from_name_accepts_dashes() -> None:
    assert CharacterPredicates.from_name("ascii-letters") is CharacterPredicates.ASCII_LETTERS


def test_from_name_unknown() -> None:
    with pytest.raises(UnknownPredicateError, match="vowels"):
        CharacterPredicates.from_name("vowels")


def test_generated_code_points_match_a_predicate() -> None:
    gen = (
        RandomStringGenerator.builder()
        .within_range(0, 0x7F)
        .filtered_by(
            CharacterPredicates.ASCII_UPPERCASE_LETTERS, CharacterPredicates.ARABIC_NUMERALS
        )
        .build()
    )
    text = gen.generate(200)
    assert len(text) == 200
    assert all(ch.isdigit() or ("A" <= ch <= "Z") for ch in text)


def test_predicates_are_or_combined() -> None:
    gen = (
        RandomStringGenerator.builder()
        .within_range(ord("0"), ord("z"))
        .filtered_by(CharacterPredicates.DIGITS, CharacterPredicates.ASCII_LOWERCASE_LETTERS)
        .build()
    )
    text = gen.generate(500)
    assert any(ch.isdigit() for ch in text)
    assert any(ch.islower() for ch in text)


def test_clearing_filter_accepts_previously_rejected() -> None:
    builder = (
        RandomStringGenerator.builder()
        .within_range(ord("0"), ord("z"))
        .filtered_by(CharacterPredicates.DIGITS)
    )
    assert builder.build().generate(100).isdigit()

    text = builder.filtered_by().build().generate(500)
    assert any(not CharacterPredicates.DIGITS.test(ord(ch)) for ch in text)


def test_zero_length_evaluates_no_predicate() -> None:
    calls: list[int] = []

    def record(cp: int) -> bool:
        calls.append(cp)
        return True

    gen = RandomStringGenerator.builder().filtered_by(FunctionPredicate(record)).build()
    assert gen.generate(0) == ""
    assert calls == []
