"""Tests for character classes, PolicyConfig, and pool resolution."""

import itertools

import pytest
from pydantic import ValidationError

from securepass.domain.charsets import (
    CLASS_CHARACTERS,
    CLASS_ORDER,
    CharacterClass,
    CharPool,
    PolicyConfig,
    build_char_pool,
    pool_from_classes,
    resolve_classes,
)
from securepass.domain.errors import EmptyCharsetError

LETTERS = CLASS_CHARACTERS[CharacterClass.LOWERCASE] + CLASS_CHARACTERS[CharacterClass.UPPERCASE]


class TestCharacterClasses:
    def test_class_sizes(self) -> None:
        assert len(CLASS_CHARACTERS[CharacterClass.LOWERCASE]) == 26
        assert len(CLASS_CHARACTERS[CharacterClass.UPPERCASE]) == 26
        assert len(CLASS_CHARACTERS[CharacterClass.DIGITS]) == 10
        assert len(CLASS_CHARACTERS[CharacterClass.SYMBOLS]) == 32

    def test_symbol_set_is_ascii_punctuation(self) -> None:
        import string

        assert CLASS_CHARACTERS[CharacterClass.SYMBOLS] == string.punctuation

    def test_classes_are_disjoint(self) -> None:
        for a, b in itertools.combinations(CLASS_ORDER, 2):
            assert not set(CLASS_CHARACTERS[a]) & set(CLASS_CHARACTERS[b])

    def test_values(self) -> None:
        assert CharacterClass.LOWERCASE == "lowercase"
        assert CharacterClass("symbols") is CharacterClass.SYMBOLS


class TestPolicyConfig:
    def test_defaults(self) -> None:
        policy = PolicyConfig()
        assert policy.length == 16
        assert policy.include_symbols is True
        assert policy.include_numbers is True
        assert policy.letters_only is False

    def test_frozen(self) -> None:
        policy = PolicyConfig()
        with pytest.raises(Exception):
            policy.length = 32  # type: ignore[misc]

    @pytest.mark.parametrize("length", [0, -1])
    def test_rejects_non_positive_length(self, length: int) -> None:
        with pytest.raises(ValidationError):
            PolicyConfig(length=length)


class TestCharPool:
    def test_from_characters_dedupes_in_order(self) -> None:
        pool = CharPool.from_characters("abcabcxa")
        assert pool.characters == "abcx"
        assert len(pool) == 4

    def test_membership(self) -> None:
        pool = CharPool.from_characters("ab")
        assert "a" in pool
        assert "z" not in pool
        assert "ab" not in pool
        assert 1 not in pool

    def test_iteration_and_indexing(self) -> None:
        pool = CharPool.from_characters("xyz")
        assert list(pool) == ["x", "y", "z"]
        assert pool[1] == "y"

    def test_empty_pool_is_representable(self) -> None:
        assert len(CharPool(characters="")) == 0

    @pytest.mark.parametrize("characters", ["aab", "abca", "!!"])
    def test_rejects_repeated_characters(self, characters: str) -> None:
        with pytest.raises(ValidationError, match="distinct"):
            CharPool(characters=characters)

    def test_distinct_characters_accepted(self) -> None:
        assert CharPool(characters="ab").characters == "ab"


class TestResolveClasses:
    def test_default(self) -> None:
        assert resolve_classes(PolicyConfig()) == list(CLASS_ORDER)

    def test_letters_only_ignores_other_flags(self) -> None:
        policy = PolicyConfig(letters_only=True, include_symbols=True, include_numbers=True)
        assert resolve_classes(policy) == [CharacterClass.LOWERCASE, CharacterClass.UPPERCASE]

    def test_no_numbers(self) -> None:
        classes = resolve_classes(PolicyConfig(include_numbers=False))
        assert CharacterClass.DIGITS not in classes
        assert CharacterClass.SYMBOLS in classes

    def test_no_symbols(self) -> None:
        classes = resolve_classes(PolicyConfig(include_symbols=False))
        assert CharacterClass.SYMBOLS not in classes
        assert CharacterClass.DIGITS in classes


class TestBuildCharPool:
    def test_default_pool_is_94(self) -> None:
        pool = build_char_pool(PolicyConfig(length=16))
        assert len(pool) == 94
        assert pool.characters == "".join(CLASS_CHARACTERS[c] for c in CLASS_ORDER)
        assert pool.classes == CLASS_ORDER

    def test_letters_only_is_52(self) -> None:
        pool = build_char_pool(PolicyConfig(letters_only=True))
        assert len(pool) == 52
        assert set(pool) == set(LETTERS)

    def test_no_symbols_no_numbers_is_letters(self) -> None:
        pool = build_char_pool(PolicyConfig(include_symbols=False, include_numbers=False))
        assert pool.characters == LETTERS

    @pytest.mark.parametrize(
        ("symbols", "numbers", "letters_only"),
        list(itertools.product([True, False], repeat=3)),
    )
    def test_every_combination_is_exact_union(
        self, symbols: bool, numbers: bool, letters_only: bool
    ) -> None:
        policy = PolicyConfig(
            include_symbols=symbols, include_numbers=numbers, letters_only=letters_only
        )
        pool = build_char_pool(policy)

        expected = set(LETTERS)
        if not letters_only:
            if numbers:
                expected |= set(CLASS_CHARACTERS[CharacterClass.DIGITS])
            if symbols:
                expected |= set(CLASS_CHARACTERS[CharacterClass.SYMBOLS])

        assert len(pool.characters) == len(set(pool.characters))
        assert set(pool) == expected

    def test_deterministic(self) -> None:
        assert build_char_pool(PolicyConfig()) == build_char_pool(PolicyConfig())


class TestPoolFromClasses:
    def test_all_classes_excluded_fails(self) -> None:
        with pytest.raises(EmptyCharsetError):
            pool_from_classes([])

    def test_canonical_order_regardless_of_input_order(self) -> None:
        pool = pool_from_classes([CharacterClass.DIGITS, CharacterClass.LOWERCASE])
        assert pool.characters.startswith("abc")
        assert pool.characters.endswith("0123456789")
        assert pool.classes == (CharacterClass.LOWERCASE, CharacterClass.DIGITS)

    def test_duplicate_classes_collapse(self) -> None:
        pool = pool_from_classes([CharacterClass.DIGITS, CharacterClass.DIGITS])
        assert pool.characters == "0123456789"

    def test_contradictory_policy_fails(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """A policy that resolves to no classes is rejected, not degraded."""
        monkeypatch.setattr(
            "securepass.domain.charsets.resolve_classes", lambda _policy: []
        )
        with pytest.raises(EmptyCharsetError):
            build_char_pool(PolicyConfig())
