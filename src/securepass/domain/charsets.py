"""Character classes, generation policy, and character pool resolution.

The four classes map to fixed literal sequences.  The symbol set is the
32 ASCII punctuation characters and must stay stable across versions:
the default pool is always 26 + 26 + 10 + 32 = 94 characters.

INVARIANT: A CharPool returned by :func:`build_char_pool` is never empty
and never contains a duplicate character.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from enum import StrEnum

from pydantic import BaseModel, Field, field_validator

from securepass.domain.errors import EmptyCharsetError

logger = logging.getLogger(__name__)


class CharacterClass(StrEnum):
    """Character classes a password may draw from."""

    LOWERCASE = "lowercase"
    UPPERCASE = "uppercase"
    DIGITS = "digits"
    SYMBOLS = "symbols"


CLASS_CHARACTERS: dict[CharacterClass, str] = {
    CharacterClass.LOWERCASE: "abcdefghijklmnopqrstuvwxyz",
    CharacterClass.UPPERCASE: "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    CharacterClass.DIGITS: "0123456789",
    CharacterClass.SYMBOLS: "!\"#$%&'()*+,-./:;<=>?@[\\]^_`{|}~",
}

# Fixed concatenation order for pool construction.
CLASS_ORDER: tuple[CharacterClass, ...] = (
    CharacterClass.LOWERCASE,
    CharacterClass.UPPERCASE,
    CharacterClass.DIGITS,
    CharacterClass.SYMBOLS,
)


class PolicyConfig(BaseModel):
    """A generation request, frozen after construction.

    Attributes:
        length: Number of characters to generate; must be positive.
        include_symbols: Add the symbol class (ignored when ``letters_only``).
        include_numbers: Add the digit class (ignored when ``letters_only``).
        letters_only: Restrict the pool to upper- and lowercase letters.
    """

    model_config = {"frozen": True}

    length: int = Field(default=16, ge=1)
    include_symbols: bool = True
    include_numbers: bool = True
    letters_only: bool = False


class CharPool(BaseModel):
    """Ordered, de-duplicated characters eligible for selection."""

    model_config = {"frozen": True}

    characters: str
    classes: tuple[CharacterClass, ...] = ()

    @field_validator("characters")
    @classmethod
    def _distinct(cls, value: str) -> str:
        """Reject repeats; a repeated character would be drawn more often."""
        if len(set(value)) != len(value):
            repeated = sorted({c for c in value if value.count(c) > 1})
            msg = f"CharPool characters must be distinct, repeated: {''.join(repeated)!r}"
            raise ValueError(msg)
        return value

    @classmethod
    def from_characters(
        cls,
        characters: Iterable[str],
        classes: Iterable[CharacterClass] = (),
    ) -> CharPool:
        """Build a pool, dropping repeated characters but keeping first-seen order."""
        unique = "".join(dict.fromkeys("".join(characters)))
        return cls(characters=unique, classes=tuple(classes))

    def __len__(self) -> int:
        return len(self.characters)

    def __iter__(self) -> Iterator[str]:  # type: ignore[override]
        return iter(self.characters)

    def __contains__(self, char: object) -> bool:
        return isinstance(char, str) and len(char) == 1 and char in self.characters

    def __getitem__(self, index: int) -> str:
        return self.characters[index]


def resolve_classes(policy: PolicyConfig) -> list[CharacterClass]:
    """Resolve policy flags into character classes (first match wins).

    1. ``letters_only`` -> lowercase + uppercase, other flags ignored.
    2. Otherwise letters, plus digits and symbols unless excluded.
    """
    if policy.letters_only:
        return [CharacterClass.LOWERCASE, CharacterClass.UPPERCASE]

    classes = [CharacterClass.LOWERCASE, CharacterClass.UPPERCASE]
    if policy.include_numbers:
        classes.append(CharacterClass.DIGITS)
    if policy.include_symbols:
        classes.append(CharacterClass.SYMBOLS)
    return classes


def pool_from_classes(classes: Iterable[CharacterClass]) -> CharPool:
    """Concatenate *classes* in canonical order into a CharPool.

    Raises:
        EmptyCharsetError: If no class is selected.
    """
    selected = set(classes)
    ordered = [c for c in CLASS_ORDER if c in selected]
    if not ordered:
        raise EmptyCharsetError("No character classes selected")
    return CharPool.from_characters(
        (CLASS_CHARACTERS[c] for c in ordered),
        classes=ordered,
    )


def build_char_pool(policy: PolicyConfig) -> CharPool:
    """Resolve *policy* into a non-empty CharPool.

    Raises:
        EmptyCharsetError: If resolution yields no characters.
    """
    pool = pool_from_classes(resolve_classes(policy))
    if len(pool) == 0:
        raise EmptyCharsetError()
    logger.debug(
        "Resolved character pool: size=%d classes=%s",
        len(pool),
        ",".join(pool.classes),
    )
    return pool
