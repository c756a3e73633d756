"""Password generation from a CharPool and an entropy source.

INVARIANT: Output is all-or-nothing.  A failure at any position discards
every character drawn so far; no shortened password is ever returned.
"""

from __future__ import annotations

import logging

from securepass.domain.charsets import CharPool
from securepass.domain.entropy import EntropySource, OsEntropySource, random_below
from securepass.domain.errors import EmptyCharsetError, InvalidLengthError

logger = logging.getLogger(__name__)


def generate_password(
    pool: CharPool | str,
    length: int,
    *,
    source: EntropySource | None = None,
) -> str:
    """Draw *length* independent, uniformly random characters from *pool*.

    Args:
        pool: Eligible characters.  A plain string is de-duplicated first.
        length: Number of characters; must be at least 1.
        source: Entropy capability.  Defaults to a fresh OS-backed source.

    Raises:
        InvalidLengthError: If *length* is not a positive integer.
        EmptyCharsetError: If *pool* has no characters.
        RandomSourceError: If the entropy source fails.
    """
    if not isinstance(pool, CharPool):
        pool = CharPool.from_characters(pool)
    if len(pool) == 0:
        raise EmptyCharsetError()

    if isinstance(length, bool) or not isinstance(length, int) or length < 1:
        raise InvalidLengthError(length)

    rng = source if source is not None else OsEntropySource()
    size = len(pool)

    chars: list[str] = []
    rejections = 0
    for _ in range(length):
        index, rejected = random_below(rng, size)
        rejections += rejected
        chars.append(pool[index])

    logger.debug(
        "Generated password: length=%d pool_size=%d rejections=%d",
        length,
        size,
        rejections,
    )
    return "".join(chars)
