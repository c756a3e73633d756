"""Entropy sourcing and bias-free index selection.

The entropy source is a capability passed into the generator rather than
a process-wide RNG object.  Production code gets a fresh
:class:`OsEntropySource` per call; tests inject deterministic fakes.

Index selection never reduces a raw draw with a bare modulo.  Draws are
rejected unless they fall below the largest multiple of the target range
that fits in the byte span, which keeps every index equally likely.
"""

from __future__ import annotations

import secrets
from typing import Protocol, runtime_checkable

from securepass.domain.errors import RandomSourceError

# Consecutive rejections tolerated before the source is considered broken.
# A healthy source rejects with probability < 1/2 per draw.
MAX_REJECTIONS = 1000


@runtime_checkable
class EntropySource(Protocol):
    """Anything that can produce *n* uniformly random bytes."""

    def token_bytes(self, n: int) -> bytes: ...


class OsEntropySource:
    """Operating-system CSPRNG (``getrandom`` / ``/dev/urandom`` / equivalent)."""

    def token_bytes(self, n: int) -> bytes:
        try:
            return secrets.token_bytes(n)
        except (OSError, NotImplementedError) as exc:
            msg = f"OS entropy source unavailable: {exc}"
            raise RandomSourceError(msg) from exc


def bytes_needed(upper: int) -> int:
    """Minimum number of bytes whose span covers ``range(upper)``."""
    return max(1, ((upper - 1).bit_length() + 7) // 8)


def random_below(source: EntropySource, upper: int) -> tuple[int, int]:
    """Draw a uniform integer in ``[0, upper)`` by rejection sampling.

    Returns:
        ``(value, rejected)`` where *rejected* counts discarded draws.

    Raises:
        ValueError: If *upper* is not positive.
        RandomSourceError: If the source misbehaves or keeps producing
            out-of-range values.
    """
    if upper < 1:
        msg = f"upper bound must be positive, got {upper}"
        raise ValueError(msg)

    n = bytes_needed(upper)
    span = 256**n
    limit = span - (span % upper)

    for rejected in range(MAX_REJECTIONS):
        raw = source.token_bytes(n)
        if not isinstance(raw, bytes | bytearray) or len(raw) != n:
            got = len(raw) if isinstance(raw, bytes | bytearray) else type(raw).__name__
            msg = f"Entropy source returned {got} instead of {n} bytes"
            raise RandomSourceError(msg)
        value = int.from_bytes(raw, "big")
        if value < limit:
            return value % upper, rejected

    msg = f"Entropy source rejected {MAX_REJECTIONS} consecutive draws for range {upper}"
    raise RandomSourceError(msg)
