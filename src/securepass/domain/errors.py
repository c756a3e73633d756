"""Error taxonomy for password generation.

Each error carries a stable ``code`` so the service layer can map it
onto a ServiceError without string matching.
"""

from __future__ import annotations


class PasswordGenerationError(Exception):
    """Base class for all generation failures."""

    code = "GENERATION_FAILED"


class InvalidLengthError(PasswordGenerationError):
    """Requested length is zero, negative, or not an integer."""

    code = "INVALID_LENGTH"

    def __init__(self, length: object) -> None:
        super().__init__(f"Password length must be a positive integer, got {length!r}")
        self.length = length


class EmptyCharsetError(PasswordGenerationError):
    """The resolved character pool has no characters to draw from."""

    code = "EMPTY_CHARSET"

    def __init__(self, message: str = "Character set is empty; check the policy flags") -> None:
        super().__init__(message)


class RandomSourceError(PasswordGenerationError):
    """The OS entropy source failed or returned unusable data."""

    code = "RANDOM_SOURCE"
