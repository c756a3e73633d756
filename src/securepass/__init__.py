"""securepass — cryptographically secure password generator."""

from __future__ import annotations

from securepass.domain.charsets import CharacterClass, CharPool, PolicyConfig, build_char_pool
from securepass.domain.errors import (
    EmptyCharsetError,
    InvalidLengthError,
    PasswordGenerationError,
    RandomSourceError,
)
from securepass.domain.generator import generate_password

__version__ = "0.1.0"

__all__ = [
    "CharPool",
    "CharacterClass",
    "EmptyCharsetError",
    "InvalidLengthError",
    "PasswordGenerationError",
    "PolicyConfig",
    "RandomSourceError",
    "__version__",
    "build_char_pool",
    "generate_password",
]
