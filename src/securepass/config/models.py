"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults live here, securepass.toml only holds
overrides.  A missing file is equivalent to an empty one.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from securepass.domain.charsets import PolicyConfig


class GeneratorConfig(BaseModel):
    """[generator] section."""

    model_config = {"frozen": True}

    length: int = Field(default=16, ge=1)
    include_symbols: bool = True
    include_numbers: bool = True
    letters_only: bool = False
    min_length: int = Field(default=8, ge=1)

    def to_policy(self) -> PolicyConfig:
        """Project the generator section onto a PolicyConfig."""
        return PolicyConfig(
            length=self.length,
            include_symbols=self.include_symbols,
            include_numbers=self.include_numbers,
            letters_only=self.letters_only,
        )
