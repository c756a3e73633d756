"""Shared pytest fixtures for securepass tests."""

from __future__ import annotations

from collections.abc import Generator, Iterable
from pathlib import Path

import pytest
from click.testing import CliRunner

from securepass.services.telemetry import _current_span, disable_telemetry


class ScriptedSource:
    """Entropy source that replays a fixed byte stream.

    Raises AssertionError when the script runs dry so a test never
    silently loops on rejected draws.
    """

    def __init__(self, data: Iterable[int]) -> None:
        self._data = bytes(data)
        self._pos = 0
        self.requests: list[int] = []

    def token_bytes(self, n: int) -> bytes:
        self.requests.append(n)
        chunk = self._data[self._pos : self._pos + n]
        assert len(chunk) == n, "scripted entropy exhausted"
        self._pos += n
        return chunk

    @property
    def consumed(self) -> int:
        return self._pos


class ConstantSource:
    """Entropy source that always returns the same byte."""

    def __init__(self, value: int) -> None:
        self.value = value
        self.calls = 0

    def token_bytes(self, n: int) -> bytes:
        self.calls += 1
        return bytes([self.value]) * n


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def scripted_source() -> type[ScriptedSource]:
    """Factory for deterministic byte-stream entropy sources."""
    return ScriptedSource


@pytest.fixture
def constant_source() -> type[ConstantSource]:
    """Factory for single-byte entropy sources."""
    return ConstantSource


@pytest.fixture
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run from an empty directory with no securepass config or env overrides.

    Config discovery walks up from the CWD, so a temp dir keeps any
    developer-local securepass.toml out of the tests.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("SECUREPASS_CONFIG", raising=False)
    for name in (
        "SECUREPASS_GENERATOR__LENGTH",
        "SECUREPASS_GENERATOR__INCLUDE_SYMBOLS",
        "SECUREPASS_GENERATOR__INCLUDE_NUMBERS",
        "SECUREPASS_GENERATOR__LETTERS_ONLY",
        "SECUREPASS_GENERATOR__MIN_LENGTH",
    ):
        monkeypatch.delenv(name, raising=False)
    return tmp_path


@pytest.fixture(autouse=True)
def _reset_telemetry_state() -> Generator[None]:
    """Verbose CLI runs enable telemetry in the shared context; undo it."""
    yield
    disable_telemetry()
    _current_span.set(None)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """CLI runs reconfigure the root logger; put it back afterwards."""
    import logging

    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("securepass")
    pkg_level = pkg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)
