from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from typa.config.paths import reset_paths
from typa.models import Mode, TextSelection


class FakeClock:
    """Manually advanced stand-in for ``time.monotonic``."""

    def __init__(self, start: float = 100.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeTextProvider:
    """Hands out the given texts in order, repeating the last one."""

    def __init__(self, *texts: str, source: str = "") -> None:
        self.texts = list(texts)
        self.source = source
        self.calls: list[tuple[Mode, str, bool, bool]] = []

    def fetch(
        self,
        mode: Mode,
        language: str,
        include_numbers: bool,
        include_punctuation: bool,
    ) -> TextSelection:
        self.calls.append((mode, language, include_numbers, include_punctuation))
        index = min(len(self.calls) - 1, len(self.texts) - 1)
        return TextSelection(text=self.texts[index], source=self.source)


@pytest.fixture(autouse=True)
def isolate_xdg(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    """Point XDG directories at a temp dir so tests never touch real config."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_STATE_HOME", str(tmp_path / "state"))
    reset_paths()
    try:
        yield
    finally:
        reset_paths()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def make_provider() -> type[FakeTextProvider]:
    return FakeTextProvider


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"
