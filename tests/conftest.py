"""Pytest configuration and shared fixtures.

This module registers custom markers for CI job separation and provides
shared fixtures for the test suite.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any

import pytest

from configseek.adapters.loaders import load_json


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "core: Core models, ports, and services")
    config.addinivalue_line("markers", "loaders: Loader adapters (json, yaml, toml, python)")
    config.addinivalue_line("markers", "cache: Memo cache adapter")
    config.addinivalue_line("markers", "cli: CLI tests")
    config.addinivalue_line(
        "markers", "tra: Test Responsibility Anchor (TRA) - namespace.Anchor format"
    )
    config.addinivalue_line(
        "markers",
        "tier: Test tier for CI job separation (0=instant, 1=fast, 2=standard, 3=slow, 4=manual)",
    )


class CountingLoader:
    """JSON loader that records every file it parses.

    Optionally blocks on `gate` before parsing so tests can hold a load
    in flight while other threads arrive.
    """

    def __init__(self, gate: threading.Event | None = None) -> None:
        self.calls: list[Path] = []
        self.gate = gate
        self._lock = threading.Lock()

    def __call__(self, filepath: Path, contents: str) -> Any:
        with self._lock:
            self.calls.append(filepath)
        if self.gate is not None:
            self.gate.wait(timeout=5)
        return load_json(filepath, contents)


@pytest.fixture
def counting_loader() -> CountingLoader:
    """JSON loader that counts its calls."""
    return CountingLoader()


@pytest.fixture
def tree(tmp_path: Path) -> Path:
    """Directory tree a/b/c under tmp_path; returns the `a` directory."""
    root = tmp_path / "a"
    (root / "b" / "c").mkdir(parents=True)
    return root


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test from an empty directory so no meta-config leaks in."""
    cwd = tmp_path / "cwd"
    cwd.mkdir()
    monkeypatch.chdir(cwd)


@pytest.fixture
def gated_loader() -> CountingLoader:
    """Counting JSON loader that blocks until its `gate` event is set."""
    return CountingLoader(gate=threading.Event())
