"""Shared pytest fixtures and configuration for the Internity test suite.

Guidelines
----------
* Parser tests are pure — no I/O, no mocking.
* Storage tests write only under ``tmp_path``.
* No real terminal interaction: prompts and line readers are injected.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's own settings out of the tests."""
    monkeypatch.delenv("INTERNITY_DATA_FILE", raising=False)
    monkeypatch.delenv("INTERNITY_VERBOSE", raising=False)


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    """Drop handlers ``main()`` attaches so they never outlive a test."""
    yield
    package_logger = logging.getLogger("internity")
    package_logger.handlers.clear()
    package_logger.propagate = True
    package_logger.setLevel(logging.NOTSET)
