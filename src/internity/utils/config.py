"""Runtime settings resolved from CLI flags, environment, and ``.env``.

Precedence: explicit argument > environment variable > default.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

DATA_FILE_ENV: str = "INTERNITY_DATA_FILE"
VERBOSE_ENV: str = "INTERNITY_VERBOSE"

DEFAULT_DATA_FILE: Path = Path("data") / "internships.txt"

_TRUTHY: frozenset[str] = frozenset({"1", "true", "yes", "on"})


@dataclass(frozen=True, slots=True)
class Settings:
    data_file: Path
    """Flat file the internship list is persisted to."""

    verbose: bool
    """Emit parse and storage logs to stderr."""


def load_settings(
    data_file: Path | str | None = None,
    verbose: bool | None = None,
) -> Settings:
    """Build :class:`Settings`, reading ``.env`` into the environment first.

    Variables already present in the environment win over ``.env``.
    """
    load_dotenv()

    if data_file is None:
        data_file = os.getenv(DATA_FILE_ENV) or DEFAULT_DATA_FILE
    if verbose is None:
        verbose = os.getenv(VERBOSE_ENV, "").strip().lower() in _TRUTHY

    return Settings(data_file=Path(data_file), verbose=verbose)
