"""Protocols (interfaces) consumed by the core layer.

The tracker depends only on :class:`InternshipStorage`; the flat-file
implementation lives in :mod:`internity.infra.file_storage`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from internity.core.models import Internship


@dataclass(frozen=True, slots=True)
class StoredState:
    """Everything that survives between sessions."""

    username: str | None
    internships: tuple[Internship, ...]


class InternshipStorage(Protocol):
    """Contract for persistence backends.

    Implementations must map every I/O or decoding failure to
    :class:`~internity.exceptions.StorageError`.
    """

    def load(self) -> StoredState:
        """Return the saved state, or an empty one if nothing is saved yet.

        Raises
        ------
        StorageError
            When saved data exists but cannot be read or decoded.
        """
        ...  # pragma: no cover

    def save(self, state: StoredState) -> None:
        """Persist *state*, replacing anything saved before.

        Raises
        ------
        StorageError
            When the state cannot be written.
        """
        ...  # pragma: no cover
