"""Infrastructure: flat-file persistence of the internship list.

File layout (UTF-8, one record per line, `` | `` separated)::

    username | Jesse Pinkman
    Google | SWE Intern | 01-12-2025 | 8000 | Pending

The ``username`` line is optional and may appear once.  Every raw
``OSError`` or decoding problem is re-raised as
:class:`~internity.exceptions.StorageError`.
"""

from __future__ import annotations

import logging
from pathlib import Path

from internity.core.dates import parse_deadline
from internity.core.fields import parse_pay
from internity.core.models import Internship
from internity.core.protocols import StoredState
from internity.exceptions import InternityError, StorageError

logger = logging.getLogger(__name__)

SEPARATOR: str = " | "
USERNAME_KEY: str = "username"

_RECORD_FIELDS: int = 5


class FlatFileStorage:
    """Read and write :class:`StoredState` as a pipe-separated text file.

    Parameters
    ----------
    path:
        Location of the data file.  Parent directories are created on
        the first save.
    """

    def __init__(self, path: Path | str) -> None:
        self.path: Path = Path(path)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def load(self) -> StoredState:
        """Read the data file; a missing file yields an empty state."""
        if not self.path.exists():
            logger.info("No data file at %s; starting empty", self.path)
            return StoredState(username=None, internships=())

        try:
            text = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise StorageError(
                f"Could not read data file {self.path}: {exc}",
            ) from exc

        username: str | None = None
        internships: list[Internship] = []
        for line_number, line in enumerate(text.splitlines(), start=1):
            if not line.strip():
                continue
            parts = [part.strip() for part in line.split(SEPARATOR.strip())]
            if parts[0] == USERNAME_KEY and len(parts) == 2:
                username = parts[1] or None
                continue
            internships.append(self._decode_record(parts, line_number))

        logger.info("Loaded %d internship(s) from %s", len(internships), self.path)
        return StoredState(username=username, internships=tuple(internships))

    def save(self, state: StoredState) -> None:
        """Overwrite the data file with *state*."""
        lines: list[str] = []
        if state.username:
            lines.append(self._encode_line((USERNAME_KEY, state.username)))
        for internship in state.internships:
            lines.append(self._encode_line(self._encode_record(internship)))

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(
                "".join(f"{line}\n" for line in lines),
                encoding="utf-8",
            )
        except OSError as exc:
            raise StorageError(
                f"Could not write data file {self.path}: {exc}",
            ) from exc
        logger.debug("Saved %d internship(s) to %s", len(state.internships), self.path)

    # ------------------------------------------------------------------
    # Encoding helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _encode_record(internship: Internship) -> tuple[str, ...]:
        return (
            internship.company,
            internship.role,
            str(internship.deadline),
            str(internship.pay),
            internship.status,
        )

    @staticmethod
    def _encode_line(values: tuple[str, ...]) -> str:
        for value in values:
            if SEPARATOR.strip() in value:
                raise StorageError(
                    f"Cannot save {value!r}: values must not contain "
                    f"{SEPARATOR.strip()!r}.",
                    hint="Use the update command to rename the entry.",
                )
        return SEPARATOR.join(values)

    def _decode_record(self, parts: list[str], line_number: int) -> Internship:
        if len(parts) != _RECORD_FIELDS:
            raise StorageError(
                f"Malformed record on line {line_number} of {self.path}: "
                f"expected {_RECORD_FIELDS} fields, found {len(parts)}.",
            )
        company, role, deadline_text, pay_text, status = parts
        try:
            deadline = parse_deadline(deadline_text)
            pay = parse_pay(pay_text)
        except (InternityError, ValueError) as exc:
            raise StorageError(
                f"Malformed record on line {line_number} of {self.path}: {exc}",
            ) from exc
        return Internship(
            company=company,
            role=role,
            deadline=deadline,
            pay=pay,
            status=status,
        )
