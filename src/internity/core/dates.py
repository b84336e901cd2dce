"""Deadline parsing and formatting.

Only the zero-padded ``DD-MM-YYYY`` form is accepted.  Shape is checked
with a regular expression; calendar validity (31-04, 29-02 outside leap
years) is delegated to :class:`datetime.date`.
"""

from __future__ import annotations

import datetime
import logging
import re

from internity.core.models import Deadline
from internity.exceptions import InvalidDateFormatError

logger = logging.getLogger(__name__)

DATE_FORMAT: str = "DD-MM-YYYY"

_DATE_PATTERN = re.compile(r"(\d{2})-(\d{2})-(\d{4})", re.ASCII)


def parse_deadline(text: str) -> Deadline:
    """Parse *text* into a :class:`Deadline`.

    Raises
    ------
    InvalidDateFormatError
        If *text* is not ``DD-MM-YYYY`` or names a day that does not exist.
    """
    match = _DATE_PATTERN.fullmatch(text)
    if match is None:
        logger.debug("Rejected deadline %r: not %s", text, DATE_FORMAT)
        raise InvalidDateFormatError(text)

    day, month, year = (int(group) for group in match.groups())
    try:
        datetime.date(year, month, day)
    except ValueError as exc:
        logger.debug("Rejected deadline %r: %s", text, exc)
        raise InvalidDateFormatError(text) from exc

    return Deadline(day=day, month=month, year=year)


def format_deadline(deadline: Deadline) -> str:
    """Render *deadline* back to ``DD-MM-YYYY``."""
    return str(deadline)
