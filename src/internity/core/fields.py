"""Tagged-field tokenizer and field converters.

Every function in this module is a **pure** transformation — no I/O,
no state, and no command-specific error types.  Converters raise
``ValueError``; builders in :mod:`internity.core.arguments` decide which
:class:`~internity.exceptions.InternityError` that becomes.

Tokenizer rule
--------------
A segment boundary is any whitespace run *immediately followed* by a
recognized tag.  Values may therefore contain spaces::

    "company/Jane Street role/Quant Trader"
    -> ["company/Jane Street", "role/Quant Trader"]
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from functools import lru_cache

from internity.core.models import TaggedField

COMPANY_TAG: str = "company/"
ROLE_TAG: str = "role/"
DEADLINE_TAG: str = "deadline/"
PAY_TAG: str = "pay/"
STATUS_TAG: str = "status/"

ADD_TAGS: tuple[str, ...] = (COMPANY_TAG, ROLE_TAG, DEADLINE_TAG, PAY_TAG)
"""Tags accepted by ``add``, in their required order."""

UPDATE_TAGS: tuple[str, ...] = (*ADD_TAGS, STATUS_TAG)
"""Every tag the tokenizer knows about."""

_INTEGER_PATTERN = re.compile(r"[+-]?\d+", re.ASCII)

RESERVED_CHARACTER: str = "|"
"""Column separator of the data file; never allowed inside a text value."""


# ---------------------------------------------------------------------------
# Tokenizer
# ---------------------------------------------------------------------------

@lru_cache(maxsize=None)
def _boundary_pattern(tags: tuple[str, ...]) -> re.Pattern[str]:
    alternatives = "|".join(re.escape(tag) for tag in tags)
    return re.compile(rf"\s+(?={alternatives})")


def split_segments(text: str, tags: Iterable[str]) -> list[str]:
    """Split *text* at every whitespace run that precedes one of *tags*.

    Segments are returned untouched, in input order.  Leading or trailing
    whitespace is not stripped, so a segment that does not begin with a
    tag is visible to the caller.
    """
    return _boundary_pattern(tuple(tags)).split(text)


def match_tag(segment: str, tags: Iterable[str]) -> TaggedField | None:
    """Return the :class:`TaggedField` for *segment*, or ``None``.

    The first tag in *tags* that *segment* starts with wins; the value is
    whatever follows it, trimmed.
    """
    for tag in tags:
        if segment.startswith(tag):
            return TaggedField(tag=tag, value=segment[len(tag):].strip())
    return None


def tokenize(text: str, tags: Sequence[str]) -> list[TaggedField | None]:
    """Split and match in one step.

    Unrecognized segments come back as ``None`` at their position so the
    caller can raise its own error naming the offending text.
    """
    return [match_tag(segment, tags) for segment in split_segments(text, tags)]


# ---------------------------------------------------------------------------
# Converters
# ---------------------------------------------------------------------------

def parse_int(text: str) -> int:
    """Parse a plain decimal integer token.

    Unlike :func:`int`, surrounding whitespace, underscores, and
    non-ASCII digits are rejected.
    """
    if _INTEGER_PATTERN.fullmatch(text) is None:
        raise ValueError(f"not an integer: {text!r}")
    return int(text)


def parse_pay(text: str) -> int:
    """Parse a non-negative whole-number pay value."""
    pay = parse_int(text)
    if pay < 0:
        raise ValueError(f"pay must not be negative: {pay}")
    return pay


def parse_one_based_index(text: str) -> int:
    """Convert a user-facing one-based index into a zero-based one.

    No bounds check — the tracker owns the list length.
    """
    return parse_int(text.strip()) - 1


def require_text(value: str, max_length: int | None = None) -> str:
    """Validate a free-text field.

    The value must be non-empty, at most *max_length* characters, and
    free of :data:`RESERVED_CHARACTER`.
    """
    if not value:
        raise ValueError("value must not be empty")
    if RESERVED_CHARACTER in value:
        raise ValueError(f"value must not contain {RESERVED_CHARACTER!r}")
    if max_length is not None and len(value) > max_length:
        raise ValueError(f"value longer than {max_length} characters")
    return value
