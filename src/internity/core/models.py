"""Domain models for Internity.

All models are **frozen** dataclasses — immutable value objects.  A
command intent is created fresh for every input line and discarded once
the tracker has executed it; internships are replaced, never mutated.
"""

from __future__ import annotations

import datetime
import enum
from dataclasses import dataclass


# ---------------------------------------------------------------------------
# Field values
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Deadline:
    """A calendar date entered as ``DD-MM-YYYY``.

    Construction does not validate; use
    :func:`internity.core.dates.parse_deadline` for untrusted text.
    """

    day: int
    month: int
    year: int

    def to_date(self) -> datetime.date:
        return datetime.date(self.year, self.month, self.day)

    def __str__(self) -> str:
        return f"{self.day:02d}-{self.month:02d}-{self.year:04d}"


@dataclass(frozen=True, slots=True)
class TaggedField:
    """A ``tag/value`` segment split out of an argument string."""

    tag: str
    """Tag name including the slash (e.g. ``"company/"``)."""

    value: str
    """Raw text after the tag, already trimmed."""


# ---------------------------------------------------------------------------
# Internship record
# ---------------------------------------------------------------------------

DEFAULT_STATUS: str = "Pending"


@dataclass(frozen=True, slots=True)
class Internship:
    """One tracked internship application."""

    company: str
    role: str
    deadline: Deadline
    pay: int
    status: str = DEFAULT_STATUS


# ---------------------------------------------------------------------------
# Command intents
# ---------------------------------------------------------------------------

class ListOrder(enum.Enum):
    """Ordering requested by ``list``."""

    DEFAULT = "default"
    ASCENDING = "asc"
    DESCENDING = "desc"


@dataclass(frozen=True, slots=True)
class AddCommand:
    company: str
    role: str
    deadline: Deadline
    pay: int


@dataclass(frozen=True, slots=True)
class DeleteCommand:
    index: int
    """Zero-based position in the internship list."""


@dataclass(frozen=True, slots=True)
class FindCommand:
    keyword: str


@dataclass(frozen=True, slots=True)
class UpdateCommand:
    """Partial update of one internship.

    ``None`` means "leave untouched"; there is no syntax for clearing a
    field, so every non-``None`` value has already been validated.
    """

    index: int
    company: str | None = None
    role: str | None = None
    deadline: Deadline | None = None
    pay: int | None = None
    status: str | None = None

    def has_changes(self) -> bool:
        return any(
            value is not None
            for value in (self.company, self.role, self.deadline, self.pay, self.status)
        )


@dataclass(frozen=True, slots=True)
class ListCommand:
    order: ListOrder = ListOrder.DEFAULT


@dataclass(frozen=True, slots=True)
class UsernameCommand:
    username: str


@dataclass(frozen=True, slots=True)
class DashboardCommand:
    pass


@dataclass(frozen=True, slots=True)
class ExitCommand:
    pass


Command = (
    AddCommand
    | DeleteCommand
    | FindCommand
    | UpdateCommand
    | ListCommand
    | UsernameCommand
    | DashboardCommand
    | ExitCommand
)
"""Union of every command intent the parser can produce."""


# ---------------------------------------------------------------------------
# Execution results
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ListedInternship:
    """An internship paired with its one-based position in the list."""

    position: int
    internship: Internship


@dataclass(frozen=True, slots=True)
class DashboardSummary:
    username: str | None
    total: int
    status_counts: tuple[tuple[str, int], ...]
    next_deadline: ListedInternship | None
    average_pay: int | None


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Outcome of executing one command intent.

    The tracker fills in only what the command produced; rendering is
    left to the CLI layer.
    """

    message: str
    listing: tuple[ListedInternship, ...] | None = None
    dashboard: DashboardSummary | None = None
    is_exit: bool = False
