"""Internship tracker — owns the list and executes command intents.

The tracker is the only stateful object in the core.  It never prints
and never touches the filesystem: the interactive session renders the
returned :class:`~internity.core.models.CommandResult` and hands
:meth:`InternshipTracker.snapshot` to the storage backend.
"""

from __future__ import annotations

import datetime
import logging
from collections import Counter
from collections.abc import Callable, Iterable
from dataclasses import replace

from internity.core.models import (
    AddCommand,
    Command,
    CommandResult,
    DashboardCommand,
    DashboardSummary,
    DeleteCommand,
    ExitCommand,
    FindCommand,
    Internship,
    ListCommand,
    ListedInternship,
    ListOrder,
    UpdateCommand,
    UsernameCommand,
)
from internity.core.protocols import StoredState
from internity.exceptions import InvalidInternshipIndexError

logger = logging.getLogger(__name__)

COMPANY_MAXLEN: int = 30
"""Longest company name accepted by ``add``."""

ROLE_MAXLEN: int = 30
"""Longest role title accepted by ``add``."""


class InternshipTracker:
    """In-memory internship list plus the stored username.

    Parameters
    ----------
    internships:
        Initial records, in display order.
    username:
        Display name, or ``None`` if the user has not set one.
    today:
        Clock used by the dashboard to find the next upcoming deadline.
    """

    COMPANY_MAXLEN = COMPANY_MAXLEN
    ROLE_MAXLEN = ROLE_MAXLEN

    def __init__(
        self,
        internships: Iterable[Internship] = (),
        username: str | None = None,
        *,
        today: Callable[[], datetime.date] = datetime.date.today,
    ) -> None:
        self._internships: list[Internship] = list(internships)
        self.username: str | None = username
        self._today = today

    @classmethod
    def from_state(
        cls,
        state: StoredState,
        *,
        today: Callable[[], datetime.date] = datetime.date.today,
    ) -> InternshipTracker:
        return cls(state.internships, state.username, today=today)

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._internships)

    @property
    def internships(self) -> tuple[Internship, ...]:
        return tuple(self._internships)

    def get(self, index: int) -> Internship:
        """Return the internship at zero-based *index*."""
        self._check_index(index)
        return self._internships[index]

    def snapshot(self) -> StoredState:
        return StoredState(username=self.username, internships=self.internships)

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------

    def execute(self, command: Command) -> CommandResult:
        """Apply *command* and describe what happened.

        Raises
        ------
        InvalidInternshipIndexError
            If a delete or update targets a position outside the list.
        """
        if isinstance(command, AddCommand):
            return self._add(command)
        if isinstance(command, DeleteCommand):
            return self._delete(command)
        if isinstance(command, UpdateCommand):
            return self._update(command)
        if isinstance(command, FindCommand):
            return self._find(command)
        if isinstance(command, ListCommand):
            return self._list(command)
        if isinstance(command, UsernameCommand):
            return self._set_username(command)
        if isinstance(command, DashboardCommand):
            return CommandResult(message="Here is your dashboard.", dashboard=self.summary())
        if isinstance(command, ExitCommand):
            return CommandResult(message="Goodbye! Good luck with your applications.", is_exit=True)
        raise TypeError(f"Unsupported command: {type(command).__name__}")

    def _add(self, command: AddCommand) -> CommandResult:
        internship = Internship(
            company=command.company,
            role=command.role,
            deadline=command.deadline,
            pay=command.pay,
        )
        self._internships.append(internship)
        logger.info("Added internship #%d: %s", len(self), internship)
        return CommandResult(
            message=f"Added: {internship.company} - {internship.role}. "
            f"You now have {len(self)} internship(s).",
        )

    def _delete(self, command: DeleteCommand) -> CommandResult:
        self._check_index(command.index)
        removed = self._internships.pop(command.index)
        logger.info("Deleted internship #%d: %s", command.index + 1, removed)
        return CommandResult(
            message=f"Deleted: {removed.company} - {removed.role}. "
            f"You now have {len(self)} internship(s).",
        )

    def _update(self, command: UpdateCommand) -> CommandResult:
        self._check_index(command.index)
        changes = {
            name: value
            for name, value in (
                ("company", command.company),
                ("role", command.role),
                ("deadline", command.deadline),
                ("pay", command.pay),
                ("status", command.status),
            )
            if value is not None
        }
        updated = replace(self._internships[command.index], **changes)
        self._internships[command.index] = updated
        logger.info("Updated internship #%d: %s", command.index + 1, sorted(changes))
        return CommandResult(
            message=f"Updated internship {command.index + 1}: "
            f"{updated.company} - {updated.role}.",
        )

    def _find(self, command: FindCommand) -> CommandResult:
        needle = command.keyword.strip().casefold()
        matches = tuple(
            item
            for item in self._listed()
            if needle in item.internship.company.casefold()
            or needle in item.internship.role.casefold()
        )
        if not matches:
            return CommandResult(
                message=f"No internships match {command.keyword.strip()!r}.",
                listing=(),
            )
        return CommandResult(
            message=f"Found {len(matches)} internship(s) matching {command.keyword.strip()!r}:",
            listing=matches,
        )

    def _list(self, command: ListCommand) -> CommandResult:
        listing = self._listed()
        if command.order is not ListOrder.DEFAULT:
            listing = sorted(
                listing,
                key=lambda item: item.internship.deadline.to_date(),
                reverse=command.order is ListOrder.DESCENDING,
            )
        if not listing:
            return CommandResult(message="No internships found.", listing=())
        return CommandResult(message="Here are your internships:", listing=tuple(listing))

    def _set_username(self, command: UsernameCommand) -> CommandResult:
        self.username = command.username
        return CommandResult(message=f"Username set to {command.username}.")

    # ------------------------------------------------------------------
    # Dashboard
    # ------------------------------------------------------------------

    def summary(self) -> DashboardSummary:
        """Aggregate the list for the ``dashboard`` command."""
        today = self._today()
        status_counts = Counter(item.status for item in self._internships)

        upcoming = [
            item
            for item in self._listed()
            if item.internship.deadline.to_date() >= today
        ]
        next_deadline = min(
            upcoming,
            key=lambda item: item.internship.deadline.to_date(),
            default=None,
        )

        average_pay: int | None = None
        if self._internships:
            total_pay = sum(item.pay for item in self._internships)
            average_pay = round(total_pay / len(self._internships))

        return DashboardSummary(
            username=self.username,
            total=len(self),
            status_counts=tuple(status_counts.items()),
            next_deadline=next_deadline,
            average_pay=average_pay,
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _listed(self) -> list[ListedInternship]:
        return [
            ListedInternship(position=position, internship=internship)
            for position, internship in enumerate(self._internships, start=1)
        ]

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._internships):
            raise InvalidInternshipIndexError(
                f"Index {index + 1} is out of range "
                f"(you have {len(self._internships)} internship(s)).",
            )
