"""Interactive read–parse–execute–save loop.

One line is fully parsed, executed, rendered and persisted before the
next is read.  Any :class:`~internity.exceptions.InternityError` raised
while handling a line is shown verbatim and the loop carries on; the
list and the data file are left as they were.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from internity.cli import render
from internity.cli.console import console, escape
from internity.core.command_parser import parse_input
from internity.core.fields import RESERVED_CHARACTER
from internity.core.protocols import InternshipStorage
from internity.core.tracker import InternshipTracker
from internity.exceptions import EnvironmentError, InternityError, StorageError

logger = logging.getLogger(__name__)

WELCOME_MESSAGE: str = "Welcome to Internity! Track every internship application in one place."
USERNAME_QUESTION: str = "What should I call you?"


def _import_questionary() -> Any:
    """Import questionary lazily for the username prompt."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


def prompt_username() -> str | None:
    """Ask for a display name; ``None`` when the user cancels."""
    questionary = _import_questionary()
    answer: str | None = questionary.text(USERNAME_QUESTION).ask()
    return answer


class InteractiveSession:
    """Drive one interactive session against a storage backend.

    Parameters
    ----------
    storage:
        Backend the list is loaded from and saved to after every command.
    read_line:
        Returns the next input line; raises ``EOFError`` when input ends.
    ask_username:
        Returns a username candidate, or ``None`` if the user cancels.
    """

    def __init__(
        self,
        storage: InternshipStorage,
        *,
        read_line: Callable[[], str] | None = None,
        ask_username: Callable[[], str | None] = prompt_username,
    ) -> None:
        self._storage = storage
        self._read_line: Callable[[], str] = read_line or (lambda: console.input("> "))
        self._ask_username = ask_username
        self.tracker: InternshipTracker = InternshipTracker()

    # ------------------------------------------------------------------
    # Public entry point
    # ------------------------------------------------------------------

    def run(self) -> None:
        """Load, greet, then process lines until ``exit`` or end of input.

        Raises
        ------
        KeyboardInterrupt
            If the user cancels the username prompt or presses Ctrl+C.
        """
        self._load()
        console.print(f"[bold cyan]{WELCOME_MESSAGE}[/bold cyan]")
        self._configure_username()
        render.render_line()

        while True:
            try:
                line = self._read_line()
            except EOFError:
                logger.info("Input exhausted; ending session")
                break
            render.render_line()
            is_exit = self.handle_line(line)
            render.render_line()
            if is_exit:
                break

    def handle_line(self, line: str) -> bool:
        """Process one raw line; return ``True`` when the session should end."""
        try:
            command = parse_input(line)
            result = self.tracker.execute(command)
        except InternityError as exc:
            render.render_error(str(exc), exc.hint)
            return False

        render.render_result(result)
        self._save()
        return result.is_exit

    # ------------------------------------------------------------------
    # Startup helpers
    # ------------------------------------------------------------------

    def _load(self) -> None:
        try:
            state = self._storage.load()
        except StorageError as exc:
            logger.warning("Load failed: %s", exc)
            console.print(
                "[yellow]Warning:[/yellow] Could not load data from storage. "
                "Starting with empty list."
            )
            console.print(f"Error: {escape(str(exc))}")
            return
        self.tracker = InternshipTracker.from_state(state)

    def _save(self) -> None:
        try:
            self._storage.save(self.tracker.snapshot())
        except StorageError as exc:
            logger.warning("Save failed: %s", exc)
            console.print("[yellow]Warning:[/yellow] Could not save data to storage.")
            console.print(f"Error: {escape(str(exc))}")

    def _configure_username(self) -> None:
        while not _is_valid_username(self.tracker.username):
            answer = self._ask_username()
            if answer is None:
                raise KeyboardInterrupt
            if not _is_valid_username(answer):
                console.print("Invalid username entered. Try again.")
                continue
            self.tracker.username = answer.strip()
            self._save()
            logger.info("Username set to %r", self.tracker.username)

        console.print(f"Hello, [bold]{escape(self.tracker.username or '')}[/bold]!")


def _is_valid_username(username: str | None) -> bool:
    if username is None or not username.strip():
        return False
    return RESERVED_CHARACTER not in username
