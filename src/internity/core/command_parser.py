"""Input splitting and command dispatch.

:func:`parse_input` is the single entry point used by the interactive
session: one raw line in, one frozen command intent out, or an
:class:`~internity.exceptions.InternityError` describing what is wrong.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from internity.core import arguments
from internity.core.models import Command, DashboardCommand, ExitCommand
from internity.exceptions import InvalidInputError, UnknownCommandError

logger = logging.getLogger(__name__)

CommandBuilder = Callable[[str], Command]

_BUILDERS: dict[str, CommandBuilder] = {
    "add": arguments.parse_add_args,
    "delete": arguments.parse_delete_args,
    "find": arguments.parse_find_args,
    "update": arguments.parse_update_args,
    "list": arguments.parse_list_args,
    "username": arguments.parse_username_args,
    "dashboard": lambda _args: DashboardCommand(),
    "exit": lambda _args: ExitCommand(),
}

COMMAND_WORDS: tuple[str, ...] = tuple(_BUILDERS)


def split_input(line: str | None) -> tuple[str, str]:
    """Split *line* into ``(command_word, args)``.

    The command word is lower-cased; *args* is ``""`` when absent.

    Raises
    ------
    InvalidInputError
        If *line* is ``None`` or blank.
    """
    if line is None or not line.strip():
        raise InvalidInputError()

    parts = line.strip().split(maxsplit=1)
    command_word = parts[0].lower()
    args = parts[1] if len(parts) > 1 else ""
    return command_word, args


def create_command(command_word: str, args: str) -> Command:
    """Route *args* to the builder registered for *command_word*.

    Raises
    ------
    UnknownCommandError
        If *command_word* is not a known command.
    """
    builder = _BUILDERS.get(command_word)
    if builder is None:
        raise UnknownCommandError(command_word)
    return builder(args)


def parse_input(line: str | None) -> Command:
    """Parse one raw input line into a command intent."""
    command_word, args = split_input(line)
    logger.debug("Parsed command word %r with args %r", command_word, args)

    command = create_command(command_word, args)
    logger.info("Created %s", type(command).__name__)
    return command
