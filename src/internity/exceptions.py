"""Custom exception hierarchy for Internity.

Every user-visible error condition inherits from :class:`InternityError`.
Parse failures are classified at their origin — builders raise the most
specific subclass directly and never let a raw ``ValueError`` escape.

Hierarchy
---------
InternityError
├── InvalidInputError
├── UnknownCommandError
├── InvalidAddCommandError
├── InvalidDeleteCommandError
├── InvalidInternshipIndexError
├── InvalidFindCommandError
├── InvalidUpdateFormatError
├── InvalidIndexForUpdateError
├── NoUpdateFieldsProvidedError
├── UnknownUpdateFieldError
├── EmptyFieldError
├── InvalidPayFormatError
├── InvalidDateFormatError
├── InvalidListCommandError
├── InvalidUsernameCommandError
├── StorageError
└── EnvironmentError
"""

from __future__ import annotations


class InternityError(Exception):
    """Base exception for all Internity errors.

    The interactive loop prints ``str(exc)`` verbatim and carries on
    reading input, so every message must be complete on its own.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional usage reminder shown below the error message."""


# --- Line level ------------------------------------------------------------

class InvalidInputError(InternityError):
    """Raised when the input line is empty or whitespace only."""

    def __init__(self) -> None:
        super().__init__("Input cannot be empty. Please enter a command.")


class UnknownCommandError(InternityError):
    """Raised when the command word matches no known command."""

    def __init__(self, command_word: str) -> None:
        super().__init__(
            f"Unknown command: {command_word}",
            hint="Available commands: add, delete, find, update, list, "
            "username, dashboard, exit",
        )
        self.command_word: str = command_word


# --- add -------------------------------------------------------------------

class InvalidAddCommandError(InternityError):
    """Raised for any malformed ``add`` arguments."""

    def __init__(self) -> None:
        super().__init__(
            "Invalid add command. "
            "Usage: add company/COMPANY role/ROLE deadline/DD-MM-YYYY pay/PAY",
        )


# --- delete ----------------------------------------------------------------

class InvalidDeleteCommandError(InternityError):
    """Raised when ``delete`` is given no index."""

    def __init__(self) -> None:
        super().__init__("Invalid delete command. Usage: delete INDEX")


class InvalidInternshipIndexError(InternityError):
    """Raised when an internship index is not a number or out of range."""

    def __init__(self, detail: str = "Index must be a whole number.") -> None:
        super().__init__(f"Invalid internship index. {detail}")


# --- find ------------------------------------------------------------------

class InvalidFindCommandError(InternityError):
    """Raised when ``find`` is given no keyword."""

    def __init__(self) -> None:
        super().__init__("Invalid find command. Usage: find KEYWORD")


# --- update ----------------------------------------------------------------

class InvalidUpdateFormatError(InternityError):
    """Raised when ``update`` lacks an index or any fields."""

    def __init__(self) -> None:
        super().__init__(
            "Invalid update format. Usage: update INDEX [company/COMPANY] "
            "[role/ROLE] [deadline/DD-MM-YYYY] [pay/PAY] [status/STATUS]",
        )


class InvalidIndexForUpdateError(InternityError):
    """Raised when the ``update`` index token is not an integer."""

    def __init__(self) -> None:
        super().__init__("Invalid index for update. Index must be a whole number.")


class NoUpdateFieldsProvidedError(InternityError):
    """Raised when ``update`` names no field to change."""

    def __init__(self) -> None:
        super().__init__(
            "No update fields provided. "
            "Use at least one of company/, role/, deadline/, pay/, status/.",
        )


class UnknownUpdateFieldError(InternityError):
    """Raised when an ``update`` segment starts with an unrecognized tag."""

    def __init__(self, segment: str) -> None:
        super().__init__(f"Unknown update field: {segment}")
        self.segment: str = segment


class EmptyFieldError(InternityError):
    """Raised when a text field tag is given without a value."""

    def __init__(self, tag: str) -> None:
        super().__init__(f"Field {tag} cannot be empty.")
        self.tag: str = tag


class InvalidFieldValueError(InternityError):
    """Raised when an updated text field is too long or holds a ``|``."""

    def __init__(self, tag: str, reason: str) -> None:
        super().__init__(f"Invalid value for {tag}: {reason}.")
        self.tag: str = tag


class InvalidPayFormatError(InternityError):
    """Raised when an updated pay is not a non-negative whole number."""

    def __init__(self) -> None:
        super().__init__("Invalid pay format. Pay must be a non-negative whole number.")


class InvalidDateFormatError(InternityError):
    """Raised by the date parser on malformed or impossible dates."""

    def __init__(self, text: str) -> None:
        super().__init__(
            f"Invalid date: {text!r}. Expected format DD-MM-YYYY.",
        )
        self.text: str = text


# --- list / username -------------------------------------------------------

class InvalidListCommandError(InternityError):
    """Raised for any malformed ``list`` arguments."""

    def __init__(self) -> None:
        super().__init__("Invalid list command. Usage: list [sort/asc | sort/desc]")


class InvalidUsernameCommandError(InternityError):
    """Raised when ``username`` is given no name."""

    def __init__(self) -> None:
        super().__init__("Invalid username command. Usage: username NAME")


# --- Persistence / environment ---------------------------------------------

class StorageError(InternityError):
    """Raised when the data file cannot be read, parsed, or written."""


class EnvironmentError(InternityError):
    """Raised when a required runtime dependency is not available."""
