"""Core layer — command parsing, validation, and execution.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
* Parsing is deterministic and stateless; only the tracker holds state.
"""

from internity.core.command_parser import parse_input
from internity.core.models import (
    AddCommand,
    Command,
    CommandResult,
    DashboardCommand,
    Deadline,
    DeleteCommand,
    ExitCommand,
    FindCommand,
    Internship,
    ListCommand,
    ListOrder,
    UpdateCommand,
    UsernameCommand,
)
from internity.core.protocols import InternshipStorage, StoredState
from internity.core.tracker import COMPANY_MAXLEN, ROLE_MAXLEN, InternshipTracker

__all__: list[str] = [
    "COMPANY_MAXLEN",
    "ROLE_MAXLEN",
    "AddCommand",
    "Command",
    "CommandResult",
    "DashboardCommand",
    "Deadline",
    "DeleteCommand",
    "ExitCommand",
    "FindCommand",
    "Internship",
    "InternshipStorage",
    "InternshipTracker",
    "ListCommand",
    "ListOrder",
    "StoredState",
    "UpdateCommand",
    "UsernameCommand",
    "parse_input",
]
