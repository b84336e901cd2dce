"""Argument builders — one per command that takes arguments.

Each ``parse_*_args`` function receives the argument string left after
the command word and returns a frozen command intent, or raises the most
specific :class:`~internity.exceptions.InternityError` subclass.  Lower
level ``ValueError`` from :mod:`internity.core.fields` never escapes.
"""

from __future__ import annotations

import logging
import re

from internity.core import fields
from internity.core.dates import parse_deadline
from internity.core.fields import (
    ADD_TAGS,
    COMPANY_TAG,
    DEADLINE_TAG,
    PAY_TAG,
    ROLE_TAG,
    STATUS_TAG,
    UPDATE_TAGS,
)
from internity.core.models import (
    AddCommand,
    DeleteCommand,
    Deadline,
    FindCommand,
    ListCommand,
    ListOrder,
    UpdateCommand,
    UsernameCommand,
)
from internity.core.tracker import COMPANY_MAXLEN, ROLE_MAXLEN
from internity.exceptions import (
    EmptyFieldError,
    InternityError,
    InvalidAddCommandError,
    InvalidDeleteCommandError,
    InvalidFieldValueError,
    InvalidFindCommandError,
    InvalidIndexForUpdateError,
    InvalidInternshipIndexError,
    InvalidListCommandError,
    InvalidPayFormatError,
    InvalidUpdateFormatError,
    InvalidUsernameCommandError,
    NoUpdateFieldsProvidedError,
    UnknownUpdateFieldError,
)

logger = logging.getLogger(__name__)

SORT_TAG: str = "sort/"

_SORT_ORDERS: dict[str, ListOrder] = {
    "asc": ListOrder.ASCENDING,
    "desc": ListOrder.DESCENDING,
}

_EXTRA_SORT_PATTERN = re.compile(rf"\s+{re.escape(SORT_TAG)}")


# ---------------------------------------------------------------------------
# add
# ---------------------------------------------------------------------------

def parse_add_args(args: str | None) -> AddCommand:
    """Build an :class:`AddCommand` from ``company/ role/ deadline/ pay/``.

    All four tags are required, exactly once each, in that order.  Every
    failure, including a bad date or pay, is reported as
    :class:`InvalidAddCommandError`.
    """
    if args is None or not args.strip():
        raise InvalidAddCommandError()

    tokens = fields.tokenize(args, ADD_TAGS)
    if len(tokens) != len(ADD_TAGS) or any(
        token is None or token.tag != tag for token, tag in zip(tokens, ADD_TAGS)
    ):
        logger.info("add arguments missing, extra, or out of order: %r", args)
        raise InvalidAddCommandError()

    company, role, deadline_text, pay_text = (
        token.value for token in tokens if token is not None
    )

    try:
        deadline = parse_deadline(deadline_text)
        pay = fields.parse_pay(pay_text)
        company = fields.require_text(company, COMPANY_MAXLEN)
        role = fields.require_text(role, ROLE_MAXLEN)
    except (InternityError, ValueError) as exc:
        logger.info("add argument rejected: %s", exc)
        raise InvalidAddCommandError() from exc

    logger.info("Parsed add command for %s / %s", company, role)
    return AddCommand(company=company, role=role, deadline=deadline, pay=pay)


# ---------------------------------------------------------------------------
# delete / find / username
# ---------------------------------------------------------------------------

def parse_delete_args(args: str | None) -> DeleteCommand:
    """Build a :class:`DeleteCommand` from a one-based index."""
    if args is None or not args.strip():
        raise InvalidDeleteCommandError()
    try:
        index = fields.parse_one_based_index(args)
    except ValueError as exc:
        raise InvalidInternshipIndexError() from exc
    return DeleteCommand(index=index)


def parse_find_args(args: str | None) -> FindCommand:
    """Build a :class:`FindCommand`; the keyword is kept verbatim."""
    if args is None or not args.strip():
        raise InvalidFindCommandError()
    return FindCommand(keyword=args)


def parse_username_args(args: str | None) -> UsernameCommand:
    if args is None or not args.strip():
        raise InvalidUsernameCommandError()
    try:
        username = fields.require_text(args.strip())
    except ValueError as exc:
        raise InvalidUsernameCommandError() from exc
    return UsernameCommand(username=username)


# ---------------------------------------------------------------------------
# update
# ---------------------------------------------------------------------------

def _split_index_and_fields(args: str | None) -> tuple[str, str]:
    if args is None or not args.strip():
        raise InvalidUpdateFormatError()
    parts = args.strip().split(maxsplit=1)
    if len(parts) < 2:
        raise InvalidUpdateFormatError()
    index_token, tagged = parts
    return index_token, tagged.strip()


def _update_deadline(value: str) -> Deadline:
    # An empty value is left to the date parser to reject.
    return parse_deadline(value)


def _update_pay(value: str) -> int:
    try:
        return fields.parse_pay(value)
    except ValueError as exc:
        raise InvalidPayFormatError() from exc


def _update_text(tag: str, value: str, max_length: int | None = None) -> str:
    if not value:
        raise EmptyFieldError(tag)
    try:
        return fields.require_text(value, max_length)
    except ValueError as exc:
        raise InvalidFieldValueError(tag, str(exc)) from exc


def parse_update_args(args: str | None) -> UpdateCommand:
    """Build an :class:`UpdateCommand` from ``INDEX tag/value ...``.

    Tags may appear in any order.  A repeated tag overwrites the earlier
    value.

    Raises
    ------
    InvalidUpdateFormatError
        If there is no index or nothing after it.
    InvalidIndexForUpdateError
        If the index is not an integer.
    NoUpdateFieldsProvidedError
        If no field ends up being set.
    UnknownUpdateFieldError
        If a segment does not start with a recognized tag.
    EmptyFieldError
        If ``company/``, ``role/`` or ``status/`` has no value.
    InvalidFieldValueError
        If a text value is over its length limit or contains ``|``.
    InvalidPayFormatError
        If ``pay/`` is not a non-negative integer.
    InvalidDateFormatError
        If ``deadline/`` is not a valid ``DD-MM-YYYY`` date.
    """
    index_token, tagged = _split_index_and_fields(args)

    try:
        index = fields.parse_one_based_index(index_token)
    except ValueError as exc:
        raise InvalidIndexForUpdateError() from exc

    if not tagged.strip():
        raise NoUpdateFieldsProvidedError()

    company: str | None = None
    role: str | None = None
    deadline: Deadline | None = None
    pay: int | None = None
    status: str | None = None
    for segment in fields.split_segments(tagged, UPDATE_TAGS):
        segment = segment.strip()
        if not segment:
            continue
        token = fields.match_tag(segment, UPDATE_TAGS)
        if token is None:
            raise UnknownUpdateFieldError(segment)

        if token.tag == COMPANY_TAG:
            company = _update_text(token.tag, token.value, COMPANY_MAXLEN)
        elif token.tag == ROLE_TAG:
            role = _update_text(token.tag, token.value, ROLE_MAXLEN)
        elif token.tag == DEADLINE_TAG:
            deadline = _update_deadline(token.value)
        elif token.tag == PAY_TAG:
            pay = _update_pay(token.value)
        elif token.tag == STATUS_TAG:
            status = _update_text(token.tag, token.value)

    command = UpdateCommand(
        index=index,
        company=company,
        role=role,
        deadline=deadline,
        pay=pay,
        status=status,
    )
    if not command.has_changes():
        raise NoUpdateFieldsProvidedError()

    logger.info("Parsed update for index %d", index)
    return command


# ---------------------------------------------------------------------------
# list
# ---------------------------------------------------------------------------

def parse_list_args(args: str | None) -> ListCommand:
    """Build a :class:`ListCommand` from ``""``, ``sort/asc`` or ``sort/desc``."""
    if args is None or not args.strip():
        return ListCommand(order=ListOrder.DEFAULT)

    if not args.startswith(SORT_TAG):
        raise InvalidListCommandError()
    if _EXTRA_SORT_PATTERN.search(args) is not None:
        raise InvalidListCommandError()

    order = _SORT_ORDERS.get(args[len(SORT_TAG):].strip())
    if order is None:
        raise InvalidListCommandError()
    return ListCommand(order=order)
