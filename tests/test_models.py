"""Tests for domain models (core/models.py).

All models are frozen dataclasses — these tests verify immutability,
equality semantics, and the small helpers they carry.
"""

from __future__ import annotations

import datetime

import pytest

from internity.core.models import (
    DEFAULT_STATUS,
    AddCommand,
    Deadline,
    Internship,
    ListCommand,
    ListOrder,
    UpdateCommand,
)


def _make_internship(**overrides: object) -> Internship:
    """Factory with sensible defaults for concise tests."""
    defaults: dict[str, object] = {
        "company": "Google",
        "role": "SWE Intern",
        "deadline": Deadline(1, 12, 2025),
        "pay": 8000,
    }
    defaults.update(overrides)
    return Internship(**defaults)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Deadline
# ---------------------------------------------------------------------------

class TestDeadline:
    def test_str_is_zero_padded(self) -> None:
        assert str(Deadline(1, 2, 2025)) == "01-02-2025"

    def test_to_date(self) -> None:
        assert Deadline(15, 12, 2025).to_date() == datetime.date(2025, 12, 15)

    def test_frozen(self) -> None:
        d = Deadline(1, 1, 2025)
        with pytest.raises(AttributeError):
            d.day = 2  # type: ignore[misc]

    def test_equality(self) -> None:
        assert Deadline(1, 1, 2025) == Deadline(day=1, month=1, year=2025)


# ---------------------------------------------------------------------------
# Internship
# ---------------------------------------------------------------------------

class TestInternship:
    def test_status_defaults_to_pending(self) -> None:
        assert _make_internship().status == DEFAULT_STATUS == "Pending"

    def test_frozen(self) -> None:
        internship = _make_internship()
        with pytest.raises(AttributeError):
            internship.pay = 1  # type: ignore[misc]

    def test_inequality(self) -> None:
        assert _make_internship(company="A") != _make_internship(company="B")


# ---------------------------------------------------------------------------
# Command intents
# ---------------------------------------------------------------------------

class TestCommands:
    def test_add_equality(self) -> None:
        a = AddCommand("Google", "SWE", Deadline(1, 1, 2025), 0)
        b = AddCommand("Google", "SWE", Deadline(1, 1, 2025), 0)
        assert a == b

    def test_update_defaults_to_no_changes(self) -> None:
        command = UpdateCommand(index=0)
        assert command.company is None
        assert command.status is None
        assert not command.has_changes()

    def test_update_with_zero_pay_has_changes(self) -> None:
        assert UpdateCommand(index=0, pay=0).has_changes()

    def test_list_defaults_to_default_order(self) -> None:
        assert ListCommand().order is ListOrder.DEFAULT

    def test_update_frozen(self) -> None:
        command = UpdateCommand(index=0, company="Meta")
        with pytest.raises(AttributeError):
            command.company = "Apple"  # type: ignore[misc]
