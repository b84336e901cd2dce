"""Tests for deadline parsing (core/dates.py)."""

from __future__ import annotations

import pytest

from internity.core.dates import format_deadline, parse_deadline
from internity.core.models import Deadline
from internity.exceptions import InvalidDateFormatError


class TestParseDeadline:
    def test_valid_date(self) -> None:
        assert parse_deadline("10-10-2025") == Deadline(10, 10, 2025)

    def test_leap_day(self) -> None:
        assert parse_deadline("29-02-2024") == Deadline(29, 2, 2024)

    @pytest.mark.parametrize(
        "text",
        [
            "2025/12/15",
            "2025-12-15",
            "1-1-2025",
            "01-01-25",
            "01-01-2025 ",
            "",
            "aa-bb-cccc",
        ],
    )
    def test_wrong_shape_rejected(self, text: str) -> None:
        with pytest.raises(InvalidDateFormatError):
            parse_deadline(text)

    @pytest.mark.parametrize(
        "text",
        ["31-04-2025", "29-02-2025", "00-01-2025", "01-13-2025", "01-01-0000"],
    )
    def test_impossible_date_rejected(self, text: str) -> None:
        with pytest.raises(InvalidDateFormatError):
            parse_deadline(text)

    def test_error_names_input(self) -> None:
        with pytest.raises(InvalidDateFormatError, match="31-04-2025"):
            parse_deadline("31-04-2025")


class TestFormatDeadline:
    def test_format_matches_parse_input(self) -> None:
        assert format_deadline(parse_deadline("05-06-2026")) == "05-06-2026"
