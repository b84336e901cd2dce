"""Tests for the tagged-field tokenizer and converters (core/fields.py).

Every test is a pure function call — no I/O, no mocking.
"""

from __future__ import annotations

import pytest

from internity.core.fields import (
    ADD_TAGS,
    UPDATE_TAGS,
    match_tag,
    parse_int,
    parse_one_based_index,
    parse_pay,
    require_text,
    split_segments,
    tokenize,
)
from internity.core.models import TaggedField


# ---------------------------------------------------------------------------
# split_segments
# ---------------------------------------------------------------------------

class TestSplitSegments:
    def test_splits_before_each_tag(self) -> None:
        text = "company/Google role/SWE deadline/01-01-2025 pay/10"
        assert split_segments(text, ADD_TAGS) == [
            "company/Google",
            "role/SWE",
            "deadline/01-01-2025",
            "pay/10",
        ]

    def test_values_keep_internal_spaces(self) -> None:
        text = "company/Jane Street role/Quant Trader Intern"
        assert split_segments(text, ADD_TAGS) == [
            "company/Jane Street",
            "role/Quant Trader Intern",
        ]

    def test_multiple_spaces_between_tags(self) -> None:
        assert split_segments("company/A   role/B", ADD_TAGS) == ["company/A", "role/B"]

    def test_unknown_tag_is_not_a_boundary(self) -> None:
        assert split_segments("pay/10 extra/field", ADD_TAGS) == ["pay/10 extra/field"]

    def test_status_only_splits_when_in_tag_set(self) -> None:
        text = "pay/10 status/Applied"
        assert split_segments(text, ADD_TAGS) == [text]
        assert split_segments(text, UPDATE_TAGS) == ["pay/10", "status/Applied"]

    def test_tag_without_leading_space_is_not_a_boundary(self) -> None:
        assert split_segments("company/Arole/B", ADD_TAGS) == ["company/Arole/B"]

    def test_leading_whitespace_yields_empty_first_segment(self) -> None:
        assert split_segments(" company/A", ADD_TAGS) == ["", "company/A"]


# ---------------------------------------------------------------------------
# match_tag / tokenize
# ---------------------------------------------------------------------------

class TestMatchTag:
    def test_match_trims_value(self) -> None:
        assert match_tag("company/  Google  ", ADD_TAGS) == TaggedField("company/", "Google")

    def test_empty_value(self) -> None:
        assert match_tag("role/", ADD_TAGS) == TaggedField("role/", "")

    def test_no_match(self) -> None:
        assert match_tag("Meta", UPDATE_TAGS) is None

    def test_tokenize_marks_unknown_segments(self) -> None:
        tokens = tokenize("role deadline/01-01-2025", ADD_TAGS)
        assert tokens == [None, TaggedField("deadline/", "01-01-2025")]


# ---------------------------------------------------------------------------
# Converters
# ---------------------------------------------------------------------------

class TestParseInt:
    @pytest.mark.parametrize(("text", "expected"), [("0", 0), ("42", 42), ("-7", -7), ("+3", 3)])
    def test_valid(self, text: str, expected: int) -> None:
        assert parse_int(text) == expected

    @pytest.mark.parametrize("text", ["", "5000.50", "1_000", " 1", "1e3", "abc", "٣"])
    def test_invalid(self, text: str) -> None:
        with pytest.raises(ValueError):
            parse_int(text)


class TestParsePay:
    def test_zero_is_valid(self) -> None:
        assert parse_pay("0") == 0

    def test_negative_rejected(self) -> None:
        with pytest.raises(ValueError):
            parse_pay("-1000")

    def test_decimal_rejected(self) -> None:
        with pytest.raises(ValueError):
            parse_pay("5000.50")


class TestParseOneBasedIndex:
    def test_converts_to_zero_based(self) -> None:
        assert parse_one_based_index("1") == 0

    def test_surrounding_whitespace_allowed(self) -> None:
        assert parse_one_based_index("  3 ") == 2

    def test_zero_becomes_minus_one(self) -> None:
        assert parse_one_based_index("0") == -1

    def test_non_numeric_rejected(self) -> None:
        with pytest.raises(ValueError):
            parse_one_based_index("abc")


class TestRequireText:
    def test_at_max_length(self) -> None:
        assert require_text("abc", 3) == "abc"

    def test_over_max_length(self) -> None:
        with pytest.raises(ValueError):
            require_text("abcd", 3)

    def test_empty(self) -> None:
        with pytest.raises(ValueError):
            require_text("")

    def test_no_limit(self) -> None:
        assert require_text("x" * 500) == "x" * 500

    def test_reserved_character_rejected(self) -> None:
        with pytest.raises(ValueError, match="must not contain"):
            require_text("A|B")
