"""
Event listing module for the DevEvents site.

This module provides unit tests for the field normalizers.
"""

import re

import pytest

from events.exceptions import (
    EventValidationError,
    InvalidDateError,
    InvalidTimeFormatError,
    InvalidTimeValuesError,
)
from events.normalizers import derive_slug, normalize_date, normalize_tags, normalize_time


SLUG_RE = re.compile(r"[a-z0-9]+(-[a-z0-9]+)*")


class TestDeriveSlug:
    """Verify derive_slug turns titles into URL-safe identifiers."""

    @pytest.mark.parametrize(
        ("title", "expected"),
        [
            ("Hello, World! 2024", "hello-world-2024"),
            ("  --Python   & Django--  ", "python-django"),
            ("React_Native Meetup", "reactnative-meetup"),
            ("Café Meetup", "caf-meetup"),
            ("AI / ML Summit", "ai-ml-summit"),
            ("Already-a-slug", "already-a-slug"),
            ("Tabs\tand\nnewlines", "tabs-and-newlines"),
        ],
    )
    def test_derive_slug(self, title: str, expected: str) -> None:
        """Lowercase, drop special characters and join words with single hyphens."""
        assert derive_slug(title) == expected

    @pytest.mark.parametrize(
        "title",
        ["Hello, World! 2024", "DevOps Days -- Berlin", "  x  ", "Über Conf 2025", "a---b"],
    )
    def test_slug_shape_and_idempotence(self, title: str) -> None:
        """Slugs only hold lowercase letters, digits and single hyphens, and are stable."""
        slug = derive_slug(title)
        assert SLUG_RE.fullmatch(slug)
        assert derive_slug(slug) == slug

    def test_title_without_letters_or_digits(self) -> None:
        """A title made only of symbols yields an empty slug."""
        assert derive_slug("!!! ???") == ""


class TestNormalizeDate:
    """Verify normalize_date returns ISO dates."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("2026-03-05", "2026-03-05"),
            ("March 5, 2026", "2026-03-05"),
            ("5 Mar 2026", "2026-03-05"),
            ("03/05/2026", "2026-03-05"),
            ("2026-03-05T10:00:00", "2026-03-05"),
        ],
    )
    def test_normalize_date(self, value: str, expected: str) -> None:
        """Recognizable dates become YYYY-MM-DD and lose the time of day."""
        assert normalize_date(value) == expected

    def test_aware_timestamp_uses_utc_date(self) -> None:
        """Aware timestamps are converted to UTC before the date is taken."""
        assert normalize_date("2026-03-05T23:30:00-05:00") == "2026-03-06"

    @pytest.mark.parametrize("value", ["March 5, 2026", "2026-03-05", "12/31/2025"])
    def test_idempotent(self, value: str) -> None:
        """Normalizing an already normalized date is a no-op."""
        once = normalize_date(value)
        assert normalize_date(once) == once

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("0999-12-31", "0999-12-31"),
            ("June 1, 0850", "0850-06-01"),
        ],
    )
    def test_years_below_1000_are_zero_padded(self, value: str, expected: str) -> None:
        """The year always has four digits."""
        assert normalize_date(value) == expected

    @pytest.mark.parametrize("value", ["now", "today", " Today ", "tomorrow", "yesterday"])
    def test_relative_keywords_are_rejected(self, value: str) -> None:
        """Keywords that depend on the current clock are not dates."""
        with pytest.raises(InvalidDateError):
            normalize_date(value)

    @pytest.mark.parametrize("value", ["not a date", "", "2026-02-30", "32/13/2026"])
    def test_invalid_date(self, value: str) -> None:
        """Unrecognizable dates raise InvalidDateError."""
        with pytest.raises(InvalidDateError) as exc_info:
            normalize_date(value)

        assert exc_info.value.message == "Invalid date format"
        assert exc_info.value.field == "date"


class TestNormalizeTime:
    """Verify normalize_time returns zero-padded 24-hour times."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("1:05 PM", "13:05"),
            ("12:00 AM", "00:00"),
            ("12:00 PM", "12:00"),
            ("23:59", "23:59"),
            ("9:30", "09:30"),
            ("9:30 am", "09:30"),
            ("11:15pm", "23:15"),
            ("12:45 am", "00:45"),
            ("  07:45  ", "07:45"),
            ("0:00", "00:00"),
        ],
    )
    def test_normalize_time(self, value: str, expected: str) -> None:
        """12-hour and 24-hour inputs become HH:MM."""
        assert normalize_time(value) == expected

    @pytest.mark.parametrize("value", ["1:05 PM", "12:00 AM", "6:30 pm", "10:10 AM"])
    def test_renormalizing_is_a_no_op(self, value: str) -> None:
        """The 24-hour output normalizes to itself."""
        once = normalize_time(value)
        assert normalize_time(once) == once

    @pytest.mark.parametrize("value", ["abc", "", "1230", "9:5", "10:30 XM", "123:00", "10:30:00"])
    def test_invalid_format(self, value: str) -> None:
        """Strings that are not clock times raise InvalidTimeFormatError."""
        with pytest.raises(InvalidTimeFormatError) as exc_info:
            normalize_time(value)

        assert exc_info.value.message == "Invalid time format. Use HH:MM or HH:MM AM/PM"

    @pytest.mark.parametrize("value", ["25:00", "24:00", "23:60", "13:00 PM", "99:99"])
    def test_invalid_values(self, value: str) -> None:
        """Out-of-range hours or minutes raise InvalidTimeValuesError."""
        with pytest.raises(InvalidTimeValuesError) as exc_info:
            normalize_time(value)

        assert exc_info.value.message == "Invalid time values"
        assert exc_info.value.field == "time"


class TestNormalizeTags:
    """Verify normalize_tags lowercases and trims tags."""

    def test_normalize_tags(self) -> None:
        """Tags are lowercased and trimmed, keeping their order."""
        assert normalize_tags(["  AI ", "Cloud", "web3"]) == ("ai", "cloud", "web3")

    def test_blank_tag(self) -> None:
        """A tag that is blank once trimmed is rejected."""
        with pytest.raises(EventValidationError) as exc_info:
            normalize_tags(["AI", "   "])

        assert exc_info.value.errors == {"tags": "Tags cannot be blank"}
