"""
Normalizers for event record fields.

Each function turns one submitted value into its single canonical text form. They are pure and are
applied by :mod:`events.pipeline` after field validation.
"""

import re
from collections.abc import Iterable

import pandas as pd

from .exceptions import (
    EventValidationError,
    InvalidDateError,
    InvalidTimeFormatError,
    InvalidTimeValuesError,
)


MAX_HOUR = 23
MAX_MINUTE = 59
NOON = 12

_SLUG_DISALLOWED_RE = re.compile(r"[^a-z0-9\s-]")
_SLUG_SEPARATOR_RE = re.compile(r"[\s\W-]+")
_SLUG_HYPHENS_RE = re.compile(r"-+")
_TIME_RE = re.compile(r"([0-9]{1,2}):([0-9]{2})(\s*(AM|PM))?", re.IGNORECASE)

# Relative keywords pandas resolves against the clock; a submitted date must be absolute
RELATIVE_DATE_KEYWORDS = frozenset({"now", "today", "tomorrow", "yesterday"})


def derive_slug(title: str) -> str:
    """
    Derive a URL-safe slug from an event title.

    "Hello, World! 2024" becomes "hello-world-2024". Characters outside ``a-z``, ``0-9``, whitespace
    and hyphens are dropped, so accented letters disappear instead of being transliterated.
    """
    slug = title.lower().strip()
    slug = _SLUG_DISALLOWED_RE.sub("", slug)
    slug = _SLUG_SEPARATOR_RE.sub("-", slug)
    slug = _SLUG_HYPHENS_RE.sub("-", slug)
    return slug.strip("-")


def normalize_date(value: str) -> str:
    """
    Return ``value`` as an ISO ``YYYY-MM-DD`` date.

    Accepts anything the pandas date parser understands ("2025-03-15", "March 15, 2025",
    "2025-03-15T18:00:00Z", ...). Aware timestamps are converted to UTC before the time of day is
    dropped.

    Raises:
        InvalidDateError: if the value is not a recognizable date, or is a relative keyword such
            as "now" or "today".

    """
    if value.strip().lower() in RELATIVE_DATE_KEYWORDS:
        raise InvalidDateError

    try:
        parsed = pd.to_datetime(value)
    except (TypeError, ValueError, OverflowError) as exc:
        raise InvalidDateError from exc

    if pd.isna(parsed):
        raise InvalidDateError

    if parsed.tzinfo is not None:
        parsed = parsed.tz_convert("UTC")
    # Always a four-digit year, also below 1000
    return parsed.date().isoformat()


def normalize_time(value: str) -> str:
    """
    Return a 12-hour or 24-hour clock string as zero-padded 24-hour ``HH:MM``.

    - "1:05 PM" -> "13:05"
    - "12:00 AM" -> "00:00"
    - "12:00 PM" -> "12:00"
    - "9:30" -> "09:30"

    Raises:
        InvalidTimeFormatError: if the value does not look like a clock time.
        InvalidTimeValuesError: if the hour or minute is out of range.

    """
    match = _TIME_RE.fullmatch(value.strip())
    if not match:
        raise InvalidTimeFormatError

    hours = int(match.group(1))
    minutes = int(match.group(2))
    period = (match.group(4) or "").upper()

    if period == "PM" and hours != NOON:
        hours += NOON
    elif period == "AM" and hours == NOON:
        hours = 0

    if not (0 <= hours <= MAX_HOUR and 0 <= minutes <= MAX_MINUTE):
        raise InvalidTimeValuesError

    return f"{hours:02d}:{minutes:02d}"


def normalize_tags(tags: Iterable[str]) -> tuple[str, ...]:
    """
    Lowercase and trim every tag, keeping their order.

    Raises:
        EventValidationError: if a tag is blank once trimmed.

    """
    normalized = tuple(tag.lower().strip() for tag in tags)
    if any(not tag for tag in normalized):
        raise EventValidationError({"tags": "Tags cannot be blank"})
    return normalized
