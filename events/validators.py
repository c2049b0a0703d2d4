"""
Event listing module for the DevEvents site.

This module provides the declarative field constraint table for event records and the validator that
applies it to a raw submission.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .exceptions import EventValidationError
from .types import EventMode


MAX_TITLE_LENGTH = 100
MAX_DESCRIPTION_LENGTH = 1000
MAX_OVERVIEW_LENGTH = 500


@dataclass(frozen=True)
class FieldRule:
    """
    Constraints for one event record field.

    Attributes:
        name: Field name in the submitted mapping.
        label: Human name used in generated messages.
        required_message: Message used when the field is missing or blank.
        trim: Strip surrounding whitespace before checking.
        max_length: Maximum number of characters, if bounded.
        max_length_message: Message used when ``max_length`` is exceeded.
        choices: Allowed values, if the field is an enumeration.
        choices_message: Message used when the value is not one of ``choices``.
        sequence: The field holds an ordered sequence of text values.
        empty_message: Message used when a sequence field is present but empty.

    """

    name: str
    label: str
    required_message: str
    trim: bool = True
    max_length: int | None = None
    max_length_message: str = ""
    choices: tuple[str, ...] = ()
    choices_message: str = ""
    sequence: bool = False
    empty_message: str = ""


FIELD_RULES: tuple[FieldRule, ...] = (
    FieldRule(
        name="title",
        label="Title",
        required_message="Please provide a title for the event",
        max_length=MAX_TITLE_LENGTH,
        max_length_message=f"Title cannot be more than {MAX_TITLE_LENGTH} characters",
    ),
    FieldRule(
        name="description",
        label="Description",
        required_message="Please provide a description for the event",
        max_length=MAX_DESCRIPTION_LENGTH,
        max_length_message=f"Description cannot be more than {MAX_DESCRIPTION_LENGTH} characters",
    ),
    FieldRule(
        name="overview",
        label="Overview",
        required_message="Please provide an overview for the event",
        max_length=MAX_OVERVIEW_LENGTH,
        max_length_message=f"Overview cannot be more than {MAX_OVERVIEW_LENGTH} characters",
    ),
    FieldRule(
        name="image",
        label="Image",
        required_message="Please provide an image URL for the event",
    ),
    FieldRule(
        name="venue",
        label="Venue",
        required_message="Please provide a venue for the event",
    ),
    FieldRule(
        name="location",
        label="Location",
        required_message="Please provide a location for the event",
    ),
    FieldRule(
        name="date",
        label="Date",
        required_message="Please provide a date for the event",
        trim=False,
    ),
    FieldRule(
        name="time",
        label="Time",
        required_message="Please provide a time for the event",
        trim=False,
    ),
    FieldRule(
        name="mode",
        label="Mode",
        required_message="Please provide a mode for the event",
        trim=False,
        choices=tuple(EventMode.values),
        choices_message="Mode must be either online, offline, or hybrid",
    ),
    FieldRule(
        name="audience",
        label="Audience",
        required_message="Please provide an audience for the event",
    ),
    FieldRule(
        name="agenda",
        label="Agenda",
        required_message="Please provide an agenda for the event",
        trim=False,
        sequence=True,
        empty_message="Agenda must have at least one item",
    ),
    FieldRule(
        name="organizer",
        label="Organizer",
        required_message="Please provide an organizer for the event",
    ),
    FieldRule(
        name="tags",
        label="Tags",
        required_message="Please provide at least one tag for the event",
        trim=False,
        sequence=True,
        empty_message="There must be at least one tag",
    ),
)

FIELD_NAMES: tuple[str, ...] = tuple(rule.name for rule in FIELD_RULES)


class _InvalidValueError(Exception):
    """Internal signal: a submitted value is neither text nor a number."""


def _as_text(value: Any) -> str:
    """Return ``value`` as text, accepting numbers the way a form decoder would."""
    if isinstance(value, str):
        return value
    if isinstance(value, int | float) and not isinstance(value, bool):
        return str(value)
    raise _InvalidValueError


def _clean_text(rule: FieldRule, value: Any) -> str | None:
    """Return the cleaned text value, or ``None`` if it counts as missing."""
    text = _as_text(value)
    if rule.trim:
        text = text.strip()
    return text or None


def _clean_sequence(value: Any) -> tuple[str, ...]:
    """Return the sequence value as a tuple of text; a single text value is a one-item sequence."""
    if isinstance(value, list | tuple):
        return tuple(_as_text(item) for item in value)
    return (_as_text(value),)


def _check(rule: FieldRule, value: Any) -> tuple[Any, str | None]:
    """Apply ``rule`` to ``value`` and return ``(cleaned value, error message or None)``."""
    if value is None:
        return None, rule.required_message

    try:
        if rule.sequence:
            items = _clean_sequence(value)
            return items, None if items else rule.empty_message
        text = _clean_text(rule, value)
    except _InvalidValueError:
        return None, f"{rule.label} must be text"

    if text is None:
        return None, rule.required_message
    if rule.max_length is not None and len(text) > rule.max_length:
        return text, rule.max_length_message
    if rule.choices and text not in rule.choices:
        return text, rule.choices_message
    return text, None


def validate_event_fields(data: Mapping[str, Any]) -> dict[str, Any]:
    """
    Check a raw event submission against :data:`FIELD_RULES`.

    Every rule is checked, so the raised error lists all the offending fields. Keys that are not
    part of the record (including ``slug``) are ignored.

    Returns:
        The cleaned values keyed by field name: trimmed text, and tuples for sequence fields.

    Raises:
        EventValidationError: if any field breaks its rule.

    """
    cleaned: dict[str, Any] = {}
    errors: dict[str, str] = {}

    for rule in FIELD_RULES:
        value, error = _check(rule, data.get(rule.name))
        if error:
            errors[rule.name] = error
        else:
            cleaned[rule.name] = value

    if errors:
        raise EventValidationError(errors)
    return cleaned
