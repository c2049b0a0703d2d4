"""
Errors raised while preparing and storing event records.

All of them are Django ``ValidationError`` subclasses, so forms and the admin can report them like
any other field error. Each one names the field it is about.
"""

from django.core.exceptions import NON_FIELD_ERRORS, ValidationError


class EventRecordError(ValidationError):
    """Base class for every error raised by the event record pipeline or the event store."""

    default_message = "Invalid event"
    default_code = "invalid"
    default_field = NON_FIELD_ERRORS

    def __init__(
        self,
        message: str | None = None,
        *,
        field: str | None = None,
        code: str | None = None,
    ) -> None:
        """Store the message, the error code and the offending field."""
        super().__init__(message or self.default_message, code=code or self.default_code)
        self.field = field or self.default_field

    def as_dict(self) -> dict[str, list[str]]:
        """Return the error as a ``{field: [messages]}`` mapping."""
        return {self.field: [self.message]}


class EventValidationError(EventRecordError):
    """
    A record is missing a required field, breaks a length bound or uses an unknown mode.

    Carries every failing field in ``errors``; ``message`` and ``field`` describe the first one.
    """

    def __init__(self, errors: dict[str, str]) -> None:
        """Build the error from a non-empty ``{field: message}`` mapping."""
        field, message = next(iter(errors.items()))
        super().__init__(message, field=field, code="invalid")
        self.errors = dict(errors)

    def as_dict(self) -> dict[str, list[str]]:
        """Return all field errors as a ``{field: [messages]}`` mapping."""
        return {field: [message] for field, message in self.errors.items()}


class InvalidDateError(EventRecordError):
    """The date string cannot be parsed as a calendar date."""

    default_message = "Invalid date format"
    default_code = "invalid_date"
    default_field = "date"


class InvalidTimeFormatError(EventRecordError):
    """The time string does not look like ``HH:MM`` or ``HH:MM AM/PM``."""

    default_message = "Invalid time format. Use HH:MM or HH:MM AM/PM"
    default_code = "invalid_time_format"
    default_field = "time"


class InvalidTimeValuesError(EventRecordError):
    """The time string has the right shape but an out-of-range hour or minute."""

    default_message = "Invalid time values"
    default_code = "invalid_time_values"
    default_field = "time"


class DuplicateSlugError(EventRecordError):
    """Another stored event already uses the derived slug."""

    default_code = "duplicate_slug"
    default_field = "slug"

    def __init__(self, slug: str) -> None:
        """Build the error for the colliding ``slug``."""
        super().__init__(f'An event with the slug "{slug}" already exists')
        self.slug = slug
