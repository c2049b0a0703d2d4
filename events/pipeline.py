"""
Event record preparation pipeline.

A raw submission goes through two stages before it can be stored:

1. field validation against the constraint table (:func:`events.validators.validate_event_fields`);
2. the ordered normalization steps in :data:`NORMALIZATION_STEPS` (slug, tags, date, time).

The result is an immutable :class:`EventRecord`. Nothing here touches the database.
"""

import dataclasses
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from .exceptions import EventValidationError
from .normalizers import derive_slug, normalize_date, normalize_tags, normalize_time
from .validators import validate_event_fields


@dataclass(frozen=True)
class EventRecord:
    """A validated and normalized event, ready to be written."""

    title: str
    slug: str
    description: str
    overview: str
    image: str
    venue: str
    location: str
    date: str
    time: str
    mode: str
    audience: str
    agenda: tuple[str, ...]
    organizer: str
    tags: tuple[str, ...]

    def as_model_fields(self) -> dict[str, Any]:
        """Return the record as keyword arguments for the ``Event`` model."""
        fields = dataclasses.asdict(self)
        fields["agenda"] = list(self.agenda)
        fields["tags"] = list(self.tags)
        return fields


@dataclass(frozen=True)
class NormalizationStep:
    """
    Rewrite ``target`` from ``source`` with ``transform``.

    Unless ``always`` is set, the step only runs for new records or when ``source`` changed;
    otherwise the stored ``target`` value is kept.
    """

    target: str
    source: str
    transform: Callable[[Any], Any]
    always: bool = False


# Order matters
NORMALIZATION_STEPS: tuple[NormalizationStep, ...] = (
    NormalizationStep(target="slug", source="title", transform=derive_slug),
    NormalizationStep(target="tags", source="tags", transform=normalize_tags, always=True),
    NormalizationStep(target="date", source="date", transform=normalize_date),
    NormalizationStep(target="time", source="time", transform=normalize_time),
)


def has_changed(field: str, values: Mapping[str, Any], previous: Mapping[str, Any] | None) -> bool:
    """Return True for new records (no ``previous``) or when ``field`` differs from before."""
    if previous is None:
        return True
    old = previous.get(field)
    new = values.get(field)
    if isinstance(old, list | tuple) and isinstance(new, list | tuple):
        return tuple(old) != tuple(new)
    return old != new


def prepare_event(
    data: Mapping[str, Any],
    previous: Mapping[str, Any] | None = None,
) -> EventRecord:
    """
    Validate and normalize a raw event submission.

    Args:
        data: Submitted field values (text, or sequences of text for ``agenda`` and ``tags``).
        previous: Stored field values of the record being updated, or ``None`` when creating.

    Returns:
        The normalized record.

    Raises:
        EventValidationError: if a field is missing, too long, not text, or an unknown mode, or if
            the title yields an empty slug.
        InvalidDateError: if the date cannot be parsed.
        InvalidTimeFormatError: if the time is not ``HH:MM`` or ``HH:MM AM/PM``.
        InvalidTimeValuesError: if the time has an out-of-range hour or minute.

    """
    values = validate_event_fields(data)

    for step in NORMALIZATION_STEPS:
        if step.always or has_changed(step.source, values, previous):
            values[step.target] = step.transform(values[step.source])
        else:
            # Only reached on updates
            values[step.target] = previous[step.target]  # type: ignore[index]

    if not values["slug"]:
        raise EventValidationError({"title": "Title must contain at least one letter or digit"})

    return EventRecord(**values)
