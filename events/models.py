"""Event listing module for the DevEvents site."""

from typing import Any, ClassVar

from django.db import models
from django.urls import reverse
from django.utils.translation import gettext_lazy as _

from .types import EventMode
from .validators import (
    FIELD_NAMES,
    MAX_DESCRIPTION_LENGTH,
    MAX_OVERVIEW_LENGTH,
    MAX_TITLE_LENGTH,
)


MAX_FIELD_LENGTH = 255
MAX_IMAGE_URL_LENGTH = 500
MAX_MODE_LENGTH = 10
DATE_LENGTH = len("YYYY-MM-DD")
TIME_LENGTH = len("HH:MM")


class Event(models.Model):
    """
    Represents a listed event (hackathon, meetup, conference, ...).

    Rows are written through :class:`events.storage.EventStore`, which validates and normalizes the
    submitted values first. ``save()`` itself stores the values as given.
    """

    title = models.CharField(
        max_length=MAX_TITLE_LENGTH,
        help_text=_("Title of the event"),
    )

    slug = models.SlugField(
        max_length=MAX_TITLE_LENGTH,
        unique=True,
        help_text=_("URL identifier derived from the title"),
    )

    description = models.TextField(
        max_length=MAX_DESCRIPTION_LENGTH,
        help_text=_("Full description of the event"),
    )

    overview = models.TextField(
        max_length=MAX_OVERVIEW_LENGTH,
        help_text=_("Short overview shown on event cards"),
    )

    image = models.URLField(
        max_length=MAX_IMAGE_URL_LENGTH,
        help_text=_("URL of the event image"),
    )

    venue = models.CharField(
        max_length=MAX_FIELD_LENGTH,
        help_text=_("Venue where the event takes place"),
    )

    location = models.CharField(
        max_length=MAX_FIELD_LENGTH,
        help_text=_("City or region of the event"),
    )

    date = models.CharField(
        max_length=DATE_LENGTH,
        help_text=_("Event date (YYYY-MM-DD)"),
    )

    time = models.CharField(
        max_length=TIME_LENGTH,
        help_text=_("Start time, 24-hour clock (HH:MM)"),
    )

    mode = models.CharField(
        max_length=MAX_MODE_LENGTH,
        choices=EventMode.choices,
        help_text=_("Delivery format of the event"),
    )

    audience = models.CharField(
        max_length=MAX_FIELD_LENGTH,
        help_text=_("Who the event is for"),
    )

    agenda = models.JSONField(
        default=list,
        help_text=_("Ordered list of agenda items"),
    )

    organizer = models.TextField(
        help_text=_("Who organizes the event"),
    )

    tags = models.JSONField(
        default=list,
        help_text=_("Lowercase tags"),
    )

    created_at = models.DateTimeField(
        auto_now_add=True,
        help_text=_("When this event was added to the system"),
    )

    updated_at = models.DateTimeField(
        auto_now=True,
        help_text=_("When this event was last modified"),
    )

    class Meta:
        """Metadata for the Event model."""

        verbose_name = _("Event")
        verbose_name_plural = _("Events")
        ordering: ClassVar[list[str]] = ["date", "time"]
        indexes: ClassVar[list[models.Index]] = [
            models.Index(fields=["date", "mode"], name="event_date_mode_idx"),
        ]

    def __str__(self) -> str:
        """Return the event title."""
        return self.title

    def get_absolute_url(self) -> str:
        """Return the URL of the event detail page."""
        return reverse("event_detail", kwargs={"slug": self.slug})

    def get_record_fields(self) -> dict[str, Any]:
        """Return the stored record values, as the event pipeline sees them."""
        fields = {name: getattr(self, name) for name in FIELD_NAMES}
        fields["slug"] = self.slug
        return fields

    def as_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable representation of the event."""
        return {
            "id": self.pk,
            **self.get_record_fields(),
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }
