"""Tests for the Event model."""

import pytest
from django.db import IntegrityError
from model_bakery import baker

from events.models import Event
from events.types import EventMode
from events.validators import FIELD_NAMES


@pytest.mark.django_db
class TestEventModel:
    """Tests for the Event model."""

    def test_str(self) -> None:
        """String representation is the title."""
        event = baker.make(Event, title="DevOps Days Berlin")
        assert str(event) == "DevOps Days Berlin"

    def test_get_absolute_url(self) -> None:
        """The absolute URL points at the detail page."""
        event = baker.make(Event, slug="devops-days-berlin")
        assert event.get_absolute_url() == "/events/devops-days-berlin/"

    def test_slug_is_unique(self) -> None:
        """The database refuses two events with the same slug."""
        baker.make(Event, slug="same")

        with pytest.raises(IntegrityError):
            baker.make(Event, slug="same")

    def test_save_stores_values_as_given(self) -> None:
        """Saving the model directly does not normalize anything."""
        event = baker.make(Event, time="6:30 PM", tags=["  AI "])
        event.refresh_from_db()

        assert event.time == "6:30 PM"
        assert event.tags == ["  AI "]

    def test_default_ordering(self) -> None:
        """Events are ordered by date, then time."""
        second = baker.make(Event, date="2026-03-05", time="18:00")
        third = baker.make(Event, date="2026-03-06", time="08:00")
        first = baker.make(Event, date="2026-03-05", time="09:00")

        assert list(Event.objects.all()) == [first, second, third]

    def test_get_record_fields(self) -> None:
        """Record fields cover the validated fields plus the slug."""
        event = baker.make(Event, mode=EventMode.ONLINE, agenda=["Intro"], tags=["ai"])

        fields = event.get_record_fields()

        assert set(fields) == {*FIELD_NAMES, "slug"}
        assert fields["mode"] == "online"
        assert fields["agenda"] == ["Intro"]

    def test_as_dict(self) -> None:
        """The dictionary form includes the id and timestamps."""
        event = baker.make(Event)

        data = event.as_dict()

        assert data["id"] == event.pk
        assert data["slug"] == event.slug
        assert data["created_at"] == event.created_at
        assert data["updated_at"] == event.updated_at
