"""Tests for the generate_fake_events management command."""

import re
from io import StringIO
from unittest.mock import patch

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError

from events.exceptions import DuplicateSlugError
from events.models import Event
from events.storage import EventStore
from events.types import EventMode


ISO_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}")
TIME_RE = re.compile(r"\d{2}:\d{2}")


@pytest.mark.django_db
class TestGenerateFakeEvents:
    """Tests for the generate_fake_events command."""

    def test_generates_normalized_events(self) -> None:
        """Generated submissions go through the pipeline and are stored normalized."""
        out = StringIO()

        call_command("generate_fake_events", count=5, seed=42, start_date="2026-01-01", stdout=out)

        events = list(Event.objects.all())
        assert 0 < len(events) <= 5
        for event in events:
            assert ISO_DATE_RE.fullmatch(event.date)
            assert event.date >= "2026-01-01"
            assert TIME_RE.fullmatch(event.time)
            assert event.mode in EventMode.values
            assert event.tags == [tag.strip().lower() for tag in event.tags]
            assert event.agenda
        assert f"Generated {len(events)} event(s)" in out.getvalue()

    def test_invalid_start_date(self) -> None:
        """A start date that is not YYYY-MM-DD is rejected."""
        with pytest.raises(CommandError, match="Invalid start date"):
            call_command("generate_fake_events", count=1, start_date="01/02/2026")

    def test_duplicates_are_skipped(self) -> None:
        """Slug collisions are reported and skipped."""
        out = StringIO()

        with patch.object(EventStore, "create", side_effect=DuplicateSlugError("taken")):
            call_command("generate_fake_events", count=2, seed=1, stdout=out)

        output = out.getvalue()
        assert output.count("Skipped duplicate event") == 2
        assert "Generated 0 event(s)" in output
        assert not Event.objects.exists()
