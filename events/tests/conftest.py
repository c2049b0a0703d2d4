"""Shared test fixtures for the events app."""

from typing import Any

import pytest

from events.storage import EventStore


@pytest.fixture()
def event_data() -> dict[str, Any]:
    """Return a valid raw event submission, as decoded from a form."""
    return {
        "title": "  Cloud Next Hackathon 2026 ",
        "description": "Two days of building cloud-native tools with mentors from the community.",
        "overview": "Build, ship and demo cloud-native projects in 48 hours.",
        "image": " https://example.com/images/event1.png ",
        "venue": "Moscone Center",
        "location": "San Francisco, CA",
        "date": "March 5, 2026",
        "time": "6:30 PM",
        "mode": "hybrid",
        "audience": "Developers",
        "agenda": ["Opening keynote", "Hacking", "Demos"],
        "organizer": "Cloud Native Community",
        "tags": ["  AI ", "Cloud"],
    }


@pytest.fixture()
def store() -> EventStore:
    """Return an event store bound to the default database."""
    return EventStore()
