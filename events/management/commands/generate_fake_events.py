"""Management command to generate fake events for testing."""
# ruff: noqa: S311

import random
from datetime import date, datetime, timedelta
from typing import Any

from django.core.management.base import BaseCommand, CommandError, CommandParser
from faker import Faker

from events.exceptions import DuplicateSlugError
from events.storage import EventStore
from events.types import EventMode


# Submissions use several date and time spellings, like hand-filled forms do
DATE_FORMATS = ("%Y-%m-%d", "%B %d, %Y", "%d %b %Y", "%m/%d/%Y")
TIME_SLOTS = ("9:00 AM", "10:30 AM", "1:00 PM", "6:30 PM", "09:00", "14:00", "18:30", "19:00")

EVENT_KINDS = ("Hackathon", "Meetup", "Conference", "Summit", "Workshop", "Bootcamp")
TOPICS = {
    "AI": ("AI", "Machine Learning", "LLM"),
    "Cloud": ("Cloud", "DevOps", "Kubernetes"),
    "Web": ("Web", "JavaScript", "Frontend"),
    "Python": ("Python", "Django", "Data"),
    "Security": ("Security", "Privacy", "Cryptography"),
    "Mobile": ("Mobile", "iOS", "Android"),
}
AUDIENCES = (
    "Developers",
    "Students and early-career engineers",
    "Engineering managers",
    "Data scientists",
    "Designers and product people",
)
AGENDA_ITEMS = (
    "Registration and coffee",
    "Opening keynote",
    "Lightning talks",
    "Panel discussion",
    "Hands-on workshop",
    "Networking",
    "Closing remarks",
)

MAX_DAYS_AHEAD = 180


class Command(BaseCommand):
    """Generate fake events."""

    help = "Generate sample events for testing purposes"

    def add_arguments(self, parser: CommandParser) -> None:
        """
        Add command line arguments.

        Args:
            parser: Command line argument parser for adding custom arguments

        """
        parser.add_argument(
            "--count",
            type=int,
            default=20,
            help="Number of events to generate (default: 20)",
        )
        parser.add_argument(
            "--start-date",
            type=str,
            default=date.today().isoformat(),  # noqa: DTZ011
            help="Earliest event date (YYYY-MM-DD, default: today)",
        )
        parser.add_argument(
            "--seed",
            type=int,
            default=None,
            help="Seed for reproducible output",
        )

    def handle(self, *args: Any, **options: Any) -> None:  # noqa: ARG002
        """
        Generate fake events and store them through the event store.

        options:
            - count: Number of events to generate
            - start_date: Earliest event date
            - seed: Optional random seed

        """
        raw_start_date = str(options["start_date"])
        try:
            start_date = datetime.strptime(raw_start_date, "%Y-%m-%d").date()  # noqa: DTZ007
        except ValueError as e:
            msg = f"Invalid start date: {raw_start_date}. Use YYYY-MM-DD."
            raise CommandError(msg) from e

        fake = Faker()
        if options["seed"] is not None:
            fake.seed_instance(options["seed"])
            random.seed(options["seed"])

        event_count = int(options["count"])
        store = EventStore()
        created = 0

        self.stdout.write(f"Generating {event_count} events...")
        for i in range(event_count):
            submission = self._build_submission(fake, start_date)
            try:
                event = store.create(submission)
            except DuplicateSlugError:
                self.stdout.write(
                    self.style.WARNING(f"Skipped duplicate event: {submission['title']}"),
                )
                continue

            created += 1
            self.stdout.write(
                self.style.SUCCESS(
                    f"Created {event.mode} event [{i + 1}/{event_count}]: {event.title} "
                    f"on {event.date} at {event.time}",
                ),
            )

        self.stdout.write(f"Generated {created} event(s)")

    def _build_submission(self, fake: Faker, start_date: date) -> dict[str, Any]:
        """Return a raw event submission, as the create endpoint would receive it."""
        kind = random.choice(EVENT_KINDS)
        topic = random.choice(list(TOPICS))
        event_date = start_date + timedelta(days=random.randint(0, MAX_DAYS_AHEAD))
        city = fake.city()

        return {
            "title": self._generate_title(kind, topic, city, event_date.year),
            "description": fake.text(max_nb_chars=800),
            "overview": fake.text(max_nb_chars=300),
            "image": f"https://picsum.photos/seed/{fake.uuid4()}/800/450",
            "venue": f"{fake.last_name()} {random.choice(['Hall', 'Center', 'Hub', 'Campus'])}",
            "location": f"{city}, {fake.country()}",
            "date": event_date.strftime(random.choice(DATE_FORMATS)),
            "time": random.choice(TIME_SLOTS),
            "mode": random.choice(EventMode.values),
            "audience": random.choice(AUDIENCES),
            "agenda": random.sample(AGENDA_ITEMS, k=random.randint(3, 5)),
            "organizer": fake.company(),
            "tags": self._generate_tags(topic),
        }

    def _generate_title(self, kind: str, topic: str, city: str, year: int) -> str:
        """
        Generate a realistic event title.

        Args:
            kind: Event kind, e.g. "Hackathon"
            topic: Main topic of the event
            city: City the event is named after
            year: Year of the event

        Returns:
            A title such as "Berlin AI Hackathon 2026"

        """
        match kind:
            case "Conference" | "Summit":
                return f"{topic}Conf {city} {year}"
            case "Meetup":
                return f"{city} {topic} Meetup #{random.randint(1, 99)}"
            case _:
                return f"{city} {topic} {kind} {year}"

    def _generate_tags(self, topic: str) -> list[str]:
        """Return two or three tags for ``topic``, with the casing and spacing people type."""
        tags = random.sample(TOPICS[topic], k=random.randint(2, 3))
        return [random.choice([tag, tag.upper(), f" {tag} "]) for tag in tags]
