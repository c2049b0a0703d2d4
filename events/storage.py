"""
Storage client for event records.

:class:`EventStore` is the only writer of ``Event`` rows: it runs the preparation pipeline, writes
the row and turns slug uniqueness violations into :class:`~events.exceptions.DuplicateSlugError`.
Callers create their own store; the database connection itself is managed by Django.
"""

from collections.abc import Mapping
from typing import Any

import structlog
from django.db import DEFAULT_DB_ALIAS, IntegrityError, transaction
from django.db.models.query import QuerySet

from .exceptions import DuplicateSlugError, EventRecordError
from .models import Event
from .pipeline import EventRecord, prepare_event


logger = structlog.get_logger(__name__)


class EventStore:
    """Create, update and look up events in one database."""

    def __init__(self, using: str = DEFAULT_DB_ALIAS) -> None:
        """Bind the store to the ``using`` database alias."""
        self.using = using

    @property
    def events(self) -> QuerySet[Event]:
        """Return the base queryset of stored events."""
        return Event.objects.using(self.using).all()

    def prepare(self, data: Mapping[str, Any], event: Event | None = None) -> EventRecord:
        """
        Validate and normalize ``data`` for a new event, or as new values for ``event``.

        Raises the pipeline errors described in :func:`events.pipeline.prepare_event`.
        """
        previous = event.get_record_fields() if event is not None and event.pk else None
        try:
            return prepare_event(data, previous=previous)
        except EventRecordError as e:
            logger.info("Event rejected", field=e.field, error=e.message)
            raise

    def create(self, data: Mapping[str, Any]) -> Event:
        """
        Create an event from a raw submission.

        Raises:
            EventValidationError: (or another pipeline error) if the submission is invalid.
            DuplicateSlugError: if another event already has the derived slug.

        """
        record = self.prepare(data)
        event = Event(**record.as_model_fields())
        self.save(event)
        logger.info("Event created", slug=event.slug, event_id=event.pk)
        return event

    def update(self, event: Event, changes: Mapping[str, Any]) -> Event:
        """
        Apply ``changes`` to a stored event.

        The slug, date and time are only normalized again when their source field changed.
        A rejected update leaves ``event`` as it was.
        """
        stored = {**event.get_record_fields(), "updated_at": event.updated_at}
        record = self.prepare({**event.get_record_fields(), **changes}, event)
        for name, value in record.as_model_fields().items():
            setattr(event, name, value)
        try:
            self.save(event)
        except DuplicateSlugError:
            for name, value in stored.items():
                setattr(event, name, value)
            raise
        logger.info("Event updated", slug=event.slug, event_id=event.pk)
        return event

    def save(self, event: Event) -> None:
        """Save a prepared ``event``; a duplicate slug raises ``DuplicateSlugError``."""
        try:
            with transaction.atomic(using=self.using):
                event.save(using=self.using)
        except IntegrityError as e:
            taken = self.events.filter(slug=event.slug)
            if event.pk is not None:
                taken = taken.exclude(pk=event.pk)
            if taken.exists():
                logger.warning("Duplicate event slug", slug=event.slug)
                raise DuplicateSlugError(event.slug) from e
            raise

    def get_by_slug(self, slug: str) -> Event | None:
        """Return the event with ``slug``, or None."""
        return self.events.filter(slug=slug).first()

    def list_events(self, *, date: str | None = None, mode: str | None = None) -> QuerySet[Event]:
        """Return events ordered by date and time, optionally restricted to a date and/or mode."""
        queryset = self.events
        if date:
            queryset = queryset.filter(date=date)
        if mode:
            queryset = queryset.filter(mode=mode)
        return queryset.order_by("date", "time")
