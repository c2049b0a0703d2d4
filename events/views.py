"""
Views for listing and creating Event objects.

This module provides the landing page, the event detail page and the JSON API used to create and
look up events.
"""

import json
from http import HTTPStatus
from typing import Any

import structlog
from django.conf import settings
from django.db.models.query import QuerySet
from django.http import HttpRequest, JsonResponse, QueryDict
from django.http.multipartparser import MultiPartParserError
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_GET, require_http_methods
from django.views.generic import DetailView, ListView

from .exceptions import DuplicateSlugError, EventRecordError, EventValidationError
from .models import Event
from .normalizers import normalize_date
from .storage import EventStore
from .types import EventMode
from .validators import FIELD_RULES


logger = structlog.get_logger(__name__)

SEQUENCE_FIELDS = frozenset(rule.name for rule in FIELD_RULES if rule.sequence)


def get_list_filters(params: QueryDict) -> dict[str, str]:
    """
    Return the ``date`` and ``mode`` filters found in the query string.

    The date is normalized, so "March 5, 2026" filters on "2026-03-05".

    Raises:
        EventValidationError: if the mode is not a known mode.
        InvalidDateError: if the date cannot be parsed.

    """
    filters: dict[str, str] = {}

    mode = params.get("mode")
    if mode:
        if mode not in EventMode.values:
            raise EventValidationError({"mode": "Mode must be either online, offline, or hybrid"})
        filters["mode"] = mode

    date = params.get("date")
    if date:
        filters["date"] = normalize_date(date)

    return filters


def read_submission(request: HttpRequest) -> dict[str, Any]:
    """
    Return the submitted event fields from a JSON body or from form data.

    Form fields sent several times (``agenda``, ``tags``) are read as lists.

    Raises:
        ValueError: if the JSON body cannot be decoded or is not an object.
        MultiPartParserError: if the multipart form body is malformed.

    """
    if request.content_type == "application/json":
        data = json.loads(request.body)
        if not isinstance(data, dict):
            msg = "Expected a JSON object"
            raise ValueError(msg)
        return data

    return {
        key: request.POST.getlist(key) if key in SEQUENCE_FIELDS else request.POST.get(key)
        for key in request.POST
    }


def _error_response(error: EventRecordError, status: HTTPStatus) -> JsonResponse:
    return JsonResponse({"message": error.message, "errors": error.as_dict()}, status=status)


class EventListView(ListView):
    """
    Display the landing page with the featured events.

    Supports filtering by mode and date. HTMX requests get only the event list fragment.
    """

    model = Event
    template_name = "home.html"
    context_object_name = "events"
    fragment_template = f"{template_name}#event-list"

    def get_template_names(self) -> list[str]:
        """
        Determine which template to use.

        Return a partial fragment for HTMX requests.
        """
        if self.request.htmx:
            return [self.fragment_template]
        return [self.template_name]

    def get_queryset(self) -> QuerySet[Event]:
        """Get the featured events, filtered by mode and date when given."""
        self.filter_error = ""
        try:
            filters = get_list_filters(self.request.GET)
        except EventRecordError as e:
            self.filter_error = e.message
            filters = {}

        limit = getattr(settings, "EVENTS_FEATURED_LIMIT", 12)
        return EventStore().list_events(**filters)[:limit]

    def get_context_data(self, **kwargs: Any) -> dict[str, Any]:
        """Enhance the template context with the filter options."""
        context = super().get_context_data(**kwargs)
        context["modes"] = EventMode.choices
        context["selected_mode"] = self.request.GET.get("mode", "")
        context["selected_date"] = self.request.GET.get("date", "")
        context["filter_error"] = self.filter_error
        return context


class EventDetailView(DetailView):
    """Display an event, looked up by its slug."""

    model = Event
    template_name = "events/event_detail.html"
    context_object_name = "event"


@csrf_exempt
@require_http_methods(["GET", "POST"])
def event_collection(request: HttpRequest) -> JsonResponse:
    """
    List events (GET) or create one (POST).

    GET accepts the optional ``mode`` and ``date`` query parameters.
    POST accepts form data or a JSON object and answers 201 with the stored event.
    """
    store = EventStore()

    if request.method == "GET":
        try:
            filters = get_list_filters(request.GET)
        except EventRecordError as e:
            return _error_response(e, HTTPStatus.BAD_REQUEST)
        events = [event.as_dict() for event in store.list_events(**filters)]
        return JsonResponse({"events": events})

    try:
        data = read_submission(request)
    except (ValueError, UnicodeDecodeError, MultiPartParserError):
        return JsonResponse(
            {"message": "Invalid JSON format or form data parsing error"},
            status=HTTPStatus.BAD_REQUEST,
        )

    try:
        event = store.create(data)
    except DuplicateSlugError as e:
        return _error_response(e, HTTPStatus.CONFLICT)
    except EventRecordError as e:
        return _error_response(e, HTTPStatus.BAD_REQUEST)
    except Exception:
        logger.exception("Unexpected error creating event")
        return JsonResponse(
            {
                "message": "An error occurred while creating the event",
                "error": "Internal server error",
            },
            status=HTTPStatus.INTERNAL_SERVER_ERROR,
        )

    return JsonResponse(
        {"message": "Event created successfully", "event": event.as_dict()},
        status=HTTPStatus.CREATED,
    )


@require_GET
def event_detail_api(_: HttpRequest, slug: str) -> JsonResponse:
    """Return one event as JSON."""
    event = EventStore().get_by_slug(slug)
    if event is None:
        return JsonResponse({"message": "Event not found"}, status=HTTPStatus.NOT_FOUND)
    return JsonResponse({"event": event.as_dict()})
