"""Admin interface for events."""

from typing import Any, ClassVar

from django import forms
from django.contrib import admin
from django.http import HttpRequest
from django.utils.translation import gettext_lazy as _

from .exceptions import EventRecordError
from .models import Event
from .storage import EventStore


class EventAdminForm(forms.ModelForm):
    """
    Admin form that runs the event preparation pipeline on submit.

    Pipeline errors are reported on the offending field, and the normalized values replace the
    submitted ones before the instance is built.
    """

    # Wider than the stored columns: "March 5, 2026" or "6:30 PM" are normalized in clean()
    date = forms.CharField(max_length=50, help_text=_("Any recognizable date, e.g. 2026-03-05"))
    time = forms.CharField(max_length=20, help_text=_("HH:MM or HH:MM AM/PM"))

    class Meta:
        """Metadata for the EventAdminForm."""

        model = Event
        exclude: ClassVar[list[str]] = ["slug"]

    def clean(self) -> dict[str, Any]:
        """Validate and normalize the submitted event."""
        cleaned_data = super().clean()
        if self.errors:
            return cleaned_data

        store = EventStore()
        try:
            record = store.prepare(cleaned_data, self.instance)
        except EventRecordError as e:
            for field, messages in e.as_dict().items():
                self.add_error(field if field in self.fields else None, messages)
            return cleaned_data

        if store.events.filter(slug=record.slug).exclude(pk=self.instance.pk).exists():
            self.add_error("title", _("Another event already uses the slug %s.") % record.slug)
            return cleaned_data

        fields = record.as_model_fields()
        self.instance.slug = fields.pop("slug")
        cleaned_data.update(fields)
        return cleaned_data


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    """Admin configuration for the Event model."""

    form = EventAdminForm
    list_display = (
        "title",
        "slug",
        "date",
        "time",
        "mode",
        "location",
        "tag_list",
    )
    list_filter = ("mode",)
    search_fields = ("title", "slug", "organizer", "location")
    readonly_fields = ("slug", "created_at", "updated_at")
    fieldsets: ClassVar[list[Any]] = [
        (
            None,
            {
                "fields": (
                    "title",
                    "slug",
                    "overview",
                    "description",
                    "image",
                ),
            },
        ),
        (
            _("Schedule"),
            {
                "fields": (
                    "date",
                    "time",
                    "mode",
                    "venue",
                    "location",
                ),
            },
        ),
        (
            _("Audience & Content"),
            {
                "fields": (
                    "audience",
                    "organizer",
                    "agenda",
                    "tags",
                ),
            },
        ),
        (
            _("Timestamps"),
            {"fields": ("created_at", "updated_at")},
        ),
    ]

    @admin.display(description=_("Tags"))
    def tag_list(self, obj: Event) -> str:
        """Show the event tags as a comma-separated list."""
        return ", ".join(obj.tags)

    def save_model(
        self,
        request: HttpRequest,  # noqa: ARG002
        obj: Event,
        form: forms.ModelForm,  # noqa: ARG002
        change: bool,  # noqa: ARG002, FBT001
    ) -> None:
        """Write the event through the event store."""
        EventStore().save(obj)
