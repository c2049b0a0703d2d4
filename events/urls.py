"""URL configuration for the events app."""

from django.urls import path

from .views import EventDetailView, EventListView, event_collection, event_detail_api


urlpatterns = [
    path("", EventListView.as_view(), name="home"),
    path("events/<slug:slug>/", EventDetailView.as_view(), name="event_detail"),
    path("api/events/", event_collection, name="api_event_collection"),
    path("api/events/<slug:slug>/", event_detail_api, name="api_event_detail"),
]
