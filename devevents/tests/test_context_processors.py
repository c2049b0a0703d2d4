"""Tests for the branding context processor."""

from typing import Any

from django.test import RequestFactory

from devevents.context_processors import branding


class TestBranding:
    """Tests for the branding context processor."""

    def test_defaults(self, rf: RequestFactory, settings: Any) -> None:
        """Site name and headline are combined into the page title."""
        settings.BRAND_SITE_NAME = "DevEvent"
        settings.BRAND_HEADLINE = "Where Tech Minds Unite"
        settings.BRAND_TAGLINE = "Hackathons and Meetups"

        context = branding(rf.get("/"))

        assert context["brand_site_name"] == "DevEvent"
        assert context["brand_title"] == "DevEvent | Where Tech Minds Unite"
        assert context["brand_meta_description"] == "Hackathons and Meetups"

    def test_fallbacks(self, rf: RequestFactory, settings: Any) -> None:
        """Empty settings fall back to generic values."""
        settings.BRAND_SITE_NAME = ""
        settings.BRAND_HEADLINE = ""
        settings.BRAND_TAGLINE = ""

        context = branding(rf.get("/"))

        assert context["brand_site_name"] == "Events"
        assert context["brand_title"] == "Events"
        assert context["brand_meta_description"] == "Events events"
