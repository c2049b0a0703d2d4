"""Template context processors for site-wide branding."""

from typing import Any

from django.conf import settings


def branding(_: Any) -> dict[str, Any]:
    """Inject branding variables into all templates."""
    site_name = getattr(settings, "BRAND_SITE_NAME", "").strip()
    headline = getattr(settings, "BRAND_HEADLINE", "").strip()
    tagline = getattr(settings, "BRAND_TAGLINE", "").strip()

    brand_title = f"{site_name} | {headline}" if site_name and headline else site_name or "Events"
    meta_description = tagline or f"{brand_title} events"

    return {
        "brand_site_name": site_name or "Events",
        "brand_headline": headline,
        "brand_tagline": tagline,
        "brand_title": brand_title,
        "brand_meta_description": meta_description,
    }
