"""
Event listing module for the DevEvents site.

This module provides types that are used across the event record pipeline and the Event model.
"""

from django.db import models
from django.utils.translation import gettext_lazy as _


class EventMode(models.TextChoices):
    """Enumeration of the delivery formats an event can have."""

    ONLINE = "online", _("Online")
    OFFLINE = "offline", _("Offline")
    HYBRID = "hybrid", _("Hybrid")
