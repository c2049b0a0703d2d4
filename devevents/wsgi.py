"""WSGI config for devevents project."""

import os

from django.core.wsgi import get_wsgi_application


os.environ.setdefault("DJANGO_SETTINGS_MODULE", "devevents.settings")

application = get_wsgi_application()
