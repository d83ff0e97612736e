# src/cnbrates/adapters/web/server.py
"""
Web Server Bootstrap - Django Without a Project

Configures Django programmatically (no database, no templates, no apps)
and serves the WSGI application on the configured host and port.

Files that USE this module:
- cnbrates.app (serve command)
- tests.conftest (configures Django for the HTTP tests)

Files that this module USES:
- cnbrates.config (listen host and port)
"""

from __future__ import annotations

import logging
from typing import Optional

import django
from django.conf import settings as django_settings
from django.core.handlers.wsgi import WSGIHandler
from django.core.servers.basehttp import run
from django.core.wsgi import get_wsgi_application

from cnbrates.config import settings

logger = logging.getLogger(__name__)


def configure_django() -> None:
    """Configure and set up Django once per process."""
    if django_settings.configured:
        return
    django_settings.configure(
        DEBUG=False,
        SECRET_KEY="cnbrates-no-sessions-or-signing",
        ALLOWED_HOSTS=["*"],
        ROOT_URLCONF="cnbrates.adapters.web.urls",
        MIDDLEWARE=["cnbrates.adapters.web.middleware.ResponseHeadersMiddleware"],
        INSTALLED_APPS=[],
        DATABASES={},
        TEMPLATES=[],
        USE_TZ=True,
        DEFAULT_CHARSET="utf-8",
        # Logging is set up by cnbrates.shared.logging_conf
        LOGGING_CONFIG=None,
    )
    django.setup()


def get_application() -> WSGIHandler:
    configure_django()
    return get_wsgi_application()


def serve(host: Optional[str] = None, port: Optional[int] = None) -> None:
    """
    Serve the API until interrupted.

    Args:
        host: Listen address (defaults to settings.host)
        port: Listen port (defaults to settings.port)
    """
    host = host or settings.host
    port = port or settings.port
    application = get_application()
    logger.info("CNB Exchange rates: Server running on http://%s:%d", host, port)
    run(host, port, application, threading=True)
