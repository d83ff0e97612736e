# src/cnbrates/adapters/web/middleware.py
"""
Response Header Middleware

Adds security, caching and CORS headers to every response and marks the
body as UTF-8 JSON.

Files that USE this module:
- cnbrates.adapters.web.server (listed in Django MIDDLEWARE)

Files that this module USES:
- cnbrates.config (settings.cache_max_age_seconds)
"""

import logging

from django.http import HttpRequest, HttpResponse
from django.utils.deprecation import MiddlewareMixin

from cnbrates.config import settings

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json; charset=utf-8"

SECURITY_HEADERS = {
    "X-Frame-Options": "DENY",
    "X-XSS-Protection": "1; mode=block",
    "Strict-Transport-Security": "max-age=31536000; includeSubDomains",
}


class ResponseHeadersMiddleware(MiddlewareMixin):
    """Apply the fixed response headers the browser client relies on."""

    def process_response(self, request: HttpRequest, response: HttpResponse) -> HttpResponse:
        for header, value in SECURITY_HEADERS.items():
            response[header] = value
        response["Content-Type"] = JSON_CONTENT_TYPE
        response["Cache-Control"] = f"public, max-age={settings.cache_max_age_seconds}"
        response["Access-Control-Allow-Origin"] = "*"
        return response
