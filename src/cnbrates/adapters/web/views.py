# src/cnbrates/adapters/web/views.py
"""
HTTP Views - Daily Rates JSON API

Endpoints:
- GET /api/cnb/daily   parsed daily feed as JSON, or a generic 500
- GET /health          liveness probe

Upstream and unexpected errors are logged here and never leaked to the
client.

Files that USE this module:
- cnbrates.adapters.web.urls (route table)
- tests.test_web (HTTP tests)

Files that this module USES:
- cnbrates.application.rates_service (RatesService)
- cnbrates.adapters.providers.cnb (CNBFeedProvider)
"""

import logging
from datetime import datetime, timezone

from django.http import HttpRequest, JsonResponse
from django.views.decorators.http import require_GET

from cnbrates.adapters.providers.cnb import CNBFeedProvider
from cnbrates.application.rates_service import RatesService
from cnbrates.domain.errors import UpstreamUnavailable

logger = logging.getLogger(__name__)

SERVER_ERROR_MESSAGE = "Server error processing exchange rate data"


def _timestamp() -> str:
    """UTC timestamp in ISO-8601 with millisecond precision, e.g. 2025-10-15T08:00:00.000Z"""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@require_GET
def daily_rates(request: HttpRequest) -> JsonResponse:
    try:
        data = RatesService(provider=CNBFeedProvider()).daily_rates()
    except UpstreamUnavailable as e:
        logger.error("CNB API error: %s", e)
        return JsonResponse({"error": SERVER_ERROR_MESSAGE, "timestamp": _timestamp()}, status=500)
    except Exception:
        logger.exception("Unexpected error serving CNB daily rates")
        return JsonResponse({"error": SERVER_ERROR_MESSAGE, "timestamp": _timestamp()}, status=500)
    return JsonResponse(data.to_dict())


@require_GET
def health(request: HttpRequest) -> JsonResponse:
    return JsonResponse({"status": "ok", "timestamp": _timestamp()})


def not_found(request: HttpRequest, exception=None) -> JsonResponse:
    return JsonResponse({"error": "Not found", "timestamp": _timestamp()}, status=404)
