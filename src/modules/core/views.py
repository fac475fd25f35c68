import time
from typing import Any, Dict

import structlog
from django.conf import settings
from django.core.cache import cache
from django.db import DatabaseError, connections
from django.http import HttpRequest, JsonResponse
from django.utils import timezone

logger = structlog.get_logger()

HEALTH_CACHE_KEY = "_health_check"


def _elapsed_ms(start: float) -> float:
    return round((time.monotonic() - start) * 1000, 2)


def _probe_database() -> Dict[str, Any]:
    """Round-trip ``SELECT 1`` on the product store."""
    conn = connections["default"]
    start = time.monotonic()
    try:
        conn.ensure_connection()
        with conn.cursor() as cursor:
            cursor.execute("SELECT 1")
            cursor.fetchone()
    except DatabaseError:
        logger.error("health_check_db_failure", vendor=conn.vendor, exc_info=True)
        return {"status": "down", "vendor": conn.vendor}
    return {"status": "up", "vendor": conn.vendor, "response_time_ms": _elapsed_ms(start)}


def _probe_cache() -> Dict[str, Any]:
    """Write then read a key in the cache holding the throttle counters."""
    backend = settings.CACHES["default"]["BACKEND"].rsplit(".", 1)[-1]
    probe = {"backend": backend, "used_for": "throttling"}
    start = time.monotonic()
    try:
        cache.set(HEALTH_CACHE_KEY, "ok", 10)
        if cache.get(HEALTH_CACHE_KEY) != "ok":
            raise ConnectionError("Cache read failed")
    except Exception:
        # redis-py and django-redis raise their own hierarchies
        logger.error("health_check_cache_failure", backend=backend, exc_info=True)
        return {"status": "down", **probe}
    return {"status": "up", **probe, "response_time_ms": _elapsed_ms(start)}


def health_check(request: HttpRequest) -> JsonResponse:
    """Public liveness report for the product store and the throttle cache.

    Responds ``200`` when every dependency is up, ``503`` otherwise.
    """
    services = {"database": _probe_database(), "cache": _probe_cache()}
    healthy = all(service["status"] == "up" for service in services.values())
    status = "healthy" if healthy else "unhealthy"

    logger.info("health_check_completed", status=status)

    return JsonResponse(
        {
            "status": status,
            "timestamp": timezone.now().isoformat(),
            "services": services,
        },
        status=200 if healthy else 503,
    )
