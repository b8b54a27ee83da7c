"""Health check endpoints for liveness and readiness probes."""

from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework import status
from django.db import connection
import logging

logger = logging.getLogger(__name__)


@api_view(["GET"])
@permission_classes([AllowAny])
def health_check(request):
    """Liveness check, always {"ok": true} while the process serves requests."""
    return Response({"ok": True}, status=status.HTTP_200_OK)


@api_view(["GET"])
@permission_classes([AllowAny])
def readiness_check(request):
    """
    Readiness check for the storage connection.

    Returns:
        200 OK: Database reachable
        503 Service Unavailable: Database connection failed
    """
    checks = {}

    try:
        connection.ensure_connection()
        checks["database"] = "ok"
    except Exception as e:
        logger.error(f"Database health check failed: {str(e)}")
        checks["database"] = "error"

    ok = all(value == "ok" for value in checks.values())
    return Response(
        {"ok": ok, "checks": checks},
        status=status.HTTP_200_OK if ok else status.HTTP_503_SERVICE_UNAVAILABLE,
    )
