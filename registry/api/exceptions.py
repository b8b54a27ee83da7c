"""DRF exception handler that renders framework errors in the registry envelope."""

from rest_framework.views import exception_handler
import logging

logger = logging.getLogger(__name__)


def _detail_message(detail) -> str:
    if isinstance(detail, dict):
        detail = detail.get("detail", next(iter(detail.values()), ""))
    if isinstance(detail, list):
        detail = detail[0] if detail else ""
    return str(detail)


def envelope_exception_handler(exc, context):
    """
    Convert errors raised by DRF before a view body runs (parse errors,
    unsupported methods or media types) into {"ok": false, "message": ...}.
    """
    response = exception_handler(exc, context)
    if response is None:
        return None

    message = _detail_message(response.data)
    logger.warning(f"Request rejected with {response.status_code}: {message}")
    response.data = {"ok": False, "message": message}
    return response
