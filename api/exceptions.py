import logging

from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


def _first_message(detail):
    if isinstance(detail, dict):
        for value in detail.values():
            return _first_message(value)
        return ""
    if isinstance(detail, (list, tuple)):
        return _first_message(detail[0]) if detail else ""
    return str(detail)


def error_envelope_handler(exc, context):
    """Render every API error as ``{"error": "..."}``."""
    if isinstance(exc, (exceptions.NotAuthenticated, exceptions.AuthenticationFailed)):
        response = exception_handler(exc, context)
        response.data = {"error": "Authentication required"}
        return response

    response = exception_handler(exc, context)
    if response is None:
        view = context.get("view")
        logger.exception("Unhandled API error in %s", view.__class__.__name__ if view else "unknown view")
        return Response({"error": "Internal server error"}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    if isinstance(exc, exceptions.PermissionDenied):
        response.data = {"error": "Admin access required"}
    elif isinstance(exc, exceptions.NotFound):
        response.data = {"error": "Not found"}
    else:
        response.data = {"error": _first_message(response.data) or "Request failed"}
    return response
