"""Domain errors and the project-wide API exception handler.

Services raise the domain errors below when a business rule is violated.
The API layer never catches them itself: the REST framework exception handler
configured in settings renders every error as a `{"message": ...}` payload
with the matching HTTP status, and turns anything unexpected into a logged 500.
"""

import logging

from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class DomainError(Exception):
    """Base class for business rule violations raised by services."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Request could not be processed."

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidInput(DomainError):
    """Missing or malformed request fields."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid input."


class NotFound(DomainError):
    """A referenced entity (order, artisan, catalog item) does not exist."""

    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found."


class Forbidden(DomainError):
    """The acting user is not the party allowed to perform the operation."""

    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Not authorized."


class InvalidState(DomainError):
    """The requested transition is not legal from the current status."""

    status_code = status.HTTP_409_CONFLICT
    default_message = "Operation not allowed in the current state."


def _first_message(data) -> str:
    """Pick a human readable message out of a DRF error structure."""
    if isinstance(data, dict):
        if "detail" in data:
            return _first_message(data["detail"])
        for value in data.values():
            return _first_message(value)
    if isinstance(data, (list, tuple)) and data:
        return _first_message(data[0])
    return str(data) if data else "Invalid input."


def api_exception_handler(exc, context):
    """Render domain, framework and unexpected errors as `{"message": ...}`."""
    if isinstance(exc, DomainError):
        return Response({"message": exc.message}, status=exc.status_code)

    response = exception_handler(exc, context)
    if response is None:
        view = context.get("view")
        logger.error(
            "unhandled_api_error",
            extra={"view": type(view).__name__ if view else "", "error": type(exc).__name__},
            exc_info=exc,
        )
        return Response(
            {"message": "Internal server error."},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if isinstance(exc, ValidationError):
        response.data = {"message": _first_message(response.data), "errors": response.data}
    else:
        response.data = {"message": _first_message(response.data)}
    return response
