"""
Error responses shared by the delivery API views.

Every failure is reported as ``{"error": "<message>"}``.
"""
import logging

from rest_framework import status
from rest_framework.response import Response

from route_optimizer.core.exceptions import InvalidInputError, NotFoundError, StoreFailureError
from route_optimizer.utils.helpers import first_error_message

logger = logging.getLogger(__name__)


def error_response(message, status_code=status.HTTP_400_BAD_REQUEST):
    return Response({'error': message}, status=status_code)


def validation_error_response(serializer):
    """400 response carrying the first validation message of ``serializer``."""
    logger.info(f"Rejected request: {serializer.errors}")
    return error_response(first_error_message(serializer.errors))


def dispatch_error_response(exc):
    """
    Map a dispatch error to its HTTP response.

    Args:
        exc: A DispatchError raised by the service layer.

    Returns:
        Response with status 404, 400 or 500.
    """
    if isinstance(exc, NotFoundError):
        return error_response(str(exc), status.HTTP_404_NOT_FOUND)
    if isinstance(exc, InvalidInputError):
        return error_response(str(exc), status.HTTP_400_BAD_REQUEST)
    if isinstance(exc, StoreFailureError):
        return error_response(str(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)
    logger.error(f"Unexpected dispatch error: {exc}", exc_info=True)
    return error_response(str(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)
