"""
Shared exception-to-response translation for the API.

Tagged exceptions (DRF ``APIException`` subclasses with a ``status_code``)
are rendered by DRF's default handler. Anything else is an unexpected
failure: it is logged server-side and answered with a bare 500 so that no
internal detail reaches the client.
"""
import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


def api_exception_handler(exc, context):
    """DRF ``EXCEPTION_HANDLER`` used by every API view."""
    response = exception_handler(exc, context)
    if response is not None:
        return response

    view = context.get('view')
    logger.exception(
        "Unhandled error in %s: %s",
        type(view).__name__ if view is not None else 'unknown view',
        exc,
    )
    return Response(status=status.HTTP_500_INTERNAL_SERVER_ERROR)
