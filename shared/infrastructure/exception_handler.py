"""DRF exception handler for unexpected store failures."""

from __future__ import annotations

import logging

from rest_framework import status  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import exception_handler  # type: ignore

from shared.infrastructure.repository import StoreError

logger = logging.getLogger(__name__)


def api_exception_handler(exc, context):  # type: ignore
    """Return 500 for store failures, defer everything else to DRF."""

    if isinstance(exc, StoreError):
        view = context.get("view")
        logger.error(
            "Store failure in %s: %s",
            view.__class__.__name__ if view is not None else "unknown view",
            exc,
            exc_info=exc,
        )
        return Response(
            {"detail": "Internal server error."},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
    return exception_handler(exc, context)
