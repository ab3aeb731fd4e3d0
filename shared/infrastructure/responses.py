"""Mapping of command results onto DRF responses."""

from __future__ import annotations

import logging

from rest_framework import status  # type: ignore
from rest_framework.response import Response  # type: ignore

from shared.application.results import Conflict, Result, ResultKind

logger = logging.getLogger(__name__)

ERROR_STATUS = {
    ResultKind.INVALID_INPUT: status.HTTP_400_BAD_REQUEST,
    ResultKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ResultKind.CONFLICT: status.HTTP_409_CONFLICT,
}


def result_response(result: Result, data=None, success_status: int = status.HTTP_200_OK) -> Response:
    """Return `data` on success, otherwise a `{"detail": ...}` error body."""

    if result.is_success:
        return Response(data, status=success_status)

    body = {"detail": result.message}
    if isinstance(result, Conflict):
        body["reason"] = result.reason.value
        logger.warning("Conflict: %s", result.message)
    else:
        logger.info("%s: %s", result.kind.value, result.message)

    return Response(body, status=ERROR_STATUS[result.kind])
