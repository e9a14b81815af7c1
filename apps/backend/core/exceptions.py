from __future__ import annotations

from django.core.exceptions import PermissionDenied
from django.db import DatabaseError, IntegrityError
from django.http import Http404
from rest_framework import exceptions, status
from rest_framework.exceptions import APIException, ValidationError
from rest_framework.views import exception_handler

from .logging_config import get_logger

logger = get_logger(name=__name__)


class PersistenceError(APIException):
    """A storage-layer failure carried to the caller with the driver message intact."""

    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    default_detail = "The record store is unavailable."
    default_code = "persistence_error"

    def __init__(self, detail: str | None = None, *, constraint: bool = False):
        super().__init__(detail=detail)
        self.constraint = constraint
        if constraint:
            self.status_code = status.HTTP_409_CONFLICT

    @classmethod
    def from_database_error(cls, exc: DatabaseError) -> PersistenceError:
        return cls(str(exc) or None, constraint=isinstance(exc, IntegrityError))


def api_exception_handler(exc, context):
    """Wrap DRF errors in the ledger's ``{"error", "detail"}`` envelope."""
    if isinstance(exc, DatabaseError):
        logger.error("Unwrapped database error in {view}: {error}", view=type(context.get("view")).__name__, error=exc)
        exc = PersistenceError.from_database_error(exc)
    elif isinstance(exc, Http404):
        exc = exceptions.NotFound(*exc.args)
    elif isinstance(exc, PermissionDenied):
        exc = exceptions.PermissionDenied(*exc.args)

    response = exception_handler(exc, context)
    if response is None:
        return None

    if isinstance(exc, ValidationError):
        response.data = {"error": "validation_error", "detail": response.data}
        return response

    kind = "persistence_error" if isinstance(exc, PersistenceError) else getattr(exc, "default_code", "error")
    detail = response.data.get("detail", response.data) if isinstance(response.data, dict) else response.data
    response.data = {"error": kind, "detail": detail}
    return response
