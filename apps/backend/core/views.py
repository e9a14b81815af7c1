from __future__ import annotations

from typing import Any, Callable

from django.http import JsonResponse
from django.utils import timezone
from rest_framework import status, viewsets
from rest_framework.exceptions import MethodNotAllowed, NotFound
from rest_framework.response import Response
from rest_framework.views import APIView


def healthcheck_payload() -> dict[str, str]:
    return {"status": "ok", "timestamp": timezone.now().isoformat()}


def healthcheck(_request):
    return JsonResponse(healthcheck_payload())


class RecordViewSet(viewsets.GenericViewSet):
    """Create and list-all for one ledger table; records are never edited.

    Subclasses bind the service functions backing the two operations as
    staticmethods.
    """

    pagination_class = None
    create_operation: Callable[[Any], Any]
    list_operation: Callable[[], list]

    def list(self, request):
        records = self.list_operation()
        return Response(self.get_serializer(records, many=True).data)

    def create(self, request):
        record = self.create_operation(request.data)
        return Response(self.get_serializer(record).data, status=status.HTTP_201_CREATED)


class Procedure:
    def __init__(self, method: str, handler: Callable[..., Any], serializer_class=None):
        self.method = method
        self.handler = handler
        self.serializer_class = serializer_class


class ProcedureCallView(APIView):
    """Expose the record operations under their procedure names, e.g. ``createPolicy``."""

    procedures: dict[str, Procedure] = {}

    def _resolve(self, procedure_name: str, method: str) -> Procedure:
        procedure = self.procedures.get(procedure_name)
        if procedure is None:
            raise NotFound(f"Unknown procedure: {procedure_name}")
        if procedure.method != method:
            raise MethodNotAllowed(method)
        return procedure

    def get(self, request, procedure_name: str):
        procedure = self._resolve(procedure_name, "GET")
        result = procedure.handler()
        if procedure.serializer_class is None:
            return Response(result)
        return Response(procedure.serializer_class(result, many=True).data)

    def post(self, request, procedure_name: str):
        procedure = self._resolve(procedure_name, "POST")
        record = procedure.handler(request.data)
        return Response(procedure.serializer_class(record).data, status=status.HTTP_201_CREATED)
