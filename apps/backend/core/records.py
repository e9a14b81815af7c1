from __future__ import annotations

from typing import Any, Mapping, TypeVar

from django.db import DatabaseError, models, transaction
from rest_framework import serializers

from .exceptions import PersistenceError
from .logging_config import get_logger

logger = get_logger(name=__name__)

RecordT = TypeVar("RecordT", bound=models.Model)


def create_record(serializer_class: type[serializers.ModelSerializer], data: Mapping[str, Any]) -> models.Model:
    """Validate ``data`` and insert exactly one row.

    Raises ``rest_framework.exceptions.ValidationError`` before touching the
    database when the input is rejected, and ``PersistenceError`` when the
    insert itself fails.
    """
    serializer = serializer_class(data=data)
    serializer.is_valid(raise_exception=True)

    model = serializer_class.Meta.model
    try:
        with transaction.atomic():
            record = serializer.save()
    except DatabaseError as exc:
        logger.error("Insert into {table} failed: {error}", table=model._meta.db_table, error=exc)
        raise PersistenceError.from_database_error(exc) from exc

    logger.info("Created {entity} id={record_id}", entity=model._meta.model_name, record_id=record.pk)
    return record


def list_records(model: type[RecordT]) -> list[RecordT]:
    """Every row of ``model``'s table in insertion (primary key) order."""
    try:
        return list(model.objects.order_by("pk"))
    except DatabaseError as exc:
        logger.error("Select from {table} failed: {error}", table=model._meta.db_table, error=exc)
        raise PersistenceError.from_database_error(exc) from exc
