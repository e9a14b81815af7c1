from __future__ import annotations

from typing import Any, Mapping

from core.records import create_record, list_records

from .models import Risk
from .serializers import RiskSerializer


def create_risk(data: Mapping[str, Any]) -> Risk:
    return create_record(RiskSerializer, data)


def get_risks() -> list[Risk]:
    return list_records(Risk)
