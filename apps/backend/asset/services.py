from __future__ import annotations

from typing import Any, Mapping

from core.records import create_record, list_records

from .models import Asset, Incident, Vulnerability
from .serializers import AssetSerializer, IncidentSerializer, VulnerabilitySerializer


def create_asset(data: Mapping[str, Any]) -> Asset:
    return create_record(AssetSerializer, data)


def get_assets() -> list[Asset]:
    return list_records(Asset)


def create_vulnerability(data: Mapping[str, Any]) -> Vulnerability:
    return create_record(VulnerabilitySerializer, data)


def get_vulnerabilities() -> list[Vulnerability]:
    return list_records(Vulnerability)


def create_incident(data: Mapping[str, Any]) -> Incident:
    return create_record(IncidentSerializer, data)


def get_incidents() -> list[Incident]:
    return list_records(Incident)
