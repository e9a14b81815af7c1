from __future__ import annotations

from typing import Any, Mapping

from core.records import create_record, list_records

from .models import AuditFinding, Control, Policy
from .serializers import AuditFindingSerializer, ControlSerializer, PolicySerializer


def create_policy(data: Mapping[str, Any]) -> Policy:
    return create_record(PolicySerializer, data)


def get_policies() -> list[Policy]:
    return list_records(Policy)


def create_control(data: Mapping[str, Any]) -> Control:
    return create_record(ControlSerializer, data)


def get_controls() -> list[Control]:
    return list_records(Control)


def create_audit_finding(data: Mapping[str, Any]) -> AuditFinding:
    return create_record(AuditFindingSerializer, data)


def get_audit_findings() -> list[AuditFinding]:
    return list_records(AuditFinding)
