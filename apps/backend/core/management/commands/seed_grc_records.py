from __future__ import annotations

from datetime import timedelta

from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from asset.services import create_asset, create_incident, create_vulnerability
from governance.models import Policy
from governance.services import create_audit_finding, create_control, create_policy
from risk.services import create_risk

DEMO_POLICY_TITLE = "Data Protection Policy"


class Command(BaseCommand):
    help = "Seed one linked demo record per ledger table. Safe to run repeatedly."

    def handle(self, *args, **options):
        if Policy.objects.filter(title=DEMO_POLICY_TITLE).exists():
            self.stdout.write(f"Demo records already present ({DEMO_POLICY_TITLE!r}); nothing to do.")
            return

        today = timezone.localdate()
        now = timezone.now()

        with transaction.atomic():
            policy = create_policy(
                {
                    "title": DEMO_POLICY_TITLE,
                    "description": "Handling rules for customer and employee personal data.",
                    "version": "1.0.0",
                    "effective_date": today.isoformat(),
                    "review_date": (today + timedelta(days=365)).isoformat(),
                    "owner": "CSO",
                }
            )
            control = create_control(
                {
                    "name": "Encryption at rest",
                    "description": "Database volumes and backups are encrypted with managed keys.",
                    "control_type": "technical",
                    "status": "implemented",
                    "policy_id": policy.id,
                    "owner": "Platform Team",
                    "implementation_date": (today - timedelta(days=30)).isoformat(),
                    "last_audit_date": None,
                }
            )
            create_risk(
                {
                    "name": "Customer data exposure",
                    "description": "Unencrypted copies of customer records leak through backups.",
                    "risk_level": "high",
                    "likelihood": 3,
                    "impact": 5,
                    "control_id": control.id,
                    "owner": "CISO",
                    "mitigation_strategy": "Encrypt backups and rotate keys quarterly.",
                }
            )
            asset = create_asset(
                {
                    "name": "Primary database server",
                    "description": "Production PostgreSQL primary.",
                    "asset_type": "hardware",
                    "value": "25000.00",
                    "owner": "IT Operations",
                    "location": "Data Center A",
                }
            )
            create_vulnerability(
                {
                    "name": "OpenSSL out-of-bounds read",
                    "description": "Outdated OpenSSL package on the database host.",
                    "severity": "critical",
                    "asset_id": asset.id,
                    "cve_id": "CVE-2024-0001",
                    "discovered_date": (today - timedelta(days=3)).isoformat(),
                    "remediation_plan": "Upgrade OpenSSL during the next maintenance window.",
                    "status": "open",
                }
            )
            create_incident(
                {
                    "title": "Suspicious login burst",
                    "description": "Repeated failed logins against the database bastion.",
                    "severity": "medium",
                    "status": "investigating",
                    "asset_id": asset.id,
                    "discovered_date": (now - timedelta(hours=6)).isoformat(),
                    "resolved_date": None,
                    "root_cause": None,
                    "remediation_actions": None,
                    "reporter": "SOC Analyst",
                    "assigned_to": "Incident Response",
                }
            )
            create_audit_finding(
                {
                    "title": "Key rotation evidence missing",
                    "description": "No record of the last quarterly key rotation.",
                    "status": "open",
                    "control_id": control.id,
                    "policy_id": policy.id,
                    "severity": "medium",
                    "auditor": "Internal Audit",
                    "audit_date": today.isoformat(),
                    "due_date": (today + timedelta(days=30)).isoformat(),
                    "remediation_plan": "Attach rotation logs to the control record.",
                }
            )

        self.stdout.write(self.style.SUCCESS("Seeded demo GRC records for all seven tables."))
