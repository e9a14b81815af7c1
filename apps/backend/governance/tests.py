from datetime import date

from django.test import TestCase
from rest_framework.exceptions import ValidationError

from .models import AuditFinding, Control, Policy
from .serializers import PolicySerializer
from .services import (
    create_audit_finding,
    create_control,
    create_policy,
    get_audit_findings,
    get_controls,
    get_policies,
)


def policy_payload(**overrides) -> dict:
    payload = {
        "title": "Data Protection Policy",
        "description": None,
        "version": "1.0.0",
        "effective_date": "2024-01-01",
        "review_date": None,
        "owner": "CSO",
    }
    payload.update(overrides)
    return payload


def control_payload(**overrides) -> dict:
    payload = {
        "name": "Access Control",
        "description": "User access management",
        "control_type": "Preventive",
        "status": Control.STATUS_IMPLEMENTED,
        "policy_id": None,
        "owner": "Security Team",
        "implementation_date": "2023-01-01",
        "last_audit_date": None,
    }
    payload.update(overrides)
    return payload


def audit_finding_payload(**overrides) -> dict:
    payload = {
        "title": "Missing access review",
        "description": None,
        "status": AuditFinding.STATUS_OPEN,
        "control_id": None,
        "policy_id": None,
        "severity": "high",
        "auditor": "Internal Audit",
        "audit_date": "2024-03-01",
        "due_date": None,
        "remediation_plan": None,
    }
    payload.update(overrides)
    return payload


class PolicyServiceTests(TestCase):
    def test_create_policy_returns_persisted_record(self):
        policy = create_policy(policy_payload())

        self.assertIsNotNone(policy.id)
        self.assertEqual(policy.title, "Data Protection Policy")
        self.assertEqual(policy.version, "1.0.0")
        self.assertEqual(policy.effective_date, date(2024, 1, 1))
        self.assertEqual(policy.owner, "CSO")
        self.assertIsNone(policy.description)
        self.assertIsNone(policy.review_date)
        self.assertIsNotNone(policy.created_at)
        self.assertEqual(policy.created_at, policy.updated_at)

    def test_create_then_list_round_trips(self):
        payload = policy_payload(description="Customer data handling", review_date="2025-01-01")
        created = create_policy(payload)

        policies = get_policies()
        self.assertEqual([p.id for p in policies], [created.id])

        data = PolicySerializer(policies[0]).data
        for field, value in payload.items():
            self.assertEqual(data[field], value, field)

    def test_review_date_before_effective_date_is_accepted(self):
        policy = create_policy(policy_payload(effective_date="2024-06-01", review_date="2024-01-01"))
        self.assertEqual(policy.review_date, date(2024, 1, 1))

    def test_empty_title_is_rejected_without_writing(self):
        with self.assertRaises(ValidationError) as ctx:
            create_policy(policy_payload(title=""))

        self.assertIn("title", ctx.exception.detail)
        self.assertFalse(Policy.objects.exists())

    def test_missing_effective_date_is_rejected(self):
        payload = policy_payload()
        del payload["effective_date"]

        with self.assertRaises(ValidationError) as ctx:
            create_policy(payload)

        self.assertIn("effective_date", ctx.exception.detail)
        self.assertFalse(Policy.objects.exists())

    def test_nullable_field_cannot_be_omitted(self):
        payload = policy_payload()
        del payload["description"]

        with self.assertRaises(ValidationError) as ctx:
            create_policy(payload)

        self.assertIn("description", ctx.exception.detail)

    def test_text_is_stored_exactly_as_sent(self):
        payload = policy_payload(
            title="  Padded Title  ",
            description="\tIndented body\n",
            version="v" * 80,
            owner="Délégué à la protection des données ",
        )
        create_policy(payload)

        stored = get_policies()[0]
        stored.refresh_from_db()
        self.assertEqual(stored.title, "  Padded Title  ")
        self.assertEqual(stored.description, "\tIndented body\n")
        self.assertEqual(stored.version, "v" * 80)
        self.assertEqual(stored.owner, "Délégué à la protection des données ")

    def test_long_title_is_accepted(self):
        policy = create_policy(policy_payload(title="x" * 300))
        policy.refresh_from_db()
        self.assertEqual(len(policy.title), 300)

    def test_whitespace_only_title_counts_as_present(self):
        policy = create_policy(policy_payload(title=" "))
        self.assertEqual(policy.title, " ")

    def test_list_is_empty_without_rows(self):
        self.assertEqual(get_policies(), [])


class ControlServiceTests(TestCase):
    def setUp(self):
        self.policy = create_policy(policy_payload())

    def test_control_keeps_policy_reference(self):
        control = create_control(control_payload(policy_id=self.policy.id))

        stored = get_controls()
        self.assertEqual(len(stored), 1)
        self.assertEqual(stored[0].id, control.id)
        self.assertEqual(stored[0].policy_id, self.policy.id)

        by_id = {policy.id: policy for policy in get_policies()}
        self.assertEqual(by_id[stored[0].policy_id].title, "Data Protection Policy")

    def test_control_without_policy(self):
        control = create_control(control_payload(policy_id=None, implementation_date=None))
        self.assertIsNone(control.policy_id)
        self.assertIsNone(control.implementation_date)

    def test_every_status_is_settable_at_creation(self):
        for status_value, _ in Control.STATUS_CHOICES:
            create_control(control_payload(name=f"Control {status_value}", status=status_value))

        self.assertEqual(
            sorted(control.status for control in get_controls()),
            sorted(value for value, _ in Control.STATUS_CHOICES),
        )

    def test_unknown_status_is_rejected(self):
        with self.assertRaises(ValidationError) as ctx:
            create_control(control_payload(status="retired"))

        self.assertIn("status", ctx.exception.detail)
        self.assertFalse(Control.objects.exists())

    def test_dangling_policy_reference_is_rejected(self):
        with self.assertRaises(ValidationError) as ctx:
            create_control(control_payload(policy_id=self.policy.id + 999))

        self.assertIn("policy_id", ctx.exception.detail)
        self.assertFalse(Control.objects.exists())


class AuditFindingServiceTests(TestCase):
    def setUp(self):
        self.policy = create_policy(policy_payload())
        self.control = create_control(control_payload(policy_id=self.policy.id))

    def test_finding_links_control_and_policy(self):
        finding = create_audit_finding(
            audit_finding_payload(control_id=self.control.id, policy_id=self.policy.id, remediation_plan="Quarterly reviews")
        )

        stored = get_audit_findings()[0]
        self.assertEqual(stored.id, finding.id)
        self.assertEqual(stored.control_id, self.control.id)
        self.assertEqual(stored.policy_id, self.policy.id)
        self.assertEqual(stored.remediation_plan, "Quarterly reviews")

    def test_free_text_fields_keep_long_and_unicode_values(self):
        finding = create_audit_finding(
            audit_finding_payload(severity="S" * 120, auditor="Prüfungsabteilung 監査 ")
        )
        finding.refresh_from_db()

        self.assertEqual(finding.severity, "S" * 120)
        self.assertEqual(finding.auditor, "Prüfungsabteilung 監査 ")

    def test_severity_is_free_text(self):
        finding = create_audit_finding(audit_finding_payload(severity="Moderate (needs follow-up)"))
        self.assertEqual(finding.severity, "Moderate (needs follow-up)")

    def test_due_date_before_audit_date_is_accepted(self):
        finding = create_audit_finding(audit_finding_payload(audit_date="2024-03-01", due_date="2024-02-01"))
        self.assertEqual(finding.due_date, date(2024, 2, 1))

    def test_empty_auditor_is_rejected(self):
        with self.assertRaises(ValidationError) as ctx:
            create_audit_finding(audit_finding_payload(auditor=""))

        self.assertIn("auditor", ctx.exception.detail)
        self.assertFalse(AuditFinding.objects.exists())

    def test_unknown_status_is_rejected(self):
        with self.assertRaises(ValidationError) as ctx:
            create_audit_finding(audit_finding_payload(status="investigating"))

        self.assertIn("status", ctx.exception.detail)
