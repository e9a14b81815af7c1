from datetime import datetime, timezone as dt_timezone
from decimal import Decimal

from django.test import TestCase
from rest_framework.exceptions import ValidationError

from .models import Asset, Incident, Vulnerability
from .serializers import AssetSerializer
from .services import (
    create_asset,
    create_incident,
    create_vulnerability,
    get_assets,
    get_incidents,
    get_vulnerabilities,
)


def asset_payload(**overrides) -> dict:
    payload = {
        "name": "Test Server",
        "description": "A server for testing",
        "asset_type": "hardware",
        "value": 5000.50,
        "owner": "IT Department",
        "location": "Data Center A",
    }
    payload.update(overrides)
    return payload


class AssetServiceTests(TestCase):
    def test_decimal_value_survives_round_trip(self):
        create_asset(asset_payload())

        stored = get_assets()[0]
        stored.refresh_from_db()
        self.assertEqual(stored.value, Decimal("5000.50"))
        self.assertEqual(AssetSerializer(stored).data["value"], Decimal("5000.50"))

    def test_text_fields_round_trip_verbatim(self):
        create_asset(
            asset_payload(
                name="  Core router  ",
                asset_type="network appliance (" + "edge " * 40 + ")",
                location="Zürich DC \u2013 rack 7 ",
            )
        )

        stored = get_assets()[0]
        stored.refresh_from_db()
        self.assertEqual(stored.name, "  Core router  ")
        self.assertEqual(stored.asset_type, "network appliance (" + "edge " * 40 + ")")
        self.assertEqual(stored.location, "Zürich DC \u2013 rack 7 ")

    def test_whitespace_only_owner_counts_as_present(self):
        asset = create_asset(asset_payload(owner="   "))
        self.assertEqual(asset.owner, "   ")

    def test_decimal_string_input_is_accepted(self):
        asset = create_asset(asset_payload(value="1234567.89"))
        asset.refresh_from_db()
        self.assertEqual(asset.value, Decimal("1234567.89"))

    def test_null_value_reads_back_as_null(self):
        create_asset(asset_payload(value=None, description=None, location=None))

        stored = get_assets()[0]
        self.assertIsNone(stored.value)
        self.assertIsNone(stored.description)
        self.assertIsNone(stored.location)

    def test_negative_value_is_not_rejected(self):
        asset = create_asset(asset_payload(value=-10))
        asset.refresh_from_db()
        self.assertEqual(asset.value, Decimal("-10.00"))

    def test_value_with_too_many_digits_is_rejected(self):
        with self.assertRaises(ValidationError) as ctx:
            create_asset(asset_payload(value="123456789.00"))

        self.assertIn("value", ctx.exception.detail)
        self.assertFalse(Asset.objects.exists())

    def test_missing_owner_is_rejected(self):
        payload = asset_payload()
        del payload["owner"]

        with self.assertRaises(ValidationError) as ctx:
            create_asset(payload)

        self.assertIn("owner", ctx.exception.detail)


class VulnerabilityServiceTests(TestCase):
    def setUp(self):
        self.asset = create_asset(asset_payload())

    def payload(self, **overrides) -> dict:
        data = {
            "name": "Log4Shell",
            "description": None,
            "severity": "critical",
            "asset_id": self.asset.id,
            "cve_id": "CVE-2021-44228",
            "discovered_date": "2021-12-10",
            "remediation_plan": None,
            "status": "open",
        }
        data.update(overrides)
        return data

    def test_vulnerability_links_to_asset(self):
        vulnerability = create_vulnerability(self.payload())

        stored = get_vulnerabilities()[0]
        self.assertEqual(stored.id, vulnerability.id)
        self.assertEqual(stored.asset_id, self.asset.id)
        self.assertEqual(stored.cve_id, "CVE-2021-44228")

    def test_long_cve_and_status_are_accepted(self):
        cve_id = "CVE-2024-" + "9" * 70
        vulnerability = create_vulnerability(self.payload(cve_id=cve_id, status="s" * 100))
        vulnerability.refresh_from_db()

        self.assertEqual(vulnerability.cve_id, cve_id)
        self.assertEqual(vulnerability.status, "s" * 100)

    def test_status_is_free_text(self):
        vulnerability = create_vulnerability(self.payload(status="waiting on vendor patch"))
        self.assertEqual(vulnerability.status, "waiting on vendor patch")

    def test_severity_is_a_closed_set(self):
        with self.assertRaises(ValidationError) as ctx:
            create_vulnerability(self.payload(severity="urgent"))

        self.assertIn("severity", ctx.exception.detail)
        self.assertFalse(Vulnerability.objects.exists())

    def test_cve_id_may_be_null(self):
        vulnerability = create_vulnerability(self.payload(cve_id=None, asset_id=None))
        self.assertIsNone(vulnerability.cve_id)
        self.assertIsNone(vulnerability.asset_id)


class IncidentServiceTests(TestCase):
    def payload(self, **overrides) -> dict:
        data = {
            "title": "Ransomware on file share",
            "description": None,
            "severity": "high",
            "status": Incident.STATUS_OPEN,
            "asset_id": None,
            "discovered_date": "2024-04-01T08:30:00Z",
            "resolved_date": None,
            "root_cause": None,
            "remediation_actions": None,
            "reporter": "SOC",
            "assigned_to": None,
        }
        data.update(overrides)
        return data

    def test_incident_round_trips_timestamps(self):
        create_incident(self.payload())

        stored = get_incidents()[0]
        self.assertEqual(stored.discovered_date, datetime(2024, 4, 1, 8, 30, tzinfo=dt_timezone.utc))
        self.assertIsNone(stored.resolved_date)
        self.assertIsNone(stored.assigned_to)

    def test_resolved_before_discovered_is_accepted(self):
        incident = create_incident(
            self.payload(status=Incident.STATUS_RESOLVED, resolved_date="2024-03-01T00:00:00Z")
        )
        self.assertLess(incident.resolved_date, incident.discovered_date)

    def test_reporter_and_assignee_keep_padding(self):
        incident = create_incident(self.payload(reporter=" SOC ", assigned_to="Équipe réponse "))
        incident.refresh_from_db()

        self.assertEqual(incident.reporter, " SOC ")
        self.assertEqual(incident.assigned_to, "Équipe réponse ")

    def test_unknown_status_is_rejected(self):
        with self.assertRaises(ValidationError) as ctx:
            create_incident(self.payload(status="in_progress"))

        self.assertIn("status", ctx.exception.detail)
        self.assertFalse(Incident.objects.exists())

    def test_empty_reporter_is_rejected(self):
        with self.assertRaises(ValidationError) as ctx:
            create_incident(self.payload(reporter=""))

        self.assertIn("reporter", ctx.exception.detail)

    def test_dangling_asset_reference_is_rejected(self):
        with self.assertRaises(ValidationError) as ctx:
            create_incident(self.payload(asset_id=31337))

        self.assertIn("asset_id", ctx.exception.detail)
