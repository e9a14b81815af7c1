from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase


class AssetApiTests(APITestCase):
    def payload(self, **overrides) -> dict:
        data = {
            "name": "Test Server",
            "description": None,
            "asset_type": "hardware",
            "value": 5000.50,
            "owner": "IT Department",
            "location": None,
        }
        data.update(overrides)
        return data

    def test_value_is_rendered_as_number(self):
        created = self.client.post(reverse("asset-list"), data=self.payload(), format="json")
        self.assertEqual(created.status_code, status.HTTP_201_CREATED)

        listed = self.client.get(reverse("asset-list")).json()
        self.assertEqual(listed[0]["value"], 5000.5)

    def test_null_value_is_not_coerced(self):
        self.client.post(reverse("asset-list"), data=self.payload(value=None), format="json")

        listed = self.client.get(reverse("asset-list")).json()
        self.assertIsNone(listed[0]["value"])

    def test_vulnerability_and_incident_reference_asset(self):
        asset_id = self.client.post(reverse("asset-list"), data=self.payload(), format="json").json()["id"]

        vulnerability = self.client.post(
            reverse("vulnerability-list"),
            data={
                "name": "Weak TLS ciphers",
                "description": None,
                "severity": "medium",
                "asset_id": asset_id,
                "cve_id": None,
                "discovered_date": "2024-02-02",
                "remediation_plan": "Disable CBC suites",
                "status": "open",
            },
            format="json",
        )
        incident = self.client.post(
            reverse("incident-list"),
            data={
                "title": "Cert expired",
                "description": None,
                "severity": "low",
                "status": "closed",
                "asset_id": asset_id,
                "discovered_date": "2024-02-03T10:00:00Z",
                "resolved_date": "2024-02-03T12:00:00Z",
                "root_cause": "Renewal job disabled",
                "remediation_actions": "Re-enabled renewal",
                "reporter": "NOC",
                "assigned_to": "Platform Team",
            },
            format="json",
        )

        self.assertEqual(vulnerability.status_code, status.HTTP_201_CREATED)
        self.assertEqual(incident.status_code, status.HTTP_201_CREATED)

        self.assertEqual(self.client.get(reverse("vulnerability-list")).json()[0]["asset_id"], asset_id)
        incidents = self.client.get(reverse("incident-list")).json()
        self.assertEqual(incidents[0]["asset_id"], asset_id)
        self.assertEqual(incidents[0]["resolved_date"], "2024-02-03T12:00:00Z")

    def test_invalid_incident_severity_returns_400(self):
        response = self.client.post(
            reverse("incident-list"),
            data={
                "title": "Bad severity",
                "description": None,
                "severity": "catastrophic",
                "status": "open",
                "asset_id": None,
                "discovered_date": "2024-02-03T10:00:00Z",
                "resolved_date": None,
                "root_cause": None,
                "remediation_actions": None,
                "reporter": "NOC",
                "assigned_to": None,
            },
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("severity", response.json()["detail"])
