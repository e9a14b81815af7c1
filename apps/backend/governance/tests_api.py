from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from .models import Control, Policy


class GovernanceApiTests(APITestCase):
    def setUp(self):
        self.policy_payload = {
            "title": "Data Protection Policy",
            "description": None,
            "version": "1.0.0",
            "effective_date": "2024-01-01",
            "review_date": None,
            "owner": "CSO",
        }

    def test_create_policy_returns_generated_fields(self):
        response = self.client.post(reverse("policy-list"), data=self.policy_payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        body = response.json()
        self.assertIn("id", body)
        self.assertEqual(body["created_at"], body["updated_at"])
        for field, value in self.policy_payload.items():
            self.assertEqual(body[field], value, field)

    def test_padded_and_long_text_reads_back_unchanged(self):
        payload = {**self.policy_payload, "title": "  Padded Title  ", "version": "release-" + "9" * 80, "owner": " "}
        self.client.post(reverse("policy-list"), data=payload, format="json")

        listed = self.client.get(reverse("policy-list")).json()
        for field in ("title", "version", "owner"):
            self.assertEqual(listed[0][field], payload[field], field)

    def test_list_policies_returns_plain_array(self):
        self.client.post(reverse("policy-list"), data=self.policy_payload, format="json")

        response = self.client.get(reverse("policy-list"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        body = response.json()
        self.assertIsInstance(body, list)
        self.assertEqual(len(body), 1)
        self.assertIsNone(body[0]["description"])

    def test_invalid_policy_returns_validation_envelope(self):
        response = self.client.post(reverse("policy-list"), data={**self.policy_payload, "version": ""}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        body = response.json()
        self.assertEqual(body["error"], "validation_error")
        self.assertIn("version", body["detail"])
        self.assertFalse(Policy.objects.exists())

    def test_control_round_trips_policy_id(self):
        policy_id = self.client.post(reverse("policy-list"), data=self.policy_payload, format="json").json()["id"]
        control = {
            "name": "Data Encryption",
            "description": "Data at rest encryption",
            "control_type": "Technical",
            "status": "draft",
            "policy_id": policy_id,
            "owner": "IT Team",
            "implementation_date": None,
            "last_audit_date": None,
        }

        created = self.client.post(reverse("control-list"), data=control, format="json")
        self.assertEqual(created.status_code, status.HTTP_201_CREATED)

        listed = self.client.get(reverse("control-list")).json()
        self.assertEqual(len(listed), 1)
        self.assertEqual(listed[0]["policy_id"], policy_id)

    def test_control_with_unknown_policy_is_rejected(self):
        control = {
            "name": "Orphan",
            "description": None,
            "control_type": "Technical",
            "status": "draft",
            "policy_id": 424242,
            "owner": "IT Team",
            "implementation_date": None,
            "last_audit_date": None,
        }

        response = self.client.post(reverse("control-list"), data=control, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("policy_id", response.json()["detail"])
        self.assertFalse(Control.objects.exists())

    def test_records_cannot_be_edited_or_deleted(self):
        created = self.client.post(reverse("policy-list"), data=self.policy_payload, format="json").json()

        put = self.client.put(reverse("policy-list"), data=self.policy_payload, format="json")
        delete = self.client.delete(reverse("policy-list"))
        detail = self.client.patch(f"{reverse('policy-list')}{created['id']}/", data={"title": "Changed"}, format="json")

        self.assertEqual(put.status_code, status.HTTP_405_METHOD_NOT_ALLOWED)
        self.assertEqual(delete.status_code, status.HTTP_405_METHOD_NOT_ALLOWED)
        self.assertEqual(detail.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(Policy.objects.get().title, "Data Protection Policy")

    def test_audit_findings_endpoint(self):
        finding = {
            "title": "Stale firewall rules",
            "description": None,
            "status": "in_progress",
            "control_id": None,
            "policy_id": None,
            "severity": "low",
            "auditor": "External Auditor",
            "audit_date": "2024-05-10",
            "due_date": "2024-06-10",
            "remediation_plan": None,
        }

        created = self.client.post(reverse("audit-finding-list"), data=finding, format="json")
        self.assertEqual(created.status_code, status.HTTP_201_CREATED)

        listed = self.client.get(reverse("audit-finding-list")).json()
        self.assertEqual([row["title"] for row in listed], ["Stale firewall rules"])
        self.assertEqual(listed[0]["due_date"], "2024-06-10")
