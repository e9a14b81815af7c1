from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from .models import Risk


class RiskApiTests(APITestCase):
    def payload(self, **overrides) -> dict:
        data = {
            "name": "Phishing",
            "description": None,
            "risk_level": "medium",
            "likelihood": 4,
            "impact": 3,
            "control_id": None,
            "owner": "Security Awareness",
            "mitigation_strategy": "Quarterly phishing drills",
        }
        data.update(overrides)
        return data

    def test_create_and_list_risks(self):
        created = self.client.post(reverse("risk-list"), data=self.payload(), format="json")
        self.assertEqual(created.status_code, status.HTTP_201_CREATED)
        self.assertNotIn("risk_score", created.json())

        listed = self.client.get(reverse("risk-list")).json()
        self.assertEqual(len(listed), 1)
        self.assertEqual(listed[0]["likelihood"], 4)
        self.assertEqual(listed[0]["impact"], 3)
        self.assertEqual(listed[0]["mitigation_strategy"], "Quarterly phishing drills")

    def test_out_of_range_impact_returns_400(self):
        response = self.client.post(reverse("risk-list"), data=self.payload(impact=9), format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.json()["error"], "validation_error")
        self.assertIn("impact", response.json()["detail"])
        self.assertFalse(Risk.objects.exists())

    def test_null_description_reads_back_as_null(self):
        self.client.post(reverse("risk-list"), data=self.payload(), format="json")

        listed = self.client.get(reverse("risk-list")).json()
        self.assertIsNone(listed[0]["description"])
        self.assertIsNone(listed[0]["control_id"])
