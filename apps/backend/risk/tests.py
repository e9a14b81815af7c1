from django.test import TestCase
from rest_framework.exceptions import ValidationError

from governance.services import create_control

from .models import Risk
from .services import create_risk, get_risks


def risk_payload(**overrides) -> dict:
    payload = {
        "name": "Data Breach",
        "description": "Unauthorized access to customer records",
        "risk_level": Risk.LEVEL_HIGH,
        "likelihood": 3,
        "impact": 4,
        "control_id": None,
        "owner": "Risk Manager",
        "mitigation_strategy": None,
    }
    payload.update(overrides)
    return payload


class RiskServiceTests(TestCase):
    def test_create_risk_round_trips(self):
        risk = create_risk(risk_payload())

        stored = get_risks()
        self.assertEqual(len(stored), 1)
        self.assertEqual(stored[0].id, risk.id)
        self.assertEqual(stored[0].likelihood, 3)
        self.assertEqual(stored[0].impact, 4)
        self.assertIsNone(stored[0].mitigation_strategy)
        self.assertEqual(stored[0].created_at, stored[0].updated_at)

    def test_risk_score_is_derived_not_stored(self):
        risk = create_risk(risk_payload(likelihood=5, impact=4))

        self.assertEqual(risk.risk_score, 20)
        self.assertNotIn("risk_score", [field.name for field in Risk._meta.get_fields()])

    def test_level_may_disagree_with_score(self):
        risk = create_risk(risk_payload(risk_level=Risk.LEVEL_LOW, likelihood=5, impact=5))

        self.assertEqual(risk.risk_level, Risk.LEVEL_LOW)
        self.assertEqual(risk.risk_score, 25)

    def test_boundary_scores_are_accepted(self):
        create_risk(risk_payload(name="Floor", likelihood=1, impact=1))
        create_risk(risk_payload(name="Ceiling", likelihood=5, impact=5))

        self.assertEqual(Risk.objects.count(), 2)

    def test_out_of_range_likelihood_and_impact_are_rejected(self):
        for field, value in (("likelihood", 0), ("likelihood", 6), ("impact", 0), ("impact", 6)):
            with self.subTest(field=field, value=value):
                with self.assertRaises(ValidationError) as ctx:
                    create_risk(risk_payload(**{field: value}))
                self.assertIn(field, ctx.exception.detail)

        self.assertFalse(Risk.objects.exists())

    def test_fractional_likelihood_is_rejected(self):
        with self.assertRaises(ValidationError) as ctx:
            create_risk(risk_payload(likelihood=2.5))

        self.assertIn("likelihood", ctx.exception.detail)
        self.assertFalse(Risk.objects.exists())

    def test_numeric_strings_and_booleans_are_not_scores(self):
        for field, value in (("likelihood", "3"), ("impact", "4"), ("likelihood", True)):
            with self.subTest(field=field, value=value):
                with self.assertRaises(ValidationError) as ctx:
                    create_risk(risk_payload(**{field: value}))
                self.assertIn(field, ctx.exception.detail)

        self.assertFalse(Risk.objects.exists())

    def test_integral_float_score_is_accepted(self):
        risk = create_risk(risk_payload(likelihood=3.0))
        self.assertEqual(risk.likelihood, 3)

    def test_name_and_owner_round_trip_verbatim(self):
        create_risk(risk_payload(name=" Supply chain compromise ", owner="Ренат Ахметов" + "!" * 300))

        stored = get_risks()[0]
        stored.refresh_from_db()
        self.assertEqual(stored.name, " Supply chain compromise ")
        self.assertEqual(stored.owner, "Ренат Ахметов" + "!" * 300)

    def test_unknown_risk_level_is_rejected(self):
        with self.assertRaises(ValidationError) as ctx:
            create_risk(risk_payload(risk_level="severe"))

        self.assertIn("risk_level", ctx.exception.detail)
        self.assertFalse(Risk.objects.exists())

    def test_distinct_levels_survive_listing(self):
        create_risk(risk_payload(name="Minor", risk_level=Risk.LEVEL_LOW))
        create_risk(risk_payload(name="Major", risk_level=Risk.LEVEL_CRITICAL))

        self.assertEqual({risk.risk_level for risk in get_risks()}, {"low", "critical"})

    def test_risk_links_to_control(self):
        control = create_control(
            {
                "name": "MFA",
                "description": None,
                "control_type": "Technical",
                "status": "compliant",
                "policy_id": None,
                "owner": "IAM Team",
                "implementation_date": None,
                "last_audit_date": None,
            }
        )

        risk = create_risk(risk_payload(control_id=control.id))
        self.assertEqual(get_risks()[0].control_id, control.id)
        self.assertEqual(risk.control, control)

    def test_dangling_control_reference_is_rejected(self):
        with self.assertRaises(ValidationError) as ctx:
            create_risk(risk_payload(control_id=999))

        self.assertIn("control_id", ctx.exception.detail)
