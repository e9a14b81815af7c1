import importlib
import os
import sys
import tempfile
from io import StringIO
from pathlib import Path
from unittest.mock import patch

from django.core.exceptions import PermissionDenied
from django.core.management import call_command
from django.db import IntegrityError, OperationalError
from django.http import Http404
from django.test import TestCase
from django.urls import reverse
from django.utils.dateparse import parse_datetime
from rest_framework import status
from rest_framework.test import APITestCase

from asset.models import Asset, Incident, Vulnerability
from core.exceptions import PersistenceError, api_exception_handler
from governance.models import AuditFinding, Control, Policy
from governance.serializers import PolicySerializer
from governance.services import create_policy, get_policies
from risk.models import Risk

POLICY_PAYLOAD = {
    "title": "Acceptable Use Policy",
    "description": None,
    "version": "2.1",
    "effective_date": "2024-01-01",
    "review_date": None,
    "owner": "HR",
}


class RecordTimestampTests(TestCase):
    def test_created_and_updated_share_one_reading(self):
        policy = create_policy(POLICY_PAYLOAD)
        policy.refresh_from_db()

        self.assertIsNotNone(policy.created_at)
        self.assertEqual(policy.created_at, policy.updated_at)

    def test_resave_keeps_creation_stamps(self):
        policy = create_policy(POLICY_PAYLOAD)
        created_at = policy.created_at

        policy.save()
        policy.refresh_from_db()

        self.assertEqual(policy.created_at, created_at)
        self.assertEqual(policy.updated_at, created_at)

    def test_ids_follow_insertion_order(self):
        first = create_policy(POLICY_PAYLOAD)
        second = create_policy({**POLICY_PAYLOAD, "title": "Clean Desk Policy"})

        self.assertEqual([p.id for p in get_policies()], [first.id, second.id])


class PersistenceErrorTests(TestCase):
    def test_integrity_error_becomes_constraint_persistence_error(self):
        with patch.object(PolicySerializer, "save", side_effect=IntegrityError("UNIQUE constraint failed")):
            with self.assertRaises(PersistenceError) as ctx:
                create_policy(POLICY_PAYLOAD)

        self.assertTrue(ctx.exception.constraint)
        self.assertEqual(ctx.exception.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(str(ctx.exception.detail), "UNIQUE constraint failed")
        self.assertIsInstance(ctx.exception.__cause__, IntegrityError)

    def test_operational_error_is_reported_as_unavailable(self):
        with patch.object(PolicySerializer, "save", side_effect=OperationalError("server has gone away")):
            with self.assertRaises(PersistenceError) as ctx:
                create_policy(POLICY_PAYLOAD)

        self.assertFalse(ctx.exception.constraint)
        self.assertEqual(ctx.exception.status_code, status.HTTP_503_SERVICE_UNAVAILABLE)


class ExceptionHandlerTests(TestCase):
    def test_django_http404_gets_envelope(self):
        response = api_exception_handler(Http404("No such record"), {})

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data, {"error": "not_found", "detail": "No such record"})

    def test_django_permission_denied_gets_envelope(self):
        response = api_exception_handler(PermissionDenied(), {})

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(response.data["error"], "permission_denied")

    def test_non_api_exception_is_left_to_django(self):
        self.assertIsNone(api_exception_handler(RuntimeError("boom"), {}))


class HealthcheckTests(APITestCase):
    def test_healthz_reports_ok_with_timestamp(self):
        response = self.client.get("/healthz")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        body = response.json()
        self.assertEqual(body["status"], "ok")
        self.assertIsNotNone(parse_datetime(body["timestamp"]))

    def test_healthcheck_procedure(self):
        response = self.client.get(reverse("procedure-call", args=["healthcheck"]))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.json()["status"], "ok")


class ProcedureCallTests(APITestCase):
    def test_create_then_get_policies(self):
        created = self.client.post(reverse("procedure-call", args=["createPolicy"]), data=POLICY_PAYLOAD, format="json")
        self.assertEqual(created.status_code, status.HTTP_201_CREATED)

        listed = self.client.get(reverse("procedure-call", args=["getPolicies"]))
        self.assertEqual(listed.status_code, status.HTTP_200_OK)
        self.assertEqual([row["id"] for row in listed.json()], [created.json()["id"]])
        self.assertIsNone(listed.json()[0]["description"])

    def test_create_procedure_validates(self):
        response = self.client.post(
            reverse("procedure-call", args=["createRisk"]),
            data={"name": "Missing everything"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.json()["error"], "validation_error")
        self.assertFalse(Risk.objects.exists())

    def test_unknown_procedure_is_404(self):
        response = self.client.get(reverse("procedure-call", args=["deletePolicy"]))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.json()["error"], "not_found")

    def test_wrong_method_is_405(self):
        read = self.client.post(reverse("procedure-call", args=["getPolicies"]), data={}, format="json")
        write = self.client.get(reverse("procedure-call", args=["createPolicy"]))

        self.assertEqual(read.status_code, status.HTTP_405_METHOD_NOT_ALLOWED)
        self.assertEqual(write.status_code, status.HTTP_405_METHOD_NOT_ALLOWED)

    def test_persistence_error_envelope(self):
        with patch.object(PolicySerializer, "save", side_effect=IntegrityError("FOREIGN KEY constraint failed")):
            response = self.client.post(reverse("policy-list"), data=POLICY_PAYLOAD, format="json")

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(
            response.json(),
            {"error": "persistence_error", "detail": "FOREIGN KEY constraint failed"},
        )


class DevSettingsTests(TestCase):
    def test_dev_database_path_comes_from_environment(self):
        with tempfile.TemporaryDirectory() as tmp:
            db_path = Path(tmp) / "nested" / "ledger.sqlite3"
            with patch.dict(os.environ, {"DEV_DB_PATH": str(db_path)}):
                sys.modules.pop("config.settings.dev", None)
                dev = importlib.import_module("config.settings.dev")
            sys.modules.pop("config.settings.dev", None)

            self.assertEqual(dev.DATABASES["default"]["ENGINE"], "django.db.backends.sqlite3")
            self.assertEqual(dev.DATABASES["default"]["NAME"], str(db_path))
            self.assertTrue(db_path.parent.is_dir())


class SeedCommandTests(TestCase):
    models = (Policy, Control, Risk, Asset, Vulnerability, Incident, AuditFinding)

    def test_seed_creates_one_record_per_table(self):
        out = StringIO()
        call_command("seed_grc_records", stdout=out)

        for model in self.models:
            with self.subTest(model=model.__name__):
                self.assertEqual(model.objects.count(), 1)
        self.assertEqual(Risk.objects.get().control, Control.objects.get())
        self.assertIn("Seeded", out.getvalue())

    def test_seed_is_idempotent(self):
        call_command("seed_grc_records", stdout=StringIO())
        out = StringIO()
        call_command("seed_grc_records", stdout=out)

        for model in self.models:
            self.assertEqual(model.objects.count(), 1)
        self.assertIn("nothing to do", out.getvalue())
