from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Policy",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(editable=False)),
                ("updated_at", models.DateTimeField(editable=False)),
                ("title", models.TextField()),
                ("description", models.TextField(blank=True, null=True)),
                ("version", models.TextField()),
                ("effective_date", models.DateField()),
                ("review_date", models.DateField(blank=True, null=True)),
                ("owner", models.TextField()),
            ],
            options={
                "db_table": "policies",
                "verbose_name_plural": "policies",
                "ordering": ["id"],
                "abstract": False,
            },
        ),
        migrations.CreateModel(
            name="Control",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(editable=False)),
                ("updated_at", models.DateTimeField(editable=False)),
                ("name", models.TextField()),
                ("description", models.TextField(blank=True, null=True)),
                ("control_type", models.TextField()),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("draft", "Draft"),
                            ("implemented", "Implemented"),
                            ("audited", "Audited"),
                            ("compliant", "Compliant"),
                            ("non_compliant", "Non-Compliant"),
                        ],
                        max_length=32,
                    ),
                ),
                ("owner", models.TextField()),
                ("implementation_date", models.DateField(blank=True, null=True)),
                ("last_audit_date", models.DateField(blank=True, null=True)),
                (
                    "policy",
                    models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.PROTECT, related_name="controls", to="governance.policy"),
                ),
            ],
            options={
                "db_table": "controls",
                "ordering": ["id"],
                "abstract": False,
            },
        ),
        migrations.CreateModel(
            name="AuditFinding",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(editable=False)),
                ("updated_at", models.DateTimeField(editable=False)),
                ("title", models.TextField()),
                ("description", models.TextField(blank=True, null=True)),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("open", "Open"),
                            ("in_progress", "In Progress"),
                            ("resolved", "Resolved"),
                            ("closed", "Closed"),
                        ],
                        max_length=32,
                    ),
                ),
                ("severity", models.TextField()),
                ("auditor", models.TextField()),
                ("audit_date", models.DateField()),
                ("due_date", models.DateField(blank=True, null=True)),
                ("remediation_plan", models.TextField(blank=True, null=True)),
                (
                    "control",
                    models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.PROTECT, related_name="audit_findings", to="governance.control"),
                ),
                (
                    "policy",
                    models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.PROTECT, related_name="audit_findings", to="governance.policy"),
                ),
            ],
            options={
                "db_table": "audit_findings",
                "ordering": ["id"],
                "abstract": False,
            },
        ),
    ]
