from django.db import migrations, models
import django.db.models.deletion


SEVERITY_CHOICES = [("low", "Low"), ("medium", "Medium"), ("high", "High"), ("critical", "Critical")]


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Asset",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(editable=False)),
                ("updated_at", models.DateTimeField(editable=False)),
                ("name", models.TextField()),
                ("description", models.TextField(blank=True, null=True)),
                ("asset_type", models.TextField()),
                ("value", models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True)),
                ("owner", models.TextField()),
                ("location", models.TextField(blank=True, null=True)),
            ],
            options={
                "db_table": "assets",
                "ordering": ["id"],
                "abstract": False,
            },
        ),
        migrations.CreateModel(
            name="Vulnerability",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(editable=False)),
                ("updated_at", models.DateTimeField(editable=False)),
                ("name", models.TextField()),
                ("description", models.TextField(blank=True, null=True)),
                ("severity", models.CharField(choices=SEVERITY_CHOICES, max_length=32)),
                ("cve_id", models.TextField(blank=True, null=True)),
                ("discovered_date", models.DateField()),
                ("remediation_plan", models.TextField(blank=True, null=True)),
                ("status", models.TextField()),
                (
                    "asset",
                    models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.PROTECT, related_name="vulnerabilities", to="asset.asset"),
                ),
            ],
            options={
                "db_table": "vulnerabilities",
                "verbose_name_plural": "vulnerabilities",
                "ordering": ["id"],
                "abstract": False,
            },
        ),
        migrations.CreateModel(
            name="Incident",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(editable=False)),
                ("updated_at", models.DateTimeField(editable=False)),
                ("title", models.TextField()),
                ("description", models.TextField(blank=True, null=True)),
                ("severity", models.CharField(choices=SEVERITY_CHOICES, max_length=32)),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("open", "Open"),
                            ("investigating", "Investigating"),
                            ("resolved", "Resolved"),
                            ("closed", "Closed"),
                        ],
                        max_length=32,
                    ),
                ),
                ("discovered_date", models.DateTimeField()),
                ("resolved_date", models.DateTimeField(blank=True, null=True)),
                ("root_cause", models.TextField(blank=True, null=True)),
                ("remediation_actions", models.TextField(blank=True, null=True)),
                ("reporter", models.TextField()),
                ("assigned_to", models.TextField(blank=True, null=True)),
                (
                    "asset",
                    models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.PROTECT, related_name="incidents", to="asset.asset"),
                ),
            ],
            options={
                "db_table": "incidents",
                "ordering": ["id"],
                "abstract": False,
            },
        ),
    ]
