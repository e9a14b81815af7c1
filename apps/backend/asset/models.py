from django.db import models

from core.models import RecordModel


SEVERITY_LOW = "low"
SEVERITY_MEDIUM = "medium"
SEVERITY_HIGH = "high"
SEVERITY_CRITICAL = "critical"
SEVERITY_CHOICES = [
    (SEVERITY_LOW, "Low"),
    (SEVERITY_MEDIUM, "Medium"),
    (SEVERITY_HIGH, "High"),
    (SEVERITY_CRITICAL, "Critical"),
]


class Asset(RecordModel):
    name = models.TextField()
    description = models.TextField(null=True, blank=True)
    asset_type = models.TextField()
    value = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)
    owner = models.TextField()
    location = models.TextField(null=True, blank=True)

    class Meta(RecordModel.Meta):
        db_table = "assets"

    def __str__(self) -> str:
        return f"{self.name} ({self.asset_type})"


class Vulnerability(RecordModel):
    SEVERITY_CHOICES = SEVERITY_CHOICES

    name = models.TextField()
    description = models.TextField(null=True, blank=True)
    severity = models.CharField(max_length=32, choices=SEVERITY_CHOICES)
    asset = models.ForeignKey(Asset, on_delete=models.PROTECT, null=True, blank=True, related_name="vulnerabilities")
    cve_id = models.TextField(null=True, blank=True)
    discovered_date = models.DateField()
    remediation_plan = models.TextField(null=True, blank=True)
    # Free-form workflow label; only severity is a closed set.
    status = models.TextField()

    class Meta(RecordModel.Meta):
        db_table = "vulnerabilities"
        verbose_name_plural = "vulnerabilities"

    def __str__(self) -> str:
        return self.cve_id or self.name


class Incident(RecordModel):
    SEVERITY_CHOICES = SEVERITY_CHOICES

    STATUS_OPEN = "open"
    STATUS_INVESTIGATING = "investigating"
    STATUS_RESOLVED = "resolved"
    STATUS_CLOSED = "closed"
    STATUS_CHOICES = [
        (STATUS_OPEN, "Open"),
        (STATUS_INVESTIGATING, "Investigating"),
        (STATUS_RESOLVED, "Resolved"),
        (STATUS_CLOSED, "Closed"),
    ]

    title = models.TextField()
    description = models.TextField(null=True, blank=True)
    severity = models.CharField(max_length=32, choices=SEVERITY_CHOICES)
    status = models.CharField(max_length=32, choices=STATUS_CHOICES)
    asset = models.ForeignKey(Asset, on_delete=models.PROTECT, null=True, blank=True, related_name="incidents")
    discovered_date = models.DateTimeField()
    resolved_date = models.DateTimeField(null=True, blank=True)
    root_cause = models.TextField(null=True, blank=True)
    remediation_actions = models.TextField(null=True, blank=True)
    reporter = models.TextField()
    assigned_to = models.TextField(null=True, blank=True)

    class Meta(RecordModel.Meta):
        db_table = "incidents"

    def __str__(self) -> str:
        return self.title
