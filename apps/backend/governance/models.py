from django.db import models

from core.models import RecordModel


class Policy(RecordModel):
    title = models.TextField()
    description = models.TextField(null=True, blank=True)
    version = models.TextField()
    effective_date = models.DateField()
    review_date = models.DateField(null=True, blank=True)
    owner = models.TextField()

    class Meta(RecordModel.Meta):
        db_table = "policies"
        verbose_name_plural = "policies"

    def __str__(self) -> str:
        return f"{self.title} v{self.version}"


class Control(RecordModel):
    STATUS_DRAFT = "draft"
    STATUS_IMPLEMENTED = "implemented"
    STATUS_AUDITED = "audited"
    STATUS_COMPLIANT = "compliant"
    STATUS_NON_COMPLIANT = "non_compliant"
    STATUS_CHOICES = [
        (STATUS_DRAFT, "Draft"),
        (STATUS_IMPLEMENTED, "Implemented"),
        (STATUS_AUDITED, "Audited"),
        (STATUS_COMPLIANT, "Compliant"),
        (STATUS_NON_COMPLIANT, "Non-Compliant"),
    ]

    name = models.TextField()
    description = models.TextField(null=True, blank=True)
    control_type = models.TextField()
    status = models.CharField(max_length=32, choices=STATUS_CHOICES)
    policy = models.ForeignKey(Policy, on_delete=models.PROTECT, null=True, blank=True, related_name="controls")
    owner = models.TextField()
    implementation_date = models.DateField(null=True, blank=True)
    last_audit_date = models.DateField(null=True, blank=True)

    class Meta(RecordModel.Meta):
        db_table = "controls"

    def __str__(self) -> str:
        return self.name


class AuditFinding(RecordModel):
    STATUS_OPEN = "open"
    STATUS_IN_PROGRESS = "in_progress"
    STATUS_RESOLVED = "resolved"
    STATUS_CLOSED = "closed"
    STATUS_CHOICES = [
        (STATUS_OPEN, "Open"),
        (STATUS_IN_PROGRESS, "In Progress"),
        (STATUS_RESOLVED, "Resolved"),
        (STATUS_CLOSED, "Closed"),
    ]

    title = models.TextField()
    description = models.TextField(null=True, blank=True)
    status = models.CharField(max_length=32, choices=STATUS_CHOICES)
    control = models.ForeignKey(Control, on_delete=models.PROTECT, null=True, blank=True, related_name="audit_findings")
    policy = models.ForeignKey(Policy, on_delete=models.PROTECT, null=True, blank=True, related_name="audit_findings")
    # Free text, unlike the closed severity sets on incidents and vulnerabilities.
    severity = models.TextField()
    auditor = models.TextField()
    audit_date = models.DateField()
    due_date = models.DateField(null=True, blank=True)
    remediation_plan = models.TextField(null=True, blank=True)

    class Meta(RecordModel.Meta):
        db_table = "audit_findings"

    def __str__(self) -> str:
        return self.title
