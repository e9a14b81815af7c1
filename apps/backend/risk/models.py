from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

from core.models import RecordModel
from governance.models import Control


class Risk(RecordModel):
    LEVEL_LOW = "low"
    LEVEL_MEDIUM = "medium"
    LEVEL_HIGH = "high"
    LEVEL_CRITICAL = "critical"
    LEVEL_CHOICES = [
        (LEVEL_LOW, "Low"),
        (LEVEL_MEDIUM, "Medium"),
        (LEVEL_HIGH, "High"),
        (LEVEL_CRITICAL, "Critical"),
    ]

    name = models.TextField()
    description = models.TextField(null=True, blank=True)
    risk_level = models.CharField(max_length=32, choices=LEVEL_CHOICES)
    likelihood = models.PositiveSmallIntegerField(validators=[MinValueValidator(1), MaxValueValidator(5)])
    impact = models.PositiveSmallIntegerField(validators=[MinValueValidator(1), MaxValueValidator(5)])
    control = models.ForeignKey(Control, on_delete=models.PROTECT, null=True, blank=True, related_name="risks")
    owner = models.TextField()
    mitigation_strategy = models.TextField(null=True, blank=True)

    class Meta(RecordModel.Meta):
        db_table = "risks"

    def __str__(self) -> str:
        return self.name

    @property
    def risk_score(self) -> int:
        # Display only; risk_level is set independently and never reconciled.
        return self.likelihood * self.impact
