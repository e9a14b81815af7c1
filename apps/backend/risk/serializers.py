from rest_framework import serializers

from core.serializers import RecordSerializer
from governance.models import Control

from .models import Risk


class ScoreField(serializers.IntegerField):
    """Whole number on a 1-5 scale; numeric strings and booleans are refused."""

    def __init__(self, **kwargs):
        kwargs.setdefault("min_value", 1)
        kwargs.setdefault("max_value", 5)
        super().__init__(**kwargs)

    def to_internal_value(self, data):
        if isinstance(data, bool) or not isinstance(data, (int, float)):
            self.fail("invalid")
        return super().to_internal_value(data)


class RiskSerializer(RecordSerializer):
    control_id = serializers.PrimaryKeyRelatedField(source="control", queryset=Control.objects.all(), allow_null=True)
    likelihood = ScoreField()
    impact = ScoreField()

    class Meta:
        model = Risk
        fields = [
            "id",
            "name",
            "description",
            "risk_level",
            "likelihood",
            "impact",
            "control_id",
            "owner",
            "mitigation_strategy",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "created_at", "updated_at"]
