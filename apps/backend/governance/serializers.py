from rest_framework import serializers

from core.serializers import RecordSerializer

from .models import AuditFinding, Control, Policy


class PolicySerializer(RecordSerializer):
    class Meta:
        model = Policy
        fields = [
            "id",
            "title",
            "description",
            "version",
            "effective_date",
            "review_date",
            "owner",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "created_at", "updated_at"]


class ControlSerializer(RecordSerializer):
    policy_id = serializers.PrimaryKeyRelatedField(source="policy", queryset=Policy.objects.all(), allow_null=True)

    class Meta:
        model = Control
        fields = [
            "id",
            "name",
            "description",
            "control_type",
            "status",
            "policy_id",
            "owner",
            "implementation_date",
            "last_audit_date",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "created_at", "updated_at"]


class AuditFindingSerializer(RecordSerializer):
    control_id = serializers.PrimaryKeyRelatedField(source="control", queryset=Control.objects.all(), allow_null=True)
    policy_id = serializers.PrimaryKeyRelatedField(source="policy", queryset=Policy.objects.all(), allow_null=True)

    class Meta:
        model = AuditFinding
        fields = [
            "id",
            "title",
            "description",
            "status",
            "control_id",
            "policy_id",
            "severity",
            "auditor",
            "audit_date",
            "due_date",
            "remediation_plan",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "created_at", "updated_at"]
