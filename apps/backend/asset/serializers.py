from rest_framework import serializers

from core.serializers import RecordSerializer

from .models import Asset, Incident, Vulnerability


class AssetSerializer(RecordSerializer):
    # Stored as DECIMAL(10,2); rendered as a JSON number so cents survive the round trip.
    value = serializers.DecimalField(max_digits=10, decimal_places=2, allow_null=True, coerce_to_string=False)

    class Meta:
        model = Asset
        fields = [
            "id",
            "name",
            "description",
            "asset_type",
            "value",
            "owner",
            "location",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "created_at", "updated_at"]


class VulnerabilitySerializer(RecordSerializer):
    asset_id = serializers.PrimaryKeyRelatedField(source="asset", queryset=Asset.objects.all(), allow_null=True)

    class Meta:
        model = Vulnerability
        fields = [
            "id",
            "name",
            "description",
            "severity",
            "asset_id",
            "cve_id",
            "discovered_date",
            "remediation_plan",
            "status",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "created_at", "updated_at"]


class IncidentSerializer(RecordSerializer):
    asset_id = serializers.PrimaryKeyRelatedField(source="asset", queryset=Asset.objects.all(), allow_null=True)

    class Meta:
        model = Incident
        fields = [
            "id",
            "title",
            "description",
            "severity",
            "status",
            "asset_id",
            "discovered_date",
            "resolved_date",
            "root_cause",
            "remediation_actions",
            "reporter",
            "assigned_to",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "created_at", "updated_at"]
