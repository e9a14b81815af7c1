from django.contrib import admin

from core.admin import RecordAdmin

from .models import Asset, Incident, Vulnerability


@admin.register(Asset)
class AssetAdmin(RecordAdmin):
    list_display = ("id", "name", "asset_type", "value", "owner", "location")
    search_fields = ("name", "owner", "location")
    list_filter = ("asset_type",)


@admin.register(Vulnerability)
class VulnerabilityAdmin(RecordAdmin):
    list_display = ("id", "name", "cve_id", "severity", "status", "asset", "discovered_date")
    list_filter = ("severity", "status")
    search_fields = ("name", "cve_id", "description")


@admin.register(Incident)
class IncidentAdmin(RecordAdmin):
    list_display = ("id", "title", "severity", "status", "asset", "reporter", "assigned_to", "discovered_date", "resolved_date")
    list_filter = ("severity", "status")
    search_fields = ("title", "reporter", "assigned_to", "root_cause")
