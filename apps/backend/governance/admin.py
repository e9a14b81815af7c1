from django.contrib import admin

from core.admin import RecordAdmin

from .models import AuditFinding, Control, Policy


@admin.register(Policy)
class PolicyAdmin(RecordAdmin):
    list_display = ("id", "title", "version", "effective_date", "review_date", "owner", "created_at")
    search_fields = ("title", "owner", "description")


@admin.register(Control)
class ControlAdmin(RecordAdmin):
    list_display = ("id", "name", "control_type", "status", "policy", "owner", "last_audit_date")
    list_filter = ("status", "control_type")
    search_fields = ("name", "owner", "description")


@admin.register(AuditFinding)
class AuditFindingAdmin(RecordAdmin):
    list_display = ("id", "title", "status", "severity", "control", "policy", "auditor", "audit_date", "due_date")
    list_filter = ("status", "severity")
    search_fields = ("title", "auditor", "description")
