from django.contrib import admin

from core.admin import RecordAdmin

from .models import Risk


@admin.register(Risk)
class RiskAdmin(RecordAdmin):
    list_display = (
        "id",
        "name",
        "risk_level",
        "likelihood",
        "impact",
        "risk_score",
        "control",
        "owner",
        "created_at",
    )
    list_filter = ("risk_level", "likelihood", "impact")
    search_fields = ("name", "description", "owner")
