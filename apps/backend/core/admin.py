from django.contrib import admin


class RecordAdmin(admin.ModelAdmin):
    """Browse-only admin: ledger rows are created through the API and never edited."""

    ordering = ("-id",)

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
