from rest_framework import serializers


class RecordSerializer(serializers.ModelSerializer):
    """ModelSerializer for write-once ledger rows.

    Nullable columns must still appear in the input: a caller states ``null``
    explicitly instead of leaving the key out. Text is stored exactly as sent,
    so only a missing or empty string counts as blank.
    """

    def get_fields(self):
        fields = super().get_fields()
        for field in fields.values():
            if field.read_only:
                continue
            if field.allow_null:
                field.required = True
            if isinstance(field, serializers.CharField):
                field.trim_whitespace = False
        return fields
