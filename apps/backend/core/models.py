from django.db import models
from django.utils import timezone


class RecordModel(models.Model):
    """Base for every ledger table: generated id plus creation/update stamps.

    Records are write-once. On insert both stamps take the same wall-clock
    reading so a freshly created row reports ``created_at == updated_at``.
    """

    created_at = models.DateTimeField(editable=False)
    updated_at = models.DateTimeField(editable=False)

    class Meta:
        abstract = True
        ordering = ["id"]

    def save(self, *args, **kwargs):
        if self._state.adding:
            now = timezone.now()
            self.created_at = now
            self.updated_at = now
        super().save(*args, **kwargs)
