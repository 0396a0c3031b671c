"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

from django.db import models


class StoredItem(models.Model):
    """One key of durable client storage, holding a serialized snapshot."""

    scope = models.CharField(max_length=100)
    key = models.CharField(max_length=100)
    value = models.TextField()
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["scope", "key"]
        constraints = [
            models.UniqueConstraint(fields=["scope", "key"], name="unique_scope_key"),
        ]

    def __str__(self) -> str:
        return f"{self.scope}:{self.key}"
