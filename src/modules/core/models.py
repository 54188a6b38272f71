"""Base abstract model shared by the catalog entities.

Provides ``BaseModel``: UUIDv7 primary key + ``created_at`` timestamp.

UUIDv7 keys are time ordered, so ordering by ``created_at`` then ``id``
reproduces insertion order even when two rows share a timestamp.
"""

from __future__ import annotations

import uuid6
from django.db import models


class BaseModel(models.Model):
    """Abstract base with UUIDv7 PK and creation timestamp."""

    id = models.UUIDField(
        primary_key=True,
        default=uuid6.uuid7,
        editable=False,
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        abstract = True
