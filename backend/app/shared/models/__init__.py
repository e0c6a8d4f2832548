"""Shared database models."""

from app.shared.models.base import BaseModel, TimestampMixin

__all__ = [
    "BaseModel",
    "TimestampMixin",
]
