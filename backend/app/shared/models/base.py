"""
Base model classes and mixins for all database models.
"""

from sqlalchemy import Column, BigInteger, String
from sqlalchemy.orm import declared_attr

from app.core.database import Base


class TimestampMixin:
    """Mixin that adds a creation timestamp in epoch nanoseconds.

    Set once by the service layer from its clock; never recomputed.
    """

    created_at = Column(BigInteger, nullable=False, index=True)


class BaseModel(Base, TimestampMixin):
    """Base model with common fields for all entities."""

    __abstract__ = True

    # UUID4 text minted by app.core.identifiers.new_id
    id = Column(String(36), primary_key=True)

    @declared_attr
    def __tablename__(cls) -> str:
        """Auto-generate table name from class name."""
        # Convert CamelCase to snake_case
        name = cls.__name__
        return ''.join(['_' + c.lower() if c.isupper() else c for c in name]).lstrip('_')
