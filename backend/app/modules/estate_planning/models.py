"""
Estate planning module database models.

A Will binds one User (the testator) to one Executor and owns ordered lists
of Assets and Beneficiaries. Assets and Beneficiaries are also top-level
records; the Will's lists are relationships over those same rows, so the
two views cannot drift apart.
"""

from sqlalchemy import Column, Integer, Numeric, String, Boolean, ForeignKey, Index
from sqlalchemy.orm import relationship
from sqlalchemy.types import TypeDecorator

from app.shared.models.base import BaseModel


class Amount(TypeDecorator):
    """
    Unsigned 64-bit integer amount (0 .. 2**64 - 1), read back as int.

    NUMERIC(20, 0) where the database has exact decimals. SQLite stores it
    as decimal text, since its NUMERIC affinity turns integers above
    2**63 - 1 into floats.
    """

    impl = Numeric(20, 0)
    cache_ok = True

    def load_dialect_impl(self, dialect):
        if dialect.name == "sqlite":
            return dialect.type_descriptor(String(20))
        return dialect.type_descriptor(Numeric(20, 0))

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        return str(value) if dialect.name == "sqlite" else value

    def process_result_value(self, value, dialect):
        return None if value is None else int(value)


class User(BaseModel):
    """Testator who owns wills."""

    __tablename__ = "users"

    name = Column(String(200), nullable=False)
    email = Column(String(320), nullable=False)

    # Relationships
    wills = relationship("Will", back_populates="user", order_by="Will.created_at")


class Executor(BaseModel):
    """Person appointed to administer a will."""

    __tablename__ = "executors"

    name = Column(String(200), nullable=False)
    contact = Column(String(320), nullable=False)


class Will(BaseModel):
    """A user's will. Only ``executor_id`` and the child lists change after creation."""

    __tablename__ = "wills"

    user_id = Column(String(36), ForeignKey("users.id"), nullable=False)
    executor_id = Column(String(36), ForeignKey("executors.id"), nullable=False)

    # No operation sets this; kept for record fidelity
    is_executed = Column(Boolean, nullable=False, default=False)

    # Relationships
    user = relationship("User", back_populates="wills")
    executor = relationship("Executor")
    assets = relationship("Asset", back_populates="will", order_by="Asset.position")
    beneficiaries = relationship("Beneficiary", back_populates="will", order_by="Beneficiary.position")

    __table_args__ = (
        Index('idx_will_user', 'user_id'),
    )


class Asset(BaseModel):
    """An asset attached to exactly one will."""

    __tablename__ = "assets"

    will_id = Column(String(36), ForeignKey("wills.id"), nullable=False)
    name = Column(String(200), nullable=False)
    value = Column(Amount, nullable=False)

    # 0-based index within the will's asset list
    position = Column(Integer, nullable=False)

    # Relationships
    will = relationship("Will", back_populates="assets")

    __table_args__ = (
        Index('idx_asset_will', 'will_id', 'position'),
    )


class Beneficiary(BaseModel):
    """A beneficiary named in exactly one will. ``share`` is an unvalidated weight."""

    __tablename__ = "beneficiaries"

    will_id = Column(String(36), ForeignKey("wills.id"), nullable=False)
    name = Column(String(200), nullable=False)
    share = Column(Amount, nullable=False)

    # 0-based index within the will's beneficiary list
    position = Column(Integer, nullable=False)

    # Relationships
    will = relationship("Will", back_populates="beneficiaries")

    __table_args__ = (
        Index('idx_beneficiary_will', 'will_id', 'position'),
    )
