"""
customers table — ship-to / bill-to parties
"""

from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, DateTime, JSON
from sqlalchemy.orm import validates

from blueship.database import Base
from blueship.schemas.records import Address, to_json_record


class Customer(Base):
    __tablename__ = "customers"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)  # e.g. "TechCorp Solutions"
    email = Column(String(200), nullable=True)
    phone = Column(String(30), nullable=True)
    shipping_address = Column(JSON, nullable=True)  # Address record
    billing_address = Column(JSON, nullable=True)  # Address record
    preferred_carrier = Column(String(50), nullable=True)  # carrier name, e.g. "UPS"
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))
    updated_at = Column(
        DateTime,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    @validates("shipping_address", "billing_address")
    def _validate_address(self, key, value):
        return to_json_record(Address, value)
