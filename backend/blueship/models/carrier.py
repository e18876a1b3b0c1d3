"""
carriers table — parcel carriers and their service levels
"""

from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, Numeric, DateTime

from blueship.database import Base


class Carrier(Base):
    __tablename__ = "carriers"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(50), nullable=False)  # "UPS", "FedEx", "DHL"
    service_level = Column(String(50), nullable=False)  # "Ground", "Express", ...
    estimated_days = Column(Integer, nullable=True)
    base_rate = Column(Numeric(12, 2), nullable=True)
    per_pound_rate = Column(Numeric(12, 2), nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))
    updated_at = Column(
        DateTime,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
