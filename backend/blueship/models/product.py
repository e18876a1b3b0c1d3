"""
products table — catalogue entries (one row per SKU)
"""

from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, Float, Numeric, Text, DateTime, JSON
from sqlalchemy.orm import validates

from blueship.database import Base
from blueship.schemas.records import Dimensions, to_json_record


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=True)
    sku = Column(String(50), unique=True, nullable=False)  # e.g. "ELC-IPHONE15-128"
    name = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    category = Column(String(50), nullable=True)  # "Electronics", "Apparel", ...
    weight = Column(Float, nullable=True)  # kg
    dimensions = Column(JSON, nullable=True)  # Dimensions record
    unit_price = Column(Numeric(12, 2), nullable=False)
    image_url = Column(String(500), nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))
    updated_at = Column(
        DateTime,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    @validates("dimensions")
    def _validate_dimensions(self, key, value):
        return to_json_record(Dimensions, value)
