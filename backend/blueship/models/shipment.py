"""
shipments table — outbound parcels for an order
"""

import enum
from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, Float, Numeric, Enum, DateTime, ForeignKey, JSON
from sqlalchemy.orm import relationship, validates

from blueship.database import Base
from blueship.schemas.records import Dimensions, to_json_record


class ShipmentStatus(str, enum.Enum):
    CREATED = "CREATED"
    PICKED = "PICKED"
    PACKED = "PACKED"
    SHIPPED = "SHIPPED"
    IN_TRANSIT = "IN_TRANSIT"
    DELIVERED = "DELIVERED"
    RETURNED = "RETURNED"
    CANCELLED = "CANCELLED"


# Shipments in these states are no longer "pending delivery"
CLOSED_SHIPMENT_STATUSES = (
    ShipmentStatus.DELIVERED,
    ShipmentStatus.RETURNED,
    ShipmentStatus.CANCELLED,
)


class Shipment(Base):
    __tablename__ = "shipments"

    id = Column(Integer, primary_key=True, autoincrement=True)
    order_id = Column(Integer, ForeignKey("orders.id"), nullable=False)
    warehouse_id = Column(Integer, ForeignKey("warehouses.id"), nullable=False)
    carrier_id = Column(Integer, ForeignKey("carriers.id"), nullable=False)
    tracking_number = Column(String(40), unique=True, nullable=False)  # "1Z4829104758"
    status = Column(Enum(ShipmentStatus), default=ShipmentStatus.CREATED, nullable=False)
    weight = Column(Float, nullable=True)  # lbs
    dimensions = Column(JSON, nullable=True)  # Dimensions record
    shipping_cost = Column(Numeric(12, 2), nullable=True)
    label_url = Column(String(500), nullable=True)
    estimated_delivery_date = Column(DateTime, nullable=True)
    actual_delivery_date = Column(DateTime, nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))
    updated_at = Column(
        DateTime,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    order = relationship("Order", back_populates="shipments")
    warehouse = relationship("Warehouse", lazy="joined")
    carrier = relationship("Carrier", lazy="joined")

    @validates("dimensions")
    def _validate_dimensions(self, key, value):
        return to_json_record(Dimensions, value)
