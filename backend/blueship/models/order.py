"""
orders table — customer orders with embedded line items
"""

import enum
from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, Numeric, Enum, DateTime, ForeignKey, JSON
from sqlalchemy.orm import relationship, validates

from blueship.database import Base
from blueship.schemas.records import OrderLineItem, to_json_record


class OrderStatus(str, enum.Enum):
    PENDING = "PENDING"
    PROCESSING = "PROCESSING"
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"


class Order(Base):
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, autoincrement=True)
    order_number = Column(String(30), unique=True, nullable=False)  # "ORD-202412-123456"
    customer_id = Column(Integer, ForeignKey("customers.id"), nullable=False)
    status = Column(Enum(OrderStatus), default=OrderStatus.PENDING, nullable=False)
    items = Column(JSON, nullable=False, default=list)  # list of OrderLineItem records
    total_amount = Column(Numeric(12, 2), nullable=False, default=0)
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))
    updated_at = Column(
        DateTime,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    customer = relationship("Customer", lazy="joined")
    shipments = relationship(
        "Shipment", back_populates="order", order_by="desc(Shipment.created_at)",
    )

    @validates("items")
    def _validate_items(self, key, value):
        return [to_json_record(OrderLineItem, item) for item in (value or [])]
