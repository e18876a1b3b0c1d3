"""
inventory table — stock of one product in one warehouse
"""

import enum
from datetime import datetime, timezone

from sqlalchemy import (
    Column, Integer, String, Enum, DateTime, ForeignKey, UniqueConstraint, CheckConstraint,
)
from sqlalchemy.orm import relationship

from blueship.database import Base


class InventoryStatus(str, enum.Enum):
    AVAILABLE = "AVAILABLE"
    RESERVED = "RESERVED"
    DAMAGED = "DAMAGED"
    QUARANTINE = "QUARANTINE"
    EXPIRED = "EXPIRED"


class Inventory(Base):
    __tablename__ = "inventory"

    id = Column(Integer, primary_key=True, autoincrement=True)
    warehouse_id = Column(Integer, ForeignKey("warehouses.id"), nullable=False, index=True)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False)
    quantity = Column(Integer, nullable=False, default=0)
    bin_location = Column(String(20), nullable=False)  # zone + row + shelf, e.g. "B42"
    status = Column(Enum(InventoryStatus), default=InventoryStatus.AVAILABLE, nullable=False)
    last_counted_at = Column(DateTime, nullable=True)  # last physical recount
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))
    updated_at = Column(
        DateTime,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    product = relationship("Product", lazy="joined")
    warehouse = relationship("Warehouse")

    __table_args__ = (
        UniqueConstraint("warehouse_id", "product_id", name="uq_warehouse_product"),
        CheckConstraint("quantity >= 0", name="ck_inventory_quantity_non_negative"),
    )
