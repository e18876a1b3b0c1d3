"""
Order / shipment Pydantic schemas
"""

from datetime import datetime
from decimal import Decimal

from blueship.schemas.common import CamelModel
from blueship.schemas.records import Dimensions, OrderLineItem


class CustomerRef(CamelModel):
    id: int
    name: str
    email: str | None = None
    phone: str | None = None


class CarrierRef(CamelModel):
    id: int
    name: str
    service_level: str


class WarehouseRef(CamelModel):
    id: int
    name: str
    city: str
    state: str


class OrderRef(CamelModel):
    id: int
    order_number: str
    customer_name: str | None = None


class ShipmentResponse(CamelModel):
    id: int
    tracking_number: str
    status: str
    weight: float | None = None
    dimensions: Dimensions | None = None
    shipping_cost: Decimal | None = None
    label_url: str | None = None
    estimated_delivery_date: datetime | None = None
    actual_delivery_date: datetime | None = None
    created_at: datetime | None = None
    carrier: CarrierRef
    warehouse: WarehouseRef
    order: OrderRef | None = None


class OrderSummary(CamelModel):
    id: int
    order_number: str
    status: str
    total_amount: Decimal
    created_at: datetime | None = None
    customer_name: str
    customer_email: str | None = None
    shipment_count: int
    items_count: int


class OrderDetail(CamelModel):
    id: int
    order_number: str
    status: str
    total_amount: Decimal
    created_at: datetime | None = None
    updated_at: datetime | None = None
    items: list[OrderLineItem] = []
    customer: CustomerRef
    shipments: list[ShipmentResponse] = []


class OrderStats(CamelModel):
    total_orders: int = 0
    by_status: dict[str, int] = {}
    total_revenue: Decimal = Decimal("0.00")


class ShipmentStats(CamelModel):
    total_shipments: int = 0
    by_status: dict[str, int] = {}
    total_shipping_cost: Decimal = Decimal("0.00")


class DashboardStats(CamelModel):
    total_shipments: int = 0
    active_warehouses: int = 0
    total_inventory: int = 0  # units across every warehouse
    pending_deliveries: int = 0
    total_orders: int = 0
    total_customers: int = 0
    total_products: int = 0
