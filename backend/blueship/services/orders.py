"""
Order / shipment queries for the orders panel and dashboard cards.
Same policy as the inventory service: no exception leaves a public method,
failures are logged and come back as empty/zero results.
"""

import logging
from decimal import Decimal

from sqlalchemy import func
from sqlalchemy.orm import Session, selectinload, sessionmaker

from blueship.models import (
    Order, Customer, Shipment, Warehouse, Product, Inventory,
)
from blueship.models.shipment import CLOSED_SHIPMENT_STATUSES
from blueship.models.warehouse import WarehouseStatus
from blueship.schemas.orders import (
    CarrierRef, CustomerRef, DashboardStats, OrderDetail, OrderRef, OrderStats,
    OrderSummary, ShipmentResponse, ShipmentStats, WarehouseRef,
)
from blueship.schemas.records import OrderLineItem
from blueship.services.utils import enum_val, to_decimal

logger = logging.getLogger(__name__)


def _group_counts(db: Session, status_col, id_col) -> dict[str, int]:
    rows = db.query(status_col, func.count(id_col)).group_by(status_col).all()
    return {enum_val(status): count for status, count in rows}


def _shipment_response(shipment: Shipment, include_order: bool = False) -> ShipmentResponse:
    order_ref = None
    if include_order and shipment.order is not None:
        order = shipment.order
        order_ref = OrderRef(
            id=order.id,
            order_number=order.order_number,
            customer_name=order.customer.name if order.customer else None,
        )

    return ShipmentResponse(
        id=shipment.id,
        tracking_number=shipment.tracking_number,
        status=enum_val(shipment.status),
        weight=shipment.weight,
        dimensions=shipment.dimensions,
        shipping_cost=shipment.shipping_cost,
        label_url=shipment.label_url,
        estimated_delivery_date=shipment.estimated_delivery_date,
        actual_delivery_date=shipment.actual_delivery_date,
        created_at=shipment.created_at,
        carrier=CarrierRef(
            id=shipment.carrier.id,
            name=shipment.carrier.name,
            service_level=shipment.carrier.service_level,
        ),
        warehouse=WarehouseRef(
            id=shipment.warehouse.id,
            name=shipment.warehouse.name,
            city=shipment.warehouse.city,
            state=shipment.warehouse.state,
        ),
        order=order_ref,
    )


class OrderQueryService:
    """Read-only order/shipment queries."""

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    def list_orders(self) -> list[OrderSummary]:
        """Order list, newest first."""
        try:
            with self._session_factory() as db:
                orders = (
                    db.query(Order)
                    .options(selectinload(Order.shipments))
                    .order_by(Order.created_at.desc(), Order.id.desc())
                    .all()
                )
                return [
                    OrderSummary(
                        id=o.id,
                        order_number=o.order_number,
                        status=enum_val(o.status),
                        total_amount=to_decimal(o.total_amount),
                        created_at=o.created_at,
                        customer_name=o.customer.name,
                        customer_email=o.customer.email,
                        shipment_count=len(o.shipments),
                        items_count=len(o.items or []),
                    )
                    for o in orders
                ]
        except Exception:
            logger.exception("Failed to list orders")
            return []

    def get_order_details(self, order_id: int) -> OrderDetail | None:
        try:
            with self._session_factory() as db:
                order = (
                    db.query(Order)
                    .options(selectinload(Order.shipments))
                    .filter(Order.id == order_id)
                    .first()
                )
                if order is None:
                    return None
                return OrderDetail(
                    id=order.id,
                    order_number=order.order_number,
                    status=enum_val(order.status),
                    total_amount=to_decimal(order.total_amount),
                    created_at=order.created_at,
                    updated_at=order.updated_at,
                    items=[OrderLineItem.model_validate(i) for i in order.items or []],
                    customer=CustomerRef(
                        id=order.customer.id,
                        name=order.customer.name,
                        email=order.customer.email,
                        phone=order.customer.phone,
                    ),
                    shipments=[_shipment_response(s) for s in order.shipments],
                )
        except Exception:
            logger.exception(f"Failed to fetch order {order_id}")
            return None

    def list_shipments(self) -> list[ShipmentResponse]:
        """Shipment list with carrier, warehouse and order reference, newest first."""
        try:
            with self._session_factory() as db:
                shipments = (
                    db.query(Shipment)
                    .options(selectinload(Shipment.order))
                    .order_by(Shipment.created_at.desc(), Shipment.id.desc())
                    .all()
                )
                return [_shipment_response(s, include_order=True) for s in shipments]
        except Exception:
            logger.exception("Failed to list shipments")
            return []

    def get_order_stats(self) -> OrderStats:
        try:
            with self._session_factory() as db:
                by_status = _group_counts(db, Order.status, Order.id)
                amounts = db.query(Order.total_amount).all()
        except Exception:
            logger.exception("Failed to compute order stats")
            return OrderStats()

        revenue = sum((to_decimal(a) for (a,) in amounts), Decimal("0"))
        return OrderStats(
            total_orders=sum(by_status.values()),
            by_status=by_status,
            total_revenue=revenue,
        )

    def get_shipment_stats(self) -> ShipmentStats:
        try:
            with self._session_factory() as db:
                by_status = _group_counts(db, Shipment.status, Shipment.id)
                costs = db.query(Shipment.shipping_cost).all()
        except Exception:
            logger.exception("Failed to compute shipment stats")
            return ShipmentStats()

        total_cost = sum((to_decimal(c) for (c,) in costs), Decimal("0"))
        return ShipmentStats(
            total_shipments=sum(by_status.values()),
            by_status=by_status,
            total_shipping_cost=total_cost,
        )

    def get_dashboard_stats(self) -> DashboardStats:
        """Top-of-dashboard counters."""
        try:
            with self._session_factory() as db:
                return DashboardStats(
                    total_shipments=db.query(func.count(Shipment.id)).scalar() or 0,
                    active_warehouses=(
                        db.query(func.count(Warehouse.id))
                        .filter(Warehouse.status == WarehouseStatus.ACTIVE)
                        .scalar() or 0
                    ),
                    total_inventory=db.query(func.sum(Inventory.quantity)).scalar() or 0,
                    pending_deliveries=(
                        db.query(func.count(Shipment.id))
                        .filter(Shipment.status.notin_(CLOSED_SHIPMENT_STATUSES))
                        .scalar() or 0
                    ),
                    total_orders=db.query(func.count(Order.id)).scalar() or 0,
                    total_customers=db.query(func.count(Customer.id)).scalar() or 0,
                    total_products=db.query(func.count(Product.id)).scalar() or 0,
                )
        except Exception:
            logger.exception("Failed to compute dashboard stats")
            return DashboardStats()
