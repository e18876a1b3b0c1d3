"""
Order / shipment API — order list, order details, shipment list, stats
"""

from fastapi import APIRouter, Depends, HTTPException

from blueship.api.deps import get_order_service
from blueship.schemas.orders import (
    OrderDetail, OrderStats, OrderSummary, ShipmentResponse, ShipmentStats,
)
from blueship.services.orders import OrderQueryService

router = APIRouter(prefix="/api/orders", tags=["orders"])
shipments_router = APIRouter(prefix="/api/shipments", tags=["shipments"])


@router.get("", response_model=list[OrderSummary])
def list_orders(service: OrderQueryService = Depends(get_order_service)):
    """Order list (newest first)"""
    return service.list_orders()


@router.get("/stats", response_model=OrderStats)
def get_order_stats(service: OrderQueryService = Depends(get_order_service)):
    return service.get_order_stats()


@router.get("/{order_id}", response_model=OrderDetail)
def get_order(order_id: int, service: OrderQueryService = Depends(get_order_service)):
    """Order with customer, line items and shipments"""
    order = service.get_order_details(order_id)
    if order is None:
        raise HTTPException(status_code=404, detail="Order not found")
    return order


@shipments_router.get("", response_model=list[ShipmentResponse])
def list_shipments(service: OrderQueryService = Depends(get_order_service)):
    """Shipment list (newest first)"""
    return service.list_shipments()


@shipments_router.get("/stats", response_model=ShipmentStats)
def get_shipment_stats(service: OrderQueryService = Depends(get_order_service)):
    return service.get_shipment_stats()
