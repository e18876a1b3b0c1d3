"""
Dashboard API — top-level counters
"""

from fastapi import APIRouter, Depends

from blueship.api.deps import get_order_service
from blueship.schemas.orders import DashboardStats
from blueship.services.orders import OrderQueryService

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


@router.get("/stats", response_model=DashboardStats)
def get_dashboard_stats(service: OrderQueryService = Depends(get_order_service)):
    """Shipments, active warehouses, units on hand, pending deliveries, orders, customers, products"""
    return service.get_dashboard_stats()
