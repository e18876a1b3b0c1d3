"""
Warehouse API — warehouse list/detail and the inventory table behind the detail view
"""

from fastapi import APIRouter, Depends, HTTPException, Query

from blueship.api.deps import get_inventory_service
from blueship.schemas.inventory import (
    InventoryFilters, InventoryStats, PaginatedInventory,
    WarehouseDetail, WarehousePage, WarehouseSummary,
)
from blueship.services.inventory_query import InventoryQueryService
from blueship.services.page_loader import load_warehouse_page

router = APIRouter(prefix="/api/warehouses", tags=["warehouses"])


def inventory_filters(
    search: str = Query("", description="SKU / product name / bin location substring"),
    status: str = Query("all", description="Inventory status (AVAILABLE, RESERVED, ...) or 'all'"),
    category: str = Query("all", description="Product category or 'all'"),
    page: int = Query(1, description="1-based page; values below 1 read as 1"),
    limit: int | None = Query(None, description="Page size (default 20, capped at 100)"),
) -> InventoryFilters:
    """Query-string filters. Out-of-range values are clamped by the service, not rejected."""
    return InventoryFilters(search=search, status=status, category=category, page=page, limit=limit)


@router.get("", response_model=list[WarehouseSummary])
def list_warehouses(service: InventoryQueryService = Depends(get_inventory_service)):
    """All warehouses, by name"""
    return service.list_warehouses()


@router.get("/{warehouse_id}", response_model=WarehouseDetail)
def get_warehouse(warehouse_id: int, service: InventoryQueryService = Depends(get_inventory_service)):
    """Warehouse metadata; 404 when the warehouse does not exist"""
    warehouse = service.get_warehouse(warehouse_id)
    if warehouse is None:
        raise HTTPException(status_code=404, detail="Warehouse not found")
    return warehouse


@router.get("/{warehouse_id}/inventory", response_model=PaginatedInventory)
def get_inventory(
    warehouse_id: int,
    filters: InventoryFilters = Depends(inventory_filters),
    service: InventoryQueryService = Depends(get_inventory_service),
):
    """One page of the warehouse's inventory. Never errors: unknown warehouse -> empty page."""
    return service.query_inventory(warehouse_id, filters)


@router.get("/{warehouse_id}/inventory/categories", response_model=list[str])
def get_categories(warehouse_id: int, service: InventoryQueryService = Depends(get_inventory_service)):
    """Categories for the filter dropdown"""
    return service.get_categories(warehouse_id)


@router.get("/{warehouse_id}/inventory/stats", response_model=InventoryStats)
def get_inventory_stats(warehouse_id: int, service: InventoryQueryService = Depends(get_inventory_service)):
    """Summary cards for the whole warehouse (ignores table filters)"""
    return service.get_inventory_stats(warehouse_id)


@router.get("/{warehouse_id}/page", response_model=WarehousePage)
async def get_warehouse_page(
    warehouse_id: int,
    filters: InventoryFilters = Depends(inventory_filters),
    service: InventoryQueryService = Depends(get_inventory_service),
):
    """Warehouse + inventory page + categories + stats, fetched in parallel"""
    page = await load_warehouse_page(service, warehouse_id, filters)
    if page.warehouse is None:
        raise HTTPException(status_code=404, detail="Warehouse not found")
    return page
