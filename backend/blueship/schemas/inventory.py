"""
Warehouse / product / inventory Pydantic schemas
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel

from blueship.schemas.common import CamelModel
from blueship.schemas.records import Dimensions


class InventoryFilters(BaseModel):
    """Inventory table filters. "all" (or empty) means no status/category filter."""

    search: str = ""
    status: str = "all"
    category: str = "all"
    page: int = 1
    limit: int | None = None  # None -> settings.DEFAULT_PAGE_SIZE


class WarehouseSummary(CamelModel):
    id: int
    name: str
    city: str
    state: str
    total_space: float
    used_space: float
    utilization_pct: float
    status: str


class WarehouseDetail(WarehouseSummary):
    address: str
    zip_code: str
    country: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ProductDetail(CamelModel):
    id: int
    sku: str
    name: str
    description: str | None = None
    category: str | None = None
    weight: float | None = None
    dimensions: Dimensions | None = None
    unit_price: Decimal
    image_url: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class InventoryItem(CamelModel):
    id: int
    quantity: int
    bin_location: str
    status: str
    last_counted_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    is_low_stock: bool
    stock_level: str  # "critical" (<10), "low" (<50), "ok"
    product: ProductDetail


class PaginatedInventory(CamelModel):
    items: list[InventoryItem] = []
    total_count: int = 0
    total_pages: int = 0
    current_page: int = 1
    has_next_page: bool = False
    has_previous_page: bool = False


class InventoryStats(CamelModel):
    total_items: int = 0
    total_units: int = 0
    low_stock_items: int = 0
    status_counts: dict[str, int] = {}
    total_value: Decimal = Decimal("0.00")


class WarehousePage(CamelModel):
    """Everything the warehouse detail view needs, fetched in one round trip."""

    warehouse: WarehouseDetail | None = None
    inventory: PaginatedInventory
    categories: list[str] = []
    stats: InventoryStats
