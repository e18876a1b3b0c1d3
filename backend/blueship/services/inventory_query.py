"""
Inventory Query Service — paginated, filtered inventory reads plus summary statistics.

- Built with an explicit session factory; every call opens and closes its own session,
  so calls are independent and safe to run in parallel threads.
- Public methods never raise: storage failures are logged and turned into
  empty/zero results. Use warehouse_exists() to tell "unknown warehouse" from "empty".
- Stats always cover the whole warehouse, never the filtered view.
"""

import logging
import math
from decimal import Decimal

from sqlalchemy import false, or_
from sqlalchemy.orm import Session, contains_eager, sessionmaker

from blueship.config import Settings, settings as default_settings
from blueship.models import Inventory, Product, Warehouse
from blueship.models.inventory import InventoryStatus
from blueship.services.utils import enum_val, to_decimal
from blueship.schemas.inventory import (
    InventoryFilters, InventoryItem, InventoryStats, PaginatedInventory,
    ProductDetail, WarehouseDetail, WarehouseSummary,
)

logger = logging.getLogger(__name__)

# Sentinel for "no filter" on status/category
ALL = "all"

CENTS = Decimal("0.01")


def product_detail(product: Product) -> ProductDetail:
    return ProductDetail(
        id=product.id,
        sku=product.sku,
        name=product.name,
        description=product.description,
        category=product.category,
        weight=product.weight,
        dimensions=product.dimensions,
        unit_price=to_decimal(product.unit_price),
        image_url=product.image_url,
        created_at=product.created_at,
        updated_at=product.updated_at,
    )


def warehouse_detail(warehouse: Warehouse) -> WarehouseDetail:
    return WarehouseDetail(
        id=warehouse.id,
        name=warehouse.name,
        address=warehouse.address,
        city=warehouse.city,
        state=warehouse.state,
        zip_code=warehouse.zip_code,
        country=warehouse.country,
        total_space=warehouse.total_space,
        used_space=warehouse.used_space,
        utilization_pct=warehouse.utilization_pct,
        status=enum_val(warehouse.status),
        created_at=warehouse.created_at,
        updated_at=warehouse.updated_at,
    )


class InventoryQueryService:
    """Read-only inventory queries for the warehouse detail view."""

    def __init__(self, session_factory: sessionmaker, config: Settings | None = None):
        self._session_factory = session_factory
        self._config = config or default_settings

    # ── derived values ──

    def stock_level(self, quantity: int) -> str:
        """Dashboard colour band: critical (red), low (yellow), ok (green)."""
        if quantity < self._config.CRITICAL_STOCK_THRESHOLD:
            return "critical"
        if quantity < self._config.LOW_STOCK_THRESHOLD:
            return "low"
        return "ok"

    def is_low_stock(self, quantity: int) -> bool:
        return quantity < self._config.LOW_STOCK_THRESHOLD

    def normalize_filters(self, filters: InventoryFilters | None) -> InventoryFilters:
        """Clamp page/limit and tidy the text filters; out-of-range input is never rejected."""
        filters = filters or InventoryFilters()
        page = filters.page if filters.page and filters.page >= 1 else 1

        limit = filters.limit
        if limit is None or limit < 1:
            limit = self._config.DEFAULT_PAGE_SIZE
        limit = min(limit, self._config.MAX_PAGE_SIZE)

        return InventoryFilters(
            search=(filters.search or "").strip(),
            status=(filters.status or ALL).strip() or ALL,
            category=(filters.category or ALL).strip() or ALL,
            page=page,
            limit=limit,
        )

    # ── warehouses / products ──

    def list_warehouses(self) -> list[WarehouseSummary]:
        """All warehouses by name."""
        try:
            with self._session_factory() as db:
                rows = db.query(Warehouse).order_by(Warehouse.name.asc()).all()
                return [
                    WarehouseSummary(
                        id=w.id,
                        name=w.name,
                        city=w.city,
                        state=w.state,
                        total_space=w.total_space,
                        used_space=w.used_space,
                        utilization_pct=w.utilization_pct,
                        status=enum_val(w.status),
                    )
                    for w in rows
                ]
        except Exception:
            logger.exception("Failed to list warehouses")
            return []

    def get_warehouse(self, warehouse_id: int | None) -> WarehouseDetail | None:
        if warehouse_id is None:
            return None
        try:
            with self._session_factory() as db:
                warehouse = db.get(Warehouse, warehouse_id)
                return warehouse_detail(warehouse) if warehouse else None
        except Exception:
            logger.exception(f"Failed to fetch warehouse {warehouse_id}")
            return None

    def warehouse_exists(self, warehouse_id: int | None) -> bool:
        return self.get_warehouse(warehouse_id) is not None

    def get_product_by_sku(self, sku: str) -> ProductDetail | None:
        try:
            with self._session_factory() as db:
                product = db.query(Product).filter(Product.sku == sku).first()
                return product_detail(product) if product else None
        except Exception:
            logger.exception(f"Failed to fetch product {sku}")
            return None

    # ── inventory ──

    def _filtered_query(self, db: Session, warehouse_id: int, filters: InventoryFilters):
        query = (
            db.query(Inventory)
            .join(Product, Product.id == Inventory.product_id)
            .filter(Inventory.warehouse_id == warehouse_id)
        )

        if filters.search:
            query = query.filter(or_(
                Product.sku.icontains(filters.search, autoescape=True),
                Product.name.icontains(filters.search, autoescape=True),
                Inventory.bin_location.icontains(filters.search, autoescape=True),
            ))

        if filters.status.lower() != ALL:
            try:
                query = query.filter(Inventory.status == InventoryStatus(filters.status))
            except ValueError:
                # not a known status: nothing can match it
                query = query.filter(false())

        if filters.category.lower() != ALL:
            query = query.filter(Product.category == filters.category)

        return query

    def _to_item(self, record: Inventory) -> InventoryItem:
        return InventoryItem(
            id=record.id,
            quantity=record.quantity,
            bin_location=record.bin_location,
            status=enum_val(record.status),
            last_counted_at=record.last_counted_at,
            created_at=record.created_at,
            updated_at=record.updated_at,
            is_low_stock=self.is_low_stock(record.quantity),
            stock_level=self.stock_level(record.quantity),
            product=product_detail(record.product),
        )

    def query_inventory(
        self, warehouse_id: int | None, filters: InventoryFilters | None = None,
    ) -> PaginatedInventory:
        """
        One page of a warehouse's inventory, ordered by product name then bin location.
        Unknown warehouse or any storage failure -> empty page.
        """
        if warehouse_id is None:
            return PaginatedInventory()

        filters = self.normalize_filters(filters)
        page, limit = filters.page, filters.limit

        try:
            with self._session_factory() as db:
                query = self._filtered_query(db, warehouse_id, filters)
                total_count = query.count()

                offset = (page - 1) * limit
                items = []
                # past the last page: nothing to fetch (and the offset may not fit the column type)
                if offset < total_count:
                    records = (
                        query.options(contains_eager(Inventory.product))
                        .order_by(
                            Product.name.asc(),
                            Inventory.bin_location.asc(),
                            Inventory.id.asc(),
                        )
                        .offset(offset)
                        .limit(limit)
                        .all()
                    )
                    items = [self._to_item(r) for r in records]
        except Exception:
            logger.exception(
                f"Inventory query failed (warehouse={warehouse_id}, filters={filters.model_dump()})"
            )
            return PaginatedInventory()

        total_pages = math.ceil(total_count / limit) if total_count else 0
        return PaginatedInventory(
            items=items,
            total_count=total_count,
            total_pages=total_pages,
            current_page=page,
            has_next_page=page < total_pages,
            has_previous_page=page > 1,
        )

    def get_categories(self, warehouse_id: int | None) -> list[str]:
        """Distinct, non-empty product categories stocked in the warehouse, sorted."""
        if warehouse_id is None:
            return []
        try:
            with self._session_factory() as db:
                rows = (
                    db.query(Product.category)
                    .join(Inventory, Inventory.product_id == Product.id)
                    .filter(Inventory.warehouse_id == warehouse_id)
                    .distinct()
                    .all()
                )
        except Exception:
            logger.exception(f"Failed to fetch categories (warehouse={warehouse_id})")
            return []
        return sorted({category for (category,) in rows if category})

    def get_inventory_stats(self, warehouse_id: int | None) -> InventoryStats:
        """
        Summary cards for the whole warehouse (ignores table filters).
        Single pass over (quantity, status, unit_price); value summed in Decimal.
        """
        if warehouse_id is None:
            return InventoryStats()
        try:
            with self._session_factory() as db:
                rows = (
                    db.query(Inventory.quantity, Inventory.status, Product.unit_price)
                    .join(Product, Product.id == Inventory.product_id)
                    .filter(Inventory.warehouse_id == warehouse_id)
                    .all()
                )
        except Exception:
            logger.exception(f"Failed to compute inventory stats (warehouse={warehouse_id})")
            return InventoryStats()

        total_units = 0
        low_stock = 0
        status_counts: dict[str, int] = {}
        total_value = Decimal("0")

        for quantity, status, unit_price in rows:
            total_units += quantity
            if self.is_low_stock(quantity):
                low_stock += 1
            key = enum_val(status)
            status_counts[key] = status_counts.get(key, 0) + 1
            total_value += quantity * to_decimal(unit_price)

        return InventoryStats(
            total_items=len(rows),
            total_units=total_units,
            low_stock_items=low_stock,
            status_counts=status_counts,
            total_value=total_value.quantize(CENTS),
        )
