"""
Warehouse page loader — fans the four independent reads out in parallel.
- warehouse metadata, inventory page, categories, stats
- Blocking SQLAlchemy calls run in the default executor.
- A call that exceeds the timeout counts as a failure and yields its empty value.
"""

import asyncio
import logging
import time
from typing import Any, Callable

from blueship.config import settings
from blueship.schemas.inventory import (
    InventoryFilters, InventoryStats, PaginatedInventory, WarehousePage,
)
from blueship.services.inventory_query import InventoryQueryService

logger = logging.getLogger(__name__)


async def _run_bounded(name: str, fn: Callable[[], Any], fallback: Any, timeout: float) -> Any:
    """Run a blocking call in the executor; on timeout return the fallback."""
    loop = asyncio.get_running_loop()
    try:
        return await asyncio.wait_for(loop.run_in_executor(None, fn), timeout=timeout)
    except asyncio.TimeoutError:
        logger.warning(f"{name} timed out after {timeout:.1f}s — returning empty result")
        return fallback


async def load_warehouse_page(
    service: InventoryQueryService,
    warehouse_id: int,
    filters: InventoryFilters | None = None,
    timeout: float | None = None,
) -> WarehousePage:
    """Fetch everything the warehouse detail view needs concurrently."""
    timeout = timeout if timeout is not None else settings.QUERY_TIMEOUT_SECONDS
    start = time.monotonic()

    warehouse, inventory, categories, stats = await asyncio.gather(
        _run_bounded("get_warehouse", lambda: service.get_warehouse(warehouse_id), None, timeout),
        _run_bounded(
            "query_inventory",
            lambda: service.query_inventory(warehouse_id, filters),
            PaginatedInventory(),
            timeout,
        ),
        _run_bounded("get_categories", lambda: service.get_categories(warehouse_id), [], timeout),
        _run_bounded(
            "get_inventory_stats",
            lambda: service.get_inventory_stats(warehouse_id),
            InventoryStats(),
            timeout,
        ),
    )

    elapsed = int((time.monotonic() - start) * 1000)
    logger.info(
        f"Warehouse page {warehouse_id} loaded "
        f"({inventory.total_count} matching rows, {elapsed}ms)"
    )

    return WarehousePage(
        warehouse=warehouse,
        inventory=inventory,
        categories=categories,
        stats=stats,
    )
