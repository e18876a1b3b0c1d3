"""
Query services
- InventoryQueryService: paginated/filtered inventory + warehouse stats
- OrderQueryService: orders, shipments, dashboard counters
- ChatService: chat panel replies
"""

from blueship.services.inventory_query import InventoryQueryService
from blueship.services.orders import OrderQueryService
from blueship.services.chat import ChatService

__all__ = [
    "InventoryQueryService",
    "OrderQueryService",
    "ChatService",
]
