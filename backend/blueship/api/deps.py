"""
Service dependencies — each request gets services bound to the app's session factory.
Tests override these with services bound to a throwaway database.
"""

from blueship.database import SessionLocal
from blueship.services import ChatService, InventoryQueryService, OrderQueryService


def get_inventory_service() -> InventoryQueryService:
    return InventoryQueryService(SessionLocal)


def get_order_service() -> OrderQueryService:
    return OrderQueryService(SessionLocal)


def get_chat_service() -> ChatService:
    return ChatService(InventoryQueryService(SessionLocal), SessionLocal)
