"""
SQLAlchemy ORM model package
- Every model is imported here so it registers on Base.metadata.
"""

from blueship.models.warehouse import Warehouse
from blueship.models.product import Product
from blueship.models.inventory import Inventory
from blueship.models.customer import Customer
from blueship.models.carrier import Carrier
from blueship.models.order import Order
from blueship.models.shipment import Shipment
from blueship.models.chat_message import ChatMessage

__all__ = [
    "Warehouse",
    "Product",
    "Inventory",
    "Customer",
    "Carrier",
    "Order",
    "Shipment",
    "ChatMessage",
]
