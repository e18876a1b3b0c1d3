import os
from datetime import datetime, timedelta
from decimal import Decimal
from types import SimpleNamespace

import pytest
from sqlalchemy.orm import sessionmaker

# Configure a throwaway database before importing the application modules.
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["ANTHROPIC_API_KEY"] = ""

from blueship.database import Base, make_engine  # noqa: E402
from blueship.models import (  # noqa: E402
    Carrier, Customer, Inventory, Order, Product, Shipment, Warehouse,
)
from blueship.models.inventory import InventoryStatus  # noqa: E402
from blueship.models.order import OrderStatus  # noqa: E402
from blueship.models.shipment import ShipmentStatus  # noqa: E402
from blueship.models.warehouse import WarehouseStatus  # noqa: E402
from blueship.services import InventoryQueryService, OrderQueryService  # noqa: E402


# (sku, name, category, unit price)
CATALOG = [
    ("ELC-IPHONE15-128", "iPhone 15 128GB", "Electronics", "799.99"),
    ("ELC-MACBOOK-AIR-M3", "MacBook Air M3 13-inch", "Electronics", "1099.99"),
    ("ELC-SAMSUNG-TV-55", 'Samsung 55" 4K Smart TV', "Electronics", "599.99"),
    ("APP-NIKE-AIR-MAX", "Nike Air Max 270", "Apparel", "150.00"),
    ("APP-LEVI-JEANS-501", "Levi's 501 Original Jeans", "Apparel", "89.99"),
    ("APP-PATAGONIA-JACKET", "Patagonia Down Sweater Jacket", "Apparel", "199.99"),
    ("APP-NORTH-FACE-BACKPACK", "The North Face Recon Backpack", "Apparel", "89.99"),
    ("APP-RAY-BAN-AVIATOR", "Ray-Ban Aviator Classic Sunglasses", "Apparel", "154.99"),
    ("APP-KITCHENAID-MIXER", "KitchenAid Stand Mixer", "Appliances", "329.99"),
    ("APP-DYSON-VACUUM-V15", "Dyson V15 Detect Cordless Vacuum", "Appliances", "749.99"),
]

# Chicago DC stock, same order as CATALOG: (quantity, bin, status)
CHICAGO_STOCK = [
    (20, "A11", InventoryStatus.AVAILABLE),
    (200, "B22", InventoryStatus.AVAILABLE),
    (49, "C33", InventoryStatus.RESERVED),
    (50, "A12", InventoryStatus.AVAILABLE),
    (9, "D41", InventoryStatus.DAMAGED),
    (120, "E54", InventoryStatus.AVAILABLE),
    (75, "B23", InventoryStatus.RESERVED),
    (10, "C34", InventoryStatus.AVAILABLE),
    (180, "D42", InventoryStatus.QUARANTINE),
    (35, "A13", InventoryStatus.AVAILABLE),
]


@pytest.fixture()
def session_factory(tmp_path):
    # File-backed so parallel reads from worker threads each get their own connection.
    engine = make_engine(f"sqlite:///{tmp_path / 'test.db'}")
    Base.metadata.create_all(bind=engine)
    factory = sessionmaker(
        bind=engine,
        autoflush=False,
        autocommit=False,
        expire_on_commit=False,
    )
    try:
        yield factory
    finally:
        engine.dispose()


@pytest.fixture()
def seeded(session_factory):
    """Three warehouses: Chicago DC (10 records), Atlanta Crossdock (3 records), Empty Depot (none)."""
    db = session_factory()
    try:
        chicago = Warehouse(
            name="Chicago DC", address="1234 Industrial Blvd", city="Chicago", state="IL",
            zip_code="60609", country="USA", total_space=50000, used_space=35000,
            utilization_pct=70.0, status=WarehouseStatus.ACTIVE,
        )
        atlanta = Warehouse(
            name="Atlanta Crossdock", address="9012 Logistics Lane", city="Atlanta", state="GA",
            zip_code="30309", country="USA", total_space=30000, used_space=18000,
            utilization_pct=60.0, status=WarehouseStatus.ACTIVE,
        )
        empty = Warehouse(
            name="Empty Depot", address="1 Nowhere Rd", city="Reno", state="NV",
            zip_code="89501", country="USA", total_space=1000, used_space=0,
            utilization_pct=0.0, status=WarehouseStatus.MAINTENANCE,
        )
        db.add_all([chicago, atlanta, empty])
        db.flush()

        products = [
            Product(
                sku=sku, name=name, category=category, unit_price=Decimal(price),
                weight=1.0, dimensions={"length": 10, "width": 5, "height": 2},
            )
            for sku, name, category, price in CATALOG
        ]
        db.add_all(products)
        db.flush()

        counted = datetime(2024, 12, 1, 9, 0, 0)
        for product, (qty, bin_location, status) in zip(products, CHICAGO_STOCK):
            db.add(Inventory(
                warehouse_id=chicago.id, product_id=product.id, quantity=qty,
                bin_location=bin_location, status=status,
                last_counted_at=counted - timedelta(days=qty % 7),
            ))

        for product, qty in zip(products[:3], (5, 60, 300)):
            db.add(Inventory(
                warehouse_id=atlanta.id, product_id=product.id, quantity=qty,
                bin_location="Z99", status=InventoryStatus.AVAILABLE,
            ))

        db.commit()
        yield {
            "chicago": chicago.id,
            "atlanta": atlanta.id,
            "empty": empty.id,
            "products": {p.sku: p.id for p in products},
        }
    finally:
        db.close()


@pytest.fixture()
def seeded_orders(session_factory, seeded):
    """Two customers, three orders, three shipments on top of the inventory fixture."""
    db = session_factory()
    try:
        address = {
            "street": "100 Innovation Drive", "city": "San Francisco",
            "state": "CA", "zip": "94105", "country": "USA",
        }
        techcorp = Customer(
            name="TechCorp Solutions", email="orders@techcorp.com",
            shipping_address=address, billing_address=address, preferred_carrier="UPS",
        )
        maria = Customer(name="Maria Rodriguez", email="maria.rodriguez@email.com")
        ups = Carrier(name="UPS", service_level="Standard", estimated_days=2,
                      base_rate=Decimal("9.25"), per_pound_rate=Decimal("0.80"))
        fedex = Carrier(name="FedEx", service_level="Ground", estimated_days=3)
        db.add_all([techcorp, maria, ups, fedex])
        db.flush()

        first = Order(
            order_number="ORD-202412-000001", customer_id=techcorp.id,
            status=OrderStatus.PROCESSING,
            items=[
                {"sku": "ELC-IPHONE15-128", "qty": 2, "unit_price": "799.99", "total_price": "1599.98"},
                {"sku": "ELC-MACBOOK-AIR-M3", "qty": 1, "unit_price": "1099.99", "total_price": "1099.99"},
            ],
            total_amount=Decimal("2699.97"),
            created_at=datetime(2024, 12, 1, 10, 0, 0),
        )
        second = Order(
            order_number="ORD-202412-000002", customer_id=maria.id,
            status=OrderStatus.DELIVERED,
            items=[{"sku": "APP-NIKE-AIR-MAX", "qty": 5, "unit_price": "150.00"}],
            total_amount=Decimal("750.00"),
            created_at=datetime(2024, 12, 2, 10, 0, 0),
        )
        third = Order(
            order_number="ORD-202412-000003", customer_id=maria.id,
            status=OrderStatus.PENDING,
            items=[],
            total_amount=Decimal("0.10"),
            created_at=datetime(2024, 12, 3, 10, 0, 0),
        )
        db.add_all([first, second, third])
        db.flush()

        db.add_all([
            Shipment(
                order_id=first.id, warehouse_id=seeded["chicago"], carrier_id=ups.id,
                tracking_number="1Z0000000001", status=ShipmentStatus.IN_TRANSIT,
                weight=3.1, dimensions={"length": 35, "width": 25, "height": 15},
                shipping_cost=Decimal("15.50"), created_at=datetime(2024, 12, 1, 12, 0, 0),
            ),
            Shipment(
                order_id=first.id, warehouse_id=seeded["atlanta"], carrier_id=fedex.id,
                tracking_number="FX0000000002", status=ShipmentStatus.PACKED,
                shipping_cost=Decimal("10.25"), created_at=datetime(2024, 12, 1, 13, 0, 0),
            ),
            Shipment(
                order_id=second.id, warehouse_id=seeded["chicago"], carrier_id=fedex.id,
                tracking_number="FX0000000003", status=ShipmentStatus.DELIVERED,
                shipping_cost=Decimal("12.75"), created_at=datetime(2024, 12, 2, 12, 0, 0),
            ),
        ])
        db.commit()
        yield {"orders": [first.id, second.id, third.id], **seeded}
    finally:
        db.close()


@pytest.fixture()
def inventory_service(session_factory):
    return InventoryQueryService(session_factory)


@pytest.fixture()
def order_service(session_factory):
    return OrderQueryService(session_factory)


@pytest.fixture()
def client(session_factory):
    from fastapi.testclient import TestClient

    from blueship.agents import ChatLLM
    from blueship.api.deps import get_chat_service, get_inventory_service, get_order_service
    from blueship.main import app
    from blueship.services import ChatService

    app.dependency_overrides[get_inventory_service] = lambda: InventoryQueryService(session_factory)
    app.dependency_overrides[get_order_service] = lambda: OrderQueryService(session_factory)
    app.dependency_overrides[get_chat_service] = lambda: ChatService(
        InventoryQueryService(session_factory), session_factory, llm=ChatLLM(api_key=""),
    )
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def broken_session_factory():
    """Stands in for a sessionmaker whose database is unreachable."""
    from sqlalchemy.exc import OperationalError

    raise OperationalError("SELECT 1", {}, Exception("unable to open database file"))



class FakeMessages:
    def __init__(self, reply=None, error=None):
        self.reply = reply
        self.error = error
        self.calls = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return SimpleNamespace(content=[SimpleNamespace(type="text", text=self.reply or "")])


class FakeAnthropic:
    """Stands in for anthropic.AsyncAnthropic; only messages.create is used."""

    def __init__(self, reply=None, error=None):
        self.messages = FakeMessages(reply, error)
