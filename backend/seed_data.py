"""
Demo data seeding script
- Carriers 3, Warehouses 3, Products 10, Inventory 30 records,
  Customers 5, Orders 5, Shipments 4, Chat messages 5
- Run: cd backend && python seed_data.py
"""

import random
import sys
import os
from datetime import datetime, timedelta, timezone
from decimal import Decimal

# resolve the blueship package relative to backend/
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from blueship.database import engine, SessionLocal, Base
from blueship.models import (
    Carrier, Warehouse, Product, Inventory, Customer, Order, Shipment, ChatMessage,
)
from blueship.models.warehouse import WarehouseStatus
from blueship.models.inventory import InventoryStatus
from blueship.models.order import OrderStatus
from blueship.models.shipment import ShipmentStatus
from blueship.models.chat_message import ChatRole


def _now():
    return datetime.now(timezone.utc)


def generate_tracking_number() -> str:
    prefix = random.choice(["1Z", "FX", "DH"])
    return f"{prefix}{random.randint(0, 10**10 - 1):010d}"


def generate_order_number() -> str:
    now = _now()
    return f"ORD-{now.year}{now.month:02d}-{random.randint(0, 999999):06d}"


def generate_bin_location() -> str:
    """zone + row + shelf, e.g. "C73" """
    return f"{random.choice('ABCDE')}{random.randint(1, 9)}{random.randint(1, 4)}"


def seed_carriers(session):
    """3 parcel carriers"""
    carriers = [
        Carrier(name="FedEx", service_level="Ground", estimated_days=3,
                base_rate=Decimal("8.50"), per_pound_rate=Decimal("0.75")),
        Carrier(name="UPS", service_level="Standard", estimated_days=2,
                base_rate=Decimal("9.25"), per_pound_rate=Decimal("0.80")),
        Carrier(name="DHL", service_level="Express", estimated_days=1,
                base_rate=Decimal("12.00"), per_pound_rate=Decimal("1.20")),
    ]
    session.add_all(carriers)
    session.commit()
    print(f"  [OK] Carriers: {len(carriers)}")
    return carriers


def seed_warehouses(session):
    """3 distribution centres"""
    warehouses = [
        Warehouse(
            name="Chicago DC",
            address="1234 Industrial Blvd",
            city="Chicago", state="IL", zip_code="60609", country="USA",
            total_space=50000, used_space=35000, utilization_pct=70.0,
            status=WarehouseStatus.ACTIVE,
        ),
        Warehouse(
            name="Los Angeles Fulfillment",
            address="5678 Commerce Way",
            city="Los Angeles", state="CA", zip_code="90210", country="USA",
            total_space=75000, used_space=45000, utilization_pct=60.0,
            status=WarehouseStatus.ACTIVE,
        ),
        Warehouse(
            name="Atlanta Crossdock",
            address="9012 Logistics Lane",
            city="Atlanta", state="GA", zip_code="30309", country="USA",
            total_space=30000, used_space=18000, utilization_pct=60.0,
            status=WarehouseStatus.ACTIVE,
        ),
    ]
    session.add_all(warehouses)
    session.commit()
    print(f"  [OK] Warehouses: {len(warehouses)}")
    return warehouses


PRODUCTS = [
    # (sku, name, description, category, weight kg, (l, w, h) cm, unit price)
    ("ELC-IPHONE15-128", "iPhone 15 128GB",
     "Latest iPhone with A17 Pro chip and titanium design",
     "Electronics", 0.4, (14.8, 7.1, 0.8), "799.99"),
    ("ELC-MACBOOK-AIR-M3", "MacBook Air M3 13-inch",
     "Ultra-thin laptop with M3 chip and Liquid Retina display",
     "Electronics", 2.7, (30.4, 21.5, 1.1), "1099.99"),
    ("ELC-SAMSUNG-TV-55", 'Samsung 55" 4K Smart TV',
     "Crystal UHD 4K Smart TV with Tizen OS",
     "Electronics", 18.5, (123.2, 70.8, 5.9), "599.99"),
    ("APP-NIKE-AIR-MAX", "Nike Air Max 270",
     "Comfortable running shoes with Max Air cushioning",
     "Apparel", 0.8, (32, 22, 12), "150.00"),
    ("APP-LEVI-JEANS-501", "Levi's 501 Original Jeans",
     "Classic straight-fit jeans in blue denim",
     "Apparel", 0.6, (40, 30, 2), "89.99"),
    ("APP-PATAGONIA-JACKET", "Patagonia Down Sweater Jacket",
     "Lightweight insulated jacket for outdoor adventures",
     "Apparel", 0.5, (35, 25, 3), "199.99"),
    ("APP-NORTH-FACE-BACKPACK", "The North Face Recon Backpack",
     "Durable 30L backpack for hiking and travel",
     "Apparel", 1.2, (50, 30, 20), "89.99"),
    ("APP-RAY-BAN-AVIATOR", "Ray-Ban Aviator Classic Sunglasses",
     "Classic aviator sunglasses with green lenses",
     "Apparel", 0.1, (15, 5, 2), "154.99"),
    ("APP-KITCHENAID-MIXER", "KitchenAid Stand Mixer",
     "5-quart stand mixer with dough hook and whisk",
     "Appliances", 12.0, (35.6, 25.4, 30.5), "329.99"),
    ("APP-DYSON-VACUUM-V15", "Dyson V15 Detect Cordless Vacuum",
     "Powerful cordless vacuum with laser dust detection",
     "Appliances", 3.0, (25.4, 10.2, 108.0), "749.99"),
]


def seed_products(session):
    """10 catalogue products"""
    products = []
    for sku, name, description, category, weight, (l, w, h), price in PRODUCTS:
        products.append(Product(
            sku=sku,
            name=name,
            description=description,
            category=category,
            weight=weight,
            dimensions={"length": l, "width": w, "height": h},
            unit_price=Decimal(price),
            image_url=None,
        ))
    session.add_all(products)
    session.commit()
    print(f"  [OK] Products: {len(products)}")
    return products


def seed_inventory(session, warehouses, products):
    """every warehouse × every product = 30 inventory records"""
    inventories = []
    for wh in warehouses:
        for prod in products:
            inventories.append(Inventory(
                warehouse_id=wh.id,
                product_id=prod.id,
                quantity=random.randint(20, 200),
                bin_location=generate_bin_location(),
                status=random.choice([InventoryStatus.AVAILABLE, InventoryStatus.RESERVED]),
                last_counted_at=_now() - timedelta(days=random.randint(1, 30)),
            ))
    session.add_all(inventories)
    session.commit()
    print(f"  [OK] Inventory: {len(inventories)} records")
    return inventories


def _address(street, city, state, zip_code):
    return {"street": street, "city": city, "state": state, "zip": zip_code, "country": "USA"}


def seed_customers(session):
    """5 customers (businesses and individuals)"""
    rows = [
        ("TechCorp Solutions", "orders@techcorp.com", "+1-555-0123",
         _address("100 Innovation Drive", "San Francisco", "CA", "94105"), "UPS"),
        ("Fashion Forward LLC", "purchasing@fashionforward.com", "+1-555-0456",
         _address("250 Fashion Avenue", "New York", "NY", "10001"), "FedEx"),
        ("John Smith", "john.smith@email.com", "+1-555-0789",
         _address("456 Oak Street", "Austin", "TX", "73301"), "DHL"),
        ("Global Electronics Inc", "procurement@globalelectronics.com", "+1-555-0321",
         _address("789 Technology Blvd", "Seattle", "WA", "98101"), "FedEx"),
        ("Maria Rodriguez", "maria.rodriguez@email.com", "+1-555-0654",
         _address("321 Pine Street", "Miami", "FL", "33101"), "UPS"),
    ]
    customers = [
        Customer(
            name=name,
            email=email,
            phone=phone,
            shipping_address=address,
            billing_address=address,
            preferred_carrier=carrier,
        )
        for name, email, phone, address, carrier in rows
    ]
    session.add_all(customers)
    session.commit()
    print(f"  [OK] Customers: {len(customers)}")
    return customers


def _line(sku, qty, unit_price):
    price = Decimal(unit_price)
    return {"sku": sku, "qty": qty, "unit_price": price, "total_price": price * qty}


def seed_orders(session, customers):
    """5 orders with embedded line items"""
    specs = [
        (OrderStatus.PROCESSING, [
            _line("ELC-IPHONE15-128", 2, "799.99"),
            _line("ELC-MACBOOK-AIR-M3", 1, "1099.99"),
        ]),
        (OrderStatus.SHIPPED, [
            _line("APP-NIKE-AIR-MAX", 5, "150.00"),
            _line("APP-LEVI-JEANS-501", 3, "89.99"),
        ]),
        (OrderStatus.PENDING, [
            _line("ELC-SAMSUNG-TV-55", 1, "599.99"),
        ]),
        (OrderStatus.DELIVERED, [
            _line("APP-KITCHENAID-MIXER", 2, "329.99"),
            _line("APP-DYSON-VACUUM-V15", 1, "749.99"),
        ]),
        (OrderStatus.PROCESSING, [
            _line("APP-PATAGONIA-JACKET", 1, "199.99"),
            _line("APP-NORTH-FACE-BACKPACK", 2, "89.99"),
            _line("APP-RAY-BAN-AVIATOR", 1, "154.99"),
        ]),
    ]
    orders = []
    for customer, (status, lines) in zip(customers, specs):
        orders.append(Order(
            customer_id=customer.id,
            order_number=generate_order_number(),
            status=status,
            items=lines,
            total_amount=sum((l["total_price"] for l in lines), Decimal("0")),
        ))
    session.add_all(orders)
    session.commit()
    print(f"  [OK] Orders: {len(orders)}")
    return orders


def seed_shipments(session, orders, warehouses, carriers):
    """4 shipments across the warehouses"""
    fedex, ups, dhl = carriers
    now = _now()
    shipments = [
        Shipment(
            order_id=orders[0].id, warehouse_id=warehouses[0].id, carrier_id=ups.id,
            tracking_number=generate_tracking_number(), status=ShipmentStatus.IN_TRANSIT,
            weight=3.1, dimensions={"length": 35, "width": 25, "height": 15},
            shipping_cost=Decimal("15.50"),
            label_url="https://example.com/labels/shipment-001.pdf",
            estimated_delivery_date=now + timedelta(days=2),
            created_at=now - timedelta(days=1),
        ),
        Shipment(
            order_id=orders[1].id, warehouse_id=warehouses[1].id, carrier_id=fedex.id,
            tracking_number=generate_tracking_number(), status=ShipmentStatus.DELIVERED,
            weight=2.4, dimensions={"length": 30, "width": 20, "height": 12},
            shipping_cost=Decimal("12.75"),
            label_url="https://example.com/labels/shipment-002.pdf",
            estimated_delivery_date=now - timedelta(days=1),
            actual_delivery_date=now - timedelta(days=1),
            created_at=now - timedelta(days=4),
        ),
        Shipment(
            order_id=orders[3].id, warehouse_id=warehouses[2].id, carrier_id=dhl.id,
            tracking_number=generate_tracking_number(), status=ShipmentStatus.SHIPPED,
            weight=15.0, dimensions={"length": 40, "width": 30, "height": 25},
            shipping_cost=Decimal("25.00"),
            label_url="https://example.com/labels/shipment-003.pdf",
            estimated_delivery_date=now + timedelta(days=1),
            created_at=now - timedelta(days=2),
        ),
        Shipment(
            order_id=orders[4].id, warehouse_id=warehouses[0].id, carrier_id=ups.id,
            tracking_number=generate_tracking_number(), status=ShipmentStatus.PACKED,
            weight=1.8, dimensions={"length": 25, "width": 20, "height": 10},
            shipping_cost=Decimal("10.25"),
            label_url="https://example.com/labels/shipment-004.pdf",
            estimated_delivery_date=now + timedelta(days=3),
            created_at=now - timedelta(days=1),
        ),
    ]
    session.add_all(shipments)
    session.commit()
    print(f"  [OK] Shipments: {len(shipments)}")
    return shipments


def seed_chat_messages(session, orders):
    """a short demo conversation for the chat panel"""
    now = _now()
    messages = [
        ChatMessage(
            role=ChatRole.USER,
            content=f"Can you help me track the status of order {orders[0].order_number}?",
            message_metadata={"orderNumber": orders[0].order_number},
            created_at=now - timedelta(hours=2),
        ),
        ChatMessage(
            role=ChatRole.ASSISTANT,
            content=(
                f"I found order {orders[0].order_number}. It's currently in PROCESSING status "
                "and is expected to ship within 24 hours."
            ),
            message_metadata={"orderId": orders[0].id, "responseType": "order_status"},
            created_at=now - timedelta(hours=2) + timedelta(seconds=30),
        ),
        ChatMessage(
            role=ChatRole.USER,
            content="What's the inventory level for Nike Air Max 270 in the Chicago DC warehouse?",
            message_metadata={"productSku": "APP-NIKE-AIR-MAX", "warehouseName": "Chicago DC"},
            created_at=now - timedelta(hours=1),
        ),
        ChatMessage(
            role=ChatRole.USER,
            content=(
                f"I need to create a new shipment for order {orders[3].order_number}. "
                "Can you help me select the best carrier?"
            ),
            message_metadata={"orderNumber": orders[3].order_number, "action": "create_shipment"},
            created_at=now - timedelta(minutes=30),
        ),
        ChatMessage(
            role=ChatRole.ASSISTANT,
            content=(
                f"For order {orders[3].order_number}, I recommend FedEx Ground. "
                "Estimated delivery is 3 business days."
            ),
            message_metadata={"orderId": orders[3].id, "recommendedCarrier": "FedEx"},
            created_at=now - timedelta(minutes=30) + timedelta(seconds=15),
        ),
    ]
    session.add_all(messages)
    session.commit()
    print(f"  [OK] Chat messages: {len(messages)}")
    return messages


def main():
    print("=" * 60)
    print("Blue Ship Sync — demo data seeding")
    print("=" * 60)

    # recreate every table
    print("\n[1/9] Creating tables...")
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    print("  [OK] Tables created")

    session = SessionLocal()
    try:
        print("\n[2/9] Carriers...")
        carriers = seed_carriers(session)

        print("\n[3/9] Warehouses...")
        warehouses = seed_warehouses(session)

        print("\n[4/9] Products...")
        products = seed_products(session)

        print("\n[5/9] Inventory...")
        inventory = seed_inventory(session, warehouses, products)

        print("\n[6/9] Customers...")
        customers = seed_customers(session)

        print("\n[7/9] Orders...")
        orders = seed_orders(session, customers)

        print("\n[8/9] Shipments...")
        shipments = seed_shipments(session, orders, warehouses, carriers)

        print("\n[9/9] Chat messages...")
        messages = seed_chat_messages(session, orders)

        print("\n" + "=" * 60)
        print("Seeding complete!")
        print(f"  Carriers:      {len(carriers)}")
        print(f"  Warehouses:    {len(warehouses)}")
        print(f"  Products:      {len(products)}")
        print(f"  Inventory:     {len(inventory)} records")
        print(f"  Customers:     {len(customers)}")
        print(f"  Orders:        {len(orders)}")
        print(f"  Shipments:     {len(shipments)}")
        print(f"  Chat messages: {len(messages)}")
        print("=" * 60)

    except Exception as e:
        session.rollback()
        print(f"\n[ERROR] Seeding failed: {e}")
        raise
    finally:
        session.close()


if __name__ == "__main__":
    main()
