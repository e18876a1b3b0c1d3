from decimal import Decimal

import pytest
from pydantic import ValidationError

from blueship.models import Customer, Order, Product, Shipment
from blueship.schemas.records import Address, Dimensions, OrderLineItem, to_json_record


def test_dimensions_volume():
    assert Dimensions(length=35, width=25, height=15).volume == 13125
    assert Dimensions(length=35, width=25).volume is None


@pytest.mark.parametrize("payload", [
    {"length": -1},
    {"length": 1, "depth": 2},
    {"width": "wide"},
])
def test_dimensions_rejects_bad_input(payload):
    with pytest.raises(ValidationError):
        Dimensions.model_validate(payload)


def test_to_json_record_drops_unknown_sides():
    assert to_json_record(Dimensions, {"length": 10, "width": 5}) == {"length": 10.0, "width": 5.0}
    assert to_json_record(Dimensions, Dimensions(height=2)) == {"height": 2.0}
    assert to_json_record(Dimensions, None) is None


def test_to_json_record_raises_value_error():
    with pytest.raises(ValueError, match="invalid Address"):
        to_json_record(Address, {"street": "1 Main St"})


def test_address_defaults_country():
    address = Address(street="456 Oak Street", city="Austin", state="TX", zip="73301")

    assert address.country == "USA"


def test_line_item_totals():
    stored = OrderLineItem(sku="APP-NIKE-AIR-MAX", qty=2, unit_price="150.00", total_price="280.00")
    computed = OrderLineItem(sku="ELC-IPHONE15-128", qty=3, unit_price="799.99")

    assert stored.line_total() == Decimal("280.00")
    assert computed.line_total() == Decimal("2399.97")


@pytest.mark.parametrize("payload", [
    {"sku": "X", "qty": 0, "unit_price": "1.00"},
    {"sku": "X", "qty": 1, "unit_price": "-1.00"},
    {"sku": "X", "qty": 1, "unit_price": "1.005"},
    {"qty": 1, "unit_price": "1.00"},
])
def test_line_item_rejects_bad_input(payload):
    with pytest.raises(ValidationError):
        OrderLineItem.model_validate(payload)


def test_model_json_columns_are_validated_on_assignment():
    product = Product(sku="P-1", name="Widget", unit_price=Decimal("1.00"), dimensions={"length": 3})
    assert product.dimensions == {"length": 3.0}

    with pytest.raises(ValueError):
        Product(sku="P-2", name="Bad", unit_price=Decimal("1.00"), dimensions={"length": -3})

    with pytest.raises(ValueError):
        Shipment(tracking_number="T-1", dimensions={"girth": 4})

    with pytest.raises(ValueError):
        Customer(name="No City", shipping_address={"street": "1 Main St", "state": "TX", "zip": "1"})


def test_order_items_are_stored_json_safe():
    order = Order(
        order_number="ORD-1",
        items=[
            {"sku": "A", "qty": 1, "unit_price": Decimal("9.99")},
            OrderLineItem(sku="B", qty=2, unit_price=Decimal("5.00"), total_price=Decimal("10.00")),
        ],
    )

    assert order.items == [
        {"sku": "A", "qty": 1, "unit_price": "9.99"},
        {"sku": "B", "qty": 2, "unit_price": "5.00", "total_price": "10.00"},
    ]

    with pytest.raises(ValueError):
        Order(order_number="ORD-2", items=[{"sku": "A", "qty": 0, "unit_price": "1.00"}])
