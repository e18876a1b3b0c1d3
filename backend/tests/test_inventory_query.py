from conftest import CATALOG, CHICAGO_STOCK

from blueship.schemas.inventory import InventoryFilters


def _expected_order():
    rows = [
        (name, bin_location)
        for (_, name, _, _), (_, bin_location, _) in zip(CATALOG, CHICAGO_STOCK)
    ]
    return [name for name, _ in sorted(rows)]


def test_first_page_metadata(inventory_service, seeded):
    page = inventory_service.query_inventory(seeded["chicago"], InventoryFilters(limit=4))

    assert page.total_count == 10
    assert page.total_pages == 3
    assert page.current_page == 1
    assert page.has_next_page is True
    assert page.has_previous_page is False
    assert len(page.items) == 4


def test_pages_concatenate_to_full_ordered_listing(inventory_service, seeded):
    names = []
    ids = []
    for page_no in (1, 2, 3, 4):
        page = inventory_service.query_inventory(
            seeded["chicago"], InventoryFilters(page=page_no, limit=3),
        )
        names.extend(item.product.name for item in page.items)
        ids.extend(item.id for item in page.items)

    assert names == _expected_order()
    assert len(set(ids)) == 10


def test_last_page_flags(inventory_service, seeded):
    page = inventory_service.query_inventory(seeded["chicago"], InventoryFilters(page=4, limit=3))

    assert len(page.items) == 1
    assert page.has_next_page is False
    assert page.has_previous_page is True


def test_page_past_the_end_is_empty_but_keeps_totals(inventory_service, seeded):
    page = inventory_service.query_inventory(seeded["chicago"], InventoryFilters(page=3, limit=5))

    assert page.items == []
    assert page.total_count == 10
    assert page.total_pages == 2
    assert page.current_page == 3
    assert page.has_next_page is False
    assert page.has_previous_page is True


def test_huge_page_number_keeps_totals_without_error(inventory_service, seeded, caplog):
    with caplog.at_level("ERROR", logger="blueship.services.inventory_query"):
        page = inventory_service.query_inventory(
            seeded["chicago"], InventoryFilters(page=10**18, limit=20),
        )

    assert page.items == []
    assert page.total_count == 10
    assert page.total_pages == 1
    assert page.current_page == 10**18
    assert page.has_next_page is False
    assert page.has_previous_page is True
    assert not [r for r in caplog.records if r.levelname == "ERROR"]


def test_page_below_one_reads_as_first_page(inventory_service, seeded):
    for bad_page in (0, -3):
        page = inventory_service.query_inventory(
            seeded["chicago"], InventoryFilters(page=bad_page, limit=5),
        )
        assert page.current_page == 1
        assert page.has_previous_page is False
        assert len(page.items) == 5


def test_limit_defaults_and_cap(inventory_service):
    assert inventory_service.normalize_filters(None).limit == 20
    assert inventory_service.normalize_filters(InventoryFilters(limit=0)).limit == 20
    assert inventory_service.normalize_filters(InventoryFilters(limit=-1)).limit == 20
    assert inventory_service.normalize_filters(InventoryFilters(limit=500)).limit == 100
    assert inventory_service.normalize_filters(InventoryFilters(limit=37)).limit == 37


def test_oversized_limit_returns_everything(inventory_service, seeded):
    page = inventory_service.query_inventory(seeded["chicago"], InventoryFilters(limit=10_000))

    assert len(page.items) == 10
    assert page.total_pages == 1


def test_search_is_case_insensitive_on_name(inventory_service, seeded):
    for term in ("iphone", "IPHONE", "  iPhone  "):
        page = inventory_service.query_inventory(seeded["chicago"], InventoryFilters(search=term))
        assert [i.product.name for i in page.items] == ["iPhone 15 128GB"]


def test_search_matches_bin_location(inventory_service, seeded):
    page = inventory_service.query_inventory(seeded["chicago"], InventoryFilters(search="a1"))

    assert sorted(i.bin_location for i in page.items) == ["A11", "A12", "A13"]


def test_search_matches_sku(inventory_service, seeded):
    page = inventory_service.query_inventory(
        seeded["chicago"], InventoryFilters(search="kitchenaid-mixer"),
    )

    assert [i.product.sku for i in page.items] == ["APP-KITCHENAID-MIXER"]


def test_search_wildcards_are_literal(inventory_service, seeded):
    for term in ("%", "_", "A_1"):
        page = inventory_service.query_inventory(seeded["chicago"], InventoryFilters(search=term))
        assert page.total_count == 0
        assert page.items == []


def test_status_filter(inventory_service, seeded):
    page = inventory_service.query_inventory(
        seeded["chicago"], InventoryFilters(status="RESERVED"),
    )

    assert page.total_count == 2
    assert {i.status for i in page.items} == {"RESERVED"}


def test_unknown_status_matches_nothing(inventory_service, seeded):
    page = inventory_service.query_inventory(seeded["chicago"], InventoryFilters(status="LOST"))

    assert page.total_count == 0
    assert page.total_pages == 0


def test_all_sentinel_and_blank_disable_filters(inventory_service, seeded):
    for filters in (
        InventoryFilters(status="all", category="all"),
        InventoryFilters(status="ALL", category="All"),
        InventoryFilters(status="", category=""),
    ):
        page = inventory_service.query_inventory(seeded["chicago"], filters)
        assert page.total_count == 10


def test_filters_combine_as_conjunction(inventory_service, seeded):
    both = inventory_service.query_inventory(
        seeded["chicago"], InventoryFilters(category="Apparel", status="AVAILABLE"),
    )
    assert sorted(i.product.name for i in both.items) == [
        "Nike Air Max 270",
        "Patagonia Down Sweater Jacket",
        "Ray-Ban Aviator Classic Sunglasses",
    ]

    narrowed = inventory_service.query_inventory(
        seeded["chicago"], InventoryFilters(category="Apparel", status="AVAILABLE", search="ray"),
    )
    assert [i.product.sku for i in narrowed.items] == ["APP-RAY-BAN-AVIATOR"]


def test_results_stay_inside_the_warehouse(inventory_service, seeded):
    page = inventory_service.query_inventory(seeded["atlanta"], InventoryFilters(limit=100))

    assert page.total_count == 3
    assert {i.bin_location for i in page.items} == {"Z99"}
    assert {i.quantity for i in page.items} == {5, 60, 300}


def test_derived_stock_fields(inventory_service, seeded):
    page = inventory_service.query_inventory(seeded["chicago"], InventoryFilters(limit=100))
    by_qty = {i.quantity: i for i in page.items}

    assert by_qty[49].is_low_stock is True
    assert by_qty[49].stock_level == "low"
    assert by_qty[50].is_low_stock is False
    assert by_qty[50].stock_level == "ok"
    assert by_qty[10].stock_level == "low"
    assert by_qty[9].stock_level == "critical"


def test_items_carry_product_details(inventory_service, seeded):
    page = inventory_service.query_inventory(seeded["chicago"], InventoryFilters(search="macbook"))
    product = page.items[0].product

    assert product.sku == "ELC-MACBOOK-AIR-M3"
    assert product.category == "Electronics"
    assert str(product.unit_price) == "1099.99"
    assert product.dimensions.volume == 100


def test_unknown_and_empty_warehouses_give_empty_page(inventory_service, seeded):
    for warehouse_id in (seeded["empty"], 999_999, None):
        page = inventory_service.query_inventory(warehouse_id)
        assert page.items == []
        assert page.total_count == 0
        assert page.total_pages == 0
        assert page.has_next_page is False

    assert inventory_service.warehouse_exists(seeded["empty"]) is True
    assert inventory_service.warehouse_exists(999_999) is False


def test_list_and_get_warehouses(inventory_service, seeded):
    names = [w.name for w in inventory_service.list_warehouses()]
    assert names == ["Atlanta Crossdock", "Chicago DC", "Empty Depot"]

    chicago = inventory_service.get_warehouse(seeded["chicago"])
    assert chicago.city == "Chicago"
    assert chicago.status == "ACTIVE"
    assert inventory_service.get_warehouse(424242) is None


def test_get_product_by_sku(inventory_service, seeded):
    product = inventory_service.get_product_by_sku("ELC-IPHONE15-128")

    assert product.name == "iPhone 15 128GB"
    assert inventory_service.get_product_by_sku("NOPE-000") is None
