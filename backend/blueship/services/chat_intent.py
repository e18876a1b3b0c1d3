"""
Chat intent parsing — regex pattern matching, not NLU.

Intent types:
  inventory_query  "show me inventory for Chicago DC", "atlanta stock", ...
  warehouse_query  "list warehouses", "all warehouses", ...
  general          "help", "what can you do"
  unknown          anything else
"""

import re
from dataclasses import dataclass, field
from typing import Iterable

from blueship.schemas.inventory import WarehouseSummary


@dataclass
class ChatIntent:
    type: str
    confidence: float
    original_query: str
    warehouse_name: str | None = None
    warehouse_id: int | None = None


@dataclass
class InventoryLine:
    sku: str
    name: str
    quantity: int
    bin_location: str
    status: str
    category: str | None = None


@dataclass
class InventorySnapshot:
    """Whole-warehouse inventory as shown in a chat answer."""
    warehouse_name: str
    total_items: int
    total_units: int
    low_stock_items: int
    items: list[InventoryLine] = field(default_factory=list)


WAREHOUSE_PATTERNS = [
    re.compile(r"show me warehouses", re.IGNORECASE),
    re.compile(r"list warehouses", re.IGNORECASE),
    re.compile(r"warehouse list", re.IGNORECASE),
    re.compile(r"all warehouses", re.IGNORECASE),
]

# Order matters: the most specific phrasing wins
INVENTORY_PATTERNS = [
    re.compile(r"show me inventory for (.+)", re.IGNORECASE),
    re.compile(r"inventory for (.+)", re.IGNORECASE),
    re.compile(r"what'?s in (.+)", re.IGNORECASE),
    re.compile(r"show (.+) inventory", re.IGNORECASE),
    re.compile(r"(.+) stock", re.IGNORECASE),
    re.compile(r"(.+) inventory", re.IGNORECASE),
]

_TRAILING_PUNCT = re.compile(r"[\s?.!]+$")
_WAREHOUSE_SUFFIX = re.compile(r"\s+warehouse$", re.IGNORECASE)


def _clean_name(raw: str) -> str:
    name = _TRAILING_PUNCT.sub("", raw.strip())
    name = _WAREHOUSE_SUFFIX.sub("", name)
    if name.lower().startswith("the "):
        name = name[4:]
    return name.strip()


def parse_chat_intent(message: str) -> ChatIntent:
    """Classify a chat message."""
    query = message.strip().lower()

    for pattern in WAREHOUSE_PATTERNS:
        if pattern.search(query):
            return ChatIntent(type="warehouse_query", confidence=0.8, original_query=message)

    for pattern in INVENTORY_PATTERNS:
        match = pattern.search(query)
        if match:
            name = _clean_name(match.group(1))
            if name:
                return ChatIntent(
                    type="inventory_query",
                    warehouse_name=name,
                    confidence=0.9,
                    original_query=message,
                )

    if "help" in query or "what can you do" in query:
        return ChatIntent(type="general", confidence=0.7, original_query=message)

    return ChatIntent(type="unknown", confidence=0.1, original_query=message)


def find_warehouse_by_name(
    warehouse_name: str, warehouses: Iterable[WarehouseSummary],
) -> WarehouseSummary | None:
    """
    Fuzzy lookup, first hit wins:
    1) exact name (case-insensitive)
    2) either name contains the other
    3) warehouse name contains the query's first word
    """
    candidates = list(warehouses)
    normalized = warehouse_name.strip().lower()
    if not normalized:
        return None

    for w in candidates:
        if w.name.lower() == normalized:
            return w

    for w in candidates:
        name = w.name.lower()
        if normalized in name or name in normalized:
            return w

    first_word = normalized.split()[0]
    for w in candidates:
        if first_word in w.name.lower():
            return w

    return None


def _item_line(item: InventoryLine) -> str:
    return (
        f"• {item.name} ({item.sku}): {item.quantity} units "
        f"in bin {item.bin_location} - {item.status}\n"
    )


def format_inventory_response(data: InventorySnapshot) -> str:
    """Markdown summary of a warehouse's inventory for the chat panel."""
    response = f"📦 **{data.warehouse_name} Inventory**\n\n"
    response += "**Summary:**\n"
    response += f"• Total Items: {data.total_items}\n"
    response += f"• Total Units: {data.total_units:,}\n"
    response += f"• Low Stock Items: {data.low_stock_items}\n\n"

    if not data.items:
        response += "This warehouse is currently empty."
        return response

    response += "**Inventory Details:**\n"

    # group by category when there is more than one
    categories = list(dict.fromkeys(i.category for i in data.items if i.category))
    if len(categories) > 1:
        for category in categories:
            response += f"\n**{category}:**\n"
            for item in data.items:
                if item.category == category:
                    response += _item_line(item)
        uncategorized = [i for i in data.items if not i.category]
        if uncategorized:
            response += "\n**Other:**\n"
            for item in uncategorized:
                response += _item_line(item)
    else:
        for item in data.items:
            response += _item_line(item)

    if data.low_stock_items > 0:
        response += f"\n⚠️ **Alert:** {data.low_stock_items} items are running low on stock!"

    return response


def format_warehouses_response(warehouses: list[WarehouseSummary]) -> str:
    """Markdown overview of every warehouse."""
    response = "🏭 **Warehouse Overview**\n\n"

    if not warehouses:
        response += "No warehouses found."
        return response

    for w in warehouses:
        response += f"**{w.name}**\n"
        response += f"• Location: {w.city}, {w.state}\n"
        response += f"• Utilization: {w.utilization_pct:.1f}%\n"
        response += f"• Status: {w.status}\n\n"

    response += '💡 **Tip:** Ask "Show me inventory for [warehouse name]" to see detailed inventory.'
    return response
