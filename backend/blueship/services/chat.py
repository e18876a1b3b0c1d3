"""
Chat service — answers chat panel messages.
- parse intent -> look the data up through InventoryQueryService -> format text
- unmatched messages go to the LLM when one is configured, otherwise a canned reply
- every exchange is appended to chat_messages; a failed write is logged, not raised
"""

import asyncio
import logging
from datetime import datetime, timezone

from sqlalchemy.orm import sessionmaker

from blueship.agents.llm_client import ChatLLM, default_llm
from blueship.config import settings
from blueship.models import ChatMessage
from blueship.models.chat_message import ChatRole
from blueship.schemas.chat import ChatIntentResponse, ChatMessageResponse, ChatReply
from blueship.schemas.inventory import InventoryFilters
from blueship.services.chat_intent import (
    ChatIntent, InventoryLine, InventorySnapshot, find_warehouse_by_name,
    format_inventory_response, format_warehouses_response, parse_chat_intent,
)
from blueship.services.inventory_query import InventoryQueryService
from blueship.services.utils import enum_val

logger = logging.getLogger(__name__)

HELP_TEXT = (
    "I can help with your warehouses and inventory. Try:\n"
    '• "List warehouses"\n'
    '• "Show me inventory for Chicago DC"\n'
    '• "Atlanta stock"'
)

FALLBACK_TEXT = (
    "I'm not sure how to help with that yet. "
    'Ask "help" to see what I can look up for you.'
)


class ChatService:
    def __init__(
        self,
        inventory: InventoryQueryService,
        session_factory: sessionmaker,
        llm: ChatLLM | None = None,
    ):
        self._inventory = inventory
        self._session_factory = session_factory
        self._llm = llm if llm is not None else default_llm

    # ── lookups (blocking) ──

    def inventory_snapshot(self, warehouse_id: int, warehouse_name: str) -> InventorySnapshot:
        """Walk every inventory page for the warehouse; counts come from the stats query."""
        stats = self._inventory.get_inventory_stats(warehouse_id)
        lines: list[InventoryLine] = []
        page = 1
        while True:
            result = self._inventory.query_inventory(
                warehouse_id, InventoryFilters(page=page, limit=settings.MAX_PAGE_SIZE),
            )
            lines.extend(
                InventoryLine(
                    sku=item.product.sku,
                    name=item.product.name,
                    quantity=item.quantity,
                    bin_location=item.bin_location,
                    status=item.status,
                    category=item.product.category,
                )
                for item in result.items
            )
            if not result.has_next_page:
                break
            page += 1

        return InventorySnapshot(
            warehouse_name=warehouse_name,
            total_items=stats.total_items,
            total_units=stats.total_units,
            low_stock_items=stats.low_stock_items,
            items=lines,
        )

    def _answer(self, intent: ChatIntent) -> str | None:
        """Text for the intents we can answer from data; None means ask the LLM."""
        if intent.type == "warehouse_query":
            return format_warehouses_response(self._inventory.list_warehouses())

        if intent.type == "inventory_query":
            warehouse = find_warehouse_by_name(
                intent.warehouse_name or "", self._inventory.list_warehouses(),
            )
            if warehouse is None:
                return (
                    f'I couldn\'t find a warehouse matching "{intent.warehouse_name}". '
                    'Ask "list warehouses" to see what is available.'
                )
            intent.warehouse_id = warehouse.id
            intent.warehouse_name = warehouse.name
            return format_inventory_response(self.inventory_snapshot(warehouse.id, warehouse.name))

        if intent.type == "general":
            return HELP_TEXT

        return None

    def _save(self, role: ChatRole, content: str, metadata: dict | None = None):
        try:
            with self._session_factory() as db:
                db.add(ChatMessage(role=role, content=content, message_metadata=metadata))
                db.commit()
        except Exception as e:
            logger.error(f"Failed to store chat message: {e}")

    # ── public ──

    async def reply(self, message: str) -> ChatReply:
        intent = parse_chat_intent(message)
        loop = asyncio.get_running_loop()

        await loop.run_in_executor(None, self._save, ChatRole.USER, message, None)
        text = await loop.run_in_executor(None, self._answer, intent)

        if text is None:
            if self._llm.available:
                warehouses = await loop.run_in_executor(None, self._inventory.list_warehouses)
                text = await self._llm.answer(message, [w.name for w in warehouses])
            if not text:
                text = FALLBACK_TEXT

        metadata = {
            "intent": intent.type,
            "confidence": intent.confidence,
            "warehouseId": intent.warehouse_id,
            "warehouseName": intent.warehouse_name,
        }
        await loop.run_in_executor(None, self._save, ChatRole.ASSISTANT, text, metadata)
        logger.info(f"[Chat] {intent.type} ({intent.confidence:.1f}) -> {len(text)} chars")

        return ChatReply(
            message=text,
            intent=ChatIntentResponse(
                type=intent.type,
                warehouse_name=intent.warehouse_name,
                warehouse_id=intent.warehouse_id,
                confidence=intent.confidence,
            ),
            timestamp=datetime.now(timezone.utc),
        )

    def history(self, limit: int = 50) -> list[ChatMessageResponse]:
        """Most recent messages, oldest first."""
        try:
            with self._session_factory() as db:
                rows = (
                    db.query(ChatMessage)
                    .order_by(ChatMessage.created_at.desc(), ChatMessage.id.desc())
                    .limit(limit)
                    .all()
                )
                return [
                    ChatMessageResponse(
                        id=m.id,
                        role=enum_val(m.role),
                        content=m.content,
                        metadata=m.message_metadata,
                        created_at=m.created_at,
                    )
                    for m in reversed(rows)
                ]
        except Exception:
            logger.exception("Failed to load chat history")
            return []
