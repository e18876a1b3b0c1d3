"""
Chat fallback LLM — answers chat messages the intent parser cannot place.
- Grounds the model in the warehouses the dashboard actually has.
- No API key -> not available, answer() returns None and the chat uses canned text.
- Timeouts and API errors are logged and also come back as None.
"""

import logging
from typing import Iterable

import anthropic

from blueship.config import settings

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are the assistant in a logistics dashboard. Answer briefly. "
    "You can only see the warehouse list given below; do not invent inventory numbers. "
    'For stock levels, tell the user to ask "Show me inventory for <warehouse>".'
)


def build_system_prompt(warehouse_names: Iterable[str]) -> str:
    names = [n for n in warehouse_names if n]
    listing = "\n".join(f"- {n}" for n in names) if names else "- (none)"
    return f"{SYSTEM_PROMPT}\n\nWarehouses:\n{listing}"


class ChatLLM:
    """Claude-backed answers for free-form chat messages."""

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        timeout: float | None = None,
        client: anthropic.AsyncAnthropic | None = None,
    ):
        self._api_key = settings.ANTHROPIC_API_KEY if api_key is None else api_key
        self._model = model or settings.LLM_MODEL
        self._timeout = timeout if timeout is not None else settings.LLM_TIMEOUT_SECONDS
        self._client = client

    @property
    def available(self) -> bool:
        return self._client is not None or bool(self._api_key)

    def _get_client(self) -> anthropic.AsyncAnthropic:
        if self._client is None:
            self._client = anthropic.AsyncAnthropic(
                api_key=self._api_key,
                timeout=self._timeout,
                max_retries=1,
            )
            logger.info(f"Claude client ready (model={self._model}, timeout={self._timeout:.0f}s)")
        return self._client

    async def answer(self, message: str, warehouse_names: Iterable[str] = ()) -> str | None:
        """Reply text, or None when unavailable or the call fails."""
        if not self.available:
            return None

        try:
            response = await self._get_client().messages.create(
                model=self._model,
                max_tokens=settings.LLM_MAX_TOKENS,
                temperature=settings.LLM_TEMPERATURE,
                system=build_system_prompt(warehouse_names),
                messages=[{"role": "user", "content": message}],
            )
        except anthropic.APITimeoutError:
            logger.warning(f"Chat LLM timed out after {self._timeout:.0f}s")
            return None
        except anthropic.APIError as e:
            logger.error(f"Chat LLM call failed: {e}")
            return None

        text = "".join(
            block.text for block in response.content if getattr(block, "type", None) == "text"
        ).strip()
        return text or None


# shared by request-scoped chat services
default_llm = ChatLLM()
