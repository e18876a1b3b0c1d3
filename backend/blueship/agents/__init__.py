"""
AI helpers
- llm_client: optional Claude fallback for the chat panel
"""

from blueship.agents.llm_client import ChatLLM, build_system_prompt, default_llm

__all__ = [
    "ChatLLM",
    "build_system_prompt",
    "default_llm",
]
