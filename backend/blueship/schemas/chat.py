"""
Chat panel Pydantic schemas
"""

from datetime import datetime

from pydantic import BaseModel, Field

from blueship.schemas.common import CamelModel


class ChatRequest(BaseModel):
    message: str = Field(min_length=1, max_length=2000)


class ChatIntentResponse(CamelModel):
    type: str
    warehouse_name: str | None = None
    warehouse_id: int | None = None
    confidence: float


class ChatReply(CamelModel):
    message: str
    intent: ChatIntentResponse
    timestamp: datetime


class ChatMessageResponse(CamelModel):
    id: int
    role: str
    content: str
    metadata: dict | None = None
    created_at: datetime | None = None
