"""
chat_messages table — chat panel conversation log
"""

import enum
from datetime import datetime, timezone

from sqlalchemy import Column, Integer, Text, Enum, DateTime, JSON

from blueship.database import Base


class ChatRole(str, enum.Enum):
    USER = "USER"
    ASSISTANT = "ASSISTANT"
    SYSTEM = "SYSTEM"


class ChatMessage(Base):
    __tablename__ = "chat_messages"

    id = Column(Integer, primary_key=True, autoincrement=True)
    role = Column(Enum(ChatRole), nullable=False)
    content = Column(Text, nullable=False)
    # "metadata" is reserved on declarative classes
    message_metadata = Column("metadata", JSON, nullable=True)  # intent, warehouse, confidence
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))
