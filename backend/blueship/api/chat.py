"""
Chat API — chat panel messages and history
"""

from fastapi import APIRouter, Depends, Query

from blueship.api.deps import get_chat_service
from blueship.schemas.chat import ChatMessageResponse, ChatReply, ChatRequest
from blueship.services.chat import ChatService

router = APIRouter(prefix="/api/chat", tags=["chat"])


@router.post("", response_model=ChatReply)
async def post_message(req: ChatRequest, service: ChatService = Depends(get_chat_service)):
    """Answer a chat message"""
    return await service.reply(req.message)


@router.get("/history", response_model=list[ChatMessageResponse])
def get_history(
    limit: int = Query(50, ge=1, le=200),
    service: ChatService = Depends(get_chat_service),
):
    """Recent chat messages, oldest first"""
    return service.history(limit)
