import logging
from typing import Annotated
from typing import Final
from typing import final

from fastapi import Depends
from fastapi.routing import APIRouter
from pydantic import BaseModel
from pydantic import Field

from assistantbot.app_state import AppState
from assistantbot.core import process_chat_message
from assistantbot.dependencies import get_app_state
from assistantbot.types.chat_message import ChatMessage

router: Final = APIRouter()

logger: Final = logging.getLogger(__name__)


@final
class MessageRequest(BaseModel):
    text: str
    sender_name: str = Field(min_length=1)


@final
class MessageResponse(BaseModel):
    responses: list[str]


@router.post("/messages")
async def post_message(
    request: MessageRequest,
    app_state: Annotated[AppState, Depends(get_app_state)],
) -> MessageResponse:
    responses: Final = await process_chat_message(
        ChatMessage(text=request.text, sender_name=request.sender_name),
        app_state,
    )
    logger.debug(f"Answered {request.sender_name} with {len(responses)} response(s)")
    return MessageResponse(responses=[response.text for response in responses])
