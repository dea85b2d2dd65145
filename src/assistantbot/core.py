import logging
from typing import Final

from assistantbot.app_state import AppState
from assistantbot.command_handlers.utils import respond
from assistantbot.directives.assistant_message import AssistantMessage
from assistantbot.llm.prompts import ASSISTANT_SYSTEM_PROMPT
from assistantbot.llm.prompts import system_message
from assistantbot.types.chat_message import ChatMessage
from assistantbot.types.chat_response import ChatResponse
from assistantbot.types.conversation_message import ConversationMessage
from assistantbot.types.conversation_message import Role
from assistantbot.types.directive_error import DirectiveError

logger: Final = logging.getLogger(__name__)

LLM_FAILURE_RESPONSE: Final = "Sorry, I can't answer right now. Please try again later."


async def process_chat_message(chat_message: ChatMessage, app_state: AppState) -> list[ChatResponse]:
    logger.debug(f"Processing chat message from {chat_message.sender_name}: {chat_message.text}")
    text: Final = chat_message.text.strip()
    if not text:
        return []

    skip_ai_prefix: Final = app_state.config.skip_ai_prefix
    if text.startswith(skip_ai_prefix):
        # Recorded as context for later, but not answered.
        remainder: Final = text.removeprefix(skip_ai_prefix).strip()
        if remainder:
            app_state.conversation_history.append(
                chat_message.sender_name,
                ConversationMessage(role=Role.USER, content=remainder),
            )
        return []

    message: Final = AssistantMessage.from_text(text, markers=app_state.config.markers)
    handler: Final = None if message.variable is None else app_state.command_handlers.get(message.variable)
    if handler is None:
        return await _answer_with_llm(message.clean_message or text, chat_message, app_state)

    logger.info(f"Processing directive '{message.variable}' from user {chat_message.sender_name}")
    try:
        responses: Final = await handler.handle_directive(message, chat_message)
    except DirectiveError as e:
        logger.info(f"Directive '{message.variable}' from {chat_message.sender_name} failed: {e}")
        return respond(str(e), chat_message)

    if responses is None:
        return respond(f"Usage: {handler.usage}", chat_message)
    return responses


async def _answer_with_llm(text: str, chat_message: ChatMessage, app_state: AppState) -> list[ChatResponse]:
    history: Final = app_state.conversation_history
    user_message: Final = ConversationMessage(role=Role.USER, content=text)
    reply: Final = await app_state.llm_client.chat_completion(
        [
            system_message(ASSISTANT_SYSTEM_PROMPT, app_state.config),
            *history.get(chat_message.sender_name),
            user_message,
        ]
    )
    if reply is None:
        return respond(LLM_FAILURE_RESPONSE, chat_message)
    history.append(chat_message.sender_name, user_message, reply)
    return respond(reply.content, chat_message)
