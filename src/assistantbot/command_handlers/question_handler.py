from typing import Final
from typing import Optional
from typing import final
from typing import override

from assistantbot.app_state import AppState
from assistantbot.command_handlers.command_handler import CommandHandler
from assistantbot.command_handlers.utils import respond
from assistantbot.directives.assistant_message import AssistantMessage
from assistantbot.directives.constants import AssistantVariable
from assistantbot.llm.prompts import QUESTION_SYSTEM_PROMPT
from assistantbot.llm.prompts import system_message
from assistantbot.types.chat_message import ChatMessage
from assistantbot.types.chat_response import ChatResponse
from assistantbot.types.conversation_message import ConversationMessage
from assistantbot.types.conversation_message import Role
from assistantbot.types.directive_error import DirectiveError


@final
class QuestionHandler(CommandHandler):
    """One-shot question to the LLM, without the conversation history."""

    def __init__(self, app_state: AppState) -> None:
        super().__init__(app_state, variable=AssistantVariable.QUESTION)

    @override
    async def handle_directive(
        self,
        message: AssistantMessage,
        chat_message: ChatMessage,
    ) -> Optional[list[ChatResponse]]:
        if not message.clean_message:
            return None
        reply: Final = await self._app_state.llm_client.chat_completion(
            [
                system_message(QUESTION_SYSTEM_PROMPT, self._app_state.config),
                ConversationMessage(role=Role.USER, content=message.clean_message),
            ]
        )
        if reply is None:
            raise DirectiveError("Sorry, I couldn't generate an answer right now.")
        return respond(reply.content, chat_message)

    @property
    @override
    def usage(self) -> str:
        return f"{self._variable_marker()} <question>"

    @property
    @override
    def description(self) -> str:
        return "Ask a single question without the conversation history."
