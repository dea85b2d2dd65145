from abc import ABC
from abc import abstractmethod
from typing import Final
from typing import Optional

from assistantbot.app_state import AppState
from assistantbot.directives.assistant_message import AssistantMessage
from assistantbot.directives.constants import AssistantVariable
from assistantbot.types.chat_message import ChatMessage
from assistantbot.types.chat_response import ChatResponse


class CommandHandler(ABC):
    def __init__(self, app_state: AppState, *, variable: AssistantVariable) -> None:
        self._app_state: Final = app_state
        self._variable: Final = variable

    @abstractmethod
    async def handle_directive(
        self,
        message: AssistantMessage,
        chat_message: ChatMessage,
    ) -> Optional[list[ChatResponse]]:
        """
        Carry out the directive and return a list of chat responses. If the directive
        is used in a wrong way, this function should return `None`. User-facing
        failures (e.g. an unparsable time) are raised as `DirectiveError`.
        :param message: The interpreted assistant message.
        :param chat_message: The chat message the directive was sent with.
        :return: A list of responses or `None` if the directive was used incorrectly.
        """
        pass

    @property
    @abstractmethod
    def usage(self) -> str:
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        pass

    def _variable_marker(self) -> str:
        return f"{self._app_state.config.markers.variable}{self._variable}"

    def _flag_marker(self, name: str) -> str:
        return f"{self._app_state.config.markers.flag}{name}"
