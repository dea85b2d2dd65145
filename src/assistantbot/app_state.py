from abc import ABC
from abc import abstractmethod
from typing import TYPE_CHECKING

from assistantbot.config import Config
from assistantbot.conversation_history import ConversationHistory
from assistantbot.directives.constants import AssistantVariable
from assistantbot.llm.client import LlmClient
from assistantbot.stores.item_store import ItemStore

if TYPE_CHECKING:
    # We have to avoid circular imports, so we use a string annotation below.
    from assistantbot.command_handlers.command_handler import CommandHandler


class AppState(ABC):
    @property
    @abstractmethod
    def config(self) -> Config:
        pass

    @property
    @abstractmethod
    def llm_client(self) -> LlmClient:
        pass

    @property
    @abstractmethod
    def conversation_history(self) -> ConversationHistory:
        pass

    @property
    @abstractmethod
    def item_store(self) -> ItemStore:
        pass

    @property
    @abstractmethod
    def command_handlers(self) -> dict[AssistantVariable, "CommandHandler"]:
        pass

    async def aclose(self) -> None:
        """Release process-wide resources. Called once on shutdown."""
        self.conversation_history.clear()
        await self.llm_client.aclose()
