import logging
from typing import Final
from typing import final
from typing import override

from assistantbot.app_state import AppState
from assistantbot.command_handlers.command_handler import CommandHandler
from assistantbot.command_handlers.loader import load_command_handlers
from assistantbot.config import Config
from assistantbot.conversation_history import ConversationHistory
from assistantbot.directives.constants import AssistantVariable
from assistantbot.llm.client import LlmClient
from assistantbot.stores.item_store import InMemoryItemStore
from assistantbot.stores.item_store import ItemStore

logger: Final = logging.getLogger(__name__)


@final
class Globals(AppState):
    def __init__(self) -> None:
        self._config: Final = Config()
        self._llm_client: Final = LlmClient.from_config(self._config)
        self._conversation_history: Final = ConversationHistory(
            max_messages=self._config.history_max_messages,
            ttl=self._config.history_ttl,
        )
        self._item_store: Final = InMemoryItemStore()
        self._command_handlers: Final = load_command_handlers(self)
        logger.info(
            f"Initialized with markers '{self._config.markers.variable}' / '{self._config.markers.flag}' "
            + f"and model '{self._config.llm_model}'"
        )

    @property
    @override
    def config(self) -> Config:
        return self._config

    @property
    @override
    def llm_client(self) -> LlmClient:
        return self._llm_client

    @property
    @override
    def conversation_history(self) -> ConversationHistory:
        return self._conversation_history

    @property
    @override
    def item_store(self) -> ItemStore:
        return self._item_store

    @property
    @override
    def command_handlers(self) -> dict[AssistantVariable, CommandHandler]:
        return self._command_handlers
