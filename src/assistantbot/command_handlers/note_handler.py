import logging
from typing import Final
from typing import Optional
from typing import final
from typing import override

from assistantbot.app_state import AppState
from assistantbot.command_handlers.command_handler import CommandHandler
from assistantbot.command_handlers.utils import format_item_list
from assistantbot.command_handlers.utils import get_list_request
from assistantbot.command_handlers.utils import get_text_value
from assistantbot.command_handlers.utils import respond
from assistantbot.directives.assistant_message import AssistantMessage
from assistantbot.directives.constants import AssistantFlag
from assistantbot.directives.constants import AssistantVariable
from assistantbot.types.chat_message import ChatMessage
from assistantbot.types.chat_response import ChatResponse
from assistantbot.types.items import Note

logger: Final = logging.getLogger(__name__)


def _format_note(note: Note) -> str:
    if not note.description:
        return f"#{note.id} - **{note.title}**"
    return f"#{note.id} - **{note.title}:** {note.description}"


@final
class NoteHandler(CommandHandler):
    def __init__(self, app_state: AppState) -> None:
        super().__init__(app_state, variable=AssistantVariable.NOTE)

    @override
    async def handle_directive(
        self,
        message: AssistantMessage,
        chat_message: ChatMessage,
    ) -> Optional[list[ChatResponse]]:
        store: Final = self._app_state.item_store
        list_request: Final = get_list_request(message)
        if list_request is not None:
            notes: Final = store.get_notes(chat_message.sender_name, tag=list_request.tag)
            return respond(
                format_item_list(
                    notes,
                    _format_note,
                    empty_text="You have no notes.",
                    heading=None if list_request.tag is None else f"Notes tagged '{list_request.tag}':",
                ),
                chat_message,
            )

        title: Final = get_text_value(message)
        if title is None:
            return None
        note: Final = store.add_note(
            chat_message.sender_name,
            title=title,
            description=message.flag_text(AssistantFlag.DESCRIPTION) or "",
            tag=message.flag_text(AssistantFlag.TAG) or None,
        )
        logger.info(f"Created note #{note.id} for {chat_message.sender_name}")
        return respond(f"Note created with id #{note.id}.", chat_message)

    @property
    @override
    def usage(self) -> str:
        return (
            f"{self._variable_marker()} <title> [{self._flag_marker('description')} <text>] "
            + f"[{self._flag_marker('tag')} <tag>] | {self._variable_marker()} {self._flag_marker('list')} "
            + f"| {self._variable_marker()} {self._flag_marker('listTag')} <tag>"
        )

    @property
    @override
    def description(self) -> str:
        return "Create a note with an optional description and tag, or list your notes."
