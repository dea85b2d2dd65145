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
from assistantbot.types.items import Task

logger: Final = logging.getLogger(__name__)


def _format_task(task: Task) -> str:
    return f"#{task.id} - *{task.title}*: {task.description}".removesuffix(": ")


@final
class TaskHandler(CommandHandler):
    def __init__(self, app_state: AppState) -> None:
        super().__init__(app_state, variable=AssistantVariable.TASK)

    @override
    async def handle_directive(
        self,
        message: AssistantMessage,
        chat_message: ChatMessage,
    ) -> Optional[list[ChatResponse]]:
        store: Final = self._app_state.item_store
        list_request: Final = get_list_request(message)
        if list_request is not None:
            tasks: Final = store.get_tasks(chat_message.sender_name, tag=list_request.tag)
            return respond(
                format_item_list(
                    tasks,
                    _format_task,
                    empty_text="You have no tasks.",
                    heading=None if list_request.tag is None else f"Tasks tagged '{list_request.tag}':",
                ),
                chat_message,
            )

        title: Final = get_text_value(message)
        if title is None:
            return None
        task: Final = store.add_task(
            chat_message.sender_name,
            title=title,
            description=message.flag_text(AssistantFlag.DESCRIPTION) or "",
            tag=message.flag_text(AssistantFlag.TAG) or None,
        )
        logger.info(f"Created task #{task.id} for {chat_message.sender_name}")
        return respond(f"Task created with id #{task.id}.", chat_message)

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
        return "Create a task with an optional description and tag, or list your tasks."
