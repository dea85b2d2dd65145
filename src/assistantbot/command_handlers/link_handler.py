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
from assistantbot.types.directive_error import DirectiveError
from assistantbot.types.items import Link
from assistantbot.utils.urls import extract_title_from_url
from assistantbot.utils.urls import find_urls

logger: Final = logging.getLogger(__name__)


def _format_link(link: Link) -> str:
    return f"#{link.id} - [{link.title}]({link.url})"


@final
class LinkHandler(CommandHandler):
    def __init__(self, app_state: AppState) -> None:
        super().__init__(app_state, variable=AssistantVariable.LINK)

    @override
    async def handle_directive(
        self,
        message: AssistantMessage,
        chat_message: ChatMessage,
    ) -> Optional[list[ChatResponse]]:
        store: Final = self._app_state.item_store
        list_request: Final = get_list_request(message)
        if list_request is not None:
            links: Final = store.get_links(chat_message.sender_name, tag=list_request.tag)
            return respond(
                format_item_list(
                    links,
                    _format_link,
                    empty_text="You have no saved links.",
                    heading=None if list_request.tag is None else f"Links tagged '{list_request.tag}':",
                ),
                chat_message,
            )

        value: Final = get_text_value(message)
        if value is None:
            return None
        urls: Final = find_urls(value)
        if not urls:
            raise DirectiveError(f"I couldn't find a URL in '{value}'.")
        url: Final = urls[0] if "://" in urls[0] else f"https://{urls[0]}"

        link: Final = store.add_link(
            chat_message.sender_name,
            url=url,
            title=message.flag_text(AssistantFlag.TITLE) or extract_title_from_url(url),
            description=message.flag_text(AssistantFlag.DESCRIPTION) or "",
            tag=message.flag_text(AssistantFlag.TAG) or None,
        )
        logger.info(f"Saved link #{link.id} ({link.url}) for {chat_message.sender_name}")
        return respond(f"Link saved as '{link.title}' with id #{link.id}.", chat_message)

    @property
    @override
    def usage(self) -> str:
        return (
            f"{self._variable_marker()} <url> [{self._flag_marker('title')} <title>] "
            + f"[{self._flag_marker('description')} <text>] [{self._flag_marker('tag')} <tag>] "
            + f"| {self._variable_marker()} {self._flag_marker('list')}"
        )

    @property
    @override
    def description(self) -> str:
        return "Save a link (the title is derived from the URL unless given) or list your saved links."
