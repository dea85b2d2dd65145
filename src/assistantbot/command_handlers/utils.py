from collections.abc import Callable
from collections.abc import Sequence
from typing import Final
from typing import NamedTuple
from typing import Optional
from typing import final

from assistantbot.directives.assistant_message import AssistantMessage
from assistantbot.directives.constants import AssistantFlag
from assistantbot.types.chat_message import ChatMessage
from assistantbot.types.chat_response import ChatResponse
from assistantbot.utils.strings import truncate_text

MAX_LIST_ENTRY_LENGTH: Final = 120


def respond(text: str, chat_message: ChatMessage) -> list[ChatResponse]:
    return [ChatResponse(text=text, chat_message=chat_message)]


def format_item_list[T](
    items: Sequence[T],
    format_item: Callable[[T], str],
    *,
    empty_text: str,
    heading: Optional[str] = None,
) -> str:
    if not items:
        return empty_text if heading is None else f"{heading}\n{empty_text}"
    lines: Final = [f"• {truncate_text(format_item(item), MAX_LIST_ENTRY_LENGTH)}" for item in items]
    if heading is not None:
        lines.insert(0, heading)
    return "\n".join(lines)


@final
class ListRequest(NamedTuple):
    tag: Optional[str]  # `None` lists everything.


def get_list_request(message: AssistantMessage) -> Optional[ListRequest]:
    """
    Returns what to list if the message asks for a listing (`-list` or
    `-listTag <tag>`), otherwise `None`. A blank tag lists everything.
    """
    if message.flags.get(AssistantFlag.LIST):
        return ListRequest(tag=None)
    if AssistantFlag.LIST_TAG in message.flags:
        return ListRequest(tag=message.flag_text(AssistantFlag.LIST_TAG) or None)
    return None


def get_text_value(message: AssistantMessage) -> Optional[str]:
    if not isinstance(message.value, str) or not message.value.strip():
        return None
    return message.value.strip()
