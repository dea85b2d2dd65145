from typing import Final
from typing import final

from cachetools import TTLCache

from assistantbot.types.conversation_message import ConversationMessage


@final
class ConversationHistory:
    """
    Recent conversation messages per sender. Idle conversations expire after
    `ttl` seconds; each conversation keeps at most `max_messages` entries.
    """

    _MAX_CONVERSATIONS = 1000

    def __init__(self, *, max_messages: int, ttl: float) -> None:
        if max_messages <= 0:
            raise ValueError(f"max_messages must be positive, got {max_messages}.")
        self._max_messages: Final = max_messages
        self._conversations: Final[TTLCache[str, list[ConversationMessage]]] = TTLCache(
            maxsize=ConversationHistory._MAX_CONVERSATIONS,
            ttl=ttl,
        )

    def get(self, sender_name: str) -> list[ConversationMessage]:
        return list(self._conversations.get(sender_name, []))

    def append(self, sender_name: str, *messages: ConversationMessage) -> None:
        # Assignment (not in-place mutation) refreshes the expiry time.
        history: Final = self._conversations.get(sender_name, []) + list(messages)
        self._conversations[sender_name] = history[-self._max_messages :]

    def clear(self) -> None:
        self._conversations.clear()

    def __len__(self) -> int:
        return len(self._conversations)
