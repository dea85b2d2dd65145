from enum import StrEnum
from typing import NamedTuple
from typing import final


@final
class Role(StrEnum):
    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


@final
class ConversationMessage(NamedTuple):
    role: Role
    content: str
