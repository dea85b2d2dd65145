from datetime import datetime
from enum import StrEnum
from typing import Final
from typing import Optional
from typing import final

from babel.dates import format_date
from babel.dates import format_time

from assistantbot.config import Config
from assistantbot.types.conversation_message import ConversationMessage
from assistantbot.types.conversation_message import Role


@final
class Placeholder(StrEnum):
    CURRENT_DATE = "{CURRENT_DATE}"
    CURRENT_TIME = "{CURRENT_TIME}"


ASSISTANT_SYSTEM_PROMPT: Final = (
    f"You are a helpful personal assistant inside a chat. Today is {Placeholder.CURRENT_DATE}, "
    + f"the current time is {Placeholder.CURRENT_TIME}. Answer briefly and use Markdown only when it helps."
)

QUESTION_SYSTEM_PROMPT: Final = (
    f"You are a concise assistant. Today is {Placeholder.CURRENT_DATE}. "
    + "Answer the question in a few sentences without asking follow-up questions."
)


def render_prompt(prompt: str, config: Config, *, now: Optional[datetime] = None) -> str:
    """Fill in the date and time placeholders, localized to the configured timezone and locale."""
    local_now: Final = (now or datetime.now(config.timezone)).astimezone(config.timezone)
    return prompt.replace(
        Placeholder.CURRENT_DATE,
        format_date(local_now.date(), locale=config.locale),
    ).replace(
        Placeholder.CURRENT_TIME,
        format_time(local_now, tzinfo=config.timezone, locale=config.locale),
    )


def system_message(prompt: str, config: Config) -> ConversationMessage:
    return ConversationMessage(role=Role.SYSTEM, content=render_prompt(prompt, config))
