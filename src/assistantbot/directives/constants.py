from collections.abc import Mapping
from enum import StrEnum
from typing import Final
from typing import NamedTuple
from typing import Optional
from typing import final


@final
class AssistantVariable(StrEnum):
    ALERT = "alert"
    TASK = "task"
    NOTE = "note"
    LINK = "link"
    QUESTION = "question"


@final
class AssistantFlag(StrEnum):
    DESCRIPTION = "description"
    LIST = "list"
    LIST_TAG = "list_tag"
    TAG = "tag"
    TITLE = "title"


VARIABLE_ALIASES: Final[dict[str, AssistantVariable]] = {
    "alert": AssistantVariable.ALERT,
    "a": AssistantVariable.ALERT,
    "task": AssistantVariable.TASK,
    "t": AssistantVariable.TASK,
    "note": AssistantVariable.NOTE,
    "n": AssistantVariable.NOTE,
    "link": AssistantVariable.LINK,
    "lk": AssistantVariable.LINK,
    "question": AssistantVariable.QUESTION,
    "q": AssistantVariable.QUESTION,
}

FLAG_ALIASES: Final[dict[str, AssistantFlag]] = {
    "description": AssistantFlag.DESCRIPTION,
    "d": AssistantFlag.DESCRIPTION,
    "tag": AssistantFlag.TAG,
    "t": AssistantFlag.TAG,
    "list": AssistantFlag.LIST,
    "l": AssistantFlag.LIST,
    "listTag": AssistantFlag.LIST_TAG,
    "lt": AssistantFlag.LIST_TAG,
    "title": AssistantFlag.TITLE,
    "tt": AssistantFlag.TITLE,
}


@final
class FlagOptions(NamedTuple):
    default_value: Optional[bool]  # `None` means the flag collects the words that follow it.


@final
class VariableOptions(NamedTuple):
    default_value: Optional[bool]  # `None` means the variable collects the words that follow it.
    many_words: bool = False
    flags: Mapping[AssistantFlag, FlagOptions] = {}


_LIST: Final = FlagOptions(default_value=True)
_VALUE: Final = FlagOptions(default_value=None)

VARIABLE_OPTIONS: Final[dict[AssistantVariable, VariableOptions]] = {
    AssistantVariable.ALERT: VariableOptions(
        default_value=None,
        flags={AssistantFlag.LIST: _LIST},
    ),
    AssistantVariable.TASK: VariableOptions(
        default_value=None,
        many_words=True,
        flags={
            AssistantFlag.DESCRIPTION: _VALUE,
            AssistantFlag.LIST: _LIST,
            AssistantFlag.TAG: _VALUE,
            AssistantFlag.LIST_TAG: _VALUE,
        },
    ),
    AssistantVariable.NOTE: VariableOptions(
        default_value=None,
        many_words=True,
        flags={
            AssistantFlag.DESCRIPTION: _VALUE,
            AssistantFlag.LIST: _LIST,
            AssistantFlag.TAG: _VALUE,
            AssistantFlag.LIST_TAG: _VALUE,
        },
    ),
    AssistantVariable.LINK: VariableOptions(
        default_value=None,
        many_words=True,
        flags={
            AssistantFlag.DESCRIPTION: _VALUE,
            AssistantFlag.TAG: _VALUE,
            AssistantFlag.LIST: _LIST,
            AssistantFlag.LIST_TAG: _VALUE,
            AssistantFlag.TITLE: _VALUE,
        },
    ),
    AssistantVariable.QUESTION: VariableOptions(default_value=True),
}
