from typing import Final
from typing import NamedTuple
from typing import Optional
from typing import Self
from typing import final

from assistantbot.directives.constants import FLAG_ALIASES
from assistantbot.directives.constants import VARIABLE_ALIASES
from assistantbot.directives.constants import VARIABLE_OPTIONS
from assistantbot.directives.constants import AssistantFlag
from assistantbot.directives.constants import AssistantVariable
from assistantbot.directives.constants import VariableOptions
from assistantbot.directives.markers import DEFAULT_MARKERS
from assistantbot.directives.markers import DirectiveMarkers
from assistantbot.directives.parser import TOKEN_SEPARATOR

type DirectiveValue = str | bool


@final
class EmptyMessageError(ValueError):
    pass


@final
class AssistantMessage(NamedTuple):
    clean_message: str
    variable: Optional[AssistantVariable]
    value: Optional[DirectiveValue]
    flags: dict[AssistantFlag, DirectiveValue]

    @classmethod
    def from_text(cls, text: str, *, markers: DirectiveMarkers = DEFAULT_MARKERS) -> Self:
        """
        Interpret a message like `.task buy milk -tag home` using the known
        variable and flag aliases.

        Unlike `parse_directives()`, a variable may take several words as its
        value (up to the next flag) and flags may carry values of their own.
        Unknown variables are kept as text; flags that the selected variable
        does not accept are dropped.
        """
        if not text.strip():
            raise EmptyMessageError("Message is required.")

        variable: Optional[AssistantVariable] = None
        options: Optional[VariableOptions] = None
        value: Optional[DirectiveValue] = None
        flags: Final[dict[AssistantFlag, DirectiveValue]] = {}
        clean_words: Final[list[str]] = []

        value_words: Optional[list[str]] = None
        pending_flag: Optional[AssistantFlag] = None
        flag_words: list[str] = []

        for word in text.split(TOKEN_SEPARATOR):
            if not word:
                # Runs of spaces never produce empty value words.
                continue

            if word.startswith(markers.variable):
                selected = VARIABLE_ALIASES.get(word.removeprefix(markers.variable))
                if selected is not None:
                    if value_words is not None:
                        value = TOKEN_SEPARATOR.join(value_words)
                    if pending_flag is not None:
                        flags[pending_flag] = TOKEN_SEPARATOR.join(flag_words)
                        pending_flag = None
                    variable = selected
                    options = VARIABLE_OPTIONS[selected]
                    value = options.default_value
                    value_words = [] if options.default_value is None else None
                    continue

            if value_words is not None:
                assert options is not None
                if word.startswith(markers.flag):
                    value = TOKEN_SEPARATOR.join(value_words)
                    value_words = None
                elif not options.many_words:
                    value = word
                    value_words = None
                    continue
                else:
                    value_words.append(word)
                    continue

            if pending_flag is not None:
                if not word.startswith(markers.flag):
                    flag_words.append(word)
                    continue
                flags[pending_flag] = TOKEN_SEPARATOR.join(flag_words)
                pending_flag = None

            if word.startswith(markers.flag):
                flag = FLAG_ALIASES.get(word.removeprefix(markers.flag))
                flag_options = options.flags.get(flag) if options is not None and flag is not None else None
                if flag is None or flag_options is None:
                    continue
                if flag_options.default_value is not None:
                    flags[flag] = flag_options.default_value
                else:
                    pending_flag = flag
                    flag_words = []
                continue

            clean_words.append(word)

        if value_words is not None:
            value = TOKEN_SEPARATOR.join(value_words)
        if pending_flag is not None:
            flags[pending_flag] = TOKEN_SEPARATOR.join(flag_words)

        return cls(
            clean_message=TOKEN_SEPARATOR.join(clean_words),
            variable=variable,
            value=value,
            flags=flags,
        )

    def flag_text(self, flag: AssistantFlag) -> Optional[str]:
        """The trimmed text value of a flag, `None` if absent or not textual."""
        flag_value: Final = self.flags.get(flag)
        if not isinstance(flag_value, str):
            return None
        return flag_value.strip()
