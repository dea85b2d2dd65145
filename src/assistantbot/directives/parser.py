from enum import Enum
from enum import auto
from typing import Final
from typing import NamedTuple
from typing import final

from assistantbot.directives.markers import DEFAULT_MARKERS
from assistantbot.directives.markers import DirectiveMarkers

TOKEN_SEPARATOR: Final = " "


@final
class TokenKind(Enum):
    VARIABLE_NAME = auto()
    VARIABLE_VALUE = auto()
    FLAG = auto()
    TEXT = auto()


@final
class ClassifiedToken(NamedTuple):
    text: str
    kind: TokenKind


@final
class ParseResult(NamedTuple):
    clean_message: str
    variables: dict[str, str]
    flags: list[str]


def classify_tokens(
    raw_message: str,
    *,
    markers: DirectiveMarkers = DEFAULT_MARKERS,
) -> list[ClassifiedToken]:
    """
    Split the message on single spaces and classify every token exactly once.

    A variable marker claims the following token as its value if that token is
    non-empty and not marker-prefixed itself. Otherwise the variable marker is
    plain text. Flag markers stand alone and never claim a following token.
    """
    tokens: Final = raw_message.split(TOKEN_SEPARATOR)
    consumed: Final = [False] * len(tokens)
    result: Final[list[ClassifiedToken]] = []

    for i, token in enumerate(tokens):
        if consumed[i]:
            result.append(ClassifiedToken(token, TokenKind.VARIABLE_VALUE))
            continue
        if token.startswith(markers.variable):
            next_token = tokens[i + 1] if i + 1 < len(tokens) else ""
            if next_token and not markers.is_marked(next_token):
                consumed[i + 1] = True
                result.append(ClassifiedToken(token, TokenKind.VARIABLE_NAME))
                continue
        elif token.startswith(markers.flag):
            result.append(ClassifiedToken(token, TokenKind.FLAG))
            continue
        result.append(ClassifiedToken(token, TokenKind.TEXT))

    return result


def parse_directives(
    raw_message: str,
    *,
    markers: DirectiveMarkers = DEFAULT_MARKERS,
) -> ParseResult:
    """
    Extract variables and flags from a chat message.

    `.alert 10:00 review details -urgent` yields the clean message
    `review details`, the variables `{"alert": "10:00"}` and the flags
    `["-urgent"]`. Removed tokens leave empty slots behind, so the clean
    message is only trimmed at its ends and may contain runs of spaces.
    """
    variables: Final[dict[str, str]] = {}
    flags: Final[list[str]] = []
    emitted: Final[list[str]] = []
    pending_variable_name: str | None = None

    for token in classify_tokens(raw_message, markers=markers):
        match token.kind:
            case TokenKind.VARIABLE_NAME:
                pending_variable_name = token.text.removeprefix(markers.variable)
                emitted.append("")
            case TokenKind.VARIABLE_VALUE:
                assert pending_variable_name is not None
                variables[pending_variable_name] = token.text  # Last write wins.
                pending_variable_name = None
                emitted.append("")
            case TokenKind.FLAG:
                flags.append(token.text)
                emitted.append("")
            case TokenKind.TEXT:
                emitted.append(token.text)

    return ParseResult(
        clean_message=TOKEN_SEPARATOR.join(emitted).strip(TOKEN_SEPARATOR),
        variables=variables,
        flags=flags,
    )
