import re
from typing import Final
from typing import Optional

_WHITESPACE_RUN_RE: Final = re.compile(r"\s+")

_ELLIPSIS: Final = ".."


def normalize_whitespace(text: str) -> str:
    """Collapse runs of whitespace into single spaces and trim the ends."""
    return _WHITESPACE_RUN_RE.sub(" ", text).strip()


def truncate_text(text: Optional[str], max_length: int) -> str:
    if not text:
        return ""
    cleaned: Final = normalize_whitespace(text)
    if len(cleaned) <= max_length:
        return cleaned
    return cleaned[: max(max_length - len(_ELLIPSIS), 0)] + _ELLIPSIS
