import re
from typing import Final
from urllib.parse import unquote
from urllib.parse import urlparse

from urlextract import URLExtract  # type: ignore[reportMissingTypeStubs]

_FILE_EXTENSION_RE: Final = re.compile(r"\.\w+$")
_SLUG_SEPARATORS_RE: Final = re.compile(r"[-_]")


def find_urls(text: str) -> list[str]:
    """
    Returns all URLs found in the given text, in order of appearance.
    """
    extractor: Final = URLExtract()
    urls: Final = extractor.find_urls(text, with_schema_only=False)
    result: Final[list[str]] = []
    for url in urls:
        if not isinstance(url, str):
            raise TypeError(f"Expected string URL, got {type(url)}")
        result.append(url)
    return result


def extract_title_from_url(url: str) -> str:
    """
    Builds a human-readable title like `example.com - docs/getting started`
    from a URL. Falls back to the unchanged input if it is not a valid
    absolute URL.
    """
    try:
        parsed: Final = urlparse(url)
        hostname: Final = parsed.hostname
        if not parsed.scheme or hostname is None:
            return url

        host: Final = hostname.removeprefix("www.")
        segments: Final = [
            _FILE_EXTENSION_RE.sub("", _SLUG_SEPARATORS_RE.sub(" ", unquote(segment, errors="strict")))
            for segment in parsed.path.split("/")
            if segment
        ]
    except ValueError:  # Includes `UnicodeDecodeError` for broken percent-encodings.
        return url

    cleaned_segments: Final = [segment for segment in segments if len(segment.strip()) > 1]
    if not cleaned_segments:
        return host
    return f"{host} - {'/'.join(cleaned_segments)}"
