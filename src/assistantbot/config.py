import os
from typing import Final
from typing import Optional
from typing import final
from zoneinfo import ZoneInfo
from zoneinfo import ZoneInfoNotFoundError

from dotenv import load_dotenv

from assistantbot.directives.markers import DEFAULT_MARKERS
from assistantbot.directives.markers import DirectiveMarkers

load_dotenv()


def get_environment_variable_or_default(
    key: str,
    default: str | None,
) -> str | None:
    value = os.getenv(key)
    if value is None or not value.strip():
        return default
    return value.strip()


def _get_string_or_default(key: str, default: str) -> str:
    value: Final = get_environment_variable_or_default(key, default)
    assert value is not None
    return value


def _get_number_or_default[T: (int, float)](key: str, default: T, number_type: type[T]) -> T:
    raw: Final = get_environment_variable_or_default(key, None)
    if raw is None:
        return default
    try:
        value: Final = number_type(raw)
    except ValueError as e:
        raise ValueError(f"Environment variable '{key}' must be a number, got '{raw}'.") from e
    if value <= 0:
        raise ValueError(f"Environment variable '{key}' must be positive, got '{raw}'.")
    return value


@final
class Config:
    DEFAULT_LLM_BASE_URL = "https://api.openai.com/v1"
    DEFAULT_LLM_MODEL = "gpt-4o-mini"

    def __init__(self) -> None:
        self._markers: Optional[DirectiveMarkers] = None
        self._skip_ai_prefix: Optional[str] = None
        self._timezone: Optional[ZoneInfo] = None
        self._locale: Optional[str] = None
        self._llm_api_key: Optional[str] = None
        self._llm_base_url: Optional[str] = None
        self._llm_model: Optional[str] = None
        self._llm_timeout: Optional[float] = None
        self._history_max_messages: Optional[int] = None
        self._history_ttl: Optional[float] = None
        self.reload()

    def reload(self) -> None:
        load_dotenv()
        self._markers = DirectiveMarkers.create(
            variable=_get_string_or_default("VARIABLE_MARKER", DEFAULT_MARKERS.variable),
            flag=_get_string_or_default("FLAG_MARKER", DEFAULT_MARKERS.flag),
        )
        self._skip_ai_prefix = _get_string_or_default("SKIP_AI_PREFIX", "+")
        timezone_name: Final = _get_string_or_default("TIMEZONE", "UTC")
        try:
            self._timezone = ZoneInfo(timezone_name)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone: '{timezone_name}'.") from e
        self._locale = _get_string_or_default("LOCALE", "en_US")
        self._llm_api_key = get_environment_variable_or_default("LLM_API_KEY", None)
        self._llm_base_url = _get_string_or_default("LLM_BASE_URL", Config.DEFAULT_LLM_BASE_URL)
        self._llm_model = _get_string_or_default("LLM_MODEL", Config.DEFAULT_LLM_MODEL)
        self._llm_timeout = _get_number_or_default("LLM_TIMEOUT_SECONDS", 30.0, float)
        self._history_max_messages = _get_number_or_default("HISTORY_MAX_MESSAGES", 20, int)
        self._history_ttl = _get_number_or_default("HISTORY_TTL_SECONDS", 60.0 * 60.0, float)

    @property
    def markers(self) -> DirectiveMarkers:
        if self._markers is None:
            raise AssertionError("Directive markers are not set. This should not happen.")
        return self._markers

    @property
    def skip_ai_prefix(self) -> str:
        if self._skip_ai_prefix is None:
            raise AssertionError("Skip-AI prefix is not set. This should not happen.")
        return self._skip_ai_prefix

    @property
    def timezone(self) -> ZoneInfo:
        if self._timezone is None:
            raise AssertionError("Timezone is not set. This should not happen.")
        return self._timezone

    @property
    def locale(self) -> str:
        if self._locale is None:
            raise AssertionError("Locale is not set. This should not happen.")
        return self._locale

    @property
    def llm_api_key(self) -> Optional[str]:
        return self._llm_api_key

    @property
    def llm_base_url(self) -> str:
        if self._llm_base_url is None:
            raise AssertionError("LLM base URL is not set. This should not happen.")
        return self._llm_base_url

    @property
    def llm_model(self) -> str:
        if self._llm_model is None:
            raise AssertionError("LLM model is not set. This should not happen.")
        return self._llm_model

    @property
    def llm_timeout(self) -> float:
        if self._llm_timeout is None:
            raise AssertionError("LLM timeout is not set. This should not happen.")
        return self._llm_timeout

    @property
    def history_max_messages(self) -> int:
        if self._history_max_messages is None:
            raise AssertionError("History size is not set. This should not happen.")
        return self._history_max_messages

    @property
    def history_ttl(self) -> float:
        if self._history_ttl is None:
            raise AssertionError("History TTL is not set. This should not happen.")
        return self._history_ttl
