from typing import Final
from zoneinfo import ZoneInfo

import pytest

from assistantbot.config import Config
from assistantbot.directives.markers import DirectiveMarkers
from assistantbot.directives.markers import InvalidMarkersError

_VARIABLES: Final = (
    "VARIABLE_MARKER",
    "FLAG_MARKER",
    "SKIP_AI_PREFIX",
    "TIMEZONE",
    "LOCALE",
    "LLM_API_KEY",
    "LLM_BASE_URL",
    "LLM_MODEL",
    "LLM_TIMEOUT_SECONDS",
    "HISTORY_MAX_MESSAGES",
    "HISTORY_TTL_SECONDS",
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    # `load_dotenv()` never overrides variables that are already set.
    for name in _VARIABLES:
        monkeypatch.setenv(name, "")


def test_defaults() -> None:
    config: Final = Config()

    assert config.markers == DirectiveMarkers(variable=".", flag="-")
    assert config.skip_ai_prefix == "+"
    assert config.timezone == ZoneInfo("UTC")
    assert config.locale == "en_US"
    assert config.llm_api_key is None
    assert config.llm_base_url == Config.DEFAULT_LLM_BASE_URL
    assert config.llm_model == Config.DEFAULT_LLM_MODEL
    assert config.llm_timeout == 30.0
    assert config.history_max_messages == 20
    assert config.history_ttl == 3600.0


def test_values_are_read_from_the_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("VARIABLE_MARKER", "!")
    monkeypatch.setenv("FLAG_MARKER", "#")
    monkeypatch.setenv("TIMEZONE", "Europe/Berlin")
    monkeypatch.setenv("LLM_API_KEY", "  secret  ")
    monkeypatch.setenv("HISTORY_MAX_MESSAGES", "5")
    monkeypatch.setenv("LLM_TIMEOUT_SECONDS", "2.5")

    config: Final = Config()

    assert config.markers == DirectiveMarkers(variable="!", flag="#")
    assert config.timezone == ZoneInfo("Europe/Berlin")
    assert config.llm_api_key == "secret"
    assert config.history_max_messages == 5
    assert config.llm_timeout == 2.5


def test_reload_picks_up_changes(monkeypatch: pytest.MonkeyPatch) -> None:
    config: Final = Config()
    monkeypatch.setenv("SKIP_AI_PREFIX", "~")
    config.reload()

    assert config.skip_ai_prefix == "~"


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("TIMEZONE", "Mars/Olympus_Mons"),
        ("HISTORY_MAX_MESSAGES", "many"),
        ("HISTORY_MAX_MESSAGES", "0"),
        ("LLM_TIMEOUT_SECONDS", "-1"),
    ],
)
def test_invalid_values_are_rejected(monkeypatch: pytest.MonkeyPatch, name: str, value: str) -> None:
    monkeypatch.setenv(name, value)

    with pytest.raises(ValueError):
        Config()


def test_ambiguous_markers_are_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("VARIABLE_MARKER", "-")

    with pytest.raises(InvalidMarkersError):
        Config()
