from datetime import UTC
from datetime import datetime
from typing import Final

import pytest
from babel.dates import format_date
from babel.dates import format_time

from assistantbot.config import Config
from assistantbot.llm.prompts import ASSISTANT_SYSTEM_PROMPT
from assistantbot.llm.prompts import Placeholder
from assistantbot.llm.prompts import render_prompt
from assistantbot.llm.prompts import system_message
from assistantbot.types.conversation_message import Role


@pytest.fixture
def config(monkeypatch: pytest.MonkeyPatch) -> Config:
    monkeypatch.setenv("TIMEZONE", "Europe/Berlin")
    monkeypatch.setenv("LOCALE", "en_US")
    return Config()


def test_render_prompt_fills_in_local_date_and_time(config: Config) -> None:
    rendered: Final = render_prompt(
        f"Date: {Placeholder.CURRENT_DATE}, time: {Placeholder.CURRENT_TIME}",
        config,
        now=datetime(2026, 3, 10, 23, 30, tzinfo=UTC),
    )

    local_now: Final = datetime(2026, 3, 11, 0, 30, tzinfo=config.timezone)
    assert rendered == (
        f"Date: {format_date(local_now.date(), locale='en_US')}, "
        + f"time: {format_time(local_now, tzinfo=config.timezone, locale='en_US')}"
    )
    assert rendered.startswith("Date: Mar 11, 2026, time: 12:30:00")


def test_render_prompt_leaves_other_text_alone(config: Config) -> None:
    assert render_prompt("No placeholders {HERE}", config) == "No placeholders {HERE}"


def test_system_message_contains_no_placeholders(config: Config) -> None:
    message: Final = system_message(ASSISTANT_SYSTEM_PROMPT, config)

    assert message.role == Role.SYSTEM
    assert all(placeholder not in message.content for placeholder in Placeholder)
