from typing import Final

import pytest

from assistantbot.directives.assistant_message import AssistantMessage
from assistantbot.directives.assistant_message import EmptyMessageError
from assistantbot.directives.constants import AssistantFlag
from assistantbot.directives.constants import AssistantVariable
from assistantbot.directives.markers import DirectiveMarkers


def test_alert_takes_a_single_word_value() -> None:
    message: Final = AssistantMessage.from_text(".alert 10:00 review details")

    assert message == AssistantMessage(
        clean_message="review details",
        variable=AssistantVariable.ALERT,
        value="10:00",
        flags={},
    )


@pytest.mark.parametrize(
    ("text", "expected_variable"),
    [
        (".a 5m stretch", AssistantVariable.ALERT),
        (".t buy milk", AssistantVariable.TASK),
        (".n idea", AssistantVariable.NOTE),
        (".lk example.com", AssistantVariable.LINK),
        (".q why", AssistantVariable.QUESTION),
        (".question why", AssistantVariable.QUESTION),
    ],
)
def test_variable_aliases_are_resolved(text: str, expected_variable: AssistantVariable) -> None:
    assert AssistantMessage.from_text(text).variable == expected_variable


def test_task_collects_many_words_and_flag_values() -> None:
    message: Final = AssistantMessage.from_text(".task buy milk and eggs -d from the corner shop -tag home")

    assert message.variable == AssistantVariable.TASK
    assert message.value == "buy milk and eggs"
    assert message.flags == {
        AssistantFlag.DESCRIPTION: "from the corner shop",
        AssistantFlag.TAG: "home",
    }
    assert message.clean_message == ""


def test_list_flag_uses_its_default_value() -> None:
    message: Final = AssistantMessage.from_text(".t -l")

    assert message.variable == AssistantVariable.TASK
    assert message.value == ""
    assert message.flags == {AssistantFlag.LIST: True}


def test_list_tag_flag_collects_the_tag() -> None:
    message: Final = AssistantMessage.from_text(".note -lt work")

    assert message.flags == {AssistantFlag.LIST_TAG: "work"}
    assert message.flag_text(AssistantFlag.LIST_TAG) == "work"


def test_question_uses_default_value_and_keeps_the_text() -> None:
    message: Final = AssistantMessage.from_text(".q what is the capital of France?")

    assert message.variable == AssistantVariable.QUESTION
    assert message.value is True
    assert message.clean_message == "what is the capital of France?"


def test_flags_not_accepted_by_the_variable_are_dropped() -> None:
    message: Final = AssistantMessage.from_text(".alert 10:00 call mom -tag family")

    assert message.flags == {}
    # The dropped flag does not swallow the words after it.
    assert message.clean_message == "call mom family"


def test_unknown_flags_are_dropped() -> None:
    message: Final = AssistantMessage.from_text(".alert 10:00 call -urgent mom")

    assert message.flags == {}
    assert message.clean_message == "call mom"


def test_unknown_variable_is_kept_as_text() -> None:
    message: Final = AssistantMessage.from_text("see .unknown thing -list")

    assert message.variable is None
    assert message.value is None
    assert message.flags == {}
    assert message.clean_message == "see .unknown thing"


def test_message_without_directives_is_plain_text() -> None:
    message: Final = AssistantMessage.from_text("  how   are you  ")

    assert message == AssistantMessage(clean_message="how are you", variable=None, value=None, flags={})


def test_later_variable_replaces_earlier_one() -> None:
    message: Final = AssistantMessage.from_text(".alert 10:00 .task write report")

    assert message.variable == AssistantVariable.TASK
    assert message.value == "write report"


def test_alert_value_closed_by_flag_is_empty() -> None:
    message: Final = AssistantMessage.from_text(".alert -list")

    assert message.value == ""
    assert message.flags == {AssistantFlag.LIST: True}


def test_flag_text_ignores_boolean_flags() -> None:
    message: Final = AssistantMessage.from_text(".task -list")

    assert message.flag_text(AssistantFlag.LIST) is None
    assert message.flag_text(AssistantFlag.TAG) is None


def test_custom_markers_are_respected() -> None:
    markers: Final = DirectiveMarkers.create(variable="!", flag="#")
    message: Final = AssistantMessage.from_text("!task plan trip #tag travel", markers=markers)

    assert message.variable == AssistantVariable.TASK
    assert message.value == "plan trip"
    assert message.flags == {AssistantFlag.TAG: "travel"}


@pytest.mark.parametrize("text", ["", "   "])
def test_empty_message_is_rejected(text: str) -> None:
    with pytest.raises(EmptyMessageError):
        AssistantMessage.from_text(text)


def test_runs_of_spaces_do_not_leak_into_values() -> None:
    message: Final = AssistantMessage.from_text(".task  buy   milk  -tag  home")

    assert message.value == "buy milk"
    assert message.flags == {AssistantFlag.TAG: "home"}
