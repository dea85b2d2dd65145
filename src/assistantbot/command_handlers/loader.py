import logging

from assistantbot.app_state import AppState
from assistantbot.command_handlers.alert_handler import AlertHandler
from assistantbot.command_handlers.command_handler import CommandHandler
from assistantbot.command_handlers.link_handler import LinkHandler
from assistantbot.command_handlers.note_handler import NoteHandler
from assistantbot.command_handlers.question_handler import QuestionHandler
from assistantbot.command_handlers.task_handler import TaskHandler
from assistantbot.directives.constants import AssistantVariable


def load_command_handlers(app_state: AppState) -> dict[AssistantVariable, CommandHandler]:
    result: dict[AssistantVariable, CommandHandler] = {
        AssistantVariable.ALERT: AlertHandler(app_state),
        AssistantVariable.TASK: TaskHandler(app_state),
        AssistantVariable.NOTE: NoteHandler(app_state),
        AssistantVariable.LINK: LinkHandler(app_state),
        AssistantVariable.QUESTION: QuestionHandler(app_state),
    }
    for variable, handler in result.items():
        logging.info(f"Loaded handler for '{variable}': {handler.usage}")
    return result
