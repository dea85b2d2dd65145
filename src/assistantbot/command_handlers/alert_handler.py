import logging
from datetime import datetime
from typing import Final
from typing import Optional
from typing import final
from typing import override

from assistantbot.app_state import AppState
from assistantbot.command_handlers.command_handler import CommandHandler
from assistantbot.command_handlers.utils import format_item_list
from assistantbot.command_handlers.utils import respond
from assistantbot.directives.assistant_message import AssistantMessage
from assistantbot.directives.constants import AssistantFlag
from assistantbot.directives.constants import AssistantVariable
from assistantbot.types.chat_message import ChatMessage
from assistantbot.types.chat_response import ChatResponse
from assistantbot.types.directive_error import DirectiveError
from assistantbot.types.items import Alert
from assistantbot.utils.dates import InvalidTimeExpressionError
from assistantbot.utils.dates import format_datetime_to_text
from assistantbot.utils.dates import parse_time_expression

logger: Final = logging.getLogger(__name__)


@final
class AlertHandler(CommandHandler):
    def __init__(self, app_state: AppState) -> None:
        super().__init__(app_state, variable=AssistantVariable.ALERT)

    @override
    async def handle_directive(
        self,
        message: AssistantMessage,
        chat_message: ChatMessage,
    ) -> Optional[list[ChatResponse]]:
        store: Final = self._app_state.item_store
        if message.flags.get(AssistantFlag.LIST):
            return respond(
                format_item_list(
                    store.get_alerts(chat_message.sender_name),
                    self._format_alert,
                    empty_text="You have no alerts.",
                ),
                chat_message,
            )

        if not isinstance(message.value, str) or not message.value or not message.clean_message:
            return None

        config: Final = self._app_state.config
        try:
            due: Final = parse_time_expression(
                message.value,
                now=datetime.now(config.timezone),
                timezone=config.timezone,
            )
        except InvalidTimeExpressionError as e:
            raise DirectiveError(f"I couldn't create the alert: {e}") from e

        alert: Final = store.add_alert(chat_message.sender_name, message=message.clean_message, due=due)
        logger.info(f"Created alert #{alert.id} for {chat_message.sender_name} due {alert.due.isoformat()}")
        return respond(f"Alert created for {self._format_due(alert.due)} with id #{alert.id}.", chat_message)

    def _format_due(self, due: datetime) -> str:
        return format_datetime_to_text(
            due,
            locale=self._app_state.config.locale,
            timezone=self._app_state.config.timezone,
        )

    def _format_alert(self, alert: Alert) -> str:
        return f"#{alert.id} - *{alert.message}*: {self._format_due(alert.due)}"

    @property
    @override
    def usage(self) -> str:
        return f"{self._variable_marker()} <time> <message> | {self._variable_marker()} {self._flag_marker('list')}"

    @property
    @override
    def description(self) -> str:
        return "Create an alert (time as `18:30`, `2026-03-01T08:15` or `1d2h30m`) or list your alerts."
