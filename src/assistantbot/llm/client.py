import logging
from collections.abc import Sequence
from http import HTTPStatus
from typing import Final
from typing import Optional
from typing import Self
from typing import final

import httpx
from pydantic import ValidationError

from assistantbot.config import Config
from assistantbot.models.chat_completion import ChatCompletionMessageModel
from assistantbot.models.chat_completion import ChatCompletionRequestModel
from assistantbot.models.chat_completion import ChatCompletionResponseModel
from assistantbot.types.conversation_message import ConversationMessage

logger: Final = logging.getLogger(__name__)


@final
class LlmClient:
    """
    Thin wrapper around an OpenAI-compatible `/chat/completions` endpoint.
    Every failure is logged and reported as `None` instead of being raised.
    """

    _DEFAULT_TEMPERATURE = 0.6

    def __init__(
        self,
        *,
        api_key: Optional[str],
        base_url: str,
        model: str,
        timeout: float,
        temperature: float = _DEFAULT_TEMPERATURE,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._api_key: Final = api_key
        self._model: Final = model
        self._temperature: Final = temperature
        self._client: Final = httpx.AsyncClient(base_url=base_url, timeout=timeout, transport=transport)

    @classmethod
    def from_config(cls, config: Config, *, transport: Optional[httpx.AsyncBaseTransport] = None) -> Self:
        return cls(
            api_key=config.llm_api_key,
            base_url=config.llm_base_url,
            model=config.llm_model,
            timeout=config.llm_timeout,
            transport=transport,
        )

    async def chat_completion(
        self,
        messages: Sequence[ConversationMessage],
        *,
        model: Optional[str] = None,
    ) -> Optional[ConversationMessage]:
        if self._api_key is None:
            logger.warning("No LLM API key configured, cannot request a chat completion.")
            return None

        request: Final = ChatCompletionRequestModel(
            model=model or self._model,
            messages=[ChatCompletionMessageModel(role=message.role, content=message.content) for message in messages],
            temperature=self._temperature,
        )
        try:
            response: Final = await self._client.post(
                "/chat/completions",
                json=request.model_dump(mode="json"),
                headers={"Authorization": f"Bearer {self._api_key}"},
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            if e.response.status_code == HTTPStatus.TOO_MANY_REQUESTS:
                logger.error("LLM API rate limit exceeded. Please try again later.")
            else:
                logger.error(f"LLM API responded with status {e.response.status_code}: {e.response.text}")
            return None
        except httpx.HTTPError as e:
            logger.error(f"Failed to reach the LLM API: {e!r}")
            return None

        try:
            completion: Final = ChatCompletionResponseModel.model_validate_json(response.content)
        except ValidationError as e:
            logger.error(f"Unexpected chat completion response: {e}")
            return None
        if not completion.choices:
            logger.error("Chat completion response did not contain any choices.")
            return None

        reply: Final = completion.choices[0].message
        return ConversationMessage(role=reply.role, content=reply.content)

    async def aclose(self) -> None:
        await self._client.aclose()
