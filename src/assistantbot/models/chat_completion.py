from typing import final

from pydantic import BaseModel
from pydantic import ConfigDict

from assistantbot.types.conversation_message import Role


@final
class ChatCompletionMessageModel(BaseModel):
    model_config = ConfigDict(extra="ignore")

    role: Role
    content: str


@final
class ChatCompletionRequestModel(BaseModel):
    model: str
    messages: list[ChatCompletionMessageModel]
    temperature: float


@final
class ChatCompletionChoiceModel(BaseModel):
    model_config = ConfigDict(extra="ignore")

    message: ChatCompletionMessageModel


@final
class ChatCompletionResponseModel(BaseModel):
    model_config = ConfigDict(extra="ignore")

    choices: list[ChatCompletionChoiceModel]
