"""Wire models for the OpenAI-compatible chat-completions protocol."""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict


class ChatMessage(BaseModel):
    """A message sent to the model."""

    role: Literal["system", "user"]
    content: str


class ChatRequest(BaseModel):
    """Request body for POST <api_url>.

    max_tokens is omitted from the payload unless set.
    """

    model: str
    messages: list[ChatMessage]
    temperature: float
    stream: bool = False
    max_tokens: Optional[int] = None

    def to_payload(self) -> dict:
        return self.model_dump(exclude_none=True)


class ResponseMessage(BaseModel):
    """A message returned by the model."""

    model_config = ConfigDict(extra="ignore")

    role: str = "assistant"
    content: Optional[str] = None


class Choice(BaseModel):
    model_config = ConfigDict(extra="ignore")

    message: ResponseMessage
    finish_reason: Optional[str] = None


class Usage(BaseModel):
    model_config = ConfigDict(extra="allow")

    # Some servers send null counts
    prompt_tokens: Optional[int] = None
    completion_tokens: Optional[int] = None
    total_tokens: Optional[int] = None


class ChatResponse(BaseModel):
    """Parsed chat-completion response.

    An empty choices list is valid at the schema level; callers must treat
    it as an error.
    """

    model_config = ConfigDict(extra="ignore")

    choices: list[Choice]
    usage: Optional[Usage] = None
