"""Chat-completions client.

Sends one synchronous POST to the configured OpenAI-compatible endpoint and
classifies the outcome into the LLMError hierarchy.
"""

import logging
from typing import Optional

import requests
from pydantic import ValidationError

from gitie.config import ResolvedConfig
from gitie.llm.exceptions import (
    AIRequestError,
    APIResponseError,
    EmptyMessageError,
    NoChoiceError,
    ResponseParseError,
)
from gitie.llm.models import ChatMessage, ChatRequest, ChatResponse
from gitie.llm.parsing import clean_ai_output

logger = logging.getLogger(__name__)

UNREADABLE_BODY = "<unreadable response body>"


def build_request(
    system_prompt: str,
    user_content: str,
    config: ResolvedConfig,
    temperature: Optional[float] = None,
    max_tokens: Optional[int] = None,
) -> ChatRequest:
    """Build a two-message (system, user) non-streaming request."""
    return ChatRequest(
        model=config.model_name,
        messages=[
            ChatMessage(role="system", content=system_prompt),
            ChatMessage(role="user", content=user_content),
        ],
        temperature=config.temperature if temperature is None else temperature,
        stream=False,
        max_tokens=max_tokens,
    )


def _build_headers(api_key: Optional[str]) -> dict[str, str]:
    headers = {"Content-Type": "application/json"}
    if api_key:
        headers["Authorization"] = f"Bearer {api_key}"
    return headers


def _read_body(response: requests.Response) -> str:
    try:
        return response.text
    except (requests.RequestException, UnicodeDecodeError, LookupError):
        return UNREADABLE_BODY


def complete(
    system_prompt: str,
    user_content: str,
    config: ResolvedConfig,
    temperature: Optional[float] = None,
    max_tokens: Optional[int] = None,
) -> str:
    """Run one chat completion and return the cleaned reply.

    Args:
        system_prompt: Content of the system message.
        user_content: Content of the user message.
        config: Resolved configuration (endpoint, model, key, timeout).
        temperature: Overrides config.temperature when given.
        max_tokens: Length budget; omitted from the request when None.

    Returns:
        The first choice's content with scaffolding removed.

    Raises:
        AIRequestError: Connection failure or timeout.
        APIResponseError: Status outside 200-299.
        ResponseParseError: Body is not a chat-completion document.
        NoChoiceError: choices is empty.
        EmptyMessageError: The reply is blank before or after cleaning.
    """
    request = build_request(system_prompt, user_content, config, temperature, max_tokens)
    logger.debug(
        "POST %s model=%s temperature=%s user_chars=%d",
        config.api_url,
        request.model,
        request.temperature,
        len(user_content),
    )

    try:
        response = requests.post(
            config.api_url,
            json=request.to_payload(),
            headers=_build_headers(config.api_key),
            timeout=config.request_timeout,
        )
    except requests.RequestException as e:
        logger.error("AI request failed during send: %s", e)
        raise AIRequestError(config.api_url, e)

    if not 200 <= response.status_code < 300:
        body = _read_body(response)
        logger.error("AI API returned status %s", response.status_code)
        raise APIResponseError(response.status_code, body)

    try:
        parsed = ChatResponse.model_validate(response.json())
    except (ValueError, ValidationError) as e:
        # requests raises a ValueError subclass for non-JSON bodies
        raise ResponseParseError(e)

    if not parsed.choices:
        raise NoChoiceError()

    choice = parsed.choices[0]
    content = choice.message.content or ""
    if not content.strip():
        raise EmptyMessageError()

    if parsed.usage:
        logger.debug(
            "finish_reason=%s prompt_tokens=%s completion_tokens=%s",
            choice.finish_reason,
            parsed.usage.prompt_tokens,
            parsed.usage.completion_tokens,
        )

    cleaned = clean_ai_output(content)
    if not cleaned:
        raise EmptyMessageError()
    return cleaned
