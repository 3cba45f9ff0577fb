"""LLM-related exception classes.

Contains all exception classes for AI backend operations:
- LLMError: Base exception for LLM-related errors
- AIRequestError: The request could not be sent or timed out
- APIResponseError: The backend answered with a non-2xx status
- ResponseParseError: A 2xx body did not match the chat-completion schema
- NoChoiceError: The response contained no choices
- EmptyMessageError: The first choice carried no usable text
"""


class LLMError(Exception):
    """Base exception for LLM-related errors."""

    pass


class AIRequestError(LLMError):
    """Raised when the request fails at the transport level."""

    def __init__(self, url: str, reason: object):
        self.url = url
        self.reason = reason
        super().__init__(f"AI API request to {url} failed: {reason}")


class APIResponseError(LLMError):
    """Raised when the backend answers with a status outside 200-299."""

    def __init__(self, status: int, body: str):
        self.status = status
        self.body = body
        super().__init__(f"AI API responded with error {status}: {body}")


class ResponseParseError(LLMError):
    """Raised when the response body cannot be parsed as a chat completion."""

    def __init__(self, reason: object):
        self.reason = reason
        super().__init__(f"Failed to parse AI API JSON response: {reason}")


class NoChoiceError(LLMError):
    """Raised when the response has an empty choices list."""

    def __init__(self):
        super().__init__("AI API response contained no choices.")


class EmptyMessageError(LLMError):
    """Raised when the model returned no text."""

    def __init__(self):
        super().__init__("AI returned an empty message.")
