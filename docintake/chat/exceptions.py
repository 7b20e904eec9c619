class ChatError(Exception):
    """Raised when the chat assistant cannot get a reply."""


class ChatNetworkError(ChatError):
    """Raised when the inference endpoint call fails due to network/infrastructure issues."""


class ChatResponseError(ChatError):
    """Raised when the inference endpoint returns something that is not usable."""
