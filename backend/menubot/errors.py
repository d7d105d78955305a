"""
Error types shared by the relay and the chat client.
"""


class RelayError(Exception):
    """A relay failure mapped to an HTTP status and a user-facing message."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message

    def __repr__(self) -> str:
        return f"RelayError(status_code={self.status_code}, message={self.message!r})"


class ChatError(Exception):
    """Raised by the relay client; the message is shown in the chat."""

    def __init__(self, message: str, status_code: int = 0):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ConversationBusyError(RuntimeError):
    """A message was sent while the previous one is still awaiting a reply."""
