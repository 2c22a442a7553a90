"""feishu_chatbot exception types."""

from __future__ import annotations


class ChatBotError(Exception):
    """Base error for the chat bot client."""

    def __init__(self, code: str, message: str) -> None:
        super().__init__(message)
        self.code = code

    def __str__(self) -> str:
        return f"{self.code}: {super().__str__()}"


class ChatBotErrorCodes:
    """Error code constants for ChatBotError."""

    CONFIG: str = "CONFIG_ERROR"


class ConfigError(ChatBotError):
    """Invalid client configuration."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ChatBotErrorCodes.CONFIG, message=message)
