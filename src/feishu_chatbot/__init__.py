"""Feishu group chat bot webhook client library."""

from .client import ChatBot
from .config import ChatBotConfig
from .exceptions import ChatBotError, ChatBotErrorCodes, ConfigError
from .models import (
    ImageMessage,
    InteractiveMessage,
    Message,
    MsgType,
    RichTextMessage,
    ShareChatMessage,
    SignedEnvelope,
    TextMessage,
    UnsignedEnvelope,
)
from .sign import sign
from .transport import HttpTransport, HttpxTransport, InMemoryTransport, SentRequest

__all__ = [
    "ChatBot",
    "ChatBotConfig",
    "ChatBotError",
    "ChatBotErrorCodes",
    "ConfigError",
    "HttpTransport",
    "HttpxTransport",
    "ImageMessage",
    "InMemoryTransport",
    "InteractiveMessage",
    "Message",
    "MsgType",
    "RichTextMessage",
    "SentRequest",
    "ShareChatMessage",
    "SignedEnvelope",
    "TextMessage",
    "UnsignedEnvelope",
    "sign",
]
