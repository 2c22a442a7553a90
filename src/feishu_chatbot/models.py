"""Chat bot message and request envelope models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any


class MsgType(StrEnum):
    """Message types accepted by the bot webhook."""

    TEXT = "text"
    POST = "post"
    SHARE_CHAT = "share_chat"
    IMAGE = "image"
    INTERACTIVE = "interactive"


@dataclass(frozen=True)
class TextMessage:
    """Plain text message."""

    text: str
    msg_type: MsgType = field(default=MsgType.TEXT, init=False)

    def to_dict(self) -> dict[str, Any]:
        return {"msg_type": str(self.msg_type), "content": {"text": self.text}}


@dataclass(frozen=True)
class RichTextMessage:
    """Rich text message.

    ``post`` is keyed by locale, e.g. ``{"zh_cn": {"title": ..., "content": [...]}}``.
    """

    post: dict[str, Any]
    msg_type: MsgType = field(default=MsgType.POST, init=False)

    def to_dict(self) -> dict[str, Any]:
        return {"msg_type": str(self.msg_type), "content": {"post": self.post}}


@dataclass(frozen=True)
class ShareChatMessage:
    """Shared group chat card."""

    share_chat_id: str
    msg_type: MsgType = field(default=MsgType.SHARE_CHAT, init=False)

    def to_dict(self) -> dict[str, Any]:
        return {
            "msg_type": str(self.msg_type),
            "content": {"share_chat_id": self.share_chat_id},
        }


@dataclass(frozen=True)
class ImageMessage:
    """Image message. ``image_key`` comes from the image upload API."""

    image_key: str
    msg_type: MsgType = field(default=MsgType.IMAGE, init=False)

    def to_dict(self) -> dict[str, Any]:
        return {"msg_type": str(self.msg_type), "content": {"image_key": self.image_key}}


@dataclass(frozen=True)
class InteractiveMessage:
    """Interactive message card.

    The card sits beside ``msg_type`` with no ``content`` wrapper, and it is
    placed at the top level of the request body.
    """

    card: dict[str, Any]
    msg_type: MsgType = field(default=MsgType.INTERACTIVE, init=False)

    def to_dict(self) -> dict[str, Any]:
        return {"msg_type": str(self.msg_type), "card": self.card}


Message = TextMessage | RichTextMessage | ShareChatMessage | ImageMessage | InteractiveMessage


def _message_fields(message: Message | dict[str, Any]) -> dict[str, Any]:
    if isinstance(message, InteractiveMessage):
        return message.to_dict()
    if isinstance(message, dict):
        return {"content": message}
    return {"content": message.to_dict()}


@dataclass(frozen=True)
class UnsignedEnvelope:
    """Request body for a bot configured without a secret."""

    message: Message | dict[str, Any]

    def to_dict(self) -> dict[str, Any]:
        return _message_fields(self.message)


@dataclass(frozen=True)
class SignedEnvelope:
    """Request body carrying the timestamp and signature."""

    message: Message | dict[str, Any]
    timestamp: int
    sign: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "timestamp": self.timestamp,
            "sign": self.sign,
            **_message_fields(self.message),
        }


Envelope = UnsignedEnvelope | SignedEnvelope
