"""Group chat bot webhook client."""

from __future__ import annotations

import json
import logging
import time
from typing import Any

from .config import ChatBotConfig
from .exceptions import ConfigError
from .models import (
    Envelope,
    ImageMessage,
    InteractiveMessage,
    Message,
    RichTextMessage,
    ShareChatMessage,
    SignedEnvelope,
    TextMessage,
    UnsignedEnvelope,
)
from .sign import sign
from .transport import HttpTransport, HttpxTransport

logger = logging.getLogger(__name__)

_HEADERS = {"Content-Type": "application/json"}


class ChatBot:
    """Sends messages to a group chat through a custom bot webhook.

    Every coroutine returns whatever the transport returns, and transport
    errors are raised unchanged.
    """

    def __init__(self, config: ChatBotConfig | None) -> None:
        if config is None or not isinstance(config.webhook, str) or not config.webhook:
            raise ConfigError("webhook is required")
        self._config = config
        self._webhook: str = config.webhook
        self._http_client: HttpTransport = config.http_client or HttpxTransport(
            timeout_seconds=config.timeout_seconds
        )

    @classmethod
    def create(
        cls,
        webhook: str | None = None,
        secret: str | None = None,
        http_client: HttpTransport | None = None,
    ) -> ChatBot:
        """Build a client straight from a webhook URL."""
        return cls(ChatBotConfig(webhook=webhook, secret=secret, http_client=http_client))

    @property
    def webhook(self) -> str:
        return self._webhook

    @property
    def http_client(self) -> HttpTransport:
        """The transport requests are sent through."""
        return self._http_client

    def _envelope(self, content: Message | dict[str, Any]) -> Envelope:
        secret = self._config.secret
        if not secret:
            return UnsignedEnvelope(message=content)
        timestamp = int(time.time() * 1000)
        return SignedEnvelope(
            message=content,
            timestamp=timestamp,
            sign=sign(secret, str(timestamp)),
        )

    async def send(self, content: Message | dict[str, Any]) -> Any:
        """Post a message to the webhook.

        Args:
            content: a message model, or a raw message dict which is sent
                under the ``content`` key as is

        Returns:
            The transport's result, unmodified.
        """
        envelope = self._envelope(content)
        msg_type = content.get("msg_type") if isinstance(content, dict) else str(content.msg_type)
        logger.debug(
            "Sending chat bot message",
            extra={"msg_type": msg_type, "signed": isinstance(envelope, SignedEnvelope)},
        )
        return await self._http_client.request(
            self._webhook,
            method="POST",
            headers=dict(_HEADERS),
            data=json.dumps(envelope.to_dict(), ensure_ascii=False),
        )

    async def text(self, content: str) -> Any:
        """Send a plain text message."""
        return await self.send(TextMessage(text=content))

    async def rich_text(self, post: dict[str, Any]) -> Any:
        """Send a rich text message.

        ``post`` maps a locale to ``{"title": str, "content": list}``.
        """
        return await self.send(RichTextMessage(post=post))

    async def share_chat(self, share_chat_id: str) -> Any:
        """Send a shared group chat card."""
        return await self.send(ShareChatMessage(share_chat_id=share_chat_id))

    async def image(self, image_key: str) -> Any:
        """Send an image; ``image_key`` comes from the image upload API."""
        return await self.send(ImageMessage(image_key=image_key))

    async def interactive(self, card: dict[str, Any]) -> Any:
        """Send an interactive message card."""
        return await self.send(InteractiveMessage(card=card))
