"""Chat bot client configuration."""

from __future__ import annotations

from dataclasses import dataclass

from .exceptions import ConfigError
from .transport import HttpTransport


@dataclass(frozen=True)
class ChatBotConfig:
    """Configuration for ChatBot.

    webhook: full webhook URL of the bot (required)
    secret: signing secret; requests are unsigned when empty
    http_client: transport to use; HttpxTransport when omitted
    timeout_seconds: timeout for the default transport
    """

    webhook: str | None = None
    secret: str | None = None
    http_client: HttpTransport | None = None
    timeout_seconds: float = 10.0

    def __post_init__(self) -> None:
        if not isinstance(self.webhook, str) or not self.webhook:
            raise ConfigError("webhook is required")
