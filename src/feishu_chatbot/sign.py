"""Webhook request signing."""

from __future__ import annotations

import base64
import hashlib
import hmac


def sign(secret: str, timestamp: str | int) -> str:
    """Generate the base64 HMAC-SHA256 signature for a webhook request.

    The key is ``timestamp + "\\n" + secret`` and the signed message is empty,
    which is what the receiving service verifies against.
    """
    signing_key = f"{timestamp}\n{secret}"
    digest = hmac.new(signing_key.encode("utf-8"), b"", hashlib.sha256).digest()
    return base64.b64encode(digest).decode("utf-8")
