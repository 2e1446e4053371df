"""Request signing for webhooks with secret verification enabled.

The receiving side recomputes the signature as
``base64(hmac_sha256(key=f"{timestamp}\\n{secret}", msg=b""))`` and compares
it with the ``sign`` field, so the key layout and the empty message must not
change.
"""

from __future__ import annotations

import base64
import hashlib
import hmac

from notifier.errors import SignError


def gen_sign(secret: str, timestamp: int) -> str:
    string_to_sign = f"{timestamp}\n{secret}"
    try:
        digest = hmac.new(string_to_sign.encode("utf-8"), b"", hashlib.sha256).digest()
    except (TypeError, ValueError) as e:
        raise SignError(f"sign generation failed: {e}") from e
    return base64.b64encode(digest).decode("utf-8")


def sign(secret: str, timestamp: int) -> tuple[str, str] | None:
    """Return ``(timestamp, signature)`` or None when no secret is configured."""
    if not secret:
        return None
    return str(timestamp), gen_sign(secret, timestamp)
