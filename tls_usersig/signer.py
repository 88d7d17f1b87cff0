"""HMAC-SHA256 signature over the canonical content."""

from __future__ import annotations

import base64
import hashlib
import hmac
import logging
from typing import Optional

from tls_usersig.content import build_content
from tls_usersig.credential import SignerConfig

logger = logging.getLogger(__name__)


def hmac_sha256(key: bytes, content: str) -> str:
    """Sign ``content`` with ``key`` and return the digest as standard base64.

    This inner encoding keeps the ordinary ``+``/``/`` alphabet and padding.
    """
    digest = hmac.new(key, content.encode("utf-8"), hashlib.sha256).digest()
    return base64.b64encode(digest).decode("ascii")


def sign_content(
    config: SignerConfig,
    identifier: str,
    issued_at: int,
    expire: int,
    base64_userbuf: Optional[str] = None,
) -> str:
    content = build_content(config.sdk_app_id, identifier, issued_at, expire, base64_userbuf)
    logger.debug("raw content to be signed: %r", content)
    return hmac_sha256(config.key_bytes, content)
