"""Canonical content that the UserSig signature is computed over.

The validator rebuilds this text independently, so the field order, the
integer formatting and the trailing newline on every line are part of the
protocol::

    TLS.identifier:<identifier>
    TLS.sdkappid:<sdk_app_id>
    TLS.time:<issued_at>
    TLS.expire:<expire>
    TLS.userbuf:<base64 userbuf>     (only when a userbuf was supplied)
"""

from __future__ import annotations

from typing import List, Optional, Tuple


def content_fields(
    sdk_app_id: int,
    identifier: str,
    issued_at: int,
    expire: int,
    base64_userbuf: Optional[str] = None,
) -> List[Tuple[str, str]]:
    """Return the signed fields as ordered ``(key, value)`` pairs."""
    fields = [
        ("TLS.identifier", identifier),
        ("TLS.sdkappid", str(sdk_app_id)),
        ("TLS.time", str(issued_at)),
        ("TLS.expire", str(expire)),
    ]
    if base64_userbuf is not None:
        fields.append(("TLS.userbuf", base64_userbuf))
    return fields


def build_content(
    sdk_app_id: int,
    identifier: str,
    issued_at: int,
    expire: int,
    base64_userbuf: Optional[str] = None,
) -> str:
    fields = content_fields(sdk_app_id, identifier, issued_at, expire, base64_userbuf)
    return "".join(f"{k}:{v}\n" for k, v in fields)
