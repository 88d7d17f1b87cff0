"""The JSON envelope carried inside a UserSig."""

from __future__ import annotations

import json
from typing import Any, Dict, Optional

from tls_usersig.errors import UserSigError, ERR_DECODE_FAILED

SIG_VERSION = "2.0"

# Field names, parsed by name on the validator side
TLS_VER = "TLS.ver"
TLS_IDENTIFIER = "TLS.identifier"
TLS_SDKAPPID = "TLS.sdkappid"
TLS_EXPIRE = "TLS.expire"
TLS_TIME = "TLS.time"
TLS_USERBUF = "TLS.userbuf"
TLS_SIG = "TLS.sig"


def build_envelope(
    sdk_app_id: int,
    identifier: str,
    issued_at: int,
    expire: int,
    sig: str,
    base64_userbuf: Optional[str] = None,
) -> Dict[str, Any]:
    """Build the envelope dict.

    ``TLS.userbuf`` is only present when ``base64_userbuf`` is not None; an
    empty payload still produces the key with an empty string value.
    """
    envelope: Dict[str, Any] = {
        TLS_VER: SIG_VERSION,
        TLS_IDENTIFIER: identifier,
        TLS_SDKAPPID: sdk_app_id,
        TLS_EXPIRE: expire,
        TLS_TIME: issued_at,
    }
    if base64_userbuf is not None:
        envelope[TLS_USERBUF] = base64_userbuf
    envelope[TLS_SIG] = sig
    return envelope


def serialize_envelope(envelope: Dict[str, Any]) -> bytes:
    """Compact JSON, keys in insertion order."""
    return json.dumps(envelope, separators=(",", ":"), ensure_ascii=False).encode("utf-8")


def parse_envelope(data: bytes) -> Dict[str, Any]:
    try:
        envelope = json.loads(data.decode("utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise UserSigError(ERR_DECODE_FAILED, "unmarshal envelope failed: {}".format(e))

    if not isinstance(envelope, dict):
        raise UserSigError(ERR_DECODE_FAILED, "envelope is not a JSON object")
    for name in (TLS_VER, TLS_IDENTIFIER, TLS_SDKAPPID, TLS_EXPIRE, TLS_TIME, TLS_SIG):
        if name not in envelope:
            raise UserSigError(ERR_DECODE_FAILED, "envelope missing {}".format(name))
    return envelope
