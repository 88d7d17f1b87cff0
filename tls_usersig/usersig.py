"""UserSig generation.

Usage::

    config = SignerConfig(sdk_app_id, secret_key)
    user_sig = generate_token(config, "user-001", 86400)

The token is the sig envelope serialized as JSON, zlib-compressed and
encoded with the URL-safe base64 variant from :mod:`tls_usersig.b64_url_safe`.
"""

from __future__ import annotations

import base64
import datetime
import hmac
import logging
import time
import zlib
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from tls_usersig import b64_url_safe
from tls_usersig.credential import SignerConfig
from tls_usersig.envelope import (
    TLS_EXPIRE,
    TLS_IDENTIFIER,
    TLS_SDKAPPID,
    TLS_SIG,
    TLS_TIME,
    TLS_USERBUF,
    build_envelope,
    parse_envelope,
    serialize_envelope,
)
from tls_usersig.errors import (
    UserSigError,
    ERR_DECODE_FAILED,
    ERR_ENCODE_FAILED,
    ERR_INVALID_PARAM,
)
from tls_usersig.signer import sign_content

logger = logging.getLogger(__name__)

DEFAULT_EXPIRE = 86400 * 180  # 180 days in seconds

Expire = Union[int, datetime.timedelta]
Userbuf = Union[bytes, str]



def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class Timestamps:
    """Issue time and validity, both in whole seconds."""

    issued_at: int
    expire: int

    def __post_init__(self) -> None:
        if not _is_int(self.issued_at) or self.issued_at < 0:
            raise UserSigError(ERR_INVALID_PARAM, "issued_at must be a non-negative integer")
        if not _is_int(self.expire) or self.expire <= 0:
            raise UserSigError(ERR_INVALID_PARAM, "expire must be a positive integer")

    @property
    def expires_at(self) -> int:
        return self.issued_at + self.expire


@dataclass(frozen=True)
class SignRequest:
    """One UserSig request: who it is for, how long it lives, what it carries."""

    identifier: str
    expire: Expire = DEFAULT_EXPIRE
    userbuf: Optional[Userbuf] = None

    def __post_init__(self) -> None:
        self.validate()

    @property
    def expire_seconds(self) -> int:
        if isinstance(self.expire, datetime.timedelta):
            return int(self.expire.total_seconds())
        return self.expire

    @property
    def userbuf_bytes(self) -> Optional[bytes]:
        if isinstance(self.userbuf, str):
            return self.userbuf.encode("utf-8")
        return self.userbuf

    def validate(self) -> None:
        if not isinstance(self.identifier, str):
            raise UserSigError(ERR_INVALID_PARAM, "identifier must be a string")
        if "\n" in self.identifier:
            raise UserSigError(ERR_INVALID_PARAM, "identifier must not contain a newline")
        try:
            self.identifier.encode("utf-8")
        except UnicodeEncodeError:
            raise UserSigError(ERR_INVALID_PARAM, "identifier is not valid unicode text")

        if not _is_int(self.expire) and not isinstance(self.expire, datetime.timedelta):
            raise UserSigError(ERR_INVALID_PARAM, "expire must be int seconds or timedelta")
        if self.expire_seconds <= 0:
            raise UserSigError(
                ERR_INVALID_PARAM,
                "expire must be positive, got {}".format(self.expire_seconds),
            )

        if self.userbuf is not None and not isinstance(self.userbuf, (bytes, str)):
            raise UserSigError(ERR_INVALID_PARAM, "userbuf must be bytes or str")


def compress_envelope(envelope: Dict[str, Any]) -> str:
    """Serialize, deflate and URL-safe encode an envelope into the final token."""
    try:
        raw = serialize_envelope(envelope)
        logger.debug("raw sig envelope: %s", raw.decode("utf-8"))
        compressed = zlib.compress(raw)
    except (zlib.error, TypeError, ValueError) as e:
        raise UserSigError(ERR_ENCODE_FAILED, "compress sig envelope failed: {}".format(e))
    return b64_url_safe.encode(compressed)


def _sign_request(config: SignerConfig, req: SignRequest, issued_at: int) -> str:
    ts = Timestamps(issued_at=issued_at, expire=req.expire_seconds)
    logger.debug(
        "generating user sig for %s at %d, expires at %d",
        req.identifier,
        ts.issued_at,
        ts.expires_at,
    )

    base64_userbuf = None
    userbuf_bytes = req.userbuf_bytes
    if userbuf_bytes is not None:
        base64_userbuf = base64.b64encode(userbuf_bytes).decode("ascii")

    sig = sign_content(config, req.identifier, ts.issued_at, ts.expire, base64_userbuf)
    envelope = build_envelope(
        config.sdk_app_id, req.identifier, ts.issued_at, ts.expire, sig, base64_userbuf
    )
    return compress_envelope(envelope)


def generate_token_with_time(
    config: SignerConfig,
    identifier: str,
    issued_at: int,
    expire: Expire = DEFAULT_EXPIRE,
    userbuf: Optional[Userbuf] = None,
) -> str:
    """Generate a UserSig for a fixed issue time.

    Args:
        config: Issuing application ID and secret key.
        identifier: User ID the token is issued for.
        issued_at: Issue time in seconds since the epoch.
        expire: Validity, int seconds or ``timedelta``.
        userbuf: Optional application data bound into the token. ``b""``
            is kept distinct from ``None``.

    Returns:
        The URL-safe UserSig string.
    """
    req = SignRequest(identifier=identifier, expire=expire, userbuf=userbuf)
    return _sign_request(config, req, issued_at)


def generate_token(
    config: SignerConfig,
    identifier: str,
    expire: Expire = DEFAULT_EXPIRE,
    userbuf: Optional[Userbuf] = None,
) -> str:
    """Generate a UserSig issued now. See :func:`generate_token_with_time`."""
    # reject bad input before reading the clock
    req = SignRequest(identifier=identifier, expire=expire, userbuf=userbuf)
    return _sign_request(config, req, int(time.time()))


gen_user_sig = generate_token


def decode_user_sig(user_sig: str) -> Dict[str, Any]:
    """Recover the envelope from a UserSig (inverse of the transport encoding)."""
    if not isinstance(user_sig, str) or not user_sig:
        raise UserSigError(ERR_DECODE_FAILED, "user sig is empty")

    compressed = b64_url_safe.decode(user_sig)
    try:
        raw = zlib.decompress(compressed)
    except zlib.error as e:
        raise UserSigError(ERR_DECODE_FAILED, "inflate user sig failed: {}".format(e))
    return parse_envelope(raw)


def verify_envelope(config: SignerConfig, envelope: Dict[str, Any]) -> bool:
    """Check the envelope's ``TLS.sig`` against a signature recomputed with ``config``.

    Only the signature is checked, not whether the token has expired.
    """
    identifier = envelope.get(TLS_IDENTIFIER)
    sdk_app_id = envelope.get(TLS_SDKAPPID)
    issued_at = envelope.get(TLS_TIME)
    expire = envelope.get(TLS_EXPIRE)
    sig = envelope.get(TLS_SIG)

    if not isinstance(identifier, str) or not isinstance(sig, str):
        return False
    if not all(isinstance(v, int) for v in (sdk_app_id, issued_at, expire)):
        return False
    if sdk_app_id != config.sdk_app_id:
        return False

    try:
        expected = sign_content(
            config, identifier, issued_at, expire, envelope.get(TLS_USERBUF)
        )
        return hmac.compare_digest(expected.encode("ascii"), sig.encode("utf-8"))
    except UnicodeEncodeError:
        return False
